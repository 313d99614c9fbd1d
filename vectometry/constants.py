import math

EPSILON = 1e-9  # tolerance of every geometric predicate (on-line, parallel, tangency, ...)

FULL_TURN = 2 * math.pi
HALF_TURN = math.pi
QUARTER_TURN = math.pi / 2

MERGE_STEP_FACTOR = 2  # merge walk may visit each refined vertex at most this often
