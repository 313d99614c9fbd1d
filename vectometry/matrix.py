"""
Matrix module - a fixed size, column-major numeric grid.

Values are addressed as ``(column, row)``. Internally the grid is a read-only
numpy array of shape ``(columns, rows)``, i.e. the transpose of the usual
row-major mathematical layout; :meth:`Matrix.from_array` and
:meth:`Matrix.to_array` convert from and to that layout.
"""

from collections.abc import Sequence as SequenceABC
from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from vectometry.exceptions import ConstructionError, DimensionMismatchError


class Matrix:
    """Immutable rectangular matrix of floats in column-major order."""

    __slots__ = ("_data",)

    def __init__(self, columns: Sequence[Sequence[float]]):
        """
        Create a matrix from a regular 2D sequence of columns.

        Args:
            columns: ``columns[c][r]`` is the value at column ``c``, row ``r``

        Raises:
            ConstructionError: If the input is empty or ragged, or a column is
                not a sequence
        """
        if len(columns) == 0:
            raise ConstructionError("A matrix needs at least one column")
        if not all(isinstance(column, (SequenceABC, np.ndarray)) for column in columns):
            raise ConstructionError("Every column of a matrix must be a sequence of numbers")
        rows = len(columns[0])
        if rows == 0:
            raise ConstructionError("A matrix needs at least one row")
        for column in columns:
            if len(column) != rows:
                raise ConstructionError("Given array is not regular")
        self._data = self._freeze(np.array(columns, dtype=np.float64))

    @staticmethod
    def _freeze(data: np.ndarray) -> np.ndarray:
        data.flags.writeable = False
        return data

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Matrix":
        """Create a matrix around an already validated (columns, rows) array."""
        obj = object.__new__(cls)
        obj._data = cls._freeze(np.array(data, dtype=np.float64))
        return obj

    # ========== Factories ==========

    @classmethod
    def from_values(cls, columns: int, rows: int, values: Sequence[float]) -> "Matrix":
        """Create a matrix from a flat sequence of values in column-major order."""
        if columns <= 0 or rows <= 0:
            raise ConstructionError(f"Invalid matrix dimensions {columns}x{rows}")
        if len(values) != columns * rows:
            raise ConstructionError(
                f"{len(values)} values do not fit into a {columns}x{rows} matrix"
            )
        return cls._wrap(np.asarray(values, dtype=np.float64).reshape(columns, rows))

    @classmethod
    def zeros(cls, columns: int, rows: int) -> "Matrix":
        if columns <= 0 or rows <= 0:
            raise ConstructionError(f"Invalid matrix dimensions {columns}x{rows}")
        return cls._wrap(np.zeros((columns, rows)))

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        if n <= 0:
            raise ConstructionError(f"Invalid identity size {n}")
        return cls._wrap(np.eye(n))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Matrix":
        """Create a matrix from a row-major 2D array (``array[row, col]``)."""
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 2 or 0 in array.shape:
            raise ConstructionError(f"Expected a non-empty 2D array, got shape {array.shape}")
        return cls._wrap(array.T)

    def to_array(self) -> np.ndarray:
        """Row-major copy of the values (``array[row, col]``)."""
        return np.array(self._data.T)

    # ========== Accessors ==========

    def get(self, col: int, row: int) -> float:
        return float(self._data[col, row])

    @property
    def columns(self) -> int:
        return self._data.shape[0]

    @property
    def rows(self) -> int:
        return self._data.shape[1]

    @property
    def size(self) -> int:
        return self._data.size

    def values(self) -> Tuple[float, ...]:
        """All values in column-major order."""
        return tuple(float(v) for v in self._data.ravel())

    def dimensions(self) -> Tuple[int, int]:
        return (self.columns, self.rows)

    def type_equals(self, other: "Matrix") -> bool:
        return self.dimensions() == other.dimensions()

    # ========== Operations ==========

    def operate(
        self,
        operator: Callable[..., float],
        other: Optional["Matrix"] = None,
    ) -> "Matrix":
        """
        Apply ``operator`` element-wise.

        With ``other`` the operator receives the values of both matrices at the
        same position, otherwise only the value of this matrix.
        """
        if other is None:
            return Matrix._wrap(np.vectorize(operator, otypes=[np.float64])(self._data))
        if not self.type_equals(other):
            raise DimensionMismatchError(
                f"Matrix of size {other.dimensions()} does not match {self.dimensions()}"
            )
        return Matrix._wrap(
            np.vectorize(operator, otypes=[np.float64])(self._data, other._data)
        )

    def add(self, other: "Matrix") -> "Matrix":
        return self.operate(lambda a, b: a + b, other)

    def subtract(self, other: "Matrix") -> "Matrix":
        return self.operate(lambda a, b: a - b, other)

    def scale(self, factor: float) -> "Matrix":
        return Matrix._wrap(self._data * factor)

    def multiply(self, other: "Matrix") -> "Matrix":
        """
        Matrix product ``self x other``.

        The number of columns of this matrix must equal the number of rows of
        ``other``; the result has ``other.columns`` columns and ``self.rows``
        rows.
        """
        if self.columns != other.rows:
            raise DimensionMismatchError(
                f"Cannot multiply a {self.columns}x{self.rows} matrix "
                f"with a {other.columns}x{other.rows} matrix"
            )
        # (A @ B)^T == B^T @ A^T, and the stored arrays are the transposes
        return Matrix._wrap(other._data @ self._data)

    def transpose(self) -> "Matrix":
        return Matrix._wrap(self._data.T)

    def join_right(self, other: "Matrix") -> "Matrix":
        """Append the columns of ``other`` to the right of this matrix."""
        if self.rows != other.rows:
            raise DimensionMismatchError(
                f"Cannot join a matrix with {other.rows} rows to one with {self.rows} rows"
            )
        return Matrix._wrap(np.concatenate([self._data, other._data], axis=0))

    def join_bottom(self, other: "Matrix") -> "Matrix":
        """Append the rows of ``other`` below this matrix."""
        if self.columns != other.columns:
            raise DimensionMismatchError(
                f"Cannot join a matrix with {other.columns} columns below one "
                f"with {self.columns} columns"
            )
        return Matrix._wrap(np.concatenate([self._data, other._data], axis=1))

    # ========== Dunder ==========

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.type_equals(other) and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash((self.dimensions(), self._data.tobytes()))

    def __repr__(self) -> str:
        return f"Matrix.from_values({self.columns}, {self.rows}, {list(self.values())})"

    def __str__(self) -> str:
        return "\n".join(
            "\t".join(str(value) for value in row) for row in self._data.T.tolist()
        )
