"""A small dense matrix with products for vectors and matrices."""

from __future__ import annotations

from numbers import Number
from typing import Iterable


def _format_value(value) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class Matrix:
    """A rectangular matrix held as a list of rows."""

    def __init__(self, rows: Iterable[Iterable]) -> None:
        data = [list(row) for row in rows]
        if not data or not data[0]:
            raise ValueError("Matrix must have at least one row and one column.")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("All rows must have the same number of columns.")
        self._rows = data

    @classmethod
    def filled(cls, num_rows: int, num_cols: int, value) -> "Matrix":
        """Build a num_rows x num_cols matrix with every entry set to value."""
        return cls([[value] * num_cols for _ in range(num_rows)])

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._rows), len(self._rows[0])

    def __getitem__(self, index):
        if isinstance(index, tuple):
            row, col = index
            return self._rows[row][col]
        return tuple(self._rows[index])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None

    def __mul__(self, other):
        if isinstance(other, Matrix):
            num_rows, num_cols = self.shape
            other_rows, _ = other.shape
            if num_cols != other_rows:
                raise ValueError(
                    "Left matrix must be of dimensions A x N, and right matrix "
                    "must be of dimensions N x B."
                )
            columns = list(zip(*other._rows))
            return Matrix(
                [
                    [sum((a * b for a, b in zip(row, col)), 0) for col in columns]
                    for row in self._rows
                ]
            )
        if isinstance(other, Number):
            return Matrix([[value * other for value in row] for row in self._rows])
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Number):
            return self * other
        return NotImplemented

    def dot(self, other: "Matrix"):
        """Dot product of a 1 x N row vector with an N x 1 column vector."""
        num_rows, num_cols = self.shape
        other_rows, other_cols = other.shape
        if num_rows != 1 or other_cols != 1 or num_cols != other_rows:
            raise ValueError(
                "Left matrix must be vector of dimensions 1 x N, and right matrix "
                "must be vector of dimensions N x 1."
            )
        return sum((a * row[0] for a, row in zip(self._rows[0], other._rows)), 0)

    def cross(self, other: "Matrix") -> "Matrix":
        """Cross product of two 1 x 3 row vectors."""
        if self.shape != (1, 3) or other.shape != (1, 3):
            raise ValueError("Matrices must be vectors of dimensions 1 x 3.")
        a0, a1, a2 = self._rows[0]
        b0, b1, b2 = other._rows[0]
        return Matrix([[a1 * b2 - a2 * b1, a2 * b0 - a0 * b2, a0 * b1 - a1 * b0]])

    def set_value(self, row: int, col: int, value) -> None:
        num_rows, num_cols = self.shape
        if not (0 <= row < num_rows and 0 <= col < num_cols):
            raise ValueError("Invalid row or column index.")
        self._rows[row][col] = value

    def to_lists(self) -> list[list]:
        return [list(row) for row in self._rows]

    def format(self) -> str:
        """Render the matrix as a printable block of text."""
        lines = "".join(
            "".join(f"{_format_value(v)} " for v in row) + "\n" for row in self._rows
        )
        return "Printing matrix: \n" + lines

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"


def main(argv=None) -> int:
    """Print a few example matrices and products."""
    matrix_a = Matrix.filled(3, 2, 2.0)
    print(matrix_a.format(), end="")
    matrix_b = Matrix.filled(3, 2, 2.0)
    print(matrix_b.format(), end="")
    matrix_c = Matrix(matrix_b.to_lists())
    print(matrix_c.format(), end="")
    matrix_a = Matrix(matrix_c.to_lists())
    print(matrix_a.format(), end="")
    matrix_d = Matrix([[1.0, 3.0, 1.0, 2.0], [2.0, 2.0, 1.5, 1.0]])
    print(matrix_d.format(), end="")
    matrix_e = matrix_b * matrix_d
    print(matrix_e.format(), end="")
    matrix_f = matrix_e * 5
    print(matrix_f.format(), end="")

    print(Matrix([[1.0, 1.2, 0.5, 0.2, -0.4]]).format(), end="")

    row = Matrix([[1.0, 1.2, 0.5, 0.2, -0.4]])
    column = Matrix([[1.5], [2.0], [0.8], [0.1], [-0.5]])
    print(_format_value(row.dot(column)))

    cross = Matrix([[1.0, 1.2, 0.5]]).cross(Matrix([[1.5, 2.0, 0.8]]))
    print(cross.format(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())