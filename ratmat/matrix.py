#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Dense matrices with exact rational entries.

The matrix is stored as a row-major list of rows, each row a list of Rational.
Every operation that returns a matrix allocates fresh row lists, so results never
share storage with their operands. Rationals themselves are immutable and may be
shared freely.

Operations based on row reduction (row_echelon, reduced_row_echelon, rank,
determinant, inverse) are implemented in ratmat.gauss and exposed here as
methods.
"""

from fractions import Fraction
from typing import Iterable, List, Optional, Sequence, TextIO, Tuple, Union
import numbers
import sys

import numpy as np
import sympy

from .errors import DimensionMismatchError, TooManyValuesError
from .names import (CELL_SEPARATOR, ROW_TERMINATOR, MSG_ADD_DIMENSIONS, MSG_SUBTRACT_DIMENSIONS,
                    MSG_MULTIPLY_DIMENSIONS, MSG_DOT_DIMENSIONS, MSG_APPEND_DIMENSIONS, MSG_RAGGED_ROWS,
                    MSG_TOO_MANY_VALUES)
from .rational import Rational
from .sources import NumberSource, NumpyNumberSource

Scalar = Union[Rational, int, Fraction]


class Matrix:
    """
    Dense width x height matrix of Rational values.

    Args:
        width (int):
            Number of columns

        height (int):
            Number of rows

    A new matrix is the zero matrix. Use the named constructors (empty, identity,
    of, random, from_rows, from_numpy, from_sympy) to build matrices with content.

    Attributes:
        width: Number of columns
        height: Number of rows
        elements: Row-major list of rows, elements[row][col]
    """

    def __init__(self, width: int, height: int):
        if not isinstance(width, numbers.Integral) or not isinstance(height, numbers.Integral):
            raise TypeError("Matrix dimensions must be integers")
        if width < 0:
            raise ValueError(f"negative width: {width}")
        if height < 0:
            raise ValueError(f"negative height: {height}")
        self.width = int(width)
        self.height = int(height)
        self.elements = [[Rational.ZERO] * self.width for _ in range(self.height)]

    @classmethod
    def _from_elements(cls, width: int, height: int, elements: List[List[Rational]]) -> 'Matrix':
        """Wrap freshly built row lists without copying them"""
        new = cls.__new__(cls)
        new.width = width
        new.height = height
        new.elements = elements
        return new

    # Construction
    @classmethod
    def empty(cls, width: int, height: int) -> 'Matrix':
        """Zero matrix with the given number of columns and rows"""
        return cls(width, height)

    @classmethod
    def identity(cls, dimension: int) -> 'Matrix':
        """Square matrix with ones on the diagonal and zeros elsewhere"""
        new = cls(dimension, dimension)
        for i in range(dimension):
            new.elements[i][i] = Rational.ONE
        return new

    @classmethod
    def of(cls, width: int, height: int, *values) -> 'Matrix':
        """
        Create a matrix from a flat sequence of values in row-major order.

        Value k is placed in row k // width, column k % width. If fewer than
        width * height values are given, the remaining cells are zero.

        Args:
            width: Number of columns
            height: Number of rows
            values: Entries, anything accepted by Rational.value_of

        Raises:
            TooManyValuesError: If more than width * height values are given
        """
        capacity = width * height
        if len(values) > capacity:
            raise TooManyValuesError(MSG_TOO_MANY_VALUES.format(height, width, len(values), capacity))
        new = cls(width, height)
        for k, value in enumerate(values):
            new.elements[k // width][k % width] = Rational.value_of(value)
        return new

    @classmethod
    def random(cls,
               width: int,
               height: int,
               value_range: Tuple[int, int],
               source: Optional[NumberSource] = None) -> 'Matrix':
        """
        Create a matrix of random integer entries.

        Args:
            width: Number of columns
            height: Number of rows
            value_range: Closed range (low, high) the entries are drawn from
            source (optional): Object with a randint(low, high) method drawing from
                the closed range. Defaults to a NumpyNumberSource with fresh entropy.
                random.Random instances can be used as well.

        Raises:
            ValueError: If low > high
        """
        low, high = value_range
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}]")
        if source is None:
            source = NumpyNumberSource()
        elif not isinstance(source, NumberSource):
            raise TypeError(f"Number source must provide randint(low, high), got {type(source).__name__}")
        new = cls(width, height)
        for row in range(new.height):
            for col in range(new.width):
                new.elements[row][col] = Rational(source.randint(low, high))
        return new

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable]) -> 'Matrix':
        """
        Create a matrix from a nested sequence of rows.

        Entries can be anything accepted by Rational.value_of, including strings
        like "1/2".

        Raises:
            DimensionMismatchError: If the rows differ in length
        """
        elements = [[Rational.value_of(value) for value in row] for row in rows]
        height = len(elements)
        width = len(elements[0]) if height > 0 else 0
        for index, row in enumerate(elements):
            if len(row) != width:
                raise DimensionMismatchError(MSG_RAGGED_ROWS.format(index, len(row), width))
        return cls._from_elements(width, height, elements)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> 'Matrix':
        """
        Create a matrix from a two-dimensional numpy array.

        Integer entries are taken exactly, float entries are converted with
        Fraction.limit_denominator (see Rational.value_of). Object arrays of
        Rational, Fraction or sympy.Rational are supported as well.
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"Expected a two-dimensional array, got {array.ndim} dimensions")
        height, width = array.shape
        # tolist() turns numpy scalars into int / float and keeps objects
        elements = [[Rational.value_of(value) for value in row] for row in array.tolist()]
        return cls._from_elements(width, height, elements)

    @classmethod
    def from_sympy(cls, matrix: sympy.MatrixBase) -> 'Matrix':
        """Create a matrix from a sympy matrix with rational entries"""
        elements = [[Rational.value_of(matrix[row, col]) for col in range(matrix.cols)] for row in range(matrix.rows)]
        return cls._from_elements(matrix.cols, matrix.rows, elements)

    # Access
    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width), in the order numpy uses"""
        return self.height, self.width

    def is_square(self) -> bool:
        return self.width == self.height

    def get_value_at(self, row: int, col: int) -> Rational:
        return self.elements[row][col]

    def row(self, row: int) -> List[Rational]:
        """Copy of the given row"""
        return list(self.elements[row])

    def column(self, col: int) -> List[Rational]:
        """Copy of the given column"""
        return [values[col] for values in self.elements]

    def sub_matrix(self, row_start: int, row_end: int, col_start: int, col_end: int) -> 'Matrix':
        """Extract the rows row_start..row_end-1 and columns col_start..col_end-1"""
        if row_end < row_start:
            raise ValueError("row_end < row_start")
        if col_end < col_start:
            raise ValueError("col_end < col_start")
        if row_start < 0:
            raise ValueError("row_start < 0")
        if col_start < 0:
            raise ValueError("col_start < 0")
        if row_end > self.height:
            raise ValueError("row_end > height")
        if col_end > self.width:
            raise ValueError("col_end > width")
        elements = [self.elements[row][col_start:col_end] for row in range(row_start, row_end)]
        return Matrix._from_elements(col_end - col_start, row_end - row_start, elements)

    # Linear operators
    def add(self, other: 'Matrix') -> 'Matrix':
        """Element-wise sum"""
        if self.shape != other.shape:
            raise DimensionMismatchError(
                MSG_ADD_DIMENSIONS.format(self.height, self.width, other.height, other.width))
        elements = [[a.add(b) for a, b in zip(row, other_row)] for row, other_row in zip(self.elements, other.elements)]
        return Matrix._from_elements(self.width, self.height, elements)

    def subtract(self, other: 'Matrix') -> 'Matrix':
        """Element-wise difference"""
        if self.shape != other.shape:
            raise DimensionMismatchError(
                MSG_SUBTRACT_DIMENSIONS.format(self.height, self.width, other.height, other.width))
        elements = [[a.subtract(b) for a, b in zip(row, other_row)]
                    for row, other_row in zip(self.elements, other.elements)]
        return Matrix._from_elements(self.width, self.height, elements)

    def negate(self) -> 'Matrix':
        elements = [[value.negate() for value in row] for row in self.elements]
        return Matrix._from_elements(self.width, self.height, elements)

    def scalar_multiply(self, scalar: Scalar) -> 'Matrix':
        """Multiply every entry by scalar"""
        scalar = Rational.value_of(scalar)
        elements = [[value.multiply(scalar) for value in row] for row in self.elements]
        return Matrix._from_elements(self.width, self.height, elements)

    def multiply(self, other: 'Matrix') -> 'Matrix':
        """
        Matrix product self * other.

        The result has self.height rows and other.width columns. Every cell is
        the dot product of a row of self and a row of other's transpose.

        Raises:
            DimensionMismatchError: If self.width != other.height
        """
        if self.width != other.height:
            raise DimensionMismatchError(MSG_MULTIPLY_DIMENSIONS.format(self.width, other.height))
        columns = other.transpose().elements
        elements = [[Matrix.dot(row, column) for column in columns] for row in self.elements]
        return Matrix._from_elements(other.width, self.height, elements)

    @staticmethod
    def dot(first: Sequence[Rational], second: Sequence[Rational]) -> Rational:
        """
        Dot product of two vectors.

        Raises:
            DimensionMismatchError: If the vectors differ in length
        """
        if len(first) != len(second):
            raise DimensionMismatchError(MSG_DOT_DIMENSIONS.format(len(first), len(second)))
        result = Rational.ZERO
        for a, b in zip(first, second):
            result = result.add(a.multiply(b))
        return result

    def transpose(self) -> 'Matrix':
        """Return transposed matrix, result[j][i] = self[i][j]"""
        elements = [[self.elements[row][col] for row in range(self.height)] for col in range(self.width)]
        return Matrix._from_elements(self.height, self.width, elements)

    def copy_of(self) -> 'Matrix':
        """Create deep copy of this matrix (no row list is shared)"""
        return Matrix._from_elements(self.width, self.height, [list(row) for row in self.elements])

    def is_identity(self) -> bool:
        if not self.is_square():
            return False
        for i, row in enumerate(self.elements):
            for j, value in enumerate(row):
                if i == j:
                    if not value.is_one():
                        return False
                elif not value.is_zero():
                    return False
        return True

    def append(self, other: 'Matrix') -> 'Matrix':
        """
        Horizontal concatenation [self | other].

        Raises:
            DimensionMismatchError: If the heights differ
        """
        if self.height != other.height:
            raise DimensionMismatchError(MSG_APPEND_DIMENSIONS.format(self.height, other.height))
        elements = [row + other_row for row, other_row in zip(self.elements, other.elements)]
        return Matrix._from_elements(self.width + other.width, self.height, elements)

    # Gaussian elimination
    def row_echelon(self) -> 'Matrix':
        from .gauss import Gauss
        return Gauss.get_rational_instance().row_echelon(self)

    def reduced_row_echelon(self) -> 'Matrix':
        from .gauss import Gauss
        return Gauss.get_rational_instance().reduced_row_echelon(self)

    def rank(self) -> int:
        from .gauss import Gauss
        return Gauss.get_rational_instance().rank(self)

    def determinant(self) -> Rational:
        from .gauss import Gauss
        return Gauss.get_rational_instance().determinant(self)

    def inverse(self) -> 'Matrix':
        from .gauss import Gauss
        return Gauss.get_rational_instance().invert(self)

    # Conversion and output
    def to_numpy(self, dtype=float) -> np.ndarray:
        """
        Convert to a numpy array of shape (height, width).

        With dtype=object the Rational entries are kept, otherwise they are
        converted with float().
        """
        if dtype is object:
            result = np.empty((self.height, self.width), dtype=object)
            for row, values in enumerate(self.elements):
                for col, value in enumerate(values):
                    result[row, col] = value
            return result
        return np.array([[float(value) for value in row] for row in self.elements],
                        dtype=dtype).reshape(self.height, self.width)

    def to_sympy(self) -> sympy.Matrix:
        return sympy.Matrix(self.height, self.width, [value.to_sympy() for row in self.elements for value in row])

    def dump(self, stream: Optional[TextIO] = None) -> None:
        """Write the tab separated grid to stream (default: sys.stdout)"""
        if stream is None:
            stream = sys.stdout
        stream.write(str(self))

    def __str__(self) -> str:
        return ''.join(''.join(str(value) + CELL_SEPARATOR for value in row) + ROW_TERMINATOR for row in self.elements)

    def __repr__(self) -> str:
        return f"Matrix.from_rows({[[str(value) for value in row] for row in self.elements]})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.elements == other.elements

    __hash__ = None

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.negate()

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, (Rational, numbers.Integral, Fraction)):
            return self.scalar_multiply(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (Rational, numbers.Integral, Fraction)):
            return self.scalar_multiply(other)
        return NotImplemented

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)
