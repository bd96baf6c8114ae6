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
Gaussian elimination over exact rationals.

This module provides the operations that are based on row reduction: row echelon
form, reduced row echelon form, rank, determinant and inverse. All of them work
on a private deep copy of the input matrix, which is never modified.

The pivot search is the textbook one: in the current column, the first row at or
below the current row with a non-zero entry becomes the pivot row. Since the
arithmetic is exact, no magnitude based pivoting is needed.
"""

import logging
from typing import List, Tuple

from .errors import NonSquareMatrixError, SingularMatrixError
from .matrix import Matrix
from .names import MSG_DETERMINANT_SQUARE, MSG_INVERSE_SQUARE, MSG_SINGULAR
from .rational import Rational

_logger = logging.getLogger(__name__)


class Gauss:
    """
    Matrix operations based on Gaussian elimination for exact rational arithmetic.

    The class holds no state, use get_rational_instance() to obtain the shared
    instance.
    """

    _rational_instance = None

    @classmethod
    def get_rational_instance(cls) -> 'Gauss':
        """Get singleton instance for exact rational operations"""
        if cls._rational_instance is None:
            cls._rational_instance = cls()
        return cls._rational_instance

    def row_echelon(self, matrix: Matrix) -> Matrix:
        """
        Compute a row echelon form of the given matrix.

        Entries below each pivot are zero, pivots are not normalized.

        Args:
            matrix: Input matrix (not modified)

        Returns:
            New matrix in row echelon form
        """
        working = matrix.copy_of()
        self._row_echelon(working, reduced=False)
        return working

    def reduced_row_echelon(self, matrix: Matrix) -> Matrix:
        """
        Compute the reduced row echelon form of the given matrix.

        Every pivot is one and is the only non-zero entry of its column.

        Args:
            matrix: Input matrix (not modified)

        Returns:
            New matrix in reduced row echelon form
        """
        working = matrix.copy_of()
        self._row_echelon(working, reduced=True)
        return working

    def rank(self, matrix: Matrix) -> int:
        """Compute the rank of the given matrix (number of pivots)"""
        working = matrix.copy_of()
        return self._row_echelon(working, reduced=False)[0]

    def determinant(self, matrix: Matrix) -> Rational:
        """
        Compute the determinant as the signed product of the row echelon diagonal.

        Every row swap of the elimination flips the sign of the result.

        Args:
            matrix: Square input matrix

        Returns:
            The determinant

        Raises:
            NonSquareMatrixError: If matrix is not square
        """
        if not matrix.is_square():
            raise NonSquareMatrixError(MSG_DETERMINANT_SQUARE.format(matrix.height, matrix.width))

        working = matrix.copy_of()
        rank, swaps = self._row_echelon(working, reduced=False)

        det = Rational.ONE
        for i in range(working.height):
            det = det.multiply(working.elements[i][i])
        if swaps % 2 == 1:
            det = det.negate()

        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug(f"Determinant of {matrix.height}x{matrix.width} matrix with rank {rank}: {det}")
        return det

    def invert(self, matrix: Matrix) -> Matrix:
        """
        Compute the inverse of a square matrix.

        The reduced row echelon form of [A | I] is [I | A^-1].

        Args:
            matrix: Square matrix to invert

        Returns:
            The inverse matrix

        Raises:
            NonSquareMatrixError: If matrix is not square
            SingularMatrixError: If the determinant is zero
        """
        if not matrix.is_square():
            raise NonSquareMatrixError(MSG_INVERSE_SQUARE.format(matrix.height, matrix.width))
        if self.determinant(matrix).is_zero():
            _logger.debug(f"Refusing to invert singular {matrix.height}x{matrix.width} matrix")
            raise SingularMatrixError(MSG_SINGULAR)

        n = matrix.width
        augmented = matrix.append(Matrix.identity(n))
        self._row_echelon(augmented, reduced=True)
        return augmented.sub_matrix(0, n, n, 2 * n)

    def _row_echelon(self, matrix: Matrix, reduced: bool) -> Tuple[int, int]:
        """
        Core Gaussian elimination, modifies matrix in place.

        Args:
            matrix: Matrix to reduce (a working copy owned by the caller)
            reduced: Whether to compute reduced row echelon form (RREF)

        Returns:
            Tuple of (rank, number of row swaps)
        """
        rows = matrix.elements
        height = matrix.height
        width = matrix.width
        swaps = 0

        i = 0
        j = 0
        while i < height and j < width:
            pivot_row = self._find_pivot_row(rows, i, j)
            if pivot_row == -1:
                # column has no pivot
                j += 1
                continue

            if pivot_row != i:
                rows[i], rows[pivot_row] = rows[pivot_row], rows[i]
                swaps += 1

            if reduced:
                pivot = rows[i][j]
                if not pivot.is_one():
                    rows[i] = [value.divide(pivot) for value in rows[i]]

            self._eliminate_column(rows, i, j, reduced)
            i += 1
            j += 1

        if _logger.isEnabledFor(logging.DEBUG):
            form = "Reduced row echelon" if reduced else "Row echelon"
            _logger.debug(f"{form} form of {height}x{width} matrix: rank {i}, row swaps {swaps}")
        return i, swaps

    @staticmethod
    def _find_pivot_row(rows: List[List[Rational]], start_row: int, col: int) -> int:
        """
        Find the first row at or below start_row with a non-zero entry in col.

        Returns:
            Row index of the pivot, or -1 if the column is zero from start_row down
        """
        for row in range(start_row, len(rows)):
            if not rows[row][col].is_zero():
                return row
        return -1

    @staticmethod
    def _eliminate_column(rows: List[List[Rational]], pivot_row: int, col: int, reduced: bool):
        """
        Zero the entries of col in the other rows by subtracting multiples of the pivot row.

        Args:
            rows: Row lists of the working matrix
            pivot_row: Row containing the pivot
            col: Pivot column
            reduced: If True, eliminate above and below; if False, only below
        """
        pivot_values = rows[pivot_row]
        pivot = pivot_values[col]
        targets = range(len(rows)) if reduced else range(pivot_row + 1, len(rows))

        for row in targets:
            if row == pivot_row or rows[row][col].is_zero():
                continue
            factor = rows[row][col].divide(pivot)
            rows[row] = [value.subtract(factor.multiply(pivot_value))
                         for value, pivot_value in zip(rows[row], pivot_values)]
