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
"""Static strings used in the ratmat package

    Display

        CELL_SEPARATOR = ' \\t'

        ROW_TERMINATOR = '\\n'

        FRACTION_BAR = '/'

    Error messages

        MSG_ADD_DIMENSIONS, MSG_SUBTRACT_DIMENSIONS, MSG_MULTIPLY_DIMENSIONS,
        MSG_DOT_DIMENSIONS, MSG_APPEND_DIMENSIONS, MSG_RAGGED_ROWS,
        MSG_TOO_MANY_VALUES, MSG_DETERMINANT_SQUARE, MSG_INVERSE_SQUARE,
        MSG_SINGULAR, MSG_DIVISION_BY_ZERO, MSG_ZERO_DENOMINATOR

    Number sources

        DEFAULT_SEED = None
"""

# Display
CELL_SEPARATOR = ' \t'
ROW_TERMINATOR = '\n'
FRACTION_BAR = '/'

# Error messages
MSG_ADD_DIMENSIONS = 'Addition of matrices requires same dimensions, got {}x{} and {}x{}'
MSG_SUBTRACT_DIMENSIONS = 'Subtraction of matrices requires same dimensions, got {}x{} and {}x{}'
MSG_MULTIPLY_DIMENSIONS = 'Multiplication of matrices requires width of M1 ({}) to equal height of M2 ({})'
MSG_DOT_DIMENSIONS = 'Dot product requires vectors of same length, got {} and {}'
MSG_APPEND_DIMENSIONS = 'Appending matrices requires same height, got {} and {}'
MSG_RAGGED_ROWS = 'All rows must have the same length, row {} has {} entries instead of {}'
MSG_TOO_MANY_VALUES = 'Too many values to fill {}x{} matrix: {} given, at most {} allowed'
MSG_DETERMINANT_SQUARE = 'Determinant requires square matrix, got {}x{}'
MSG_INVERSE_SQUARE = 'Inverse requires square matrix, got {}x{}'
MSG_SINGULAR = 'Inverse does not exist, determinant is zero'
MSG_DIVISION_BY_ZERO = 'Division by zero'
MSG_ZERO_DENOMINATOR = 'Denominator must not be zero'

# Number sources
DEFAULT_SEED = None
