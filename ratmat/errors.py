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
"""Exceptions raised by rational and matrix operations

All exceptions derive from RatmatError and additionally from the builtin
exception a caller would expect (ValueError for shape and argument problems,
ArithmeticError for undefined results), so that generic handlers keep working.
"""


class RatmatError(Exception):
    """Base class of all ratmat exceptions"""


class DimensionMismatchError(RatmatError, ValueError):
    """Operands of an addition, subtraction, product or concatenation have incompatible shapes"""


class TooManyValuesError(RatmatError, ValueError):
    """More initializer values were given than the matrix has cells"""


class NonSquareMatrixError(RatmatError, ArithmeticError):
    """Determinant or inverse was requested for a non-square matrix"""


class SingularMatrixError(RatmatError, ArithmeticError):
    """Inverse was requested for a matrix with determinant zero"""


class RationalDivisionByZero(RatmatError, ZeroDivisionError):
    """A rational was divided by zero or constructed with a zero denominator"""
