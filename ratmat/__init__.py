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
"""ratmat package for exact linear algebra over the rational numbers

This package provides:
- Exact rational arithmetic with Rational
- Dense matrices of rationals with Matrix
- Gaussian elimination: row echelon forms, rank, determinant and inverse

All operations are exact, no floating point arithmetic is involved.
"""

import logging

from .names import *
from .errors import (RatmatError, DimensionMismatchError, TooManyValuesError, NonSquareMatrixError,
                     SingularMatrixError, RationalDivisionByZero)
from .rational import Rational, canonicalize
from .sources import NumberSource, NumpyNumberSource
from .matrix import Matrix
from .gauss import Gauss


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


__all__ = [
    'Rational',
    'canonicalize',
    'Matrix',
    'Gauss',
    'NumberSource',
    'NumpyNumberSource',
    'RatmatError',
    'DimensionMismatchError',
    'TooManyValuesError',
    'NonSquareMatrixError',
    'SingularMatrixError',
    'RationalDivisionByZero',
    'DisableLogger',
]
