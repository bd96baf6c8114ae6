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
"""Number sources used to fill random matrices"""

from typing import Optional, Protocol, runtime_checkable

import numpy as np

from .names import DEFAULT_SEED


@runtime_checkable
class NumberSource(Protocol):
    """Anything that draws a uniformly distributed integer from the closed range [low, high]

    random.Random instances satisfy this protocol.
    """

    def randint(self, low: int, high: int) -> int:
        ...


class NumpyNumberSource:
    """Number source backed by a numpy random Generator

    Args:
        seed (optional (int)):
            Seed passed to numpy.random.default_rng. With the default (None),
            fresh entropy is drawn from the operating system.
    """

    def __init__(self, seed: Optional[int] = DEFAULT_SEED):
        self._rng = np.random.default_rng(seed)

    def randint(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}]")
        return int(self._rng.integers(low, high, endpoint=True))
