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
Exact rational numbers.

A Rational is an immutable pair of Python integers (arbitrary precision) that is
always kept in canonical form: numerator and denominator are coprime, the
denominator is positive and zero is represented as 0/1. Canonicalization happens
on construction, so two Rationals are equal exactly if their numerators and
denominators are equal.

Rationals interoperate with int, fractions.Fraction and sympy.Rational through
Rational.value_of, to_fraction and to_sympy.
"""

from fractions import Fraction
from typing import Tuple, Union
import math
import numbers

import sympy

from .errors import RationalDivisionByZero
from .names import FRACTION_BAR, MSG_DIVISION_BY_ZERO, MSG_ZERO_DENOMINATOR


def canonicalize(numerator: int, denominator: int) -> Tuple[int, int]:
    """
    Reduce numerator/denominator to lowest terms with a positive denominator.

    Args:
        numerator: Any integer
        denominator: Any non-zero integer

    Returns:
        The canonical (numerator, denominator) pair, (0, 1) for zero
    """
    if denominator == 0:
        raise RationalDivisionByZero(MSG_ZERO_DENOMINATOR)
    if numerator == 0:
        return 0, 1
    gcd = math.gcd(numerator, denominator)
    numerator //= gcd
    denominator //= gcd
    if denominator < 0:
        numerator = -numerator
        denominator = -denominator
    return numerator, denominator


class Rational:
    """
    Exact fraction of two arbitrary precision integers.

    Instances are immutable; every arithmetic operation returns a new, canonical
    Rational. Named methods (add, subtract, multiply, divide, negate) and the
    corresponding operators are equivalent. Integer operands are accepted
    wherever a Rational is expected. A Rational equals a float exactly if it
    equals the binary value of that float, as for fractions.Fraction.
    """

    __slots__ = ('_numerator', '_denominator')

    ZERO: 'Rational'
    ONE: 'Rational'

    def __init__(self, numerator: int, denominator: int = 1):
        """
        Create numerator/denominator in canonical form.

        Args:
            numerator: Integer numerator
            denominator: Integer denominator (default 1), must not be zero

        Raises:
            TypeError: If numerator or denominator is not an integer
            RationalDivisionByZero: If denominator is zero
        """
        if not isinstance(numerator, numbers.Integral) or not isinstance(denominator, numbers.Integral):
            raise TypeError(f"Rational requires integer numerator and denominator, "
                            f"got {type(numerator).__name__} and {type(denominator).__name__}")
        self._numerator, self._denominator = canonicalize(int(numerator), int(denominator))

    @classmethod
    def _canonical(cls, numerator: int, denominator: int) -> 'Rational':
        """Build an instance from an already canonical pair"""
        new = object.__new__(cls)
        new._numerator = numerator
        new._denominator = denominator
        return new

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # Arithmetic
    def add(self, other: Union['Rational', int]) -> 'Rational':
        """Return self + other"""
        other = _require(other)
        return Rational(self._numerator * other._denominator + other._numerator * self._denominator,
                        self._denominator * other._denominator)

    def subtract(self, other: Union['Rational', int]) -> 'Rational':
        """Return self - other"""
        other = _require(other)
        return Rational(self._numerator * other._denominator - other._numerator * self._denominator,
                        self._denominator * other._denominator)

    def multiply(self, other: Union['Rational', int]) -> 'Rational':
        """Return self * other"""
        other = _require(other)
        return Rational(self._numerator * other._numerator, self._denominator * other._denominator)

    def divide(self, other: Union['Rational', int]) -> 'Rational':
        """
        Return self / other, computed as self times the reciprocal of other.

        Raises:
            RationalDivisionByZero: If other is zero
        """
        return self.multiply(_require(other).reciprocal())

    def negate(self) -> 'Rational':
        """Return -self"""
        return Rational._canonical(-self._numerator, self._denominator)

    def reciprocal(self) -> 'Rational':
        """
        Return 1 / self.

        Raises:
            RationalDivisionByZero: If self is zero
        """
        if self._numerator == 0:
            raise RationalDivisionByZero(MSG_DIVISION_BY_ZERO)
        if self._numerator < 0:
            return Rational._canonical(-self._denominator, -self._numerator)
        return Rational._canonical(self._denominator, self._numerator)

    def abs(self) -> 'Rational':
        """Return absolute value"""
        if self._numerator < 0:
            return self.negate()
        return self

    def pow(self, exponent: int) -> 'Rational':
        """
        Return self ** exponent for an integer exponent.

        Negative exponents raise the reciprocal; zero to a negative power
        raises RationalDivisionByZero.
        """
        if not isinstance(exponent, numbers.Integral):
            raise TypeError("Exponent must be an integer")
        if exponent < 0:
            return self.reciprocal().pow(-exponent)
        return Rational._canonical(self._numerator**exponent, self._denominator**exponent)

    # Predicates and comparison
    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        return (self._numerator > 0) - (self._numerator < 0)

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return self._numerator == 1 and self._denominator == 1

    def is_integer(self) -> bool:
        return self._denominator == 1

    def equals(self, other: Union['Rational', int]) -> bool:
        """Exact comparison of the canonical numerator and denominator"""
        other = _require(other)
        return self._numerator == other._numerator and self._denominator == other._denominator

    def compare_to(self, other: Union['Rational', int]) -> int:
        """Compare to another value: -1 if less, 0 if equal, 1 if greater"""
        other = _require(other)
        left = self._numerator * other._denominator
        right = other._numerator * self._denominator
        return (left > right) - (left < right)

    # Conversion
    def to_display_string(self) -> str:
        """Return "N" for integers and "N/D" otherwise"""
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}{FRACTION_BAR}{self._denominator}"

    def to_fraction(self) -> Fraction:
        return Fraction(self._numerator, self._denominator)

    def to_sympy(self) -> sympy.Rational:
        return sympy.Rational(self._numerator, self._denominator)

    @staticmethod
    def value_of(value: Union['Rational', int, float, str, Fraction, sympy.Rational]) -> 'Rational':
        """
        Factory method to create a Rational from various types.

        Strings may be "N", "N/D" or anything fractions.Fraction parses (e.g.
        "0.25"). Floats are converted with Fraction.limit_denominator, so 0.1
        becomes 1/10 rather than its binary expansion. The approximation is only
        used if it converts back to the same float, otherwise the exact binary
        value is kept, so no non-zero float becomes zero.
        """
        if isinstance(value, Rational):
            return value
        elif isinstance(value, sympy.Rational):
            return Rational(int(value.p), int(value.q))
        elif isinstance(value, numbers.Integral):
            return Rational(int(value))
        elif isinstance(value, Fraction):
            return Rational(value.numerator, value.denominator)
        elif isinstance(value, float):
            fraction = Fraction(value)
            approx = fraction.limit_denominator()
            if float(approx) == value:
                fraction = approx
            return Rational(fraction.numerator, fraction.denominator)
        elif isinstance(value, str):
            text = value.strip()
            if FRACTION_BAR in text:
                parts = text.split(FRACTION_BAR)
                if len(parts) != 2:
                    raise ValueError(f"Invalid fraction format: {value}")
                return Rational(int(parts[0]), int(parts[1]))
            fraction = Fraction(text)
            return Rational(fraction.numerator, fraction.denominator)
        raise TypeError(f"Cannot convert {type(value)} to Rational")

    # Python protocol
    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.multiply(self)

    def __truediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __pow__(self, exponent):
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    def __eq__(self, other) -> bool:
        if isinstance(other, float):
            # exact binary value of the float, as Fraction compares
            return self.to_fraction() == other
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        # same hash as the equal int / Fraction
        return hash(self.to_fraction())

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __int__(self) -> int:
        """Truncate toward zero"""
        return int(self.to_fraction())

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"


def _coerce(value):
    """Return value as Rational, or None if it is not an exact rational type"""
    if isinstance(value, Rational):
        return value
    if isinstance(value, (numbers.Integral, Fraction)):
        return Rational.value_of(value)
    return None


def _require(value) -> Rational:
    coerced = _coerce(value)
    if coerced is None:
        raise TypeError(f"Expected Rational or int, got {type(value).__name__}")
    return coerced


# Constants
Rational.ZERO = Rational(0)
Rational.ONE = Rational(1)
