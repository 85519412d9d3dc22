# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Exact rational numbers with overflow-checked integer components."""

from __future__ import annotations

import json
import math
import numbers
import operator
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from .backends import IntegerBackend, get_dflt_backend
from .exceptions import (
    DivisionByZero, InvalidArgument, NegativeRoot)
from .parsing import (
    float_to_ratio, int_from_field, percentage_to_float, str_to_ratio)
from .rounding import Rounding, div_rounded


__all__ = [
    'Rational',
    'normalize',
]


def normalize(numerator: int, denominator: int,
              backend: Optional[IntegerBackend] = None) -> Tuple[int, int]:
    """Return (numerator, denominator) reduced to lowest terms.

    The sign of the result is carried by the numerator only, i.e. the
    returned denominator is always positive. A zero numerator results in
    (0, 1). `denominator` must not be zero.
    """
    if backend is None:
        backend = get_dflt_backend()
    if denominator < 0:
        numerator = backend.neg(numerator)
        denominator = backend.neg(denominator)
    divisor = math.gcd(numerator, denominator)
    if divisor > 1:
        numerator //= divisor
        denominator //= divisor
    return numerator, denominator


RationalOperand = Union['Rational', numbers.Rational]


def _as_rational(value: Any) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, numbers.Rational):
        return Rational(value)
    raise TypeError(f"Can't convert {value!r} to Rational.")


def _operator_fallbacks(method: Callable[[Rational, Any], Rational],
                        fallback_operator: Callable[[Any, Any], Any]):
    # Build forward and reverse operator for `method`. Exact operands
    # (Rational, int, Fraction) give a Rational, floats give a float.

    def forward(a, b):
        if isinstance(b, (Rational, numbers.Rational)):
            return method(a, b)
        if isinstance(b, float):
            return fallback_operator(float(a), b)
        return NotImplemented

    forward.__name__ = '__' + fallback_operator.__name__ + '__'
    forward.__doc__ = method.__doc__

    def reverse(b, a):
        if isinstance(a, numbers.Rational):
            return method(Rational(a), b)
        if isinstance(a, float):
            return fallback_operator(a, float(b))
        return NotImplemented

    reverse.__name__ = '__r' + fallback_operator.__name__ + '__'
    reverse.__doc__ = method.__doc__

    return forward, reverse


class Rational:
    """Rational number with numerator and denominator held as integers.

    Args:
        numerator (see below): numerator or value of the rational number
        denominator (numbers.Rational, Decimal, float or str): denominator
            of the rational number

    If no `denominator` is given, `numerator` is converted to a Rational:

    * None: the result is zero
    * Rational: the instance itself is returned
    * int (or other numbers.Integral): the result is `numerator`/1
    * str: parsed as described in `from_str`
    * float (or other numbers.Real): converted via `from_float`
    * Decimal: converted exactly via `from_decimal`
    * Fraction (or other numbers.Rational): converted exactly

    If both are given, the result is `numerator` / `denominator`.

    The result is always reduced to lowest terms with a positive
    denominator.

    Raises:
        TypeError: an argument has an unsupported type
        InvalidArgument: `denominator` is zero or `numerator` can not be
            converted
        IntegerOverflow: numerator or denominator do not fit into the
            default integer backend

    Instances are immutable. All operations return new instances; they are
    computed using the default integer backend (see `set_dflt_backend`).
    """

    __slots__ = ('_numerator', '_denominator')

    _numerator: int
    _denominator: int

    def __new__(cls, numerator: Any = None,
                denominator: Any = None) -> Rational:
        """Create and return new instance of Rational."""
        if denominator is None:
            if numerator is None:
                return cls._new(0, 1)
            if isinstance(numerator, Rational):
                return numerator
            if isinstance(numerator, numbers.Integral):
                return cls._from_ints(int(numerator), 1)
            if isinstance(numerator, str):
                return cls.from_str(numerator)
            if isinstance(numerator, float):
                return cls.from_float(numerator)
            if isinstance(numerator, Decimal):
                return cls.from_decimal(numerator)
            if isinstance(numerator, numbers.Rational):
                return cls._from_ints(int(numerator.numerator),
                                      int(numerator.denominator))
            if isinstance(numerator, numbers.Real):
                return cls.from_float(float(numerator))
            raise TypeError(f"Can't convert {numerator!r} to Rational.")
        if isinstance(numerator, numbers.Integral) and \
                isinstance(denominator, numbers.Integral):
            return cls._from_ints(int(numerator), int(denominator))
        num = cls(numerator)
        den = cls(denominator)
        if not den:
            raise InvalidArgument("Denominator cannot be zero.")
        return num.divide_by(den)

    @classmethod
    def _new(cls, numerator: int, denominator: int) -> Rational:
        # caller guarantees that the pair is normalized
        rn = object.__new__(cls)
        rn._numerator = numerator
        rn._denominator = denominator
        return rn

    @classmethod
    def _reduced(cls, numerator: int, denominator: int,
                 backend: IntegerBackend) -> Rational:
        return cls._new(*normalize(numerator, denominator, backend))

    @classmethod
    def _from_ints(cls, numerator: int, denominator: int) -> Rational:
        if denominator == 0:
            raise InvalidArgument("Denominator cannot be zero.")
        backend = get_dflt_backend()
        backend.check(numerator, "numerator")
        backend.check(denominator, "denominator")
        return cls._reduced(numerator, denominator, backend)

    # factories

    @classmethod
    def zero(cls) -> Rational:
        """Return 0/1."""
        return cls._new(0, 1)

    @classmethod
    def one(cls) -> Rational:
        """Return 1/1."""
        return cls._new(1, 1)

    @classmethod
    def from_float(cls, value: Union[float, numbers.Integral]) -> Rational:
        """Convert a finite float (or int) to a Rational.

        The result equals the shortest decimal representation of `value`,
        limited to 15 significant digits, so `Rational.from_float(0.1)`
        gives 1/10 and `Rational.from_float(-3.75)` gives -15/4.

        Raises:
            TypeError: `value` is not a float or int
            InvalidArgument: `value` is infinite or NaN
            IntegerOverflow: the result does not fit into the default
                integer backend
        """
        if isinstance(value, numbers.Integral):
            return cls._from_ints(int(value), 1)
        if not isinstance(value, float):
            raise TypeError(f"{value!r} is not a float.")
        return cls._from_ints(*float_to_ratio(value, get_dflt_backend()))

    @classmethod
    def from_decimal(cls, value: Union[Decimal, numbers.Integral]) \
            -> Rational:
        """Convert a finite Decimal (or int) exactly to a Rational.

        Raises:
            TypeError: `value` is not a Decimal or int
            InvalidArgument: `value` is infinite or NaN
            IntegerOverflow: the result does not fit into the default
                integer backend
        """
        if isinstance(value, numbers.Integral):
            return cls._from_ints(int(value), 1)
        if not isinstance(value, Decimal):
            raise TypeError(f"{value!r} is not a Decimal.")
        if not value.is_finite():
            raise InvalidArgument(
                f"Cannot convert {value!r} to a rational number.")
        return cls._from_ints(*value.as_integer_ratio())

    @classmethod
    def from_str(cls, text: str) -> Rational:
        """Convert a string to a Rational.

        Accepted are fractions like "-3/4" or " 22 / 7 ", integers like
        "-17" and decimal numbers like "12.5" or "1.5e-10". Decimal numbers
        are converted via `from_float`.

        Raises:
            TypeError: `text` is not a str
            InvalidArgument: `text` is empty, has an invalid format or
                denotes a fraction with zero denominator
            IntegerOverflow: the result does not fit into the default
                integer backend
        """
        if not isinstance(text, str):
            raise TypeError(f"{text!r} is not a str.")
        return cls._from_ints(*str_to_ratio(text, get_dflt_backend()))

    @classmethod
    def from_percentage(cls, percentage: str) -> Rational:
        """Convert a percentage like "12.5%" to a Rational (here: 1/8).

        The '%' sign is optional.

        Raises:
            TypeError: `percentage` is not a str
            InvalidArgument: `percentage` has an invalid format
        """
        if not isinstance(percentage, str):
            raise TypeError(f"{percentage!r} is not a str.")
        return cls.from_float(percentage_to_float(percentage))

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> Rational:
        """Create a Rational from a mapping with keys 'numerator' and
        'denominator' (as returned by `as_dict`).

        The values may be ints, integral floats or strings of digits. The
        result is always reduced, regardless of the given values.

        Raises:
            InvalidArgument: a key is missing or a value is not integral
        """
        try:
            num = mapping['numerator']
            den = mapping['denominator']
        except (KeyError, TypeError):
            raise InvalidArgument("Mapping must contain 'numerator' and "
                                  "'denominator' keys.") from None
        return cls._from_ints(int_from_field(num, "Numerator"),
                              int_from_field(den, "Denominator"))

    @classmethod
    def from_json(cls, text: str) -> Rational:
        """Create a Rational from a JSON object as returned by `to_json`."""
        try:
            obj = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidArgument(f"Invalid JSON: {exc}") from None
        if not isinstance(obj, dict):
            raise InvalidArgument("JSON must decode to an object.")
        return cls.from_dict(obj)

    # properties

    @property
    def numerator(self) -> int:
        """Return the normalized numerator of `self`."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Return the normalized denominator of `self` (always > 0)."""
        return self._denominator

    def is_zero(self) -> bool:
        """Return True if `self` == 0."""
        return self._numerator == 0

    def is_integer(self) -> bool:
        """Return True if `self` is an integral number."""
        return self._denominator == 1

    # arithmetic

    def add(self, other: RationalOperand) -> Rational:
        """Return `self` + `other`."""
        other = _as_rational(other)
        backend = get_dflt_backend()
        num1 = backend.mul(self._numerator, other._denominator)
        num2 = backend.mul(other._numerator, self._denominator)
        den = backend.mul(self._denominator, other._denominator)
        return self._reduced(backend.add(num1, num2), den, backend)

    def subtract(self, other: RationalOperand) -> Rational:
        """Return `self` - `other`."""
        other = _as_rational(other)
        backend = get_dflt_backend()
        num1 = backend.mul(self._numerator, other._denominator)
        num2 = backend.mul(other._numerator, self._denominator)
        den = backend.mul(self._denominator, other._denominator)
        return self._reduced(backend.sub(num1, num2), den, backend)

    def multiply(self, other: RationalOperand) -> Rational:
        """Return `self` * `other`."""
        other = _as_rational(other)
        backend = get_dflt_backend()
        num = backend.mul(self._numerator, other._numerator)
        den = backend.mul(self._denominator, other._denominator)
        return self._reduced(num, den, backend)

    def divide_by(self, other: RationalOperand) -> Rational:
        """Return `self` / `other`.

        Raises:
            DivisionByZero: `other` is zero
        """
        other = _as_rational(other)
        if other._numerator == 0:
            raise DivisionByZero("Cannot divide by zero.")
        return self.multiply(other.reciprocal())

    def divide_from(self, other: RationalOperand) -> Rational:
        """Return `other` / `self`.

        Raises:
            DivisionByZero: `self` is zero
        """
        other = _as_rational(other)
        if self._numerator == 0:
            raise DivisionByZero("Cannot divide by zero.")
        return other.multiply(self.reciprocal())

    def reciprocal(self) -> Rational:
        """Return 1 / `self`.

        Raises:
            DivisionByZero: `self` is zero
        """
        if self._numerator == 0:
            raise DivisionByZero("Cannot get reciprocal of zero.")
        return self._reduced(self._denominator, self._numerator,
                             get_dflt_backend())

    def negate(self) -> Rational:
        """Return -`self`."""
        backend = get_dflt_backend()
        return self._reduced(backend.neg(self._numerator), self._denominator,
                             backend)

    def abs(self) -> Rational:
        """Return |`self`|."""
        if self._numerator < 0:
            return self.negate()
        return self

    def increase_by_percentage(self, percentage: str) -> Rational:
        """Return `self` increased by `percentage`, e.g. "10%"."""
        return self.add(self.multiply(self.from_percentage(percentage)))

    def decrease_by_percentage(self, percentage: str) -> Rational:
        """Return `self` decreased by `percentage`, e.g. "25%"."""
        return self.subtract(self.multiply(self.from_percentage(percentage)))

    __add__, __radd__ = _operator_fallbacks(add, operator.add)
    __sub__, __rsub__ = _operator_fallbacks(subtract, operator.sub)
    __mul__, __rmul__ = _operator_fallbacks(multiply, operator.mul)
    __truediv__, __rtruediv__ = _operator_fallbacks(divide_by,
                                                    operator.truediv)

    def __pow__(self, exponent: Any) -> Rational:
        """self ** exponent"""
        if isinstance(exponent, numbers.Integral):
            return self.pow(int(exponent))
        if isinstance(exponent, Rational) and exponent.is_integer():
            return self.pow(exponent._numerator)
        return NotImplemented

    def __neg__(self) -> Rational:
        """-self"""
        return self.negate()

    def __pos__(self) -> Rational:
        """+self"""
        return self

    def __abs__(self) -> Rational:
        """abs(self)"""
        return self.abs()

    # comparison

    def compare(self, other: RationalOperand) -> int:
        """Return -1, 0 or 1 if `self` is less than, equal to or greater
        than `other`.

        Comparison is done by cross-multiplication with unbounded integers,
        so it can not overflow, even if `other` does not fit into the
        default backend.
        """
        if isinstance(other, Rational):
            num, den = other._numerator, other._denominator
        elif isinstance(other, numbers.Rational):
            num, den = other.numerator, other.denominator
        else:
            raise TypeError(f"Can't compare {self!r} to {other!r}.")
        left = self._numerator * den
        right = num * self._denominator
        return (left > right) - (left < right)

    def equals(self, other: RationalOperand) -> bool:
        """Return True if `self` == `other`."""
        return self.compare(other) == 0

    def is_greater_than(self, other: RationalOperand) -> bool:
        """Return True if `self` > `other`."""
        return self.compare(other) > 0

    def is_greater_or_equal(self, other: RationalOperand) -> bool:
        """Return True if `self` >= `other`."""
        return self.compare(other) >= 0

    def is_less_than(self, other: RationalOperand) -> bool:
        """Return True if `self` < `other`."""
        return self.compare(other) < 0

    def is_less_or_equal(self, other: RationalOperand) -> bool:
        """Return True if `self` <= `other`."""
        return self.compare(other) <= 0

    def min(self, other: RationalOperand) -> Rational:
        """Return the smaller one of `self` and `other` (`self` on ties)."""
        return self if self.compare(other) <= 0 else _as_rational(other)

    def max(self, other: RationalOperand) -> Rational:
        """Return the larger one of `self` and `other` (`self` on ties)."""
        return self if self.compare(other) >= 0 else _as_rational(other)

    def _richcmp(self, other: Any, op: Callable[[Any, Any], bool]):
        if isinstance(other, Rational):
            return op(self.compare(other), 0)
        if isinstance(other, (numbers.Number, Decimal)):
            # int, Fraction, float, complex and Decimal know how to compare
            # themselves to a Fraction
            return op(self.as_fraction(), other)
        return NotImplemented

    def __eq__(self, other: Any) -> bool:
        """self == other"""
        if isinstance(other, Rational):
            return (self._numerator == other._numerator and
                    self._denominator == other._denominator)
        return self._richcmp(other, operator.eq)

    def __lt__(self, other: Any) -> bool:
        """self < other"""
        return self._richcmp(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        """self <= other"""
        return self._richcmp(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        """self > other"""
        return self._richcmp(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        """self >= other"""
        return self._richcmp(other, operator.ge)

    def __hash__(self) -> int:
        """hash(self)"""
        # must be equal to the hash of equal ints, floats and Fractions
        return hash(self.as_fraction())

    # rounding and approximation

    def round(self, denominator: int = 1) -> Rational:
        """Return `self` rounded to the nearest multiple of 1/`denominator`.

        Ties are rounded away from zero. The result is reduced, so its
        denominator may be a divisor of `denominator`:

        >>> Rational.from_float(12.3456).round(100)
        Rational(247, 20)

        Raises:
            TypeError: `denominator` is not an int
            InvalidArgument: `denominator` <= 0
        """
        if not isinstance(denominator, numbers.Integral):
            raise TypeError(f"{denominator!r} is not an int.")
        denominator = int(denominator)
        if denominator <= 0:
            raise InvalidArgument("Denominator must be greater than zero.")
        backend = get_dflt_backend()
        backend.check(denominator, "denominator")
        num = div_rounded(self._numerator * denominator, self._denominator,
                          Rounding.ROUND_HALF_UP)
        backend.check(num, "numerator")
        return self._reduced(num, denominator, backend)

    def floor(self) -> Rational:
        """Return the largest integral Rational <= `self`."""
        return self._new(self._numerator // self._denominator, 1)

    def ceil(self) -> Rational:
        """Return the smallest integral Rational >= `self`."""
        return self._new(-(-self._numerator // self._denominator), 1)

    def pow(self, exponent: int) -> Rational:
        """Return `self` raised to the power of `exponent`.

        `x.pow(0)` is 1 for all x (including zero). A negative exponent
        gives the power of the reciprocal.

        Raises:
            TypeError: `exponent` is not an int
            DivisionByZero: `self` is zero and `exponent` is negative
            IntegerOverflow: the result does not fit into the default
                integer backend
        """
        if not isinstance(exponent, numbers.Integral):
            raise TypeError(f"{exponent!r} is not an int.")
        exponent = int(exponent)
        if exponent < 0:
            return self.reciprocal().pow(-exponent)
        backend = get_dflt_backend()
        base_num, base_den = self._numerator, self._denominator
        num, den = 1, 1
        while exponent:
            if exponent & 1:
                num = backend.mul(num, base_num)
                den = backend.mul(den, base_den)
            exponent >>= 1
            if exponent:
                base_num = backend.mul(base_num, base_num)
                base_den = backend.mul(base_den, base_den)
        return self._reduced(num, den, backend)

    def sqrt(self, iterations: int = 10) -> Rational:
        """Return an approximation of the square root of `self`.

        The approximation is computed by exactly `iterations` steps of
        Newton's method, starting with `self`. Numerator and denominator
        roughly double their number of digits with each step, so with a
        fixed-width backend only a few iterations are possible before an
        IntegerOverflow is raised.

        Raises:
            NegativeRoot: `self` < 0
            InvalidArgument: `iterations` < 0
            IntegerOverflow: an intermediate result does not fit into the
                default integer backend
        """
        if self._numerator < 0:
            raise NegativeRoot("Cannot calculate square root of a negative "
                               "number.")
        if not isinstance(iterations, numbers.Integral):
            raise TypeError(f"{iterations!r} is not an int.")
        if iterations < 0:
            raise InvalidArgument("Number of iterations must not be "
                                  "negative.")
        if self._numerator == 0:
            return self.zero()
        two = self._new(2, 1)
        guess = self
        for _ in range(iterations):
            guess = guess.add(self.divide_by(guess)).divide_by(two)
        return guess

    def quantize(self, quant: Any,
                 rounding: Optional[Rounding] = None) -> Rational:
        """Return integer multiple of `quant` closest to `self`.

        Args:
            quant (Rational, numbers.Rational, Decimal or float): quantum
                to get a multiple from
            rounding (Rounding): rounding mode (default: None)

        If no `rounding` mode is given, the default mode from the current
        context (from module `rationalnum.rounding`) is used.

        Raises:
            TypeError: `quant` is not a supported number
            InvalidArgument: `quant` is zero, infinite or NaN
        """
        if isinstance(quant, (Rational, numbers.Rational, float, Decimal)):
            quant = Rational(quant)
        else:
            raise TypeError(f"Can't quantize to a {type(quant)}.")
        if quant._numerator == 0:
            raise InvalidArgument("Quantum must not be zero.")
        quot = self.divide_by(quant)
        return quant.multiply(
            div_rounded(quot._numerator, quot._denominator, rounding))

    def adjusted(self, precision: int = 0,
                 rounding: Optional[Rounding] = None) -> Rational:
        """Return `self` rounded to `precision` fractional decimal digits.

        A negative `precision` rounds to tens, hundreds, etc.

        If no `rounding` mode is given, the default mode from the current
        context (from module `rationalnum.rounding`) is used.

        Raises:
            TypeError: `precision` is not an int
        """
        if not isinstance(precision, int):
            raise TypeError("Precision must be of type 'int'.")
        if precision >= 0:
            quant = Rational(1, 10 ** precision)
        else:
            quant = Rational(10 ** -precision)
        return self.quantize(quant, rounding)

    def __round__(self, ndigits: Optional[int] = None) \
            -> Union[int, Rational]:
        """round(self [, ndigits])

        Round `self` to a given precision in decimal digits (default 0),
        using the default rounding mode. `ndigits` may be negative.

        If `ndigits` is None, an int is returned, otherwise a Rational.
        """
        if ndigits is None:
            return div_rounded(self._numerator, self._denominator)
        return self.adjusted(ndigits)

    def __floor__(self) -> int:
        """math.floor(self)"""
        return self._numerator // self._denominator

    def __ceil__(self) -> int:
        """math.ceil(self)"""
        return -(-self._numerator // self._denominator)

    def __trunc__(self) -> int:
        """math.trunc(self)"""
        return div_rounded(self._numerator, self._denominator,
                           Rounding.ROUND_DOWN)

    # conversion

    __int__ = __trunc__

    def __float__(self) -> float:
        """float(self)"""
        return self._numerator / self._denominator

    def __bool__(self) -> bool:
        """bool(self)"""
        return self._numerator != 0

    def as_fraction(self) -> Fraction:
        """Return `self` as a Fraction."""
        return Fraction(self._numerator, self._denominator)

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Return the pair (numerator, denominator) of `self`."""
        return self._numerator, self._denominator

    def as_dict(self) -> Dict[str, int]:
        """Return {'numerator': ..., 'denominator': ...}."""
        return {'numerator': self._numerator,
                'denominator': self._denominator}

    def to_json(self) -> str:
        """Return `self` as JSON object (see `as_dict`)."""
        return json.dumps(self.as_dict())

    def to_percentage(self, decimal_places: int = 2) -> str:
        """Return `self` formatted as percentage, e.g. "1,250.00%".

        The value is converted to float, so this is meant for display
        only.
        """
        if not isinstance(decimal_places, int) or decimal_places < 0:
            raise InvalidArgument("Decimal places must be an int >= 0.")
        return f"{float(self) * 100:,.{decimal_places}f}%"

    def __str__(self) -> str:
        """str(self)"""
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        """repr(self)"""
        cls_name = self.__class__.__name__
        if self._denominator == 1:
            return f"{cls_name}({self._numerator})"
        return f"{cls_name}({self._numerator}, {self._denominator})"

    # immutability

    def __copy__(self) -> Rational:
        """copy.copy(self)"""
        return self

    def __deepcopy__(self, memo: Any) -> Rational:
        """copy.deepcopy(self)"""
        return self

    def __reduce__(self) -> Tuple[Any, ...]:
        """Support for pickling."""
        return self.__class__, (self._numerator, self._denominator)
