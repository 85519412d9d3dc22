# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Conversion of floats and strings into integer ratios.

The functions in this module return (numerator, denominator) pairs which are
not necessarily reduced; reduction is up to the caller.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Tuple

from .backends import IntegerBackend
from .exceptions import IntegerOverflow, InvalidArgument
from .rounding import Rounding, div_rounded


__all__ = [
    'MAX_SIGNIFICANT_DIGITS',
    'float_to_ratio',
    'str_to_ratio',
    'percentage_to_float',
    'int_from_field',
]

logger = logging.getLogger(__name__)

# floats carry at most 15 reliable significant decimal digits
MAX_SIGNIFICANT_DIGITS = 15

_FRACTION = re.compile(r'([+-]?\d+)\s*/\s*([+-]?\d+)', re.ASCII)
_INTEGER = re.compile(r'[+-]?\d+', re.ASCII)
_NUMERIC = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?',
                      re.ASCII)
# digits grouped by thousands, e.g. "1,250.5"
_THOUSANDS = re.compile(r'[+-]?\d{1,3}(?:,\d{3})+(?:\.\d*)?', re.ASCII)
# format of repr(float) for finite values
_FLOAT_REPR = re.compile(r'(-?)(\d+)(?:\.(\d+))?(?:e([+-]\d+))?')

Ratio = Tuple[int, int]


def float_to_ratio(value: float, backend: IntegerBackend) -> Ratio:
    """Return integer ratio equal to the decimal representation of `value`.

    Integral values are converted directly. For all other values the
    shortest decimal string that round-trips to `value` (i.e. `repr(value)`)
    is taken as the intended value, so that `0.1` becomes 1/10 instead of
    the binary approximation 3602879701896397/36028797018963968. At most
    `MAX_SIGNIFICANT_DIGITS` significant digits are kept.

    Raises:
        InvalidArgument: `value` is infinite or NaN
        IntegerOverflow: numerator or denominator do not fit into `backend`
    """
    if not math.isfinite(value):
        raise InvalidArgument(
            f"Cannot convert {value!r} to a rational number.")
    if value == int(value):
        return backend.check(int(value), "numerator"), 1
    sign, int_digits, frac_digits, exp = \
        _FLOAT_REPR.fullmatch(repr(float(value))).groups()
    frac_digits = frac_digits or ''
    coeff = int(int_digits + frac_digits)
    exp = int(exp or 0) - len(frac_digits)
    n_digits = len(str(coeff))
    if n_digits > MAX_SIGNIFICANT_DIGITS:
        shift = n_digits - MAX_SIGNIFICANT_DIGITS
        logger.debug("Precision of %r clamped to %i significant digits.",
                     value, MAX_SIGNIFICANT_DIGITS)
        coeff = div_rounded(coeff, 10 ** shift, Rounding.ROUND_HALF_UP)
        exp += shift
    if sign:
        coeff = -coeff
    if exp >= 0:
        scale = backend.check(10 ** exp, "power of ten")
        return backend.mul(coeff, scale), 1
    return coeff, backend.check(10 ** -exp, "denominator")


def str_to_ratio(text: str, backend: IntegerBackend) -> Ratio:
    """Return integer ratio parsed from `text`.

    Accepted formats (surrounding whitespace is ignored):

    * a fraction: [sign]digits [ws] / [ws] [sign]digits
    * an integer: [sign]digits
    * a decimal number, optionally in scientific notation, which is
      converted via `float_to_ratio`

    A zero denominator is not rejected here.

    Raises:
        InvalidArgument: `text` is empty or has an invalid format
        IntegerOverflow: numerator or denominator do not fit into `backend`
    """
    s = text.strip()
    if not s:
        raise InvalidArgument("Cannot convert an empty string to a rational "
                              "number.")
    match = _FRACTION.fullmatch(s)
    if match:
        try:
            return (backend.check(int(match[1]), "numerator"),
                    backend.check(int(match[2]), "denominator"))
        except IntegerOverflow as exc:
            raise IntegerOverflow(
                f"Integer overflow in fraction string {text!r}.",
                backend.name) from exc
    if _INTEGER.fullmatch(s):
        return backend.check(int(s), "numerator"), 1
    if _NUMERIC.fullmatch(s):
        return float_to_ratio(float(s), backend)
    raise InvalidArgument(f"Invalid number format: {text!r}.")


def percentage_to_float(percentage: str) -> float:
    """Return the fraction denoted by `percentage` as float.

    `percentage` is a number, optionally followed by '%' and optionally
    using ',' as thousands separator, e.g. "12.5%" or "1,250%". Commas
    are only accepted between groups of three digits.

    Raises:
        InvalidArgument: `percentage` has an invalid format
    """
    s = percentage.strip()
    if s.endswith('%'):
        s = s[:-1].rstrip()
    if ',' in s:
        if not _THOUSANDS.fullmatch(s):
            raise InvalidArgument(
                f"Invalid percentage format: {percentage!r}.")
        s = s.replace(',', '')
    if not _NUMERIC.fullmatch(s):
        raise InvalidArgument(f"Invalid percentage format: {percentage!r}.")
    return float(s) / 100


def int_from_field(value: Any, field: str) -> int:
    """Return `value` (a field of a serialized rational number) as int.

    Accepted are ints, integral floats and strings of decimal digits with
    optional sign.

    Raises:
        InvalidArgument: `value` is not integral
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INTEGER.fullmatch(value.strip()):
        return int(value)
    raise InvalidArgument(f"{field} must be an integer or numeric value.")
