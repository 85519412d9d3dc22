# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Exceptions raised by rational number arithmetic.

Each exception also derives from the builtin exception a caller would
naturally expect (ValueError, ZeroDivisionError, OverflowError, ...), so
that code written against plain Python numbers keeps working.
"""


__all__ = [
    'RationalError',
    'InvalidArgument',
    'IndexOutOfBounds',
    'DomainError',
    'DivisionByZero',
    'NegativeRoot',
    'IntegerOverflow',
]


class RationalError(ArithmeticError):
    """Base class of all exceptions raised by package 'rationalnum'."""


class InvalidArgument(RationalError, ValueError):
    """An argument has the right type but an inappropriate value."""


class IndexOutOfBounds(InvalidArgument, IndexError):
    """A collection index is out of range."""


class DomainError(RationalError):
    """An operation is mathematically undefined for its operand(s)."""


class DivisionByZero(DomainError, ZeroDivisionError):
    """Division by zero or reciprocal of zero."""


class NegativeRoot(DomainError, ValueError):
    """Square root of a negative number."""


class IntegerOverflow(RationalError, OverflowError):
    """A component of a result exceeds the width of the integer backend."""

    def __init__(self, msg: str, backend_name: str = '') -> None:
        if backend_name:
            msg = (f"{msg} (backend '{backend_name}'; use the 'bigint' "
                   "backend for arbitrary precision)")
        super().__init__(msg)
        self.backend_name = backend_name
