# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Integer backends for rational number arithmetic.

A backend performs the integer operations from which numerators and
denominators are built. `CheckedIntBackend` emulates a fixed-width signed
integer and raises `IntegerOverflow` instead of wrapping around,
`BigIntBackend` uses Python's unbounded integers.

The backend used by default is held in a context variable, so it can be
changed per thread or per task without affecting others.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Dict, Iterator, Union

from .exceptions import IntegerOverflow


__all__ = [
    'IntegerBackend',
    'CheckedIntBackend',
    'BigIntBackend',
    'INT64',
    'BIGINT',
    'get_backend',
    'get_dflt_backend',
    'set_dflt_backend',
    'localbackend',
]

logger = logging.getLogger(__name__)


class IntegerBackend:
    """Arithmetic contract shared by all integer backends."""

    name: str = ''

    def check(self, value: int, what: str = "value") -> int:
        """Return `value` if representable, else raise IntegerOverflow."""
        return value

    def add(self, a: int, b: int) -> int:
        """a + b"""
        return a + b

    def sub(self, a: int, b: int) -> int:
        """a - b"""
        return a - b

    def mul(self, a: int, b: int) -> int:
        """a * b"""
        return a * b

    def neg(self, a: int) -> int:
        """-a"""
        return -a

    def __repr__(self) -> str:
        """repr(self)"""
        return f"{self.__class__.__name__}()"


class BigIntBackend(IntegerBackend):
    """Unbounded integers; never overflows."""

    name = 'bigint'


class CheckedIntBackend(IntegerBackend):
    """Signed integers of fixed width `bits`, checked for overflow.

    Every operation tests whether its result is representable *before*
    computing it and raises `IntegerOverflow` if it is not.
    """

    def __init__(self, bits: int = 64) -> None:
        if not isinstance(bits, int):
            raise TypeError(f"'bits' must be an int, not {type(bits)}.")
        if bits < 2:
            raise ValueError(f"'bits' must be >= 2, got {bits}.")
        self.bits = bits
        self.max_value = 2 ** (bits - 1) - 1
        self.min_value = -2 ** (bits - 1)
        self.name = f"int{bits}"

    def _overflow(self, msg: str) -> IntegerOverflow:
        logger.debug("%s: %s", self.name, msg)
        return IntegerOverflow(msg, self.name)

    def check(self, value: int, what: str = "value") -> int:
        """Return `value` if representable, else raise IntegerOverflow."""
        if not self.min_value <= value <= self.max_value:
            raise self._overflow(f"Integer overflow: {what} {value} does not "
                                 f"fit into {self.bits} bits.")
        return value

    def add(self, a: int, b: int) -> int:
        """a + b"""
        if (b > 0 and a > self.max_value - b) or \
                (b < 0 and a < self.min_value - b):
            raise self._overflow(f"Integer overflow in addition: {a} + {b}.")
        return a + b

    def sub(self, a: int, b: int) -> int:
        """a - b"""
        if (b < 0 and a > self.max_value + b) or \
                (b > 0 and a < self.min_value + b):
            raise self._overflow(f"Integer overflow in subtraction: "
                                 f"{a} - {b}.")
        return a - b

    def mul(self, a: int, b: int) -> int:
        """a * b"""
        limit = self.max_value if (a < 0) == (b < 0) else -self.min_value
        if a and b and abs(a) > limit // abs(b):
            raise self._overflow(f"Integer overflow in multiplication: "
                                 f"{a} * {b}.")
        return a * b

    def neg(self, a: int) -> int:
        """-a"""
        if a < -self.max_value:
            raise self._overflow(f"Integer overflow in negation: -({a}).")
        return -a

    def __repr__(self) -> str:
        """repr(self)"""
        return f"{self.__class__.__name__}(bits={self.bits})"


INT64 = CheckedIntBackend(64)
BIGINT = BigIntBackend()

_backends: Dict[str, IntegerBackend] = {
    INT64.name: INT64,
    BIGINT.name: BIGINT,
}

BackendSpec = Union[IntegerBackend, str]


def get_backend(backend: BackendSpec) -> IntegerBackend:
    """Return the backend given by instance or by name.

    Raises:
        TypeError: `backend` is neither a backend nor a str
        ValueError: there is no backend with the given name
    """
    if isinstance(backend, IntegerBackend):
        return backend
    if isinstance(backend, str):
        try:
            return _backends[backend]
        except KeyError:
            raise ValueError(f"Unknown integer backend: {backend!r}") \
                from None
    raise TypeError(f"Illegal integer backend: {backend!r}")


_dflt_backend: ContextVar[IntegerBackend] = \
    ContextVar("dflt_backend", default=INT64)


def get_dflt_backend() -> IntegerBackend:
    """Return default integer backend."""
    return _dflt_backend.get()


def set_dflt_backend(backend: BackendSpec) -> Token:
    """Set default integer backend.

    Args:
        backend (IntegerBackend or str): backend (or its name) to be set as
            default

    Returns:
        Token which can be used to restore the previous default via
        `ContextVar.reset`.

    Raises:
        TypeError: given 'backend' is not a valid backend
        ValueError: there is no backend with the given name
    """
    backend = get_backend(backend)
    logger.debug("Default integer backend set to %r.", backend)
    return _dflt_backend.set(backend)


@contextmanager
def localbackend(backend: BackendSpec) -> Iterator[IntegerBackend]:
    """Use `backend` as default integer backend inside a with-statement."""
    token = set_dflt_backend(backend)
    try:
        yield _dflt_backend.get()
    finally:
        _dflt_backend.reset(token)
