# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Exact rational number arithmetic with overflow-checked integers."""

import logging

from .backends import (
    BIGINT, INT64, BigIntBackend, CheckedIntBackend, IntegerBackend,
    get_dflt_backend, localbackend, set_dflt_backend)
from .collection import RationalCollection
from .exceptions import (
    DivisionByZero, DomainError, IndexOutOfBounds, IntegerOverflow,
    InvalidArgument, NegativeRoot, RationalError)
from .rational import Rational, normalize
from .rounding import Rounding, get_dflt_rounding_mode, set_dflt_rounding_mode
from .version import version as __version__  # noqa: F401

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define public namespace
__all__ = [
    'Rational',
    'RationalCollection',
    'normalize',
    'Rounding',
    'get_dflt_rounding_mode',
    'set_dflt_rounding_mode',
    'IntegerBackend',
    'CheckedIntBackend',
    'BigIntBackend',
    'INT64',
    'BIGINT',
    'get_dflt_backend',
    'set_dflt_backend',
    'localbackend',
    'RationalError',
    'InvalidArgument',
    'IndexOutOfBounds',
    'DomainError',
    'DivisionByZero',
    'NegativeRoot',
    'IntegerOverflow',
]
