# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Ordered collection of rational numbers with exact aggregates."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Callable, Iterable, Iterator, List, Union, overload

from .exceptions import IndexOutOfBounds, InvalidArgument
from .rational import Rational


__all__ = [
    'RationalCollection',
]


def _checked(value: Any) -> Rational:
    if not isinstance(value, Rational):
        raise TypeError(f"Value must be a Rational instance, not "
                        f"{type(value)}.")
    return value


class RationalCollection(MutableSequence):
    """Mutable sequence of Rational instances.

    Args:
        numbers (Iterable[Rational]): initial elements (default: empty)

    Aggregates (`sum`, `average`, `min`, `max`) are computed exactly;
    `map` and `filter` return new collections and leave `self` unchanged.

    A collection is not meant to be mutated concurrently from several
    threads.

    Raises:
        TypeError: an element is not a Rational
    """

    __slots__ = ('_numbers',)

    def __init__(self, numbers: Iterable[Rational] = ()) -> None:
        self._numbers: List[Rational] = [_checked(n) for n in numbers]

    def _check_index(self, index: int) -> int:
        if not -len(self._numbers) <= index < len(self._numbers):
            raise IndexOutOfBounds(f"Index {index} is out of bounds.")
        return index

    def get(self, index: int) -> Rational:
        """Return the element at position `index`.

        Raises:
            IndexOutOfBounds: `index` is out of range
        """
        return self._numbers[self._check_index(index)]

    @overload
    def __getitem__(self, index: int) -> Rational:
        ...

    @overload
    def __getitem__(self, index: slice) -> RationalCollection:
        ...

    def __getitem__(self, index: Union[int, slice]) \
            -> Union[Rational, RationalCollection]:
        """self[index]"""
        if isinstance(index, slice):
            return self.__class__(self._numbers[index])
        return self.get(index)

    @overload
    def __setitem__(self, index: int, value: Rational) -> None:
        ...

    @overload
    def __setitem__(self, index: slice, value: Iterable[Rational]) -> None:
        ...

    def __setitem__(self, index: Union[int, slice],
                    value: Union[Rational, Iterable[Rational]]) -> None:
        """self[index] = value"""
        if isinstance(index, slice):
            self._numbers[index] = [_checked(n) for n in value]
        else:
            self._numbers[self._check_index(index)] = _checked(value)

    def __delitem__(self, index: Union[int, slice]) -> None:
        """del self[index]"""
        if isinstance(index, slice):
            del self._numbers[index]
        else:
            del self._numbers[self._check_index(index)]

    def __len__(self) -> int:
        """len(self)"""
        return len(self._numbers)

    def __iter__(self) -> Iterator[Rational]:
        """iter(self)"""
        return iter(self._numbers)

    def insert(self, index: int, value: Rational) -> None:
        """Insert `value` before position `index`."""
        self._numbers.insert(index, _checked(value))

    def append(self, value: Rational) -> None:
        """Append `value` to the end of the collection."""
        self._numbers.append(_checked(value))

    def clear(self) -> None:
        """Remove all elements."""
        self._numbers.clear()

    def is_empty(self) -> bool:
        """Return True if the collection has no elements."""
        return not self._numbers

    def to_list(self) -> List[Rational]:
        """Return a list of the elements."""
        return list(self._numbers)

    def sum(self) -> Rational:
        """Return the sum of all elements (zero for an empty collection)."""
        total = Rational.zero()
        for number in self._numbers:
            total = total.add(number)
        return total

    def average(self) -> Rational:
        """Return the arithmetic mean of all elements.

        Raises:
            InvalidArgument: the collection is empty
        """
        if not self._numbers:
            raise InvalidArgument("Cannot calculate average of an empty "
                                  "collection.")
        return self.sum().divide_by(len(self._numbers))

    def min(self) -> Rational:
        """Return the smallest element (the first one on ties).

        Raises:
            InvalidArgument: the collection is empty
        """
        if not self._numbers:
            raise InvalidArgument("Cannot find minimum of an empty "
                                  "collection.")
        it = iter(self._numbers)
        result = next(it)
        for number in it:
            if number.is_less_than(result):
                result = number
        return result

    def max(self) -> Rational:
        """Return the largest element (the first one on ties).

        Raises:
            InvalidArgument: the collection is empty
        """
        if not self._numbers:
            raise InvalidArgument("Cannot find maximum of an empty "
                                  "collection.")
        it = iter(self._numbers)
        result = next(it)
        for number in it:
            if number.is_greater_than(result):
                result = number
        return result

    def map(self, transform: Callable[[Rational], Rational]) \
            -> RationalCollection:
        """Return new collection of `transform` applied to each element."""
        return self.__class__(transform(n) for n in self._numbers)

    def filter(self, predicate: Callable[[Rational], bool]) \
            -> RationalCollection:
        """Return new collection of the elements satisfying `predicate`."""
        return self.__class__(n for n in self._numbers if predicate(n))

    def __eq__(self, other: Any) -> bool:
        """self == other"""
        if isinstance(other, RationalCollection):
            return self._numbers == other._numbers
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        """repr(self)"""
        return f"{self.__class__.__name__}({self._numbers!r})"
