"""
Small helpers for consuming lazy sequences.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeGuard, TypeVar, overload

from cellnav.core.errors import PreconditionError

T = TypeVar("T")
U = TypeVar("U")
G = TypeVar("G")


def map_sequence(sequence: Iterable[T], fn: Callable[[T], U]) -> Iterator[U]:
    for value in sequence:
        yield fn(value)


@overload
def filter_sequence(sequence: Iterable[T], predicate: Callable[[T], TypeGuard[G]]) -> Iterator[G]: ...


@overload
def filter_sequence(sequence: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[T]: ...


def filter_sequence(sequence, predicate):
    """Keep the elements matching ``predicate``, in order.

    A ``TypeGuard`` predicate narrows the element type of the result.
    """
    for value in sequence:
        if predicate(value):
            yield value


def nth(sequence: Iterable[T], n: int) -> T | None:
    """
    The ``n``-th element (0-indexed) of a lazy sequence.

    Consumes up to and including that element. Returns None when the
    sequence ends first.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    for position, value in enumerate(sequence):
        if position == n:
            return value
    return None


def skip_until(sequence: Iterable[T], target: T) -> Iterator[T]:
    """
    Drop elements until one equal to ``target``, then yield it and the rest.

    Linear rescan of the sequence; fine for notebook-sized trees.
    """
    iterator = iter(sequence)
    for value in iterator:
        if value == target:
            yield value
            yield from iterator
            return


def is_present(value: T | None) -> TypeGuard[T]:
    return value is not None


def require_non_null(value: T | None, what: str = "value") -> T:
    """Return ``value``, raising PreconditionError if it is None."""
    if value is None:
        raise PreconditionError(f"Expected a {what}, but got None")
    return value
