"""
Writable key paths: a get/set pair focusing on one part of a product value.

Setters are pure. ``set(root, value)`` returns an updated root and leaves the
argument alone, so frozen dataclasses and tuples work as roots::

    location = FieldAccessor(
        get=attrgetter('location'),
        set=lambda user, location: replace(user, location=location),
    )
    city = FieldAccessor(
        get=attrgetter('city'),
        set=lambda location, city: replace(location, city=city),
    )
    location >> city  # FieldAccessor[User, str]

Nothing checks the lens laws at construction. An accessor that breaks them
silently round-trips inconsistently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from casepaths.fn import UNIT, Unit, compose, identity


logger = logging.getLogger(__name__)

Root = TypeVar('Root')
Value = TypeVar('Value')
Inner = TypeVar('Inner')
Other = TypeVar('Other')
Action = TypeVar('Action')

Reducer = Callable[[Root, Action], Root]


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                       Key Path                           ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


@dataclass(frozen=True)
class FieldAccessor(Generic[Root, Value]):
    get: Callable[[Root], Value]
    set: Callable[[Root, Value], Root]

    @classmethod
    def identity(cls) -> FieldAccessor[Root, Root]:
        """The accessor focusing on the whole value."""
        return cls(get=identity, set=_replace_whole)

    @classmethod
    def void(cls) -> FieldAccessor[Root, Unit]:
        """The accessor focusing on no part of the value."""
        return cls(get=_unit, set=_ignore)

    def appending(self, path: FieldAccessor[Value, Inner]) -> FieldAccessor[Root, Inner]:
        """
        Focus on ``path`` inside the value this accessor focuses on.

        The setter reads the intermediate value, updates it through ``path``
        and writes it back, so siblings of the inner field survive.
        """
        logger.debug('appending key path %r to %r', path, self)

        def set_(root: Root, inner: Inner) -> Root:
            return self.set(root, path.set(self.get(root), inner))

        return FieldAccessor(get=compose(path.get, self.get), set=set_)

    def pair(self, path: FieldAccessor[Value, Other]) -> FieldAccessor[Root, tuple[Value, Other]]:
        """
        Focus on the value and one of its own fields at the same time.

        Setting ``(value, other)`` writes ``value`` first and then overwrites
        its field with ``other``.
        """
        return pair(self, self.appending(path))

    def modify(self, root: Root, f: Callable[[Value], Value]) -> Root:
        return self.set(root, f(self.get(root)))

    def __rshift__(self, path: FieldAccessor[Value, Inner]) -> FieldAccessor[Root, Inner]:
        return self.appending(path)


def _replace_whole(root, value):
    return value


def _unit(root) -> Unit:
    return UNIT


def _ignore(root, value):
    return root


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                       Combinators                        ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def pair(
    lhs: FieldAccessor[Root, Value], rhs: FieldAccessor[Root, Other]
) -> FieldAccessor[Root, tuple[Value, Other]]:
    """
    Combine two accessors on the same root into one focusing on a tuple.

    The setter writes through ``lhs`` and then ``rhs``. If their focal regions
    overlap, ``rhs`` wins.
    """
    logger.debug('pairing key paths %r and %r', lhs, rhs)

    def get(root: Root) -> tuple[Value, Other]:
        return lhs.get(root), rhs.get(root)

    def set_(root: Root, values: tuple[Value, Other]) -> Root:
        value, other = values
        return rhs.set(lhs.set(root, value), other)

    return FieldAccessor(get=get, set=set_)


def over(path: FieldAccessor[Root, Value], f: Callable[[Value], Value]) -> Callable[[Root], Root]:
    def inner(root: Root) -> Root:
        return path.modify(root, f)

    return inner


def getter(path: FieldAccessor[Root, Value]) -> Callable[[Root], Value]:
    return path.get


def pullback(
    reducer: Reducer[Value, Action], path: FieldAccessor[Root, Value]
) -> Reducer[Root, Action]:
    """Run a reducer over local state on the part of global state ``path`` focuses on."""

    def inner(root: Root, action: Action) -> Root:
        return path.set(root, reducer(path.get(root), action))

    return inner
