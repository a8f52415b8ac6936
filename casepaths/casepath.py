"""
Case paths: an extract/embed pair focusing on one alternative of a sum value.

``extract`` answers ``Just(payload)`` when the root is the focused alternative
and ``Nothing`` otherwise. ``embed`` always builds a root in that alternative.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, Never, TypeVar

from casepaths.fn import Either, Just, Left, Maybe, Nothing, Right, absurd, identity


logger = logging.getLogger(__name__)

Root = TypeVar('Root')
Value = TypeVar('Value')
Inner = TypeVar('Inner')
Other = TypeVar('Other')


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                       Case Path                          ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


@dataclass(frozen=True)
class CaseAccessor(Generic[Root, Value]):
    extract: Callable[[Root], Maybe[Value]]
    embed: Callable[[Value], Root]

    @classmethod
    def identity(cls) -> CaseAccessor[Root, Root]:
        """The case path matching every value as itself."""
        return cls(extract=Just, embed=identity)

    @classmethod
    def never(cls) -> CaseAccessor[Root, Never]:
        """
        The case path matching no value at all.

        Its embed takes the uninhabited type, so it cannot be called with a
        well-typed argument.
        """
        return cls(extract=_no_match, embed=absurd)

    def appending(self, path: CaseAccessor[Value, Inner]) -> CaseAccessor[Root, Inner]:
        logger.debug('appending case path %r to %r', path, self)

        def extract(root: Root) -> Maybe[Inner]:
            return self.extract(root).flatmap(path.extract)

        def embed(inner: Inner) -> Root:
            return self.embed(path.embed(inner))

        return CaseAccessor(extract=extract, embed=embed)

    def either(self, other: CaseAccessor[Root, Other]) -> CaseAccessor[Root, Either[Value, Other]]:
        return either(self, other)

    def matches(self, root: Root) -> bool:
        return self.extract(root).is_present()

    def __rshift__(self, path: CaseAccessor[Value, Inner]) -> CaseAccessor[Root, Inner]:
        return self.appending(path)


def _no_match(root) -> Maybe[Never]:
    return Nothing


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                       Combinators                        ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def either(
    lhs: CaseAccessor[Root, Value], rhs: CaseAccessor[Root, Other]
) -> CaseAccessor[Root, Either[Value, Other]]:
    """
    Focus on whichever of two alternatives a root is in.

    A match on ``lhs`` comes back as ``Left`` and ``rhs`` is not consulted. The
    two alternatives must be disjoint: whatever ``lhs`` matches is unreachable
    through ``rhs``.
    """
    logger.debug('combining case paths %r and %r', lhs, rhs)

    def extract(root: Root) -> Maybe[Either[Value, Other]]:
        left = lhs.extract(root)
        if left.is_present():
            return left.map(Left)
        return rhs.extract(root).map(Right)

    def embed(value: Either[Value, Other]) -> Root:
        return value.fold(lhs.embed, rhs.embed)

    return CaseAccessor(extract=extract, embed=embed)


def extractor(path: CaseAccessor[Root, Value]) -> Callable[[Root], Maybe[Value]]:
    return path.extract


def compact_map(path: CaseAccessor[Root, Value], roots: Iterable[Root]) -> Iterator[Value]:
    """Yield the payload of every root ``path`` matches, skipping the rest."""
    for match in map(path.extract, roots):
        if isinstance(match, Just):
            yield match.value
