"""
Ready-made case paths for values that are not enums but still have "cases".

``int_from_string``, ``uuid_from_string``, ``literal``, ``raw_value`` and the
``Either`` paths obey both prism laws. ``first``, ``first_where`` and ``key``
only obey ``extract(embed(v)) == Just(v)``: embedding builds the smallest
container holding the value, not the one it was extracted from.
"""

from enum import Enum
from typing import Any, Callable, TypeVar
from uuid import UUID

from casepaths.casepath import CaseAccessor
from casepaths.fn import UNIT, Either, Just, Left, Maybe, Nothing, Right, Unit


A = TypeVar('A')
B = TypeVar('B')
K = TypeVar('K')
V = TypeVar('V')
E = TypeVar('E', bound=Enum)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                         Strings                          ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def _parse_int(string: str) -> Maybe[int]:
    try:
        number = int(string)
    except ValueError:
        return Nothing
    # Only canonical spellings match so that embed gives back the same string
    return Just(number) if str(number) == string else Nothing


def _parse_uuid(string: str) -> Maybe[UUID]:
    try:
        uuid = UUID(string)
    except ValueError:
        return Nothing
    return Just(uuid) if str(uuid) == string else Nothing


int_from_string: CaseAccessor[str, int] = CaseAccessor(extract=_parse_int, embed=str)
uuid_from_string: CaseAccessor[str, UUID] = CaseAccessor(extract=_parse_uuid, embed=str)


def literal(expected: str) -> CaseAccessor[str, Unit]:
    """Match exactly ``expected``. The match carries no payload."""

    def extract(string: str) -> Maybe[Unit]:
        return Just(UNIT) if string == expected else Nothing

    def embed(unit: Unit) -> str:
        return expected

    return CaseAccessor(extract=extract, embed=embed)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                       Containers                         ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def _singleton(value: A) -> list[A]:
    return [value]


def first_where(predicate: Callable[[A], bool]) -> CaseAccessor[list[A], A]:
    def extract(values: list[A]) -> Maybe[A]:
        for value in values:
            if predicate(value):
                return Just(value)
        return Nothing

    return CaseAccessor(extract=extract, embed=_singleton)


def _head(values: list[Any]) -> Maybe[Any]:
    return Just(values[0]) if values else Nothing


first: CaseAccessor[list[Any], Any] = CaseAccessor(extract=_head, embed=_singleton)


def key(k: K) -> CaseAccessor[dict[K, V], V]:
    def extract(mapping: dict[K, V]) -> Maybe[V]:
        return Just(mapping[k]) if k in mapping else Nothing

    def embed(value: V) -> dict[K, V]:
        return {k: value}

    return CaseAccessor(extract=extract, embed=embed)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                        Variants                          ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def raw_value(enum: type[E]) -> CaseAccessor[Any, E]:
    """Match raw values that name a member of ``enum``."""

    def extract(raw: Any) -> Maybe[E]:
        try:
            return Just(enum(raw))
        except ValueError:
            return Nothing

    def embed(member: E) -> Any:
        return member.value

    return CaseAccessor(extract=extract, embed=embed)


left: CaseAccessor[Either[Any, Any], Any] = CaseAccessor(
    extract=Either.left, embed=Left
)
right: CaseAccessor[Either[Any, Any], Any] = CaseAccessor(
    extract=Either.right, embed=Right
)

# Results carry the error on the left
success = right
failure = left
