#
#  _____                 _   _                   _
# |  ___|   _ _ __   ___| |_(_) ___  _ __   __ _| |
# | |_ | | | | '_ \ / __| __| |/ _ \| '_ \ / _` | |
# |  _|| |_| | | | | (__| |_| | (_) | | | | (_| | |
# |_|   \__,_|_| |_|\___|\__|_|\___/|_| |_|\__,_|_|
#
#  ____        _   _
# |  _ \ _   _| |_| |__   ___  _ __
# | |_) | | | | __| '_ \ / _ \| '_ \
# |  __/| |_| | |_| | | | (_) | | | |
# |_|    \__, |\__|_| |_|\___/|_| |_|
#        |___/
#

"""
Optional values, tagged unions and function plumbing shared by the accessors.
"""

import logging
from abc import ABC, abstractmethod
from functools import reduce
from typing import Any, Callable, Generic, Never, NoReturn, TypeVar


logger = logging.getLogger(__name__)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                          Types                           ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛

A = TypeVar('A')  # Present / right type
B = TypeVar('B')  # Left type
C = TypeVar('C')

Unit = tuple[()]
UNIT: Unit = ()


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                         Monads                           ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


class Maybe(ABC, Generic[A]):
    """
    A value that may be absent.

    Absence is its own variant rather than ``None``, so ``Just(None)`` is a
    present value.
    """

    @abstractmethod
    def is_present(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def map(self, f: Callable[[A], C]) -> 'Maybe[C]':
        raise NotImplementedError

    @abstractmethod
    def flatmap(self, f: Callable[[A], 'Maybe[C]']) -> 'Maybe[C]':
        raise NotImplementedError


class Just(Maybe[A]):
    __slots__ = ('_value',)

    def __init__(self, value: A) -> None:
        self._value = value

    @property
    def value(self) -> A:
        return self._value

    def is_present(self) -> bool:
        return True

    def map(self, f: Callable[[A], C]) -> Maybe[C]:
        return Just(f(self._value))

    def flatmap(self, f: Callable[[A], Maybe[C]]) -> Maybe[C]:
        return f(self._value)

    def __eq__(self, value: object, /) -> bool:
        return isinstance(value, Just) and self.value == value.value

    def __hash__(self) -> int:
        return hash((Just, self._value))

    def __repr__(self) -> str:
        return f'Just({self._value!r})'


class _Nothing(Maybe[Any]):
    __slots__ = ()

    def is_present(self) -> bool:
        return False

    def map(self, f: Callable[[Any], C]) -> Maybe[C]:
        return self  # Nothing stays Nothing

    def flatmap(self, f: Callable[[Any], Maybe[C]]) -> Maybe[C]:
        return self  # Nothing stays Nothing

    def __eq__(self, value: object, /) -> bool:
        return isinstance(value, _Nothing)

    def __hash__(self) -> int:
        return hash(_Nothing)

    def __repr__(self) -> str:
        return 'Nothing'


Nothing: Maybe[Any] = _Nothing()


class Either(ABC, Generic[B, A]):
    """A value tagged as exactly one of ``Left`` or ``Right``."""

    __slots__ = ('_value',)

    def __init__(self, value: A | B) -> None:
        self._value = value

    @property
    def value(self) -> A | B:
        return self._value

    def is_left(self) -> bool:
        return not self.is_right()

    @abstractmethod
    def is_right(self) -> bool:
        raise NotImplementedError()

    def fold(self, on_left: Callable[[B], C], on_right: Callable[[A], C]) -> C:
        if self.is_left():
            return on_left(self._value)
        return on_right(self._value)

    def left(self) -> Maybe[B]:
        return Just(self._value) if self.is_left() else Nothing

    def right(self) -> Maybe[A]:
        return Just(self._value) if self.is_right() else Nothing

    def __eq__(self, value: object, /) -> bool:
        return (
            isinstance(value, Either)
            and self.is_right() == value.is_right()
            and self.value == value.value
        )

    def __hash__(self) -> int:
        return hash((self.is_right(), self._value))

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._value!r})'


class Left(Either[B, A]):
    __slots__ = ()

    def is_right(self) -> bool:
        return False


class Right(Either[B, A]):
    __slots__ = ()

    def is_right(self) -> bool:
        return True


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                        Functions                         ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def compose2(f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    def inner(x: A) -> C:
        return f(g(x))

    return inner


def identity(value: A) -> A:
    return value


def compose(*fn):
    return reduce(compose2, fn, identity)


def absurd(never: Never) -> NoReturn:
    """Eliminate a value of the uninhabited type. Only reachable through a type error."""
    logger.error('absurd() called with %r', never)
    raise AssertionError(f'absurd() reached with {never!r}')
