from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

A = TypeVar('A')  # Generic type for parsed values
R = TypeVar('R')  # Generic type for remainders (inputs)


class NoParseError(Exception):
    """Raised by `unwrap()` on a failed parse."""


@dataclass(frozen=True)
class Parsed(Generic[A, R]):
    """A successful parse: the produced value and the unconsumed input."""
    value: A
    remainder: R

    def ok(self) -> Optional[A]:
        return self.value

    def unwrap(self) -> A:
        return self.value

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NoParse:
    """A failed parse. Carries no cause and no position."""

    def ok(self) -> None:
        return None

    def unwrap(self):
        raise NoParseError("no parse")

    def __bool__(self) -> bool:
        return False


NO_PARSE = NoParse()

ParseResult = Union[Parsed[A, R], NoParse]
# A parser function maps an input R to ParseResult[A, R]


def from_optional(maybe: Optional[Parsed[A, R]]) -> 'ParseResult[A, R]':
    """Turn an absent value into a failure, a present one into itself."""
    if maybe is None:
        return NO_PARSE
    return maybe
