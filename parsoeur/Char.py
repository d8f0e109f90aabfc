from typing import Any, Callable, Optional, Sequence

from .Input import Sliceable, advance_column, consume
from .Parser import Parser
from .Prim import prefix_length
from .Result import NO_PARSE, ParseResult, Parsed, from_optional

DIGITS = '0123456789'
BYTE_DIGITS = frozenset(b'0123456789')
BYTE_SPACES = frozenset(b' \t\n\r\x0b\x0c')


def _unit_test(data: Sequence[Any], text_test: Callable[[str], bool],
               byte_values: frozenset) -> Callable[[Any], bool]:
    """A predicate over the units of `data`.

    bytes yield ints, looked up in `byte_values`. Units of any other input
    only match when they are one-character strings passing `text_test`.
    """
    if isinstance(data, (bytes, bytearray)):
        return byte_values.__contains__
    return lambda unit: isinstance(unit, str) and len(unit) == 1 and text_test(unit)


def _as_text(units: Sequence[Any]) -> str:
    if isinstance(units, (bytes, bytearray)):
        return units.decode('ascii')
    if isinstance(units, str):
        return units
    return ''.join(units)


def _read_unsigned(digits: str, limit: int) -> Optional[int]:
    """The value of a run of ASCII digits, or None if it is empty or above `limit`."""
    if not digits:
        return None
    significant = digits.lstrip('0')
    if len(significant) > len(str(limit)):
        return None
    value = int(significant or '0')
    return value if value <= limit else None


# 1. unsigned integer: a run of ASCII digits fitting in `bits` bits
def unsigned_integer(bits: int = 32) -> Parser[int]:
    """Parses the longest run of ASCII digits as an unsigned `bits`-bit integer.

    Fails when there are no digits or when the value overflows.
    """
    if bits < 1:
        raise ValueError(f"unsigned_integer() needs at least one bit, got {bits}")
    limit = (1 << bits) - 1

    def parse(inp: Sliceable) -> ParseResult:
        data = inp.view()
        count = prefix_length(data, _unit_test(data, DIGITS.__contains__, BYTE_DIGITS))
        value = _read_unsigned(_as_text(data[:count]), limit)
        return from_optional(None if value is None else Parsed(value, advance_column(inp, count)))
    return Parser(parse)


# 2. spaces: skips zero or more whitespace characters
def spaces() -> Parser[None]:
    """Skips whitespace, tracking line breaks. Always succeeds."""
    def parse(inp: Sliceable) -> ParseResult:
        data = inp.view()
        count = prefix_length(data, _unit_test(data, str.isspace, BYTE_SPACES))
        return Parsed(None, consume(inp, count))
    return Parser(parse)


# 3. lexeme: matches a literal verbatim
def lexeme(literal: Sequence) -> Parser[None]:
    """Matches `literal` at the start of the input and consumes exactly it.

    Only the column moves, by the literal's length, even if it spans a newline.
    """
    size = len(literal)

    def parse(inp: Sliceable) -> ParseResult:
        if inp.view()[:size] != literal:
            return NO_PARSE
        return Parsed(None, advance_column(inp, size))
    return Parser(parse)
