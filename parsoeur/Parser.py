from copy import deepcopy
from enum import Enum, auto
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

from .Result import NO_PARSE, ParseResult, Parsed

A = TypeVar('A')  # Generic type for parser results
B = TypeVar('B')
C = TypeVar('C')

ParseFn = Callable[[Any], ParseResult]


class _Expect(Enum):
    """What a delimited list wants to see next."""
    ITEM = auto()
    SEPARATOR = auto()


class Parser(Generic[A]):
    """A parsing function wrapped so that it can be composed with others.

    A parser maps an input to either `Parsed(value, remainder)` or `NoParse()`.
    Parsers are values: composing them builds new parsers and never changes the
    operands, and one parser can be run on any number of inputs.

    Every parser must be free of externally observable side effects. Ordered
    choice (`or_`, `|`) runs its first branch and silently drops that work when
    it fails, and nothing checks this at runtime.
    """

    def __init__(self, parse_fn: ParseFn):
        if not callable(parse_fn):
            raise TypeError(f"expected a parsing function, got {type(parse_fn).__name__}")
        self.parse_fn = parse_fn

    @classmethod
    def from_function(cls, parse_fn: ParseFn) -> 'Parser[Any]':
        """Wrap a raw `input -> ParseResult` function."""
        return cls(parse_fn)

    def parse(self, inp: Any) -> ParseResult:
        """Run the parser once on `inp`."""
        return self.parse_fn(inp)

    def __call__(self, inp: Any) -> ParseResult:
        return self.parse_fn(inp)

    # Sequencing

    def zip(self, other: 'Parser[B]', combine: Callable[[A, B], C]) -> 'Parser[C]':
        """Run self then other, combining both values; other's remainder is kept."""
        def parse(inp: Any) -> ParseResult:
            first = self.parse_fn(inp)
            if not first:
                return NO_PARSE
            second = other.parse_fn(first.remainder)
            if not second:
                return NO_PARSE
            return Parsed(combine(first.value, second.value), second.remainder)
        return Parser(parse)

    def left(self, other: 'Parser[Any]') -> 'Parser[A]':
        """Run self then other, keeping self's value."""
        return self.zip(other, lambda a, _: a)

    def right(self, other: 'Parser[B]') -> 'Parser[B]':
        """Run self then other, keeping other's value."""
        return self.zip(other, lambda _, b: b)

    def and_then(self, f: Callable[[A], 'Parser[B]']) -> 'Parser[B]':
        """Monadic bind: the parser run on the remainder is built from self's value."""
        def parse(inp: Any) -> ParseResult:
            res = self.parse_fn(inp)
            if not res:
                return NO_PARSE
            return f(res.value).parse_fn(res.remainder)
        return Parser(parse)

    # Values

    def map(self, f: Callable[[A], B]) -> 'Parser[B]':
        def parse(inp: Any) -> ParseResult:
            res = self.parse_fn(inp)
            if not res:
                return NO_PARSE
            return Parsed(f(res.value), res.remainder)
        return Parser(parse)

    def const_map(self, value: B) -> 'Parser[B]':
        """Replace the parsed value with a fresh copy of `value`."""
        return self.map(lambda _: deepcopy(value))

    def opt(self) -> 'Parser[Optional[A]]':
        """Never fails: None and the untouched input when self does not parse.

        A success keeps self's value as it is. For parsers whose value is
        already None (`lexeme`, `spaces`, `eof`) tell a match from a miss by
        comparing the remainder with the input, or map the value first, as in
        `lexeme(",").const_map(True).opt()`.
        """
        def parse(inp: Any) -> ParseResult:
            res = self.parse_fn(inp)
            if not res:
                return Parsed(None, inp)
            return res
        return Parser(parse)

    # Alternative

    def or_(self, other: 'Parser[A]') -> 'Parser[A]':
        """Ordered choice: other runs on the same input only if self fails."""
        def parse(inp: Any) -> ParseResult:
            res = self.parse_fn(inp)
            if res:
                return res
            return other.parse_fn(inp)
        return Parser(parse)

    # Repetition

    def many0(self) -> 'Parser[List[A]]':
        """Zero or more. Stops on failure or on a success that consumed nothing."""
        def parse(inp: Any) -> ParseResult:
            values: List[A] = []
            current = inp
            while True:
                res = self.parse_fn(current)
                if not res or res.remainder == current:
                    break
                values.append(res.value)
                current = res.remainder
            return Parsed(values, current)
        return Parser(parse)

    def many1(self) -> 'Parser[List[A]]':
        """One or more; same loop as `many0`."""
        repeated = self.many0()

        def parse(inp: Any) -> ParseResult:
            res = repeated.parse_fn(inp)
            if not res.value:
                return NO_PARSE
            return res
        return Parser(parse)

    def delimited0(self, separator: 'Parser[Any]') -> 'Parser[List[A]]':
        """Items separated by `separator`, possibly none.

        A separator must be followed by an item: "1,2," fails as a whole
        instead of stopping before the dangling ",".
        """
        return self._delimited(separator, at_least_one=False)

    def delimited1(self, separator: 'Parser[Any]') -> 'Parser[List[A]]':
        """Like `delimited0`, but fails when there are no items."""
        return self._delimited(separator, at_least_one=True)

    def _delimited(self, separator: 'Parser[Any]', at_least_one: bool) -> 'Parser[List[A]]':
        def parse(inp: Any) -> ParseResult:
            values: List[A] = []
            current = inp
            cycle_start = inp
            expect = _Expect.ITEM
            while True:
                if expect is _Expect.ITEM:
                    res = self.parse_fn(current)
                    if not res:
                        break
                    values.append(res.value)
                    expect = _Expect.SEPARATOR
                else:
                    res = separator.parse_fn(current)
                    # An item and a separator that both consumed nothing would repeat forever
                    if not res or res.remainder == cycle_start:
                        break
                    cycle_start = res.remainder
                    expect = _Expect.ITEM
                current = res.remainder

            if expect is _Expect.SEPARATOR:
                return Parsed(values, current)
            if values or at_least_one:
                return NO_PARSE
            return Parsed(values, inp)
        return Parser(parse)

    # Operators

    # Alternative (<|>)
    def __or__(self, other: 'Parser[A]') -> 'Parser[A]':
        return self.or_(other)

    # Sequence (&), both values as a tuple
    def __and__(self, other: 'Parser[B]') -> 'Parser[Tuple[A, B]]':
        return self.zip(other, lambda a, b: (a, b))

    # Sequence (*>)
    def __gt__(self, other: 'Parser[B]') -> 'Parser[B]':
        return self.right(other)

    # Sequence (<*)
    def __lt__(self, other: 'Parser[Any]') -> 'Parser[A]':
        return self.left(other)

    # Monadic bind (>>=)
    def __rshift__(self, f: Callable[[A], 'Parser[B]']) -> 'Parser[B]':
        return self.and_then(f)
