from typing import Any, Callable, Optional, Sequence, TypeVar

from .Input import SliceInput, Sliceable, SourcePos, TextInput, consume
from .Parser import Parser
from .Result import NO_PARSE, ParseResult, Parsed

T = TypeVar('T')


def pure(value: T) -> Parser[T]:
    """Return a parser that succeeds with a value without consuming input."""
    return Parser(lambda inp: Parsed(value, inp))


def fail() -> Parser[Any]:
    """A parser that never parses."""
    return Parser(lambda inp: NO_PARSE)


def lazy(factory: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until it is first run.

    Needed for recursive rules: a rule that mentions itself through `lazy`
    is only built when parsing reaches it, so building the grammar terminates.
    """
    built: Optional[Parser[T]] = None

    def parse(inp: Any) -> ParseResult:
        nonlocal built
        if built is None:
            parser = factory()
            if not isinstance(parser, Parser):
                raise TypeError(f"lazy factory returned {type(parser).__name__}, not a Parser")
            built = parser
        return built.parse_fn(inp)
    return Parser(parse)


def take(count: int) -> Parser[Sequence[Any]]:
    """Consume exactly `count` units and return them."""
    if count < 0:
        raise ValueError(f"take() needs a non-negative count, got {count}")

    def parse(inp: Sliceable) -> ParseResult:
        data = inp.view()
        if len(data) < count:
            return NO_PARSE
        return Parsed(data[:count], consume(inp, count))
    return Parser(parse)


def prefix_length(data: Sequence[Any], predicate: Callable[[Any], bool]) -> int:
    """Number of leading units of `data` that satisfy `predicate`."""
    count = 0
    for unit in data:
        if not predicate(unit):
            break
        count += 1
    return count


def take_while(predicate: Callable[[Any], bool]) -> Parser[Sequence[Any]]:
    """Consume the longest non-empty prefix whose units all satisfy `predicate`.

    Fails when the very first unit does not; wrap in `.opt()` to allow an
    empty run.
    """
    def parse(inp: Sliceable) -> ParseResult:
        data = inp.view()
        count = prefix_length(data, predicate)
        if count == 0:
            return NO_PARSE
        return Parsed(data[:count], consume(inp, count))
    return Parser(parse)


def run_parser(parser: Parser[T], source: Any, source_name: str = "") -> ParseResult:
    """Run `parser` once over `source`.

    Text (str or bytes) is wrapped in a line/column tracking `TextInput`, other
    sequences in a bare `SliceInput`; inputs are used as they are.
    """
    if isinstance(source, (str, bytes)):
        inp = TextInput(source, SourcePos(name=source_name))
    elif isinstance(source, Sliceable):
        inp = source
    else:
        inp = SliceInput(source)
    return parser.parse(inp)
