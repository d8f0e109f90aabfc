import logging
from typing import Any, TypeVar

from .Input import LineBased, Sliceable
from .Parser import Parser
from .Prim import fail
from .Result import NO_PARSE, ParseResult, Parsed

T = TypeVar('T')

log = logging.getLogger("parsoeur")

PREVIEW_SIZE = 30


# 1. choice: Tries parsers in order until one succeeds
def choice(*parsers: Parser[T]) -> Parser[T]:
    """
    Applies parsers in order until one succeeds, each on the same input.
    Fails if none succeed, and always fails when given no parsers.
    """
    if not parsers:
        return fail()
    result = parsers[0]
    for p in parsers[1:]:
        result = result | p
    return result


# 2. between: Parses an opening parser, a main parser, and a closing parser
def between(open: Parser[Any], close: Parser[Any], p: Parser[T]) -> Parser[T]:
    """
    Parses 'open', then 'p', then 'close', returning the result of 'p'.
    """
    return open.right(p).left(close)


# 3. eof: Succeeds only at the end of input
def eof() -> Parser[None]:
    def parse(inp: Sliceable) -> ParseResult:
        if len(inp.view()):
            return NO_PARSE
        return Parsed(None, inp)
    return Parser(parse)


def _describe(inp: Sliceable) -> str:
    data = inp.view()
    text = f"{data[:PREVIEW_SIZE]!r}{'...' if len(data) > PREVIEW_SIZE else ''}"
    if isinstance(inp, LineBased):
        return f"{text} at line {inp.line}, column {inp.column}"
    return text


# 4. trace: Debugging wrapper logging each attempt of a parser
def trace(label: str, p: Parser[T]) -> Parser[T]:
    """
    Logs at DEBUG level on the "parsoeur" logger whenever `p` is tried and
    how the attempt ended. The parse itself is unchanged.

    To see the log:

        import logging
        logging.basicConfig(level=logging.DEBUG)
    """
    def parse(inp: Sliceable) -> ParseResult:
        if not log.isEnabledFor(logging.DEBUG):
            return p.parse_fn(inp)
        log.debug("%s: trying %s", label, _describe(inp))
        res = p.parse_fn(inp)
        if res:
            log.debug("%s: parsed %r, rest %s", label, res.value, _describe(res.remainder))
        else:
            log.debug("%s: no parse", label)
        return res
    return Parser(parse)
