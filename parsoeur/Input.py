from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Protocol, Sequence, Tuple, TypeVar, runtime_checkable

S = TypeVar('S', bound=Sequence[Any])  # The underlying sliceable content

NEWLINES = {str: '\n', bytes: b'\n'}


def advance_position(line: int, column: int, chunk: Sequence[Any]) -> Tuple[int, int]:
    """Position reached after consuming `chunk` from (line, column).

    Each '\\n' starts a new line at column 0; a '\\r\\n' pair is a single break
    since the '\\r' is always followed by the newline that resets the column.
    Every other unit moves the column by one. Chunks that are not text only
    move the column.
    """
    newline = NEWLINES.get(type(chunk))
    if newline is not None:
        breaks = chunk.count(newline)
        if breaks:
            return line + breaks, len(chunk) - chunk.rindex(newline) - 1
    return line, column + len(chunk)


@dataclass(frozen=True)
class SourcePos:
    """Zero-based line and column of the next unit to be parsed."""
    line: int = 0
    column: int = 0
    name: str = ""

    def update(self, chunk: Sequence[Any]) -> 'SourcePos':
        line, column = advance_position(self.line, self.column, chunk)
        return SourcePos(line, column, self.name)

    def __str__(self) -> str:
        return f"{self.name} line {self.line}, column {self.column}"


@runtime_checkable
class Sliceable(Protocol):
    """Inputs that can show their remaining content and drop a prefix of it."""

    def view(self) -> Any: ...

    def advance(self, count: int) -> 'Sliceable': ...


@runtime_checkable
class ColumnBased(Sliceable, Protocol):
    """Sliceable inputs that also know the current column."""

    @property
    def column(self) -> int: ...

    def with_column(self, column: int) -> 'ColumnBased': ...


@runtime_checkable
class LineBased(ColumnBased, Protocol):
    """Column-based inputs that also know the current line."""

    @property
    def line(self) -> int: ...

    def with_line(self, line: int) -> 'LineBased': ...


@dataclass(frozen=True)
class SliceInput(Generic[S]):
    """Bare input: a sequence and nothing else. Works for str, bytes, lists of tokens."""
    data: S

    def view(self) -> S:
        return self.data

    def advance(self, count: int) -> 'SliceInput[S]':
        return SliceInput(self.data[count:])


@dataclass(frozen=True)
class TextInput(Generic[S]):
    """Line- and column-tracking input. Starts at line 0, column 0."""
    data: S
    pos: SourcePos = field(default_factory=SourcePos)

    @property
    def line(self) -> int:
        return self.pos.line

    @property
    def column(self) -> int:
        return self.pos.column

    def view(self) -> S:
        return self.data

    def advance(self, count: int) -> 'TextInput[S]':
        return TextInput(self.data[count:], self.pos)

    def with_column(self, column: int) -> 'TextInput[S]':
        return TextInput(self.data, SourcePos(self.pos.line, column, self.pos.name))

    def with_line(self, line: int) -> 'TextInput[S]':
        return TextInput(self.data, SourcePos(line, self.pos.column, self.pos.name))


# Capability levels of concrete input types
BARE, COLUMNS, LINES = 0, 1, 2

_levels: Dict[type, int] = {}


def capability(inp: Sliceable) -> int:
    """How much position `inp` tracks: BARE, COLUMNS or LINES.

    Decided once per input type; every instance of a type is assumed to
    offer the same members.
    """
    kind = type(inp)
    level = _levels.get(kind)
    if level is None:
        if isinstance(inp, LineBased):
            level = LINES
        elif isinstance(inp, ColumnBased):
            level = COLUMNS
        else:
            level = BARE
        _levels[kind] = level
    return level


def consume(inp: Sliceable, count: int) -> Sliceable:
    """Drop `count` units from `inp`, keeping whatever position it tracks in step."""
    level = capability(inp)
    if level == LINES:
        line, column = advance_position(inp.line, inp.column, inp.view()[:count])
        inp = inp.with_line(line).with_column(column)
    elif level == COLUMNS:
        inp = inp.with_column(inp.column + count)
    return inp.advance(count)


def advance_column(inp: Sliceable, count: int) -> Sliceable:
    """Drop `count` units from `inp`, moving only its column, never its line."""
    if capability(inp) != BARE:
        inp = inp.with_column(inp.column + count)
    return inp.advance(count)
