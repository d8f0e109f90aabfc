import logging

# Results
from .Result import Parsed, NoParse, NO_PARSE, ParseResult, NoParseError, from_optional

# Inputs
from .Input import (
    Sliceable, ColumnBased, LineBased,
    SourcePos, SliceInput, TextInput,
    advance_position, consume
)

# Core
from .Parser import Parser
from .Prim import run_parser, pure, fail, lazy, take, take_while

# Characters
from .Char import unsigned_integer, spaces, lexeme

# Combinators
from .Combinators import choice, between, eof, trace

logging.getLogger("parsoeur").addHandler(logging.NullHandler())
