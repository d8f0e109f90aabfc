# tests/conftest.py
import pytest

from parsoeur.Input import SourcePos, TextInput
from parsoeur.Result import Parsed


@pytest.fixture
def text_input():
    def _make(data, line=0, column=0):
        return TextInput(data, SourcePos(line, column))

    return _make


@pytest.fixture
def parsed_at():
    """Expected success with the remainder sitting at (line, column)."""
    def _make(value, rest, line=0, column=0):
        return Parsed(value, TextInput(rest, SourcePos(line, column)))

    return _make
