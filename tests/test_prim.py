import pytest
from hypothesis import given
from hypothesis import strategies as st

from parsoeur.Input import SliceInput, SourcePos, TextInput
from parsoeur.Prim import fail, lazy, pure, run_parser, take, take_while
from parsoeur.Result import NO_PARSE, Parsed


@given(st.integers() | st.text(), st.text())
def test_pure(v, text):
    inp = SliceInput(text)
    assert pure(v)(inp) == Parsed(v, inp)


@given(st.text())
def test_fail(text):
    assert fail()(SliceInput(text)) == NO_PARSE


# --- take ---


@given(st.text(), st.integers(min_value=0, max_value=10))
def test_take(text, n):
    res = take(n)(SliceInput(text))
    if len(text) >= n:
        assert res == Parsed(text[:n], SliceInput(text[n:]))
    else:
        assert res == NO_PARSE


def test_take_tracks_position(parsed_at):
    assert run_parser(take(3), "foolol") == parsed_at("foo", "lol", 0, 3)
    assert run_parser(take(3), "a\nbc") == parsed_at("a\nb", "c", 1, 1)


def test_take_negative():
    with pytest.raises(ValueError):
        take(-1)


# --- take_while ---


def test_take_while():
    p = take_while(str.isalpha)
    assert p(SliceInput("Henry 48")) == Parsed("Henry", SliceInput(" 48"))
    assert p(SliceInput("48 Henry")) == NO_PARSE
    assert p(SliceInput("")) == NO_PARSE


@given(st.text())
def test_take_while_is_maximal(text):
    res = take_while(str.isdigit)(SliceInput(text))
    if res:
        assert res.value and res.value.isdigit()
        assert not res.remainder.view()[:1].isdigit()
        assert res.value + res.remainder.view() == text


def test_take_while_optional_run(text_input):
    inp = text_input("abc")
    assert take_while(str.isspace).opt()(inp) == Parsed(None, inp)


def test_take_while_over_tokens():
    p = take_while(lambda tok: isinstance(tok, int))
    assert p(SliceInput([1, 2, "x", 3])) == Parsed([1, 2], SliceInput(["x", 3]))


# --- lazy ---


def test_lazy_builds_on_first_use():
    built = []

    def factory():
        built.append(True)
        return take(1)

    p = lazy(factory)
    assert built == []

    assert p(SliceInput("ab")).ok() == "a"
    assert p(SliceInput("cd")).ok() == "c"
    assert built == [True]


def test_lazy_rejects_non_parsers():
    p = lazy(lambda: "not a parser")
    with pytest.raises(TypeError):
        p(SliceInput("x"))


# --- run_parser ---


def test_run_parser_wraps_text():
    res = run_parser(take(1), "ab", source_name="test")
    assert res == Parsed("a", TextInput("b", SourcePos(0, 1, "test")))


def test_run_parser_passes_inputs_through():
    inp = SliceInput("ab")
    assert run_parser(take(1), inp) == Parsed("a", SliceInput("b"))


def test_run_parser_wraps_other_sequences():
    assert run_parser(take(1), (1, 2)) == Parsed((1,), SliceInput((2,)))
