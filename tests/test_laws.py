# tests/test_laws.py
from hypothesis import given, strategies as st

from parsoeur.Input import TextInput
from parsoeur.Prim import fail, pure, take

# Strategy to generate arbitrary values
vals = st.integers() | st.text()


def run_p(p, input_str=""):
    """Helper to run a parser on a fresh input"""
    return p(TextInput(input_str))


# 1. Left Identity: return a >>= f  === f a
@given(vals, st.text())
def test_monad_left_identity(v, text):
    f = lambda x: take(1).map(lambda s: (x, s))

    assert run_p(pure(v).and_then(f), text) == run_p(f(v), text)


# 2. Right Identity: m >>= return === m
@given(st.text())
def test_monad_right_identity(text):
    m = take(2)

    assert run_p(m.and_then(pure), text) == run_p(m, text)


# 3. Associativity: (m >>= f) >>= g === m >>= (\x -> f x >>= g)
@given(st.integers(), st.text())
def test_monad_associativity(v, text):
    m = pure(v)
    f = lambda x: take(1).map(lambda _: x + 1)
    g = lambda y: pure(y * 2)

    lhs = m.and_then(f).and_then(g)
    rhs = m.and_then(lambda x: f(x).and_then(g))

    assert run_p(lhs, text) == run_p(rhs, text)


# 4. Functor identity and composition
@given(st.text())
def test_map_laws(text):
    m = take(1)
    f = str.upper
    g = lambda s: s * 2

    assert run_p(m.map(lambda x: x), text) == run_p(m, text)
    assert run_p(m.map(f).map(g), text) == run_p(m.map(lambda x: g(f(x))), text)


# 5. Choice: failure is the identity of or_
@given(st.text())
def test_or_identity(text):
    m = take(1)
    assert run_p(fail() | m, text) == run_p(m, text)
    assert run_p(m | fail(), text) == run_p(m, text)
