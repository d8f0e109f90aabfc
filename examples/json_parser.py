"""
JSON values built from parsoeur primitives.

Reads JSON documents from stdin, one per line, and prints what each parses to:

    echo '{"a": [1, 2.5, true, null]}' | python examples/json_parser.py
"""
import sys

from parsoeur import (
    between, choice, eof, fail, lazy, lexeme, pure, run_parser, spaces, take, take_while
)

ESCAPES = {'"': '"', '\\': '\\', '/': '/', 'b': '\b', 'f': '\f', 'n': '\n', 'r': '\r', 't': '\t'}
HEX_DIGITS = set('0123456789abcdefABCDEF')
NUMBER_CHARS = set('0123456789+-.eE')

ws = spaces()


def symbol(s):
    return lexeme(s).left(ws)


# 1. Strings
def code_point(digits):
    if len(digits) != 4 or not set(digits) <= HEX_DIGITS:
        return fail()
    return pure(chr(int(digits, 16)))


def escaped(c):
    return pure(ESCAPES[c]) if c in ESCAPES else fail()


plain_chars = take_while(lambda c: c not in '"\\')
unicode_escape = lexeme('\\u').right(take(4)).and_then(code_point)
simple_escape = lexeme('\\').right(take(1)).and_then(escaped)

string_literal = between(
    lexeme('"'),
    lexeme('"'),
    (plain_chars | unicode_escape | simple_escape).many0().map(''.join)
)


# 2. Numbers
def to_number(text):
    try:
        return pure(int(text) if text.lstrip('-').isdigit() else float(text))
    except ValueError:
        return fail()


number_literal = take_while(NUMBER_CHARS.__contains__).and_then(to_number)


# 3. Recursive JSON values
def json_value():
    return choice(
        string_literal,
        number_literal,
        lexeme("true").const_map(True),
        lexeme("false").const_map(False),
        lexeme("null").const_map(None),
        json_array(),
        json_object(),
    ).left(ws)


def json_array():
    # [ value, value, ... ]
    return symbol("[").right(lazy(json_value).delimited0(symbol(","))).left(lexeme("]"))


def json_object():
    # { "key": value, ... }
    entry = string_literal.left(ws).left(symbol(":")).zip(lazy(json_value), lambda k, v: (k, v))
    return symbol("{").right(entry.delimited0(symbol(","))).left(lexeme("}")).map(dict)


document = ws.right(json_value()).left(eof())


def main():
    for line in sys.stdin:
        result = run_parser(document, line.rstrip("\r\n"), source_name="<stdin>")
        if result:
            print(repr(result.value))
        else:
            print("no parse")


if __name__ == "__main__":
    main()
