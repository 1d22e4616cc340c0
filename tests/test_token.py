import json

import pytest

from goboscript.token import (
    Token,
    TokenKind,
    parse_arg,
    parse_bin,
    parse_cmd,
    parse_float,
    parse_hex,
    parse_int,
    parse_oct,
    parse_string,
)


@pytest.mark.parametrize("n", [0, 1, 5, 255, 1024, 123456789])
def test_radix_round_trips(n):
    assert parse_bin(bin(n)) == n
    assert parse_oct(oct(n)) == n
    assert parse_hex(hex(n)) == n
    assert parse_int(str(n)) == n


def test_underscores_are_ignored():
    assert parse_int("1_000_000") == parse_int("1000000")
    assert parse_bin("0b1_0_1") == parse_bin("0b101")
    assert parse_hex("0xff_ff") == parse_hex("0xffff")
    assert parse_oct("0o7_7") == parse_oct("0o77")


def test_hex_is_case_insensitive():
    assert parse_hex("0xABCDEF") == parse_hex("0xabcdef")


@pytest.mark.parametrize("text", ["1.5", "0.25", "3", "2.5e+3"])
def test_parse_float(text):
    assert parse_float(text) == float(text)


@pytest.mark.parametrize("value", ["", "hello", "a\"b", "tab\there", "line\nbreak", "é"])
def test_parse_string_round_trip(value):
    assert parse_string(json.dumps(value)) == value


def test_parse_string_rejects_bad_escape():
    with pytest.raises(ValueError):
        parse_string('"\\q"')


def test_parse_cmd_and_arg():
    assert parse_cmd("```ls -la```") == "ls -la"
    assert parse_arg("$count") == "count"


def test_fixed_text():
    define = Token(TokenKind.DEFINE, None)
    pipe = Token(TokenKind.PIPE, None)
    assert define == Token(TokenKind.DEFINE, None)
    assert define != pipe
    assert TokenKind.DEFINE.fixed_text == "%define"
    assert TokenKind.PIPE.fixed_text == "|>"
    assert TokenKind.NAME.fixed_text is None
    assert TokenKind.FLOAT.fixed_text is None


def test_token_equality():
    assert Token(TokenKind.NAME, "x") == Token(TokenKind.NAME, "x")
    assert Token(TokenKind.NAME, "x") != Token(TokenKind.NAME, "y")