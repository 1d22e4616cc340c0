"""Tokens of the language and the conversion of their literal text."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Union


class TokenKind(Enum):
    """Kinds of token. Fixed tokens carry their exact text as value."""

    DEFINE = "%define"
    UNDEF = "%undef"
    NEWLINE = "\n"
    BACKSLASH = "\\"
    NAME = "NAME"
    ARG = "ARG"
    BIN = "BIN"
    OCT = "OCT"
    INT = "INT"
    HEX = "HEX"
    FLOAT = "FLOAT"
    STR = "STR"
    CMD = "CMD"
    COSTUMES = "costumes"
    SOUNDS = "sounds"
    LOCAL = "local"
    PROC = "proc"
    FUNC = "func"
    RETURN = "return"
    NO_WARP = "nowarp"
    ON = "on"
    ON_FLAG = "onflag"
    ON_KEY = "onkey"
    ON_CLICK = "onclick"
    ON_BACKDROP = "onbackdrop"
    ON_LOUDNESS = "onloudness"
    ON_TIMER = "ontimer"
    ON_CLONE = "onclone"
    IF = "if"
    ELSE = "else"
    ELIF = "elif"
    UNTIL = "until"
    FOR = "for"
    FOREVER = "forever"
    REPEAT = "repeat"
    COMMA = ","
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    ASSIGN = "="
    EQ = "=="
    INCREMENT = "++"
    DECREMENT = "--"
    ASSIGN_ADD = "+="
    ASSIGN_SUBTRACT = "-="
    ASSIGN_MULTIPLY = "*="
    ASSIGN_DIVIDE = "/="
    ASSIGN_FLOOR_DIV = "//="
    ASSIGN_MODULO = "%="
    ASSIGN_JOIN = "&="
    LBRACKET = "["
    RBRACKET = "]"
    DOT = "."
    NE = "!="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="
    NOT = "not"
    AND = "and"
    OR = "or"
    IN = "in"
    AMP = "&"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    FLOOR_DIV = "//"
    PERCENT = "%"
    SEMICOLON = ";"
    COLON = ":"
    LENGTH = "length"
    ROUND = "round"
    ABS = "abs"
    FLOOR = "floor"
    CEIL = "ceil"
    SQRT = "sqrt"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    LN = "ln"
    LOG = "log"
    ANTILN = "antiln"
    ANTILOG = "antilog"
    SHOW = "show"
    HIDE = "hide"
    ADD = "add"
    TO = "to"
    DELETE = "delete"
    INSERT = "insert"
    AT = "at"
    OF = "of"
    AS = "as"
    ENUM = "enum"
    STRUCT = "struct"
    TRUE = "true"
    FALSE = "false"
    LIST = "list"
    CLOUD = "cloud"
    PIPE = "|>"

    @property
    def fixed_text(self) -> str | None:
        """The exact source text of a fixed token, or None for literals."""
        return None if self in _PATTERN_KINDS else self.value


_PATTERN_KINDS = frozenset(
    {
        TokenKind.NAME,
        TokenKind.ARG,
        TokenKind.BIN,
        TokenKind.OCT,
        TokenKind.INT,
        TokenKind.HEX,
        TokenKind.FLOAT,
        TokenKind.STR,
        TokenKind.CMD,
    }
)

TokenValue = Union[str, int, float, None]


@dataclass(frozen=True)
class Token:
    """A token, with the converted value of a literal or name."""

    kind: TokenKind
    value: TokenValue = None


def _parse_radix(digits: str, base: int) -> int:
    negative = "-" in digits
    value = int(digits.replace("-", "").replace("_", ""), base)
    return -value if negative else value


def parse_bin(text: str) -> int:
    """Value of a ``0b`` literal; underscores are ignored."""
    return _parse_radix(text[2:], 2)


def parse_oct(text: str) -> int:
    """Value of a ``0o`` literal; underscores are ignored."""
    return _parse_radix(text[2:], 8)


def parse_int(text: str) -> int:
    """Value of a decimal literal; underscores are ignored."""
    return _parse_radix(text, 10)


def parse_hex(text: str) -> int:
    """Value of a ``0x`` literal; underscores are ignored."""
    return _parse_radix(text[2:], 16)


def parse_float(text: str) -> float:
    """Value of a floating point literal."""
    return float(json.loads(text))


def parse_string(text: str) -> str:
    """Contents of a double-quoted string literal, with JSON escapes."""
    value = json.loads(text)
    if not isinstance(value, str):
        raise ValueError(f"not a string literal: {text!r}")
    return value


def parse_cmd(text: str) -> str:
    """Contents of a triple-backtick command literal."""
    return text[3:-3]


def parse_arg(text: str) -> str:
    """Name of a ``$`` argument reference."""
    return text[1:]