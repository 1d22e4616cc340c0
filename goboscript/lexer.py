"""Splitting source text into spanned tokens."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator

from .diagnostic import Diagnostic, DiagnosticError, DiagnosticKind
from .token import (
    Token,
    TokenKind,
    TokenValue,
    parse_arg,
    parse_bin,
    parse_cmd,
    parse_float,
    parse_hex,
    parse_int,
    parse_oct,
    parse_string,
)

SpannedToken = tuple[int, Token, int]

_SKIP = re.compile(r"[ \r\t\f]+|#[^\n]*\n")

_FIXED = sorted(
    ((kind.fixed_text, kind) for kind in TokenKind if kind.fixed_text is not None),
    key=lambda item: -len(item[0]),
)

_FIXED_PRIORITY = 10


def _identity(text: str) -> str:
    return text


# (kind, pattern, converter, priority); ties on length go to the higher priority.
_PATTERNS: list[tuple[TokenKind, re.Pattern[str], Callable[[str], TokenValue], int]] = [
    (TokenKind.NAME, re.compile(r"[_a-zA-Z][_a-zA-Z0-9]*"), _identity, 3),
    (TokenKind.ARG, re.compile(r"\$[_a-zA-Z0-9]+"), parse_arg, 3),
    (TokenKind.BIN, re.compile(r"0b[01][_01]*"), parse_bin, 3),
    (TokenKind.OCT, re.compile(r"0o[0-7][_0-7]*"), parse_oct, 3),
    (TokenKind.INT, re.compile(r"[0-9][_0-9]*"), parse_int, 2),
    (TokenKind.HEX, re.compile(r"0x[0-9a-fA-F][_0-9a-fA-F]*"), parse_hex, 3),
    (
        TokenKind.FLOAT,
        re.compile(r"(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[Ee][-+][0-9]+)?"),
        parse_float,
        1,
    ),
    (
        TokenKind.STR,
        re.compile(r'"(?:[^"\\]|\\["\\/bfnrt]|\\u[0-9a-zA-Z]{4})*"'),
        parse_string,
        3,
    ),
    (TokenKind.CMD, re.compile(r"```[^`]*```"), parse_cmd, 3),
]


def _longest_match(source: str, pos: int):
    best = None  # (length, priority, kind, converter)
    for text, kind in _FIXED:
        if source.startswith(text, pos):
            best = (len(text), _FIXED_PRIORITY, kind, None)
            break
    for kind, pattern, convert, priority in _PATTERNS:
        match = pattern.match(source, pos)
        if match is None or not match.group():
            continue
        candidate = (len(match.group()), priority, kind, convert)
        if best is None or candidate[:2] > best[:2]:
            best = candidate
    return best


class Lexer:
    """Iterates over ``(start, token, end)`` triples with byte offsets.

    Raises DiagnosticError with an invalid-token diagnostic at the first
    piece of text that is not a token.
    """

    def __init__(self, source: str) -> None:
        self.source = source

    def __iter__(self) -> Iterator[SpannedToken]:
        source = self.source
        pos = 0
        offset = 0
        while pos < len(source):
            skipped = _SKIP.match(source, pos)
            if skipped:
                offset += len(skipped.group().encode("utf-8"))
                pos = skipped.end()
                continue
            best = _longest_match(source, pos)
            length = best[0] if best else 1
            text = source[pos : pos + length]
            start, end = offset, offset + len(text.encode("utf-8"))
            if best is None:
                raise DiagnosticError(Diagnostic(DiagnosticKind.INVALID_TOKEN, (start, end)))
            _, _, kind, convert = best
            if convert is None:
                token = Token(kind)
            else:
                try:
                    token = Token(kind, convert(text))
                except ValueError:
                    raise DiagnosticError(
                        Diagnostic(DiagnosticKind.INVALID_TOKEN, (start, end))
                    ) from None
            yield start, token, end
            pos += length
            offset = end


def tokenize(source: str) -> list[SpannedToken]:
    """Return every spanned token of ``source``."""
    return list(Lexer(source))