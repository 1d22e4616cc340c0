"""Expansion of ``%define`` macros over a token stream."""

from __future__ import annotations

from collections.abc import Iterable

from .diagnostic import Diagnostic, DiagnosticError, DiagnosticKind
from .lexer import SpannedToken
from .token import TokenKind

_EXPECTED_NAME = ("NAME",)


def _take_name(tokens: list[SpannedToken], i: int, directive: SpannedToken) -> str:
    if i >= len(tokens):
        previous = tokens[i - 1] if i > 0 else directive
        raise DiagnosticError(
            Diagnostic(
                DiagnosticKind.UNRECOGNIZED_EOF,
                (previous[0], previous[2]),
                expected=_EXPECTED_NAME,
            )
        )
    begin, token, end = tokens.pop(i)
    if token.kind is not TokenKind.NAME:
        raise DiagnosticError(
            Diagnostic(
                DiagnosticKind.UNRECOGNIZED_TOKEN,
                (begin, end),
                token=token,
                expected=_EXPECTED_NAME,
            )
        )
    return token.value


def _kind_at(tokens: list[SpannedToken], i: int) -> TokenKind | None:
    return tokens[i][1].kind if i < len(tokens) else None


def _read_params(tokens: list[SpannedToken], i: int) -> list[str]:
    params: list[str] = []
    del tokens[i]
    while i < len(tokens):
        kind = tokens[i][1].kind
        if kind is TokenKind.RPAREN:
            del tokens[i]
            break
        if kind is TokenKind.COMMA:
            del tokens[i]
            if i >= len(tokens):
                break
        token = tokens.pop(i)[1]
        if token.kind is TokenKind.NAME:
            params.append(token.value)
    return params


def _read_definition(tokens: list[SpannedToken], i: int) -> list[SpannedToken]:
    definition: list[SpannedToken] = []
    while i < len(tokens):
        kind = tokens[i][1].kind
        if kind is TokenKind.BACKSLASH:
            del tokens[i]
            if _kind_at(tokens, i) is TokenKind.NEWLINE:
                del tokens[i]
            continue
        if kind is TokenKind.NEWLINE:
            del tokens[i]
            break
        definition.append(tokens.pop(i))
    return definition


def _read_call_args(tokens: list[SpannedToken], i: int) -> list[list[SpannedToken]]:
    parens = brackets = braces = 0
    arguments: list[list[SpannedToken]] = []
    argument: list[SpannedToken] = []
    while i < len(tokens):
        kind = tokens[i][1].kind
        if kind is TokenKind.RPAREN:
            if parens == 0:
                del tokens[i]
                if argument:
                    arguments.append(argument)
                break
            parens -= 1
        elif kind is TokenKind.LPAREN:
            parens += 1
        elif kind is TokenKind.LBRACKET:
            brackets += 1
        elif kind is TokenKind.RBRACKET:
            brackets -= 1
        elif kind is TokenKind.LBRACE:
            braces += 1
        elif kind is TokenKind.RBRACE:
            braces -= 1
        elif kind is TokenKind.COMMA and parens == brackets == braces == 0:
            arguments.append(argument)
            argument = []
            del tokens[i]
            continue
        argument.append(tokens.pop(i))
    return arguments


def pre_process(tokens: Iterable[SpannedToken]) -> list[SpannedToken]:
    """Expand macros, drop directives and line breaks, and return the tokens.

    Expanded text is scanned again, so macros may refer to other macros.
    Raises DiagnosticError when a directive is not followed by a name.
    """
    tokens = list(tokens)
    defines: dict[str, list[SpannedToken]] = {}
    functions: dict[str, tuple[list[str], list[SpannedToken]]] = {}
    i = 0
    while i < len(tokens):
        token = tokens[i][1]
        kind = token.kind
        if kind is TokenKind.DEFINE:
            directive = tokens.pop(i)
            name = _take_name(tokens, i, directive)
            params = None
            if _kind_at(tokens, i) is TokenKind.LPAREN:
                params = _read_params(tokens, i)
            definition = _read_definition(tokens, i)
            if params is None:
                defines[name] = definition
            else:
                functions[name] = (params, definition)
        elif kind is TokenKind.UNDEF:
            directive = tokens.pop(i)
            name = _take_name(tokens, i, directive)
            defines.pop(name, None)
            functions.pop(name, None)
        elif kind is TokenKind.NAME:
            name = token.value
            if name in defines:
                tokens[i : i + 1] = defines[name]
            elif name in functions:
                params, definition = functions[name]
                del tokens[i]
                if _kind_at(tokens, i) is TokenKind.LPAREN:
                    del tokens[i]
                arguments = _read_call_args(tokens, i)
                begin = i
                for item in definition:
                    item_token = item[1]
                    if item_token.kind is TokenKind.NAME and item_token.value in params:
                        index = params.index(item_token.value)
                        replacement = arguments[index] if index < len(arguments) else []
                        tokens[i:i] = replacement
                        i += len(replacement)
                        continue
                    tokens.insert(i, item)
                    i += 1
                i = begin
            else:
                i += 1
        elif kind in (TokenKind.NEWLINE, TokenKind.BACKSLASH):
            del tokens[i]
        else:
            i += 1
    return tokens