"""Diagnostics reported while compiling a project."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class Level(Enum):
    """Severity of a diagnostic."""

    ERROR = "error"
    WARNING = "warning"
    HELP = "help"


class DiagnosticKind(Enum):
    """Every kind of problem the compiler can report."""

    # Errors
    INVALID_TOKEN = auto()
    UNRECOGNIZED_EOF = auto()
    UNRECOGNIZED_TOKEN = auto()
    EXTRA_TOKEN = auto()
    IO_ERROR = auto()
    UNRECOGNIZED_REPORTER = auto()
    UNRECOGNIZED_BLOCK = auto()
    UNRECOGNIZED_VARIABLE = auto()
    UNRECOGNIZED_LIST = auto()
    UNRECOGNIZED_ENUM = auto()
    UNRECOGNIZED_STRUCT = auto()
    UNRECOGNIZED_PROCEDURE = auto()
    UNRECOGNIZED_FUNCTION = auto()
    UNRECOGNIZED_ARGUMENT = auto()
    UNRECOGNIZED_STRUCT_FIELD = auto()
    UNRECOGNIZED_ENUM_VARIANT = auto()
    UNRECOGNIZED_KEY = auto()
    UNRECOGNIZED_STANDARD_LIBRARY_HEADER = auto()
    NO_COSTUMES = auto()
    BLOCK_ARGS_COUNT_MISMATCH = auto()
    REPR_ARGS_COUNT_MISMATCH = auto()
    PROC_ARGS_COUNT_MISMATCH = auto()
    FUNC_ARGS_COUNT_MISMATCH = auto()
    COMMAND_FAILED = auto()
    TYPE_MISMATCH = auto()
    NOT_STRUCT = auto()
    STRUCT_DOES_NOT_HAVE_FIELD = auto()
    # Warnings
    FOLLOWED_BY_UNREACHABLE_CODE = auto()
    UNUSED_VARIABLE = auto()
    UNUSED_LIST = auto()
    UNUSED_ENUM = auto()
    UNUSED_STRUCT = auto()
    UNUSED_PROC = auto()
    UNUSED_FUNC = auto()
    UNUSED_ARG = auto()
    UNUSED_STRUCT_FIELD = auto()
    UNUSED_ENUM_VARIANT = auto()


_FIXED_MESSAGES = {
    DiagnosticKind.INVALID_TOKEN: "invalid token",
    DiagnosticKind.EXTRA_TOKEN: "extra token",
    DiagnosticKind.UNRECOGNIZED_REPORTER: "unrecognized reporter",
    DiagnosticKind.UNRECOGNIZED_BLOCK: "unrecognized block",
    DiagnosticKind.UNRECOGNIZED_VARIABLE: "unrecognized variable",
    DiagnosticKind.UNRECOGNIZED_LIST: "unrecognized list",
    DiagnosticKind.UNRECOGNIZED_ENUM: "unrecognized enum",
    DiagnosticKind.UNRECOGNIZED_STRUCT: "unrecognized struct",
    DiagnosticKind.UNRECOGNIZED_PROCEDURE: "unrecognized procedure",
    DiagnosticKind.UNRECOGNIZED_FUNCTION: "unrecognized function",
    DiagnosticKind.UNRECOGNIZED_ARGUMENT: "unrecognized argument",
    DiagnosticKind.UNRECOGNIZED_STRUCT_FIELD: "unrecognized struct field",
    DiagnosticKind.UNRECOGNIZED_ENUM_VARIANT: "unrecognized enum variant",
    DiagnosticKind.UNRECOGNIZED_KEY: "unrecognized key",
    DiagnosticKind.UNRECOGNIZED_STANDARD_LIBRARY_HEADER: (
        "unrecognized standard library header"
    ),
    DiagnosticKind.NO_COSTUMES: "no costumes",
    DiagnosticKind.COMMAND_FAILED: "command failed",
    DiagnosticKind.NOT_STRUCT: "not a struct",
    DiagnosticKind.FOLLOWED_BY_UNREACHABLE_CODE: "followed by unreachable code",
}

_UNUSED_LABELS = {
    DiagnosticKind.UNUSED_VARIABLE: "variable",
    DiagnosticKind.UNUSED_LIST: "list",
    DiagnosticKind.UNUSED_ENUM: "enum",
    DiagnosticKind.UNUSED_STRUCT: "struct",
    DiagnosticKind.UNUSED_PROC: "procedure",
    DiagnosticKind.UNUSED_FUNC: "function",
    DiagnosticKind.UNUSED_ARG: "argument",
    DiagnosticKind.UNUSED_STRUCT_FIELD: "struct field",
    DiagnosticKind.UNUSED_ENUM_VARIANT: "enum variant",
}

_WARNINGS = frozenset(_UNUSED_LABELS) | {DiagnosticKind.FOLLOWED_BY_UNREACHABLE_CODE}

_NO_COSTUMES_HELP = "if this is a header, move it inside a directory such as `lib/`"


def _one_of(expected: tuple[str, ...]) -> str:
    return ", ".join(f"`{item.replace(chr(34), '')}`" for item in expected)


@dataclass
class Diagnostic:
    """A problem found at a byte span of a translation unit.

    Only the fields that the kind needs are filled in:
    ``name`` for named items, ``expected`` for parser expectations,
    ``subject``/``arity``/``given`` for argument count mismatches,
    ``expected_type``/``given`` for type mismatches, ``field`` for
    missing struct fields, ``error`` for I/O errors and ``stderr`` for
    failed commands.
    """

    kind: DiagnosticKind
    span: tuple[int, int]
    name: str | None = None
    expected: tuple[str, ...] = ()
    token: Any = None
    error: OSError | None = None
    subject: str | None = None
    arity: int | None = None
    given: Any = None
    expected_type: str | None = None
    field: str | None = None
    stderr: bytes = field(default=b"", repr=False)

    def message(self) -> str:
        """The human readable title of this diagnostic."""
        kind = self.kind
        if kind in _FIXED_MESSAGES:
            return _FIXED_MESSAGES[kind]
        if kind in _UNUSED_LABELS:
            return f"unused {_UNUSED_LABELS[kind]} {self.name}"
        if kind is DiagnosticKind.UNRECOGNIZED_EOF:
            return f"unrecognized end of file, expected one of {_one_of(self.expected)}"
        if kind is DiagnosticKind.UNRECOGNIZED_TOKEN:
            return f"unrecognized token, expected one of {_one_of(self.expected)}"
        if kind is DiagnosticKind.IO_ERROR:
            return str(self.error)
        if kind is DiagnosticKind.BLOCK_ARGS_COUNT_MISMATCH:
            return (
                f"block {self.subject} expects {self.arity} arguments, "
                f"but {self.given} were given"
            )
        if kind is DiagnosticKind.REPR_ARGS_COUNT_MISMATCH:
            return (
                f"repr {self.subject} expects {self.arity} arguments, "
                f"but {self.given} were given"
            )
        if kind is DiagnosticKind.PROC_ARGS_COUNT_MISMATCH:
            return f"procedure expects {self.arity} arguments, but {self.given} were given"
        if kind is DiagnosticKind.FUNC_ARGS_COUNT_MISMATCH:
            return f"function expects {self.arity} arguments, but {self.given} were given"
        if kind is DiagnosticKind.TYPE_MISMATCH:
            return f"type mismatch: expected {self.expected_type}, but got {self.given}"
        if kind is DiagnosticKind.STRUCT_DOES_NOT_HAVE_FIELD:
            return f"struct {self.name} does not have field {self.field}"
        raise ValueError(f"no message for {kind}")

    def help(self) -> str | None:
        """An optional hint on how to fix the problem."""
        if self.kind is DiagnosticKind.NO_COSTUMES:
            return _NO_COSTUMES_HELP
        return None

    def level(self) -> Level:
        """Whether this diagnostic is an error or a warning."""
        return Level.WARNING if self.kind in _WARNINGS else Level.ERROR


class DiagnosticError(Exception):
    """Raised when one or more diagnostics stop compilation."""

    def __init__(self, *diagnostics: Diagnostic) -> None:
        if not diagnostics:
            raise ValueError("DiagnosticError needs at least one diagnostic")
        super().__init__("; ".join(d.message() for d in diagnostics))
        self.diagnostics = list(diagnostics)

    @property
    def diagnostic(self) -> Diagnostic:
        """The first diagnostic carried by this error."""
        return self.diagnostics[0]