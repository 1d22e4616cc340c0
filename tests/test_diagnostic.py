import pytest

from goboscript.diagnostic import Diagnostic, DiagnosticError, DiagnosticKind, Level


def test_fixed_message():
    assert Diagnostic(DiagnosticKind.NO_COSTUMES, (0, 0)).message() == "no costumes"
    assert Diagnostic(DiagnosticKind.INVALID_TOKEN, (0, 1)).message() == "invalid token"


def test_unrecognized_eof_strips_quotes():
    diag = Diagnostic(DiagnosticKind.UNRECOGNIZED_EOF, (3, 4), expected=('"NAME"',))
    assert diag.message() == "unrecognized end of file, expected one of `NAME`"


def test_unrecognized_token_joins_expected():
    diag = Diagnostic(
        DiagnosticKind.UNRECOGNIZED_TOKEN, (0, 1), expected=('"("', '"NAME"')
    )
    assert diag.message().startswith("unrecognized token, expected one of ")
    assert diag.message().endswith("`(`, `NAME`")


def test_unused_messages_contain_name():
    diag = Diagnostic(DiagnosticKind.UNUSED_PROC, (0, 1), name="walk")
    assert diag.message() == "unused procedure walk"


def test_struct_field_message():
    diag = Diagnostic(
        DiagnosticKind.STRUCT_DOES_NOT_HAVE_FIELD, (0, 1), name="point", field="z"
    )
    assert diag.message() == "struct point does not have field z"


def test_io_error_message_uses_error_text():
    error = FileNotFoundError("missing file")
    diag = Diagnostic(DiagnosticKind.IO_ERROR, (0, 1), error=error)
    assert diag.message() == str(error)


def test_count_mismatch_mentions_counts():
    diag = Diagnostic(
        DiagnosticKind.BLOCK_ARGS_COUNT_MISMATCH, (0, 1), subject="Say", arity=1, given=2
    )
    assert "Say" in diag.message()
    assert "1 arguments" in diag.message()
    assert "2 were given" in diag.message()


def test_help_only_for_no_costumes():
    assert Diagnostic(DiagnosticKind.NO_COSTUMES, (0, 0)).help() == (
        "if this is a header, move it inside a directory such as `lib/`"
    )
    assert Diagnostic(DiagnosticKind.NOT_STRUCT, (0, 0)).help() is None


@pytest.mark.parametrize(
    "kind",
    [
        DiagnosticKind.UNUSED_VARIABLE,
        DiagnosticKind.UNUSED_ENUM_VARIANT,
        DiagnosticKind.FOLLOWED_BY_UNREACHABLE_CODE,
    ],
)
def test_warning_levels(kind):
    assert Diagnostic(kind, (0, 1), name="x").level() is Level.WARNING


@pytest.mark.parametrize(
    "kind",
    [DiagnosticKind.INVALID_TOKEN, DiagnosticKind.TYPE_MISMATCH, DiagnosticKind.NO_COSTUMES],
)
def test_error_levels(kind):
    assert Diagnostic(kind, (0, 1)).level() is Level.ERROR


def test_every_kind_has_a_message():
    for kind in DiagnosticKind:
        diag = Diagnostic(kind, (0, 1), name="n", error=OSError("e"))
        assert isinstance(diag.message(), str) and diag.message()


def test_diagnostic_error_carries_diagnostics():
    first = Diagnostic(DiagnosticKind.INVALID_TOKEN, (0, 1))
    second = Diagnostic(DiagnosticKind.NOT_STRUCT, (2, 3))
    error = DiagnosticError(first, second)
    assert error.diagnostics == [first, second]
    assert error.diagnostic is first
    assert "invalid token" in str(error)


def test_diagnostic_error_requires_diagnostic():
    with pytest.raises(ValueError):
        DiagnosticError()