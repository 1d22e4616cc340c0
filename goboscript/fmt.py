"""Formatting of source files: aligning line continuations of directives."""

from __future__ import annotations

from pathlib import Path

MAX_LINE_LENGTH = 88

_CONTENT_WIDTH = MAX_LINE_LENGTH - 1


def format_source(src: bytes) -> bytes:
    """Return ``src`` with the backslashes of continued directives aligned.

    A directive is a line that starts with ``%``. When it ends with a
    backslash, it and every continuation line that follows are padded with
    spaces, or cut, so that the backslash lands in the last column.
    """
    lines = src.split(b"\n")
    in_directive = False
    formatted = []
    for line in lines:
        if in_directive or line.startswith(b"%"):
            if line.endswith(b"\\"):
                content = line[:-1]
                line = content[:_CONTENT_WIDTH].ljust(_CONTENT_WIDTH, b" ") + b"\\"
                in_directive = True
            else:
                in_directive = False
        formatted.append(line)
    return b"\n".join(formatted)


def format_file(path: Path) -> None:
    """Format the file at ``path`` in place."""
    path = Path(path)
    path.write_bytes(format_source(path.read_bytes()))


def format_path(path: Path | None = None) -> list[Path]:
    """Format a file, or every ``.gs`` file below a directory.

    The current directory is used when no path is given. Returns the paths
    that were formatted.
    """
    path = Path.cwd() if path is None else Path(path)
    if path.is_file():
        targets = [path]
    else:
        targets = sorted(path.glob("**/*.gs"))
    for target in targets:
        format_file(target)
    return targets