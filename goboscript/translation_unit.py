"""Source text of a sprite with includes and conditional sections resolved."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from .diagnostic import Diagnostic, DiagnosticError, DiagnosticKind

if TYPE_CHECKING:
    from .standard_library import StandardLibrary

_LINE = re.compile(rb"[^\r\n]*")
_HASH = ord("#")


class Owner(Enum):
    """Where the text of an include comes from."""

    LOCAL = "local"
    STANDARD_LIBRARY = "standard_library"


@dataclass(frozen=True)
class Include:
    """A section of a source file that is part of the translation unit."""

    unit_range: range
    source_range: range
    path: Path
    owner: Owner


def _with_gs(path: Path) -> Path:
    return path.with_suffix(".gs") if path.name else path


def _shift(r: range, n: int) -> range:
    return range(r.start + n, r.stop + n)


class TranslationUnit:
    """A source file with its ``%include`` and ``%if`` directives applied."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._text = bytearray(self.path.read_bytes())
        self._defines: set[str] = set()
        self._included: set[str] = set()
        self._current_include = 0
        whole = range(0, len(self._text))
        self._includes = [Include(whole, whole, self.path, Owner.LOCAL)]

    def pre_process(self, stdlib: StandardLibrary) -> None:
        """Resolve directives; raise DiagnosticError for failed includes."""
        diagnostics = self._parse(stdlib)
        if diagnostics:
            raise DiagnosticError(*diagnostics)

    def text(self) -> str:
        """The current text of the unit."""
        return self._text.decode("utf-8")

    def _line(self, i: int) -> bytes:
        return _LINE.match(self._text, i).group()

    def _skip_cr(self, i: int) -> int:
        return i + 1 if self._text.startswith(b"\r", i) else i

    def _parse(self, stdlib: StandardLibrary) -> list[Diagnostic]:
        text = self._text
        diagnostics: list[Diagnostic] = []
        comment = 0
        i = 0
        while i < len(text):
            if comment > 0:
                if text.startswith(b"\n%", i):
                    i += 2
                    text[i - 1] = _HASH
                    if text.startswith(b"if", i):
                        comment += 1
                    elif text.startswith(b"endif", i):
                        comment -= 1
                elif text.startswith(b"\n", i):
                    i += 1
                    if i < len(text):
                        text[i] = _HASH
                else:
                    i += 1
                continue

            directive = False
            if text.startswith(b"\n%", i):
                i += 2
                directive = True
            elif i == 0 and text.startswith(b"%"):
                i += 1
                directive = True
            if not directive:
                i += 1
                continue

            if text.startswith(b"include", i):
                text[i - 1] = _HASH
                i += len(b"include")
                line = self._line(i)
                path_span = (i, i + len(line))
                i += len(line)
                i = self._skip_cr(i)
                if text.startswith(b"\n", i):
                    i += 1
                path = line.decode("utf-8").strip()
                if path not in self._included:
                    try:
                        self._include(path, i, stdlib)
                    except OSError as err:
                        diagnostics.append(
                            Diagnostic(DiagnosticKind.IO_ERROR, path_span, error=err)
                        )
                    self._included.add(path)
                if text.startswith(b"%", i):
                    i -= 1
            elif text.startswith(b"define", i):
                i += len(b"define")
                line = self._line(i)
                i = self._skip_cr(i + len(line))
                self._defines.add(line.decode("utf-8").strip())
            elif text.startswith(b"undef", i):
                i += len(b"undef")
                line = self._line(i)
                i = self._skip_cr(i + len(line))
                self._defines.discard(line.decode("utf-8").strip())
            elif text.startswith(b"if", i):
                text[i - 1] = _HASH
                i += len(b"if")
                invert = False
                if text.startswith(b" not ", i):
                    i += len(b" not ")
                    invert = True
                line = self._line(i)
                i = self._skip_cr(i + len(line))
                if (line.decode("utf-8").strip() in self._defines) == invert:
                    comment = 1
            elif text.startswith(b"endif", i):
                text[i - 1] = _HASH
                i += len(b"endif")
        return diagnostics

    def _include(self, name: str, begin: int, stdlib: StandardLibrary) -> None:
        if name.startswith("std/"):
            owner = Owner.STANDARD_LIBRARY
            path = Path(stdlib.path) / name[len("std/") :]
        else:
            owner = Owner.LOCAL
            path = self.path.parent / name
        if not _with_gs(path).is_file() and path.is_dir():
            path = path / path.name
        path = _with_gs(path)
        buffer = path.read_bytes()
        size = len(buffer)
        self._text[begin:begin] = buffer

        index = self._current_include
        current = self._includes.pop(index)
        source_start = current.source_range.start
        top = range(current.unit_range.start, begin)
        bottom = range(begin, current.unit_range.stop)
        top_source_end = source_start + len(top)
        self._includes[index:index] = [
            Include(top, range(source_start, top_source_end), current.path, current.owner),
            Include(range(begin, begin + size), range(0, size), path, owner),
            Include(
                bottom,
                range(top_source_end, top_source_end + len(bottom)),
                current.path,
                current.owner,
            ),
        ]
        self._includes[index + 2 :] = [
            Include(
                _shift(include.unit_range, size),
                include.source_range,
                include.path,
                include.owner,
            )
            for include in self._includes[index + 2 :]
        ]
        self._current_include += 1

    def translate_position(self, position: int) -> tuple[int, Include]:
        """Map a unit offset to its offset in the source file it came from."""
        for include in self._includes:
            if position in include.unit_range:
                offset = position - include.unit_range.start
                return include.source_range.start + offset, include
        raise ValueError(f"invalid position {position} in {self.path}")