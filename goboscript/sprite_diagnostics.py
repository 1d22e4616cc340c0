"""Diagnostics collected for one sprite, and their rendering."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from .diagnostic import Diagnostic, DiagnosticError, DiagnosticKind, Level
from .translation_unit import Owner, TranslationUnit

if TYPE_CHECKING:
    from .standard_library import StandardLibrary


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _snippet(data: bytes, origin: str, start: int, end: int) -> list[str]:
    line_start = data.rfind(b"\n", 0, start) + 1
    line_no = data.count(b"\n", 0, start) + 1
    column = len(_decode(data[line_start:start])) + 1
    entries = []
    pos = line_start
    number = line_no
    while True:
        newline = data.find(b"\n", pos)
        stop = len(data) if newline < 0 else newline
        seg_start = max(start, pos)
        seg_end = min(end, stop)
        offset = len(_decode(data[pos:seg_start]))
        marked = len(_decode(data[seg_start:seg_end])) if seg_end > seg_start else 0
        text = _decode(data[pos:stop]).rstrip("\r")
        entries.append((number, text, offset, max(marked, 1)))
        if newline < 0 or newline + 1 >= end:
            break
        pos = newline + 1
        number += 1
    width = len(str(entries[-1][0]))
    gutter = " " * width
    rendered = [f"{gutter}--> {origin}:{line_no}:{column}", f"{gutter} |"]
    for number, text, offset, count in entries:
        rendered.append(f"{number:>{width}} | {text}")
        rendered.append(f"{gutter} | {' ' * offset}{'^' * count}")
    return rendered


class SpriteDiagnostics:
    """The translation unit of a sprite and the diagnostics found in it."""

    def __init__(self, path: Path, stdlib: StandardLibrary) -> None:
        path = Path(path)
        self.sprite_name = path.stem
        self.translation_unit = TranslationUnit(path)
        self.diagnostics: list[Diagnostic] = []
        try:
            self.translation_unit.pre_process(stdlib)
        except DiagnosticError as err:
            self.diagnostics.extend(err.diagnostics)

    def report(self, kind: DiagnosticKind, span: tuple[int, int]) -> Diagnostic:
        """Record a diagnostic of ``kind`` at ``span`` and return it."""
        diagnostic = Diagnostic(kind, (span[0], span[1]))
        self.diagnostics.append(diagnostic)
        return diagnostic

    def failed(self) -> bool:
        """Whether any recorded diagnostic is an error."""
        return any(d.level() is Level.ERROR for d in self.diagnostics)

    def _render_one(self, diagnostic: Diagnostic) -> str | None:
        unit = self.translation_unit
        start, include = unit.translate_position(diagnostic.span[0])
        if include.owner is not Owner.LOCAL:
            return None
        data = include.path.read_bytes()
        origin = str(include.path)
        lines = [f"{diagnostic.level().value}: {diagnostic.message()}"]
        if diagnostic.span == (0, 0):
            lines.append(f"--> {origin}")
        else:
            end_position = max(diagnostic.span[1] - 1, diagnostic.span[0])
            end = unit.translate_position(end_position)[0] + 1
            lines.extend(_snippet(data, origin, start, max(end, start + 1)))
        help_text = diagnostic.help()
        if help_text is not None:
            lines.append(f"= {Level.HELP.value}: {help_text}")
        if diagnostic.kind is DiagnosticKind.COMMAND_FAILED:
            lines.append("stderr:")
            lines.extend(f"    {_decode(line)}" for line in diagnostic.stderr.split(b"\n"))
        return "\n".join(lines) + "\n"

    def render(self) -> str:
        """The text of every diagnostic that points into a local file."""
        parts = (self._render_one(d) for d in self.diagnostics)
        return "".join(part for part in parts if part is not None)

    def eprint(self) -> None:
        """Write the rendered diagnostics to standard error."""
        sys.stderr.write(self.render())