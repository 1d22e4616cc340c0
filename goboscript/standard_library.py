"""Locating and downloading versions of the standard library."""

from __future__ import annotations

import shutil
import subprocess
import time
from pathlib import Path

from semver import Version

STD_REPOSITORY = "https://github.com/goboscript/std"

_REFRESH_SECONDS = 60 * 60 * 24 * 7


class StandardLibraryError(RuntimeError):
    """Raised when the standard library cannot be located or fetched."""


def _git(args: list[str], failure: str, cwd: Path | None = None) -> None:
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as err:
        raise StandardLibraryError(failure) from err
    if result.returncode != 0:
        raise StandardLibraryError(failure)


def _parse_version(text: str, failure: str) -> Version:
    try:
        return Version.parse(text)
    except ValueError as err:
        raise StandardLibraryError(failure) from err


class StandardLibrary:
    """A version of the standard library and the directory it lives in."""

    def __init__(self, version: Version, cache_path: Path) -> None:
        self.version = version
        self.path = Path(cache_path) / f"v{version}"

    def __repr__(self) -> str:
        return f"StandardLibrary(version={self.version!s}, path={self.path!s})"

    @classmethod
    def from_latest(cls, cache_path: Path) -> StandardLibrary:
        """Find the newest version, checking for updates at most once a week."""
        cache_path = Path(cache_path)
        now = int(time.time())
        verinfo = cache_path / "verinfo.txt"
        if verinfo.exists():
            content = verinfo.read_text(encoding="utf-8")
            version_text, sep, updated_text = content.partition("/")
            if not sep:
                raise StandardLibraryError("verinfo.txt is malformed")
            version = _parse_version(
                version_text.strip(), "verinfo.txt contains invalid semver version"
            )
            try:
                last_updated = int(updated_text.strip())
            except ValueError as err:
                raise StandardLibraryError("verinfo.txt is malformed") from err
            if now - last_updated < _REFRESH_SECONDS:
                return cls(version, cache_path)

        path = cache_path / "main"
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise StandardLibraryError(
                f"Failed to create standard library version directory {path}"
            ) from err
        if (path / ".git").exists():
            _git(["pull"], "Failed to fetch standard library updates", cwd=path)
        else:
            _git(
                ["clone", STD_REPOSITORY, "--branch", "main", str(path)],
                "Failed to clone standard library",
            )
        try:
            output = subprocess.run(
                ["git", "describe", "--tags", "--abbrev=0"],
                cwd=path,
                capture_output=True,
                check=False,
            )
        except OSError as err:
            raise StandardLibraryError("Failed to get standard library version") from err
        if output.returncode != 0:
            error = output.stderr.decode("utf-8")
            raise StandardLibraryError(
                f"Failed to get latest standard library version {error}"
            )
        tag = output.stdout.decode("utf-8").strip()
        tag = tag.removeprefix("v")
        verinfo.write_text(f"{tag}/{now}", encoding="utf-8")
        version = _parse_version(
            tag, "Latest tag on standard library is not a valid semver version"
        )
        library = cls(version, cache_path)
        library.path = path
        return library

    def fetch(self) -> None:
        """Download this version unless it is already present."""
        if self.path.exists():
            return
        try:
            self.path.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise StandardLibraryError(
                f"Failed to create standard library version directory {self.version}"
            ) from err
        _git(
            [
                "clone",
                "--depth=1",
                STD_REPOSITORY,
                "--branch",
                f"v{self.version}",
                str(self.path),
            ],
            f"Failed to clone standard library version {self.version}",
        )
        try:
            shutil.rmtree(self.path / ".git")
        except OSError as err:
            raise StandardLibraryError(
                "Failed to remove .git directory from standard library version "
                f"{self.version}"
            ) from err