import subprocess
import time
from unittest import mock

import pytest
from semver import Version

from goboscript.standard_library import StandardLibrary, StandardLibraryError


def _completed(args, returncode=0, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)


def test_path_is_versioned_directory(tmp_path):
    library = StandardLibrary(Version.parse("1.2.3"), tmp_path)
    assert library.path == tmp_path / "v1.2.3"
    assert library.version == Version(1, 2, 3)


def test_from_latest_uses_fresh_verinfo(tmp_path):
    (tmp_path / "verinfo.txt").write_text(f"1.4.0/{int(time.time())}")
    with mock.patch("subprocess.run") as run:
        library = StandardLibrary.from_latest(tmp_path)
    run.assert_not_called()
    assert library.version == Version(1, 4, 0)
    assert library.path == tmp_path / "v1.4.0"


def test_from_latest_rejects_invalid_version(tmp_path):
    (tmp_path / "verinfo.txt").write_text(f"garbage/{int(time.time())}")
    with pytest.raises(StandardLibraryError, match="invalid semver"):
        StandardLibrary.from_latest(tmp_path)


def test_from_latest_refreshes_stale_checkout(tmp_path):
    (tmp_path / "verinfo.txt").write_text("1.0.0/0")
    (tmp_path / "main" / ".git").mkdir(parents=True)
    calls = []

    def fake_run(args, **kwargs):
        calls.append(list(args))
        if args[1] == "describe":
            return _completed(args, stdout=b"v2.0.0\n")
        return _completed(args)

    with mock.patch("subprocess.run", side_effect=fake_run):
        library = StandardLibrary.from_latest(tmp_path)
    assert calls[0] == ["git", "pull"]
    assert library.version == Version(2, 0, 0)
    assert library.path == tmp_path / "main"
    assert (tmp_path / "verinfo.txt").read_text().startswith("2.0.0/")


def test_from_latest_clone_failure(tmp_path):
    def fake_run(args, **kwargs):
        return _completed(args, returncode=1)

    with mock.patch("subprocess.run", side_effect=fake_run):
        with pytest.raises(StandardLibraryError, match="Failed to clone"):
            StandardLibrary.from_latest(tmp_path)


def test_from_latest_bad_tag(tmp_path):
    def fake_run(args, **kwargs):
        if args[1] == "describe":
            return _completed(args, stdout=b"nightly\n")
        return _completed(args)

    with mock.patch("subprocess.run", side_effect=fake_run):
        with pytest.raises(StandardLibraryError, match="not a valid semver"):
            StandardLibrary.from_latest(tmp_path)


def test_fetch_skips_existing(tmp_path):
    library = StandardLibrary(Version.parse("1.2.3"), tmp_path)
    library.path.mkdir()
    with mock.patch("subprocess.run") as run:
        library.fetch()
    run.assert_not_called()
    assert library.path.is_dir()


def test_fetch_clones_tag_and_removes_git(tmp_path):
    library = StandardLibrary(Version.parse("1.2.3"), tmp_path)
    seen = []

    def fake_run(args, **kwargs):
        seen.append(list(args))
        (library.path / ".git").mkdir()
        return _completed(args)

    with mock.patch("subprocess.run", side_effect=fake_run):
        library.fetch()
    assert seen[0][:3] == ["git", "clone", "--depth=1"]
    assert seen[0][-3:] == ["--branch", "v1.2.3", str(library.path)]
    assert not (library.path / ".git").exists()


def test_fetch_failure(tmp_path):
    library = StandardLibrary(Version.parse("1.2.3"), tmp_path)

    def fake_run(args, **kwargs):
        return _completed(args, returncode=128)

    with mock.patch("subprocess.run", side_effect=fake_run):
        with pytest.raises(StandardLibraryError, match="1.2.3"):
            library.fetch()