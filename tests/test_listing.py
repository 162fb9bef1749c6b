"""Tests for directory listings and config presence probes."""

import os
from pathlib import Path

import pytest

from configscout.listing import (
    has_babel_config,
    has_config_file,
    has_tsc_config,
    list_dirs,
    list_files,
)
from core.exceptions import FilesystemError
from core.types import BABEL_CONFIG_NAMES, TSC_CONFIG_NAMES
from tests import create_test_file


class TestListing:
    """Test cases for list_dirs and list_files."""

    @pytest.fixture
    def tree(self, temp_dir: Path) -> Path:
        create_test_file(temp_dir, "src/app.js", "")
        create_test_file(temp_dir, "src/lib/util.ts", "")
        create_test_file(temp_dir, "node_modules/dep/index.js", "")
        create_test_file(temp_dir, ".cache/blob", "")
        return temp_dir

    @pytest.mark.asyncio
    async def test_list_dirs_returns_absolute_paths(self, tree):
        dirs = await list_dirs(tree, ["node_modules"])

        assert sorted(dirs) == sorted([str(tree / "src"), str(tree / "src" / "lib")])
        assert all(os.path.isabs(d) for d in dirs)

    @pytest.mark.asyncio
    async def test_list_files_returns_absolute_paths(self, tree):
        files = await list_files(tree, ["node_modules"])

        assert sorted(files) == sorted([str(tree / "src" / "app.js"), str(tree / "src" / "lib" / "util.ts")])

    @pytest.mark.asyncio
    async def test_relative_root_is_made_absolute(self, tree, monkeypatch):
        monkeypatch.chdir(tree)

        files = await list_files(".", ["node_modules"])

        assert str(tree / "src" / "app.js") in files
        assert all(os.path.isabs(f) for f in files)

    @pytest.mark.asyncio
    async def test_listing_is_idempotent(self, tree):
        first = await list_files(tree)
        second = await list_files(tree)

        assert set(first) == set(second)

    @pytest.mark.asyncio
    async def test_failure_propagates_without_partial_result(self, tree, monkeypatch):
        real_scandir = os.scandir

        def scandir(path):
            if os.path.basename(path) == "lib":
                raise PermissionError(13, "Permission denied", path)
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", scandir)

        with pytest.raises(FilesystemError):
            await list_files(tree)

    @pytest.mark.asyncio
    async def test_missing_root_raises(self, temp_dir):
        with pytest.raises(FilesystemError):
            await list_dirs(temp_dir / "nope")


class TestPresenceProbes:
    """Test cases for the Babel and TypeScript presence probes."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", sorted(BABEL_CONFIG_NAMES))
    async def test_babel_config_names(self, temp_dir, name):
        create_test_file(temp_dir, f"packages/web/{name}", "{}")

        assert await has_babel_config(temp_dir) is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", sorted(TSC_CONFIG_NAMES))
    async def test_tsc_config_names(self, temp_dir, name):
        create_test_file(temp_dir, name, "{}")

        assert await has_tsc_config(temp_dir) is True

    @pytest.mark.asyncio
    async def test_no_config_found(self, temp_dir):
        create_test_file(temp_dir, "src/index.js", "")
        create_test_file(temp_dir, "babel.config.yaml", "")

        assert await has_babel_config(temp_dir) is False
        assert await has_tsc_config(temp_dir) is False

    @pytest.mark.asyncio
    async def test_base_name_is_compared_not_path(self, temp_dir):
        create_test_file(temp_dir, "tsconfig.json.d/readme.md", "")

        assert await has_tsc_config(temp_dir) is False

    @pytest.mark.asyncio
    async def test_config_in_skipped_directory_is_ignored(self, temp_dir):
        create_test_file(temp_dir, "node_modules/lib/tsconfig.json", "{}")

        assert await has_tsc_config(temp_dir, ["node_modules"]) is False
        assert await has_tsc_config(temp_dir) is True

    @pytest.mark.asyncio
    async def test_config_in_hidden_directory_is_ignored(self, temp_dir):
        create_test_file(temp_dir, ".github/.babelrc", "{}")

        assert await has_babel_config(temp_dir) is False

    @pytest.mark.asyncio
    async def test_generic_probe(self, temp_dir):
        create_test_file(temp_dir, "deep/er/setup.cfg", "")

        assert await has_config_file(temp_dir, (), {"setup.cfg"}) is True
        assert await has_config_file(temp_dir, (), {"tox.ini"}) is False

    @pytest.mark.asyncio
    async def test_probe_propagates_filesystem_error(self, temp_dir):
        with pytest.raises(FilesystemError):
            await has_tsc_config(temp_dir / "missing")


class _FakeFileEntry:
    def __init__(self, name: str):
        self.name = name

    def is_dir(self, follow_symlinks: bool = True) -> bool:
        return False

    def is_file(self, follow_symlinks: bool = True) -> bool:
        return True


class _CountingDirectory:
    """Scandir stand-in producing many file entries lazily and counting reads."""

    def __init__(self, count: int, match_index: int, match_name: str):
        self.count = count
        self.match_index = match_index
        self.match_name = match_name
        self.read = 0
        self.closed = False

    def __iter__(self):
        return self

    def __next__(self):
        if self.read >= self.count:
            raise StopIteration
        name = self.match_name if self.read == self.match_index else f"module_{self.read}.js"
        self.read += 1
        return _FakeFileEntry(name)

    def close(self):
        self.closed = True


class TestProbeTermination:
    """The probe stops reading entries at the first match."""

    @pytest.mark.asyncio
    async def test_stops_after_third_of_ten_thousand_entries(self, monkeypatch):
        directory = _CountingDirectory(10_000, match_index=2, match_name="tsconfig.json")
        monkeypatch.setattr(os, "scandir", lambda path: directory)

        assert await has_tsc_config("/virtual/project") is True
        assert directory.read == 3
        assert directory.closed

    @pytest.mark.asyncio
    async def test_reads_every_entry_when_nothing_matches(self, monkeypatch):
        directory = _CountingDirectory(500, match_index=-1, match_name="tsconfig.json")
        monkeypatch.setattr(os, "scandir", lambda path: directory)

        assert await has_tsc_config("/virtual/project") is False
        assert directory.read == 500
        assert directory.closed
