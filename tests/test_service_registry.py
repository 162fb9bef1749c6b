"""Tests for FileUtilService and the operation registry."""

import json
import os
from pathlib import Path

import pytest

from core.models import LoadResult, RootPair
from registry import DEFAULT_PREFIX, OPERATIONS, OperationRegistry
from services import FileUtilService
from tests import FakeLoader, create_test_file, failing_loader


@pytest.fixture
def roots(temp_dir: Path) -> RootPair:
    working = temp_dir / "work"
    original = temp_dir / "orig"
    working.mkdir()
    original.mkdir()
    return RootPair(working_root=str(working), original_root=str(original))


class TestFileUtilService:
    """Test cases for FileUtilService."""

    @pytest.mark.asyncio
    async def test_listing_defaults_to_original_root(self, roots):
        create_test_file(Path(roots.original_root), "src/a.js", "")
        service = FileUtilService(roots)

        assert await service.get_file_list() == [os.path.join(roots.original_root, "src", "a.js")]
        assert await service.get_dir_list() == [os.path.join(roots.original_root, "src")]

    @pytest.mark.asyncio
    async def test_probes(self, roots):
        create_test_file(Path(roots.working_root), "tsconfig.json", "{}")
        service = FileUtilService(roots)

        assert await service.has_tsc_config(roots.working_root) is True
        assert await service.has_tsc_config() is False
        assert await service.has_babel_config(roots.working_root) is False

    def test_classifiers_and_relative_path(self, roots):
        service = FileUtilService(roots)

        assert service.is_js(".mjs")
        assert service.is_ts(".tsx")
        assert not service.is_js(".ts")
        assert service.get_relative_path("/a", "/a/b.json") == f".{os.sep}b.json"

    @pytest.mark.asyncio
    async def test_open_local_configs_uses_injected_loaders_and_sink(self, roots):
        create_test_file(Path(roots.working_root), "app.json", "{}")
        create_test_file(Path(roots.original_root), "app.json", "{}")
        loader = failing_loader("strict")
        warnings = []
        service = FileUtilService(roots, warn=warnings.append, loaders=[loader])

        assert await service.open_local_configs("app", [".json"], "App config broken.") is None
        assert len(loader.calls) == 2
        assert len(warnings) == 2
        assert all(w.startswith("App config broken.") for w in warnings)

    @pytest.mark.asyncio
    async def test_open_files_display_relative_to_original_root(self, roots):
        create_test_file(Path(roots.original_root), "conf/app.json", json.dumps({"a": 1}))
        service = FileUtilService(roots)

        result = await service.open_files(os.path.join(roots.original_root, "conf"), "app", [".json"])

        assert isinstance(result, LoadResult)
        assert result.relative_path == f".{os.sep}conf{os.sep}app.json"

    @pytest.mark.asyncio
    async def test_open_local_cosmic_with_service_support(self, roots):
        from configscout.cosmic import CosmicSupport

        create_test_file(Path(roots.working_root), "tool.ini", "[tool]\n")
        service = FileUtilService(
            RootPair(working_root=roots.working_root, original_root=roots.working_root),
            cosmic_support=CosmicSupport(
                search_places=["tool.ini"], loaders={".ini": FakeLoader("ini", result={"ok": True})}
            ),
        )

        result = await service.open_local_cosmic({"module_name": "tool"})

        assert result.config == {"ok": True}

    @pytest.mark.asyncio
    async def test_walks(self, roots):
        create_test_file(Path(roots.original_root), "d/f.txt", "")
        service = FileUtilService(roots)

        dirs = [d async for d in service.walk_dir()]
        files = [f async for f in service.walk_files()]

        assert dirs == [os.path.join(roots.original_root, "d")]
        assert files == [os.path.join(roots.original_root, "d", "f.txt")]

    def test_loaders_default_order(self, roots):
        assert [loader.name for loader in FileUtilService(roots).loaders] == ["eager", "deferred"]


class _RecordingBus:
    def __init__(self):
        self.handlers = {}

    def on(self, name, handler):
        self.handlers[name] = handler


class TestOperationRegistry:
    """Test cases for OperationRegistry."""

    def test_registers_every_operation(self, roots):
        registry = OperationRegistry(FileUtilService(roots))

        assert len(registry.names()) == len(OPERATIONS) == 12
        assert all(name.startswith(DEFAULT_PREFIX) for name in registry.names())

    @pytest.mark.asyncio
    async def test_dispatch_sync_operation(self, roots):
        registry = OperationRegistry(FileUtilService(roots))

        assert await registry.dispatch(f"{DEFAULT_PREFIX}is:js", ".jsx") is True
        assert await registry.dispatch(f"{DEFAULT_PREFIX}is:ts", ".jsx") is False

    @pytest.mark.asyncio
    async def test_dispatch_async_operation(self, roots):
        create_test_file(Path(roots.working_root), "app.yaml", "from: working\n")
        registry = OperationRegistry(FileUtilService(roots))

        result = await registry.dispatch(f"{DEFAULT_PREFIX}configs:local:open", "app", [".yaml"])

        assert result.data == {"from": "working"}

    @pytest.mark.asyncio
    async def test_dispatch_walk_returns_iterator(self, roots):
        create_test_file(Path(roots.original_root), "x.txt", "")
        registry = OperationRegistry(FileUtilService(roots))

        walk = await registry.dispatch(f"{DEFAULT_PREFIX}files:walk")

        assert [path async for path in walk] == [os.path.join(roots.original_root, "x.txt")]

    @pytest.mark.asyncio
    async def test_unknown_operation(self, roots):
        registry = OperationRegistry(FileUtilService(roots))

        with pytest.raises(KeyError):
            await registry.dispatch("configscout:file:util:nope")

    def test_custom_prefix_and_attach(self, roots):
        registry = OperationRegistry(FileUtilService(roots), prefix="host:")
        bus = _RecordingBus()

        registry.attach(bus)

        assert set(bus.handlers) == {f"host:{name}" for name in OPERATIONS}
        assert bus.handlers["host:path:relative:get"]("/a", "/a/b") == f".{os.sep}b"

    def test_register_replaces_handler(self, roots):
        registry = OperationRegistry(FileUtilService(roots))

        registry.register(f"{DEFAULT_PREFIX}is:js", lambda extension: "replaced")

        assert registry.get(f"{DEFAULT_PREFIX}is:js")(".js") == "replaced"
        assert registry.service.roots == roots
