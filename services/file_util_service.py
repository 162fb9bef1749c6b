"""File utility service - one method per walk, probe and resolution operation."""

from typing import AsyncIterator, Callable, Iterable, List, Optional, Sequence

from core.models import CosmicResult, LoadResult, RootPair
from interfaces.config_loader import ConfigLoader
from providers.loading import default_loaders

from configscout import classifier, cosmic, listing, paths, resolver, walker
from configscout.paths import PathLike

from .base_service import BaseService


class FileUtilService(BaseService):
    """Binds the file operations to a root pair, loaders and warning sink.

    Operations that take a directory default to the original root.
    """

    def __init__(
        self,
        roots: RootPair,
        warn: Optional[Callable[[str], None]] = None,
        loaders: Optional[Sequence[ConfigLoader]] = None,
        cosmic_support: cosmic.SupportInput = None
    ):
        """Initialize the service.

        Args:
            roots: Working and original root directories
            warn: Sink for load failure warnings
            loaders: Loader strategies tried in order
            cosmic_support: Contributions merged into every cosmic search
        """
        super().__init__(roots, warn)
        self._loaders = list(loaders) if loaders is not None else default_loaders()
        self._cosmic_support = cosmic_support

    @property
    def loaders(self) -> List[ConfigLoader]:
        return list(self._loaders)

    def _dir(self, root_dir: Optional[PathLike]) -> PathLike:
        return root_dir if root_dir is not None else self.roots.original_root

    async def get_dir_list(self, root_dir: Optional[PathLike] = None, skip_dirs: Iterable[str] = ()) -> List[str]:
        return await listing.list_dirs(self._dir(root_dir), skip_dirs)

    async def get_file_list(self, root_dir: Optional[PathLike] = None, skip_dirs: Iterable[str] = ()) -> List[str]:
        return await listing.list_files(self._dir(root_dir), skip_dirs)

    def get_relative_path(self, base_path: PathLike, file_path: PathLike) -> str:
        return paths.get_relative_path(base_path, file_path)

    async def has_babel_config(self, root_dir: Optional[PathLike] = None, skip_dirs: Iterable[str] = ()) -> bool:
        return await listing.has_babel_config(self._dir(root_dir), skip_dirs)

    async def has_tsc_config(self, root_dir: Optional[PathLike] = None, skip_dirs: Iterable[str] = ()) -> bool:
        return await listing.has_tsc_config(self._dir(root_dir), skip_dirs)

    def is_js(self, extension: str) -> bool:
        return classifier.is_script_like(extension)

    def is_ts(self, extension: str) -> bool:
        return classifier.is_typed_script_like(extension)

    async def open_files(
        self,
        base_path: PathLike,
        base_file_name: str,
        extensions: Iterable[str] = (),
        error_message: str = ''
    ) -> Optional[LoadResult]:
        """Open the first existing candidate under base_path.

        Display paths are relative to the original root.
        """
        return await resolver.open_files(
            base_path, base_file_name, extensions, error_message,
            display_root=self.roots.original_root, loaders=self._loaders, warn=self.warn,
        )

    async def open_local_configs(
        self,
        base_file_name: str,
        extensions: Iterable[str] = (),
        error_message: str = ''
    ) -> Optional[LoadResult]:
        """Open a local config from the working root, then the original root."""
        return await resolver.open_local_configs(
            self.roots, base_file_name, extensions, error_message,
            loaders=self._loaders, warn=self.warn,
        )

    async def open_local_cosmic(self, options) -> Optional[CosmicResult]:
        return await cosmic.open_local_cosmic(options, self.roots, self._cosmic_support)

    def walk_dir(self, root_dir: Optional[PathLike] = None, skip_dirs: Iterable[str] = ()) -> AsyncIterator[str]:
        return walker.walk_dirs(self._dir(root_dir), skip_dirs)

    def walk_files(self, root_dir: Optional[PathLike] = None, skip_dirs: Iterable[str] = ()) -> AsyncIterator[str]:
        return walker.walk_files(self._dir(root_dir), skip_dirs)
