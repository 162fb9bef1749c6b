"""ConfigScout - Locate and load configuration files across working and original roots."""

__version__ = "0.3.0"
__description__ = "Locate and load configuration files across working and original roots"

from .classifier import classify_extension, is_script_like, is_typed_script_like
from .cosmic import CosmicSupport, open_local_cosmic
from .listing import has_babel_config, has_config_file, has_tsc_config, list_dirs, list_files
from .paths import get_relative_path
from .resolver import open_files, open_local_configs
from .walker import walk, walk_dirs, walk_files

__all__ = [
    "classify_extension",
    "is_script_like",
    "is_typed_script_like",
    "walk",
    "walk_dirs",
    "walk_files",
    "list_dirs",
    "list_files",
    "has_config_file",
    "has_babel_config",
    "has_tsc_config",
    "open_files",
    "open_local_configs",
    "open_local_cosmic",
    "CosmicSupport",
    "get_relative_path",
]
