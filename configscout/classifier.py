"""Extension classification for script and typed-script source files."""

from core.types import SCRIPT_EXTENSIONS, TYPED_SCRIPT_EXTENSIONS, Extension, ExtensionClass


def is_script_like(extension: Extension) -> bool:
    """Tests if the extension is a script file extension (".js", ".mjs", ...)."""
    return extension in SCRIPT_EXTENSIONS


def is_typed_script_like(extension: Extension) -> bool:
    """Tests if the extension is a typed-script file extension (".ts", ".tsx")."""
    return extension in TYPED_SCRIPT_EXTENSIONS


def classify_extension(extension: Extension) -> ExtensionClass:
    return ExtensionClass.from_extension(extension)
