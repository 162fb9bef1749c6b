"""ConfigScout test package."""

from pathlib import Path
from typing import Any, List, Optional

from core.exceptions import LoadError


# Test utilities
def create_test_file(directory: Path, filename: str, content: str = "") -> Path:
    """Create a test file (and its parent directories) with given content."""
    file_path = directory / filename
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content)
    return file_path


class FakeLoader:
    """Loader strategy returning a fixed value or raising, recording calls."""

    def __init__(self, name: str, result: Any = None, error: Optional[Exception] = None):
        self._name = name
        self.result = result
        self.error = error
        self.calls: List[Path] = []

    @property
    def name(self) -> str:
        return self._name

    async def load(self, path: Path) -> Any:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return self.result


def failing_loader(name: str) -> FakeLoader:
    return FakeLoader(name, error=LoadError("<fake>", name, f"{name} cannot read this file"))
