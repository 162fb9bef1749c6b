"""Base service class for ConfigScout services."""

from abc import ABC
from typing import Callable, Optional

from loguru import logger

from core.models import RootPair


class BaseService(ABC):
    """Base service class holding the root pair and the warning sink."""

    def __init__(self, roots: RootPair, warn: Optional[Callable[[str], None]] = None):
        """Initialize service with its environment.

        Args:
            roots: Working and original root directories
            warn: Sink for warning messages (defaults to logger.warning)
        """
        self._roots = roots
        self._warn = warn or logger.warning

    @property
    def roots(self) -> RootPair:
        """Get the working/original root pair."""
        return self._roots

    @property
    def warn(self) -> Callable[[str], None]:
        return self._warn
