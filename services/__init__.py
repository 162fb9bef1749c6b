"""Service layer for ConfigScout - file operations bound to their environment."""

from .base_service import BaseService
from .file_util_service import FileUtilService

__all__ = [
    'BaseService',
    'FileUtilService',
]
