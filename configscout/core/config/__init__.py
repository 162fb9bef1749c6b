"""
Settings package for ConfigScout.

This package provides the settings model that supports:
- Environment variables, user and project settings files, runtime overrides
- Type-safe validation using Pydantic
"""

from .settings import ConfigScoutSettings, ResolveConfig, WalkConfig

__all__ = [
    "ConfigScoutSettings",
    "ResolveConfig",
    "WalkConfig",
]
