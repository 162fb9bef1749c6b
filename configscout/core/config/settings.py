"""
Settings for ConfigScout.

This module provides a single, type-safe settings model for the walker, the
resolvers and the CLI with hierarchical loading from multiple sources.
"""

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.models import RootPair


class WalkConfig(BaseModel):
    """Directory walk configuration."""

    skip_dirs: list[str] = Field(
        default_factory=lambda: ['node_modules'],
        description="Directory names skipped at the top level of a walk"
    )


class ResolveConfig(BaseModel):
    """Candidate resolution configuration."""

    extensions: list[str] = Field(
        default_factory=lambda: ['.json', '.yaml', '.yml', '.toml', '.py'],
        description="Candidate extensions tried in order"
    )

    error_message: str = Field(
        default='Failed to load local configuration.',
        description="Prefix for load failure warnings"
    )

    @field_validator('extensions')
    def validate_extensions(cls, v: list[str]) -> list[str]:
        """Extensions must be empty or start with a dot."""
        for extension in v:
            if extension and not extension.startswith('.'):
                raise ValueError(f"Extension must start with '.': {extension}")
        return v


class ConfigScoutSettings(BaseSettings):
    """
    Unified settings for ConfigScout.

    Settings Sources (in order of precedence):
    1. Runtime parameters (highest priority)
    2. Project settings file (.configscout.json)
    3. User settings file (~/.configscout/config.json)
    4. Environment variables (CONFIGSCOUT_*)
    5. Default values (lowest priority)

    Values read by load_hierarchical() are passed to the constructor, so they
    take precedence over environment variables for the fields they set.

    Environment Variable Examples:
        CONFIGSCOUT_WORKING_ROOT=/tmp/build
        CONFIGSCOUT_ORIGINAL_ROOT=/home/me/project
        CONFIGSCOUT_WALK__SKIP_DIRS='["node_modules", "dist"]'
        CONFIGSCOUT_DEBUG=true
    """

    model_config = SettingsConfigDict(
        env_prefix='CONFIGSCOUT_',
        env_nested_delimiter='__',
        case_sensitive=False,
        validate_default=True,
        extra='ignore',
        env_file=None,
    )

    working_root: str | None = Field(
        default=None,
        description="Directory configuration is resolved from first"
    )

    original_root: str | None = Field(
        default=None,
        description="Directory the tool was invoked from (defaults to the CWD)"
    )

    walk: WalkConfig = Field(default_factory=WalkConfig)

    resolve: ResolveConfig = Field(default_factory=ResolveConfig)

    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    @classmethod
    def load_hierarchical(cls,
                          project_dir: Path | None = None,
                          **override_values: Any) -> 'ConfigScoutSettings':
        """
        Load settings from hierarchical sources.

        Settings files that cannot be read or parsed are skipped.

        Args:
            project_dir: Project directory to search for .configscout.json
            **override_values: Runtime parameter overrides (None values are ignored)

        Returns:
            Loaded and validated settings
        """
        settings_data: dict[str, Any] = {}

        user_settings_path = Path.home() / '.configscout' / 'config.json'
        settings_data.update(_read_settings_file(user_settings_path))

        if project_dir is None:
            project_dir = Path.cwd()
        settings_data.update(_read_settings_file(project_dir / '.configscout.json'))

        settings_data.update({k: v for k, v in override_values.items() if v is not None})

        return cls(**settings_data)

    def get_root_pair(self) -> RootPair:
        """Build the working/original root pair from these settings."""
        return RootPair.create(self.working_root, self.original_root)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode='json', exclude_none=True)

    def __repr__(self) -> str:
        return (
            f"ConfigScoutSettings("
            f"working_root={self.working_root}, "
            f"original_root={self.original_root}, "
            f"walk.skip_dirs={self.walk.skip_dirs}, "
            f"resolve.extensions={self.resolve.extensions})"
        )


def _read_settings_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}

    try:
        with open(path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.debug(f"Skipping settings file {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.debug(f"Skipping settings file {path}: not a JSON object")
        return {}

    return data
