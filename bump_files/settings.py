from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar, Literal

from model_lib import Event, parse_payload
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bump_files.updaters import DEFAULT_MODULE_NAME

logger = logging.getLogger(__name__)

ENV_PREFIX = "BUMP_FILES_"
PYPROJECT_TOOL_NAME = "bump-files"
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ProjectConfig(Event):
    """Values from the `[tool.bump-files]` table in pyproject.toml"""

    version_filename: str | None = None
    module_filename: str | None = None
    docs_filename: str | None = None
    module_name: str | None = None
    log_level: LogLevel | None = None

    def as_settings_kwargs(self) -> dict[str, str]:
        return {
            name: value
            for name in BumpSettings.model_fields
            if (value := getattr(self, name, None)) is not None
        }


def load_project_config(directory: Path) -> ProjectConfig:
    pyproject_toml = directory / "pyproject.toml"
    if not pyproject_toml.exists():
        return ProjectConfig()
    pyproject = parse_payload(pyproject_toml)
    tool_config = pyproject.get("tool", {}).get(PYPROJECT_TOOL_NAME, {})
    if not tool_config:
        logger.debug(f"no [tool.{PYPROJECT_TOOL_NAME}] in {pyproject_toml}")
    return ProjectConfig(**tool_config)


class BumpSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)

    DEFAULT_VERSION_FILENAME: ClassVar[str] = "./version.go"
    DEFAULT_MODULE_FILENAME: ClassVar[str] = "./go.mod"
    DEFAULT_DOCS_FILENAME: ClassVar[str] = "./README.md"

    version_filename: str = Field(
        default=DEFAULT_VERSION_FILENAME,
        description="File holding the `Version = \"vX.Y.Z\"` declaration.",
    )
    module_filename: str = Field(
        default=DEFAULT_MODULE_FILENAME,
        description="Module manifest declaring the import path with the major version suffix.",
    )
    docs_filename: str = Field(
        default=DEFAULT_DOCS_FILENAME,
        description="Documentation referencing the import path.",
    )
    module_name: str = Field(
        default=DEFAULT_MODULE_NAME,
        description="Last element of the import path before `/v{major}`.",
    )
    log_level: LogLevel = "INFO"


def bump_settings(directory: Path | None = None) -> BumpSettings:
    """Precedence: Env var → pyproject.toml → Default"""
    from_env = BumpSettings()
    if directory is None:
        return from_env
    project_kwargs = load_project_config(directory).as_settings_kwargs()
    for name in from_env.model_fields_set:
        project_kwargs.pop(name, None)
    if not project_kwargs:
        return from_env
    return from_env.model_copy(update=project_kwargs)
