"""Dispatcher settings and the YAML loader for them."""

import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from subcmd.errors import SubcmdConfigError
from subcmd.logging import get_logger
from subcmd.message import ColorMode

logger = get_logger(__name__)

DEFAULT_CONFIG_FILENAME = 'subcmd.config.yaml'
DEFAULT_MAX_SUGGESTION_DISTANCE = 2


def default_program_name() -> str:
    """Return the basename of the running program."""
    if not sys.argv or not sys.argv[0]:
        return 'subcmd'
    return Path(sys.argv[0]).name


class DispatcherConfig(BaseModel):
    """Settings shared by every dispatch of one program."""

    model_config = ConfigDict(extra='forbid', frozen=True)

    program_name: str = Field(default_factory=default_program_name)
    description: str | None = None
    max_suggestion_distance: int = Field(default=DEFAULT_MAX_SUGGESTION_DISTANCE, ge=0)
    color: ColorMode = 'auto'
    verbose: bool = False

    @field_validator('program_name')
    @classmethod
    def validate_program_name(cls, v: str) -> str:
        """Validate that program name is not empty."""
        if not v.strip():
            msg = 'Program name cannot be empty'
            raise ValueError(msg)
        return v.strip()


def _load_yaml_config(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        msg = f'configuration file not found: {config_path}'
        raise SubcmdConfigError(msg)

    logger.debug('loading_config', config=str(config_path))
    try:
        with config_path.open() as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        msg = f'failed to parse YAML: {exc}'
        raise SubcmdConfigError(msg) from exc

    if not isinstance(data, dict):
        msg = f'configuration root must be a mapping in {config_path}'
        raise SubcmdConfigError(msg)

    return data


def load_config(config_path: Path, **defaults: Any) -> DispatcherConfig:
    """Read a DispatcherConfig from YAML.

    Keyword arguments supply values for keys the file does not set.
    """
    data = {key: value for key, value in defaults.items() if value is not None}
    data.update(_load_yaml_config(config_path))
    try:
        config = DispatcherConfig.model_validate(data)
    except ValidationError as exc:
        msg = f'invalid configuration in {config_path}: {exc}'
        raise SubcmdConfigError(msg) from exc

    logger.debug('config_loaded', _verbose_config=config.model_dump())
    return config
