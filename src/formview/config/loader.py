"""Configuration loader for formview helpers.

This module provides the ConfigLoader class for loading, parsing, and
validating render configuration from YAML files, with environment variable
overrides applied on top of the file contents.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from formview.config.defaults import RENDER_CONFIG_SECTION
from formview.config.validator import first_error_field, flatten_pydantic_errors
from formview.lib.errors import ConfigError, FileNotFoundError
from formview.lib.logging_config import get_logger
from formview.models.config import RenderConfig

logger = get_logger(__name__)

# Environment variable to field name mapping
ENV_VAR_MAP = {
    "open_format": "FORMVIEW_MESSAGE_OPEN_FORMAT",
    "close_string": "FORMVIEW_MESSAGE_CLOSE_STRING",
    "separator_string": "FORMVIEW_MESSAGE_SEPARATOR_STRING",
    "translate_messages": "FORMVIEW_TRANSLATE_MESSAGES",
}


TRUE_WORDS = ("true", "1", "yes", "on")
FALSE_WORDS = ("false", "0", "no", "off")


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse environment variable value to the field's type.

    Raises:
        ConfigError: If a boolean field holds an unrecognized word
    """
    if field_name == "translate_messages":
        word = value.strip().lower()
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
        raise ConfigError(
            field_name,
            f"{ENV_VAR_MAP[field_name]}={value!r} is not a boolean "
            f"(use one of: {', '.join(TRUE_WORDS + FALSE_WORDS)})",
        )
    return value


def _env_overrides(env_vars: os._Environ[str] | dict[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for field_name, env_var_name in ENV_VAR_MAP.items():
        if env_var_name in env_vars:
            overrides[field_name] = _parse_env_value(field_name, env_vars[env_var_name])
    return overrides


class ConfigLoader:
    """Loads RenderConfig instances from YAML files and the environment."""

    def __init__(self, env_vars: dict[str, str] | None = None) -> None:
        """Initialize the loader.

        Args:
            env_vars: Environment mapping to read overrides from.
                Defaults to os.environ.
        """
        self._env_vars = env_vars if env_vars is not None else os.environ

    def parse_yaml(self, file_path: str | Path) -> dict[str, Any]:
        """Read a YAML file into a dictionary.

        Args:
            file_path: Path to the YAML file

        Returns:
            Parsed mapping, empty if the file is empty

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If the YAML is invalid or not a mapping
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(
                str(path),
                "Configuration file not found. Check the --config path.",
            )

        try:
            raw_text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError("yaml_parse", f"Cannot read {path}: {e}") from e

        try:
            content = yaml.safe_load(raw_text)
        except yaml.YAMLError as e:
            raise ConfigError("yaml_parse", f"Invalid YAML in {path}: {e}") from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigError("yaml_parse", f"Expected a mapping in {path}")
        return content

    def build_render_config(self, data: dict[str, Any] | None = None) -> RenderConfig:
        """Validate raw configuration data into a RenderConfig.

        A top-level ``form_element_errors`` section is used when present,
        otherwise data is treated as the section itself. Environment
        overrides win over file values.

        Raises:
            ConfigError: If validation fails
        """
        section = dict(data or {})
        if RENDER_CONFIG_SECTION in section:
            nested = section[RENDER_CONFIG_SECTION] or {}
            if not isinstance(nested, dict):
                raise ConfigError(
                    RENDER_CONFIG_SECTION, "Section must be a mapping of options"
                )
            section = dict(nested)

        overrides = _env_overrides(self._env_vars)
        if overrides:
            logger.debug(f"Applying environment overrides: {sorted(overrides)}")
        section.update(overrides)

        try:
            return RenderConfig(**section)
        except PydanticValidationError as e:
            raise ConfigError(
                first_error_field(e), "\n".join(flatten_pydantic_errors(e))
            ) from e

    def load_render_config(self, file_path: str | Path | None = None) -> RenderConfig:
        """Load render configuration from a YAML file.

        Args:
            file_path: Path to the YAML file, or None for defaults plus
                environment overrides

        Returns:
            Validated RenderConfig
        """
        data = self.parse_yaml(file_path) if file_path is not None else {}
        config = self.build_render_config(data)
        logger.debug(f"Loaded render config from {file_path or '<defaults>'}")
        return config
