"""Configuration loading and credential resolution."""

import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from edgee.config.schema import EdgeeConfig
from edgee.errors import ConfigurationError

DEFAULT_CONFIG_PATH = Path.home() / ".edgee" / "edgee.yaml"

API_KEY_ENV = "EDGEE_API_KEY"
BASE_URL_ENV = "EDGEE_BASE_URL"


def _read_config_file(path: Path) -> dict[str, Any]:
    """Read the YAML config file, returning an empty mapping if it doesn't exist.

    Raises:
        ConfigurationError: If the file exists but is not a valid YAML mapping
    """
    if not path.exists():
        return {}

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    return data


def load_config(
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    path: Optional[Union[str, Path]] = None,
) -> EdgeeConfig:
    """Resolve client configuration.

    Each field is taken from the first source that provides a non-empty value:
    explicit argument, environment variable, YAML config file, default.

    Args:
        api_key: Explicit API key
        base_url: Explicit API base URL
        timeout: Explicit request timeout in seconds
        path: Config file path. If None, uses ~/.edgee/edgee.yaml when present.

    Returns:
        Validated configuration with an API key set

    Raises:
        ConfigurationError: If no API key is available or the config is invalid
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
    elif isinstance(path, str):
        path = Path(path)

    file_data = _read_config_file(path)

    values: dict[str, Any] = dict(file_data)
    for key, explicit, env_name in (
        ("api_key", api_key, API_KEY_ENV),
        ("base_url", base_url, BASE_URL_ENV),
    ):
        value = explicit or os.environ.get(env_name) or file_data.get(key)
        if value:
            values[key] = value
        else:
            values.pop(key, None)

    if timeout is not None:
        values["timeout"] = timeout

    try:
        config = EdgeeConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e

    if not config.api_key:
        raise ConfigurationError(f"{API_KEY_ENV} is not set")

    return config
