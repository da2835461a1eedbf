"""Client configuration."""

from .loader import DEFAULT_CONFIG_PATH, load_config
from .schema import DEFAULT_BASE_URL, EdgeeConfig

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_CONFIG_PATH",
    "EdgeeConfig",
    "load_config",
]
