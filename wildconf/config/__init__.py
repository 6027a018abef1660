"""Library defaults (YAML) and the helpers that read them."""

from .manager import ConfigManager

__all__ = [
    "ConfigManager",
]
