"""Packaged YAML defaults and the manager that loads them."""

from .manager import ConfigManager

__all__ = [
    "ConfigManager",
]
