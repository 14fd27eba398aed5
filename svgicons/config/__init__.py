"""Registry configuration."""

from .types import IconSetConfig, RegistryConfig

__all__ = ["IconSetConfig", "RegistryConfig"]
