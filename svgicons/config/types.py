"""Configuration types for the icon registry.

Defines the YAML schema:
- sets: icon sets (path or disk, prefix, optional class)
- disks: named storage disks backing disk-based sets
- default_class / fallback: registry-wide settings
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from svgicons.exceptions import ConfigurationError


@dataclass
class IconSetConfig:
    """A registered source of icons."""
    name: str
    prefix: Optional[str] = None
    path: Optional[str] = None
    disk: Optional[str] = None
    css_class: str = ""  # "class" in config files

    @classmethod
    def from_dict(cls, name: str, data: dict) -> "IconSetConfig":
        return cls(
            name=name,
            prefix=data.get("prefix"),
            path=data.get("path"),
            disk=data.get("disk"),
            css_class=data.get("class") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the option mapping used by ``IconFactory.add``.

        Keys that are not set are left out, matching what a user would write.
        """
        data: dict[str, Any] = {}
        if self.path is not None:
            data["path"] = self.path
        if self.disk is not None:
            data["disk"] = self.disk
        if self.prefix is not None:
            data["prefix"] = self.prefix
        if self.css_class:
            data["class"] = self.css_class
        return data

    @property
    def source(self) -> str:
        """Human readable source description."""
        if self.path is not None:
            return f"path:{self.path}"
        if self.disk is not None:
            return f"disk:{self.disk}"
        return ""


@dataclass
class DiskConfig:
    """A named storage disk rooted at a local directory."""
    name: str
    path: str

    @classmethod
    def from_dict(cls, name: str, data: dict) -> "DiskConfig":
        if not data.get("path"):
            raise ConfigurationError(f'Disk "{name}" does not have a path defined.')
        return cls(name=name, path=data["path"])


@dataclass
class RegistryConfig:
    """Configuration for an icon registry."""
    version: int = 1
    default_class: str = ""
    fallback: str = ""
    disks: dict[str, DiskConfig] = field(default_factory=dict)
    sets: dict[str, IconSetConfig] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "RegistryConfig":
        """Create from dictionary (parsed YAML)."""
        disks = {}
        for name, d_data in (data.get("disks") or {}).items():
            disks[name] = DiskConfig.from_dict(name, d_data or {})

        sets = {}
        for name, s_data in (data.get("sets") or {}).items():
            sets[name] = IconSetConfig.from_dict(name, s_data or {})

        return cls(
            version=data.get("version", 1),
            default_class=data.get("default_class") or "",
            fallback=data.get("fallback") or "",
            disks=disks,
            sets=sets,
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "RegistryConfig":
        """Load from YAML file, creating from defaults if missing."""
        if not path.exists():
            cls.write_defaults(path)
        content = path.read_text()
        data = yaml.safe_load(content) or {}
        return cls.from_dict(data)

    @classmethod
    def default(cls) -> "RegistryConfig":
        """Load default configuration from package resource.

        Single source of truth: svgicons/config/defaults/icons.yaml
        """
        from svgicons.resources import get_default_icons_yaml
        content = get_default_icons_yaml()
        data = yaml.safe_load(content) or {}
        return cls.from_dict(data)

    @classmethod
    def write_defaults(cls, path: Path) -> None:
        """Write default icons.yaml to the given path."""
        from svgicons.resources import get_default_icons_yaml
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(get_default_icons_yaml())
