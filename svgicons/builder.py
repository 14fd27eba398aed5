"""Build an IconFactory from a RegistryConfig."""

from dataclasses import replace
from pathlib import Path
from typing import Optional

from svgicons.config.types import RegistryConfig
from svgicons.disks import DiskManager, LocalDisk
from svgicons.factory import IconFactory
from svgicons.filesystem import Filesystem


def build_disks(config: RegistryConfig) -> DiskManager:
    """Create a LocalDisk for every configured disk."""
    disks = DiskManager()
    for name, disk_config in config.disks.items():
        disks.register(name, LocalDisk(disk_config.path))
    return disks


def build_factory(
    config: RegistryConfig,
    filesystem: Optional[Filesystem] = None,
    disks: Optional[DiskManager] = None,
) -> IconFactory:
    """Create a factory and register every configured set, in file order.

    Raises:
        CannotRegisterIconSet: On the first invalid set
    """
    factory = IconFactory(
        filesystem=filesystem,
        disks=disks or build_disks(config),
        default_class=config.default_class,
        fallback=config.fallback,
    )
    for name, set_config in config.sets.items():
        if set_config.path is not None:
            set_config = replace(set_config, path=str(Path(set_config.path).expanduser()))
        factory.add(name, set_config)
    return factory
