"""svgicons - resolve namespaced icon names to SVG markup.

Usage:
    from svgicons import Filesystem, IconFactory

    factory = IconFactory(Filesystem(), default_class="icon")
    factory.add("ui", {"path": "resources/svg", "prefix": "ui"})
    html = factory.svg("ui-arrow", "w-6 h-6").to_html()
"""

from .attributes import AttributeOverride, ClassString
from .builder import build_factory
from .components import Component, ComponentCatalog
from .config.types import IconSetConfig, RegistryConfig
from .disks import Disk, DiskManager, LocalDisk, PackageDisk
from .exceptions import CannotRegisterIconSet, ConfigurationError, IconError, SvgNotFound, UnknownDisk
from .factory import IconFactory
from .filesystem import Filesystem, IconFile
from .icon import Icon

__all__ = [
    "AttributeOverride",
    "CannotRegisterIconSet",
    "ClassString",
    "Component",
    "ComponentCatalog",
    "ConfigurationError",
    "Disk",
    "DiskManager",
    "Filesystem",
    "Icon",
    "IconError",
    "IconFactory",
    "IconFile",
    "IconSetConfig",
    "LocalDisk",
    "PackageDisk",
    "RegistryConfig",
    "SvgNotFound",
    "UnknownDisk",
    "build_factory",
]
