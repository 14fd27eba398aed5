"""Exceptions raised by the icon registry.

Two families:
- ConfigurationError: a set or disk could not be registered (fix the config)
- SvgNotFound: a qualified icon name did not resolve to a file
"""

from typing import Optional


class IconError(Exception):
    """Base class for all svgicons errors."""


class ConfigurationError(IconError):
    """Raised when the registry configuration is invalid."""


class CannotRegisterIconSet(ConfigurationError):
    """An icon set was rejected by ``IconFactory.add``.

    The registry is left untouched when this is raised.
    """

    PATH_OR_DISK_NOT_DEFINED = "path_or_disk_not_defined"
    PREFIX_NOT_DEFINED = "prefix_not_defined"
    PREFIX_NOT_UNIQUE = "prefix_not_unique"
    NON_EXISTING_PATH = "non_existing_path"

    def __init__(
        self,
        message: str,
        set_name: str,
        kind: str,
        colliding_set: Optional[str] = None,
        path: Optional[str] = None,
    ):
        super().__init__(message)
        self.set_name = set_name
        self.kind = kind
        self.colliding_set = colliding_set
        self.path = path

    @classmethod
    def path_or_disk_not_defined(cls, set_name: str) -> "CannotRegisterIconSet":
        return cls(
            f'Icon set "{set_name}" does not have a path or disk defined.',
            set_name,
            cls.PATH_OR_DISK_NOT_DEFINED,
        )

    @classmethod
    def prefix_not_defined(cls, set_name: str) -> "CannotRegisterIconSet":
        return cls(
            f'Icon set "{set_name}" does not have a prefix defined.',
            set_name,
            cls.PREFIX_NOT_DEFINED,
        )

    @classmethod
    def prefix_not_unique(cls, set_name: str, colliding_set: str) -> "CannotRegisterIconSet":
        return cls(
            f'The prefix for icon set "{set_name}" collides with the one '
            f'from icon set "{colliding_set}".',
            set_name,
            cls.PREFIX_NOT_UNIQUE,
            colliding_set=colliding_set,
        )

    @classmethod
    def non_existing_path(cls, set_name: str, path: str) -> "CannotRegisterIconSet":
        return cls(
            f'The path "{path}" for icon set "{set_name}" does not exist.',
            set_name,
            cls.NON_EXISTING_PATH,
            path=path,
        )


class UnknownDisk(ConfigurationError):
    """A storage disk was requested by a name nobody registered."""

    def __init__(self, disk_name: str):
        super().__init__(f'Disk "{disk_name}" is not configured.')
        self.disk_name = disk_name


class SvgNotFound(IconError):
    """A qualified icon name could not be resolved to SVG contents."""

    def __init__(self, message: str, set_name: str, name: str):
        super().__init__(message)
        self.set_name = set_name
        self.name = name

    @classmethod
    def missing(cls, set_name: str, name: str) -> "SvgNotFound":
        return cls(
            f'Svg by name "{name}" from set "{set_name}" not found.',
            set_name,
            name,
        )
