"""Icon set registry.

Resolves qualified icon names (``ui-arrow``) to SVG contents from
registered icon sets and formats the attributes of the rendered icon.

Usage:
    factory = IconFactory(Filesystem(), default_class="icon")
    factory.add("ui", {"path": "resources/svg", "prefix": "ui", "class": "ui-icon"})

    icon = factory.svg("ui-arrow", "extra")
    icon.attributes["class"]  # "icon ui-icon extra"
"""

import os
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

import structlog

from svgicons.attributes import AttributeOverride, ClassArgument, ClassString, coerce_class, join_classes
from svgicons.components import OnDiscover, as_callback
from svgicons.config.types import IconSetConfig
from svgicons.disks import DiskManager
from svgicons.exceptions import CannotRegisterIconSet, SvgNotFound
from svgicons.filesystem import Filesystem
from svgicons.icon import Icon

logger = structlog.get_logger()

DEFAULT_SET = "default"
PREFIX_SEPARATOR = "-"


class IconFactory:
    """Registry of icon sets with a per-name resolution cache.

    Sets are registered once at startup with ``add`` and then read during
    rendering with ``svg``. A lock serialises registration against lookups.
    """

    def __init__(
        self,
        filesystem: Optional[Filesystem] = None,
        disks: Optional[DiskManager] = None,
        default_class: str = "",
        fallback: str = "",
    ):
        """Initialize the registry.

        Args:
            filesystem: Filesystem used by path-based sets
            disks: Named disks used by disk-based sets
            default_class: Class applied to every icon from every set
            fallback: Qualified icon name rendered when a lookup fails ("" = raise)
        """
        self.filesystem = filesystem or Filesystem()
        self.disks = disks or DiskManager()
        self.default_class = default_class
        self.fallback = fallback
        self._sets: dict[str, dict[str, Any]] = {}
        self._cache: dict[str, dict[str, str]] = {}
        self._lock = threading.RLock()

    def all(self) -> Mapping[str, Mapping[str, Any]]:
        """Snapshot of registered sets in insertion order."""
        with self._lock:
            return MappingProxyType(
                {name: MappingProxyType(dict(options)) for name, options in self._sets.items()}
            )

    def add(self, name: str, options: Union[Mapping[str, Any], IconSetConfig]) -> "IconFactory":
        """Register an icon set.

        Args:
            name: Unique set name
            options: ``prefix`` plus exactly one of ``path``/``disk``, optional ``class``

        Returns:
            The factory, for chaining

        Raises:
            CannotRegisterIconSet: If the set is invalid; the registry is unchanged
        """
        if isinstance(options, IconSetConfig):
            options = options.to_dict()
        options = dict(options)

        with self._lock:
            if options.get("path") is None and options.get("disk") is None:
                raise CannotRegisterIconSet.path_or_disk_not_defined(name)

            if options.get("prefix") is None:
                raise CannotRegisterIconSet.prefix_not_defined(name)

            colliding_set = self._get_set_by_prefix(options["prefix"], exclude=name)
            if colliding_set is not None:
                raise CannotRegisterIconSet.prefix_not_unique(name, colliding_set)

            if options.get("path") is not None and self.filesystem.missing(options["path"]):
                raise CannotRegisterIconSet.non_existing_path(name, str(options["path"]))

            self._sets[name] = options
            # TODO: clear only the entries of sets whose prefix changed
            self._cache = {}

        logger.info(
            "Icon set added",
            set=name,
            prefix=options["prefix"],
            source="path" if options.get("path") is not None else "disk",
        )
        return self

    def register_components(self, on_discover: OnDiscover) -> int:
        """Discover every icon of every set and report it to ``on_discover``.

        Args:
            on_discover: Callable ``(dotted_name, prefix)`` or a registrar object

        Returns:
            Number of components discovered
        """
        callback = as_callback(on_discover)
        count = 0
        for options in self.all().values():
            if options.get("path") is not None:
                names = self._component_names_by_path(options["path"])
            else:
                names = self._component_names_by_disk(options["disk"])
            for dotted_name in names:
                callback(dotted_name, options["prefix"])
                count += 1

        logger.info("Components registered", count=count)
        return count

    def _component_names_by_path(self, path: Union[str, Path]) -> list[str]:
        root = str(Path(path))
        names = []
        for file in self.filesystem.all_files(path):
            _, found, relative = file.directory.partition(root)
            if not found:
                relative = file.directory
            segments = [s for s in relative.replace(os.sep, "/").split("/") if s]
            names.append(".".join(segments + [file.stem]))
        return names

    def _component_names_by_disk(self, disk: str) -> list[str]:
        return [
            os.path.splitext(file.replace("/", "."))[0]
            for file in self.disks.disk(disk).all_files()
        ]

    def svg(
        self,
        name: str,
        css_class: Union[str, Mapping[str, Any], ClassArgument, None] = "",
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> Icon:
        """Resolve a qualified icon name to an Icon.

        Args:
            name: Qualified name, e.g. "ui-arrow" (no known prefix -> set "default")
            css_class: Extra classes, or a full attribute mapping
            attributes: Extra attributes (ignored when css_class is a mapping)

        Raises:
            SvgNotFound: If the set is unknown or the file is missing and no
                fallback is configured
        """
        set_name, bare_name = self.split_set_and_name(name)

        try:
            contents = self.contents(set_name, bare_name)
        except SvgNotFound as e:
            if not self.fallback or name == self.fallback:
                raise
            logger.info("Using fallback icon", missing=name, fallback=self.fallback, error=str(e))
            return self.svg(self.fallback, css_class, attributes)

        return Icon(bare_name, contents, self.format_attributes(set_name, css_class, attributes))

    def contents(self, set_name: str, name: str) -> str:
        """Raw SVG text for a bare name within a set, cached.

        Raises:
            SvgNotFound: If the set is unknown or the file does not exist
        """
        with self._lock:
            cached = self._cache.get(set_name, {}).get(name)
            if cached is not None:
                return cached

            options = self._sets.get(set_name)
            if options is not None:
                try:
                    if options.get("path") is not None:
                        contents = self._get_svg_from_path(name, options["path"])
                    else:
                        contents = self._get_svg_from_disk(name, options["disk"])
                except FileNotFoundError:
                    pass
                else:
                    self._cache.setdefault(set_name, {})[name] = contents
                    logger.debug("Icon loaded", set=set_name, name=name)
                    return contents

        raise SvgNotFound.missing(set_name, name)

    def _get_svg_from_path(self, name: str, path: Union[str, Path]) -> str:
        # Joined as a string so a name starting with "." stays under the root
        file = Path(f"{str(path).rstrip()}/{name.replace('.', '/')}.svg")
        return self.filesystem.get(file).strip()

    def _get_svg_from_disk(self, name: str, disk: str) -> str:
        return self.disks.disk(disk).get(f"{name.replace('.', '/')}.svg")

    def split_set_and_name(self, name: str) -> tuple[str, str]:
        """Split "ui-arrow" into ("ui", "arrow") when a set owns the prefix.

        Names without a known prefix resolve against the "default" set unchanged.
        """
        prefix, separator, rest = name.partition(PREFIX_SEPARATOR)
        with self._lock:
            set_name = self._get_set_by_prefix(prefix)
        if set_name is None:
            return DEFAULT_SET, name
        return set_name, rest if separator else name

    def _get_set_by_prefix(self, prefix: str, exclude: Optional[str] = None) -> Optional[str]:
        for set_name, options in self._sets.items():
            if set_name != exclude and options.get("prefix") == prefix:
                return set_name
        return None

    def format_attributes(
        self,
        set_name: str,
        css_class: Union[str, Mapping[str, Any], ClassArgument, None] = "",
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
        """Compute the final attributes for an icon of ``set_name``."""
        css_class = coerce_class(css_class)
        result = dict(attributes or {})

        if isinstance(css_class, ClassString):
            built = self.build_class(set_name, css_class.value)
            if built and result.get("class") is None:
                result["class"] = built
        elif isinstance(css_class, AttributeOverride):
            result = dict(css_class.attributes)
            if result.get("class") is None:
                built = self.build_class(set_name, "")
                if built:
                    result["class"] = built

        return result

    def build_class(self, set_name: str, css_class: str) -> str:
        """Default class, then the set class, then ``css_class``."""
        set_class = self._sets.get(set_name, {}).get("class") or ""
        return join_classes(self.default_class, set_class, css_class)
