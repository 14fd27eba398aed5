"""Component discovery targets for ``IconFactory.register_components``.

The registry only produces ``(dotted_name, prefix)`` pairs. What a host
does with them (register a template tag, build a menu, ...) is up to the
callback it hands in.
"""

from dataclasses import dataclass, field
from typing import Callable, Protocol, Union, runtime_checkable

DiscoverCallback = Callable[[str, str], None]


@runtime_checkable
class ComponentRegistrar(Protocol):
    """Anything with a ``register_component(dotted_name, prefix)`` method."""

    def register_component(self, dotted_name: str, prefix: str) -> None:
        ...


OnDiscover = Union[DiscoverCallback, ComponentRegistrar]


@dataclass(frozen=True)
class Component:
    """A discovered icon component."""

    name: str  # Dotted name ("arrows.left")
    prefix: str

    @property
    def tag(self) -> str:
        """Qualified icon name as accepted by ``IconFactory.svg``."""
        return f"{self.prefix}-{self.name}"


@dataclass
class ComponentCatalog:
    """In-memory registrar that records every discovered component."""

    components: list[Component] = field(default_factory=list)

    def register_component(self, dotted_name: str, prefix: str) -> None:
        self.components.append(Component(name=dotted_name, prefix=prefix))

    def for_prefix(self, prefix: str) -> list[Component]:
        return [c for c in self.components if c.prefix == prefix]

    def tags(self) -> list[str]:
        return [c.tag for c in self.components]

    def __len__(self) -> int:
        return len(self.components)


def as_callback(on_discover: OnDiscover) -> DiscoverCallback:
    """Normalise a registrar object or plain callable into a callable."""
    if isinstance(on_discover, ComponentRegistrar):
        return on_discover.register_component
    if callable(on_discover):
        return on_discover
    raise TypeError("on_discover must be callable or define register_component()")
