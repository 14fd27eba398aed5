"""Rendered icon value object."""

import html
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class Icon:
    """A resolved icon: bare name, raw SVG text and final attributes."""

    name: str
    contents: str
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Detach from the caller's dict so the icon stays read-only
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def render_attributes(self) -> str:
        """Render attributes as an HTML attribute string (leading space included)."""
        parts = []
        for key, value in self.attributes.items():
            if value is None or value is False:
                continue
            if value is True:
                parts.append(f" {key}")
            else:
                parts.append(f' {key}="{html.escape(str(value), quote=True)}"')
        return "".join(parts)

    def to_html(self) -> str:
        """Return the SVG with attributes injected into the opening tag."""
        return self.contents.replace("<svg", f"<svg{self.render_attributes()}", 1)

    def __str__(self) -> str:
        return self.to_html()
