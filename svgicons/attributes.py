"""Class/attribute arguments accepted by ``IconFactory.svg``.

The class argument is either a class string that is merged into the
attributes, or a full attribute mapping that replaces them.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class ClassString:
    """Extra classes appended after the default and set classes."""

    value: str = ""


@dataclass(frozen=True)
class AttributeOverride:
    """Complete attribute set used verbatim (a class may still be injected)."""

    attributes: Mapping[str, Any] = field(default_factory=dict)


ClassArgument = Union[ClassString, AttributeOverride]


def coerce_class(value: Union[str, Mapping[str, Any], ClassArgument, None]) -> ClassArgument:
    """Turn a plain ``str``/mapping argument into its tagged form."""
    if isinstance(value, (ClassString, AttributeOverride)):
        return value
    if value is None:
        return ClassString()
    if isinstance(value, str):
        return ClassString(value)
    if isinstance(value, Mapping):
        return AttributeOverride(dict(value))
    raise TypeError(f"class must be a string or a mapping, not {type(value).__name__}")


def join_classes(*classes: str) -> str:
    """Join class strings left to right, trimming at every join point.

    ``join_classes("icon", "", "extra")`` -> ``"icon extra"``. Whitespace
    inside each part is left alone and duplicates are kept.
    """
    result = ""
    for css_class in classes:
        result = f"{result} {css_class or ''}".strip()
    return result
