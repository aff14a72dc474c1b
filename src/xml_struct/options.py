"""Per-call serializer configuration."""

from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_ATTRIBUTE_PREFIX = "attribute::"
DEFAULT_VALUE_KEY = "node::value"


@dataclass(frozen=True)
class SerializerOptions:
    """Settings captured once per serialization and passed down the traversal.

    - ``attribute_prefix`` is prepended to every attribute name
    - ``value_key`` holds the text of nodes that also have attributes or children
    - ``coerce_values`` turns on string → bool / int / float conversion
    """

    attribute_prefix: str = DEFAULT_ATTRIBUTE_PREFIX
    value_key: str = DEFAULT_VALUE_KEY
    coerce_values: bool = False

    def __post_init__(self) -> None:
        if not self.attribute_prefix:
            raise ValueError("attribute_prefix must not be empty")
        if self.value_key.startswith(self.attribute_prefix):
            raise ValueError(
                f"value_key {self.value_key!r} collides with attribute_prefix "
                f"{self.attribute_prefix!r}"
            )

    def attribute_key(self, name: str) -> str:
        return f"{self.attribute_prefix}{name}"

    def with_coercion(self, enabled: bool) -> SerializerOptions:
        return replace(self, coerce_values=enabled)
