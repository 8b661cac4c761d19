"""Value types for tags passing through the decorator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TagAttribute:
    """A single attribute on a tag.

    Attributes are immutable; rewriting a value means producing a new
    attribute with `with_value`.
    """

    name: str
    value: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Attribute name must not be empty")

    def with_value(self, value: str) -> TagAttribute:
        """Return a copy of this attribute carrying a different value."""
        return TagAttribute(name=self.name, value=value)


@dataclass(frozen=True)
class TagName:
    """Structured identity of a tag: namespace, prefix and local name.

    The qualified name is always derived, so it cannot drift away from the
    local name.
    """

    namespace: str
    prefix: str
    local_name: str

    @property
    def qualified_name(self) -> str:
        """Return `prefix:local_name`, or just the local name without prefix."""
        if self.prefix:
            return f"{self.prefix}:{self.local_name}"
        return self.local_name

    @classmethod
    def from_qualified_name(cls, namespace: str, qualified_name: str) -> TagName:
        """Split a qualified name like "h:commandButton" into its parts.

        Args:
            namespace: Namespace URL of the tag
            qualified_name: Qualified name, with or without prefix

        Returns:
            TagName with prefix and local name separated
        """
        prefix, _, local_name = qualified_name.rpartition(":")
        return cls(namespace=namespace, prefix=prefix, local_name=local_name)


@dataclass(frozen=True)
class Tag:
    """Finalized tag handed back to the templating engine."""

    namespace: str
    qualified_name: str
    local_name: str
    attributes: tuple[TagAttribute, ...] = ()
    location: str | None = None
    """Source position reported by the host parser, passed through as-is."""

    def get(self, name: str) -> str | None:
        """Return the value of the first attribute called `name`, if any."""
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute.value
        return None

    def attribute_names(self) -> list[str]:
        """Return attribute names in order, duplicates included."""
        return [attribute.name for attribute in self.attributes]
