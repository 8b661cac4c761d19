"""Mutable tag descriptor used while a tag is being decorated."""

from __future__ import annotations

from collections.abc import Iterable

from tagdecorator.models import Tag, TagAttribute, TagName

XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"

# Tag kinds that may point at a resource inside the application
URLABLE_TAGS = frozenset(
    {
        "a",
        "link",
        "img",
        "script",
        "form",
        "iframe",
        "area",
        "base",
        "embed",
        "source",
    }
)

# Namespaces whose tags are all considered link-bearing
URLABLE_NAMESPACES: frozenset[str] = frozenset()

# Attribute names whose values are URLs
LINK_ATTRIBUTES = frozenset({"href", "src", "action"})


class TagDescriptor:
    """Mutable view over one tag's identity and attributes.

    A descriptor is created for every incoming tag, mutated by the
    decoration pipeline and turned into an immutable `Tag` by `finalize`.
    Instances are owned by a single decoration call and never shared.
    """

    def __init__(
        self,
        namespace: str | None,
        qualified_name: str,
        local_name: str,
        attributes: Iterable[TagAttribute] = (),
        location: str | None = None,
    ) -> None:
        self.namespace = namespace or ""
        self.qualified_name = qualified_name
        self.local_name = local_name
        self.location = location
        self._attributes: list[TagAttribute] = list(attributes)

    @classmethod
    def from_tag(cls, tag: Tag) -> TagDescriptor:
        """Create a descriptor from a finalized tag."""
        return cls(
            namespace=tag.namespace,
            qualified_name=tag.qualified_name,
            local_name=tag.local_name,
            attributes=tag.attributes,
            location=tag.location,
        )

    @property
    def attributes(self) -> list[TagAttribute]:
        """Return a copy of the attributes in their current order."""
        return list(self._attributes)

    def is_html_tag(self) -> bool:
        """Check whether the tag was written without a custom namespace.

        Returns:
            True if the namespace is empty or the plain XHTML namespace
        """
        return not self.namespace or self.namespace == XHTML_NAMESPACE

    def is_urlable(self) -> bool:
        """Check whether the tag kind carries links and has a link attribute.

        Returns:
            True if the tag is a link-bearing kind with at least one
            URL attribute
        """
        if (
            self.local_name not in URLABLE_TAGS
            and self.namespace not in URLABLE_NAMESPACES
        ):
            return False
        return any(attribute.name in LINK_ATTRIBUTES for attribute in self._attributes)

    def get_link_attributes(self) -> list[TagAttribute]:
        """Return the URL-bearing attributes, preserving their order."""
        return [
            attribute
            for attribute in self._attributes
            if attribute.name in LINK_ATTRIBUTES
        ]

    def has_attribute(self, name: str) -> bool:
        return any(attribute.name == name for attribute in self._attributes)

    def add_attribute(self, name: str, value: str) -> TagAttribute:
        """Append an attribute.

        Existing attributes with the same name are left in place, so this
        can produce duplicates.

        Returns:
            The attribute that was appended
        """
        attribute = TagAttribute(name=name, value=value)
        self._attributes.append(attribute)
        return attribute

    def replace_attribute(self, old: TagAttribute, new: TagAttribute) -> None:
        """Replace one attribute instance with another at the same position.

        Matching is by identity so that duplicate attributes are replaced
        one at a time.

        Raises:
            KeyError: If `old` is not one of this tag's attributes
        """
        for index, attribute in enumerate(self._attributes):
            if attribute is old:
                self._attributes[index] = new
                return
        raise KeyError(f"Attribute '{old.name}' not found on <{self.qualified_name}>")

    def set_namespace(self, namespace: str) -> None:
        self.namespace = namespace

    def rename(self, name: TagName) -> None:
        """Change namespace, qualified name and local name in one step.

        Args:
            name: The new tag identity; the qualified name is derived from it
        """
        self.namespace = name.namespace
        self.qualified_name = name.qualified_name
        self.local_name = name.local_name

    def finalize(self) -> Tag:
        """Snapshot the descriptor as an immutable tag."""
        return Tag(
            namespace=self.namespace,
            qualified_name=self.qualified_name,
            local_name=self.local_name,
            attributes=tuple(self._attributes),
            location=self.location,
        )

    def __repr__(self) -> str:
        return (
            f"TagDescriptor(namespace={self.namespace!r}, "
            f"qualified_name={self.qualified_name!r}, "
            f"attributes={len(self._attributes)})"
        )
