"""Tag mapping rules and their lookup table."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tagdecorator.errors import ConfigurationError
from tagdecorator.models import TagName


@dataclass(frozen=True)
class TagKey:
    """Composite lookup key: namespace URL plus local name."""

    namespace: str
    local_name: str

    def __str__(self) -> str:
        return f"{{{self.namespace}}}{self.local_name}"


@dataclass(frozen=True)
class MappingEntry:
    """Rule redirecting one source tag identity to a target identity."""

    source: TagKey
    target_qualified_name: str
    target_local_name: str
    target_namespace_letter: str | None = None

    def __post_init__(self) -> None:
        _, _, local_part = self.target_qualified_name.rpartition(":")
        if local_part != self.target_local_name:
            raise ConfigurationError(
                f"Mapping for {self.source}: qualified name "
                f"'{self.target_qualified_name}' does not end with local name "
                f"'{self.target_local_name}'"
            )

    @property
    def target_prefix(self) -> str:
        prefix, _, _ = self.target_qualified_name.rpartition(":")
        return prefix

    def target_name(self, namespace: str) -> TagName:
        """Build the target identity within the given namespace.

        Args:
            namespace: Namespace URL the renamed tag ends up in

        Returns:
            TagName for the descriptor's `rename`
        """
        return TagName(
            namespace=namespace,
            prefix=self.target_prefix,
            local_name=self.target_local_name,
        )


class MappingTable:
    """Exact-match table of mapping entries keyed by `TagKey`."""

    def __init__(self, entries: Iterable[MappingEntry] = ()) -> None:
        """Initialize the table.

        Args:
            entries: Mapping entries to index

        Raises:
            ConfigurationError: If two entries share a source key
        """
        self._entries: dict[TagKey, MappingEntry] = {}
        for entry in entries:
            if entry.source in self._entries:
                raise ConfigurationError(f"Duplicate mapping for {entry.source}")
            self._entries[entry.source] = entry

    def find(self, namespace: str, local_name: str) -> MappingEntry | None:
        """Find the mapping for a tag, if one is configured.

        Args:
            namespace: Namespace URL of the tag
            local_name: Local name of the tag

        Returns:
            The mapping entry, or None when no rule applies
        """
        return self._entries.get(TagKey(namespace=namespace, local_name=local_name))

    def __iter__(self):
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
