"""Namespace registry keyed by short namespace letters."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tagdecorator.errors import ConfigurationError


@dataclass(frozen=True)
class Namespace:
    """A configured namespace declaration."""

    letter: str
    """Short key used by mappings (e.g., "h")."""

    prefix: str
    """Attribute name used to declare the namespace (e.g., "xmlns:h")."""

    url: str
    """Namespace URL."""

    mandatory: bool = True
    """Whether the declaration is injected into plain HTML tags."""


class NamespaceRegistry:
    """Ordered registry of namespaces, unique by letter.

    The registry is filled once while the configuration is built and is only
    read afterwards.
    """

    def __init__(self, namespaces: Iterable[Namespace] = ()) -> None:
        """Initialize the registry.

        Args:
            namespaces: Namespaces in configured order

        Raises:
            ConfigurationError: If two namespaces share a letter
        """
        self._by_letter: dict[str, Namespace] = {}
        for namespace in namespaces:
            if namespace.letter in self._by_letter:
                raise ConfigurationError(
                    f"Duplicate namespace letter '{namespace.letter}'"
                )
            self._by_letter[namespace.letter] = namespace

    def get(self, letter: str) -> Namespace:
        """Look up a namespace by its letter.

        Args:
            letter: The namespace letter

        Returns:
            The configured namespace

        Raises:
            ConfigurationError: If the letter is not configured
        """
        try:
            return self._by_letter[letter]
        except KeyError:
            raise ConfigurationError(
                f"Namespace letter '{letter}' is not configured"
            ) from None

    def __contains__(self, letter: object) -> bool:
        return letter in self._by_letter

    def __iter__(self):
        return iter(self._by_letter.values())

    def __len__(self) -> int:
        return len(self._by_letter)

    def mandatory(self) -> list[Namespace]:
        """Return the mandatory namespaces in configured order."""
        return [namespace for namespace in self._by_letter.values() if namespace.mandatory]

    def letters(self) -> list[str]:
        return list(self._by_letter)
