"""Configuration store consulted by every decoration call."""

from __future__ import annotations

import os
import threading
from dataclasses import replace
from pathlib import Path
from typing import Any, ClassVar

from tagdecorator.config.loader import read_config, validate_config_data
from tagdecorator.config.mappings import MappingEntry, MappingTable, TagKey
from tagdecorator.config.namespaces import Namespace, NamespaceRegistry
from tagdecorator.config.schema import DecoratorConfig
from tagdecorator.errors import ConfigurationError
from tagdecorator.logging_config import logger
from tagdecorator.options import DecorationOptions

# Environment variable naming the configuration file for the shared store
CONFIG_ENV_VAR = "TAGDECORATOR_CONFIG"

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "data" / "default_config.yaml"


class ConfigurationStore:
    """Namespace registry and mapping table, read-only once built.

    A store is normally built once at process start and passed to the
    `DecorationPipeline`. `get_instance` provides a lazily loaded shared
    store for hosts that do not bootstrap one themselves.
    """

    _instance: ClassVar[ConfigurationStore | None] = None
    _instance_error: ClassVar[ConfigurationError | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        namespaces: NamespaceRegistry,
        mappings: MappingTable,
        options: DecorationOptions | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            namespaces: Registry of configured namespaces
            mappings: Table of tag mappings
            options: Pipeline options declared in the configuration
        """
        self._namespaces = namespaces
        self._mappings = mappings
        self.options = options or DecorationOptions()

    @classmethod
    def from_config(cls, config: DecoratorConfig) -> ConfigurationStore:
        """Build a store from a validated configuration document."""
        namespaces = NamespaceRegistry(
            Namespace(
                letter=item.letter,
                prefix=item.resolved_prefix(),
                url=item.url,
                mandatory=item.mandatory,
            )
            for item in config.namespaces
        )
        mappings = MappingTable(
            MappingEntry(
                source=TagKey(namespace=item.namespace, local_name=item.name),
                target_namespace_letter=item.target_letter,
                target_qualified_name=item.target_name,
                target_local_name=item.resolved_local_name(),
            )
            for item in config.mappings
        )

        options = DecorationOptions()
        if config.options is not None:
            overrides = config.options.model_dump(exclude_none=True)
            options = replace(options, **overrides)

        return cls(namespaces, mappings, options)

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> ConfigurationStore:
        """Build a store from an in-memory configuration mapping."""
        return cls.from_config(validate_config_data(data, "<data>"))

    @classmethod
    def load(cls, path: str | Path) -> ConfigurationStore:
        """Load a store from a YAML or XML configuration file."""
        store = cls.from_config(read_config(path))
        logger.debug(
            f"Loaded {len(store._namespaces)} namespaces and "
            f"{len(store._mappings)} mappings from {path}"
        )
        return store

    @classmethod
    def get_instance(cls) -> ConfigurationStore:
        """Return the shared store, loading it on first use.

        The file named by TAGDECORATOR_CONFIG is used when set, the packaged
        default configuration otherwise. Concurrent first calls build the
        store exactly once. A failed load is remembered and raised again on
        every later call; it is not retried until `reset_instance`.

        Raises:
            ConfigurationError: If the configuration cannot be loaded
        """
        instance = cls._instance
        if instance is None:
            with cls._instance_lock:
                instance = cls._instance
                if instance is None:
                    if cls._instance_error is not None:
                        raise cls._instance_error
                    path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
                    try:
                        instance = cls.load(path)
                    except ConfigurationError as e:
                        cls._instance_error = e
                        raise
                    cls._instance = instance
        return instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared store (useful for tests)"""
        with cls._instance_lock:
            cls._instance = None
            cls._instance_error = None

    def dangling_mappings(self) -> list[MappingEntry]:
        """Return mappings whose target namespace letter is not configured."""
        return [
            entry
            for entry in self._mappings
            if entry.target_namespace_letter is not None
            and entry.target_namespace_letter not in self._namespaces
        ]

    def validate(self) -> None:
        """Check that every mapping resolves to a configured namespace.

        Decoration itself only fails on the tag that hits a dangling mapping;
        this check lets a host reject such a configuration up front.

        Raises:
            ConfigurationError: If a mapping refers to an unknown namespace letter
        """
        dangling = self.dangling_mappings()
        if dangling:
            details = ", ".join(
                f"{entry.source} -> '{entry.target_namespace_letter}'" for entry in dangling
            )
            raise ConfigurationError(f"Mappings refer to unknown namespace letters: {details}")

    @property
    def namespaces(self) -> NamespaceRegistry:
        return self._namespaces

    @property
    def mappings(self) -> MappingTable:
        return self._mappings

    def find_mapping(self, namespace: str, local_name: str) -> MappingEntry | None:
        """Find the mapping for a tag.

        Returns:
            The mapping entry, or None when the tag is not mapped
        """
        return self._mappings.find(namespace, local_name)

    def get_namespace_by_letter(self, letter: str) -> Namespace:
        """Resolve a namespace letter.

        Raises:
            ConfigurationError: If the letter is not configured
        """
        return self._namespaces.get(letter)

    def list_mandatory_namespaces(self) -> list[Namespace]:
        """Return the namespaces injected into plain HTML tags, in order."""
        return self._namespaces.mandatory()
