"""Namespace and mapping configuration for the tag decorator."""

from tagdecorator.config.loader import read_config
from tagdecorator.config.mappings import MappingEntry, MappingTable, TagKey
from tagdecorator.config.namespaces import Namespace, NamespaceRegistry
from tagdecorator.config.store import ConfigurationStore

__all__ = [
    "ConfigurationStore",
    "MappingEntry",
    "MappingTable",
    "Namespace",
    "NamespaceRegistry",
    "TagKey",
    "read_config",
]
