"""Readers for YAML and XML decorator configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from lxml import etree
from pydantic import ValidationError

from tagdecorator.config.schema import DecoratorConfig
from tagdecorator.errors import ConfigurationError

YAML_SUFFIXES = {".yaml", ".yml"}
XML_SUFFIXES = {".xml"}

XML_ROOT_TAG = "tag-decorator"


def get_tag_name(elem: etree._Element) -> str:
    """Get tag name without namespace prefix.

    Args:
        elem: XML element

    Returns:
        Tag name without namespace (e.g., "mapping" not "{ns}mapping")
    """
    tag = elem.tag
    if isinstance(tag, str) and "}" in tag:
        return tag.split("}")[-1]
    return tag if isinstance(tag, str) else ""


def _xml_attributes(elem: etree._Element) -> dict[str, str]:
    """Return element attributes with hyphens turned into underscores."""
    return {key.replace("-", "_"): value for key, value in elem.attrib.items()}


def parse_xml_config(root: etree._Element) -> dict[str, Any]:
    """Convert a <tag-decorator> element into a plain configuration mapping.

    Args:
        root: The configuration root element

    Returns:
        Mapping with "namespaces", "mappings" and optionally "options"

    Raises:
        ConfigurationError: If the root or a child element is unexpected
    """
    if get_tag_name(root) != XML_ROOT_TAG:
        raise ConfigurationError(
            f"Expected <{XML_ROOT_TAG}> root element, got <{get_tag_name(root)}>"
        )

    data: dict[str, Any] = {"namespaces": [], "mappings": []}
    for child in root:
        tag_name = get_tag_name(child)
        if not tag_name:
            # Comments and processing instructions
            continue
        if tag_name == "namespace":
            data["namespaces"].append(_xml_attributes(child))
        elif tag_name == "mapping":
            data["mappings"].append(_xml_attributes(child))
        elif tag_name == "options":
            data["options"] = _xml_attributes(child)
        else:
            raise ConfigurationError(f"Unknown configuration element <{tag_name}>")
    return data


def validate_config_data(data: Any, source: str = "") -> DecoratorConfig:
    """Validate a raw configuration mapping.

    Args:
        data: Parsed YAML/XML content
        source: Origin of the data, used in error messages

    Returns:
        Validated DecoratorConfig

    Raises:
        ConfigurationError: If the data does not match the schema
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration must be a mapping", source)
    try:
        return DecoratorConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", source) from e


def read_config(path: str | Path) -> DecoratorConfig:
    """Read and validate a configuration file.

    The format is chosen by file suffix: .yaml/.yml or .xml.

    Args:
        path: Path to the configuration file

    Returns:
        Validated DecoratorConfig

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    file_path = Path(path)
    suffix = file_path.suffix.lower()

    if suffix in YAML_SUFFIXES:
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration: {e}", str(file_path)) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed YAML: {e}", str(file_path)) from e
    elif suffix in XML_SUFFIXES:
        try:
            root = etree.parse(str(file_path)).getroot()
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration: {e}", str(file_path)) from e
        except etree.XMLSyntaxError as e:
            raise ConfigurationError(f"Malformed XML: {e}", str(file_path)) from e
        data = parse_xml_config(root)
    else:
        raise ConfigurationError(
            f"Unsupported configuration format '{suffix}'", str(file_path)
        )

    return validate_config_data(data, str(file_path))
