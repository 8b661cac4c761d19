"""Conversion of lxml elements into tag descriptors.

Used by the command-line interface to decorate a single element snippet.
"""

from __future__ import annotations

from lxml import etree

from tagdecorator.models import TagAttribute
from tagdecorator.tags import TagDescriptor

# Bound to the "xml" prefix implicitly; never listed in nsmap
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


def _attribute_name(elem: etree._Element, key: str) -> str:
    """Turn an lxml attribute key like "{ns}name" into "prefix:name"."""
    qname = etree.QName(key)
    if qname.namespace is None:
        return qname.localname
    if qname.namespace == XML_NAMESPACE:
        return f"xml:{qname.localname}"
    for prefix, url in elem.nsmap.items():
        if url == qname.namespace and prefix:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def descriptor_from_element(elem: etree._Element) -> TagDescriptor:
    """Create a descriptor for an element, ignoring its children.

    Namespace declarations in scope on the element are not turned into
    attributes; only the element's own attributes are.

    Args:
        elem: The element to describe

    Returns:
        TagDescriptor with the element's namespace, names and attributes
    """
    qname = etree.QName(elem)
    local_name = qname.localname
    qualified_name = f"{elem.prefix}:{local_name}" if elem.prefix else local_name
    attributes = [
        TagAttribute(name=_attribute_name(elem, key), value=value)
        for key, value in elem.attrib.items()
    ]
    location = f"line {elem.sourceline}" if elem.sourceline else None
    return TagDescriptor(
        namespace=qname.namespace or "",
        qualified_name=qualified_name,
        local_name=local_name,
        attributes=attributes,
        location=location,
    )


def descriptor_from_string(snippet: str) -> TagDescriptor:
    """Parse an XML snippet and describe its root element.

    Raises:
        etree.XMLSyntaxError: If the snippet is not well-formed
    """
    return descriptor_from_element(etree.fromstring(snippet))
