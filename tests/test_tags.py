"""Tests for TagDescriptor."""

import pytest

from tagdecorator.models import Tag, TagAttribute, TagName
from tagdecorator.tags import XHTML_NAMESPACE, TagDescriptor


def make_descriptor(
    namespace: str = "urn:custom",
    qualified_name: str = "custom:a",
    local_name: str = "a",
    **attributes: str,
) -> TagDescriptor:
    return TagDescriptor(
        namespace=namespace,
        qualified_name=qualified_name,
        local_name=local_name,
        attributes=[TagAttribute(name, value) for name, value in attributes.items()],
    )


class TestIsHtmlTag:
    """Tests for HTML classification."""

    def test_empty_namespace(self) -> None:
        assert make_descriptor(namespace="", qualified_name="div", local_name="div").is_html_tag()

    def test_none_namespace(self) -> None:
        descriptor = TagDescriptor(namespace=None, qualified_name="div", local_name="div")
        assert descriptor.namespace == ""
        assert descriptor.is_html_tag()

    def test_xhtml_namespace(self) -> None:
        assert make_descriptor(namespace=XHTML_NAMESPACE).is_html_tag()

    def test_custom_namespace(self) -> None:
        assert not make_descriptor(namespace="urn:custom").is_html_tag()


class TestIsUrlable:
    """Tests for link-bearing classification."""

    def test_anchor_with_href(self) -> None:
        assert make_descriptor(href="page.xhtml").is_urlable()

    def test_script_with_src(self) -> None:
        descriptor = make_descriptor(qualified_name="x:script", local_name="script", src="a.js")
        assert descriptor.is_urlable()

    def test_form_with_action(self) -> None:
        descriptor = make_descriptor(qualified_name="x:form", local_name="form", action="save")
        assert descriptor.is_urlable()

    def test_anchor_without_link_attribute(self) -> None:
        assert not make_descriptor(title="hello").is_urlable()

    def test_non_link_tag_with_href(self) -> None:
        descriptor = make_descriptor(
            qualified_name="custom:button", local_name="button", href="page.xhtml"
        )
        assert not descriptor.is_urlable()


class TestAttributes:
    """Tests for attribute access and mutation."""

    def test_get_link_attributes_preserves_order(self) -> None:
        descriptor = make_descriptor(src="a.png", title="t", href="b.html")
        names = [attribute.name for attribute in descriptor.get_link_attributes()]
        assert names == ["src", "href"]

    def test_add_attribute_appends(self) -> None:
        descriptor = make_descriptor(href="x")
        descriptor.add_attribute("class", "link")
        assert [a.name for a in descriptor.attributes] == ["href", "class"]

    def test_add_attribute_allows_duplicates(self) -> None:
        descriptor = make_descriptor()
        descriptor.add_attribute("xmlns:h", "urn:h")
        descriptor.add_attribute("xmlns:h", "urn:h")
        assert [a.name for a in descriptor.attributes] == ["xmlns:h", "xmlns:h"]

    def test_has_attribute(self) -> None:
        descriptor = make_descriptor(href="x")
        assert descriptor.has_attribute("href")
        assert not descriptor.has_attribute("src")

    def test_replace_attribute_by_identity(self) -> None:
        descriptor = make_descriptor()
        first = descriptor.add_attribute("href", "a")
        second = descriptor.add_attribute("href", "a")

        descriptor.replace_attribute(second, second.with_value("b"))

        values = [a.value for a in descriptor.attributes]
        assert values == ["a", "b"]
        assert descriptor.attributes[0] is first

    def test_replace_unknown_attribute_raises(self) -> None:
        descriptor = make_descriptor(href="a")
        with pytest.raises(KeyError):
            descriptor.replace_attribute(TagAttribute("href", "a"), TagAttribute("href", "b"))

    def test_attributes_property_is_a_copy(self) -> None:
        descriptor = make_descriptor(href="a")
        descriptor.attributes.append(TagAttribute("src", "b"))
        assert len(descriptor.attributes) == 1


class TestIdentity:
    """Tests for namespace and name changes."""

    def test_set_namespace(self) -> None:
        descriptor = make_descriptor()
        descriptor.set_namespace("urn:other")
        assert descriptor.namespace == "urn:other"
        assert descriptor.qualified_name == "custom:a"

    def test_rename_keeps_names_consistent(self) -> None:
        descriptor = make_descriptor(qualified_name="custom:button", local_name="button")
        descriptor.rename(TagName(namespace="urn:h", prefix="h", local_name="commandButton"))

        assert descriptor.namespace == "urn:h"
        assert descriptor.qualified_name == "h:commandButton"
        assert descriptor.local_name == "commandButton"


class TestFinalize:
    """Tests for finalize and round trips through Tag."""

    def test_finalize_snapshots_state(self) -> None:
        descriptor = make_descriptor(href="a")
        tag = descriptor.finalize()
        descriptor.add_attribute("src", "b")

        assert tag.attributes == (TagAttribute("href", "a"),)
        assert isinstance(tag, Tag)

    def test_from_tag_keeps_location(self) -> None:
        tag = Tag(
            namespace="urn:custom",
            qualified_name="custom:a",
            local_name="a",
            attributes=(TagAttribute("href", "a"),),
            location="index.xhtml @12,4",
        )
        assert TagDescriptor.from_tag(tag).finalize() == tag
