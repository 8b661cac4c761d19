"""Decoration pipeline applied to every tag handed over by the templating engine."""

from __future__ import annotations

from tagdecorator.config.store import ConfigurationStore
from tagdecorator.logging_config import logger
from tagdecorator.models import Tag
from tagdecorator.options import CONTEXT_ROOT_PLACEHOLDER, SCHEME_MARKER, DecorationOptions
from tagdecorator.tags import TagDescriptor


def fix_link(
    value: str,
    context_root: str = CONTEXT_ROOT_PLACEHOLDER,
    scheme_marker: str = SCHEME_MARKER,
) -> str:
    """Make a link value relative to the application context root.

    Args:
        value: Attribute value of a URL-bearing attribute
        context_root: Placeholder for the context root
        scheme_marker: Prefix marking absolute URLs

    Returns:
        The value unchanged if absolute, else prefixed with the context root

    Examples:
        >>> fix_link("page.xhtml")
        '#{request.contextPath}/page.xhtml'
        >>> fix_link("/abs/page.xhtml")
        '#{request.contextPath}/abs/page.xhtml'
        >>> fix_link("http://external.com/x")
        'http://external.com/x'
    """
    if value.startswith(scheme_marker):
        return value
    if value.startswith("/"):
        return f"{context_root}{value}"
    return f"{context_root}/{value}"


class DecorationPipeline:
    """Rewrites tags according to the configured namespaces and mappings.

    Plain HTML tags receive the mandatory namespace declarations. Any other
    tag is first remapped through the mapping table and then, if it carries
    links, has its relative links made context-root relative.
    """

    def __init__(
        self,
        config: ConfigurationStore,
        options: DecorationOptions | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            config: Configuration store to read namespaces and mappings from
            options: Pipeline options; defaults to the options of the store
        """
        self._config = config
        self._options = options or config.options

    @property
    def options(self) -> DecorationOptions:
        return self._options

    def decorate(self, descriptor: TagDescriptor) -> Tag:
        """Decorate a tag in place and return its finalized form.

        Args:
            descriptor: Descriptor of the incoming tag, owned by this call

        Returns:
            The finalized tag

        Raises:
            ConfigurationError: If a mapping refers to an unconfigured namespace
        """
        with logger.indent_block(f"decorate tag: {descriptor.qualified_name}"):
            if descriptor.is_html_tag():
                self.add_missing_namespaces(descriptor)
            else:
                self.apply_mapping(descriptor)
                # Re-evaluated after mapping: a remapped tag may now carry links
                if descriptor.is_urlable():
                    self.fix_links(descriptor)
        return descriptor.finalize()

    def decorate_tag(self, tag: Tag) -> Tag:
        """Decorate a finalized tag received from the host."""
        return self.decorate(TagDescriptor.from_tag(tag))

    def add_missing_namespaces(self, descriptor: TagDescriptor) -> None:
        logger.debug("add missing namespaces")
        for namespace in self._config.list_mandatory_namespaces():
            if self._options.dedupe_namespaces and descriptor.has_attribute(namespace.prefix):
                continue
            descriptor.add_attribute(namespace.prefix, namespace.url)

    def apply_mapping(self, descriptor: TagDescriptor) -> None:
        """Rename the tag if a mapping is configured for it.

        Raises:
            ConfigurationError: If the mapping's namespace letter is unknown
        """
        mapping = self._config.find_mapping(descriptor.namespace, descriptor.local_name)
        if mapping is None:
            logger.debug(f"no mapping for tag: {descriptor.qualified_name}")
            return

        namespace = descriptor.namespace
        if mapping.target_namespace_letter is not None:
            namespace = self._config.get_namespace_by_letter(
                mapping.target_namespace_letter
            ).url

        logger.info(
            f"mapping found: {mapping.source} -> {mapping.target_qualified_name}"
        )
        descriptor.rename(mapping.target_name(namespace))

    def fix_links(self, descriptor: TagDescriptor) -> None:
        logger.debug(f"fixing links: {descriptor.qualified_name}")
        for attribute in descriptor.get_link_attributes():
            fixed = fix_link(
                attribute.value,
                context_root=self._options.context_root,
                scheme_marker=self._options.scheme_marker,
            )
            if fixed != attribute.value:
                descriptor.replace_attribute(attribute, attribute.with_value(fixed))
