"""Tag decoration pipeline for facelets-style templating engines."""

__version__ = "0.1.0"

from tagdecorator.config import (  # noqa: E402
    ConfigurationStore,
    MappingEntry,
    Namespace,
    NamespaceRegistry,
    TagKey,
)
from tagdecorator.errors import ConfigurationError, DecorationError  # noqa: E402
from tagdecorator.models import Tag, TagAttribute, TagName  # noqa: E402
from tagdecorator.options import DecorationOptions  # noqa: E402
from tagdecorator.pipeline import DecorationPipeline, fix_link  # noqa: E402
from tagdecorator.tags import TagDescriptor  # noqa: E402

__all__ = [
    "ConfigurationError",
    "ConfigurationStore",
    "DecorationError",
    "DecorationOptions",
    "DecorationPipeline",
    "MappingEntry",
    "Namespace",
    "NamespaceRegistry",
    "Tag",
    "TagAttribute",
    "TagDescriptor",
    "TagKey",
    "TagName",
    "fix_link",
]
