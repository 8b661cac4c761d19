"""Tunable behaviour of the decoration pipeline."""

from __future__ import annotations

from dataclasses import dataclass

# Expression resolved by the templating engine to the application context root
CONTEXT_ROOT_PLACEHOLDER = "#{request.contextPath}"

# Link values starting with this marker are treated as absolute
SCHEME_MARKER = "http"


@dataclass(frozen=True)
class DecorationOptions:
    """Options applied to every decoration call."""

    context_root: str = CONTEXT_ROOT_PLACEHOLDER
    """Prefix added to relative link values."""

    scheme_marker: str = SCHEME_MARKER
    """Prefix identifying absolute link values."""

    dedupe_namespaces: bool = False
    """Skip namespace declarations the tag already carries.

    Off by default: repeated decoration appends the declarations again.
    """
