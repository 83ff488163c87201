# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tag classification.

Void elements never carry content and are rendered as a lone opening tag.
The classification is a pure function of the tag name: it is consulted
only at render time, never when nodes are built.

References:
    - https://html.spec.whatwg.org/multipage/syntax.html#void-elements
"""

from __future__ import annotations

from typing import Any, Iterable

# HTML5 void elements (self-closing, no content)
VOID_ELEMENTS = frozenset({
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",  # deprecated but still valid
    "source",
    "track",
    "wbr",
})

KNOWN_TAGS = VOID_ELEMENTS | frozenset({
    # document
    "html", "head", "style", "title", "body", "header", "main", "footer",
    # sectioning
    "article", "aside", "nav", "section", "div", "ul", "ol", "li", "span",
    # text
    "h1", "h2", "h3", "h4", "h5", "h6", "p", "a",
    # media
    "audio", "video", "svg", "canvas",
    "script",
    # forms and interactive
    "button", "datalist", "select", "option", "form", "label", "textarea",
    "details", "dialog", "summary",
    "template",
})


def _normalize(tag: Any) -> str:
    return str(tag).lower()


class TagRegistry:
    """Static classification of tag names.

    Any name outside the void set, including custom element names,
    is non-void. Lookups never fail.

    Example:
        >>> registry = TagRegistry()
        >>> registry.is_void('br')
        True
        >>> registry.is_void('my-widget')
        False
    """

    __slots__ = ('void_elements', 'known_tags')

    def __init__(
        self,
        void_elements: Iterable[str] | None = None,
        known_tags: Iterable[str] | None = None,
    ) -> None:
        """Initialize a TagRegistry.

        Args:
            void_elements: Names classified as void. Defaults to HTML5's.
            known_tags: Names the fluent builder exposes. Defaults to KNOWN_TAGS.
        """
        if void_elements is None:
            self.void_elements = VOID_ELEMENTS
        else:
            self.void_elements = frozenset(_normalize(t) for t in void_elements)
        if known_tags is None:
            self.known_tags = KNOWN_TAGS
        else:
            self.known_tags = frozenset(_normalize(t) for t in known_tags)

    def __repr__(self) -> str:
        return f"TagRegistry(void={len(self.void_elements)}, known={len(self.known_tags)})"

    def is_void(self, tag: Any) -> bool:
        """True if tag is a void element (case-insensitive)."""
        return _normalize(tag) in self.void_elements

    def is_known(self, tag: Any) -> bool:
        """True if tag is one of the named tags (case-insensitive)."""
        return _normalize(tag) in self.known_tags


default_registry = TagRegistry()


def is_void(tag: Any) -> bool:
    """Classify tag against the default registry."""
    return default_registry.is_void(tag)


def is_known(tag: Any) -> bool:
    """Check tag against the default registry's named tags."""
    return default_registry.is_known(tag)
