# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Document - factory for element nodes."""

from __future__ import annotations

from .node import ElementNode


class Document:
    """Entry point for creating nodes.

    Holds no state: it only creates free ElementNode instances,
    which become part of a tree through append_child().

    Example:
        >>> html = Document.create_element('html')
        >>> html.set_attribute('lang', 'en')
        ElementNode('html', attributes=1, content=empty)
    """

    @staticmethod
    def create_element(tag: str) -> ElementNode:
        """Return a new node with no attributes and no content."""
        return ElementNode(tag)


def create(tag: str) -> ElementNode:
    """Shorthand for Document.create_element(tag)."""
    return ElementNode(tag)
