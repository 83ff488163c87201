# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlBuilder - fluent construction of HTML element trees.

Example:
    Creating a page::

        from aurochs.builders import HtmlBuilder, HtmlPage

        h = HtmlBuilder()
        page = HtmlPage(lang='en', title='Aurochs')
        page.body.append_child_list([
            h.h1('Welcome'),
            h.div(
                h.p('Hello, World!', class_='lead'),
                h.ul([h.li('Item 1'), h.li('Item 2')]),
                id='main',
            ),
            h.img(src='logo.png', alt='logo'),
        ])
        print(page.render())
"""

from __future__ import annotations

from typing import Any, Callable

from ..node import ElementNode
from ..render import RenderOptions, render
from ..tags import TagRegistry, default_registry


def _attr_name(name: str) -> str:
    """Map a keyword name to an attribute name: class_ -> class, data_id -> data-id."""
    return name.rstrip('_').replace('_', '-')


class HtmlBuilder:
    """Builder for HTML elements.

    Provides a factory method for every known tag via __getattr__.
    Positional arguments set the content, in order: a string sets the
    text, an ElementNode is appended as a child, a list or tuple of
    nodes is appended as children. Keyword arguments become attributes.

    Usage:
        >>> h = HtmlBuilder()
        >>> h.p('Hello', class_='lead')
        ElementNode('p', attributes=1, content=text)
        >>> h.ul([h.li('a'), h.li('b')])
        ElementNode('ul', attributes=0, content=children)
    """

    def __init__(self, registry: TagRegistry | None = None) -> None:
        """Initialize HtmlBuilder.

        Args:
            registry: Registry whose known tags are exposed as methods.
        """
        self._registry = registry if registry is not None else default_registry

    def __getattr__(self, name: str) -> Callable[..., ElementNode]:
        """Dynamic method for any known HTML tag.

        Raises:
            AttributeError: If name is not a known tag. Use element()
                for custom tags.
        """
        if name.startswith('_'):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

        if self._registry.is_known(name):
            return self._make_tag_method(name)

        raise AttributeError(f"'{name}' is not a known HTML tag")

    def _make_tag_method(self, name: str) -> Callable[..., ElementNode]:
        def tag_method(*content: Any, **attr: Any) -> ElementNode:
            return self.element(name, *content, **attr)

        tag_method.__name__ = name
        return tag_method

    def element(self, tag: str, *content: Any, **attr: Any) -> ElementNode:
        """Create a node for any tag, known or custom.

        Raises:
            TypeError: If a content argument is not a string, node, or
                list/tuple of nodes.
            OwnershipError: If a child node already has a parent.
        """
        node = ElementNode(tag)
        for key, value in attr.items():
            node.set_attribute(_attr_name(key), value)
        for item in content:
            if isinstance(item, ElementNode):
                node.append_child(item)
            elif isinstance(item, str):
                node.inner_text(item)
            elif isinstance(item, (list, tuple)):
                node.append_child_list(item)
            else:
                raise TypeError(
                    f"unsupported content for <{tag}>: {type(item).__name__}"
                )
        return node


class HtmlPage:
    """HTML page with separate head and body nodes.

    Creates a complete HTML document structure:
    - html root, with lang if given
    - head, with a charset meta and an optional title
    - body

    Usage:
        >>> page = HtmlPage(lang='en', title='My Page')
        >>> page.body.append_child(HtmlBuilder().p('Hello World'))
        ElementNode('p', attributes=0, content=text)
        >>> markup = page.render()
    """

    def __init__(
        self,
        lang: str | None = None,
        title: str | None = None,
        charset: str | None = 'utf-8',
    ) -> None:
        """Initialize the page with head and body."""
        self.html = ElementNode('html')
        if lang is not None:
            self.html.set_attribute('lang', lang)
        self.head = self.html.append_child(ElementNode('head'))
        self.body = self.html.append_child(ElementNode('body'))
        if charset is not None:
            self.head.append_child(ElementNode('meta')).set_attribute('charset', charset)
        if title is not None:
            self.head.append_child(ElementNode('title')).inner_text(title)

    def __repr__(self) -> str:
        return f"HtmlPage(head={len(self.head.children)}, body={len(self.body.children)})"

    def render(self, options: RenderOptions | None = None) -> str:
        """Render the whole document.

        Args:
            options: Render options. Defaults to RenderOptions(doctype=True).
        """
        if options is None:
            options = RenderOptions(doctype=True)
        return render(self.html, options)
