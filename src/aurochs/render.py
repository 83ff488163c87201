# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Serializer - renders an ElementNode tree to markup.

Output style: every node starts on its own line, indented by depth.
Empty and text nodes close on the same line; nodes with children
put each child on its own line(s) one level deeper and close on a
separate line at their own depth. Void elements emit the opening tag
only. Every line ends with a newline.

Example:
    Rendering a small tree::

        from aurochs import create, render

        root = create("html").set_attribute("lang", "en")
        body = root.append_child(create("body"))
        body.append_child(create("p")).inner_text("Hi")
        print(render(root), end="")

    prints::

        <html lang="en">
            <body>
                <p>Hi</p>
            </body>
        </html>
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field

from .content import Children, Text
from .exceptions import ConfigurationError, VoidContentError
from .node import ElementNode
from .tags import TagRegistry, default_registry

logger = logging.getLogger(__name__)

DOCTYPE = "<!DOCTYPE html>"


@dataclass(frozen=True, kw_only=True)
class RenderOptions:
    """Serializer configuration.

    Attributes:
        indent_width: Spaces per depth level.
        escape_text: HTML-escape text content (&, <, >). When False, text
            is emitted verbatim and may inject markup.
        doctype: Prefix the output with a <!DOCTYPE html> line.
        strict_void: Raise VoidContentError when a void element carries
            text or children, instead of dropping that content.
        registry: Source of the void classification.
    """

    indent_width: int = 4
    escape_text: bool = True
    doctype: bool = False
    strict_void: bool = False
    registry: TagRegistry = field(default_factory=lambda: default_registry)

    def __post_init__(self) -> None:
        if isinstance(self.indent_width, bool) or not isinstance(self.indent_width, int):
            raise ConfigurationError(
                f"indent_width must be an int, got {type(self.indent_width).__name__}"
            )
        if self.indent_width < 0:
            raise ConfigurationError(
                f"indent_width must be >= 0, got {self.indent_width}"
            )
        if not isinstance(self.registry, TagRegistry):
            raise ConfigurationError("registry must be a TagRegistry")


class Serializer:
    """Depth-first, pre-order renderer for ElementNode trees."""

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.options = options if options is not None else RenderOptions()
        self._unit = " " * self.options.indent_width

    def escape_attribute(self, value: str) -> str:
        """Escape an attribute value for a double-quoted context."""
        if self.options.escape_text:
            value = value.replace("&", "&amp;")
        return value.replace('"', "&quot;")

    def escape_text(self, text: str) -> str:
        if self.options.escape_text:
            return html.escape(text, quote=False)
        return text

    def opening_tag(self, node: ElementNode) -> str:
        """Compose '<tag key="value" ...>' with attributes in insertion order."""
        parts = [f"<{node.tag}"]
        for key, value in node.attributes.items():
            parts.append(f' {key}="{self.escape_attribute(value)}"')
        parts.append(">")
        return "".join(parts)

    def render(self, node: ElementNode) -> str:
        """Render node and its subtree, one newline-terminated line per entry."""
        lines: list[str] = []
        if self.options.doctype:
            lines.append(DOCTYPE)
        # Entries are (depth, node) to open, or a finished closing line.
        stack: list[tuple[int, ElementNode] | str] = [(0, node)]
        while stack:
            entry = stack.pop()
            if isinstance(entry, str):
                lines.append(entry)
                continue
            depth, current = entry
            closing = self._render_node(current, depth, lines)
            if closing is not None:
                stack.append(closing)
                children = current.content.nodes
                stack.extend((depth + 1, child) for child in reversed(children))
        return "".join(f"{line}\n" for line in lines)

    def _render_node(
        self, node: ElementNode, depth: int, lines: list[str]
    ) -> str | None:
        """Emit the line(s) for node itself.

        Returns:
            The indented closing line when node's children still have to be
            rendered, otherwise None.
        """
        indent = self._unit * depth
        opening = self.opening_tag(node)
        content = node.content

        if self.options.registry.is_void(node.tag):
            if content.kind != 'empty':
                if self.options.strict_void:
                    raise VoidContentError(
                        f"void element <{node.tag}> cannot hold {content.kind}"
                    )
                logger.debug("<%s>: void element, %s dropped", node.tag, content.kind)
            lines.append(f"{indent}{opening}")
            return None

        closing = f"</{node.tag}>"
        if isinstance(content, Children):
            lines.append(f"{indent}{opening}")
            return f"{indent}{closing}"
        if isinstance(content, Text):
            lines.append(f"{indent}{opening}{self.escape_text(content.value)}{closing}")
        else:
            lines.append(f"{indent}{opening}{closing}")
        return None


def render(node: ElementNode, options: RenderOptions | None = None) -> str:
    """Render an ElementNode tree to a markup string.

    Args:
        node: The root of the tree to render.
        options: Render options. Defaults to RenderOptions().

    Returns:
        The markup, each line terminated by a newline.
    """
    return Serializer(options).render(node)
