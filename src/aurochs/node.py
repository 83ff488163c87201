# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ElementNode - the element tree node and its builder operations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Mapping

from .attributes import AttributeTable
from .content import EMPTY, Children, Content, Text
from .exceptions import OwnershipError
from .tags import default_registry

if TYPE_CHECKING:
    from .render import RenderOptions

logger = logging.getLogger(__name__)


class ElementNode:
    """A markup element: tag, attributes and content.

    Each node has:
    - tag: The element name, fixed at creation
    - attributes: An AttributeTable, ordered by first insertion
    - content: Exactly one of Empty, Text or Children

    A node owns its children exclusively. Appending a node that
    already has a parent, or that would make the tree cyclic, raises
    OwnershipError. Use clone_node() to place a copy elsewhere.

    Example:
        >>> p = ElementNode('p')
        >>> p.set_attribute('class', 'lead').inner_text('Hello')
        ElementNode('p', attributes=1, content=text)
        >>> p.render()
        '<p class="lead">Hello</p>\\n'
    """

    __slots__ = ('_tag', '_attributes', '_content', '_owned')

    def __init__(self, tag: str) -> None:
        """Initialize an ElementNode with no attributes and no content.

        Args:
            tag: The element name. Any string is accepted.
        """
        self._tag = tag
        self._attributes = AttributeTable()
        self._content: Content = EMPTY
        self._owned = False

    def __repr__(self) -> str:
        return (
            f"ElementNode({self._tag!r}, attributes={len(self._attributes)}, "
            f"content={self._content.kind})"
        )

    @property
    def tag(self) -> str:
        """The element name."""
        return self._tag

    @property
    def attributes(self) -> AttributeTable:
        """The node's own attribute table."""
        return self._attributes

    @property
    def content(self) -> Content:
        """The current content variant."""
        return self._content

    @property
    def text(self) -> str | None:
        """The text content, or None if the node holds no text."""
        if isinstance(self._content, Text):
            return self._content.value
        return None

    @property
    def children(self) -> tuple[ElementNode, ...]:
        """The child nodes, empty unless the node holds children."""
        if isinstance(self._content, Children):
            return tuple(self._content.nodes)
        return ()

    @property
    def is_void(self) -> bool:
        """True if the tag is a void element in the default registry."""
        return default_registry.is_void(self._tag)

    @property
    def is_owned(self) -> bool:
        """True if the node currently belongs to a parent."""
        return self._owned

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def set_attribute(self, key: str, value: Any) -> ElementNode:
        """Set an attribute, overwriting an existing key in place.

        Returns:
            The node itself, for chaining.
        """
        self._attributes.set(key, value)
        return self

    def set_attribute_list(
        self, pairs: Mapping[str, Any] | Iterable[tuple[str, Any]]
    ) -> ElementNode:
        """Set several attributes in order.

        Example:
            >>> script = ElementNode('script')
            >>> script.set_attribute_list([('src', './main.js'), ('type', 'module')])
            ElementNode('script', attributes=2, content=empty)
        """
        self._attributes.set_many(pairs)
        return self

    def get_attribute(self, key: str, default: Any = None) -> Any:
        """Get an attribute value, or default if absent."""
        return self._attributes.get(key, default)

    def remove_attribute(self, key: str) -> str:
        """Remove an attribute and return its value.

        Raises:
            KeyError: If the attribute is not set.
        """
        return self._attributes.remove(key)

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    def _release_children(self) -> None:
        if isinstance(self._content, Children):
            logger.debug(
                "<%s>: discarding %d children", self._tag, len(self._content.nodes)
            )
            for child in self._content.nodes:
                child._owned = False

    def inner_text(self, text: str) -> ElementNode:
        """Set the content to text, discarding previous text or children.

        Discarded children are released and may be appended elsewhere.

        Returns:
            The node itself, for chaining.
        """
        self._release_children()
        self._content = Text(str(text))
        return self

    def _check_insertable(self, child: ElementNode) -> None:
        if not isinstance(child, ElementNode):
            raise TypeError(
                f"append_child() expects an ElementNode, got {type(child).__name__}"
            )
        if child._owned:
            raise OwnershipError(
                f"<{child.tag}> already has a parent; append a clone_node() instead"
            )
        for _, node in child.walk():
            if node is self:
                raise OwnershipError(
                    f"cannot append <{child.tag}> into its own subtree"
                )

    def append_child(self, child: ElementNode) -> ElementNode:
        """Append child at the end of this node's children.

        Empty content becomes a one-element child list. Text content
        is discarded and replaced by a one-element child list.

        Ownership of child moves to this node.

        Args:
            child: A node without a parent, not an ancestor of this node.

        Returns:
            The appended child.

        Raises:
            OwnershipError: If child already has a parent, is this node,
                or contains this node.
        """
        self._check_insertable(child)
        if isinstance(self._content, Children):
            self._content.nodes.append(child)
        else:
            if isinstance(self._content, Text):
                logger.debug("<%s>: text replaced by children", self._tag)
            self._content = Children([child])
        child._owned = True
        return child

    def append_child_list(self, children: Iterable[ElementNode]) -> ElementNode:
        """Append each child in order, as by repeated append_child().

        Returns:
            The node itself, for chaining.
        """
        for child in children:
            self.append_child(child)
        return self

    # -------------------------------------------------------------------------
    # Copy, traversal, output
    # -------------------------------------------------------------------------

    def _copy_shell(self) -> ElementNode:
        """Copy tag, attributes and leaf content, without children."""
        copied = ElementNode(self._tag)
        copied._attributes = self._attributes.copy()
        if not isinstance(self._content, Children):
            # Empty and Text are immutable
            copied._content = self._content
        return copied

    def clone_node(self) -> ElementNode:
        """Return a deep, independent copy of this node and its subtree.

        The clone has no parent. Mutating either copy never affects the
        other. Duplicate id attributes are copied as they are.
        """
        clone = self._copy_shell()
        pending = [(self, clone)]
        while pending:
            source, target = pending.pop()
            if not isinstance(source._content, Children):
                continue
            nodes = []
            for child in source._content.nodes:
                copied = child._copy_shell()
                copied._owned = True
                nodes.append(copied)
                pending.append((child, copied))
            target._content = Children(nodes)
        return clone

    def walk(self) -> Iterator[tuple[int, ElementNode]]:
        """Yield (depth, node) for this node and its descendants, pre-order.

        The node itself is yielded at depth 0.
        """
        stack = [(0, self)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            if isinstance(node._content, Children):
                stack.extend((depth + 1, child) for child in reversed(node._content.nodes))

    def render(self, options: RenderOptions | None = None) -> str:
        """Render this node and its subtree to markup.

        Args:
            options: Render options. Defaults to RenderOptions().
        """
        from .render import render

        return render(self, options)
