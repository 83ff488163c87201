# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node content variants.

A node holds exactly one of Empty, Text or Children. Assigning a new
variant replaces the previous one as a whole, so text and children
can never coexist.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .node import ElementNode


@dataclass(frozen=True)
class Empty:
    """No content."""

    kind = 'empty'


@dataclass(frozen=True)
class Text:
    """Plain text content."""

    value: str
    kind = 'text'


@dataclass(frozen=True)
class Children:
    """Ordered child nodes.

    The list itself is owned by the parent node and grows in place
    on append.
    """

    nodes: list[ElementNode] = field(default_factory=list)
    kind = 'children'


EMPTY = Empty()

Content = Union[Empty, Text, Children]
