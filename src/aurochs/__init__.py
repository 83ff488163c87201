# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Aurochs - build HTML element trees in Python and render them to markup.

A lightweight, zero-dependency library for server-side rendering,
static-site generation and front-end generation for native shells.
"""

__version__ = "0.1.0"

from .attributes import AttributeTable
from .content import EMPTY, Children, Content, Empty, Text
from .document import Document, create
from .exceptions import (
    AurochsError,
    ConfigurationError,
    OwnershipError,
    VoidContentError,
)
from .node import ElementNode
from .render import RenderOptions, Serializer, render
from .tags import KNOWN_TAGS, VOID_ELEMENTS, TagRegistry, is_known, is_void

__all__ = [
    # Data model
    "ElementNode",
    "AttributeTable",
    "Content",
    "Empty",
    "Text",
    "Children",
    "EMPTY",
    # Factories
    "Document",
    "create",
    # Tags
    "TagRegistry",
    "VOID_ELEMENTS",
    "KNOWN_TAGS",
    "is_void",
    "is_known",
    # Rendering
    "RenderOptions",
    "Serializer",
    "render",
    # Exceptions
    "AurochsError",
    "OwnershipError",
    "VoidContentError",
    "ConfigurationError",
]
