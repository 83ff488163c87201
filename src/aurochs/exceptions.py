# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Aurochs exceptions."""

from __future__ import annotations


class AurochsError(Exception):
    """Base exception for Aurochs errors."""

    pass


class OwnershipError(AurochsError):
    """Raised when a node is appended to a second parent or into its own subtree."""

    pass


class VoidContentError(AurochsError):
    """Raised by strict rendering when a void element carries text or children."""

    pass


class ConfigurationError(AurochsError, ValueError):
    """Raised when render options are invalid."""

    pass
