# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Fluent builders on top of ElementNode."""

from .html import HtmlBuilder, HtmlPage

__all__ = [
    'HtmlBuilder',
    'HtmlPage',
]
