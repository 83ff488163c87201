# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""AttributeTable - ordered attribute storage for a single node."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping


class AttributeTable:
    """Ordered mapping of attribute name to string value.

    Keys are unique. A new key is appended at the end; setting an
    existing key overwrites its value in place, keeping its position.
    Keys and values are converted with str(), on lookup as well as on set.

    Example:
        >>> table = AttributeTable()
        >>> table.set('class', 'a')
        >>> table.set('id', 'main')
        >>> table.set('class', 'b')
        >>> list(table.items())
        [('class', 'b'), ('id', 'main')]
    """

    __slots__ = ('_entries',)

    def __init__(
        self,
        source: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
    ) -> None:
        """Initialize an AttributeTable.

        Args:
            source: Optional mapping or iterable of (key, value) pairs,
                applied in order through set().
        """
        # dict preserves first-insertion order and keeps it on overwrite
        self._entries: dict[str, str] = {}
        if source is not None:
            self.set_many(source)

    def __repr__(self) -> str:
        return f"AttributeTable({list(self._entries.items())!r})"

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        return str(key) in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeTable):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    def set(self, key: str, value: Any) -> None:
        """Insert key at the end, or overwrite its value in place."""
        self._entries[str(key)] = str(value)

    def set_many(
        self, pairs: Mapping[str, Any] | Iterable[tuple[str, Any]]
    ) -> None:
        """Set several attributes in order.

        Args:
            pairs: A mapping or an iterable of (key, value) pairs.
        """
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        for key, value in pairs:
            self.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """Get an attribute value, or default if absent."""
        return self._entries.get(str(key), default)

    def remove(self, key: str) -> str:
        """Remove an attribute and return its value.

        Raises:
            KeyError: If key is not set.
        """
        return self._entries.pop(str(key))

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield (key, value) pairs in insertion order.

        Each call returns a fresh iterator, so the sequence can be
        walked any number of times.
        """
        return iter(list(self._entries.items()))

    iterate = items

    def copy(self) -> AttributeTable:
        """Return an independent copy of this table."""
        table = AttributeTable()
        table._entries = dict(self._entries)
        return table
