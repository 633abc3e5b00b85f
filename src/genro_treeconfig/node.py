# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree node classes.

A configuration tree is made of four node kinds:

- NullNode: absence of a value (single shared instance, ``NULL``)
- ScalarNode: an opaque leaf wrapping a str, int, float or bool
- ListNode: ordered, 0-indexed sequence of nodes
- MapNode: ordered mapping from string keys to nodes

Example:
    >>> tree = MapNode({'server': {'ports': [80, 443]}})
    >>> tree.get('server').get('ports').get(1)
    ScalarNode(443)
    >>> tree.get('missing') is NULL
    True
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

_SCALAR_TYPES = (str, int, float, bool)


class TreeNode:
    """Base class of every node in a configuration tree."""

    __slots__ = ()

    @property
    def is_null(self) -> bool:
        """True if this node is ``NULL``."""
        return False

    @property
    def is_scalar(self) -> bool:
        """True if this node is a scalar leaf."""
        return False

    @property
    def is_list(self) -> bool:
        """True if this node is a list."""
        return False

    @property
    def is_map(self) -> bool:
        """True if this node is a map."""
        return False

    def to_python(self) -> Any:
        """Convert to plain Python data (recursive)."""
        raise NotImplementedError

    def to_text(self, indent: int = 0) -> str:
        """Serialize this node.

        Args:
            indent: 0 for the compact form, otherwise the number of
                spaces used for each nesting level.
        """
        from .codec import dumps
        return dumps(self, indent)

    def __str__(self) -> str:
        return self.to_text()


class NullNode(TreeNode):
    """The null node. Always use the ``NULL`` instance."""

    __slots__ = ()

    _instance: NullNode | None = None

    def __new__(cls) -> NullNode:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self) -> tuple[type, tuple]:
        return (NullNode, ())

    def __repr__(self) -> str:
        return 'NULL'

    def __bool__(self) -> bool:
        return False

    @property
    def is_null(self) -> bool:
        return True

    def to_python(self) -> None:
        return None


NULL = NullNode()


class ScalarNode(TreeNode):
    """An immutable leaf value.

    Scalars of different Python types never compare equal, so
    ``ScalarNode(1)``, ``ScalarNode(1.0)`` and ``ScalarNode(True)`` are
    three distinct values.
    """

    __slots__ = ('_value',)

    def __init__(self, value: str | int | float | bool) -> None:
        if not isinstance(value, _SCALAR_TYPES):
            raise TypeError(
                f"Scalar value must be str, int, float or bool, not {type(value).__name__}"
            )
        self._value = value

    @property
    def value(self) -> str | int | float | bool:
        """The wrapped Python value."""
        return self._value

    @property
    def is_scalar(self) -> bool:
        return True

    def to_python(self) -> str | int | float | bool:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScalarNode):
            return NotImplemented
        return type(self._value) is type(other._value) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self._value), self._value))

    def __repr__(self) -> str:
        return f"ScalarNode({self._value!r})"


class ListNode(TreeNode):
    """An ordered list of nodes.

    Indexes are never negative: ``within_bounds(i)`` means
    ``0 <= i < len(self)``. Path operations never grow a list, ``append``
    exists for building lists programmatically.
    """

    __slots__ = ('_items',)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[TreeNode] = [as_node(item) for item in items]

    @property
    def is_list(self) -> bool:
        return True

    def within_bounds(self, index: int) -> bool:
        """True if ``index`` addresses an existing element."""
        return 0 <= index < len(self._items)

    def get(self, index: int) -> TreeNode:
        """Return the element at ``index``.

        Raises:
            IndexError: If index is out of range.
        """
        self._check_index(index)
        return self._items[index]

    def update(self, index: int, value: Any) -> None:
        """Replace the element at ``index``.

        Raises:
            IndexError: If index is out of range.
        """
        self._check_index(index)
        self._items[index] = as_node(value)

    def append(self, value: Any) -> None:
        """Append a value at the end of the list."""
        self._items.append(as_node(value))

    def _check_index(self, index: int) -> None:
        if not self.within_bounds(index):
            raise IndexError(f"List index {index} out of range (0-{len(self._items) - 1})")

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListNode):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ListNode({self._items!r})"


class MapNode(TreeNode):
    """An ordered mapping from string keys to nodes.

    Looking up a missing key returns ``NULL`` and does not insert it.
    ``put`` on an existing key keeps the key at its original position.

    Example:
        >>> m = MapNode({'a': 1})
        >>> m.put('b', [1, 2])
        >>> m.keys()
        ['a', 'b']
        >>> m.get('c')
        NULL
    """

    __slots__ = ('_entries',)

    def __init__(
        self, entries: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None
    ) -> None:
        self._entries: dict[str, TreeNode] = {}
        if entries is not None:
            items = entries.items() if isinstance(entries, Mapping) else entries
            for key, value in items:
                self.put(key, value)

    @property
    def is_map(self) -> bool:
        return True

    def get(self, key: str) -> TreeNode:
        """Return the node at ``key``, or ``NULL`` if absent."""
        return self._entries.get(key, NULL)

    def put(self, key: str, value: Any) -> None:
        """Insert or overwrite ``key``."""
        if not isinstance(key, str):
            raise TypeError(f"Map key must be str, not {type(key).__name__}")
        self._entries[key] = as_node(value)

    def remove(self, key: str) -> TreeNode:
        """Remove ``key`` and return its node, or ``NULL`` if absent."""
        return self._entries.pop(key, NULL)

    def keys(self) -> list[str]:
        """Return keys in insertion order."""
        return list(self._entries)

    def values(self) -> list[TreeNode]:
        """Return nodes in insertion order."""
        return list(self._entries.values())

    def items(self) -> list[tuple[str, TreeNode]]:
        """Return (key, node) pairs in insertion order."""
        return list(self._entries.items())

    def to_python(self) -> dict[str, Any]:
        return {key: value.to_python() for key, value in self._entries.items()}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapNode):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MapNode({self._entries!r})"


def as_node(value: Any) -> TreeNode:
    """Convert plain Python data to a tree node.

    Nodes are returned unchanged (not copied). ``None`` becomes ``NULL``,
    mappings become MapNode and lists or tuples become ListNode,
    recursively.

    Raises:
        TypeError: If value (or a nested value) has no node equivalent.
    """
    if isinstance(value, TreeNode):
        return value
    if value is None:
        return NULL
    if isinstance(value, _SCALAR_TYPES):
        return ScalarNode(value)
    if isinstance(value, Mapping):
        return MapNode(value)
    if isinstance(value, (list, tuple)):
        return ListNode(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a tree node")
