# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Configuration - A file-backed tree with dotted path access.

This module provides the Configuration class and the functions that bind
it to a file on disk.

Path Syntax:
    - Map keys: 'server.host'
    - List indexes: 'server.ports.0' (digits only, no negative indexes)
    - Root: '' (the empty path)

Reading never fails: a path that cannot be resolved yields ``NULL``.
Writing reshapes the tree so the path becomes valid:

    - missing map keys are created
    - a leaf met halfway down the path is replaced by a map
    - list elements are updated but lists never grow

Example:
    Basic usage::

        create('settings.json')
        config = load('settings.json')
        config.set('server.host', 'localhost')
        config.set('server.ports', [80, 443])
        config.set('server.ports.1', 8443)

        print(config.get('server.ports.1'))  # 8443
        config.save()
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from . import fileio
from .codec import dumps, loads
from .exceptions import (
    ConfigParseError,
    ConfigStateError,
    InternalInvariantError,
    PathIndexError,
)
from .node import NULL, ListNode, MapNode, TreeNode, as_node
from .path import is_index, split_path

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 4


class Configuration:
    """A configuration tree bound to a backing file.

    The tree is exclusively owned by the configuration and is mutated in
    place by ``set``. Instances are not thread safe: callers sharing one
    across threads must serialize access themselves.

    Attributes:
        file: Path of the backing file.
        content: The root node of the tree.

    Example:
        >>> config = Configuration('app.json')
        >>> config['a.b'] = 5
        >>> config.get('a')
        MapNode({'b': ScalarNode(5)})
        >>> config.get('a.b.c')
        NULL
    """

    __slots__ = ('_file', '_content')

    def __init__(self, file: str | os.PathLike, content: TreeNode | Any = NULL) -> None:
        """Initialize a Configuration.

        Args:
            file: Path of the backing file. It is not read or checked here,
                use ``load`` to read an existing file.
            content: Initial root node, or plain Python data converted
                with ``as_node``.
        """
        self._file = Path(file)
        self._content = as_node(content)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"Configuration({str(self._file)!r})"

    def __getitem__(self, path: str) -> TreeNode:
        return self.get(path)

    def __setitem__(self, path: str, value: TreeNode | Any) -> None:
        self.set(path, value)

    def __contains__(self, path: str) -> bool:
        """True if the path resolves to something other than ``NULL``."""
        return not self.get(path).is_null

    # ==================== Accessors ====================

    @property
    def file(self) -> Path:
        """Path of the backing file."""
        return self._file

    @property
    def content(self) -> TreeNode:
        """The root node."""
        return self._content

    @content.setter
    def content(self, value: TreeNode | Any) -> None:
        self._content = as_node(value)

    def get_content(self) -> TreeNode:
        return self._content

    def set_content(self, value: TreeNode | Any) -> None:
        self.content = value

    # ==================== Path Access ====================

    def get(self, path: str) -> TreeNode:
        """Return the node at the given path.

        Resolution stops at the first segment that cannot be followed and
        returns ``NULL``: a missing map key, a list index out of range, a
        non-digit segment applied to a list, or any segment applied to a
        leaf. The tree is never modified.

        Args:
            path: Dotted path, '' for the root.

        Returns:
            The node found, or ``NULL``.
        """
        node = self._content
        for segment in split_path(path):
            if node.is_map:
                node = node.get(segment)
            elif node.is_list and is_index(segment) and node.within_bounds(int(segment)):
                node = node.get(int(segment))
            else:
                return NULL
        return node

    def set(self, path: str, value: TreeNode | Any) -> None:
        """Store a value at the given path, reshaping the tree as needed.

        Whether a digit segment is a list index or a map key depends on
        the node it is applied to: on a list it is an index, on a map it
        is a key.

        Args:
            path: Dotted path, '' to replace the whole content.
            value: The node to store, or plain Python data converted with
                ``as_node`` (None becomes ``NULL``).

        Raises:
            PathIndexError: If the last segment addresses a list element
                that does not exist.

        A path whose list index is out of range before the last segment
        is silently ignored: there is no element to write through.
        """
        value = as_node(value)
        keys = split_path(path)

        if not keys:
            self._content = value
            return

        root = self._content

        if len(keys) == 1:
            key = keys[0]
            if root.is_list and is_index(key):
                _update_element(root, key, value)
            elif root.is_map:
                root.put(key, value)
            else:
                self._content = MapNode({key: value})
            return

        first = keys[0]
        if root.is_list and is_index(first):
            if not root.within_bounds(int(first)):
                logger.debug("Ignoring set of %r: list index %s out of range", path, first)
                return
            grandparent, parent = root, root.get(int(first))
        elif root.is_map:
            grandparent, parent = root, root.get(first)
        else:
            grandparent = self._content = MapNode({first: NULL})
            parent = NULL

        for previous, key in zip(keys[:-2], keys[1:-1]):
            if parent.is_list and is_index(key):
                if not parent.within_bounds(int(key)):
                    logger.debug("Ignoring set of %r: list index %s out of range", path, key)
                    return
                grandparent, parent = parent, parent.get(int(key))
            elif parent.is_map:
                grandparent, parent = parent, parent.get(key)
            else:
                # parent is a leaf: turn its slot into a branch
                grandparent = _replace_child(grandparent, previous, MapNode({key: NULL}))
                parent = NULL

        previous, key = keys[-2], keys[-1]
        if parent.is_list and is_index(key):
            _update_element(parent, key, value)
        elif parent.is_map:
            parent.put(key, value)
        else:
            _replace_child(grandparent, previous, MapNode({key: value}))

    # ==================== Persistence ====================

    def save(self, indent: int = DEFAULT_INDENT) -> None:
        """Write the content to the backing file.

        Args:
            indent: 0 for the compact form, otherwise the number of spaces
                per nesting level.

        Raises:
            ValueError: If indent is negative, or the content holds text
                that cannot be encoded. The file is left untouched.
            ConfigStateError: If the file does not exist or is not a
                regular file.
        """
        text = dumps(self._content, indent)
        if not fileio.exists(self._file):
            raise ConfigStateError(f"Cannot save configuration: '{self._file}' does not exist")
        if not fileio.is_file(self._file):
            raise ConfigStateError(
                f"Cannot save configuration: '{self._file}' is not a regular file"
            )
        fileio.write_lines(self._file, text)
        logger.debug("Saved configuration to %s", self._file)


def _update_element(items: ListNode, key: str, value: TreeNode) -> None:
    index = int(key)
    if not items.within_bounds(index):
        raise PathIndexError(f"List index {index} out of range (0-{len(items) - 1})")
    items.update(index, value)


def _replace_child(container: TreeNode, key: str, child: MapNode) -> MapNode:
    """Store child at key inside container and return it."""
    if container.is_list:
        container.update(int(key), child)
    elif container.is_map:
        container.put(key, child)
    else:
        raise InternalInvariantError(
            f"Cannot replace '{key}' inside {type(container).__name__}: not a container"
        )
    return child


def load(file: str | os.PathLike) -> Configuration:
    """Load a configuration from an existing file.

    Each line is stripped of surrounding whitespace before the text is
    parsed.

    Args:
        file: Path of a regular file holding serialized tree data.

    Raises:
        ConfigParseError: If the file content cannot be parsed.
        ConfigStateError: If the file does not exist or is not a regular
            file.

    See Also:
        create: to make an empty configuration file first.
    """
    path = Path(file)
    if fileio.is_file(path):
        try:
            lines = fileio.read_lines(path)
        except UnicodeDecodeError as e:
            raise ConfigParseError(f"Cannot load configuration: '{path}' is not UTF-8 text") from e
        text = ''.join(line.strip() for line in lines)
        config = Configuration(path, loads(text))
        logger.debug("Loaded configuration from %s", path)
        return config
    if not fileio.exists(path):
        raise ConfigStateError(f"Cannot load configuration: '{path}' does not exist")
    if fileio.is_dir(path):
        raise ConfigStateError(f"Cannot load configuration: '{path}' is a directory")
    raise ConfigStateError(f"Cannot load configuration: '{path}' is not a regular file")


def create(file: str | os.PathLike, force: bool = False) -> None:
    """Make sure a configuration file exists.

    A new file holds the serialized ``NULL``. An existing regular file is
    always kept as is.

    Args:
        file: Path of the configuration file.
        force: If True, an existing entry that is not a regular file
            (e.g. a directory) is removed and replaced. If False, any
            existing entry is left alone.
    """
    path = Path(file)
    if fileio.exists(path) and not force:
        return
    if fileio.is_file(path):
        return
    if fileio.exists(path):
        logger.debug("Removing %s to create a configuration file", path)
        fileio.delete(path)
    fileio.create_file(path)
    fileio.write_lines(path, dumps(NULL))
    logger.debug("Created configuration file %s", path)


def open_config(file: str | os.PathLike) -> Configuration:
    """Load a configuration, creating an empty file first if needed.

    Raises:
        ConfigParseError: If an existing file cannot be parsed.
        ConfigStateError: If the path exists but is not a regular file.
    """
    create(file)
    return load(file)
