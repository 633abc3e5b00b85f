# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TreeConfig - File-backed configuration trees with dotted path access.

A lightweight, zero-dependency library for reading and writing nested
configuration values with paths like ``'server.ports.0'``.
"""

__version__ = "0.1.0"

from .codec import dumps, loads
from .configuration import Configuration, create, load, open_config
from .exceptions import (
    ConfigParseError,
    ConfigStateError,
    InternalInvariantError,
    PathIndexError,
    TreeConfigError,
)
from .node import NULL, ListNode, MapNode, NullNode, ScalarNode, TreeNode, as_node
from .path import is_index, split_path

__all__ = [
    # Configuration
    "Configuration",
    "load",
    "create",
    "open_config",
    # Nodes
    "TreeNode",
    "NullNode",
    "ScalarNode",
    "ListNode",
    "MapNode",
    "NULL",
    "as_node",
    # Text format
    "dumps",
    "loads",
    # Paths
    "split_path",
    "is_index",
    # Exceptions
    "TreeConfigError",
    "ConfigParseError",
    "ConfigStateError",
    "PathIndexError",
    "InternalInvariantError",
]
