# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Text serialization of configuration trees.

Trees are persisted as JSON. Key order and scalar kinds survive a
dump/load cycle; ``NULL`` is written as ``null``.

Example:
    >>> dumps(MapNode({'a': [1, 2]}))
    '{"a":[1,2]}'
    >>> loads('{"a": [1, 2]}').get('a').get(0)
    ScalarNode(1)
"""

from __future__ import annotations

import json
from typing import Any

from .exceptions import ConfigParseError
from .node import TreeNode, as_node


def dumps(node: TreeNode | Any, indent: int = 0) -> str:
    """Serialize a node (or plain data convertible to one) to text.

    Args:
        node: The node to serialize.
        indent: 0 for the compact single-line form, otherwise the number
            of spaces per nesting level.

    Raises:
        ValueError: If indent is negative, or the text holds characters
            that UTF-8 cannot encode (lone surrogates).
    """
    if not isinstance(indent, int) or isinstance(indent, bool):
        raise TypeError(f"indent must be int, not {type(indent).__name__}")
    if indent < 0:
        raise ValueError(f"indent must be non-negative, got {indent}")
    data = as_node(node).to_python()
    if indent == 0:
        text = json.dumps(data, ensure_ascii=False, separators=(',', ':'))
    else:
        text = json.dumps(data, ensure_ascii=False, indent=indent)
    try:
        text.encode('utf-8')
    except UnicodeEncodeError as e:
        raise ValueError(f"Tree data cannot be written as UTF-8: {e}") from e
    return text


def loads(text: str) -> TreeNode:
    """Parse text into a tree node.

    Raises:
        ConfigParseError: If text is not valid serialized tree data.
    """
    try:
        return as_node(json.loads(text))
    except (json.JSONDecodeError, RecursionError) as e:
        raise ConfigParseError(f"Invalid tree data: {e}") from e
