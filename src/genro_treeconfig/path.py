# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dotted path parsing.

A path like ``'server.ports.0'`` is split on ``.`` into segments. A
segment made only of ASCII digits is an index candidate: it addresses a
list element when applied to a list, and is an ordinary key when applied
to a map.
"""

from __future__ import annotations

import re

PATH_SEPARATOR = '.'

_INDEX_PATTERN = re.compile(r'[0-9]+')


def split_path(path: str) -> list[str]:
    """Split a dotted path into segments.

    The empty path has no segments. Trailing empty segments are dropped,
    inner ones are kept as the empty key.

    Examples:
        >>> split_path('a.b.0')
        ['a', 'b', '0']
        >>> split_path('')
        []
        >>> split_path('a.')
        ['a']
        >>> split_path('a..b')
        ['a', '', 'b']
    """
    if not isinstance(path, str):
        raise TypeError(f"path must be str, not {type(path).__name__}")
    segments = path.split(PATH_SEPARATOR)
    while segments and not segments[-1]:
        segments.pop()
    return segments


def is_index(segment: str) -> bool:
    """True if segment is a list index candidate (digits only)."""
    return _INDEX_PATTERN.fullmatch(segment) is not None
