# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeConfig exceptions."""

from __future__ import annotations


class TreeConfigError(Exception):
    """Base exception for TreeConfig errors."""

    pass


class ConfigParseError(TreeConfigError, ValueError):
    """Raised when persisted text is not valid serialized tree data."""

    pass


class ConfigStateError(TreeConfigError):
    """Raised when the backing file is missing or not a regular file."""

    pass


class PathIndexError(TreeConfigError, IndexError):
    """Raised when a direct list-index write is out of range."""

    pass


class InternalInvariantError(TreeConfigError, AssertionError):
    """Raised when path mutation reaches a state it should never reach."""

    pass
