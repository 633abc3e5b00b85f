# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""File helpers used to persist configurations."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

ENCODING = 'utf-8'


def exists(path: str | os.PathLike) -> bool:
    return Path(path).exists()


def is_file(path: str | os.PathLike) -> bool:
    return Path(path).is_file()


def is_dir(path: str | os.PathLike) -> bool:
    return Path(path).is_dir()


def read_lines(path: str | os.PathLike) -> list[str]:
    """Return the lines of a text file, without line terminators."""
    return Path(path).read_text(encoding=ENCODING).splitlines()


def write_lines(path: str | os.PathLike, *lines: str) -> None:
    """Overwrite a text file, terminating each line with a newline.

    The text is encoded before the file is opened, so an encoding error
    leaves the existing file untouched.
    """
    data = ''.join(f"{line}\n" for line in lines).encode(ENCODING)
    Path(path).write_bytes(data)


def delete(path: str | os.PathLike) -> None:
    """Remove a file, or a directory and everything below it."""
    path = Path(path)
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def create_file(path: str | os.PathLike) -> None:
    """Create an empty file, creating missing parent directories.

    An existing file is left untouched.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch(exist_ok=True)
