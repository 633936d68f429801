"""Whole-file reading helpers."""

from __future__ import annotations

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def read_file(path: PathLike, binary: bool = False) -> str | bytes:
    """Return the whole content of *path*.

    In binary mode the raw bytes are returned, otherwise decoded text.
    A file that cannot be opened yields an empty result of the matching type.
    """
    try:
        if binary:
            with open(path, "rb") as handle:
                return handle.read()
        with open(path, "r", encoding="utf-8") as handle:
            return handle.read()
    except OSError:
        return b"" if binary else ""


def read_binary(path: PathLike) -> bytes:
    """Return the raw bytes of *path*, or ``b""`` if it cannot be opened."""
    data = read_file(path, binary=True)
    assert isinstance(data, bytes)
    return data