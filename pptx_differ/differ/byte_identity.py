"""Byte-for-byte identity check for two files on disk."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from pptx_differ.utils.logger import get_logger

LOGGER = get_logger(__name__)

CHUNK_SIZE = 64 * 1024

PathLike = Union[str, "os.PathLike[str]"]


def is_identical(file_a: PathLike, file_b: PathLike, chunk_size: int = CHUNK_SIZE) -> bool:
    """Return True only if both files hold exactly the same bytes.

    Sizes are compared first; when they differ neither file is opened.
    Otherwise both files are streamed in lock-step and the comparison stops
    at the first mismatching chunk. Both handles are closed on every exit
    path, and I/O errors propagate to the caller.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    path_a = Path(file_a)
    path_b = Path(file_b)

    size_a = path_a.stat().st_size
    size_b = path_b.stat().st_size
    if size_a != size_b:
        LOGGER.debug("Byte length differs: %s=%d, %s=%d", path_a.name, size_a, path_b.name, size_b)
        return False

    with open(path_a, "rb") as stream_a, open(path_b, "rb") as stream_b:
        while True:
            chunk_a = stream_a.read(chunk_size)
            chunk_b = stream_b.read(chunk_size)
            if chunk_a != chunk_b:
                LOGGER.debug("Content differs between %s and %s", path_a.name, path_b.name)
                return False
            if not chunk_a:
                # both streams exhausted together
                return True
