"""
MD5 checksums of files and binary streams.
"""

import hashlib
import os
from typing import BinaryIO

CHUNK_SIZE = 8192


def md5_sum(source: str | os.PathLike | BinaryIO) -> str:
    """Compute the MD5 digest of a file path or an open binary stream.

    Returns the lowercase hex digest. I/O errors propagate as OSError.
    """
    if isinstance(source, (str, os.PathLike)):
        with open(source, "rb") as stream:
            return _digest_stream(stream)
    return _digest_stream(source)


def md5_sum_bytes(data: bytes) -> str:
    """Compute the MD5 digest of an in-memory buffer."""
    return hashlib.md5(data).hexdigest()


def _digest_stream(stream: BinaryIO) -> str:
    md = hashlib.md5()
    while chunk := stream.read(CHUNK_SIZE):
        md.update(chunk)
    return md.hexdigest()
