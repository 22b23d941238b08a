"""Hashing utilities for cache keys.

Example:
    >>> from shaderopts.utils.hashing import hash_str
    >>> hash_str("hello world", truncate=16)
    'b94d27b9934d3e08'
"""

import hashlib
import json
from collections.abc import Sequence


def hash_str(
    content: str,
    truncate: int | None = None,
    algorithm: str = "sha256",
) -> str:
    """Hash string content using specified algorithm.

    Args:
        content: String content to hash
        truncate: Truncate result to N characters (None = full hash)
        algorithm: Hash algorithm ('sha256', 'md5')

    Returns:
        Hex digest of hash, optionally truncated
    """
    hasher = hashlib.new(algorithm)
    hasher.update(content.encode("utf-8"))
    digest = hasher.hexdigest()
    return digest[:truncate] if truncate is not None else digest


def hash_lines(lines: Sequence[str], source_file: str | None = None) -> str:
    """Hash a line sequence (and its file name) for use as a cache key.

    Lines are JSON-encoded rather than joined, so ``["a\\nb"]`` and
    ``["a", "b"]`` hash differently.
    """
    return hash_str(json.dumps([source_file, list(lines)], ensure_ascii=False))
