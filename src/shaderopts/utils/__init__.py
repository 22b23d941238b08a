"""Utility modules for shaderopts.

Provides:
- hashing: hash_str, hash_lines for cache keys
- logger: get_logger for logging
- text: split_source_lines for turning source text into lines
"""

from shaderopts.utils.hashing import hash_lines, hash_str
from shaderopts.utils.logger import get_logger
from shaderopts.utils.text import split_source_lines

__all__ = [
    "get_logger",
    "hash_lines",
    "hash_str",
    "split_source_lines",
]
