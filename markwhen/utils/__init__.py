"""
Utilities package for markwhen.

- txt: key/value splitting, comment stripping, reading timeline files
"""

from .txt import read_markwhen_lines, split_key_value, strip_comment

__all__ = ["read_markwhen_lines", "split_key_value", "strip_comment"]
