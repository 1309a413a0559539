"""Whole-document cleanup applied before line processing."""

import re
from typing import List

# Escape sequences written out as text (backslash + letter), not control bytes
_LITERAL_BREAKS = ("\\v", "\\f", "\\r")
_BLANK_RUN_RE = re.compile(r"\n{2,}")


def normalize(raw_text: str) -> str:
    """Turn literal \\v, \\f and \\r into newlines, then collapse blank-line runs to one."""
    text = raw_text
    for seq in _LITERAL_BREAKS:
        text = text.replace(seq, "\n")
    return _BLANK_RUN_RE.sub("\n\n", text)


def split_lines(text: str) -> List[str]:
    """Split on newlines, dropping trailing empty lines."""
    lines = text.split("\n")
    while lines and not lines[-1]:
        lines.pop()
    return lines


def join_lines(lines: List[str]) -> str:
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
