"""
Line normalization for text produced from a LinkedIn profile export.

PDF/DOCX-to-text conversion leaves non-breaking spaces, carriage returns and
runs of whitespace behind. Everything downstream works on the cleaned lines.
"""

import re
from typing import List, Optional, Tuple


NBSP = "\u00a0"
WHITESPACE_RE = re.compile(r"\s+")


def clean_line(line: Optional[str]) -> str:
    """Replace NBSPs, collapse whitespace runs to one space and trim."""
    if not line:
        return ""
    return WHITESPACE_RE.sub(" ", line.replace(NBSP, " ")).strip()


def split_lines(text: Optional[str], keep_blank: bool = False) -> Tuple[str, ...]:
    """
    Split raw text into cleaned lines, preserving order.

    Blank lines are dropped by default. With keep_blank=True each blank line
    stays in place as "" so entry chunking can still see paragraph breaks.

    Examples:
    - "Jane\\r\\n\\n  Doe " -> ("Jane", "Doe")
    - "Jane\\n\\nDoe" with keep_blank=True -> ("Jane", "", "Doe")
    """
    if not text:
        return ()
    lines: List[str] = [clean_line(line) for line in text.replace("\r", "").split("\n")]
    if keep_blank:
        return tuple(lines)
    return tuple(line for line in lines if line)
