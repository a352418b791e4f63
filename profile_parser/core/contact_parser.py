"""
Contact block extraction.

LinkedIn exports print the name, headline, location and contact details at the
top of the first page, so only the leading lines are searched. Anything past
the window (an email quoted inside a job description, say) is ignored.
"""

import re
from typing import Sequence

from profile_parser.core.schemas import ContactInfo
from profile_parser.core.sections import is_section_header


CONTACT_WINDOW = 12

EMAIL_RE = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)
PHONE_RE = re.compile(r"\+?\d[\d\s().-]{7,}", re.ASCII)  # may run into the " \n " line join, strip the match
LINKEDIN_RE = re.compile(r"(?:https?://)?[\w.-]*linkedin\.com/[\w/-]+", re.IGNORECASE | re.ASCII)
URL_RE = re.compile(r"https?://\S+", re.IGNORECASE)


def _first_match(pattern: re.Pattern, text: str) -> str:
    m = pattern.search(text)
    return m.group(0) if m else ""


def _find_location(block: Sequence[str]) -> str:
    # "San Francisco, CA" style lines; the comma check alone would also take
    # "linkedin.com/in/jane, ..." lines from the contact column
    for line in block:
        if "," in line and "linkedin" not in line.lower():
            return line
    return ""


def parse_contact_block(lines: Sequence[str]) -> ContactInfo:
    """
    Pattern-match contact fields from the first CONTACT_WINDOW lines.

    The headline is the line right under the name unless that line is already
    a section header (profiles with no headline go straight to "Contact").
    """
    block = list(lines[:CONTACT_WINDOW])
    joined = " \n ".join(block)

    headline = ""
    if len(block) > 1 and not is_section_header(block[1]):
        headline = block[1]

    return ContactInfo(
        headline=headline,
        location=_find_location(block),
        email=_first_match(EMAIL_RE, joined),
        phone=_first_match(PHONE_RE, joined).strip(),
        linkedin_url=_first_match(LINKEDIN_RE, joined),
        websites=URL_RE.findall(joined),
    )
