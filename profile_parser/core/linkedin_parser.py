"""
Heuristic parser for the text of a LinkedIn "Save to PDF" profile export.

parse() never raises on bad input: anything it cannot find stays an empty
string or empty list, and `confidence` tells the caller how much came back.
"""

import logging
from typing import Optional

from profile_parser.core.confidence_calculator import ConfidenceCalculator
from profile_parser.core.contact_parser import parse_contact_block
from profile_parser.core.entry_parser import build_education_entries, build_experience_entries
from profile_parser.core.schemas import ParsedProfile
from profile_parser.core.sections import find_section_indices, slice_section
from profile_parser.core.skills_parser import parse_skills
from profile_parser.core.text_normalization import NBSP, split_lines

logger = logging.getLogger(__name__)


def parse(text: Optional[str], split_entries: bool = True) -> ParsedProfile:
    """
    Parse exported profile text into a ParsedProfile.

    With split_entries=True (default) experience and education sections are
    sliced with their blank lines intact, so each paragraph becomes its own
    entry. With split_entries=False blank lines are dropped first and each
    section collapses into a single entry.
    """
    if not (text or "").replace(NBSP, " ").strip():
        return ParsedProfile()

    layout = split_lines(text, keep_blank=True)
    sections = find_section_indices(layout)
    lines = tuple(line for line in layout if line)
    if not lines:
        return ParsedProfile()

    contact = parse_contact_block(lines)

    name = lines[0]
    first_name, *rest = name.split()
    last_name = " ".join(rest)

    summary = " ".join(slice_section(layout, "about", sections)).strip()
    skills = parse_skills(slice_section(layout, "skills", sections))
    experience = build_experience_entries(slice_section(layout, "experience", sections, keep_blank=split_entries))
    education = build_education_entries(slice_section(layout, "education", sections, keep_blank=split_entries))

    confidence = ConfidenceCalculator.profile(first_name, contact.headline, summary, skills)

    logger.debug(
        "Parsed profile: %d lines, sections=%s, skills=%d, experience=%d, education=%d, confidence=%d",
        len(lines), [key for key, _ in sections], len(skills), len(experience), len(education), confidence,
    )

    return ParsedProfile(
        name=name,
        first_name=first_name,
        last_name=last_name,
        headline=contact.headline,
        location=contact.location,
        email=contact.email,
        phone=contact.phone,
        linkedin_url=contact.linkedin_url,
        websites=contact.websites,
        summary=summary,
        skills=skills,
        experience=experience,
        education=education,
        confidence=confidence,
    )


parse_linkedin_text = parse
