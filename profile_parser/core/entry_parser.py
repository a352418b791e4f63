"""
Experience/education entry construction.

A section slice is grouped into chunks (runs of non-blank lines), one chunk per
position or school. Each chunk is read positionally:

    Senior Engineer            <- role / institution
    Acme Corp                  <- organization / degree
    Jan 2021 - Present         <- first line holding a year -> duration
    Led platform rewrite.      <- third line onward -> summary
"""

import re
from typing import List, Sequence, Type, TypeVar

from profile_parser.core.schemas import EducationEntry, ExperienceEntry, ProfileModel


MAX_EXPERIENCE_ENTRIES = 6
MAX_EDUCATION_ENTRIES = 5

YEAR_RE = re.compile(r"\d{4}", re.ASCII)

EntryT = TypeVar("EntryT", bound=ProfileModel)


def chunk_by_blank_lines(lines: Sequence[str]) -> List[List[str]]:
    chunks: List[List[str]] = []
    current: List[str] = []
    for line in lines:
        text = line.strip()
        if not text:
            if current:
                chunks.append(current)
                current = []
            continue
        current.append(text)
    if current:
        chunks.append(current)
    return chunks


def _find_duration(chunk: Sequence[str]) -> str:
    for line in chunk:
        if YEAR_RE.search(line):
            return line
    return ""


def build_entries(
    lines: Sequence[str],
    model: Type[EntryT],
    title_field: str,
    subtitle_field: str,
    limit: int,
) -> List[EntryT]:
    """Build up to `limit` entries of `model`, earliest chunks first."""
    if not lines:
        return []
    entries: List[EntryT] = []
    for chunk in chunk_by_blank_lines(lines)[:limit]:
        entries.append(model(**{
            title_field: chunk[0],
            subtitle_field: chunk[1] if len(chunk) > 1 else "",
            "duration": _find_duration(chunk),
            "summary": " ".join(chunk[2:]),
        }))
    return entries


def build_experience_entries(lines: Sequence[str]) -> List[ExperienceEntry]:
    return build_entries(lines, ExperienceEntry, "role", "organization", MAX_EXPERIENCE_ENTRIES)


def build_education_entries(lines: Sequence[str]) -> List[EducationEntry]:
    return build_entries(lines, EducationEntry, "institution", "degree", MAX_EDUCATION_ENTRIES)
