import re
from typing import Iterable, List, Sequence

from profile_parser.core.text_normalization import clean_line


MAX_SKILLS = 20

# Comma-separated lists, "•" bullets and "-" bullets all show up in exports
SKILL_SPLIT_RE = re.compile(r"[,•\-]")


def dedupe_skills(skills: Iterable[str]) -> List[str]:
    """Drop case-insensitive repeats, keeping the first spelling seen."""
    seen = set()
    out: List[str] = []
    for skill in skills:
        key = skill.lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(skill)
    return out


def parse_skills(lines: Sequence[str]) -> List[str]:
    """
    Turn the lines of a Skills section into a short skill list.

    Pieces of one character or less are noise from the split (stray bullets,
    initials). Only the first MAX_SKILLS pieces are considered, and repeats
    among them are removed afterwards.
    """
    if not lines:
        return []
    pieces = [clean_line(piece) for piece in SKILL_SPLIT_RE.split(" ".join(lines))]
    kept = [piece for piece in pieces if len(piece) > 1][:MAX_SKILLS]
    return dedupe_skills(kept)
