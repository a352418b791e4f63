"""
Pre-filling a stored profile from a parsed LinkedIn export.

The upload form shows the parsed values so the user can review them before
saving. By default only empty profile fields are filled; values the user
already typed win.
"""

import logging
from typing import Any, Dict

from profile_parser.core.schemas import ParsedProfile
from profile_parser.core.skills_parser import dedupe_skills

logger = logging.getLogger(__name__)

# Profile keys (camelCase, as stored) that a parse may fill. Email is excluded:
# it identifies the account.
PREFILL_FIELDS = (
    "name",
    "firstName",
    "lastName",
    "headline",
    "location",
    "phone",
    "linkedinUrl",
    "summary",
)


def prefill_profile(existing: Dict[str, Any], parsed: ParsedProfile, overwrite: bool = False) -> Dict[str, Any]:
    """Return a copy of `existing` with parsed values merged in."""
    merged = dict(existing or {})
    values = parsed.model_dump(by_alias=True)
    filled = []

    for key in PREFILL_FIELDS:
        value = values.get(key) or ""
        if not value:
            continue
        if overwrite or not merged.get(key):
            merged[key] = value
            filled.append(key)

    current_skills = dedupe_skills(merged.get("skills") or [])
    skills = dedupe_skills(current_skills + list(parsed.skills))
    if len(skills) != len(current_skills):
        merged["skills"] = skills
        filled.append("skills")

    logger.debug("Profile pre-fill (overwrite=%s) set: %s", overwrite, filled)
    return merged
