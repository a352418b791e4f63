"""
Completeness scoring for a parsed LinkedIn export.

The score is a plain count, not a probability: one point each for a first
name, a headline, an About summary and at least one skill.

Confidence Scale:
  4 = every key field recovered, profile can be pre-filled as-is
  2-3 = partial export or unusual layout, worth a review by the user
  0-1 = probably not a LinkedIn export (or text extraction failed)
"""

from typing import Sequence


class ConfidenceCalculator:
    """Central place for the profile completeness heuristic."""

    @staticmethod
    def profile(first_name: str, headline: str, summary: str, skills: Sequence[str]) -> int:
        signals = [first_name, headline, summary, bool(skills)]
        return sum(1 for signal in signals if signal)
