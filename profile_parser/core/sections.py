from typing import Sequence, Tuple

from profile_parser.core.schemas import SectionIndex


# Section titles LinkedIn prints on their own line in a "Save to PDF" export
SECTION_HEADERS = frozenset({
    "about",
    "summary",
    "experience",
    "education",
    "skills",
    "projects",
    "publications",
    "certifications",
    "licenses",
    "volunteer experience",
    "honors & awards",
    "organizations",
    "languages",
})


def is_section_header(line: str) -> bool:
    """Whole-line, case-insensitive match. 'Skills:' or 'Top Skills' are not headers."""
    return line.lower() in SECTION_HEADERS


def find_section_indices(lines: Sequence[str]) -> SectionIndex:
    return [(line.lower(), idx) for idx, line in enumerate(lines) if is_section_header(line)]


def slice_section(
    lines: Sequence[str],
    header: str,
    sections: SectionIndex,
    keep_blank: bool = False,
) -> Tuple[str, ...]:
    """
    Return the lines between the first `header` and the next located header.

    Both header lines are excluded. A header that was never located yields an
    empty tuple. Blank lines are only kept when keep_blank=True.
    """
    target = header.lower()
    for pos, (key, start) in enumerate(sections):
        if key != target:
            continue
        end = sections[pos + 1][1] if pos + 1 < len(sections) else len(lines)
        body = lines[start + 1:end]
        if keep_blank:
            return tuple(body)
        return tuple(line for line in body if line)
    return ()
