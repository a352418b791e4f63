from io import BytesIO
from typing import Any, List, Tuple
import re
import pdfplumber


# A vertical gap this many times the usual line spacing starts a new paragraph
PARAGRAPH_GAP_RATIO = 1.6


def _words_to_lines(page: Any, *, x_tolerance: float = 3, line_y_tolerance: float = 3) -> List[Tuple[float, str]]:
    """
    Group a page's word objects into (top, text) lines.

    Words whose 'top' rounds to the same bucket share a line and are joined
    with single spaces, which avoids the glued words layout extraction gives
    on LinkedIn's two-column export.
    """
    words = page.extract_words(
        x_tolerance=x_tolerance,
        y_tolerance=2,
        keep_blank_chars=False,
        use_text_flow=True,
    )
    if not words:
        return []

    words.sort(key=lambda w: (round(w["top"] / line_y_tolerance), w["x0"]))
    lines: List[Tuple[float, str]] = []
    current_key = None
    current_top = 0.0
    current_words: List[str] = []

    for w in words:
        key = round(w["top"] / line_y_tolerance)
        if current_key is None or key == current_key:
            if current_key is None:
                current_top = w["top"]
            current_words.append(w["text"])
            current_key = key
        else:
            lines.append((current_top, " ".join(current_words)))
            current_words = [w["text"]]
            current_key = key
            current_top = w["top"]

    if current_words:
        lines.append((current_top, " ".join(current_words)))
    return lines


def _score_text(lines: List[Tuple[float, str]]) -> float:
    """Lower is better: penalize glued (18+ letter) tokens and runs of single letters."""
    tokens = re.findall(r"[A-Za-z]+", " ".join(text for _, text in lines))
    if not tokens:
        return 1e9
    long_glued = sum(1 for t in tokens if len(t) >= 18)
    excessive_singles = max(0, sum(1 for t in tokens if len(t) == 1) - 10)
    return long_glued * 10 + excessive_singles * 3


def _insert_paragraph_breaks(lines: List[Tuple[float, str]]) -> List[str]:
    """Turn (top, text) lines into text lines with "" where a paragraph gap sits."""
    if len(lines) < 3:
        return [text for _, text in lines]
    gaps = sorted(b[0] - a[0] for a, b in zip(lines, lines[1:]) if b[0] > a[0])
    if not gaps:
        return [text for _, text in lines]
    usual_gap = gaps[len(gaps) // 2]

    out = [lines[0][1]]
    for (prev_top, _), (top, text) in zip(lines, lines[1:]):
        if top - prev_top > usual_gap * PARAGRAPH_GAP_RATIO:
            out.append("")
        out.append(text)
    return out


def extract_pdf_text(pdf_bytes: bytes, x_tolerance_range: List[float] = None) -> str:
    """
    Deterministically extract text from a PDF profile export.

    Strategy:
    1) Per page, try a few x_tolerance values and keep the least glued result
    2) Group words into lines by vertical position
    3) Mark paragraph gaps with a blank line so entries can be chunked
    4) Separate pages with a blank line
    """
    if x_tolerance_range is None:
        x_tolerance_range = [1.5, 2, 2.5, 3]

    pages: List[str] = []
    with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
        for page in pdf.pages:
            candidates = []
            for xt in x_tolerance_range:
                lines = _words_to_lines(page, x_tolerance=xt)
                candidates.append((_score_text(lines), xt, lines))
            candidates.sort(key=lambda c: (c[0], c[1]))
            best_lines = candidates[0][2]
            if best_lines:
                pages.append("\n".join(_insert_paragraph_breaks(best_lines)))

    return "\n\n".join(pages)
