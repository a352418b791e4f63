from io import BytesIO

from docx import Document


def extract_docx_text(docx_bytes: bytes) -> str:
    """
    Deterministically extract paragraph text from a DOCX, one paragraph per line.
    Empty paragraphs are kept as blank lines; they separate entries.
    """
    doc = Document(BytesIO(docx_bytes))
    return "\n".join((p.text or "").strip() for p in doc.paragraphs)
