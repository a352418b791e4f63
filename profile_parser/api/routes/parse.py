import logging

from fastapi import APIRouter, UploadFile, File, HTTPException

from profile_parser import config
from profile_parser.core.schemas import ParsedProfile
from profile_parser.core.linkedin_parser import parse
from profile_parser.core.docx_extractor import extract_docx_text
from profile_parser.core.pdf_extractor import extract_pdf_text

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _upload_to_text(raw: bytes, filename: str, content_type: str) -> str:
    # DOCX
    if filename.endswith(".docx") or content_type == DOCX_CONTENT_TYPE:
        try:
            return extract_docx_text(raw)
        except Exception as exc:
            logger.warning("DOCX extraction failed for %r: %s", filename, exc)
            raise HTTPException(status_code=422, detail="DOCX file could not be read.") from exc

    # PDF
    if filename.endswith(".pdf") or content_type == "application/pdf":
        try:
            return extract_pdf_text(raw)
        except Exception as exc:
            logger.warning("PDF extraction failed for %r: %s", filename, exc)
            raise HTTPException(status_code=422, detail="PDF file could not be read.") from exc

    # Text
    if content_type in {"text/plain", "text/markdown"} or filename.endswith((".txt", ".md")):
        return raw.decode("utf-8", errors="replace")

    raise HTTPException(status_code=415, detail=f"Unsupported content type: {content_type or filename}")


@router.post(
    "/parse/linkedin",
    response_model=ParsedProfile,
    summary="Parse LinkedIn Profile Export",
    description="Extract profile fields from a LinkedIn 'Save to PDF' export (PDF, DOCX, or TXT). The confidence field (0-4) counts how many of name, headline, summary and skills were found.",
    responses={
        200: {
            "description": "Successfully parsed profile",
            "content": {
                "application/json": {
                    "example": {
                        "name": "Jane Doe",
                        "firstName": "Jane",
                        "lastName": "Doe",
                        "headline": "Senior Engineer",
                        "location": "San Francisco, CA",
                        "email": "jane@example.com",
                        "phone": "",
                        "linkedinUrl": "www.linkedin.com/in/janedoe",
                        "websites": [],
                        "summary": "Builds reliable systems.",
                        "skills": ["Python", "Go", "Rust"],
                        "experience": [
                            {
                                "role": "Senior Engineer",
                                "organization": "Acme Corp",
                                "duration": "2021 - Present",
                                "summary": "Led platform rewrite."
                            }
                        ],
                        "education": [],
                        "confidence": 4
                    }
                }
            }
        },
        400: {"description": "Empty file uploaded"},
        413: {"description": "File larger than MAX_UPLOAD_BYTES"},
        415: {"description": "Unsupported file format"},
        422: {"description": "File has no extractable text"}
    }
)
async def parse_linkedin_export(
    file: UploadFile = File(..., description="LinkedIn profile export (PDF, DOCX, or TXT format)")
):
    """
    Parse an exported LinkedIn profile and return the fields used to pre-fill
    a user profile.

    **Supported formats:**
    - PDF (.pdf) - Text-layer extraction only, OCR not supported
    - DOCX (.docx)
    - TXT (.txt, .md)
    """
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")
    if len(raw) > config.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"File exceeds {config.MAX_UPLOAD_BYTES} bytes.")

    filename = (file.filename or "").lower()
    content_type = (file.content_type or "").lower()

    text = _upload_to_text(raw, filename, content_type)
    if not text.strip():
        raise HTTPException(
            status_code=422,
            detail="File appears to have no extractable text. OCR is not supported."
        )

    profile = parse(text, split_entries=config.split_entries_enabled())
    logger.info("Parsed %s upload: confidence=%d", filename or content_type, profile.confidence)
    return profile
