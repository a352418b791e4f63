"""
Configuration settings for the profile parser service.

Values come from the environment (or a local .env file). Defaults suit a
single-instance deployment behind the profile upload form.
"""

from dotenv import load_dotenv
load_dotenv()  # must run before os.getenv(...)
import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Upstream size cap on uploads; the parser itself does no input capping
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))

# "blank_lines": one experience/education entry per paragraph
# "single": whole section becomes one entry (behaviour of the first importer)
ENTRY_CHUNKING = os.getenv("ENTRY_CHUNKING", "blank_lines").lower()
if ENTRY_CHUNKING not in {"blank_lines", "single"}:
    raise ValueError(f"ENTRY_CHUNKING must be 'blank_lines' or 'single', got {ENTRY_CHUNKING!r}")


def split_entries_enabled() -> bool:
    return ENTRY_CHUNKING == "blank_lines"
