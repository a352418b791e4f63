from fastapi.testclient import TestClient

from profile_parser import config
from profile_parser.main import app

client = TestClient(app)

EXPORT = b"""Jane Doe
Senior Engineer
San Francisco, CA
jane@example.com
www.linkedin.com/in/janedoe

About
Builds reliable systems.

Skills
Python, Go, Rust

Experience
Senior Engineer
Acme Corp
2021 - Present
Led platform rewrite.

Engineer
Initech
2018 - 2021
"""


def test_health():
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/").json()["service"] == "profile-parser"


def test_parse_txt_returns_camel_case_profile():
    files = {"file": ("profile.txt", EXPORT, "text/plain")}
    r = client.post("/parse/linkedin", files=files)
    assert r.status_code == 200
    data = r.json()

    assert data["name"] == "Jane Doe"
    assert data["firstName"] == "Jane"
    assert data["lastName"] == "Doe"
    assert data["email"] == "jane@example.com"
    assert data["linkedinUrl"] == "www.linkedin.com/in/janedoe"
    assert data["skills"] == ["Python", "Go", "Rust"]
    assert [e["organization"] for e in data["experience"]] == ["Acme Corp", "Initech"]
    assert data["education"] == []
    assert data["confidence"] == 4


def test_single_chunk_setting(monkeypatch):
    monkeypatch.setattr(config, "ENTRY_CHUNKING", "single")
    files = {"file": ("profile.txt", EXPORT, "text/plain")}
    data = client.post("/parse/linkedin", files=files).json()

    assert len(data["experience"]) == 1
    assert data["experience"][0]["organization"] == "Acme Corp"


def test_markdown_by_extension():
    files = {"file": ("profile.md", EXPORT, "application/octet-stream")}
    r = client.post("/parse/linkedin", files=files)
    assert r.status_code == 200
    assert r.json()["firstName"] == "Jane"


def test_empty_upload_rejected():
    files = {"file": ("profile.txt", b"", "text/plain")}
    r = client.post("/parse/linkedin", files=files)
    assert r.status_code == 400


def test_whitespace_only_upload_has_no_text():
    files = {"file": ("profile.txt", b"  \n\n  ", "text/plain")}
    r = client.post("/parse/linkedin", files=files)
    assert r.status_code == 422


def test_unsupported_type_rejected():
    files = {"file": ("avatar.png", b"\x89PNG\r\n", "image/png")}
    r = client.post("/parse/linkedin", files=files)
    assert r.status_code == 415


def test_oversized_upload_rejected(monkeypatch):
    monkeypatch.setattr(config, "MAX_UPLOAD_BYTES", 16)
    files = {"file": ("profile.txt", EXPORT, "text/plain")}
    r = client.post("/parse/linkedin", files=files)
    assert r.status_code == 413


def test_corrupt_pdf_is_unprocessable():
    files = {"file": ("profile.pdf", b"not really a pdf", "application/pdf")}
    r = client.post("/parse/linkedin", files=files)
    assert r.status_code == 422
