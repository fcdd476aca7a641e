import json
from io import BytesIO

import pytest
from docx import Document
from fastapi.testclient import TestClient

from app.main import app
from app.services import container


def make_pdf(text: str) -> bytes:
    """Build a one-page PDF with a Helvetica text layer."""
    stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_at)
    return bytes(out)


def make_docx(*paragraphs: str) -> bytes:
    doc = Document()
    for paragraph in paragraphs:
        doc.add_paragraph(paragraph)
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


ANALYSIS_JSON = {
    "analysis": {
        "name": "Jane Doe",
        "currentRole": "Software Engineer",
        "careerLevel": "Mid",
        "skills": ["React", "JavaScript"],
        "experience": "5 years building React applications.",
        "education": "Not specified",
    },
    "questions": [
        "Are you looking to continue in your current career path, or are you interested in pivoting?",
        "Do you prefer remote, hybrid or in-person work?",
        "What kind of company do you want to join?",
        "Which industries interest you?",
        "What matters most to you in your next role?",
    ],
}


class FakeCompletion:
    """Stands in for GeminiService.complete and records the prompts it was given."""

    def __init__(self, text: str):
        self.text = text
        self.prompts = []

    async def __call__(self, prompt):
        self.prompts.append(prompt)
        return self.text, None


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(container.config.gemini_llm, "api_key", "test-key")


@pytest.fixture
def fake_gemini(monkeypatch, api_key):
    """Replace the Gemini call with a canned JSON completion; set `.text` to change it."""
    fake = FakeCompletion(json.dumps(ANALYSIS_JSON))
    monkeypatch.setattr(container.gemini_service, "complete", fake)
    return fake
