import io
import threading
import zipfile

import pytest
from fastapi.testclient import TestClient

from meeting_summarizer.app import create_app
from meeting_summarizer.config import AppConfig, EmailConfig, GeminiConfig
from meeting_summarizer.dependencies import build_services
from meeting_summarizer.exceptions import EmailDispatchError, SummarizationError
from meeting_summarizer.infrastructure.interfaces import (
    MailTransport,
    SummarizationService,
)


class FakeSummarizationService(SummarizationService):
    """Returns a canned summary or raises a canned error."""

    def __init__(self, text: str = "- A\n- B\n- C"):
        self.text = text
        self.error: SummarizationError | None = None
        self.calls: list[tuple[str, str]] = []

    async def summarize(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.text


class FakeMailTransport(MailTransport):
    """Records sends; optionally fails for chosen recipients."""

    def __init__(self):
        self.sent: list[tuple[str, str, str]] = []
        self.failures: dict[str, EmailDispatchError] = {}
        self._lock = threading.Lock()

    def send(self, recipient: str, subject: str, body_html: str) -> None:
        if recipient in self.failures:
            raise self.failures[recipient]
        with self._lock:
            self.sent.append((recipient, subject, body_html))


@pytest.fixture()
def config():
    return AppConfig(
        gemini=GeminiConfig(api_key="test-key"),
        email=EmailConfig(user="notes@example.com", app_password="app-pass"),
    )


@pytest.fixture()
def summarization_service():
    return FakeSummarizationService()


@pytest.fixture()
def mail_transport():
    return FakeMailTransport()


@pytest.fixture()
def app(config, summarization_service, mail_transport):
    services = build_services(config, summarization_service, mail_transport)
    return create_app(config, services)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


def make_pdf(text: str) -> bytes:
    """Builds a one-page PDF with a Helvetica text line."""
    content = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


def make_docx(*paragraphs: str) -> bytes:
    """Builds a minimal .docx package containing the given paragraphs."""
    body = "".join(f"<w:p><w:r><w:t>{p}</w:t></w:r></w:p>" for p in paragraphs)
    files = {
        "[Content_Types].xml": (
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
            '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
            '<Default Extension="rels" '
            'ContentType="application/vnd.openxmlformats-package.relationships+xml"/>'
            '<Default Extension="xml" ContentType="application/xml"/>'
            '<Override PartName="/word/document.xml" ContentType="application/'
            'vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>'
            "</Types>"
        ),
        "_rels/.rels": (
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
            '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
            '<Relationship Id="rId1" Type="http://schemas.openxmlformats.org/'
            'officeDocument/2006/relationships/officeDocument" Target="word/document.xml"/>'
            "</Relationships>"
        ),
        "word/_rels/document.xml.rels": (
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
            '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
            "</Relationships>"
        ),
        "word/document.xml": (
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
            '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
            f"<w:body>{body}</w:body></w:document>"
        ),
    }
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        for name, content in files.items():
            archive.writestr(name, content)
    return buffer.getvalue()
