import pytest
from conftest import make_docx, make_pdf
from pydantic import ValidationError

from meeting_summarizer.domain import DocumentExtractor, UploadedFile
from meeting_summarizer.domain.models import MAX_UPLOAD_BYTES
from meeting_summarizer.exceptions import (
    ExtractionError,
    FileTooLargeError,
    UnsupportedFormatError,
)

DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _upload(data: bytes, mime_type: str, name: str = "notes") -> UploadedFile:
    return UploadedFile.accept(data, mime_type, name)


@pytest.mark.parametrize("mime_type", ["text/plain", "text/markdown"])
def test_text_is_decoded_verbatim(mime_type):
    content = "# Standup\n\n- Ana: fixed the build ✅\r\n"
    text = DocumentExtractor().extract(_upload(content.encode("utf-8"), mime_type))

    assert text == content


def test_invalid_utf8_bytes_are_replaced():
    data = "Caf\xe9 budget".encode("latin-1")

    text = DocumentExtractor().extract(_upload(data, "text/plain"))

    assert text == "Caf\ufffd budget"


def test_pdf_text_is_extracted():
    text = DocumentExtractor().extract(
        _upload(make_pdf("Q3 budget approved"), "application/pdf", "minutes.pdf")
    )

    assert "Q3 budget approved" in text


def test_docx_text_is_extracted():
    data = make_docx("Action item: ship the release", "Owner: Priya")
    text = DocumentExtractor().extract(_upload(data, DOCX, "minutes.docx"))

    assert "Action item: ship the release" in text
    assert "Owner: Priya" in text


def test_parser_failure_is_wrapped():
    with pytest.raises(ExtractionError) as exc_info:
        DocumentExtractor().extract(
            _upload(b"not a pdf at all", "application/pdf", "broken.pdf")
        )

    assert str(exc_info.value).startswith("Failed to process file: ")
    assert exc_info.value.file_name == "broken.pdf"
    assert exc_info.value.cause is not None


def test_unsupported_type_never_invokes_a_parser():
    calls = []

    def parser(data: bytes) -> str:
        calls.append(data)
        return "parsed"

    extractor = DocumentExtractor({"image/png": parser, "text/plain": parser})
    file = UploadedFile.model_construct(
        data=b"\x89PNG",
        declared_mime_type="image/png",
        original_name="scan.png",
        size_bytes=4,
    )

    with pytest.raises(UnsupportedFormatError):
        extractor.extract(file)
    assert calls == []


def test_accept_rejects_unsupported_mime_type():
    with pytest.raises(UnsupportedFormatError) as exc_info:
        UploadedFile.accept(b"x", "image/jpeg", "photo.jpg")

    assert exc_info.value.mime_type == "image/jpeg"


def test_accept_rejects_missing_mime_type():
    with pytest.raises(UnsupportedFormatError):
        UploadedFile.accept(b"x", None, "mystery")


def test_accept_rejects_oversized_file():
    with pytest.raises(FileTooLargeError):
        UploadedFile.accept(b"a" * (MAX_UPLOAD_BYTES + 1), "text/plain", "big.txt")


def test_direct_construction_enforces_invariants():
    with pytest.raises(ValidationError):
        UploadedFile(
            data=b"x",
            declared_mime_type="application/zip",
            original_name="a.zip",
            size_bytes=1,
        )
