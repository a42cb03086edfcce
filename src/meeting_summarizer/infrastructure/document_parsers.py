"""Third-party document parsers wrapped as bytes-to-text callables."""

import io

import mammoth
import pdfplumber


def parse_pdf(data: bytes) -> str:
    """Extracts the text layer of every page of a PDF, joined by newlines."""
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        return "\n".join((page.extract_text() or "") for page in pdf.pages)


def parse_word(data: bytes) -> str:
    """Extracts raw paragraph text from a Word document."""
    result = mammoth.extract_raw_text(io.BytesIO(data))
    return result.value
