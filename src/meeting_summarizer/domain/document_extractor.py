"""Core business logic for turning uploaded documents into transcripts."""

from collections.abc import Callable, Mapping

from meeting_summarizer.domain.models import (
    PDF_MIME_TYPE,
    SUPPORTED_MIME_TYPES,
    TEXT_MIME_TYPES,
    WORD_MIME_TYPES,
    UploadedFile,
)
from meeting_summarizer.exceptions import ExtractionError, UnsupportedFormatError
from meeting_summarizer.infrastructure.document_parsers import parse_pdf, parse_word
from meeting_summarizer.logging import setup_logging

logger = setup_logging()

Parser = Callable[[bytes], str]


def decode_text(data: bytes) -> str:
    """Decodes a plain text or markdown upload; invalid bytes become U+FFFD."""
    return data.decode("utf-8", errors="replace")


def default_parsers() -> dict[str, Parser]:
    """Returns the MIME type to parser table for every supported format."""
    parsers: dict[str, Parser] = {mime: decode_text for mime in TEXT_MIME_TYPES}
    parsers[PDF_MIME_TYPE] = parse_pdf
    parsers.update({mime: parse_word for mime in WORD_MIME_TYPES})
    return parsers


class DocumentExtractor:
    """Extracts plain text from uploaded documents."""

    def __init__(self, parsers: Mapping[str, Parser] | None = None):
        self._parsers = dict(parsers if parsers is not None else default_parsers())

    def extract(self, file: UploadedFile) -> str:
        """
        Extracts the full text of an uploaded document.

        Text and markdown are decoded as UTF-8, invalid bytes replaced. PDF
        and Word documents go through their parsers. The result is never
        truncated.

        Args:
            file: The accepted upload.

        Returns:
            The extracted transcript text.

        Raises:
            UnsupportedFormatError: If the MIME type has no parser.
            ExtractionError: If the parser fails.
        """
        mime_type = file.declared_mime_type
        parser = self._parsers.get(mime_type)
        if mime_type not in SUPPORTED_MIME_TYPES or parser is None:
            raise UnsupportedFormatError(mime_type)

        logger.info(
            "Processing file",
            extra={
                "file_name": file.original_name,
                "mime_type": mime_type,
                "size": file.size_bytes,
            },
        )

        try:
            text = parser(file.data)
        except Exception as e:
            logger.exception(
                "Document extraction failed",
                extra={"file_name": file.original_name, "mime_type": mime_type},
            )
            raise ExtractionError(file.original_name, e) from e

        logger.info(
            "File processed",
            extra={"file_name": file.original_name, "text_length": len(text)},
        )
        return text
