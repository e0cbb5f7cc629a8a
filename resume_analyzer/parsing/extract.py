from __future__ import annotations

import logging
from io import BytesIO
from typing import Callable

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from resume_analyzer.schemas.analysis import ExtractTextResponse

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]

TEXT_EXTENSIONS = {"txt", "md"}
PDF_EXTENSIONS = {"pdf"}
ALLOWED_EXTENSIONS = TEXT_EXTENSIONS | PDF_EXTENSIONS


def file_extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def _decode_text(content: bytes) -> tuple[str, str]:
    for encoding in ("utf-8", "utf-16", "latin-1"):
        try:
            return content.decode(encoding), encoding
        except UnicodeDecodeError:
            continue
    return content.decode("utf-8", errors="replace"), "utf-8"


def _extract_pdf(content: bytes, on_progress: ProgressCallback | None) -> tuple[str, int, list[str]]:
    warnings: list[str] = []
    try:
        reader = PdfReader(BytesIO(content))
        total = len(reader.pages)
        page_chunks: list[str] = []
        for index, page in enumerate(reader.pages, start=1):
            page_chunks.append((page.extract_text() or "").strip())
            if on_progress is not None:
                on_progress(index, total)
    except (PyPdfError, ValueError, OSError) as exc:
        raise ValueError("Unable to extract text from this PDF file.") from exc

    text = "\n".join(chunk for chunk in page_chunks if chunk)
    if not text:
        warnings.append("No extractable text found in PDF.")
    return text, total, warnings


def extract_text(
    filename: str,
    content: bytes,
    on_progress: ProgressCallback | None = None,
) -> ExtractTextResponse:
    """Turn an uploaded resume (PDF or plain text) into plain text.

    `on_progress(page, total)` is called after each PDF page.
    """
    ext = file_extension(filename)
    if ext in TEXT_EXTENSIONS:
        text, encoding = _decode_text(content)
        logger.debug("text_extracted file=%s encoding=%s chars=%s", filename, encoding, len(text))
        return ExtractTextResponse(text=text, source_type="text", chars=len(text))

    if ext in PDF_EXTENSIONS:
        text, pages, warnings = _extract_pdf(content, on_progress)
        logger.debug("pdf_extracted file=%s pages=%s chars=%s", filename, pages, len(text))
        return ExtractTextResponse(
            text=text,
            source_type="pdf",
            pages=pages,
            chars=len(text),
            warnings=warnings,
        )

    raise ValueError(
        f"Unsupported file type '.{ext}'. Allowed: {', '.join(sorted(ALLOWED_EXTENSIONS))}."
    )
