# ---------------------------
# Resume document -> plain text
# ---------------------------
from io import BytesIO
from pathlib import Path
import re
from typing import List

SUPPORTED_FORMATS = {
    ".pdf": "pdf",
    ".docx": "docx",
}

# Magic bytes: PDF header, DOCX is a zip container
_MAGIC = {
    "pdf": b"%PDF",
    "docx": b"PK\x03\x04",
}


class UnsupportedFormatError(ValueError):
    """Upload extension is not one of the supported resume formats."""


class ResumeParseError(ValueError):
    """Document claims a supported format but its content cannot be read."""


def detect_format(filename: str) -> str:
    ext = Path(filename or "").suffix.lower()
    fmt = SUPPORTED_FORMATS.get(ext)
    if fmt is None:
        raise UnsupportedFormatError("Only PDF and DOCX files are allowed")
    return fmt


# ---------------------------
# Normalization
# ---------------------------
def normalize_text(text: str) -> str:
    text = text.replace("\r", "\n")
    text = re.sub(r"\n{3,}", "\n\n", text)
    text = re.sub(r"[ \t]{2,}", " ", text)
    # fix hyphenated line breaks: "engi-\nneer" -> "engineer"
    text = re.sub(r"(\w)-\n(\w)", r"\1\2", text)
    return text.strip()


# ---------------------------
# Format readers
# ---------------------------
def extract_text_from_pdf(content: bytes) -> str:
    import pdfplumber

    pages: List[str] = []
    with pdfplumber.open(BytesIO(content)) as pdf:
        for page in pdf.pages:
            pages.append(page.extract_text() or "")
    return "\n".join(pages)


def extract_text_from_docx(content: bytes) -> str:
    from docx import Document

    document = Document(BytesIO(content))
    parts = [p.text for p in document.paragraphs]
    # skills are often laid out in tables
    for table in document.tables:
        for row in table.rows:
            cells = [c.text.strip() for c in row.cells if c.text.strip()]
            if cells:
                parts.append(" | ".join(cells))
    return "\n".join(parts)


_READERS = {
    "pdf": extract_text_from_pdf,
    "docx": extract_text_from_docx,
}


def extract_text(content: bytes, filename: str) -> str:
    """
    Return normalized plain text for an uploaded resume.

    Raises UnsupportedFormatError for unknown extensions and ResumeParseError when
    the bytes do not look like the declared format or the reader fails.
    """
    fmt = detect_format(filename)
    if not content or not content.startswith(_MAGIC[fmt]):
        raise ResumeParseError(f"Invalid {fmt.upper()} file content")
    try:
        raw = _READERS[fmt](content)
    except Exception as e:
        raise ResumeParseError(f"Failed to parse {fmt.upper()} resume: {e}") from e
    return normalize_text(raw)
