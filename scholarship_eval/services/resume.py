"""
Resume text extraction for uploaded PDF, DOCX and plain-text files.
"""
import io
import logging
import zipfile
from pathlib import PurePath

from ..errors import ClientInputError

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF-"
ZIP_MAGIC = b"PK\x03\x04"
TEXT_SUFFIXES = {".txt", ".md", ""}


def extract_resume_text(filename: str | None, data: bytes) -> str:
    """Return the plain text of an uploaded resume.

    Raises ClientInputError for formats that cannot be read as text, so
    unreadable bytes never reach the model.
    """
    suffix = PurePath(filename or "").suffix.lower()

    if data.startswith(PDF_MAGIC) or suffix == ".pdf":
        text = _parse_pdf(data)
    elif suffix == ".docx" or (data.startswith(ZIP_MAGIC) and suffix not in TEXT_SUFFIXES):
        text = _parse_docx(data)
    elif suffix == ".doc":
        raise ClientInputError("Legacy .doc resumes are not supported; upload PDF, DOCX or plain text.")
    else:
        text = _decode_text(data)

    text = text.strip()
    if not text:
        raise ClientInputError("Resume contains no readable text.")

    logger.debug(f"Resume text extracted: {filename}, {len(text)} characters")
    return text


def _decode_text(data: bytes) -> str:
    try:
        return data.decode("utf-8").lstrip("\ufeff")
    except UnicodeDecodeError as e:
        logger.warning(f"Resume is not valid UTF-8 text: {e}")
        raise ClientInputError("Resume must be a PDF, DOCX or plain-text file.") from e


def _parse_pdf(data: bytes) -> str:
    import fitz  # pymupdf

    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except (RuntimeError, ValueError) as e:
        logger.warning(f"Failed to open PDF resume: {type(e).__name__}: {e}")
        raise ClientInputError("Resume PDF could not be read.") from e

    try:
        text = []
        for page in doc:
            text.append(page.get_text())
    except (RuntimeError, ValueError) as e:
        logger.warning(f"Failed to read PDF resume: {type(e).__name__}: {e}")
        raise ClientInputError("Resume PDF could not be read.") from e
    finally:
        doc.close()
    return "\n".join(text)


def _parse_docx(data: bytes) -> str:
    from docx import Document
    from docx.opc.exceptions import PackageNotFoundError

    try:
        doc = Document(io.BytesIO(data))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
        logger.warning(f"Failed to open DOCX resume: {type(e).__name__}: {e}")
        raise ClientInputError("Resume DOCX could not be read.") from e
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())
