import logging
from io import BytesIO

from docx import Document

from resume_chat.core.exceptions import DocumentExtractionError

logger = logging.getLogger(__name__)


def extract_docx_text(docx_bytes: bytes) -> str:
    """
    Extract the raw text of a DOCX, one paragraph per line.

    Blank paragraphs are kept as empty lines; the resume parser drops them
    during line normalization. Any failure to open the package is raised as
    DocumentExtractionError carrying the underlying message.
    """
    try:
        doc = Document(BytesIO(docx_bytes))
    except Exception as exc:
        raise DocumentExtractionError(str(exc) or exc.__class__.__name__) from exc

    paragraphs = [p.text or "" for p in doc.paragraphs]
    logger.debug(f"Extracted {len(paragraphs)} paragraphs from DOCX")
    return "\n".join(paragraphs)
