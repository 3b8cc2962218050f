import io
import logging
from typing import Optional

from PyPDF2 import PdfReader

from .exceptions import DocumentParsingError

logger = logging.getLogger(__name__)


def extract_author(document: bytes) -> Optional[str]:
    """
    Return the Author entry of the PDF document information dictionary.

    Raises DocumentParsingError if the bytes are not a readable PDF.
    """
    try:
        reader = PdfReader(io.BytesIO(document))
        metadata = reader.metadata
    except Exception as e:
        logger.warning(f"PDF metadata extraction failed: {e}")
        raise DocumentParsingError(f"Resume file could not be read as a PDF: {e}") from e

    if metadata is None:
        return None

    author = metadata.author
    return str(author) if author else None
