from .document_source import (
    PUBLIC_CACHE_CONTROL,
    check_document,
    fetch_remote_document,
    is_public_url,
    read_public_document,
)
from .exceptions import (
    DocumentMissingError,
    DocumentParsingError,
    DocumentTooLargeError,
    GraderError,
    GradeValidationError,
    GradingError,
    TrainingDataError,
)
from .grading_service import GradingService
from .pdf_metadata import extract_author
from .sanitizer import is_gmail_flag, sanitize_grade
from .training_data import TrainingSet, load_training_set

__all__ = [
    "PUBLIC_CACHE_CONTROL",
    "DocumentMissingError",
    "DocumentParsingError",
    "DocumentTooLargeError",
    "GraderError",
    "GradeValidationError",
    "GradingError",
    "GradingService",
    "TrainingDataError",
    "TrainingSet",
    "check_document",
    "extract_author",
    "fetch_remote_document",
    "is_gmail_flag",
    "is_public_url",
    "load_training_set",
    "read_public_document",
    "sanitize_grade",
]
