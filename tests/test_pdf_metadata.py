import pytest

from resume_grader.services import DocumentParsingError, extract_author

from .conftest import make_pdf


def test_author_read_from_metadata():
    assert extract_author(make_pdf(author="silver")) == "silver"


def test_no_author():
    assert extract_author(make_pdf()) is None


@pytest.mark.parametrize("document", [b"not a pdf", b"%PDF-1.4 truncated"])
def test_unreadable_document(document):
    with pytest.raises(DocumentParsingError):
        extract_author(document)
