import io
import json
from typing import Any, Dict, List

import pytest
from PyPDF2 import PdfWriter

from resume_grader.agent.providers.base import Provider
from resume_grader.prompt import TRAINING_FILES, expected_results
from resume_grader.schemas.pydantic import TrainingExample

TEMPLATE_URL = "https://example.com/cv-template"


def make_pdf(author: str | None = None) -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    if author is not None:
        writer.add_metadata({"/Author": author})
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class StubProvider(Provider):
    """Records the conversation it receives and replies with canned text."""

    def __init__(self, reply: Any):
        self.reply = reply
        self.calls: List[Dict[str, Any]] = []

    async def __call__(self, turns, **generation_args):
        self.calls.append({"turns": list(turns), **generation_args})
        if isinstance(self.reply, Exception):
            raise self.reply
        if isinstance(self.reply, dict):
            return {"text": json.dumps(self.reply)}
        return {"text": self.reply}


@pytest.fixture
def training_set():
    results = expected_results(TEMPLATE_URL)
    return tuple(
        TrainingExample(document=f"%PDF-{grade.value}".encode(), expected_result=results[grade])
        for grade, _ in TRAINING_FILES
    )


@pytest.fixture
def pdf_bytes():
    return make_pdf()
