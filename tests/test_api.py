import pytest
from fastapi.testclient import TestClient

from resume_grader.api.router.v1 import grade as grade_module
from resume_grader.api.router.v1.grade import get_grading_service
from resume_grader.core import settings
from resume_grader.main import app
from resume_grader.schemas.pydantic import Grade, GradeResult
from resume_grader.services import (
    PUBLIC_CACHE_CONTROL,
    DocumentMissingError,
    DocumentParsingError,
    GradeValidationError,
    GradingError,
)


class StubGradingService:
    def __init__(self, outcome=None):
        self.outcome = outcome or GradeResult(grade=Grade.B, red_flags=["r"], yellow_flags=["y"])
        self.documents = []

    async def grade(self, document: bytes) -> GradeResult:
        self.documents.append(document)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


@pytest.fixture
def stub_service():
    return StubGradingService()


@pytest.fixture
def client(stub_service):
    app.dependency_overrides[get_grading_service] = lambda: stub_service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestUpload:

    def test_grades_upload(self, client, stub_service):
        response = client.post(
            "/api/v1/grade",
            files={"resume": ("cv.pdf", b"%PDF-1.4 resume", "application/pdf")},
        )

        assert response.status_code == 200
        assert response.json() == {"grade": "B", "red_flags": ["r"], "yellow_flags": ["y"]}
        assert stub_service.documents == [b"%PDF-1.4 resume"]
        assert response.headers["X-Request-ID"]

    def test_missing_file(self, client, stub_service):
        response = client.post("/api/v1/grade")
        assert response.status_code == 400
        assert "error" in response.json()
        assert stub_service.documents == []

    def test_empty_file(self, client):
        response = client.post(
            "/api/v1/grade", files={"resume": ("cv.pdf", b"", "application/pdf")}
        )
        assert response.status_code == 400

    def test_too_large(self, client, monkeypatch):
        monkeypatch.setattr(settings, "MAX_FILE_SIZE", 10)
        response = client.post(
            "/api/v1/grade", files={"resume": ("cv.pdf", b"x" * 11, "application/pdf")}
        )
        assert response.status_code == 413

    def test_form_field_instead_of_file(self, client, stub_service):
        response = client.post("/api/v1/grade", data={"resume": "not a file"})

        assert response.status_code == 400
        assert set(response.json()) == {"error"}
        assert "resume" in response.json()["error"]
        assert stub_service.documents == []

    def test_request_id_echoed(self, client):
        response = client.post(
            "/api/v1/grade",
            files={"resume": ("cv.pdf", b"%PDF", "application/pdf")},
            headers={"X-Request-ID": "abc-123"},
        )
        assert response.headers["X-Request-ID"] == "abc-123"


class TestErrors:

    @pytest.mark.parametrize("error,status_code,message", [
        (DocumentParsingError(), 400, "Resume file could not be read as a PDF"),
        (GradingError(), 500, "Could not complete the call to the artificial intelligence"),
        (GradeValidationError("bad grade"), 500, "bad grade"),
        (RuntimeError("secret internals"), 500, "Unexpected error"),
    ])
    def test_error_payload(self, client, stub_service, error, status_code, message):
        stub_service.outcome = error
        response = client.post(
            "/api/v1/grade", files={"resume": ("cv.pdf", b"%PDF", "application/pdf")}
        )
        assert response.status_code == status_code
        assert response.json() == {"error": message}


class TestFeedback:

    def test_raw_body(self, client, stub_service):
        response = client.post(
            "/api/v1/feedback",
            content=b"%PDF-raw",
            headers={"Content-Type": "application/pdf"},
        )
        assert response.status_code == 200
        assert stub_service.documents == [b"%PDF-raw"]

    def test_empty_body(self, client):
        response = client.post("/api/v1/feedback", content=b"")
        assert response.status_code == 400


class TestByUrl:

    @pytest.fixture
    def public_dir(self, tmp_path, monkeypatch):
        (tmp_path / "public").mkdir()
        (tmp_path / "public" / "s_resume.pdf").write_bytes(b"%PDF-public")
        monkeypatch.setattr(settings, "PUBLIC_DIR", str(tmp_path))
        return tmp_path

    @pytest.mark.parametrize("path", ["/api/v1/grade", "/api/v1/feedback"])
    def test_missing_url(self, client, path):
        response = client.get(path)
        assert response.status_code == 400
        assert response.json() == {"error": "You must provide a PDF file or URL"}

    @pytest.mark.parametrize("path", ["/api/v1/grade", "/api/v1/feedback"])
    def test_public_resume(self, client, stub_service, public_dir, path):
        response = client.get(path, params={"url": "public/s_resume.pdf"})

        assert response.status_code == 200
        assert stub_service.documents == [b"%PDF-public"]
        assert response.headers["Content-Location"] == "public/s_resume.pdf"
        assert response.headers["Cache-Control"] == PUBLIC_CACHE_CONTROL

    def test_public_resume_missing(self, client, public_dir):
        response = client.get("/api/v1/grade", params={"url": "public/nope.pdf"})
        assert response.status_code == 400

    def test_public_path_escape_rejected(self, client, stub_service, public_dir):
        response = client.get("/api/v1/grade", params={"url": "public/../../etc/passwd"})
        assert response.status_code == 400
        assert stub_service.documents == []

    def test_unsupported_scheme(self, client):
        response = client.get("/api/v1/grade", params={"url": "file:///etc/passwd"})
        assert response.status_code == 400


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestRemoteUrl:

    @pytest.mark.parametrize("path", ["/api/v1/grade", "/api/v1/feedback"])
    def test_remote_resume(self, client, stub_service, monkeypatch, path):
        downloads = []

        async def fake_fetch(url, max_size, timeout_seconds=60):
            downloads.append(url)
            return b"%PDF-remote"

        monkeypatch.setattr(grade_module, "fetch_remote_document", fake_fetch)
        response = client.get(path, params={"url": "https://example.com/cv.pdf"})

        assert response.status_code == 200
        assert downloads == ["https://example.com/cv.pdf"]
        assert stub_service.documents == [b"%PDF-remote"]
        assert "Content-Location" not in response.headers

    def test_download_failure(self, client, monkeypatch):
        async def fake_fetch(url, max_size, timeout_seconds=60):
            raise DocumentMissingError("Could not download resume from https://example.com/cv.pdf: HTTP 404")

        monkeypatch.setattr(grade_module, "fetch_remote_document", fake_fetch)
        response = client.get("/api/v1/grade", params={"url": "https://example.com/cv.pdf"})

        assert response.status_code == 400
        assert response.json() == {
            "error": "Could not download resume from https://example.com/cv.pdf: HTTP 404"
        }
