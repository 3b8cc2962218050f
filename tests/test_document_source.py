import pytest
from aiohttp import test_utils, web

from resume_grader.services import (
    DocumentMissingError,
    check_document,
    fetch_remote_document,
    is_public_url,
    read_public_document,
)
from resume_grader.services.exceptions import DocumentTooLargeError


def test_check_document():
    assert check_document(b"%PDF", 10) == b"%PDF"
    with pytest.raises(DocumentMissingError):
        check_document(b"", 10)
    with pytest.raises(DocumentMissingError):
        check_document(None, 10)
    with pytest.raises(DocumentTooLargeError):
        check_document(b"x" * 11, 10)


@pytest.mark.parametrize("url,expected", [
    ("public/s_resume.pdf", True),
    ("https://example.com/cv.pdf", False),
])
def test_is_public_url(url, expected):
    assert is_public_url(url) is expected


def test_read_public_document(tmp_path):
    (tmp_path / "public").mkdir()
    (tmp_path / "public" / "a_resume.pdf").write_bytes(b"%PDF-a")
    assert read_public_document("public/a_resume.pdf", tmp_path) == b"%PDF-a"


def test_read_public_document_outside_dir(tmp_path):
    (tmp_path / "secret.txt").write_text("x")
    base = tmp_path / "root"
    base.mkdir()
    with pytest.raises(DocumentMissingError):
        read_public_document("public/../../secret.txt", base)


class TestFetchRemoteDocument:
    """Downloads from a local aiohttp server."""

    @pytest.fixture
    async def resume_server(self):
        async def resume(request):
            return web.Response(body=b"%PDF-remote", content_type="application/pdf")

        async def missing(request):
            return web.Response(status=404, text="not found")

        async def large(request):
            return web.Response(body=b"x" * 2048, content_type="application/pdf")

        async def streamed(request):
            response = web.StreamResponse()
            response.enable_chunked_encoding()
            await response.prepare(request)
            for _ in range(4):
                await response.write(b"x" * 512)
            await response.write_eof()
            return response

        async def empty(request):
            return web.Response(body=b"", content_type="application/pdf")

        app = web.Application()
        app.router.add_get("/cv.pdf", resume)
        app.router.add_get("/missing.pdf", missing)
        app.router.add_get("/large.pdf", large)
        app.router.add_get("/streamed.pdf", streamed)
        app.router.add_get("/empty.pdf", empty)
        server = test_utils.TestServer(app)
        await server.start_server()
        yield server
        await server.close()

    async def test_download(self, resume_server):
        url = str(resume_server.make_url("/cv.pdf"))
        assert await fetch_remote_document(url, max_size=1024) == b"%PDF-remote"

    async def test_non_200(self, resume_server):
        url = str(resume_server.make_url("/missing.pdf"))
        with pytest.raises(DocumentMissingError, match="404"):
            await fetch_remote_document(url, max_size=1024)

    async def test_too_large_by_content_length(self, resume_server):
        url = str(resume_server.make_url("/large.pdf"))
        with pytest.raises(DocumentTooLargeError):
            await fetch_remote_document(url, max_size=1024)

    async def test_too_large_while_streaming(self, resume_server):
        url = str(resume_server.make_url("/streamed.pdf"))
        with pytest.raises(DocumentTooLargeError):
            await fetch_remote_document(url, max_size=1024)

    async def test_streamed_within_limit(self, resume_server):
        url = str(resume_server.make_url("/streamed.pdf"))
        assert await fetch_remote_document(url, max_size=4096) == b"x" * 2048

    async def test_empty_body(self, resume_server):
        url = str(resume_server.make_url("/empty.pdf"))
        with pytest.raises(DocumentMissingError):
            await fetch_remote_document(url, max_size=1024)

    async def test_connection_failure(self, resume_server):
        url = str(resume_server.make_url("/cv.pdf"))
        await resume_server.close()
        with pytest.raises(DocumentMissingError):
            await fetch_remote_document(url, max_size=1024)
