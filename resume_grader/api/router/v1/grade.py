import logging
import traceback
from uuid import uuid4

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile, status
from fastapi.responses import JSONResponse

from resume_grader.core import settings
from resume_grader.services import (
    PUBLIC_CACHE_CONTROL,
    DocumentMissingError,
    DocumentParsingError,
    DocumentTooLargeError,
    GraderError,
    GradingService,
    check_document,
    fetch_remote_document,
    is_public_url,
    read_public_document,
)

grade_router = APIRouter()
logger = logging.getLogger(__name__)

CLIENT_ERRORS = {
    DocumentMissingError: status.HTTP_400_BAD_REQUEST,
    DocumentParsingError: status.HTTP_400_BAD_REQUEST,
    DocumentTooLargeError: 413,
}


def get_grading_service(request: Request) -> GradingService:
    return request.app.state.grading_service


def _error_response(request_id: str, e: Exception) -> JSONResponse:
    """Map a grading failure onto the ``{"error": ...}`` payload."""
    headers = {"X-Request-ID": request_id}
    for error_type, status_code in CLIENT_ERRORS.items():
        if isinstance(e, error_type):
            logger.warning(f"[{request_id}] Rejected resume: {e}")
            return JSONResponse(status_code=status_code, content={"error": str(e)}, headers=headers)

    if isinstance(e, GraderError):
        logger.error(f"[{request_id}] Grading failed: {e}")
        message = str(e)
    else:
        logger.error(f"[{request_id}] Error: {e} - traceback: {traceback.format_exc()}")
        message = "Unexpected error"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": message},
        headers=headers,
    )


async def _grade(request_id: str, service: GradingService, document: bytes, headers: dict | None = None) -> JSONResponse:
    result = await service.grade(document)
    logger.info(
        f"[{request_id}] Resume graded {result.grade.value} with "
        f"{len(result.red_flags)} red / {len(result.yellow_flags)} yellow flags"
    )
    return JSONResponse(
        content=result.model_dump(mode="json"),
        status_code=status.HTTP_200_OK,
        headers={"X-Request-ID": request_id, **(headers or {})},
    )


async def _grade_from_url(request_id: str, service: GradingService, url: str | None) -> JSONResponse:
    if not url:
        raise DocumentMissingError("You must provide a PDF file or URL")

    if is_public_url(url):
        document = check_document(read_public_document(url, settings.PUBLIC_DIR), settings.MAX_FILE_SIZE)
        headers = {"Content-Location": url, "Cache-Control": PUBLIC_CACHE_CONTROL}
    else:
        document = await fetch_remote_document(url, settings.MAX_FILE_SIZE, settings.LLM_TIMEOUT_SECONDS)
        headers = None

    return await _grade(request_id, service, document, headers)


@grade_router.post(
    "/grade",
    summary="Upload a resume PDF and get a grade with red and yellow flags",
)
async def grade_upload(
    request: Request,
    resume: UploadFile | None = File(None),
    service: GradingService = Depends(get_grading_service),
):
    request_id = getattr(request.state, "request_id", str(uuid4()))
    try:
        if resume is None:
            raise DocumentMissingError("No resume file uploaded")
        logger.info(f"[{request_id}] Received resume upload: {resume.filename}")

        file_size = getattr(resume, "size", None)
        if file_size and file_size > settings.MAX_FILE_SIZE:
            raise DocumentTooLargeError(
                f"File size exceeds maximum allowed size of {settings.MAX_FILE_SIZE / (1024 * 1024):.1f}MB."
            )

        document = check_document(await resume.read(), settings.MAX_FILE_SIZE)
        return await _grade(request_id, service, document)
    except Exception as e:
        return _error_response(request_id, e)


@grade_router.get(
    "/grade",
    summary="Grade a resume referenced by URL or bundled public path",
)
async def grade_by_url(
    request: Request,
    url: str | None = Query(None, description="https URL of a PDF, or a path starting with 'public'"),
    service: GradingService = Depends(get_grading_service),
):
    request_id = getattr(request.state, "request_id", str(uuid4()))
    logger.info(f"[{request_id}] Grading resume from url: {url}")
    try:
        return await _grade_from_url(request_id, service, url)
    except Exception as e:
        return _error_response(request_id, e)


@grade_router.post(
    "/feedback",
    summary="Grade a resume PDF sent as the raw request body",
)
async def feedback_raw(
    request: Request,
    service: GradingService = Depends(get_grading_service),
):
    request_id = getattr(request.state, "request_id", str(uuid4()))
    try:
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > settings.MAX_FILE_SIZE:
            raise DocumentTooLargeError(
                f"File size exceeds maximum allowed size of {settings.MAX_FILE_SIZE / (1024 * 1024):.1f}MB."
            )

        document = check_document(await request.body(), settings.MAX_FILE_SIZE)
        logger.info(f"[{request_id}] Received raw resume body ({len(document)} bytes)")
        return await _grade(request_id, service, document)
    except Exception as e:
        return _error_response(request_id, e)


@grade_router.get(
    "/feedback",
    summary="Grade a resume referenced by URL or bundled public path",
)
async def feedback_by_url(
    request: Request,
    url: str | None = Query(None, description="https URL of a PDF, or a path starting with 'public'"),
    service: GradingService = Depends(get_grading_service),
):
    request_id = getattr(request.state, "request_id", str(uuid4()))
    try:
        return await _grade_from_url(request_id, service, url)
    except Exception as e:
        return _error_response(request_id, e)
