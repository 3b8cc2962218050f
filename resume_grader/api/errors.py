import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests with the same ``{"error": ...}`` payload as grading failures."""
    details = "; ".join(
        f"{' -> '.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    request_id = getattr(request.state, "request_id", None)
    logger.warning(f"[{request_id}] Invalid request: {details}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"Invalid request: {details}"},
    )
