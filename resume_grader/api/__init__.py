from .errors import validation_exception_handler
from .middleware import RequestIDMiddleware
from .router import health_check, v1_router

__all__ = ["RequestIDMiddleware", "health_check", "v1_router", "validation_exception_handler"]
