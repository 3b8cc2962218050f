from .health import health_check
from .v1 import v1_router

__all__ = ["health_check", "v1_router"]
