from .base import Strategy
from .wrapper import JSONWrapper

__all__ = ["Strategy", "JSONWrapper"]
