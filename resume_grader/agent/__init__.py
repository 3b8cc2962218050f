from .exceptions import AgentError, ProviderError, StrategyError
from .manager import AgentManager

__all__ = ["AgentManager", "AgentError", "ProviderError", "StrategyError"]
