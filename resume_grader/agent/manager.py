import logging
from typing import Any, Dict, Sequence

from .exceptions import ProviderError
from .providers import GeminiProvider, Provider
from .strategies import JSONWrapper, Strategy
from ..schemas.pydantic import ConversationTurn

logger = logging.getLogger(__name__)


class AgentManager:
    """
    Pairs a model provider with an output strategy. Only the Gemini provider
    and the JSON strategy exist.
    """

    def __init__(
        self,
        strategy: str | Strategy = "json",
        provider: Provider | None = None,
        **provider_opts: Any,
    ) -> None:
        self.strategy = self._resolve_strategy(strategy)
        self.provider = provider or GeminiProvider(opts=provider_opts)

    @staticmethod
    def _resolve_strategy(strategy: str | Strategy) -> Strategy:
        if isinstance(strategy, Strategy):
            return strategy
        if strategy == "json":
            return JSONWrapper()
        raise ProviderError(f"Unsupported strategy: {strategy}")

    async def run(self, turns: Sequence[ConversationTurn], **generation_args: Any) -> Dict[str, Any]:
        logger.debug(f"AgentManager running {len(turns)} turns with {type(self.provider).__name__}")
        return await self.strategy(turns, self.provider, **generation_args)
