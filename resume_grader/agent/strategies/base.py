from abc import ABC, abstractmethod
from typing import Any, Sequence

from ..providers.base import Provider
from ...schemas.pydantic import ConversationTurn


class Strategy(ABC):
    @abstractmethod
    async def __call__(
        self, turns: Sequence[ConversationTurn], provider: Provider, **generation_args: Any
    ) -> Any:
        """
        Run the provider and shape its reply.
        """
