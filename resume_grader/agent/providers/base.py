from abc import ABC, abstractmethod
from typing import Any, Dict, Sequence

from ...schemas.pydantic import ConversationTurn


class Provider(ABC):
    """
    Abstract base class for model providers.
    """

    @abstractmethod
    async def __call__(
        self, turns: Sequence[ConversationTurn], **generation_args: Any
    ) -> Dict[str, Any]:
        """Send the conversation and return ``{"text": <reply text>}``."""
