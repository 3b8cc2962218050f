import base64
import logging
from typing import Any, Dict, List, Sequence

import aiohttp

from ..exceptions import ProviderError
from .base import Provider
from ...core import settings
from ...schemas.pydantic import AssistantTurn, ConversationTurn, SystemTurn, UserTurn

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
PDF_MIME_TYPE = "application/pdf"


class GeminiProvider(Provider):
    """
    Provider for multi-turn generation using the Google Gemini REST API.
    """
    def __init__(
        self,
        model_name: str = settings.LL_MODEL,
        api_key: str | None = None,
        api_base_url: str | None = None,
        opts: Dict[str, Any] = None
    ):
        self.model_name = model_name
        self.api_key = api_key or settings.LLM_API_KEY
        self.api_base_url = api_base_url or settings.LLM_BASE_URL or DEFAULT_BASE_URL
        self.opts = opts or {}

        if not self.api_key:
            raise ProviderError("Gemini API key is missing")

    def build_payload(
        self,
        turns: Sequence[ConversationTurn],
        response_schema: Dict[str, Any] | None = None,
    ) -> Dict[str, Any]:
        """
        Translate conversation turns into a generateContent request body.

        The system turn becomes ``systemInstruction``; assistant turns are
        sent with Gemini's ``model`` role.
        """
        system_parts: List[Dict[str, Any]] = []
        contents: List[Dict[str, Any]] = []

        for turn in turns:
            if isinstance(turn, SystemTurn):
                system_parts.append({"text": turn.text})
            elif isinstance(turn, UserTurn):
                parts: List[Dict[str, Any]] = [{"text": turn.text}]
                if turn.document is not None:
                    parts.append({
                        "inlineData": {
                            "mimeType": PDF_MIME_TYPE,
                            "data": base64.b64encode(turn.document).decode("ascii"),
                        }
                    })
                contents.append({"role": "user", "parts": parts})
            elif isinstance(turn, AssistantTurn):
                contents.append({"role": "model", "parts": [{"text": turn.text}]})
            else:
                raise ProviderError(f"Unsupported conversation turn: {type(turn).__name__}")

        generation_config: Dict[str, Any] = {
            "temperature": self.opts.get("temperature", settings.LLM_TEMPERATURE),
        }
        if "max_output_tokens" in self.opts:
            generation_config["maxOutputTokens"] = self.opts["max_output_tokens"]
        if response_schema is not None:
            generation_config["responseMimeType"] = "application/json"
            generation_config["responseSchema"] = response_schema

        payload: Dict[str, Any] = {
            "contents": contents,
            "generationConfig": generation_config,
        }
        if system_parts:
            payload["systemInstruction"] = {"parts": system_parts}
        return payload

    @staticmethod
    def extract_text(data: Dict[str, Any]) -> str:
        try:
            parts = data["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError):
            raise ProviderError(f"Gemini returned no candidates: {data}")

        text_output = "".join(part.get("text", "") for part in parts)
        if not text_output.strip():
            raise ProviderError("Gemini returned an empty result")
        return text_output

    async def __call__(
        self,
        turns: Sequence[ConversationTurn],
        response_schema: Dict[str, Any] | None = None,
        **generation_args: Any,
    ) -> Dict[str, Any]:
        """
        Calls the Gemini API with the conversation and returns the reply text.
        """
        url = f"{self.api_base_url}/models/{self.model_name}:generateContent"
        payload = self.build_payload(turns, response_schema=response_schema)
        timeout = aiohttp.ClientTimeout(
            total=generation_args.get("timeout", settings.LLM_TIMEOUT_SECONDS)
        )
        logger.info(f"GeminiProvider sending {len(payload['contents'])} turns to {self.model_name}")

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    url, json=payload, headers={"x-goog-api-key": self.api_key}
                ) as response:
                    if response.status != 200:
                        text = await response.text()
                        raise ProviderError(f"Gemini API error: {response.status} - {text}")

                    data = await response.json()
                    logger.debug(f"provider in gemini response: {data}")
                    return {"text": self.extract_text(data)}

        except ProviderError:
            raise
        except Exception as e:
            logger.error(f"Gemini provider error: {e}")
            raise ProviderError(f"Gemini provider error: {e}") from e
