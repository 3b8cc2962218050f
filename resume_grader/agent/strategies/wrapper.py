import json
import logging
import re
from typing import Any, Dict, List, Sequence

from json_repair import repair_json

from .base import Strategy
from ..providers.base import Provider
from ..exceptions import StrategyError
from ...schemas.pydantic import ConversationTurn


logger = logging.getLogger(__name__)

# Precompiled for performance; matches ```json ... ``` or ``` ... ``` fenced blocks
FENCE_PATTERN = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.IGNORECASE)


def _preview(text: str, limit: int = 2000) -> str:
    return text if len(text) <= limit else text[:limit] + "... (truncated)"


def parse_json_object(response_text: str) -> Dict[str, Any]:
    """
    Pull a JSON object out of model output.

    Tries, in order: the whole text, each fenced code block, the outermost
    ``{...}`` span, and finally ``json_repair`` on that span.
    """
    response_text = response_text.strip()

    candidates: List[str] = [response_text]
    candidates.extend(m.group(1).strip() for m in FENCE_PATTERN.finditer(response_text))

    obj_start, obj_end = response_text.find("{"), response_text.rfind("}")
    if obj_start != -1 and obj_end > obj_start:
        candidates.append(response_text[obj_start : obj_end + 1])

    for candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed

    if obj_start == -1:
        logger.error("provider response contained no JSON object braces: %s", _preview(response_text))
        raise StrategyError("JSON parsing error: no JSON object detected in provider response")

    logger.warning("Malformed JSON detected; attempting json_repair.")
    repaired = repair_json(candidates[-1], return_objects=True)
    if isinstance(repaired, dict) and repaired:
        return repaired

    logger.error(
        "provider returned non-JSON. failed to parse candidate blocks - response: %s",
        _preview(response_text),
    )
    raise StrategyError("JSON parsing error: failed to parse candidate JSON blocks")


class JSONWrapper(Strategy):
    async def __call__(
        self, turns: Sequence[ConversationTurn], provider: Provider, **generation_args: Any
    ) -> Dict[str, Any]:
        """
        Run the provider and return its reply parsed as a JSON object.
        """
        response = await provider(turns, **generation_args)

        if isinstance(response, dict) and "text" in response:
            response_text = response["text"]
        elif isinstance(response, str):
            response_text = response
        else:
            logger.error(f"Unexpected response type from provider: {type(response)}")
            raise StrategyError("Unexpected response type from provider.")

        if not isinstance(response_text, str) or not response_text.strip():
            raise StrategyError("Provider returned an empty response.")

        logger.debug(f"provider response text: {response_text}")
        return parse_json_object(response_text)
