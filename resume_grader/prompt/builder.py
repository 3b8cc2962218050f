from typing import List, Optional, Sequence

from ..schemas.pydantic import (
    AssistantTurn,
    ConversationTurn,
    SystemTurn,
    TrainingExample,
    UserTurn,
)
from .grade import system_prompt, user_prompt


def skips_template_advice(author_hint: Optional[str], sentinel: str) -> bool:
    if author_hint is None:
        return False
    return author_hint.strip() == sentinel


def build_conversation(
    document: bytes,
    author_hint: Optional[str],
    training_set: Sequence[TrainingExample],
    template_url: str,
    sentinel_author: str = "silver",
) -> List[ConversationTurn]:
    """
    Assemble the ordered turns sent to the model for one resume.

    The result is the rubric as a system turn, then a user/assistant pair
    per training example in the order given, then the caller's document as
    the final user turn. Document bytes are passed through untouched.
    """
    preamble = user_prompt(template_url)

    turns: List[ConversationTurn] = [
        SystemTurn(
            text=system_prompt(
                template_url,
                skip_template=skips_template_advice(author_hint, sentinel_author),
            )
        )
    ]
    for example in training_set:
        turns.append(UserTurn(text=preamble, document=example.document))
        turns.append(AssistantTurn(text=example.expected_result.to_compact_json()))

    turns.append(UserTurn(text=preamble, document=document))
    return turns
