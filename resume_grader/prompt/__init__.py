from .builder import build_conversation
from .grade import GUIDE, NON_FLAGS, SKIP_TEMPLATE_CLARIFICATION, system_prompt, user_prompt
from .training_examples import TRAINING_FILES, expected_results

__all__ = [
    "GUIDE",
    "NON_FLAGS",
    "SKIP_TEMPLATE_CLARIFICATION",
    "TRAINING_FILES",
    "build_conversation",
    "expected_results",
    "system_prompt",
    "user_prompt",
]
