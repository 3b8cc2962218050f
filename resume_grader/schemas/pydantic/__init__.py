from .grade import (
    MAX_FLAG_LENGTH,
    AssistantTurn,
    ConversationTurn,
    Grade,
    GradeResult,
    SystemTurn,
    TrainingExample,
    UserTurn,
)

__all__ = [
    "MAX_FLAG_LENGTH",
    "AssistantTurn",
    "ConversationTurn",
    "Grade",
    "GradeResult",
    "SystemTurn",
    "TrainingExample",
    "UserTurn",
]
