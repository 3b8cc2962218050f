from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

MAX_FLAG_LENGTH = 280

# A single observation: one line, at most MAX_FLAG_LENGTH characters.
Flag = Annotated[str, StringConstraints(max_length=MAX_FLAG_LENGTH, pattern=r"^[^\r\n]*$")]


class Grade(str, Enum):
    S = "S"
    A = "A"
    B = "B"
    C = "C"


class GradeResult(BaseModel):
    """
    Overall grade for a resume plus the serious (red) and minor (yellow)
    observations about it.
    """

    model_config = ConfigDict(frozen=True)

    grade: Grade
    red_flags: List[Flag] = Field(default_factory=list)
    yellow_flags: List[Flag] = Field(default_factory=list)

    def to_compact_json(self) -> str:
        """Serialize without whitespace, the form used for assistant turns."""
        return self.model_dump_json()


class TrainingExample(BaseModel):
    model_config = ConfigDict(frozen=True)

    document: bytes
    expected_result: GradeResult


class SystemTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["system"] = "system"
    text: str


class UserTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user"] = "user"
    text: str
    document: Optional[bytes] = None


class AssistantTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["assistant"] = "assistant"
    text: str


ConversationTurn = Annotated[
    Union[SystemTurn, UserTurn, AssistantTurn], Field(discriminator="role")
]
