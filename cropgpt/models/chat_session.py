from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatTurn(BaseModel):
    role: Role
    text: str


class ChatSession(BaseModel):
    """The single ongoing CropGPT conversation."""

    system_instruction: str = Field(frozen=True)
    turns: List[ChatTurn] = Field(default_factory=list)
