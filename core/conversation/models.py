from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class Role(str, Enum):
    USER = "user"
    MODEL = "model"


class Part(BaseModel):
    text: str = ""


class ConversationTurn(BaseModel):
    """
    One role-tagged utterance, stored in the Gemini wire shape:

        {"role": "user" | "model", "parts": [{"text": "..."}]}
    """
    role: Role
    parts: List[Part] = Field(default_factory=list)

    @classmethod
    def from_text(cls, role: Role, text: str) -> "ConversationTurn":
        return cls(role=role, parts=[Part(text=text)])

    @property
    def text(self) -> str:
        return "".join(part.text for part in self.parts)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json")
