"""
Session-related models for the Oracle runtime.

These describe:
- a minimal Session object holding opaque platform attributes
- SessionStatus enum (OPEN, CLOSED)
- helpers moving the transcript in and out of the attributes mapping
"""

from enum import Enum
from typing import Any, Dict, List, Mapping
from datetime import datetime, timezone
from pydantic import BaseModel, Field

from core.conversation.models import ConversationTurn


HISTORY_ATTRIBUTE = "conversationHistory"


class SessionStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class Session(BaseModel):
    session_id: str
    status: SessionStatus = SessionStatus.OPEN
    attributes: Dict[str, Any] = Field(default_factory=dict)
    created_at: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


def load_history(attributes: Mapping[str, Any]) -> List[ConversationTurn]:
    raw = attributes.get(HISTORY_ATTRIBUTE) or []
    return [ConversationTurn.model_validate(turn) for turn in raw]


def store_history(
    attributes: Mapping[str, Any],
    history: List[ConversationTurn],
) -> Dict[str, Any]:
    """Return a copy of ``attributes`` with the transcript written back."""
    updated = dict(attributes)
    updated[HISTORY_ATTRIBUTE] = [turn.to_payload() for turn in history]
    return updated
