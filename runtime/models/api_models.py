"""
HTTP request/response models for the Oracle runtime API.
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


class RequestType(str, Enum):
    LAUNCH = "LaunchRequest"
    INTENT = "IntentRequest"
    SESSION_ENDED = "SessionEndedRequest"


class IntentName(str, Enum):
    ASK = "AskIntent"
    FOLLOW_UP = "FollowUpIntent"
    HELP = "HelpIntent"
    CANCEL = "CancelIntent"
    STOP = "StopIntent"
    FALLBACK = "FallbackIntent"


class StartSessionResponse(BaseModel):
    session_id: str


class VoiceRequest(BaseModel):
    """
    One inbound request from the voice platform.

    - request_type: LaunchRequest | IntentRequest | SessionEndedRequest
    - intent_name: only for IntentRequest (e.g. "AskIntent")
    - slots: slot name -> spoken value; AskIntent reads "query"
    """
    session_id: str
    request_type: str
    intent_name: Optional[str] = None
    slots: Dict[str, Optional[str]] = Field(default_factory=dict)

    def slot(self, name: str) -> Optional[str]:
        return self.slots.get(name)


class VoiceResponse(BaseModel):
    """Speech handed back to the platform for synthesis."""
    speech: str = ""
    reprompt: Optional[str] = None
    should_end_session: bool = False
