"""ConversationAgent implementation.

Responsible for one "ask" turn:
- seeding the transcript if the session has none yet
- appending the user's utterance and trimming the transcript
- calling Gemini with the transcript
- turning the answer into speech-safe text
- appending the raw answer to the transcript for future context

The transcript is an explicit value: callers pass the current transcript in
and receive the updated one back in the AskOutcome. Nothing is mutated in
place.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from core.api.gemini_client import GeminiClient, GenerationFailure
from core.conversation.history import (
    HistoryConfig,
    append_turn,
    get_or_init_history,
    trim_history,
)
from core.conversation.models import ConversationTurn, Role
from core.speech.sanitizer import MAX_SPEECH_CHARS, sanitize_for_speech


logger = logging.getLogger(__name__)


ANSWER_REPROMPT = "Anything else?"
UPSTREAM_FAILURE_SPEECH = "Sorry, I had trouble getting an answer. Try again."
UPSTREAM_FAILURE_REPROMPT = "Ask me something else."


@dataclass(frozen=True)
class AskOutcome:
    speech: str
    reprompt: str
    history: List[ConversationTurn]
    ok: bool = True


class ConversationAgent:
    """Conversation logic for the Oracle.

    Parameters
    ----------
    gemini_client:
        Client used for the outbound generateContent call.
    history_config:
        Seed text and retention window for transcripts.
    max_speech_chars:
        Ceiling applied to the spoken answer.
    """

    def __init__(
        self,
        gemini_client: GeminiClient,
        history_config: Optional[HistoryConfig] = None,
        max_speech_chars: int = MAX_SPEECH_CHARS,
    ) -> None:
        self.gemini_client = gemini_client
        self.history_config = history_config or HistoryConfig()
        self.max_speech_chars = max_speech_chars

    def init_history(self, history: Optional[Sequence[ConversationTurn]]) -> List[ConversationTurn]:
        """Return the session's transcript, seeding it when empty."""
        return get_or_init_history(history, self.history_config)

    def _trim(self, history: Sequence[ConversationTurn]) -> List[ConversationTurn]:
        return trim_history(history, self.history_config.max_history_turns)

    async def ask(
        self,
        history: Optional[Sequence[ConversationTurn]],
        user_text: str,
    ) -> AskOutcome:
        """Answer one utterance in the context of ``history``.

        Flow:
        - seed (if needed), append the user turn, trim
        - call Gemini
        - on success: sanitize for speech, append the raw answer, trim
        - on failure: log and return the apology; the user turn stays in the
          returned transcript without a model answer
        """
        seeded = self.init_history(history)
        pending = self._trim(append_turn(seeded, Role.USER, user_text))

        logger.info("Calling Gemini with %d messages", len(pending))
        result = await self.gemini_client.generate(pending)

        if isinstance(result, GenerationFailure):
            logger.error("Gemini call failed: %s", result.to_exception())
            return AskOutcome(
                speech=UPSTREAM_FAILURE_SPEECH,
                reprompt=UPSTREAM_FAILURE_REPROMPT,
                history=pending,
                ok=False,
            )

        speech = sanitize_for_speech(result.text, self.max_speech_chars)
        logger.info("Gemini answered: %s...", speech[:100])

        updated = self._trim(append_turn(pending, Role.MODEL, result.text))
        return AskOutcome(speech=speech, reprompt=ANSWER_REPROMPT, history=updated)
