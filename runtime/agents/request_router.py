"""Request routing for the Oracle runtime.

Maps an inbound VoiceRequest (request type + intent name) to a handler and
returns the spoken response together with the updated session attributes.

Every path returns a well-formed VoiceResponse: anything a handler raises,
and any request no handler accepts, ends in the generic apology.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Tuple

from core.conversation.prompts import FOLLOW_UP_REQUEST
from exceptions.exceptions import UnhandledRequestError

from ..models.api_models import IntentName, RequestType, VoiceRequest, VoiceResponse
from ..models.session_models import load_history, store_history
from .conversation_agent import ConversationAgent


logger = logging.getLogger(__name__)


Attributes = Dict[str, Any]
HandlerResult = Tuple[VoiceResponse, Attributes]
Handler = Callable[[VoiceRequest, Attributes], Awaitable[HandlerResult]]


LAUNCH_SPEECH = "The Oracle is ready. Ask me anything."
LAUNCH_REPROMPT = "What would you like to know?"
EMPTY_QUERY_SPEECH = "What would you like to ask?"
EMPTY_QUERY_REPROMPT = "Ask me anything."
HELP_SPEECH = (
    "You can ask me anything. Say tell me about, or explain, followed by your "
    "question. I remember our conversation so you can say tell me more for "
    "follow-ups."
)
GOODBYE_SPEECH = "Goodbye!"
FALLBACK_SPEECH = (
    "I didn't quite catch that. Try saying tell me about something, or "
    "explain something."
)
ERROR_SPEECH = "Sorry, something went wrong. Try again."
GENERIC_REPROMPT = "What would you like to ask?"

QUERY_SLOT = "query"


class RequestRouter:
    """Dispatches voice requests to the ConversationAgent and static replies.

    Parameters
    ----------
    agent:
        The ConversationAgent used for ask / follow-up intents and for
        seeding transcripts on launch.
    """

    def __init__(self, agent: ConversationAgent) -> None:
        self.agent = agent
        self._intent_handlers: Dict[str, Handler] = {
            IntentName.ASK.value: self._handle_ask,
            IntentName.FOLLOW_UP.value: self._handle_follow_up,
            IntentName.HELP.value: self._handle_help,
            IntentName.CANCEL.value: self._handle_goodbye,
            IntentName.STOP.value: self._handle_goodbye,
            IntentName.FALLBACK.value: self._handle_fallback,
        }

    async def dispatch(
        self,
        request: VoiceRequest,
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> HandlerResult:
        """Handle a single request and return (response, updated attributes).

        On error the incoming attributes are returned unchanged.
        """
        attributes = dict(attributes or {})
        try:
            handler = self._resolve(request)
            return await handler(request, attributes)
        except Exception:
            logger.exception(
                "Error handling request_type=%s intent_name=%s session_id=%s",
                request.request_type,
                request.intent_name,
                request.session_id,
            )
            return (
                VoiceResponse(speech=ERROR_SPEECH, reprompt=GENERIC_REPROMPT),
                attributes,
            )

    def _resolve(self, request: VoiceRequest) -> Handler:
        if request.request_type == RequestType.LAUNCH.value:
            return self._handle_launch
        if request.request_type == RequestType.SESSION_ENDED.value:
            return self._handle_session_ended
        if request.request_type == RequestType.INTENT.value:
            handler = self._intent_handlers.get(request.intent_name or "")
            if handler is not None:
                return handler
        raise UnhandledRequestError(request.request_type, request.intent_name)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    async def _handle_launch(self, request: VoiceRequest, attributes: Attributes) -> HandlerResult:
        logger.info("LaunchRequest")
        history = self.agent.init_history(load_history(attributes))
        return (
            VoiceResponse(speech=LAUNCH_SPEECH, reprompt=LAUNCH_REPROMPT),
            store_history(attributes, history),
        )

    async def _handle_ask(self, request: VoiceRequest, attributes: Attributes) -> HandlerResult:
        query = request.slot(QUERY_SLOT)
        logger.info("AskIntent, query: %r", query)

        if not query or not query.strip():
            return (
                VoiceResponse(speech=EMPTY_QUERY_SPEECH, reprompt=EMPTY_QUERY_REPROMPT),
                attributes,
            )
        return await self._ask(query.strip(), attributes)

    async def _handle_follow_up(self, request: VoiceRequest, attributes: Attributes) -> HandlerResult:
        # "tell me more", "continue", "elaborate", ...
        logger.info("FollowUpIntent")
        return await self._ask(FOLLOW_UP_REQUEST, attributes)

    async def _ask(self, user_text: str, attributes: Attributes) -> HandlerResult:
        outcome = await self.agent.ask(load_history(attributes), user_text)
        return (
            VoiceResponse(speech=outcome.speech, reprompt=outcome.reprompt),
            store_history(attributes, outcome.history),
        )

    async def _handle_help(self, request: VoiceRequest, attributes: Attributes) -> HandlerResult:
        return VoiceResponse(speech=HELP_SPEECH, reprompt=GENERIC_REPROMPT), attributes

    async def _handle_goodbye(self, request: VoiceRequest, attributes: Attributes) -> HandlerResult:
        return VoiceResponse(speech=GOODBYE_SPEECH, should_end_session=True), attributes

    async def _handle_fallback(self, request: VoiceRequest, attributes: Attributes) -> HandlerResult:
        logger.info("FallbackIntent")
        return VoiceResponse(speech=FALLBACK_SPEECH, reprompt=GENERIC_REPROMPT), attributes

    async def _handle_session_ended(self, request: VoiceRequest, attributes: Attributes) -> HandlerResult:
        logger.info("Session ended")
        return VoiceResponse(should_end_session=True), attributes
