"""HTTP surface of the Oracle runtime, mounted under /agent.

A voice session goes through these calls:

- POST /agent/start_session opens a session with empty attributes.
- POST /agent/request, usually a LaunchRequest first, which seeds the
  transcript. Ask and follow-up intents follow. Each request runs against
  the session's attributes, and the updated attributes are stored again.
- A stop, cancel or SessionEndedRequest ends the session. Its attributes
  and transcript are dropped.

The session store and request router are built by ``runtime.api.server``
and handed in through ``init_routes``.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import APIRouter, HTTPException

from ..models.api_models import (
    StartSessionResponse,
    VoiceRequest,
    VoiceResponse,
)
from ..store.session_store import SessionStore
from ..agents.request_router import RequestRouter


logger = logging.getLogger(__name__)

router = APIRouter()


@dataclass
class _Runtime:
    session_store: Optional[SessionStore] = None
    request_router: Optional[RequestRouter] = None


_runtime = _Runtime()


def init_routes(
    session_store: Optional[SessionStore],
    request_router: Optional[RequestRouter],
) -> None:
    """Point the routes at the server's session store and request router."""
    _runtime.session_store = session_store
    _runtime.request_router = request_router


def _wired() -> _Runtime:
    # 500 rather than AttributeError when the server skipped init_routes.
    if _runtime.session_store is None or _runtime.request_router is None:
        raise HTTPException(
            status_code=500,
            detail="Voice runtime is not wired: call init_routes() first.",
        )
    return _runtime


@router.post("/start_session", response_model=StartSessionResponse)
async def start_session() -> StartSessionResponse:
    """Open a voice session; abandoned older sessions are evicted here."""
    session = _wired().session_store.create_session()
    return StartSessionResponse(session_id=session.session_id)


@router.post("/request", response_model=VoiceResponse)
async def handle_request(request: VoiceRequest) -> VoiceResponse:
    """Handle a single voice request within a session.

    Delegates to RequestRouter with the session's current attributes and
    writes the returned attributes back. A response that ends the session
    drops it from the store.
    """
    try:
        runtime = _wired()
        session_store = runtime.session_store
        request_router = runtime.request_router

        session = session_store.get_session(request.session_id)
        if session is None:
            raise HTTPException(status_code=404, detail="Session not found")

        response, attributes = await request_router.dispatch(request, session.attributes)

        if response.should_end_session:
            session_store.end_session(session.session_id)
        else:
            session.attributes = attributes
            session_store.save_session(session)

        return response

    except HTTPException as e:
        logger.warning(
            "[AGENT] HTTP %s for session_id=%s request_type=%s intent_name=%s reason=%r",
            e.status_code,
            request.session_id,
            request.request_type,
            request.intent_name,
            e.detail,
        )
        raise

    except Exception:
        logger.exception(
            "[AGENT] Unexpected error for session_id=%s request_type=%s intent_name=%s",
            request.session_id,
            request.request_type,
            request.intent_name,
        )
        raise


@router.get("/healthz")
def health_check():
    """Liveness only; never calls Gemini or touches sessions."""
    return {"status": "ok"}
