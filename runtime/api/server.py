"""
FastAPI application entry point for the Oracle runtime.

Responsibilities:
- configure logging
- construct shared singletons (SessionStore, GeminiClient, ConversationAgent, RequestRouter)
- include session-related routes under /agent

Run locally with:

    uvicorn runtime.api.server:app --reload
"""

import logging

from fastapi import FastAPI

from configs.settings import settings
from core.api.gemini_client import GeminiClient
from runtime.agents.conversation_agent import ConversationAgent
from runtime.agents.request_router import RequestRouter
from runtime.store.session_store import SessionStore
from . import session_routes


logging.basicConfig(
    level=settings.log_level,
    format="[%(asctime)s] %(levelname)s %(name)s - %(message)s",
)


# ---------------------------------------------------------------------------
# Shared singletons
# ---------------------------------------------------------------------------

# Session attributes live in memory for the lifetime of a session only.
session_store = SessionStore(max_age_s=settings.session_max_age)

gemini_client = GeminiClient(settings.gemini_config())

conversation_agent = ConversationAgent(
    gemini_client=gemini_client,
    history_config=settings.history_config(),
    max_speech_chars=settings.max_speech_chars,
)

request_router = RequestRouter(agent=conversation_agent)

# ---------------------------------------------------------------------------
# FastAPI app + route registration
# ---------------------------------------------------------------------------

app = FastAPI(title="Oracle Voice Runtime")

# Initialize the router module with our shared objects, then include it.
session_routes.init_routes(
    session_store=session_store,
    request_router=request_router,
)
app.include_router(session_routes.router, prefix="/agent")
