"""
Runtime package for the Oracle voice server.

This package contains:
- API layer (FastAPI server + routes)
- Agents (ask-turn logic and request routing)
- Stores (session-scoped attributes)
- Models (Pydantic models for requests, responses and sessions)
"""
