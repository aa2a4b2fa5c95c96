"""Minimal session storage for the Oracle runtime.

An in-memory dict of session_id -> Session. It stands in for the voice
platform's session attributes: state lives only as long as the session and
is dropped when the session ends. Nothing is written to disk.

Clients that never send a stop / session-ended request would leave their
sessions behind, so sessions older than ``max_age_s`` (by ``created_at``) are
evicted whenever a new session is created.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional
from uuid import uuid4

from ..models.session_models import Session, SessionStatus


logger = logging.getLogger(__name__)


DEFAULT_SESSION_MAX_AGE_S = 3600.0


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionStore:
    """In-memory session store.

    Parameters
    ----------
    max_age_s:
        Sessions created longer ago than this are evicted on the next
        ``create_session`` call. ``None`` disables eviction.
    clock:
        Returns the current UTC time; replaced in tests.
    """

    def __init__(
        self,
        max_age_s: Optional[float] = DEFAULT_SESSION_MAX_AGE_S,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._sessions: Dict[str, Session] = {}
        self._max_age_s = max_age_s
        self._clock = clock

    def __len__(self) -> int:
        return len(self._sessions)

    def create_session(self) -> Session:
        """Create a new OPEN session with empty attributes and return it."""
        self.evict_expired()
        now = self._clock()
        session = Session(session_id=str(uuid4()), created_at=now.isoformat())
        self._sessions[session.session_id] = session
        logger.info("Session started: %s", session.session_id)
        return session

    def get_session(self, session_id: str) -> Optional[Session]:
        return self._sessions.get(session_id)

    def save_session(self, session: Session) -> None:
        """Store the given session, replacing any previous state for its id."""
        self._sessions[session.session_id] = session

    def end_session(self, session_id: str) -> Optional[Session]:
        """Drop the session and return its final state (CLOSED), if it existed."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return None
        session.status = SessionStatus.CLOSED
        logger.info("Session ended: %s", session_id)
        return session

    def evict_expired(self) -> List[str]:
        """Drop sessions older than ``max_age_s`` and return their ids."""
        if self._max_age_s is None:
            return []

        cutoff = self._clock() - timedelta(seconds=self._max_age_s)
        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if datetime.fromisoformat(session.created_at) < cutoff
        ]
        for session_id in expired:
            self._sessions.pop(session_id)
        if expired:
            logger.info("Evicted %d abandoned session(s)", len(expired))
        return expired
