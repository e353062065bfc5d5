"""
In-memory session manager for calculator engines.

Each browser session owns one ArithmeticEngine; the store is bounded and
evicts the least recently used session when full.
"""

import logging
import os
import threading
import uuid
from collections import OrderedDict
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, List, Optional, TypedDict

from ..engine import ArithmeticEngine

logger = logging.getLogger(__name__)


class Session(TypedDict):
    """Session information."""
    session_id: str
    engine: ArithmeticEngine
    lock: threading.Lock
    created_at: str
    last_used_at: str


# In-memory session storage, most recently used last
_sessions: "OrderedDict[str, Session]" = OrderedDict()
_sessions_lock = threading.Lock()
MAX_SESSIONS = int(os.environ.get("WEB_CALCULATOR_MAX_SESSIONS", "1000"))


def create_session() -> str:
    """
    Create a new calculator session.

    Returns:
        Session ID string
    """
    session_id = str(uuid.uuid4())
    now = datetime.utcnow().isoformat()

    session = Session(
        session_id=session_id,
        engine=ArithmeticEngine(),
        lock=threading.Lock(),
        created_at=now,
        last_used_at=now,
    )

    with _sessions_lock:
        _sessions[session_id] = session
        while len(_sessions) > max(1, MAX_SESSIONS):
            evicted, _ = _sessions.popitem(last=False)
            logger.info("Evicted calculator session %s", evicted)

    logger.info("Created calculator session %s", session_id)
    return session_id


def get_session(session_id: str) -> Optional[Session]:
    """
    Look up a session and mark it as recently used.

    Args:
        session_id: Session identifier

    Returns:
        Session dict or None if not found
    """
    with _sessions_lock:
        session = _sessions.get(session_id)
        if session is not None:
            _sessions.move_to_end(session_id)
            session["last_used_at"] = datetime.utcnow().isoformat()
        return session


@contextmanager
def locked_engine(session_id: str) -> Iterator[Optional[ArithmeticEngine]]:
    """Yield a session's engine while holding its lock, or None if unknown."""
    session = get_session(session_id)
    if session is None:
        yield None
        return
    with session["lock"]:
        yield session["engine"]


def delete_session(session_id: str) -> bool:
    with _sessions_lock:
        removed = _sessions.pop(session_id, None) is not None
    if removed:
        logger.info("Deleted calculator session %s", session_id)
    return removed


def list_sessions() -> List[str]:
    with _sessions_lock:
        return list(_sessions.keys())


def reset_sessions() -> None:
    """Drop every session."""
    with _sessions_lock:
        _sessions.clear()
