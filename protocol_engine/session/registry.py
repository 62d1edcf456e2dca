"""
Session Registry

In-memory map of session id -> (ProtocolSession, ConsentGate, lock).

Each session is single-writer: HTTP handlers hold the session's
asyncio.Lock for the whole of a mutation, including the generate call,
so that a configuration change cannot interleave with a request being
built from it.

Sessions live only in this process. A session not looked up for
SESSION_IDLE_TTL_SECONDS is evicted on the next create or get, unless
its lock is held. Nothing survives a restart.

Version: session_v1
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from ..consent.gate import ConsentGate
from ..settings import SESSION_IDLE_TTL_SECONDS
from .aggregator import ProtocolSession

logger = logging.getLogger(__name__)


@dataclass
class SessionEntry:
    session: ProtocolSession
    gate: ConsentGate
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    last_seen: float = 0.0


class SessionRegistry:

    def __init__(
        self,
        idle_ttl_seconds: float = SESSION_IDLE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._entries: Dict[str, SessionEntry] = {}
        self.idle_ttl_seconds = idle_ttl_seconds
        self._clock = clock

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._entries

    def create(self, max_selections: Optional[int] = None) -> SessionEntry:
        now = self._clock()
        self.evict_idle(now)
        session = ProtocolSession(max_selections=max_selections)
        entry = SessionEntry(session=session, gate=ConsentGate(session), last_seen=now)
        self._entries[session.session_id] = entry
        logger.info(f"Created session {session.session_id} (max_selections={session.max_selections})")
        return entry

    def get(self, session_id: str) -> Optional[SessionEntry]:
        now = self._clock()
        self.evict_idle(now)
        entry = self._entries.get(session_id)
        if entry is not None:
            entry.last_seen = now
        return entry

    def delete(self, session_id: str) -> bool:
        entry = self._entries.pop(session_id, None)
        if entry is None:
            return False
        logger.info(f"Deleted session {session_id}")
        return True

    def evict_idle(self, now: Optional[float] = None) -> List[str]:
        """Drop sessions idle longer than the TTL. A TTL of 0 or less disables eviction."""
        if self.idle_ttl_seconds <= 0:
            return []
        now = self._clock() if now is None else now
        expired = [
            session_id
            for session_id, entry in self._entries.items()
            if now - entry.last_seen > self.idle_ttl_seconds and not entry.lock.locked()
        ]
        for session_id in expired:
            del self._entries[session_id]
        if expired:
            logger.info(f"Evicted {len(expired)} idle session(s)")
        return expired

    def clear(self) -> None:
        self._entries.clear()


SESSION_REGISTRY = SessionRegistry()
