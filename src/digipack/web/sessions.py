"""In-memory shell registry, one ShellController per browser session.

Bounded: the least recently used shells are evicted once `max_sessions` is
reached, and shells idle for longer than `idle_seconds` are dropped. Evicted
shells are closed so their copy timers never fire.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections import OrderedDict
from typing import Callable

from ..shell import ShellController

_logger = logging.getLogger("digipack")

SESSION_COOKIE = "digipack_session"
MAX_SESSIONS = 500
SESSION_IDLE_SECONDS = 3600.0


class SessionStore:
    """Maps session ids to shells. Nothing is persisted."""

    def __init__(
        self,
        shell_factory: Callable[[], ShellController],
        max_sessions: int = MAX_SESSIONS,
        idle_seconds: float = SESSION_IDLE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._shell_factory = shell_factory
        self._max_sessions = max_sessions
        self._idle_seconds = idle_seconds
        self._clock = clock
        # session id -> (shell, last access), least recently used first
        self._shells: OrderedDict[str, tuple[ShellController, float]] = OrderedDict()

    def __len__(self) -> int:
        return len(self._shells)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._shells

    def get_or_create(self, session_id: str | None) -> tuple[str, ShellController]:
        now = self._clock()
        self._expire_idle(now)

        if session_id and session_id in self._shells:
            shell, _ = self._shells.pop(session_id)
            self._shells[session_id] = (shell, now)
            return session_id, shell

        while len(self._shells) >= self._max_sessions:
            evicted_id, (evicted, _) = self._shells.popitem(last=False)
            evicted.close()
            _logger.info(f"Evicted shell session {evicted_id} (limit {self._max_sessions})")

        new_id = uuid.uuid4().hex
        shell = self._shell_factory()
        self._shells[new_id] = (shell, now)
        _logger.debug(f"New shell session {new_id}")
        return new_id, shell

    def _expire_idle(self, now: float) -> None:
        while self._shells:
            oldest_id, (shell, last_seen) = next(iter(self._shells.items()))
            if now - last_seen < self._idle_seconds:
                return
            del self._shells[oldest_id]
            shell.close()
            _logger.debug(f"Expired idle shell session {oldest_id}")

    def close_all(self) -> None:
        for shell, _ in self._shells.values():
            shell.close()
        self._shells.clear()
