"""
In-memory session store for date pickers.

Each session holds one DatePicker. Sessions are created on the first
request for a picker and dropped after a period of inactivity.
"""

import threading
import time
import uuid
from collections.abc import Callable
from datetime import date

from datepicker.core.calendar_state import DEFAULT_FIRST_WEEKDAY, CalendarState
from datepicker.core.synchronizer import DatePicker


# Default session timeout: 30 minutes
DEFAULT_SESSION_TIMEOUT_SECONDS = 30 * 60


class Session:
    """A single picker session."""

    def __init__(self, picker: DatePicker):
        self.picker = picker
        self.created_at: float = time.time()
        self.last_accessed_at: float = time.time()

    def touch(self) -> None:
        """Update the last accessed timestamp."""
        self.last_accessed_at = time.time()

    def is_expired(self, timeout_seconds: int = DEFAULT_SESSION_TIMEOUT_SECONDS) -> bool:
        """Check if the session has expired."""
        return (time.time() - self.last_accessed_at) > timeout_seconds


class PickerSessionStore:
    """Thread-safe in-memory store of picker sessions.

    Args:
        timeout_seconds: Inactivity period after which a session expires.
        first_weekday: Weekday grid rows start on for new pickers.
        clock: Returns "today" for new pickers.
    """

    def __init__(
        self,
        timeout_seconds: int = DEFAULT_SESSION_TIMEOUT_SECONDS,
        first_weekday: int = DEFAULT_FIRST_WEEKDAY,
        clock: Callable[[], date] = date.today,
    ):
        self._sessions: dict[str, Session] = {}
        self._timeout_seconds = timeout_seconds
        self._first_weekday = first_weekday
        self._clock = clock
        self._lock = threading.RLock()

    def create_session(
        self,
        picker_id: str | None = None,
        viewing: date | None = None,
    ) -> tuple[str, Session]:
        """Create a picker session.

        Args:
            picker_id: Optional custom ID. Auto-generated if not provided.
            viewing: Month to show first. Defaults to the current month.

        Returns:
            Tuple of (picker_id, Session).
        """
        if picker_id is None:
            picker_id = str(uuid.uuid4())

        state = CalendarState(
            viewing=viewing,
            first_weekday=self._first_weekday,
            clock=self._clock,
        )
        session = Session(DatePicker(state=state, clock=self._clock))

        with self._lock:
            self._sessions[picker_id] = session
        return picker_id, session

    def get_session(self, picker_id: str) -> Session | None:
        """Retrieve a session by picker ID.

        Returns None if the session doesn't exist or has expired.
        Expired sessions are removed.
        """
        with self._lock:
            session = self._sessions.get(picker_id)
            if session is None:
                return None

            if session.is_expired(self._timeout_seconds):
                del self._sessions[picker_id]
                return None

        session.touch()
        return session

    def delete_session(self, picker_id: str) -> bool:
        """Delete a session. Returns True if it existed."""
        with self._lock:
            return self._sessions.pop(picker_id, None) is not None

    def cleanup_expired(self) -> int:
        """Remove all expired sessions. Returns the count of removed sessions."""
        with self._lock:
            expired = [
                pid for pid, session in self._sessions.items()
                if session.is_expired(self._timeout_seconds)
            ]
            for pid in expired:
                del self._sessions[pid]
        return len(expired)

    def count(self) -> int:
        """Return the number of active sessions."""
        with self._lock:
            return len(self._sessions)

    def list_session_ids(self) -> list[str]:
        """Return all active session IDs."""
        with self._lock:
            return list(self._sessions.keys())
