"""In-memory history of issued page tokens."""

import threading
from typing import List, Optional

from ..config import get_settings

DEFAULT_CAPACITY = 5


class TokenHistory:
    """
    Thread-safe, bounded history of page tokens for backward navigation.

    Entries are unique and kept in insertion order. When the history is full the
    oldest entry is evicted. The history is local to one process, so it is a
    best-effort accelerator; the backward link embedded in every token is the
    authoritative way to go back.
    """

    def __init__(self, capacity: Optional[int] = None):
        """
        Initialize the history.

        Args:
            capacity: Maximum number of tokens kept, defaulting to the configured
                history capacity (non-positive means 5)
        """
        if capacity is None:
            capacity = get_settings().history_capacity
        if capacity <= 0:
            capacity = DEFAULT_CAPACITY
        self._capacity = capacity
        self._tokens: List[str] = []
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, token: str) -> None:
        """
        Record a token, evicting the oldest entry if the history is full.

        Empty and already recorded tokens are ignored.
        """
        if not token:
            return

        with self._lock:
            if token in self._tokens:
                return
            if len(self._tokens) >= self._capacity:
                del self._tokens[0]
            self._tokens.append(token)

    def previous(self, token: str) -> Optional[str]:
        """
        Get the token recorded immediately before the given one.

        Returns:
            The preceding token, or None if the token is unknown or first
        """
        with self._lock:
            try:
                index = self._tokens.index(token)
            except ValueError:
                return None
            if index == 0:
                return None
            return self._tokens[index - 1]

    def last(self) -> Optional[str]:
        """Get the most recently recorded token."""
        with self._lock:
            if not self._tokens:
                return None
            return self._tokens[-1]

    def size(self) -> int:
        """Get the current number of recorded tokens."""
        with self._lock:
            return len(self._tokens)

    def snapshot(self) -> List[str]:
        """Get a copy of the recorded tokens, oldest first."""
        with self._lock:
            return list(self._tokens)

    def clear(self) -> None:
        """Forget every recorded token."""
        with self._lock:
            self._tokens.clear()

    def __len__(self) -> int:
        return self.size()
