"""
Requirement id generation.

Ids are drawn from a monotonic counter owned by the session (or by the
running API process), so two extraction calls in the same millisecond can
never collide.
"""

from __future__ import annotations

import itertools
import threading
import uuid


class RequirementIdFactory:
    """Hands out `req_<prefix>_<token>_<position>` ids."""

    def __init__(self, prefix: str | None = None) -> None:
        self.prefix = prefix or uuid.uuid4().hex[:8]
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def next_token(self) -> int:
        with self._lock:
            return next(self._counter)

    def make_id(self, token: int, position: int) -> str:
        return f"req_{self.prefix}_{token}_{position}"
