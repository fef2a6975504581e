"""
In-Memory Request Counter.

Additive counter of remote API calls, shared between processors so the
caller can observe total request volume against the API quota.
"""

from __future__ import annotations

from threading import Lock
from typing import Dict, Optional


class InMemoryRequestCounter:
    """Thread-safe additive counter with optional per-operation breakdown."""

    def __init__(self) -> None:
        """Initialize the counter at zero."""
        self._total = 0
        self._by_operation: Dict[str, int] = {}
        self._lock = Lock()

    def increment(self, amount: int = 1, operation: Optional[str] = None) -> None:
        """Add ``amount`` requests, optionally attributed to an operation."""
        with self._lock:
            self._total += amount
            if operation is not None:
                self._by_operation[operation] = (
                    self._by_operation.get(operation, 0) + amount
                )

    @property
    def value(self) -> int:
        with self._lock:
            return self._total

    def by_operation(self) -> Dict[str, int]:
        """Copy of the per-operation counts."""
        with self._lock:
            return dict(self._by_operation)

    def reset(self) -> None:
        """Set the counter back to zero."""
        with self._lock:
            self._total = 0
            self._by_operation.clear()
