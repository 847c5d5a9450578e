"""
Event Logger Module

Records hash worker activity as typed events.

Features:
- Worker start/stop events
- Hash request and completion events
- Message fingerprints instead of raw text (SHA-256, our implementation)
- Subscriber callbacks for live display
- Bounded in-memory history
"""

import json
import logging
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Deque, Dict, List, Optional

from ..core.sha2 import sha256_hex


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

DEFAULT_MAX_EVENTS = 1000
EVENT_VERSION = "1.0"
FINGERPRINT_LENGTH = 16


def get_message_fingerprint(text: str) -> str:
    """
    Short SHA-256 fingerprint of a message.

    Lets events for the same input be correlated without storing the
    input itself.
    """
    return sha256_hex(text.encode())[:FINGERPRINT_LENGTH]


# ============================================================================
# Event Types
# ============================================================================

class EventType(Enum):
    """Types of events the hash worker reports."""

    WORKER_START = "worker_start"
    WORKER_STOP = "worker_stop"

    HASH_REQUESTED = "hash_requested"
    HASH_COMPLETED = "hash_completed"
    HASH_FAILED = "hash_failed"


# ============================================================================
# Event Structure
# ============================================================================

@dataclass
class HashEvent:
    """A single worker event."""
    event_type: EventType
    algorithm: str
    timestamp: float
    details: Dict[str, Any] = field(default_factory=dict)

    def to_record(self) -> str:
        """Serialize to a compact JSON line."""
        return json.dumps({
            'version': EVENT_VERSION,
            'type': self.event_type.value,
            'algo': self.algorithm,
            'time': self.timestamp,
            'iso_time': datetime.fromtimestamp(self.timestamp).isoformat(),
            'details': self.details,
        }, separators=(',', ':'))

    @classmethod
    def from_record(cls, record: str) -> 'HashEvent':
        """Parse an event from its JSON line."""
        data = json.loads(record)
        return cls(
            event_type=EventType(data['type']),
            algorithm=data['algo'],
            timestamp=data['time'],
            details=data.get('details', {}),
        )

    def __str__(self) -> str:
        dt = datetime.fromtimestamp(self.timestamp)
        return (
            f"[{dt.strftime('%Y-%m-%d %H:%M:%S')}] "
            f"{self.event_type.value} | {self.algorithm}"
        )


# ============================================================================
# Event Logger
# ============================================================================

class EventLogger:
    """
    In-memory event log for the hash worker.

    Safe to write from the worker thread while the caller reads.
    """

    def __init__(self, max_events: int = DEFAULT_MAX_EVENTS):
        """
        Initialize the event logger.

        Args:
            max_events: Oldest events are dropped beyond this many
        """
        if max_events < 1:
            raise ValueError("max_events must be at least 1")
        self._events: Deque[HashEvent] = deque(maxlen=max_events)
        self._callbacks: List[Callable[[HashEvent], None]] = []
        self._lock = threading.Lock()

    def _add_event(self, event: HashEvent) -> None:
        with self._lock:
            self._events.append(event)
            callbacks = list(self._callbacks)

        for callback in callbacks:
            try:
                callback(event)
            except Exception:
                logger.exception("Event callback %r failed", callback)

    def add_callback(self, callback: Callable[[HashEvent], None]) -> None:
        """Add a callback to be notified of new events."""
        with self._lock:
            self._callbacks.append(callback)

    def remove_callback(self, callback: Callable[[HashEvent], None]) -> None:
        """Remove a callback."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    def log(
        self,
        event_type: EventType,
        algorithm: str = "",
        details: Optional[Dict[str, Any]] = None
    ) -> HashEvent:
        """Record an event and return it."""
        event = HashEvent(
            event_type=event_type,
            algorithm=algorithm,
            timestamp=time.time(),
            details=details or {},
        )
        self._add_event(event)
        return event

    # ========================================================================
    # Worker Events
    # ========================================================================

    def log_worker(self, started: bool) -> HashEvent:
        """Log worker start or stop."""
        return self.log(EventType.WORKER_START if started else EventType.WORKER_STOP)

    def log_request(self, algorithm: str, text: str) -> HashEvent:
        """
        Log an incoming hash request.

        Args:
            algorithm: Display name of the algorithm
            text: The input text (only its fingerprint and length are kept)
        """
        return self.log(EventType.HASH_REQUESTED, algorithm, {
            'input_id': get_message_fingerprint(text),
            'length': len(text.encode()),
        })

    def log_result(
        self,
        algorithm: str,
        blocks: int = 0,
        digest_hex: str = "",
        error: Optional[str] = None
    ) -> HashEvent:
        """Log a finished (or failed) hash request."""
        if error is not None:
            return self.log(EventType.HASH_FAILED, algorithm, {'error': error})
        return self.log(EventType.HASH_COMPLETED, algorithm, {
            'blocks': blocks,
            'digest': digest_hex[:FINGERPRINT_LENGTH],
        })

    # ========================================================================
    # Queries
    # ========================================================================

    def events(self, event_type: Optional[EventType] = None) -> List[HashEvent]:
        """Return logged events, optionally filtered by type."""
        with self._lock:
            snapshot = list(self._events)
        if event_type is None:
            return snapshot
        return [e for e in snapshot if e.event_type == event_type]

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
