"""
Hash Worker Module

Runs hash computations on a background thread so an interactive front end
stays responsive.

Each request is an (algorithm, text) pair. The worker answers with two
messages, in order:
1. HEX  - hex dump of the preprocessed blocks
2. HASH - formatted digest

Requests are served one at a time in arrival order. Each computation owns
its own state; nothing is shared between requests.
"""

import logging
import queue
import threading
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..core.constants import Variant, get_variant
from ..core.preprocessing import preprocess
from ..core.sha2 import hash_blocks
from ..printer import format_blocks, format_digest
from .event_logger import EventLogger


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

WORKER_POLL_INTERVAL = 0.1  # Seconds between checks of the stop flag
LOADING_TEXT = "[Loading...]"


# ============================================================================
# Algorithms and Messages
# ============================================================================

class Algorithm(Enum):
    """Algorithms offered by the front end."""

    SHA256 = "SHA-256"
    SHA224 = "SHA-224"
    SHA512 = "SHA-512"
    SHA384 = "SHA-384"

    @property
    def variant(self) -> Variant:
        return get_variant(self.value)

    @classmethod
    def from_name(cls, name: str) -> 'Algorithm':
        """
        Parse an algorithm name ("SHA-256", "sha256", ...).

        Raises:
            ValueError: If the name is not one of the four algorithms
        """
        try:
            variant = get_variant(name)
        except ValueError:
            raise ValueError(f"Unknown algorithm: {name!r}") from None
        return cls(variant.name)

    def __str__(self) -> str:
        return self.value


class MessageKind(Enum):
    HEX = "hex"
    HASH = "hash"
    ERROR = "error"


@dataclass(frozen=True)
class WorkerMessage:
    """One reply from the worker."""
    kind: MessageKind
    algorithm: Algorithm
    text: str


def _preprocess_request(algorithm: Algorithm, text: str) -> Tuple[List[int], str]:
    """Preprocess the text and render the block dump shown before the digest."""
    family = algorithm.variant.family
    blocks = preprocess(text, family)
    return blocks, format_blocks(blocks, family.block_bits)


def hash_request(algorithm: Algorithm, text: str) -> Tuple[str, str]:
    """
    Compute the block dump and the formatted digest for one request.

    This is what the worker replies with, computed on the calling thread.

    Args:
        algorithm: Which SHA-2 variant to use
        text: Input text (UTF-8 encoded before hashing)

    Returns:
        (hex_text, hash_text)
    """
    blocks, hex_text = _preprocess_request(algorithm, text)
    return hex_text, format_digest(hash_blocks(blocks, algorithm.variant))


# ============================================================================
# Worker
# ============================================================================

class HashWorker:
    """
    Background hashing thread.

    Example:
        >>> with HashWorker() as worker:
        ...     worker.submit(Algorithm.SHA256, "abc")
        ...     hex_msg = worker.get(timeout=5)
        ...     hash_msg = worker.get(timeout=5)
    """

    def __init__(self, event_logger: Optional[EventLogger] = None):
        self._requests: "queue.Queue[Optional[Tuple[Algorithm, str]]]" = queue.Queue()
        self._replies: "queue.Queue[WorkerMessage]" = queue.Queue()
        self._event_logger = event_logger
        self._thread: Optional[threading.Thread] = None
        # Set once no further requests will be served (stop() or a failure)
        self._stopped = threading.Event()
        self._closed = False

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the background thread."""
        if self._closed or self._stopped.is_set():
            raise RuntimeError("Worker has been stopped and cannot be restarted")
        if self.running:
            return
        self._thread = threading.Thread(
            target=self._run, name="sha2kit-hash-worker", daemon=True
        )
        self._thread.start()
        logger.debug("Hash worker started")
        if self._event_logger is not None:
            self._event_logger.log_worker(started=True)

    def stop(self, timeout: Optional[float] = None) -> None:
        """
        Stop the worker after the in-flight request (if any) finishes.

        Requests still queued behind the stop are dropped.
        """
        if self._closed:
            return
        self._closed = True
        self._stopped.set()
        self._requests.put(None)
        if self._thread is not None:
            self._thread.join(timeout)
        logger.debug("Hash worker stopped")
        if self._event_logger is not None:
            self._event_logger.log_worker(started=False)

    def submit(self, algorithm: Algorithm, text: str) -> None:
        """
        Queue a hash request.

        Surrounding whitespace is stripped from the text before hashing.

        Raises:
            RuntimeError: If the worker is not running
        """
        if self._stopped.is_set() or not self.running:
            raise RuntimeError("Worker not running. Call start() first.")
        text = text.strip()
        if self._event_logger is not None:
            self._event_logger.log_request(str(algorithm), text)
        self._requests.put((algorithm, text))

    def get(self, timeout: Optional[float] = None) -> WorkerMessage:
        """
        Wait for the next reply.

        Raises:
            queue.Empty: If no reply arrives within the timeout
        """
        return self._replies.get(timeout=timeout)

    def poll(self) -> Optional[WorkerMessage]:
        """Return the next reply if one is ready, without blocking."""
        try:
            return self._replies.get_nowait()
        except queue.Empty:
            return None

    def _run(self) -> None:
        while not self._stopped.is_set():
            try:
                request = self._requests.get(timeout=WORKER_POLL_INTERVAL)
            except queue.Empty:
                continue
            if request is None or self._stopped.is_set():
                break
            self._handle(*request)

    def _handle(self, algorithm: Algorithm, text: str) -> None:
        try:
            blocks, hex_text = _preprocess_request(algorithm, text)
            self._replies.put(WorkerMessage(MessageKind.HEX, algorithm, hex_text))
            result = hash_blocks(blocks, algorithm.variant)
        except Exception as e:
            # A failing computation is a bug in the engine; stop serving.
            self._stopped.set()
            logger.exception("%s computation failed", algorithm)
            if self._event_logger is not None:
                self._event_logger.log_result(str(algorithm), error=str(e))
            self._replies.put(WorkerMessage(MessageKind.ERROR, algorithm, str(e)))
            return

        if self._event_logger is not None:
            self._event_logger.log_result(
                str(algorithm), blocks=len(blocks), digest_hex=result.hex()
            )
        self._replies.put(WorkerMessage(MessageKind.HASH, algorithm, format_digest(result)))

    def __enter__(self) -> 'HashWorker':
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
