"""
Integration tests for SHA2Kit.

Tests the background worker, the event log and the demo front end
working together with the core.
"""

import hashlib
import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

import live_demo
from sha2kit.core.sha2 import sha256, sha512
from sha2kit.integration import worker as worker_module
from sha2kit.integration.event_logger import (
    EventLogger, EventType, HashEvent, get_message_fingerprint,
)
from sha2kit.integration.worker import (
    Algorithm, HashWorker, MessageKind, hash_request,
)
import sha2kit.integration
from sha2kit.selftest import (
    BOUNDARY_LENGTHS, check_reference, check_vectors, reference_digest,
)
from sha2kit.core.constants import SHA384, get_variant


TIMEOUT = 10

ABC_256_TEXT = (
    "ba7816bf 8f01cfea 414140de 5dae2223 "
    "b00361a3 96177a9c b410ff61 f20015ad"
)


class TestAlgorithm:
    """Tests for algorithm selection."""

    def test_display_names(self):
        assert str(Algorithm.SHA224) == "SHA-224"
        assert [str(a) for a in Algorithm] == ["SHA-256", "SHA-224", "SHA-512", "SHA-384"]

    def test_from_name(self):
        """Names parse regardless of case and dashes."""
        assert Algorithm.from_name("sha-512") is Algorithm.SHA512
        assert Algorithm.from_name("SHA384") is Algorithm.SHA384

    def test_from_name_matches_variant_lookup(self):
        """Every spelling get_variant accepts selects the same algorithm."""
        for name in ("sha_384", " Sha-224 ", "sha256", "SHA-512"):
            assert Algorithm.from_name(name).variant is get_variant(name)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown algorithm"):
            Algorithm.from_name("md5")

    def test_variant_mapping(self):
        """Each algorithm maps to the variant of the same name."""
        for algorithm in Algorithm:
            assert algorithm.variant.name == algorithm.value


class TestHashRequest:
    """Tests for the synchronous request computation."""

    def test_sha256_abc(self):
        hex_text, hash_text = hash_request(Algorithm.SHA256, "abc")
        assert hex_text.startswith("61626380 ")
        assert hash_text == ABC_256_TEXT

    def test_sha512_uses_large_blocks(self):
        """SHA-512 dumps one 1024-bit block for short input."""
        hex_text, _ = hash_request(Algorithm.SHA512, "abc")
        assert len(hex_text.split()) == 32

    def test_engine_errors_propagate(self, monkeypatch):
        """Synchronous requests raise engine failures to the caller."""
        def broken(blocks, variant):
            raise AssertionError("engine bug")

        monkeypatch.setattr(worker_module, "hash_blocks", broken)
        with pytest.raises(AssertionError, match="engine bug"):
            hash_request(Algorithm.SHA256, "abc")


class TestHashWorker:
    """Tests for the background worker."""

    def test_hex_then_hash(self):
        """Each request yields the block dump, then the digest."""
        with HashWorker() as worker:
            worker.submit(Algorithm.SHA256, "abc")
            first = worker.get(timeout=TIMEOUT)
            second = worker.get(timeout=TIMEOUT)

        assert first.kind == MessageKind.HEX
        assert second.kind == MessageKind.HASH
        assert second.text == ABC_256_TEXT
        assert (first.text, second.text) == hash_request(Algorithm.SHA256, "abc")

    def test_input_is_stripped(self):
        """Surrounding whitespace is trimmed before hashing."""
        with HashWorker() as worker:
            worker.submit(Algorithm.SHA256, "  abc \n")
            worker.get(timeout=TIMEOUT)
            assert worker.get(timeout=TIMEOUT).text == ABC_256_TEXT

    def test_requests_served_in_order(self):
        """Replies come back in submission order."""
        requests = [
            (Algorithm.SHA256, "one"),
            (Algorithm.SHA384, "two"),
            (Algorithm.SHA224, ""),
            (Algorithm.SHA512, "x" * 300),
        ]
        with HashWorker() as worker:
            for algorithm, text in requests:
                worker.submit(algorithm, text)
            replies = [worker.get(timeout=TIMEOUT) for _ in range(2 * len(requests))]

        for i, (algorithm, text) in enumerate(requests):
            hex_msg, hash_msg = replies[2 * i], replies[2 * i + 1]
            assert hex_msg.algorithm is algorithm
            assert (hex_msg.text, hash_msg.text) == hash_request(algorithm, text)

    def test_poll_without_reply(self):
        """poll() returns None when nothing is ready."""
        with HashWorker() as worker:
            assert worker.poll() is None

    def test_submit_before_start(self):
        worker = HashWorker()
        with pytest.raises(RuntimeError):
            worker.submit(Algorithm.SHA256, "abc")

    def test_submit_after_stop(self):
        worker = HashWorker()
        worker.start()
        worker.stop(timeout=TIMEOUT)
        assert not worker.running
        with pytest.raises(RuntimeError):
            worker.submit(Algorithm.SHA256, "abc")
        with pytest.raises(RuntimeError):
            worker.start()

    def test_stop_is_idempotent(self):
        worker = HashWorker()
        worker.start()
        worker.stop(timeout=TIMEOUT)
        worker.stop(timeout=TIMEOUT)

    def test_engine_failure_stops_worker(self, monkeypatch, caplog):
        """A failing computation is reported once and the worker stops."""
        def broken(blocks, variant):
            raise AssertionError("engine bug")

        monkeypatch.setattr(worker_module, "hash_blocks", broken)
        log = EventLogger()
        with caplog.at_level(logging.ERROR, logger=worker_module.__name__):
            with HashWorker(event_logger=log) as worker:
                worker.submit(Algorithm.SHA256, "abc")
                assert worker.get(timeout=TIMEOUT).kind == MessageKind.HEX
                error = worker.get(timeout=TIMEOUT)
                with pytest.raises(RuntimeError):
                    worker.submit(Algorithm.SHA256, "abc")

        assert error.kind == MessageKind.ERROR
        assert "engine bug" in error.text
        assert "computation failed" in caplog.text
        failed = log.events(EventType.HASH_FAILED)
        assert len(failed) == 1
        assert failed[0].details["error"] == "engine bug"


class TestWorkerEvents:
    """Tests for worker activity recorded in the event log."""

    def test_event_sequence(self):
        """Start, request, completion and stop are all recorded."""
        log = EventLogger()
        with HashWorker(event_logger=log) as worker:
            worker.submit(Algorithm.SHA512, "abc")
            worker.get(timeout=TIMEOUT)
            worker.get(timeout=TIMEOUT)

        types = [e.event_type for e in log.events()]
        assert types == [
            EventType.WORKER_START,
            EventType.HASH_REQUESTED,
            EventType.HASH_COMPLETED,
            EventType.WORKER_STOP,
        ]
        completed = log.events(EventType.HASH_COMPLETED)[0]
        assert completed.algorithm == "SHA-512"
        assert completed.details["blocks"] == 1
        assert completed.details["digest"] == sha512(b"abc").hex()[:16]

    def test_request_does_not_store_text(self):
        """Requests are identified by fingerprint, not content."""
        log = EventLogger()
        event = log.log_request("SHA-256", "my secret input")
        assert event.details["input_id"] == get_message_fingerprint("my secret input")
        assert event.details["input_id"] == sha256(b"my secret input").hex()[:16]
        assert "my secret input" not in event.to_record()


class TestEventLogger:
    """Tests for the event log itself."""

    def test_record_round_trip(self):
        log = EventLogger()
        event = log.log_result("SHA-224", blocks=2, digest_hex="ab" * 28)
        parsed = HashEvent.from_record(event.to_record())
        assert parsed.event_type == EventType.HASH_COMPLETED
        assert parsed.algorithm == "SHA-224"
        assert parsed.details == {"blocks": 2, "digest": "ab" * 8}

    def test_bounded_history(self):
        """Oldest events are dropped past max_events."""
        log = EventLogger(max_events=2)
        log.log_worker(started=True)
        log.log_request("SHA-256", "a")
        log.log_worker(started=False)
        assert len(log) == 2
        assert log.events()[0].event_type == EventType.HASH_REQUESTED

    def test_invalid_max_events(self):
        with pytest.raises(ValueError):
            EventLogger(max_events=0)

    def test_callbacks(self):
        """Callbacks see every event until removed."""
        seen = []
        log = EventLogger()
        log.add_callback(seen.append)
        log.log_worker(started=True)
        log.remove_callback(seen.append)
        log.log_worker(started=False)
        assert [e.event_type for e in seen] == [EventType.WORKER_START]

    def test_failing_callback_is_logged(self, caplog):
        """A broken callback does not stop the event from being recorded."""
        def broken(event):
            raise RuntimeError("display gone")

        log = EventLogger()
        log.add_callback(broken)
        with caplog.at_level(logging.ERROR):
            log.log_worker(started=True)
        assert len(log) == 1
        assert "Event callback" in caplog.text

    def test_clear(self):
        log = EventLogger()
        log.log_worker(started=True)
        log.clear()
        assert log.events() == []


class TestIndependentComputations:
    """Independent messages can be hashed concurrently."""

    def test_parallel_hashing(self):
        messages = [bytes([i]) * (i * 13) for i in range(24)]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(sha256, messages))
        assert results == [hashlib.sha256(m).digest() for m in messages]


class TestSelfTest:
    """Tests for the reference comparison helpers."""

    def test_nist_vectors(self):
        assert all(r.passed for r in check_vectors())

    def test_reference_boundaries(self):
        assert all(r.passed for r in check_reference([0, 55, 56, 111, 112], seed=b"xyz"))

    def test_reference_digest(self):
        assert reference_digest(b"abc", SHA384) == hashlib.sha384(b"abc").digest()

    def test_default_lengths(self):
        """The default length set is immutable and covers every variant."""
        assert isinstance(BOUNDARY_LENGTHS, tuple)
        results = check_reference()
        assert len(results) == 4 * len(BOUNDARY_LENGTHS)
        assert all(r.passed for r in results)


class TestLiveDemo:
    """Tests for the demo script's one-shot mode."""

    def test_one_shot(self, capsys):
        assert live_demo.main(["sha256", "abc"]) == 0
        out = capsys.readouterr().out
        assert "[HEX]: 61626380" in out
        assert f"[OUT]: {ABC_256_TEXT}" in out

    def test_unknown_algorithm(self, capsys):
        assert live_demo.main(["md5", "abc"]) == 2
        assert "Unknown algorithm" in capsys.readouterr().err


class TestIntegrationExports:
    """Tests for the package's lazy exports."""

    def test_all_names_resolve(self):
        for name in sha2kit.integration.__all__:
            assert getattr(sha2kit.integration, name) is not None

    def test_unknown_name(self):
        with pytest.raises(AttributeError):
            getattr(sha2kit.integration, "create_event_logger")
