#!/usr/bin/env python
"""
SHA-2 Live Demo

Terminal front end for the hash worker:
- Pick an algorithm (SHA-256, SHA-224, SHA-512, SHA-384)
- Enter text
- See the padded blocks [HEX] and the digest [OUT]

Hashing runs on a background thread, the way a GUI would use it.

Usage:
    python live_demo.py                  # interactive
    python live_demo.py sha512 "abc"     # one-shot
    python live_demo.py --selftest       # check against reference digests
"""

import logging
import queue
import sys

from sha2kit.integration.event_logger import EventLogger, HashEvent
from sha2kit.integration.worker import Algorithm, HashWorker, MessageKind, LOADING_TEXT
from sha2kit.selftest import run_selftest


REPLY_TIMEOUT = 30.0


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def print_event(event: HashEvent):
    """Echo worker events when running verbose"""
    print(f"  (event) {event}")


def choose_algorithm(current: Algorithm) -> Algorithm:
    """Prompt for an algorithm, keeping the current one on empty input"""
    options = list(Algorithm)
    for i, algorithm in enumerate(options, 1):
        marker = "*" if algorithm == current else " "
        print(f"  {marker} [{i}] {algorithm}")
    choice = input("  Algorithm (number or name, ENTER to keep): ").strip()
    if not choice:
        return current
    if choice.isdigit() and 1 <= int(choice) <= len(options):
        return options[int(choice) - 1]
    try:
        return Algorithm.from_name(choice)
    except ValueError as e:
        print(f"  [!] {e}")
        return current


def run_request(worker: HashWorker, algorithm: Algorithm, text: str) -> bool:
    """Submit one request and print both replies. Returns False on failure."""
    worker.submit(algorithm, text)
    print(f"\n  [HEX]: {LOADING_TEXT}")
    print(f"  [OUT]: {LOADING_TEXT}")

    while True:
        try:
            message = worker.get(timeout=REPLY_TIMEOUT)
        except queue.Empty:
            print("  [!] No reply from worker")
            return False

        if message.kind == MessageKind.HEX:
            print(f"\n  [HEX]: {message.text}")
        elif message.kind == MessageKind.HASH:
            print(f"\n  [OUT]: {message.text}")
            return True
        else:
            print(f"\n  [!] {message.algorithm} failed: {message.text}")
            return False


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    verbose = "-v" in argv
    argv = [a for a in argv if a != "-v"]

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    if "--selftest" in argv:
        return 0 if run_selftest() else 1

    event_logger = EventLogger()
    if verbose:
        event_logger.add_callback(print_event)

    with HashWorker(event_logger=event_logger) as worker:
        if argv:
            try:
                algorithm = Algorithm.from_name(argv[0])
            except ValueError as e:
                print(f"error: {e}", file=sys.stderr)
                return 2
            text = " ".join(argv[1:])
            return 0 if run_request(worker, algorithm, text) else 1

        print_header("SHA-2 LIVE DEMO")
        print("  Empty input changes algorithm, Ctrl-D quits.")

        algorithm = Algorithm.SHA256
        while True:
            try:
                text = input(f"\n  [IN] ({algorithm}): ")
            except EOFError:
                print()
                break
            if not text.strip():
                algorithm = choose_algorithm(algorithm)
                continue
            if not run_request(worker, algorithm, text):
                return 1

    recorded = len(event_logger.events())
    print_header(f"DONE ({recorded} events recorded)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
