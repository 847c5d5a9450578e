# SHA2Kit Test Suite
"""
Test suite including:
- Unit tests for the SHA-2 core
- Printer tests
- Worker and event log integration tests

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
