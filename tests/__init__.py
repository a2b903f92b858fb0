"""Test package for the streaming chat client.

Provides test coverage for all components with unit tests for isolated
logic and integration tests for full turns.

Structure:
    - unit/: Individual function and class tests
    - integration/: End-to-end turns against an ASGI backend
    - fakes.py: Recording view and streamed response builders

No network access. Leverages pytest with pytest-check for soft assertions.
"""
