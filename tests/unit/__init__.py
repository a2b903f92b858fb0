"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and serialization
    - chat/stream: Line splitting, decoding and fragment extraction
    - chat/client: Request shape and transport failures
    - chat/session: Turn flow, guard flag and fallback handling

HTTP goes through httpx.MockTransport. Leverages pytest-check for multiple
assertions per test.
"""
