"""Integration tests for components working together as a system.

Coverage:
    - Full chat turns against a streaming FastAPI backend
    - Host API endpoints with real HTTP requests

Uses httpx.ASGITransport, so no external services are required.
"""
