"""FastAPI host application for the chat client.

Endpoints:
    - GET /health: Service health status
    - GET /: Chat page (NiceGUI, mounted by src.main)
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
