"""Request/response schemas shared by the client and its tests."""

from src.models.schemas import ChatRequest, Message, Role, StreamFragment

__all__ = ["ChatRequest", "Message", "Role", "StreamFragment"]
