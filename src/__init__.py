"""Streaming chat client.

Sends the conversation to a chat backend and renders the newline-delimited
JSON reply as it streams in.

Components:
    - chat: conversation state, stream consumer and turn orchestration
    - api: FastAPI host application
    - ui: NiceGUI chat page
    - models: wire schemas
"""

__version__ = "0.1.0"
