"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Chat message display with incremental streaming updates
    - Input controls disabled while a reply is streaming
    - Typing indicator and auto-scroll

Contains no chat logic. Delegates each turn to src.chat.send_turn.
"""
