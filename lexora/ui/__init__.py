"""NiceGUI interface - thin presentation layer for chat interactions.

Responsibilities:
    - Chat message display with a pending indicator
    - Light/dark theme with per-browser persistence
    - One relay request per user turn

Contains minimal business logic. Delegates all operations to the API.
"""
