"""Unit tests for individual components in isolation.

Coverage:
    - agent/: Configuration validation and the Agno adapter
    - ui/: Chat state transitions, theme persistence, relay client

Uses mocks for external services.
"""
