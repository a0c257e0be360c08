"""Test package for Lexora.

Structure:
    - unit/: Agent adapter, configuration, UI state, theme, and client tests
    - integration/: Relay endpoint tests through the ASGI app

The completion provider is replaced by a fake everywhere except the live
tests, which need a running Ollama server and LEXORA_LIVE_LLM=1.
Leverages pytest with pytest-check for soft assertions.
"""
