"""Integration tests for the relay app working as a system.

Coverage:
    - POST /chat validation, success and failure responses
    - CORS policy for the configured UI origin
    - Conversation context sharing across requests
    - Live replies from Ollama (when LEXORA_LIVE_LLM=1)
"""
