"""
LLM Module

Wraps Google Gemini for structured report simplification.
The client raises on failure; callers decide how to degrade.
"""
from .gemini_client import GeminiClient, GeminiConfig, GeminiModel

__all__ = [
    "GeminiClient",
    "GeminiConfig",
    "GeminiModel",
]
