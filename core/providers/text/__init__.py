"""Text generation providers."""

from .openai import OpenAITextProvider

__all__ = ["OpenAITextProvider"]
