"""Generation service adapters."""

from .runner import GenerationClient, GenerationError, GenerationRequest

__all__ = ["GenerationClient", "GenerationError", "GenerationRequest"]
