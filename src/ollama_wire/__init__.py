"""ollama-wire: vendor-neutral chat prompts to Ollama chat-completion payloads."""

from __future__ import annotations

from ollama_wire.errors import OllamaWireError, UnsupportedFunctionalityError
from ollama_wire.interface.logprobs import map_ollama_completion_logprobs
from ollama_wire.interface.transpilers.ollama import (
    OllamaTranspiler,
    convert_to_ollama_chat_messages,
)

__version__ = "0.1.0"

__all__ = [
    "OllamaTranspiler",
    "OllamaWireError",
    "UnsupportedFunctionalityError",
    "convert_to_ollama_chat_messages",
    "map_ollama_completion_logprobs",
]
