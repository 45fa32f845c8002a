"""Provider-specific transpiler implementations."""

from ollama_wire.interface.transpilers.ollama import (
    OllamaTranspiler,
    convert_to_ollama_chat_messages,
)

__all__ = ["OllamaTranspiler", "convert_to_ollama_chat_messages"]
