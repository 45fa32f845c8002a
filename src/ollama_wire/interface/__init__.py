"""Prompt schema, conversion config, and log-probability mapping."""

from ollama_wire.interface.config import ConversionConfig, SystemMessageMode
from ollama_wire.interface.logprobs import (
    LogProb,
    OllamaCompletionLogProbs,
    TopLogProb,
    map_ollama_completion_logprobs,
)
from ollama_wire.interface.models import (
    AssistantMessage,
    FilePart,
    ImagePart,
    Message,
    Prompt,
    ReasoningPart,
    SystemMessage,
    TextPart,
    ToolCallPart,
    ToolMessage,
    ToolResultPart,
    UserMessage,
)

__all__ = [
    "AssistantMessage",
    "ConversionConfig",
    "FilePart",
    "ImagePart",
    "LogProb",
    "Message",
    "OllamaCompletionLogProbs",
    "Prompt",
    "ReasoningPart",
    "SystemMessage",
    "SystemMessageMode",
    "TextPart",
    "ToolCallPart",
    "ToolMessage",
    "ToolResultPart",
    "TopLogProb",
    "UserMessage",
    "map_ollama_completion_logprobs",
]
