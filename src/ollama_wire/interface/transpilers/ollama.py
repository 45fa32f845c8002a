"""Ollama transpiler: vendor-neutral prompt to Ollama chat messages.

Key differences from the vendor-neutral prompt:
- System prompts may be renamed to ``developer`` or dropped entirely.
- A user message with a single text part collapses to string content.
- Images travel as ``data:`` URLs; audio files as base64 ``input_audio``.
- Reasoning is split out of the assistant text into ``thinking``.
- Tool arguments and results are JSON strings, either as ``tool_calls`` /
  ``tool`` messages or, in legacy mode, ``function_call`` / ``function``.
"""

import base64
import json
import logging
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import AnyUrl

from ollama_wire.errors import UnsupportedFunctionalityError
from ollama_wire.interface.config import ConversionConfig, SystemMessageMode
from ollama_wire.interface.models import (
    AssistantMessage,
    FilePart,
    ImagePart,
    Message,
    SystemMessage,
    ToolMessage,
    UserContentPart,
    UserMessage,
    prompt_adapter,
)
from ollama_wire.utils.telemetry import (
    ATTR_LEGACY_FUNCTION_CALLING,
    ATTR_MESSAGES_INPUT,
    ATTR_MESSAGES_OUTPUT,
    ATTR_SYSTEM_MESSAGE_MODE,
    get_tracer,
)

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)

_AUDIO_FORMATS = {
    "audio/wav": "wav",
    "audio/mp3": "mp3",
    "audio/mpeg": "mp3",
}

_DEFAULT_IMAGE_MIME_TYPE = "image/jpeg"


class OllamaTranspiler:
    """Converts a vendor-neutral prompt to Ollama's chat completion messages.

    Usage::

        transpiler = OllamaTranspiler(ConversionConfig(system_message_mode="developer"))
        payload = transpiler.to_provider(prompt)
    """

    def __init__(self, config: ConversionConfig | None = None) -> None:
        self.config = config or ConversionConfig()
        self._handlers: dict[str, Callable[[Any], list[dict[str, Any]]]] = {
            "system": self._system_to_ollama,
            "user": self._user_to_ollama,
            "assistant": self._assistant_to_ollama,
            "tool": self._tool_to_ollama,
        }

    def to_provider(self, prompt: Sequence[Message | dict[str, Any]]) -> dict[str, Any]:
        """Convert a prompt to an Ollama request fragment: ``{"messages": [...]}``."""
        return {"messages": self.convert(prompt)}

    def convert(self, prompt: Sequence[Message | dict[str, Any]]) -> list[dict[str, Any]]:
        """Convert a prompt to a list of Ollama chat messages.

        Raw dicts are validated against the prompt schema first. Raises
        :class:`UnsupportedFunctionalityError` on the first construct the
        wire format cannot carry; nothing is returned in that case.
        """
        messages = prompt_adapter.validate_python(list(prompt))

        with _tracer.start_as_current_span("ollama.convert_messages") as span:
            span.set_attribute(ATTR_MESSAGES_INPUT, len(messages))
            span.set_attribute(ATTR_SYSTEM_MESSAGE_MODE, self.config.system_message_mode)
            span.set_attribute(
                ATTR_LEGACY_FUNCTION_CALLING, self.config.use_legacy_function_calling
            )

            result: list[dict[str, Any]] = []
            for msg in messages:
                result.extend(self._handlers[msg.role](msg))

            span.set_attribute(ATTR_MESSAGES_OUTPUT, len(result))

        logger.debug("Converted %d prompt messages to %d Ollama messages", len(messages), len(result))
        return result

    # -- per-role conversion --------------------------------------------------

    def _system_to_ollama(self, msg: SystemMessage) -> list[dict[str, Any]]:
        mode = self.config.system_message_mode
        if mode == "remove":
            return []
        if mode == "developer":
            return [{"role": "developer", "content": msg.content}]
        return [{"role": "system", "content": msg.content}]

    def _user_to_ollama(self, msg: UserMessage) -> list[dict[str, Any]]:
        if isinstance(msg.content, str):
            return [{"role": "user", "content": msg.content}]

        if len(msg.content) == 1 and msg.content[0].type == "text":
            return [{"role": "user", "content": msg.content[0].text}]

        return [
            {
                "role": "user",
                "content": [self._user_part_to_ollama(part) for part in msg.content],
            }
        ]

    def _assistant_to_ollama(self, msg: AssistantMessage) -> list[dict[str, Any]]:
        text = ""
        reasoning: str | None = None
        tool_calls: list[dict[str, Any]] = []

        for part in msg.content:
            if part.type == "text":
                text += part.text
            elif part.type == "reasoning":
                reasoning = (reasoning or "") + part.text
            elif part.type == "tool-call":
                tool_calls.append(
                    {
                        "type": "function",
                        "id": part.tool_call_id,
                        "function": {
                            "name": part.tool_name,
                            "arguments": _serialize_json(part.args),
                        },
                    }
                )

        result: dict[str, Any] = {"role": "assistant", "content": text}
        if reasoning is not None:
            result["thinking"] = reasoning

        if tool_calls and self.config.use_legacy_function_calling:
            if len(tool_calls) > 1:
                logger.warning(
                    "Legacy function calling supports one call per message; dropping %d of %d tool calls",
                    len(tool_calls) - 1,
                    len(tool_calls),
                )
            result["function_call"] = tool_calls[0]["function"]
        elif tool_calls:
            result["tool_calls"] = tool_calls

        return [result]

    def _tool_to_ollama(self, msg: ToolMessage) -> list[dict[str, Any]]:
        if self.config.use_legacy_function_calling:
            return [
                {
                    "role": "function",
                    "content": _serialize_json(part.result),
                    "name": part.tool_name,
                }
                for part in msg.content
            ]
        return [
            {
                "role": "tool",
                "content": _serialize_json(part.result),
                "tool_call_id": part.tool_call_id,
            }
            for part in msg.content
        ]

    # -- user content parts -----------------------------------------------------

    def _user_part_to_ollama(self, part: UserContentPart) -> dict[str, Any]:
        if part.type == "text":
            return {"type": "text", "text": part.text}
        if part.type == "image":
            return _image_to_ollama(part)
        return _file_to_ollama(part)


def convert_to_ollama_chat_messages(
    prompt: Sequence[Message | dict[str, Any]],
    *,
    system_message_mode: SystemMessageMode = "system",
    use_legacy_function_calling: bool = False,
) -> list[dict[str, Any]]:
    """Convert a vendor-neutral prompt to Ollama chat messages.

    Args:
        prompt: Ordered prompt messages, as models or raw dicts.
        system_message_mode: ``system`` (forward), ``developer`` (rename) or
            ``remove`` (drop) for system messages.
        use_legacy_function_calling: Render tool calls as ``function_call``
            and tool results as ``function`` messages.

    Returns:
        The wire-format messages, in prompt order.
    """
    config = ConversionConfig(
        system_message_mode=system_message_mode,
        use_legacy_function_calling=use_legacy_function_calling,
    )
    return OllamaTranspiler(config).convert(prompt)


def _image_to_ollama(part: ImagePart) -> dict[str, Any]:
    if isinstance(part.image, AnyUrl):
        url = str(part.image)
    else:
        data = part.image if isinstance(part.image, str) else _to_base64(part.image)
        url = f"data:{part.mime_type or _DEFAULT_IMAGE_MIME_TYPE};base64,{data}"

    image_url: dict[str, Any] = {"url": url}
    detail = part.image_detail
    if detail is not None:
        image_url["detail"] = detail
    return {"type": "image_url", "image_url": image_url}


def _file_to_ollama(part: FilePart) -> dict[str, Any]:
    if not isinstance(part.data, str | bytes):
        raise UnsupportedFunctionalityError("File content parts with URL data")

    audio_format = _AUDIO_FORMATS.get(part.mime_type)
    if audio_format is None:
        raise UnsupportedFunctionalityError(
            f"File content part type {part.mime_type} in user messages"
        )

    data = part.data if isinstance(part.data, str) else _to_base64(part.data)
    return {"type": "input_audio", "input_audio": {"data": data, "format": audio_format}}


def _to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _serialize_json(value: Any) -> str:
    """Serialize tool arguments/results as compact JSON.

    Non-finite floats raise ``ValueError``; they have no JSON representation.
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
