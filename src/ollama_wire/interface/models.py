"""Vendor-neutral prompt schema: the input side of the Ollama transpiler.

A prompt is an ordered list of role-tagged messages. Each message carries
either a plain string or a list of typed content parts; both messages and
parts are discriminated unions so the transpiler dispatches on the tag.
Field names are snake_case in Python and accept their camelCase aliases
(``mimeType``, ``toolCallId``, ...) so prompts decoded from JSON validate
as-is.
"""

from typing import Annotated, Any, Literal, get_args

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

ImageDetail = Literal["low", "high", "auto"]

# Key under which Ollama-specific part options live in ``provider_metadata``.
PROVIDER_METADATA_KEY = "ollama"


def _url_or_base64(value: Any) -> Any:
    """Promote URL strings to ``AnyUrl``; other strings stay base64 data."""
    # The base64 alphabet has no colon, so a string with a scheme is a URL.
    if isinstance(value, str) and ":" in value:
        return AnyUrl(value)
    return value


class _PromptModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ---------------------------------------------------------------------------
# Content Parts
# ---------------------------------------------------------------------------


class TextPart(_PromptModel):
    """Plain text content part."""

    type: Literal["text"] = "text"
    text: str


class ImagePart(_PromptModel):
    """Image content part: raw bytes, a base64 string, or a URL reference."""

    type: Literal["image"] = "image"
    image: AnyUrl | bytes | str
    mime_type: str | None = None
    provider_metadata: dict[str, dict[str, Any]] | None = None

    promote_url = field_validator("image", mode="before")(_url_or_base64)

    @field_validator("provider_metadata")
    @classmethod
    def check_image_detail(
        cls, value: dict[str, dict[str, Any]] | None
    ) -> dict[str, dict[str, Any]] | None:
        detail = (value or {}).get(PROVIDER_METADATA_KEY, {}).get("imageDetail")
        if detail is not None and detail not in get_args(ImageDetail):
            raise ValueError(f"imageDetail must be one of {get_args(ImageDetail)}, got {detail!r}")
        return value

    @property
    def image_detail(self) -> ImageDetail | None:
        """The Ollama image detail hint, if one was supplied."""
        options = (self.provider_metadata or {}).get(PROVIDER_METADATA_KEY, {})
        detail: ImageDetail | None = options.get("imageDetail")
        return detail


class FilePart(_PromptModel):
    """File content part.

    ``data`` is a base64 string, raw bytes, or a URL reference. Only inline
    audio is representable on the wire.
    """

    type: Literal["file"] = "file"
    data: str | bytes | AnyUrl
    mime_type: str

    promote_url = field_validator("data", mode="before")(_url_or_base64)


class ReasoningPart(_PromptModel):
    """Hidden chain-of-thought text authored by the assistant."""

    type: Literal["reasoning"] = "reasoning"
    text: str


class ToolCallPart(_PromptModel):
    """A tool invocation emitted by the assistant."""

    type: Literal["tool-call"] = "tool-call"
    tool_call_id: str
    tool_name: str
    args: Any = None


class ToolResultPart(_PromptModel):
    """The result of executing a tool, sent back in a tool message."""

    type: Literal["tool-result"] = "tool-result"
    tool_call_id: str
    tool_name: str
    result: Any = None


UserContentPart = Annotated[TextPart | ImagePart | FilePart, Field(discriminator="type")]
AssistantContentPart = Annotated[
    TextPart | ReasoningPart | ToolCallPart, Field(discriminator="type")
]


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


class SystemMessage(_PromptModel):
    role: Literal["system"] = "system"
    content: str


class UserMessage(_PromptModel):
    role: Literal["user"] = "user"
    content: str | list[UserContentPart]

    @classmethod
    def from_text(cls, text: str) -> "UserMessage":
        """Create a user message with a single text part."""
        return cls(content=[TextPart(text=text)])


class AssistantMessage(_PromptModel):
    role: Literal["assistant"] = "assistant"
    content: list[AssistantContentPart] = []


class ToolMessage(_PromptModel):
    role: Literal["tool"] = "tool"
    content: list[ToolResultPart] = []


Message = Annotated[
    SystemMessage | UserMessage | AssistantMessage | ToolMessage,
    Field(discriminator="role"),
]

Prompt = list[Message]

prompt_adapter: TypeAdapter[list[Message]] = TypeAdapter(Prompt)
