"""Conversion configuration: how system prompts and tool calls are rendered."""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

SystemMessageMode = Literal["system", "developer", "remove"]


class ConversionConfig(BaseModel):
    """Options for converting a prompt to Ollama chat messages.

    ``system_message_mode`` controls system prompts: forwarded as ``system``,
    renamed to ``developer``, or removed. ``use_legacy_function_calling``
    switches tool calls to the single-call ``function_call`` convention.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    system_message_mode: SystemMessageMode = "system"
    use_legacy_function_calling: bool = False
