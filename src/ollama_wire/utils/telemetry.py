"""OpenTelemetry tracing helpers for ollama-wire.

The converters only depend on the OpenTelemetry API. Spans are no-ops until
the application installs an SDK tracer provider (``pip install
ollama-wire[otel]`` and ``trace.set_tracer_provider(...)``); this package
never configures exporters itself.
"""

from __future__ import annotations

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Semantic attribute keys
# ---------------------------------------------------------------------------

ATTR_MESSAGES_INPUT = "ollama_wire.messages.input"
ATTR_MESSAGES_OUTPUT = "ollama_wire.messages.output"
ATTR_SYSTEM_MESSAGE_MODE = "ollama_wire.system_message_mode"
ATTR_LEGACY_FUNCTION_CALLING = "ollama_wire.legacy_function_calling"

_INSTRUMENTATION_NAME = "ollama_wire"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*.

    If no SDK tracer provider has been installed the returned tracer is a
    no-op.
    """
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)
