"""Tests for OpenTelemetry tracing helpers."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from opentelemetry import trace

from ollama_wire.utils.telemetry import (
    ATTR_MESSAGES_INPUT,
    ATTR_MESSAGES_OUTPUT,
    ATTR_SYSTEM_MESSAGE_MODE,
    _INSTRUMENTATION_NAME,
    get_tracer,
)


class TestGetTracer:
    def test_returns_tracer(self) -> None:
        tracer = get_tracer("test.module")
        assert isinstance(tracer, trace.Tracer)

    def test_default_name(self) -> None:
        tracer = get_tracer()
        assert isinstance(tracer, trace.Tracer)

    def test_noop_span(self) -> None:
        """Without SDK configured, spans should be no-ops."""
        tracer = get_tracer("test.noop")
        with tracer.start_as_current_span("test") as span:
            span.set_attribute("key", "value")


class TestConversionSpan:
    def test_span_records_message_counts(self) -> None:
        try:
            from opentelemetry.sdk.trace import TracerProvider
            from opentelemetry.sdk.trace.export import SimpleSpanProcessor
            from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
                InMemorySpanExporter,
            )
        except ImportError:
            pytest.skip("opentelemetry-sdk not installed")

        from ollama_wire.interface.models import SystemMessage, UserMessage
        from ollama_wire.interface.transpilers import ollama as ollama_module

        exporter = InMemorySpanExporter()
        provider = TracerProvider()
        provider.add_span_processor(SimpleSpanProcessor(exporter))

        with patch.object(ollama_module, "_tracer", provider.get_tracer("test")):
            ollama_module.convert_to_ollama_chat_messages(
                [SystemMessage(content="x"), UserMessage.from_text("hi")],
                system_message_mode="remove",
            )

        (span,) = exporter.get_finished_spans()
        assert span.name == "ollama.convert_messages"
        assert span.attributes is not None
        assert span.attributes[ATTR_MESSAGES_INPUT] == 2
        assert span.attributes[ATTR_MESSAGES_OUTPUT] == 1
        assert span.attributes[ATTR_SYSTEM_MESSAGE_MODE] == "remove"


class TestAttributeConstants:
    def test_constants_are_strings(self) -> None:
        assert isinstance(ATTR_MESSAGES_INPUT, str)
        assert ATTR_MESSAGES_INPUT.startswith("ollama_wire.")

    def test_instrumentation_name(self) -> None:
        assert _INSTRUMENTATION_NAME == "ollama_wire"
