"""Tests for the conversion error hierarchy."""

import pytest

from ollama_wire.errors import OllamaWireError, UnsupportedFunctionalityError


class TestErrorHierarchy:
    def test_unsupported_is_ollama_wire_error(self) -> None:
        assert issubclass(UnsupportedFunctionalityError, OllamaWireError)


class TestUnsupportedFunctionalityError:
    def test_attributes(self) -> None:
        err = UnsupportedFunctionalityError("File content parts with URL data")
        assert err.functionality == "File content parts with URL data"

    def test_message(self) -> None:
        err = UnsupportedFunctionalityError("Streaming")
        assert str(err) == "'Streaming' functionality not supported."

    def test_catchable_as_base(self) -> None:
        with pytest.raises(OllamaWireError):
            raise UnsupportedFunctionalityError("anything")
