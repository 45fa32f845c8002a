"""Shared error types for the conversion layer."""


class OllamaWireError(Exception):
    """Base error for all conversion failures."""


class UnsupportedFunctionalityError(OllamaWireError):
    """The prompt contains a construct the Ollama wire format cannot carry."""

    def __init__(self, functionality: str) -> None:
        self.functionality = functionality
        super().__init__(f"'{functionality}' functionality not supported.")
