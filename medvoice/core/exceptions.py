"""
Error taxonomy for the chat pipeline.

Every error is surfaced to the caller as HTTP 500 with ``{"error": message}``;
the subclasses only exist so callers and logs can tell the failures apart.
"""


class ChatError(Exception):
    """Base class for failures while handling a chat request."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyInputError(ChatError):
    """Neither a query nor an image was supplied."""

    def __init__(self, message: str = "Empty message"):
        super().__init__(message)


class ModelProviderError(ChatError):
    """The generative model call failed or returned no text."""


class SearchProviderError(ChatError):
    """The web search call did not succeed."""


class UnexpectedError(ChatError):
    """Malformed payloads and any other unanticipated failure."""
