"""
Error taxonomy for AI inference calls.
"""


class InferenceError(Exception):
    """Base class for failures of the structured inference pipeline."""


class ConfigurationError(InferenceError, ValueError):
    """Required configuration (the API credential) is missing."""


class TransportError(InferenceError):
    """The AI service could not be reached or answered with an error status."""


class DecodeError(InferenceError, ValueError):
    """
    The AI service answered, but the reply is not the expected JSON shape.

    The offending text is kept on ``raw_text`` for diagnostics.
    """

    def __init__(self, message: str, raw_text: str | None = None):
        super().__init__(message)
        self.raw_text = raw_text
