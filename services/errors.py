"""Errors raised by the persona services.

Everything raised across module boundaries derives from PocketCareError so
the HTTP layer can catch one type and map it to a status code.
"""


class PocketCareError(Exception):
    """Base class for service errors."""

    def __init__(self, message: str, **extra):
        self.message = message
        self.extra = extra
        super().__init__(message)


class ConfigurationError(PocketCareError):
    """Required configuration (e.g. the provider credential) is missing."""


class UnknownPersonaError(PocketCareError):
    """No persona is registered under the requested identifier."""


class InvalidMessageError(PocketCareError):
    """The user message is missing or empty."""


class ModelProviderError(PocketCareError):
    """The model call failed: network, provider or malformed output."""


class EmptyReplyError(ModelProviderError):
    """The provider stream completed without producing any text."""
