"""Exception hierarchy for signalhound."""

from __future__ import annotations


class SignalHoundError(Exception):
    """Base exception for all signalhound errors."""


class ConfigError(SignalHoundError):
    """Configuration loading or validation failure."""


class ProviderError(SignalHoundError):
    """Base failure talking to the project board service."""


class AuthenticationError(ProviderError):
    """A GitHub token could not be resolved."""


class ClientUnavailableError(ProviderError):
    """No authenticated transport is configured."""


class GraphQLResponseError(ProviderError):
    """The GraphQL payload carried errors or no data."""

    def __init__(self, message: str, *, errors: list[object] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


class RemoteQueryError(ProviderError):
    """A read query against the project failed."""

    def __init__(self, message: str, *, operation: str) -> None:
        super().__init__(message)
        self.operation = operation


class RemoteMutationError(ProviderError):
    """A write mutation against the project failed."""

    def __init__(self, message: str, *, operation: str) -> None:
        super().__init__(message)
        self.operation = operation


class MissingRequiredFieldError(SignalHoundError):
    """A project field or option required by the operation could not be resolved."""

    def __init__(self, message: str, *, role: str) -> None:
        super().__init__(message)
        self.role = role
