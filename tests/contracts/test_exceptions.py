"""Tests for the signalhound exception hierarchy."""

from __future__ import annotations

from signalhound.contracts.exceptions import (
    AuthenticationError,
    ClientUnavailableError,
    ConfigError,
    GraphQLResponseError,
    MissingRequiredFieldError,
    ProviderError,
    RemoteMutationError,
    RemoteQueryError,
    SignalHoundError,
)


def test_all_exceptions_inherit_from_signalhound_error() -> None:
    for exc_type in (ConfigError, ProviderError, MissingRequiredFieldError):
        assert issubclass(exc_type, SignalHoundError)


def test_remote_failures_are_provider_errors() -> None:
    for exc_type in (
        AuthenticationError,
        ClientUnavailableError,
        GraphQLResponseError,
        RemoteQueryError,
        RemoteMutationError,
    ):
        assert issubclass(exc_type, ProviderError)


def test_missing_field_is_not_a_provider_error() -> None:
    assert not issubclass(MissingRequiredFieldError, ProviderError)


def test_structured_attributes() -> None:
    assert RemoteQueryError("x", operation="query project fields").operation == "query project fields"
    assert RemoteMutationError("x", operation="create draft issue").operation == "create draft issue"
    assert MissingRequiredFieldError("x", role="release").role == "release"
    assert GraphQLResponseError("x", errors=[{"message": "m"}]).errors == [{"message": "m"}]
    assert GraphQLResponseError("x").errors == []
