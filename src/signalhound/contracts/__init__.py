"""Public contracts for signalhound."""

from signalhound.contracts.board import ProjectBoard
from signalhound.contracts.config import BoardConfig
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
from signalhound.contracts.fields import FieldInfo, FieldKind, FieldResolution, FieldRole, FieldSelection
from signalhound.contracts.issue import DraftItemResult, FieldUpdateOutcome, Issue, UpdateStatus

__all__ = [
    "AuthenticationError",
    "BoardConfig",
    "ClientUnavailableError",
    "ConfigError",
    "DraftItemResult",
    "FieldInfo",
    "FieldKind",
    "FieldResolution",
    "FieldRole",
    "FieldSelection",
    "FieldUpdateOutcome",
    "GraphQLResponseError",
    "Issue",
    "MissingRequiredFieldError",
    "ProjectBoard",
    "ProviderError",
    "RemoteMutationError",
    "RemoteQueryError",
    "SignalHoundError",
    "UpdateStatus",
]
