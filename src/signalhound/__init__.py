"""Public API surface for signalhound."""

from signalhound.auth import create_token_resolver
from signalhound.board import ProjectManager, compare_versions, extract_version
from signalhound.contracts import (
    AuthenticationError,
    BoardConfig,
    ClientUnavailableError,
    ConfigError,
    DraftItemResult,
    FieldInfo,
    FieldKind,
    FieldResolution,
    FieldRole,
    FieldSelection,
    FieldUpdateOutcome,
    Issue,
    MissingRequiredFieldError,
    ProjectBoard,
    ProviderError,
    RemoteMutationError,
    RemoteQueryError,
    SignalHoundError,
    UpdateStatus,
)
from signalhound.sdk import load_config, open_board

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
    "Issue",
    "MissingRequiredFieldError",
    "ProjectBoard",
    "ProjectManager",
    "ProviderError",
    "RemoteMutationError",
    "RemoteQueryError",
    "SignalHoundError",
    "UpdateStatus",
    "compare_versions",
    "create_token_resolver",
    "extract_version",
    "load_config",
    "open_board",
]
