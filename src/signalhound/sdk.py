"""SDK entrypoints: config loading and board construction."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from signalhound.auth import create_token_resolver
from signalhound.board.manager import ProjectManager
from signalhound.contracts.config import BoardConfig
from signalhound.contracts.exceptions import ConfigError

_LOG = logging.getLogger(__name__)


def load_config(path: str | Path) -> BoardConfig:
    """Load and validate a board config from JSON."""
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        return BoardConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


async def open_board(config: BoardConfig) -> ProjectManager:
    """Resolve a token for *config* and build an unopened :class:`ProjectManager`.

    The returned manager still has to be entered with ``async with``.
    """
    resolver = create_token_resolver(config)
    token = await resolver.resolve()
    _LOG.debug(
        "Resolved GitHub token from %s for %s project %s", resolver.source, config.organization, config.project_id
    )
    return ProjectManager(
        token=token,
        project_id=config.project_id,
        api_url=config.api_url,
        timeout=config.timeout,
        max_retries=config.max_retries,
    )
