"""Token resolver factory."""

from __future__ import annotations

from urllib.parse import urlparse

from signalhound.auth.base import TokenResolver
from signalhound.auth.resolvers.env import EnvTokenResolver
from signalhound.auth.resolvers.gh_cli import GhCliTokenResolver
from signalhound.auth.resolvers.static import StaticTokenResolver
from signalhound.contracts.config import BoardConfig
from signalhound.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "gh-cli": GhCliTokenResolver,
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def _hostname_from_api_url(api_url: str) -> str:
    hostname = urlparse(api_url.strip()).hostname or ""
    if not hostname or hostname == "api.github.com":
        return "github.com"
    return hostname


def create_token_resolver(config: BoardConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "gh-cli":
        return GhCliTokenResolver(hostname=_hostname_from_api_url(config.api_url))
    if auth_mode == "env":
        return EnvTokenResolver()
    return StaticTokenResolver(token=config.token or "")
