"""Resolver for a token written directly in the board config."""

from __future__ import annotations

from dataclasses import dataclass

from signalhound.auth.base import TokenResolver
from signalhound.contracts.exceptions import AuthenticationError


@dataclass(frozen=True)
class StaticTokenResolver(TokenResolver):
    token: str

    source = "config"

    async def resolve(self) -> str:
        if not self.token.strip():
            raise AuthenticationError("config auth 'token' requires a non-empty token")
        return self.token.strip()
