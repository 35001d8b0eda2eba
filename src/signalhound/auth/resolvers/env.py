"""Environment token resolver."""

from __future__ import annotations

import os
from dataclasses import dataclass

from signalhound.auth.base import TokenResolver
from signalhound.contracts.exceptions import AuthenticationError

TOKEN_ENV_VARS = ("SIGNALHOUND_GITHUB_TOKEN", "GITHUB_TOKEN")


@dataclass(frozen=True)
class EnvTokenResolver(TokenResolver):
    variables: tuple[str, ...] = TOKEN_ENV_VARS

    source = "environment"

    async def resolve(self) -> str:
        for name in self.variables:
            token = (os.getenv(name) or "").strip()
            if token:
                return token
        raise AuthenticationError(f"{' or '.join(self.variables)} is not set or empty")
