"""Token resolver backed by ``gh auth token``."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from signalhound.auth.base import TokenResolver
from signalhound.contracts.exceptions import AuthenticationError


@dataclass(frozen=True)
class GhCliTokenResolver(TokenResolver):
    hostname: str = "github.com"
    timeout: float = 10.0

    source = "gh-cli"

    async def resolve(self) -> str:
        command = ("gh", "auth", "token", "--hostname", self.hostname)
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as exc:
            raise AuthenticationError("gh CLI not found; install it or set auth to 'env'") from exc
        except OSError as exc:
            raise AuthenticationError(f"failed to run gh CLI: {exc}") from exc

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except TimeoutError as exc:
            process.kill()
            await process.wait()
            raise AuthenticationError(f"gh auth token timed out after {self.timeout:g}s") from exc

        if process.returncode != 0:
            details = stderr.decode(errors="replace").strip()
            raise AuthenticationError(
                f"gh CLI is not logged in to {self.hostname}" + (f": {details}" if details else "")
            )

        token = stdout.decode(errors="replace").strip()
        if not token:
            raise AuthenticationError(f"gh CLI returned an empty token for {self.hostname}")
        return token
