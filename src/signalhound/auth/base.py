"""Token resolver contract."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TokenResolver(ABC):
    """Produces the GitHub token that authenticates board requests."""

    source = "token"

    @abstractmethod
    async def resolve(self) -> str:
        """Return a non-empty token or raise :class:`AuthenticationError`."""
