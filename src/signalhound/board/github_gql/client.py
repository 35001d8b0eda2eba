"""Thin GraphQL client over an ``httpx.AsyncClient``."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from signalhound.board._retrying_transport import IDEMPOTENT_EXTENSION
from signalhound.contracts.exceptions import GraphQLResponseError

_LOG = logging.getLogger(__name__)


class GitHubGraphQLClient:
    """Posts GraphQL operations to the GitHub API.

    The underlying ``http_client`` is borrowed: its lifetime belongs to the
    caller.
    """

    def __init__(self, *, url: str, http_client: httpx.AsyncClient) -> None:
        self._url = url
        self._http_client = http_client

    async def execute(
        self,
        query: str,
        *,
        operation_name: str | None = None,
        variables: dict[str, Any] | None = None,
        idempotent: bool = True,
    ) -> httpx.Response:
        """POST one operation.

        Mutations pass ``idempotent=False`` so the retrying transport does not
        replay them after they may have been applied.
        """
        payload: dict[str, Any] = {"query": query, "variables": variables or {}}
        if operation_name:
            payload["operationName"] = operation_name
        _LOG.debug("GraphQL %s variables=%s", operation_name or "operation", sorted(payload["variables"]))
        return await self._http_client.post(
            self._url, json=payload, extensions={IDEMPOTENT_EXTENSION: idempotent}
        )

    def get_data(self, response: httpx.Response) -> dict[str, Any]:
        """Return the ``data`` object of *response*.

        Raises:
            httpx.HTTPStatusError: On a non-2xx status.
            GraphQLResponseError: If the payload has ``errors`` or no ``data``.
        """
        response.raise_for_status()
        try:
            payload = response.json()
        except ValueError as exc:
            raise GraphQLResponseError("GraphQL response is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise GraphQLResponseError("GraphQL response is not an object")

        errors = payload.get("errors") or []
        if errors:
            messages = [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors]
            raise GraphQLResponseError(f"GraphQL returned errors: {'; '.join(messages)}", errors=errors)

        data = payload.get("data")
        if not isinstance(data, dict):
            raise GraphQLResponseError("GraphQL response missing data payload")
        return data

    async def run(
        self,
        query: str,
        *,
        operation_name: str | None = None,
        variables: dict[str, Any] | None = None,
        idempotent: bool = True,
    ) -> dict[str, Any]:
        response = await self.execute(
            query, operation_name=operation_name, variables=variables, idempotent=idempotent
        )
        return self.get_data(response)
