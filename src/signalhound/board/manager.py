"""GitHub Projects v2 board manager.

The manager never caches the project schema: every public operation
re-discovers the fields, so a resolution used while listing issues and one
used moments later for a draft write may differ if the board changed.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from signalhound.board._retrying_transport import RetryingTransport
from signalhound.board.github_gql import GitHubGraphQLClient
from signalhound.board.mapper import issue_from_item, item_matches, parse_items_page, parse_project_fields
from signalhound.board.matchers import resolve_draft_fields, resolve_filter_fields
from signalhound.board.queries import (
    ADD_DRAFT_ITEM,
    FETCH_PROJECT_FIELDS,
    FETCH_PROJECT_ITEMS,
    UPDATE_ITEM_FIELD,
)
from signalhound.contracts.board import ProjectBoard
from signalhound.contracts.config import DEFAULT_API_URL, DEFAULT_PROJECT_ID
from signalhound.contracts.exceptions import (
    ClientUnavailableError,
    GraphQLResponseError,
    MissingRequiredFieldError,
    RemoteMutationError,
    RemoteQueryError,
)
from signalhound.contracts.fields import FieldInfo, FieldRole, FieldSelection
from signalhound.contracts.issue import DraftItemResult, FieldUpdateOutcome, Issue, UpdateStatus

_LOG = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


class ProjectManager(ProjectBoard):
    """Reads and writes items on one fixed GitHub project.

    Use as an async context manager so the HTTP transport is opened and
    closed::

        async with ProjectManager(token=token) as board:
            issues = await board.retrieve_filtered_issues(100)

    An ``http_client`` passed in is borrowed and used as-is (it must already
    carry authentication); it is not closed on exit.
    """

    def __init__(
        self,
        *,
        token: str | None = None,
        project_id: str = DEFAULT_PROJECT_ID,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        max_retries: int = 3,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._token = token
        self._project_id = project_id
        self._api_url = api_url
        self._timeout = timeout
        self._max_retries = max_retries

        self._owned_client: httpx.AsyncClient | None = None
        self._gql: GitHubGraphQLClient | None = None
        if http_client is not None:
            self._gql = GitHubGraphQLClient(url=api_url, http_client=http_client)

    @property
    def project_id(self) -> str:
        return self._project_id

    async def __aenter__(self) -> ProjectManager:
        if self._gql is None and (self._token or "").strip():
            self._open_transport()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._owned_client is not None:
            await self._owned_client.aclose()
            self._owned_client = None
            self._gql = None

    def _open_transport(self) -> None:  # pragma: no cover
        self._owned_client = httpx.AsyncClient(
            headers={"Authorization": f"Bearer {self._token}"},
            timeout=httpx.Timeout(self._timeout),
            transport=RetryingTransport(max_retries=self._max_retries),
        )
        self._gql = GitHubGraphQLClient(url=self._api_url, http_client=self._owned_client)

    def _require_client(self) -> GitHubGraphQLClient:
        if self._gql is None:
            raise ClientUnavailableError("GitHub GraphQL client is not configured. Provide a token and use 'async with'.")
        return self._gql

    # ------------------------------------------------------------------
    # Schema discovery
    # ------------------------------------------------------------------

    async def discover_fields(self) -> list[FieldInfo]:
        data = await self._query(
            "query project fields",
            FETCH_PROJECT_FIELDS,
            operation_name="FetchProjectFields",
            variables={"projectId": self._project_id},
        )
        fields = parse_project_fields(data)
        _LOG.debug("Discovered %d project field(s) on %s", len(fields), self._project_id)
        return fields

    # ------------------------------------------------------------------
    # Filtered retrieval
    # ------------------------------------------------------------------

    async def retrieve_filtered_issues(self, page_size: int) -> list[Issue]:
        """Return the issues on the latest release whose status is failing or flaky.

        Items are read oldest-first in pages of *page_size*. Any page failure
        aborts the whole retrieval.

        Raises:
            ValueError: If *page_size* is outside 1..100.
            MissingRequiredFieldError: If the release or failing status option
                cannot be resolved.
            RemoteQueryError: If any query fails.
        """
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {page_size}")
        self._require_client()

        fields = await self.discover_fields()
        resolution = resolve_filter_fields(fields)
        if not resolution.release.option_id:
            raise MissingRequiredFieldError(
                "latest version option not found in K8s Release field", role=FieldRole.RELEASE.value
            )
        if not resolution.status.option_id:
            raise MissingRequiredFieldError("failing status option not found in Status field", role=FieldRole.STATUS.value)

        issues: list[Issue] = []
        cursor: str | None = None
        pages = 0
        while True:
            pages += 1
            data = await self._query(
                "query project issues",
                FETCH_PROJECT_ITEMS,
                operation_name="FetchProjectItems",
                variables={"projectId": self._project_id, "first": page_size, "after": cursor},
            )
            try:
                nodes, has_next_page, end_cursor = parse_items_page(data)
            except GraphQLResponseError as exc:
                raise RemoteQueryError(f"failed to query project issues: {exc}", operation="query project issues") from exc

            for node in nodes:
                issue = issue_from_item(node)
                if issue is not None and item_matches(node, resolution):
                    issues.append(issue)
            _LOG.debug("Page %d: %d item(s), %d match(es) so far", pages, len(nodes), len(issues))

            if not has_next_page:
                break
            if not end_cursor or end_cursor == cursor:
                raise RemoteQueryError(
                    "failed to query project issues: pagination cursor did not advance",
                    operation="query project issues",
                )
            cursor = end_cursor

        _LOG.info(
            "Found %d failing/flaky issue(s) for release %s across %d page(s)",
            len(issues),
            resolution.release_version,
            pages,
        )
        return issues

    # ------------------------------------------------------------------
    # Draft item writer
    # ------------------------------------------------------------------

    async def create_draft_item(self, title: str, body: str, board_selector: str) -> DraftItemResult:
        """Create a draft item and set its release, view, status and board fields.

        Field updates are independent: a failed update is logged and recorded
        in the result, and the remaining updates still run.

        Raises:
            RemoteQueryError: If schema discovery fails.
            RemoteMutationError: If the draft item itself cannot be created.
        """
        self._require_client()
        fields = await self.discover_fields()
        resolution = resolve_draft_fields(fields, board_selector)

        data = await self._mutate(
            "create draft issue",
            ADD_DRAFT_ITEM,
            operation_name="AddDraftItem",
            variables={"projectId": self._project_id, "title": title, "body": body},
        )
        item_id = _draft_item_id(data)
        _LOG.info("Created draft item %s on %s", item_id, self._project_id)

        outcomes = [await self._apply_field(item_id, role, selection) for role, selection in resolution.updates()]
        return DraftItemResult(item_id=item_id, updates=outcomes)

    async def _apply_field(self, item_id: str, role: FieldRole, selection: FieldSelection) -> FieldUpdateOutcome:
        if not selection.is_complete:
            _LOG.debug("Skipping %s field: no matching field or option", role.display_name)
            return FieldUpdateOutcome(
                role=role,
                field_id=selection.field_id,
                option_id=selection.option_id,
                status=UpdateStatus.SKIPPED,
            )
        try:
            await self._mutate(
                f"update {role.display_name} field",
                UPDATE_ITEM_FIELD,
                operation_name="UpdateItemField",
                variables={
                    "projectId": self._project_id,
                    "itemId": item_id,
                    "fieldId": selection.field_id,
                    "optionId": selection.option_id,
                },
            )
        except RemoteMutationError as exc:
            _LOG.warning("failed to update %s field: %s", role.display_name, exc)
            return FieldUpdateOutcome(
                role=role,
                field_id=selection.field_id,
                option_id=selection.option_id,
                status=UpdateStatus.FAILED,
                error=str(exc),
            )
        return FieldUpdateOutcome(
            role=role,
            field_id=selection.field_id,
            option_id=selection.option_id,
            status=UpdateStatus.APPLIED,
        )

    # ------------------------------------------------------------------
    # Transport helpers
    # ------------------------------------------------------------------

    async def _query(
        self, operation: str, query: str, *, operation_name: str, variables: dict[str, Any]
    ) -> dict[str, Any]:
        client = self._require_client()
        try:
            return await client.run(query, operation_name=operation_name, variables=variables)
        except (httpx.HTTPError, GraphQLResponseError) as exc:
            raise RemoteQueryError(f"failed to {operation}: {exc}", operation=operation) from exc

    async def _mutate(
        self, operation: str, mutation: str, *, operation_name: str, variables: dict[str, Any]
    ) -> dict[str, Any]:
        client = self._require_client()
        try:
            return await client.run(mutation, operation_name=operation_name, variables=variables, idempotent=False)
        except (httpx.HTTPError, GraphQLResponseError) as exc:
            raise RemoteMutationError(f"failed to {operation}: {exc}", operation=operation) from exc


def _draft_item_id(data: dict[str, Any]) -> str:
    payload = data.get("addProjectV2DraftIssue")
    item = payload.get("projectItem") if isinstance(payload, dict) else None
    item_id = item.get("id") if isinstance(item, dict) else None
    if not isinstance(item_id, str) or not item_id:
        raise RemoteMutationError(
            "failed to create draft issue: addProjectV2DraftIssue returned no item", operation="create draft issue"
        )
    return item_id
