"""Project board contract consumed by the dashboard and the issue-listing tools."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from signalhound.contracts.fields import FieldInfo
from signalhound.contracts.issue import DraftItemResult, Issue


class ProjectBoard(ABC):
    @abstractmethod
    async def __aenter__(self) -> ProjectBoard: ...

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    @abstractmethod
    async def discover_fields(self) -> list[FieldInfo]: ...

    @abstractmethod
    async def retrieve_filtered_issues(self, page_size: int) -> list[Issue]: ...

    @abstractmethod
    async def create_draft_item(self, title: str, body: str, board_selector: str) -> DraftItemResult: ...
