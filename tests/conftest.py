"""Shared test fixtures for signalhound tests."""

from __future__ import annotations

from typing import Any

import pytest

from signalhound.contracts.fields import FieldInfo, FieldKind
from tests.fakes.github import FakeGitHub, fields_data, single_select_field


@pytest.fixture
def project_fields_payload() -> dict[str, Any]:
    """A project schema with one field per semantic role plus noise."""
    return fields_data(
        {"__typename": "ProjectV2Field", "id": "F_title", "name": "Title"},
        single_select_field(
            "F_status",
            "Status",
            [("Drafting", "OPT_drafting"), ("FAILING", "OPT_failing"), ("FLAKY", "OPT_flaky"), ("Closed", "OPT_closed")],
        ),
        single_select_field("F_release", "K8s Release", [("v1.30", "OPT_130"), ("v1.31", "OPT_131"), ("v1.29", "OPT_129")]),
        single_select_field("F_view", "View", [("board view", "OPT_board_view"), ("issue-tracking", "OPT_tracking")]),
        single_select_field(
            "F_board", "Testgrid Board", [("master-blocking", "OPT_blocking"), ("master-informing", "OPT_informing")]
        ),
        {"__typename": "ProjectV2IterationField", "id": "F_iter", "name": "Iteration"},
    )


@pytest.fixture
def project_fields() -> list[FieldInfo]:
    """Already-normalized fields matching ``project_fields_payload``."""
    return [
        FieldInfo(
            id="F_status",
            name="Status",
            options={"Drafting": "OPT_drafting", "FAILING": "OPT_failing", "FLAKY": "OPT_flaky", "Closed": "OPT_closed"},
        ),
        FieldInfo(id="F_release", name="K8s Release", options={"v1.30": "OPT_130", "v1.31": "OPT_131", "v1.29": "OPT_129"}),
        FieldInfo(id="F_view", name="View", options={"board view": "OPT_board_view", "issue-tracking": "OPT_tracking"}),
        FieldInfo(
            id="F_board",
            name="Testgrid Board",
            options={"master-blocking": "OPT_blocking", "master-informing": "OPT_informing"},
        ),
        FieldInfo(id="F_iter", name="Iteration", kind=FieldKind.ITERATION),
    ]


@pytest.fixture
def fake_github(project_fields_payload: dict[str, Any]) -> FakeGitHub:
    fake = FakeGitHub()
    fake.default("FetchProjectFields", project_fields_payload)
    return fake
