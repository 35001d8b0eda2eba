"""Heuristic matching of semantic roles to dynamically-named project fields.

Every matcher here is a pure function over the discovered schema, so the
heuristics can be exercised without a network.

Field names are matched by case-insensitive substring. When several fields
match a hint only the first one in schema order is examined; in particular a
project with two "status"-named fields never has the second one's options
considered.
"""

from __future__ import annotations

from collections.abc import Sequence

from signalhound.board.versions import latest_version_option
from signalhound.contracts.fields import FieldInfo, FieldResolution, FieldSelection

RELEASE_FIELD_HINT = "k8s release"
STATUS_FIELD_HINT = "status"
VIEW_FIELD_HINT = "view"
BOARD_FIELD_HINT = "board"

DRAFT_HINT = "draft"
FAILING_HINT = "failing"
ISSUE_TRACKING_HINT = "issue-tracking"

_OPTION_KEYWORDS: dict[str, tuple[str, ...]] = {
    DRAFT_HINT: ("drafting", "draft"),
    FAILING_HINT: ("failing", "flaky"),
    ISSUE_TRACKING_HINT: ("issue-tracking", "issue tracking"),
}


def label_matches(label: str, role_hint: str) -> bool:
    """Return True when *label* carries one of the keywords for *role_hint*.

    Raises:
        KeyError: If *role_hint* is not a known hint.
    """
    lower = label.lower()
    return any(keyword in lower for keyword in _OPTION_KEYWORDS[role_hint])


def find_field(fields: Sequence[FieldInfo], name_hint: str) -> FieldInfo | None:
    """Return the first field whose name contains *name_hint* (case-insensitive)."""
    hint = name_hint.lower()
    for field in fields:
        if hint in field.name.lower():
            return field
    return None


def _first_option(field: FieldInfo, role_hint: str) -> str:
    for label, option_id in field.options.items():
        if label_matches(label, role_hint):
            return option_id
    return ""


def board_segment(board_selector: str) -> str:
    """Return the board name of a ``"<board>#<tab>"`` selector."""
    return board_selector.split("#", 1)[0]


def resolve_release(fields: Sequence[FieldInfo]) -> tuple[FieldSelection, str]:
    """Resolve the release field and its highest-version option.

    Returns:
        The selection and the extracted version of the chosen option
        (``""`` when nothing resolved).
    """
    field = find_field(fields, RELEASE_FIELD_HINT)
    if field is None:
        return FieldSelection(), ""
    latest = latest_version_option(field.options)
    if latest is None:
        return FieldSelection(field_id=field.id), ""
    version, option_id = latest
    return FieldSelection(field_id=field.id, option_id=option_id), version


def resolve_status(fields: Sequence[FieldInfo], role_hint: str) -> FieldSelection:
    field = find_field(fields, STATUS_FIELD_HINT)
    if field is None:
        return FieldSelection()
    return FieldSelection(field_id=field.id, option_id=_first_option(field, role_hint))


def resolve_view(fields: Sequence[FieldInfo]) -> FieldSelection:
    field = find_field(fields, VIEW_FIELD_HINT)
    if field is None:
        return FieldSelection()
    return FieldSelection(field_id=field.id, option_id=_first_option(field, ISSUE_TRACKING_HINT))


def resolve_board(fields: Sequence[FieldInfo], board_selector: str) -> FieldSelection:
    """Match the board option whose lowercased label appears in the selector's board name."""
    field = find_field(fields, BOARD_FIELD_HINT)
    if field is None:
        return FieldSelection()
    board = board_segment(board_selector)
    for label, option_id in field.options.items():
        # an empty label would match every board
        if label and label.lower() in board:
            return FieldSelection(field_id=field.id, option_id=option_id)
    return FieldSelection(field_id=field.id)


def resolve_draft_fields(fields: Sequence[FieldInfo], board_selector: str) -> FieldResolution:
    """Resolve all four roles for draft item creation."""
    release, version = resolve_release(fields)
    return FieldResolution(
        release=release,
        view=resolve_view(fields),
        status=resolve_status(fields, DRAFT_HINT),
        board=resolve_board(fields, board_selector),
        release_version=version,
    )


def resolve_filter_fields(fields: Sequence[FieldInfo]) -> FieldResolution:
    """Resolve the release and failing/flaky status roles used to filter items."""
    release, version = resolve_release(fields)
    return FieldResolution(
        release=release,
        status=resolve_status(fields, FAILING_HINT),
        release_version=version,
    )
