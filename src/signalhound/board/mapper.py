"""Mapping functions between GitHub GraphQL payloads and board models."""

from __future__ import annotations

from typing import Any

from signalhound.board.matchers import FAILING_HINT, label_matches
from signalhound.board.versions import extract_version
from signalhound.contracts.exceptions import GraphQLResponseError
from signalhound.contracts.fields import FieldInfo, FieldKind, FieldResolution
from signalhound.contracts.issue import Issue

PROJECT_TYPENAME = "ProjectV2"
ISSUE_TYPENAME = "Issue"
SINGLE_SELECT_VALUE_TYPENAME = "ProjectV2ItemFieldSingleSelectValue"


def _require_dict(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if not isinstance(value, dict):
        raise GraphQLResponseError(f"Missing/invalid object at key '{key}'")
    return value


def _dict_list(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, dict)]


def _nodes(container: Any) -> list[dict[str, Any]]:
    if not isinstance(container, dict):
        return []
    return _dict_list(container.get("nodes"))


def field_from_node(node: dict[str, Any]) -> FieldInfo | None:
    """Normalize one schema node, or return None for kinds the engine ignores.

    Args:
        node: A ``fields.nodes`` entry carrying ``__typename``.
    """
    kind = FieldKind.from_typename(node.get("__typename"))
    if kind is FieldKind.UNKNOWN:
        return None
    field_id = node.get("id")
    name = node.get("name")
    if not isinstance(field_id, str) or not isinstance(name, str):
        return None

    options: dict[str, str] = {}
    if kind is FieldKind.SINGLE_SELECT:
        for option in _dict_list(node.get("options")):
            option_name = option.get("name")
            option_id = option.get("id")
            if isinstance(option_name, str) and isinstance(option_id, str):
                options[option_name] = option_id
    return FieldInfo(id=field_id, name=name, kind=kind, options=options)


def parse_project_fields(data: dict[str, Any]) -> list[FieldInfo]:
    """Build the ordered field list from a ``FetchProjectFields`` payload.

    Returns:
        One :class:`FieldInfo` per supported field; an empty list when the
        node is not a project.
    """
    node = data.get("node")
    if not isinstance(node, dict) or node.get("__typename", PROJECT_TYPENAME) != PROJECT_TYPENAME:
        return []
    fields: list[FieldInfo] = []
    for field_node in _nodes(node.get("fields")):
        field = field_from_node(field_node)
        if field is not None:
            fields.append(field)
    return fields


def parse_items_page(data: dict[str, Any]) -> tuple[list[dict[str, Any]], bool, str | None]:
    """Split a ``FetchProjectItems`` payload into ``(nodes, has_next_page, end_cursor)``."""
    node = _require_dict(data, "node")
    items = _require_dict(node, "items")
    page_info = _require_dict(items, "pageInfo")
    end_cursor = page_info.get("endCursor")
    return _nodes(items), bool(page_info.get("hasNextPage")), end_cursor if isinstance(end_cursor, str) else None


def issue_from_item(item: dict[str, Any]) -> Issue | None:
    """Return the backing issue, or None for draft issues and pull requests."""
    content = item.get("content")
    if not isinstance(content, dict) or content.get("__typename") != ISSUE_TYPENAME:
        return None
    return Issue(
        number=int(content.get("number") or 0),
        title=str(content.get("title") or ""),
        body=str(content.get("body") or ""),
        state=str(content.get("state") or ""),
        url=str(content.get("url") or ""),
    )


def single_select_values(item: dict[str, Any]) -> list[tuple[str, str]]:
    """Return ``(field_id, option_label)`` for each single-select value on *item*."""
    values: list[tuple[str, str]] = []
    for value in _nodes(item.get("fieldValues")):
        if value.get("__typename") != SINGLE_SELECT_VALUE_TYPENAME:
            continue
        field = value.get("field")
        field_id = field.get("id") if isinstance(field, dict) else None
        label = value.get("name")
        if isinstance(field_id, str) and isinstance(label, str):
            values.append((field_id, label))
    return values


def matches_release(values: list[tuple[str, str]], resolution: FieldResolution) -> bool:
    field_id = resolution.release.field_id
    return any(fid == field_id and extract_version(label) == resolution.release_version for fid, label in values)


def matches_failing_status(values: list[tuple[str, str]], resolution: FieldResolution) -> bool:
    field_id = resolution.status.field_id
    return any(fid == field_id and label_matches(label, FAILING_HINT) for fid, label in values)


def item_matches(item: dict[str, Any], resolution: FieldResolution) -> bool:
    """Return True when *item* is on the target release and failing or flaky.

    The release and status checks scan the value list independently, so the
    two values may appear in any order.
    """
    values = single_select_values(item)
    return matches_release(values, resolution) and matches_failing_status(values, resolution)
