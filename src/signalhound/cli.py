"""Command-line interface for signalhound's project board tools."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from rich.console import Console
from rich.table import Table

from signalhound import (
    BoardConfig,
    ConfigError,
    DraftItemResult,
    FieldInfo,
    Issue,
    MissingRequiredFieldError,
    ProviderError,
    load_config,
    open_board,
)

BODY_PREVIEW_LIMIT = 200


def _package_version() -> str:
    try:
        return version("signalhound")
    except PackageNotFoundError:
        return "0.0.0"


def _page_size(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid page size: {raw!r}") from exc
    if not 1 <= value <= 100:
        raise argparse.ArgumentTypeError("page size must be between 1 and 100")
    return value


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="Path to a signalhound board config JSON file")
    common.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    common.add_argument("--log-dir", help="Also write logs to a timestamped file in this directory")

    parser = argparse.ArgumentParser(prog="signalhound")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fields_parser = subparsers.add_parser("fields", parents=[common], help="List the project board fields")
    fields_parser.add_argument("--json", action="store_true", help="Print fields as JSON")

    issues_parser = subparsers.add_parser(
        "issues", parents=[common], help="List failing or flaky issues for the latest release"
    )
    issues_parser.add_argument("--per-page", type=_page_size, default=None, help="Items per page (1-100)")
    issues_parser.add_argument("--json", action="store_true", help="Print issues as JSON")

    draft_parser = subparsers.add_parser("draft", parents=[common], help="Create a draft issue on the board")
    draft_parser.add_argument("--title", required=True)
    body = draft_parser.add_mutually_exclusive_group(required=True)
    body.add_argument("--body")
    body.add_argument("--body-file", help="Read the draft body from this file")
    draft_parser.add_argument("--board", required=True, help="Board selector, e.g. 'sig-release-master-blocking#gce'")

    return parser


def _configure_logging(*, verbose: bool, log_dir: str | None) -> None:
    handlers: list[logging.Handler] = []
    if verbose:
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(logging.Formatter("%(name)s %(message)s"))
        handlers.append(stream)
    if log_dir:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        filename = directory / f"signalhound_{datetime.now():%Y-%m-%d_%H-%M-%S}.log"
        handlers.append(logging.FileHandler(filename, encoding="utf-8"))
    if not handlers:
        return
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=handlers,
    )


def _load(args: argparse.Namespace) -> BoardConfig:
    if args.config:
        return load_config(args.config)
    return BoardConfig()


def format_issue_listing(issues: list[Issue]) -> str:
    if not issues:
        return "No issues found on the project board"
    lines = [f"Found {len(issues)} issue(s) on the project board:", ""]
    for i, issue in enumerate(issues, start=1):
        body = issue.body
        if len(body) > BODY_PREVIEW_LIMIT:
            body = body[:BODY_PREVIEW_LIMIT] + "..."
        lines.append(f"{i}. #{issue.number}: {issue.title}")
        lines.append(f"   State: {issue.state}")
        lines.append(f"   URL: {issue.url}")
        if body:
            lines.append(f"   Body: {body}")
        lines.append("")
    return "\n".join(lines)


def format_draft_summary(result: DraftItemResult) -> str:
    lines = [f"Draft item created: {result.item_id}", ""]
    for outcome in result.updates:
        line = f"  {outcome.role.display_name:<15} {outcome.status.value}"
        if outcome.error:
            line = f"{line}  ({outcome.error})"
        lines.append(line)
    lines.append("")
    return "\n".join(lines)


def _fields_table(fields: list[FieldInfo]) -> Table:
    table = Table(title="Project fields")
    table.add_column("Name")
    table.add_column("Kind")
    table.add_column("ID")
    table.add_column("Options")
    for field in fields:
        table.add_row(field.name, field.kind.name.lower(), field.id, ", ".join(field.options))
    return table


async def _run_fields(args: argparse.Namespace) -> None:
    config = _load(args)
    async with await open_board(config) as board:
        fields = await board.discover_fields()
    if args.json:
        print(json.dumps([field.model_dump(mode="json") for field in fields], indent=2))
        return
    Console().print(_fields_table(fields))


async def _run_issues(args: argparse.Namespace) -> None:
    config = _load(args)
    per_page = args.per_page or config.per_page
    async with await open_board(config) as board:
        issues = await board.retrieve_filtered_issues(per_page)
    if args.json:
        print(json.dumps([issue.model_dump(mode="json") for issue in issues], indent=2))
        return
    print(format_issue_listing(issues))


async def _run_draft(args: argparse.Namespace) -> None:
    config = _load(args)
    if args.body_file:
        try:
            body = Path(args.body_file).read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed reading body file: {args.body_file}") from exc
    else:
        body = args.body
    async with await open_board(config) as board:
        result = await board.create_draft_item(args.title, body, args.board)
    print(format_draft_summary(result))


_COMMANDS = {
    "fields": _run_fields,
    "issues": _run_issues,
    "draft": _run_draft,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(verbose=args.verbose, log_dir=args.log_dir)

    try:
        asyncio.run(_COMMANDS[args.command](args))
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except ProviderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except MissingRequiredFieldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - unexpected failure
        print(f"error: {exc}", file=sys.stderr)
        return 1
