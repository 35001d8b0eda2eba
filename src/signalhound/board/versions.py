"""Release version parsing and ordering for option labels like ``"v1.32 stable"``."""

from __future__ import annotations

import re
from collections.abc import Mapping

_VERSION_RE = re.compile(r"v?(\d+)\.(\d+)")


def extract_version(text: str) -> str:
    """Return the first ``major.minor`` found in *text*, or ``""``.

    ``"v1.32"`` and ``"1.32.1"`` both yield ``"1.32"``.
    """
    m = _VERSION_RE.search(text)
    if not m:
        return ""
    return f"{m.group(1)}.{m.group(2)}"


def _segment(parts: list[str], index: int) -> int:
    if index >= len(parts):
        return 0
    try:
        return int(parts[index])
    except ValueError:
        return 0


def compare_versions(v1: str, v2: str) -> int:
    """Compare dotted versions numerically.

    Returns:
        1 if *v1* > *v2*, -1 if *v1* < *v2*, 0 if equal. Missing or
        non-numeric segments count as 0.
    """
    parts1 = v1.split(".")
    parts2 = v2.split(".")
    for i in range(max(len(parts1), len(parts2))):
        num1 = _segment(parts1, i)
        num2 = _segment(parts2, i)
        if num1 > num2:
            return 1
        if num1 < num2:
            return -1
    return 0


def latest_version_option(options: Mapping[str, str]) -> tuple[str, str] | None:
    """Pick the option whose label carries the highest version.

    Args:
        options: Option label → option ID, in response order.

    Returns:
        ``(version, option_id)`` of the highest version, keeping the first
        one seen on ties, or None when no label carries a version.
    """
    latest: tuple[str, str] | None = None
    for label, option_id in options.items():
        version = extract_version(label)
        if not version:
            continue
        if latest is None or compare_versions(version, latest[0]) > 0:
            latest = (version, option_id)
    return latest
