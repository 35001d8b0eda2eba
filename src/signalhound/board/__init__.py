"""GitHub Projects v2 board engine."""

from signalhound.board.manager import ProjectManager
from signalhound.board.versions import compare_versions, extract_version

__all__ = ["ProjectManager", "compare_versions", "extract_version"]
