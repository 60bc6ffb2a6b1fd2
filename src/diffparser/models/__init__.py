from .diff import Diff, DiffLine, DiffRange, File, FileMode, Hunk, LineMode
from .issue import ParseIssue

__all__ = [
    "Diff",
    "DiffLine",
    "DiffRange",
    "File",
    "FileMode",
    "Hunk",
    "LineMode",
    "ParseIssue",
]
