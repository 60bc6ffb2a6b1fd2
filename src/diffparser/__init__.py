from .models import Diff, DiffLine, DiffRange, File, FileMode, Hunk, LineMode, ParseIssue
from .errors import DiffParseError, HunkHeaderError
from .config import Settings, get_settings, configure_logging
from .parsing import DiffParser, parse_diff

__all__ = [
    "Diff",
    "DiffLine",
    "DiffRange",
    "File",
    "FileMode",
    "Hunk",
    "LineMode",
    "ParseIssue",
    "DiffParseError",
    "HunkHeaderError",
    "Settings",
    "get_settings",
    "configure_logging",
    "DiffParser",
    "parse_diff",
]
