from .lines import split_lines
from .segmenter import FileBlock, split_files
from .header import FileHeader, parse_header
from .hunks import HunkParseResult, parse_hunks
from .parser import DiffParser, parse_diff

__all__ = [
    "split_lines",
    "FileBlock",
    "split_files",
    "FileHeader",
    "parse_header",
    "HunkParseResult",
    "parse_hunks",
    "DiffParser",
    "parse_diff",
]
