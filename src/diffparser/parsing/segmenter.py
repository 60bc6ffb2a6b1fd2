import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .paths import GIT_MARKER, parse_git_paths


logger = logging.getLogger(__name__)


@dataclass
class FileBlock:
    """Lines of one file's diff, starting with its `diff --git` line."""
    orig_name: str
    new_name: str
    line_number: int  # 1-based input line of the marker
    lines: list[str] = field(default_factory=list)


def split_files(lines: Iterable[str]) -> Iterator[FileBlock]:
    """Group lines into per-file blocks. Lines before the first valid marker are dropped."""
    block: FileBlock | None = None

    for number, line in enumerate(lines, start=1):
        if not line.startswith(GIT_MARKER):
            if block is not None:
                block.lines.append(line)
            continue

        if block is not None:
            yield block

        paths = parse_git_paths(line)
        if paths is None:
            logger.warning(f"Skipping malformed file header at line {number}: {line!r}")
            block = None
            continue

        orig_name, new_name = paths
        block = FileBlock(orig_name=orig_name, new_name=new_name, line_number=number, lines=[line])

    if block is not None:
        yield block
