from enum import Enum
from pydantic import BaseModel, computed_field, model_validator

from .issue import ParseIssue


class FileMode(str, Enum):
    NEW = "new"
    DELETED = "deleted"
    MODIFIED = "modified"


class LineMode(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


class DiffLine(BaseModel):
    """One hunk body line, marker stripped."""
    model_config = {"frozen": True}

    mode: LineMode
    number: int  # 1-based, in the file of the range holding this line
    content: str
    position: int  # 1-based, across the whole hunk body


class DiffRange(BaseModel):
    model_config = {"frozen": True}

    start: int
    length: int
    lines: tuple[DiffLine, ...] = ()


class Hunk(BaseModel):
    model_config = {"frozen": True}

    orig_range: DiffRange
    new_range: DiffRange
    section: str = ""

    @model_validator(mode="after")
    def check_sides(self):
        if any(line.mode == LineMode.ADDED for line in self.orig_range.lines):
            raise ValueError("Original range cannot hold added lines")
        if any(line.mode == LineMode.REMOVED for line in self.new_range.lines):
            raise ValueError("New range cannot hold removed lines")
        return self

    @property
    def lines(self) -> list[DiffLine]:
        """Body lines in diff order. Unchanged lines appear once, with their original-side number."""
        by_position = {line.position: line for line in self.orig_range.lines}
        for line in self.new_range.lines:
            by_position.setdefault(line.position, line)
        return [by_position[position] for position in sorted(by_position)]


class File(BaseModel):
    model_config = {"frozen": True}

    orig_name: str
    new_name: str
    mode: FileMode = FileMode.MODIFIED
    hash: str = ""
    hunks: tuple[Hunk, ...] = ()
    header: str = ""
    is_binary: bool = False

    @computed_field
    @property
    def additions(self) -> int:
        return sum(len(_with_mode(hunk.new_range, LineMode.ADDED)) for hunk in self.hunks)

    @computed_field
    @property
    def deletions(self) -> int:
        return sum(len(_with_mode(hunk.orig_range, LineMode.REMOVED)) for hunk in self.hunks)

    @property
    def is_renamed(self) -> bool:
        return self.orig_name != self.new_name


class Diff(BaseModel):
    """Result of parsing one unified diff text."""
    model_config = {"frozen": True}

    files: tuple[File, ...] = ()
    issues: tuple[ParseIssue, ...] = ()
    raw: str = ""

    def changed(self) -> dict[str, list[int]]:
        """Map new file names to the new-side numbers of their added lines."""
        changed: dict[str, list[int]] = {}
        for file in self.files:
            for hunk in file.hunks:
                for line in _with_mode(hunk.new_range, LineMode.ADDED):
                    changed.setdefault(file.new_name, []).append(line.number)
        return changed


def _with_mode(diff_range: DiffRange, mode: LineMode) -> list[DiffLine]:
    return [line for line in diff_range.lines if line.mode == mode]
