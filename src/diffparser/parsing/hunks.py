import logging
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from diffparser.errors import HunkHeaderError
from diffparser.models import DiffLine, DiffRange, Hunk, LineMode, ParseIssue


logger = logging.getLogger(__name__)

HUNK_HEADER_RE = re.compile(r"^@@\s+-(\d+)(?:,(\d+))?\s+\+(\d+)(?:,(\d+))?\s+@@ ?(.*)$")
SIGNATURE_SEPARATOR = "-- "


@dataclass
class HunkParseResult:
    hunks: list[Hunk] = field(default_factory=list)
    issues: list[ParseIssue] = field(default_factory=list)


@dataclass
class _HunkState:
    """Running counters for one hunk body."""
    orig_number: int
    new_number: int
    position: int = 0
    orig_lines: list[DiffLine] = field(default_factory=list)
    new_lines: list[DiffLine] = field(default_factory=list)

    def add(self, mode: LineMode, content: str) -> None:
        self.position += 1
        if mode != LineMode.ADDED:
            self.orig_lines.append(DiffLine(mode=mode, number=self.orig_number, content=content, position=self.position))
            self.orig_number += 1
        if mode != LineMode.REMOVED:
            self.new_lines.append(DiffLine(mode=mode, number=self.new_number, content=content, position=self.position))
            self.new_number += 1

    def is_complete(self, orig_length: int, new_length: int) -> bool:
        return len(self.orig_lines) >= orig_length and len(self.new_lines) >= new_length


def parse_hunks(
    lines: Sequence[str],
    file_name: str,
    first_line_number: int = 1,
    strict: bool = False,
    bounded: bool = True,
) -> HunkParseResult:
    """Parse every `@@` section of a file block.

    Lines before the first `@@` line are ignored. A section whose header does
    not match is skipped with its body and reported as a ParseIssue, or raised
    as HunkHeaderError when strict. When bounded, `+`/`-` lines left over after
    a hunk reached its declared lengths are dropped and reported as a
    ParseIssue; a `-- ` signature line ends that check.
    """
    result = HunkParseResult()

    for number, (index, header, body) in enumerate(_sections(lines), start=1):
        match = HUNK_HEADER_RE.match(header)
        if match is None:
            issue = ParseIssue(
                file_name=file_name,
                hunk_number=number,
                line_number=first_line_number + index,
                header=header,
                reason="expected '@@ -<start>[,<length>] +<start>[,<length>] @@'",
            )
            if strict:
                raise HunkHeaderError(issue)
            logger.warning(f"Skipping malformed hunk {number} of {file_name} at line {issue.line_number}: {header!r}")
            result.issues.append(issue)
            continue

        hunk, overflow = _parse_hunk(match, body, bounded)
        result.hunks.append(hunk)
        if overflow is not None:
            line_number = first_line_number + index + 1 + overflow
            logger.warning(f"Hunk {number} of {file_name} has change lines past its declared length at line {line_number}")
            result.issues.append(ParseIssue(
                file_name=file_name,
                hunk_number=number,
                line_number=line_number,
                header=header,
                reason="change lines past the declared hunk length were dropped",
            ))

    return result


def _sections(lines: Sequence[str]) -> Iterator[tuple[int, str, list[str]]]:
    """Yield (index, header line, body lines) for each `@@` line."""
    start: int | None = None
    body: list[str] = []

    for index, line in enumerate(lines):
        if line.startswith("@@"):
            if start is not None:
                yield start, lines[start], body
            start, body = index, []
        elif start is not None:
            body.append(line)

    if start is not None:
        yield start, lines[start], body


def _parse_hunk(match: re.Match, body: list[str], bounded: bool) -> tuple[Hunk, int | None]:
    """Build one hunk. Also returns the body index of the first change line
    dropped for lying past the declared lengths, None if there is none."""
    orig_start, orig_length = int(match.group(1)), _length(match.group(2))
    new_start, new_length = int(match.group(3)), _length(match.group(4))
    state = _HunkState(orig_number=orig_start, new_number=new_start)
    overflow = None

    for index, line in enumerate(body):
        # Trailing text after a full hunk, e.g. a format-patch signature
        if bounded and state.is_complete(orig_length, new_length):
            overflow = _first_change(body, index)
            break

        marker, content = line[:1], line[1:]
        if marker == "\\":
            continue
        if marker == "+":
            state.add(LineMode.ADDED, content)
        elif marker == "-":
            state.add(LineMode.REMOVED, content)
        elif marker == " ":
            state.add(LineMode.UNCHANGED, content)
        else:
            state.add(LineMode.UNCHANGED, line)

    hunk = Hunk(
        orig_range=DiffRange(start=orig_start, length=orig_length, lines=tuple(state.orig_lines)),
        new_range=DiffRange(start=new_start, length=new_length, lines=tuple(state.new_lines)),
        section=match.group(5),
    )
    return hunk, overflow


def _first_change(body: list[str], start: int) -> int | None:
    for index in range(start, len(body)):
        line = body[index]
        if line == SIGNATURE_SEPARATOR:
            return None
        if line.startswith(("+", "-")):
            return index
    return None


def _length(group: str | None) -> int:
    return int(group) if group is not None else 1
