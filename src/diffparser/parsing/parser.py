# src/diffparser/parsing/parser.py
import logging

from diffparser.config import Settings, get_settings
from diffparser.models import Diff, File, ParseIssue
from .header import parse_header
from .hunks import parse_hunks
from .lines import split_lines
from .segmenter import split_files


logger = logging.getLogger(__name__)


class DiffParser:
    def __init__(
        self,
        settings: Settings | None = None,
        strict: bool | None = None,
        bounded_hunks: bool | None = None,
    ):
        if settings is None and (strict is None or bounded_hunks is None):
            settings = get_settings()
        self.strict = settings.strict if strict is None else strict
        self.bounded_hunks = settings.bounded_hunks if bounded_hunks is None else bounded_hunks

    def parse(self, diff_text: str) -> Diff:
        """Parse `diff --git` style unified diff text.

        Raises HunkHeaderError on a malformed `@@` line when strict, otherwise
        the hunk is left out and listed in Diff.issues.
        """
        files: list[File] = []
        issues: list[ParseIssue] = []

        for block in split_files(split_lines(diff_text)):
            header = parse_header(block)
            result = parse_hunks(
                block.lines[header.hunk_offset:],
                file_name=header.new_name,
                first_line_number=block.line_number + header.hunk_offset,
                strict=self.strict,
                bounded=self.bounded_hunks,
            )
            files.append(File(
                orig_name=header.orig_name,
                new_name=header.new_name,
                mode=header.mode,
                hash=header.hash,
                hunks=tuple(result.hunks),
                header=header.text,
                is_binary=header.is_binary,
            ))
            issues.extend(result.issues)

        logger.debug(f"Parsed {len(files)} files, {len(issues)} issues")
        return Diff(files=tuple(files), issues=tuple(issues), raw=diff_text)


def parse_diff(diff_text: str, strict: bool = False, bounded_hunks: bool = True) -> Diff:
    """Parse unified diff text.

    Does not read the environment or `.env`; use DiffParser() for settings
    from DIFFPARSER_* variables.
    """
    return DiffParser(strict=strict, bounded_hunks=bounded_hunks).parse(diff_text)
