from diffparser.models import ParseIssue


class DiffParseError(ValueError):
    """Raised when diff text cannot be parsed."""


class HunkHeaderError(DiffParseError):
    """Raised in strict mode for an `@@` line that is not a valid range header."""

    def __init__(self, issue: ParseIssue):
        self.issue = issue
        super().__init__(
            f"Malformed hunk header in {issue.file_name} at line {issue.line_number}: {issue.header!r}"
        )
