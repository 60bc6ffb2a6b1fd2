from collections.abc import Iterator


def split_lines(text: str) -> Iterator[str]:
    """Yield the lines of text without terminators, keeping empty lines.

    Only ``\\n`` separates lines; a single ``\\r`` before it is dropped so CRLF
    diffs read the same as LF ones. A final newline does not produce an
    extra empty line.
    """
    if not text:
        return
    if text.endswith("\n"):
        text = text[:-1]
    for line in text.split("\n"):
        yield line[:-1] if line.endswith("\r") else line
