import re
from dataclasses import dataclass

from diffparser.models import FileMode
from .paths import DEV_NULL, parse_side_path, unquote
from .segmenter import FileBlock


_INDEX_RE = re.compile(r"^index (?P<old>[0-9a-fA-F]+)\.\.(?P<new>[0-9a-fA-F]+)")
_NULL_HASH_RE = re.compile(r"^0+$")
_BINARY_PAYLOAD_RE = re.compile(r"^(?:(?:literal|delta) \d+|[A-Za-z][0-9A-Za-z!#$%&()*+;<=>?@^_`{|}~-]*)?$")

EXTENDED_HEADERS = (
    "--- ",
    "+++ ",
    "old mode ",
    "new mode ",
    "new file mode ",
    "deleted file mode ",
    "index ",
    "similarity index ",
    "dissimilarity index ",
    "rename from ",
    "rename to ",
    "copy from ",
    "copy to ",
    "Binary files ",
    "GIT binary patch",
)


@dataclass
class FileHeader:
    orig_name: str
    new_name: str
    mode: FileMode
    hash: str
    is_binary: bool
    text: str
    hunk_offset: int  # index of the first @@ line in the block, len(lines) if none


def parse_header(block: FileBlock) -> FileHeader:
    """Read names, mode and blob hash from the lines before the first hunk."""
    orig_name, new_name = block.orig_name, block.new_name
    is_new = is_deleted = is_binary = False
    blob_hash = ""
    header_end = hunk_offset = len(block.lines)
    in_binary_patch = False

    for index, line in enumerate(block.lines[1:], start=1):
        if line.startswith("@@"):
            header_end = hunk_offset = index
            break
        if in_binary_patch and _BINARY_PAYLOAD_RE.match(line):
            continue
        if not line.startswith(EXTENDED_HEADERS):
            # Mail trailers and other text after the header
            header_end = index
            hunk_offset = _first_hunk(block.lines, index)
            break

        if line.startswith("--- "):
            path = parse_side_path(line[4:], "a/")
            if path == DEV_NULL:
                is_new = True
            else:
                orig_name = path
        elif line.startswith("+++ "):
            path = parse_side_path(line[4:], "b/")
            if path == DEV_NULL:
                is_deleted = True
            else:
                new_name = path
        elif line.startswith("new file mode"):
            is_new = True
        elif line.startswith("deleted file mode"):
            is_deleted = True
        elif line.startswith(("rename from ", "copy from ")):
            orig_name = unquote(line.split(" ", 2)[2])
        elif line.startswith(("rename to ", "copy to ")):
            new_name = unquote(line.split(" ", 2)[2])
        elif line.startswith("index "):
            blob_hash = _parse_hash(line)
        elif line.startswith("Binary files "):
            is_binary = True
        elif line.startswith("GIT binary patch"):
            is_binary = in_binary_patch = True

    return FileHeader(
        orig_name=orig_name,
        new_name=new_name,
        mode=_file_mode(is_new, is_deleted),
        hash=blob_hash,
        is_binary=is_binary,
        text="\n".join(block.lines[:header_end]),
        hunk_offset=hunk_offset,
    )


def _first_hunk(lines: list[str], start: int) -> int:
    for index in range(start, len(lines)):
        if lines[index].startswith("@@"):
            return index
    return len(lines)


def _parse_hash(line: str) -> str:
    """Post-image blob id of an index line; the pre-image one for deleted files."""
    match = _INDEX_RE.match(line)
    if not match:
        return ""
    if _NULL_HASH_RE.match(match.group("new")):
        return match.group("old")
    return match.group("new")


def _file_mode(is_new: bool, is_deleted: bool) -> FileMode:
    if is_new and not is_deleted:
        return FileMode.NEW
    if is_deleted and not is_new:
        return FileMode.DELETED
    return FileMode.MODIFIED
