import re


GIT_MARKER = "diff --git "
DEV_NULL = "/dev/null"

_UNQUOTED_PATHS_RE = re.compile(r"^a/(?P<orig>.+?) b/(?P<new>.+)$")
_ESCAPES = {
    "a": 7,
    "b": 8,
    "t": 9,
    "n": 10,
    "v": 11,
    "f": 12,
    "r": 13,
    '"': 34,
    "\\": 92,
}


def unquote(token: str) -> str:
    """Decode a git C-style quoted path. Unquoted tokens are returned unchanged."""
    if len(token) < 2 or not (token.startswith('"') and token.endswith('"')):
        return token

    body = token[1:-1]
    decoded = bytearray()
    i = 0
    while i < len(body):
        char = body[i]
        if char != "\\" or i + 1 == len(body):
            decoded += char.encode("utf-8")
            i += 1
            continue

        escaped = body[i + 1]
        if escaped in "01234567":
            digits = re.match(r"[0-7]{1,3}", body[i + 1:]).group()
            decoded.append(int(digits, 8) & 0xFF)
            i += 1 + len(digits)
        else:
            decoded += bytes([_ESCAPES[escaped]]) if escaped in _ESCAPES else escaped.encode("utf-8")
            i += 2

    return decoded.decode("utf-8", errors="replace")


def parse_git_paths(line: str) -> tuple[str, str] | None:
    """Parse `diff --git a/<orig> b/<new>` -> (orig, new), prefixes removed."""
    if not line.startswith(GIT_MARKER):
        return None

    tokens = _split_tokens(line[len(GIT_MARKER):])
    if tokens is None:
        return None

    orig, new = (unquote(token) for token in tokens)
    if not (orig.startswith("a/") and new.startswith("b/")):
        return None
    orig, new = orig[2:], new[2:]
    if not orig or not new:
        return None
    return orig, new


def parse_side_path(value: str, prefix: str) -> str:
    """Parse the path of a `---`/`+++` line, dropping a trailing tab section and the side prefix."""
    if value.startswith('"'):
        value = value.rstrip()
    else:
        value = value.split("\t", 1)[0]
    path = unquote(value)
    if path == DEV_NULL:
        return path
    return path[len(prefix):] if path.startswith(prefix) else path


def _split_tokens(rest: str) -> tuple[str, str] | None:
    if rest.startswith('"'):
        taken = _take_quoted(rest)
        if taken is None:
            return None
        first, remainder = taken
        if not remainder.startswith(" ") or len(remainder) < 2:
            return None
        return first, remainder[1:]

    if rest.endswith('"'):
        split_at = rest.rfind(' "')
        if split_at <= 0:
            return None
        return rest[:split_at], rest[split_at + 1:]

    # Same path on both sides: split in the middle so spaces in names survive
    if (len(rest) - 5) % 2 == 0 and len(rest) > 5:
        size = (len(rest) - 5) // 2
        orig, separator, new = rest[:2 + size], rest[2 + size:5 + size], rest[5 + size:]
        if separator == " b/" and orig[2:] == new and orig.startswith("a/"):
            return orig, "b/" + new

    match = _UNQUOTED_PATHS_RE.match(rest)
    if not match:
        return None
    return "a/" + match.group("orig"), "b/" + match.group("new")


def _take_quoted(text: str) -> tuple[str, str] | None:
    i = 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == '"':
            return text[:i + 1], text[i + 1:]
        i += 1
    return None
