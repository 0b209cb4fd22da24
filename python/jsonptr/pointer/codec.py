"""Token escaping and URI fragment encoding of JSON pointers, see RFC 6901: https://www.rfc-editor.org/rfc/rfc6901."""

import re
from typing import Optional, Sequence, Tuple
from urllib.parse import quote, unquote_to_bytes

from .errors import JSONPointerSyntaxError

# characters outside of this set are percent-encoded in URI fragments (RFC 3986 'unreserved')
_UNRESERVED = "-._~"

_INVALID_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def escape(token: str) -> str:
    """Escape characters '~' and '/' in a token; tokens without them are returned as they are."""

    if "~" not in token and "/" not in token:
        return token
    # the order of the replace statements is important, do not change without
    # consulting the RFC
    return token.replace("~", "~0").replace("/", "~1")


def unescape(segment: str) -> str:
    """Resolve escape sequences '~0' and '~1' in a single segment of a pointer string."""

    start = segment.find("~")
    if start < 0:
        return segment

    parts = [segment[:start]]
    i = start
    length = len(segment)
    while i < length:
        ch = segment[i]
        if ch == "~":
            nxt = segment[i + 1] if i + 1 < length else ""
            if nxt == "0":
                parts.append("~")
            elif nxt == "1":
                parts.append("/")
            else:
                raise JSONPointerSyntaxError(f"illegal token '{segment}' in JSON pointer", segment)
            i += 2
        else:
            parts.append(ch)
            i += 1
    return "".join(parts)


def split_pointer(pointer: str) -> Tuple[str, ...]:
    if pointer == "":
        # pointer to the root
        return ()

    if pointer[0] != "/":
        raise JSONPointerSyntaxError(
            f"JSON pointer '{pointer}' invalid: the first character MUST be '/' or the pointer must be empty",
            pointer,
        )
    return tuple(unescape(segment) for segment in pointer[1:].split("/"))


def join_tokens(tokens: Sequence[str], count: Optional[int] = None) -> str:
    if count is None:
        count = len(tokens)
    return "".join(f"/{escape(tokens[i])}" for i in range(count))


def to_uri_fragment(tokens: Sequence[str]) -> str:
    # quote() works on the UTF-8 encoding of the token and never touches ASCII letters and digits
    return "".join(f"/{quote(escape(token), safe=_UNRESERVED)}" for token in tokens)


def from_uri_fragment(fragment: str) -> Tuple[str, ...]:
    text = fragment[1:] if fragment.startswith("#") else fragment

    if _INVALID_PERCENT_RE.search(text):
        raise JSONPointerSyntaxError(f"illegal percent-encoding in URI fragment '{fragment}'", fragment)
    try:
        decoded = unquote_to_bytes(text).decode("utf-8")
    except UnicodeDecodeError as e:
        raise JSONPointerSyntaxError(f"URI fragment '{fragment}' is not valid UTF-8", fragment) from e
    return split_pointer(decoded)
