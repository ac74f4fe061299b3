# link_scout/crawler/link_extractor.py
"""
Link extraction and URL resolution utilities for LinkScout.

Extraction is a plain text scan over the response body, not an HTML parse:
any ``href``, ``src`` or ``to`` assignment counts, including ones inside
scripts, styles and comments.
"""
from __future__ import annotations

import re
from typing import Callable, List
from urllib.parse import quote, urldefrag, urljoin, urlsplit, urlunsplit

__all__ = (
    "LINK_PATTERN",
    "Extractor",
    "extract_references",
    "parse_reference",
    "remove_dot_segments",
    "resolve_reference",
    "strip_fragment",
)

LINK_PATTERN = re.compile(r"""(?:to|src|href)\s*=\s*["']?([^"'\s<>]+)["']?""")

_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_PORT_RE = re.compile(r":[0-9]*")

# characters kept as-is when escaping a path; "%" keeps existing escapes intact
_PATH_SAFE = "/%:@!$&'()*+,;=-._~"

#: body -> candidate URL strings
Extractor = Callable[[str], List[str]]


def extract_references(body: str) -> List[str]:
    """Return every referenced value found in *body*, in document order."""
    return LINK_PATTERN.findall(body)


def parse_reference(raw: str) -> None:
    """
    Validate a candidate reference.

    Raises ValueError if *raw* cannot be a URL: control characters,
    broken percent escapes outside the query, a colon in the first segment
    without a scheme, an unbalanced IPv6 bracket or a non-numeric port.
    Out of range ports parse fine and fail later, at request time.
    """
    if _CONTROL_RE.search(raw):
        raise ValueError(f"invalid control character in URL {raw!r}")
    if raw.startswith(":"):
        raise ValueError(f"missing protocol scheme in {raw!r}")
    parts = urlsplit(raw)  # ValueError on "http://[::1"
    for component in (parts.netloc, parts.path, parts.fragment):
        if _BAD_ESCAPE_RE.search(component):
            raise ValueError(f"invalid URL escape in {raw!r}")
    if not parts.scheme and ":" in raw.split("/", 1)[0]:
        raise ValueError(f"first path segment in URL cannot contain colon: {raw!r}")
    host = parts.netloc.rpartition("@")[2]
    if host.startswith("["):
        port = host.partition("]")[2]
    else:
        port = host[host.index(":"):] if ":" in host else ""
    if port and not _PORT_RE.fullmatch(port):
        raise ValueError(f"invalid port {port!r} in {raw!r}")


def remove_dot_segments(path: str) -> str:
    """Drop ``.`` and ``..`` segments from an absolute path (RFC 3986, 5.2.4)."""
    segments = path.split("/")
    output: List[str] = []
    for segment in segments:
        if segment == ".":
            continue
        if segment == "..":
            if len(output) > 1:
                output.pop()
            continue
        output.append(segment)
    if segments[-1] in (".", ".."):
        output.append("")
    return "/".join(output)


def resolve_reference(base: str, raw: str) -> str:
    """
    Resolve *raw* relative to *base* (RFC 3986); ValueError if malformed.

    The path of the result has its dot segments removed and non-ASCII
    characters percent-encoded, so equal resources give equal strings.
    """
    parse_reference(raw)
    parts = urlsplit(urljoin(base, raw))
    path = parts.path
    if path.startswith("/"):
        path = remove_dot_segments(path)
    return urlunsplit(parts._replace(path=quote(path, safe=_PATH_SAFE)))


def strip_fragment(url: str) -> str:
    """Drop the ``#fragment`` part: both forms name the same resource."""
    return urldefrag(url).url
