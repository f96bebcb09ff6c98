"""
Lexical path joining.

Joins path segments with the separator of a path style and normalizes the
result. Everything here works on strings only:
1. Empty segments are skipped
2. Runs of separators collapse to one
3. `.` elements are dropped and `..` elements consume their parent
4. Trailing separators are removed unless the path is the root

No path is ever checked against the filesystem.
"""

import logging
import string
from typing import Optional

from pathjoin.schemas import JoinRequest, JoinResult, PathStyle
from pathjoin.utils import default_style

logger = logging.getLogger(__name__)

CURRENT_DIR = "."
PARENT_DIR = ".."


def _resolve_style(style: Optional[PathStyle]) -> PathStyle:
    if style is None:
        return default_style()
    return PathStyle(style)


def _volume_name(path: str) -> str:
    """Leading drive volume ("C:") of a windows path, or empty string."""
    if len(path) >= 2 and path[1] == ":" and path[0] in string.ascii_letters:
        return path[:2]
    return ""


def _clean_elements(path: str, sep: str) -> str:
    rooted = path.startswith(sep)
    parts = []

    for element in path.split(sep):
        if element in ("", CURRENT_DIR):
            continue
        if element == PARENT_DIR:
            if parts and parts[-1] != PARENT_DIR:
                parts.pop()
            elif not rooted:
                # Relative paths keep leading ".." elements; ".." at the root is the root
                parts.append(PARENT_DIR)
            continue
        parts.append(element)

    cleaned = sep.join(parts)
    if rooted:
        return sep + cleaned
    return cleaned or CURRENT_DIR


def clean(path: str, style: Optional[PathStyle] = None) -> str:
    """
    Return the shortest path equivalent to `path` by lexical processing.

    Args:
        path: Path string to normalize
        style: Path style; defaults to the configured style

    Returns:
        Normalized path. An empty input yields "."
    """
    style = _resolve_style(style)
    sep = style.separator

    if style is PathStyle.WINDOWS:
        path = path.replace("/", sep)
        volume = _volume_name(path)
        remainder = path[len(volume):]
        if volume and not remainder:
            return volume + CURRENT_DIR
        cleaned = _clean_elements(remainder, sep)
        if not volume and ":" in cleaned.split(sep, 1)[0]:
            # A relative first element like "C:" must not read back as a drive
            cleaned = CURRENT_DIR + sep + cleaned
        return volume + cleaned

    return _clean_elements(path, sep)


def join(*segments: str, style: Optional[PathStyle] = None) -> str:
    """
    Join path segments into a single cleaned path.

    Args:
        *segments: Path segments in order; empty segments are ignored
        style: Path style; defaults to the configured style

    Returns:
        The joined path, or "" if every segment is empty
    """
    style = _resolve_style(style)
    sep = style.separator
    elements = [s for s in segments if s]

    if not elements:
        return ""

    first = elements[0]
    if style is PathStyle.WINDOWS and len(first) == 2 and first[1] == ":":
        # A bare drive stays drive-relative: "C:" + "a" is "C:a", not "C:\a"
        joined = clean(first + sep.join(elements[1:]), style)
    else:
        joined = clean(sep.join(elements), style)

    logger.debug("Joined %d segment(s) with %s style: %r", len(elements), style.value, joined)
    return joined


def join_request(request: JoinRequest) -> JoinResult:
    """
    Join the segments of a validated request.

    Args:
        request: JoinRequest with segments and style

    Returns:
        JoinResult carrying the joined path
    """
    path = join(*request.segments, style=request.style)
    return JoinResult(
        segments=list(request.segments),
        style=request.style,
        separator=request.style.separator,
        path=path,
    )
