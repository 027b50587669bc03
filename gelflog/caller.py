"""caller.py - Best-effort call-site inference for severe records.

When a record is more severe than WARNING, GelfFormatter attaches the file and
line of the application code that emitted it. By the time the formatter runs,
the stack holds a chain of ``logging`` frames (Logger.error, Logger._log,
Handler.handle, Handler.format, ...) plus gelflog's own frames, so the search
walks outward and skips every frame whose source path matches one of a set of
internal path fragments.

Attribution is diagnostic metadata only. ``locate()`` never raises; when no
qualifying frame exists it returns the ``("???", 0)`` sentinel.
"""

import logging
import os
import sys
from typing import Callable, Iterable, Tuple

UNKNOWN_FILE = "???"
UNKNOWN_LINE = 0

# Source directories of the standard logging package and of gelflog itself.
DEFAULT_IGNORE: Tuple[str, ...] = (
    os.path.dirname(logging.__file__) + os.sep,
    os.path.dirname(os.path.abspath(__file__)) + os.sep,
)


def internal_frame_filter(fragments: Iterable[str]) -> Callable[[str], bool]:
    """Build an ``is_internal_frame(path)`` predicate from path fragments.

    A path is internal when it contains any of the fragments as a substring,
    e.g. ``"/logging/"`` or ``"/site-packages/structlog/"``.

    Example:
        >>> is_internal = internal_frame_filter(["/vendor/log/"])
        >>> is_internal("/srv/app/vendor/log/core.py")
        True
        >>> is_internal("/srv/app/main.py")
        False
    """
    fragments = tuple(f for f in fragments if f)

    def is_internal_frame(path: str) -> bool:
        return any(f in path for f in fragments)

    return is_internal_frame


def locate(depth: int = 0, ignore: Iterable[str] = DEFAULT_IGNORE) -> Tuple[str, int]:
    """Return ``(file, line)`` of the first non-internal frame on the stack.

    Args:
        depth: Frames to skip before the search starts. 0 starts at the
            function calling ``locate()``, 1 at its caller, and so on.
        ignore: Path fragments identifying internal frames to skip.

    Returns:
        The source path and line number of the first frame at or above
        ``depth`` whose path matches none of the fragments, or
        ``("???", 0)`` if the stack is exhausted first.
    """
    # +1 skips this frame
    return find_caller(max(depth, 0) + 1, internal_frame_filter(ignore))


def find_caller(
    depth: int, is_internal_frame: Callable[[str], bool]
) -> Tuple[str, int]:
    """Like ``locate()``, with a prebuilt ``is_internal_frame`` predicate."""
    try:
        # +1 skips this frame
        frame = sys._getframe(max(depth, 0) + 1)
    except ValueError:
        return UNKNOWN_FILE, UNKNOWN_LINE

    while frame is not None:
        path = frame.f_code.co_filename
        if not is_internal_frame(path):
            return path, frame.f_lineno
        frame = frame.f_back

    return UNKNOWN_FILE, UNKNOWN_LINE
