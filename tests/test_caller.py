"""test_caller.py - Unit tests for call-site inference.

Covers:
    - locate(0) names the function calling locate()
    - depth skips the given number of frames
    - Frames matching an ignore fragment are skipped
    - An exhausted stack yields the ("???", 0) sentinel, never an error
    - internal_frame_filter() matches by substring
"""

import inspect
import os

from gelflog.caller import (
    DEFAULT_IGNORE,
    UNKNOWN_FILE,
    UNKNOWN_LINE,
    find_caller,
    internal_frame_filter,
    locate,
)


def _here() -> int:
    """Return the line number of the caller."""
    return inspect.currentframe().f_back.f_lineno


def _locate_from_helper(depth: int):
    return locate(depth, ignore=())


class TestLocate:
    def test_locate_depth_zero_returns_calling_frame(self):
        """locate(0) returns this test's file and the line of the call."""
        file, line = locate(0, ignore=()); expected = _here()  # noqa: E702
        assert os.path.basename(file) == "test_caller.py"
        assert line == expected

    def test_locate_depth_one_returns_parent_frame(self):
        """locate(1) from a helper names the helper's caller."""
        file, line = _locate_from_helper(1); expected = _here()  # noqa: E702
        assert os.path.basename(file) == "test_caller.py"
        assert line == expected

    def test_locate_skips_ignored_files(self):
        """Frames whose path matches an ignore fragment are skipped."""
        file, _ = locate(0, ignore=["test_caller.py"])
        assert os.path.basename(file) != "test_caller.py"

    def test_locate_exhausted_stack_returns_sentinel(self):
        """When every frame is ignored, the sentinel is returned."""
        assert locate(0, ignore=["/", "\\", "<"]) == (UNKNOWN_FILE, UNKNOWN_LINE)

    def test_locate_depth_beyond_stack_returns_sentinel(self):
        """A depth larger than the stack yields the sentinel, not an error."""
        assert locate(100_000, ignore=()) == ("???", 0)

    def test_locate_default_ignore_reaches_test_code(self):
        """With the default fragments, this test file is not considered internal."""
        file, _ = locate(0)
        assert os.path.basename(file) == "test_caller.py"


class TestFindCaller:
    def test_find_caller_uses_predicate(self):
        """find_caller() consults the predicate for every candidate frame."""
        seen = []

        def is_internal(path):
            seen.append(path)
            return False

        file, _ = find_caller(0, is_internal)
        assert os.path.basename(file) == "test_caller.py"
        assert [os.path.basename(p) for p in seen] == ["test_caller.py"]


class TestInternalFrameFilter:
    def test_internal_frame_filter_matches_substring(self):
        """A path containing any fragment is internal."""
        is_internal = internal_frame_filter(["/vendor/log/", "/pkg/io/multi.py"])
        assert is_internal("/srv/app/vendor/log/core.py")
        assert is_internal("/go/pkg/io/multi.py")
        assert not is_internal("/srv/app/main.py")

    def test_internal_frame_filter_ignores_empty_fragments(self):
        """An empty fragment does not turn every path into an internal one."""
        assert not internal_frame_filter([""])("/srv/app/main.py")

    def test_default_ignore_covers_logging_package(self):
        """The standard logging package is internal by default."""
        import logging

        assert internal_frame_filter(DEFAULT_IGNORE)(logging.__file__)
