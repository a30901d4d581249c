"""Stack inspectors backed by interpreter frame objects."""

from __future__ import annotations

import inspect
from types import FrameType, TracebackType

from btw.domain.models import UNKNOWN_FUNC, Frame
from btw.domain.protocols import StackInspector


def qualified_name(frame: FrameType) -> str:
    module = frame.f_globals.get("__name__") or "?"
    return f"{module}:{frame.f_code.co_qualname}"


def _to_frame(frame: FrameType, line: int | None = None) -> Frame:
    return Frame(
        func=qualified_name(frame),
        file=frame.f_code.co_filename,
        line=(frame.f_lineno if line is None else line) or 0,
    )


def _walk_outward(
    frame: FrameType | None, max_depth: int, out: list[Frame]
) -> list[Frame]:
    while frame is not None and len(out) < max_depth:
        out.append(_to_frame(frame))
        frame = frame.f_back
    return out


class FrameStackInspector(StackInspector):
    """Walk ``f_back`` links starting from :func:`inspect.currentframe`."""

    def _start(self, skip: int) -> FrameType | None:
        frame = inspect.currentframe()
        # this helper, the public method, then *skip* callers
        for _ in range(skip + 2):
            if frame is None:
                return None
            frame = frame.f_back
        return frame

    def current_frames(self, skip: int, max_depth: int) -> list[Frame]:
        frame = self._start(skip)
        try:
            return _walk_outward(frame, max_depth, [])
        finally:
            del frame

    def caller_name(self, skip: int) -> str:
        frame = self._start(skip)
        try:
            return UNKNOWN_FUNC if frame is None else qualified_name(frame)
        finally:
            del frame

    def traceback_frames(self, tb: TracebackType, max_depth: int) -> list[Frame]:
        entries: list[tuple[FrameType, int]] = []
        cursor: TracebackType | None = tb
        while cursor is not None:
            entries.append((cursor.tb_frame, cursor.tb_lineno))
            cursor = cursor.tb_next

        frames: list[Frame] = []
        for frame, line in reversed(entries):
            if len(frames) >= max_depth:
                return frames
            frames.append(_to_frame(frame, line))
        return _walk_outward(tb.tb_frame.f_back, max_depth, frames)


class NullStackInspector(StackInspector):
    """Inspector for runtimes without frame introspection."""

    def current_frames(self, skip: int, max_depth: int) -> list[Frame]:
        return []

    def caller_name(self, skip: int) -> str:
        return UNKNOWN_FUNC

    def traceback_frames(self, tb: TracebackType, max_depth: int) -> list[Frame]:
        return []
