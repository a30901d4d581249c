import sys
from pathlib import Path

from btw.domain.models import UNKNOWN_FUNC
from btw.infrastructure import FrameStackInspector, NullStackInspector, qualified_name


def test_current_frames_starts_at_caller() -> None:
    frames = FrameStackInspector().current_frames(skip=0, max_depth=1)
    assert len(frames) == 1
    assert frames[0].func == f"{__name__}:test_current_frames_starts_at_caller"
    assert Path(frames[0].file).name == Path(__file__).name


def test_current_frames_skip_drops_callers() -> None:
    def helper() -> list[str]:
        return [f.func for f in FrameStackInspector().current_frames(skip=1, max_depth=2)]

    names = helper()
    assert names[0] == f"{__name__}:test_current_frames_skip_drops_callers"
    assert len(names) == 2


def test_current_frames_innermost_first() -> None:
    def inner() -> list[str]:
        return [f.func for f in FrameStackInspector().current_frames(skip=0, max_depth=2)]

    def outer() -> list[str]:
        return inner()

    prefix = f"{__name__}:test_current_frames_innermost_first.<locals>"
    assert outer() == [f"{prefix}.inner", f"{prefix}.outer"]


def test_caller_name() -> None:
    class Worker:
        def run(self) -> str:
            return FrameStackInspector().caller_name(skip=0)

    assert Worker().run() == f"{__name__}:test_caller_name.<locals>.Worker.run"


def test_caller_name_beyond_stack_is_placeholder() -> None:
    assert FrameStackInspector().caller_name(skip=100_000) == UNKNOWN_FUNC


def test_qualified_name_of_current_frame() -> None:
    assert qualified_name(sys._getframe()) == (
        f"{__name__}:test_qualified_name_of_current_frame"
    )


def test_traceback_frames_innermost_first() -> None:
    def fail() -> None:
        raise RuntimeError("x")

    try:
        fail()
    except RuntimeError as exc:
        assert exc.__traceback__ is not None
        frames = FrameStackInspector().traceback_frames(exc.__traceback__, max_depth=3)

    prefix = f"{__name__}:test_traceback_frames_innermost_first"
    assert [f.func for f in frames[:2]] == [f"{prefix}.<locals>.fail", prefix]
    assert len(frames) == 3


def test_null_inspector() -> None:
    inspector = NullStackInspector()
    assert inspector.current_frames(skip=0, max_depth=10) == []
    assert inspector.caller_name(skip=0) == UNKNOWN_FUNC
    try:
        raise ValueError("x")
    except ValueError as exc:
        assert exc.__traceback__ is not None
        assert inspector.traceback_frames(exc.__traceback__, max_depth=10) == []
