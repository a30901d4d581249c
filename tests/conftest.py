from types import TracebackType
from typing import Iterator

import pytest

from btw import Frame, Settings, reset_configuration


class StaticInspector:
    """Inspector returning canned frames and a fixed caller name."""

    def __init__(self, frames: list[Frame] | None = None, name: str = "app.jobs:caller1") -> None:
        self.frames = frames or []
        self.name = name
        self.calls: list[tuple[str, int]] = []

    def current_frames(self, skip: int, max_depth: int) -> list[Frame]:
        self.calls.append(("current_frames", skip))
        return self.frames[:max_depth]

    def caller_name(self, skip: int) -> str:
        self.calls.append(("caller_name", skip))
        return self.name

    def traceback_frames(self, tb: TracebackType, max_depth: int) -> list[Frame]:
        self.calls.append(("traceback_frames", 0))
        return self.frames[:max_depth]


def frame(func: str, line: int, file: str = "app.py") -> Frame:
    return Frame(func=func, file=file, line=line)


@pytest.fixture(autouse=True)
def _reset_configuration() -> Iterator[None]:
    yield
    reset_configuration()


@pytest.fixture
def settings() -> Settings:
    """Settings with the documented defaults, independent of the environment."""
    return Settings(max_stack_depth=256, max_column_width=25)


@pytest.fixture
def inspector() -> StaticInspector:
    return StaticInspector()
