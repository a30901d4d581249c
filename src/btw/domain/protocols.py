"""Domain-level protocols for runtime introspection and value rendering."""

from __future__ import annotations

from types import TracebackType
from typing import Any, Protocol, runtime_checkable

from .models import Frame


class StackInspector(Protocol):
    """Read the interpreter call stack."""

    def current_frames(self, skip: int, max_depth: int) -> list[Frame]:  # pragma: no cover - protocol definition
        """Return up to *max_depth* frames, innermost first.

        ``skip=0`` starts at the caller of this method; every extra unit of
        *skip* drops one more caller.
        """
        ...

    def caller_name(self, skip: int) -> str:  # pragma: no cover - protocol definition
        """Return the qualified function name at *skip*, or ``"???"``."""
        ...

    def traceback_frames(
        self, tb: TracebackType, max_depth: int
    ) -> list[Frame]:  # pragma: no cover - protocol definition
        """Return frames of *tb* innermost first, followed by its outer callers."""
        ...


class ValueFormatter(Protocol):
    def __call__(self, value: Any) -> str: ...  # pragma: no cover - protocol definition


@runtime_checkable
class Unwrappable(Protocol):
    def unwrap(self) -> BaseException | None: ...  # pragma: no cover - protocol definition
