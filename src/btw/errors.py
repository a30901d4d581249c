from __future__ import annotations

from dataclasses import dataclass, field

from btw.domain.models import Frame, Layer
from btw.domain.protocols import Unwrappable


@dataclass(slots=True, eq=False)
class AnnotatedError(Exception):
    """Exception wrapper carrying a captured stack and context layers.

    Attributes:
        cause: The wrapped exception.
        stack: Frames recorded by ``capture``, innermost first.
        context: One :class:`Layer` per ``attach`` call, oldest first.
    """

    cause: BaseException
    stack: list[Frame] = field(default_factory=list)
    context: list[Layer] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.args = (self.cause,)
        self.__cause__ = self.cause

    def __str__(self) -> str:
        return str(self.cause)

    def unwrap(self) -> BaseException:
        return self.cause


def unwrap(err: BaseException | None) -> BaseException | None:
    """Follow one link of the wrapped-cause chain."""
    if err is None:
        return None
    if isinstance(err, Unwrappable):
        return err.unwrap()
    return err.__cause__
