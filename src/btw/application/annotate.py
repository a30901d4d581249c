"""Capture and attach operations that build :class:`AnnotatedError` values."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from loguru import logger

from btw.config import Settings
from btw.container import get_container
from btw.domain.models import UNKNOWN_FUNC, Layer
from btw.domain.protocols import StackInspector, ValueFormatter
from btw.errors import AnnotatedError


def _deps(
    settings: Settings | None = None,
    inspector: StackInspector | None = None,
) -> tuple[Settings, StackInspector]:
    container = get_container()
    return (
        settings if settings is not None else container.settings(),
        inspector if inspector is not None else container.inspector(),
    )


def capture(
    err: BaseException | None,
    *,
    settings: Settings | None = None,
    inspector: StackInspector | None = None,
) -> AnnotatedError | None:
    """Wrap *err* and record the call stack of the code calling ``capture``.

    Always wraps, so capturing an already annotated error nests it.
    """
    if err is None:
        return None
    settings, inspector = _deps(settings, inspector)
    annotated = AnnotatedError(err)
    annotated.stack.extend(
        inspector.current_frames(skip=1, max_depth=settings.max_stack_depth)
    )
    if not annotated.stack:
        logger.trace("No frames captured for {!r}", err)
    return annotated


def capture_traceback(
    exc: BaseException | None,
    *,
    settings: Settings | None = None,
    inspector: StackInspector | None = None,
) -> AnnotatedError | None:
    """Like :func:`capture`, but read the stack from ``exc.__traceback__``.

    Useful in ``except`` blocks, where the frames between the raise site and
    the handler are no longer on the live stack.
    """
    if exc is None:
        return None
    settings, inspector = _deps(settings, inspector)
    tb = exc.__traceback__
    if tb is None:
        frames = inspector.current_frames(skip=1, max_depth=settings.max_stack_depth)
    else:
        frames = inspector.traceback_frames(tb, max_depth=settings.max_stack_depth)
    return AnnotatedError(exc, stack=frames)


def append_layer(
    err: BaseException,
    func: str,
    ctx: Sequence[Any],
    value_formatter: ValueFormatter | None = None,
) -> AnnotatedError:
    """Append *ctx* as a layer attributed to *func*, wrapping *err* if needed."""
    annotated = err if isinstance(err, AnnotatedError) else AnnotatedError(err)

    paired = len(ctx) // 2 * 2
    if paired != len(ctx):
        logger.debug("Dropping unpaired context value {!r}", ctx[-1])
    if paired == 0:
        return annotated

    fmt = value_formatter or get_container().value_formatter()
    annotated.context.append(
        Layer(func=func, values=tuple(fmt(v) for v in ctx[:paired]))
    )
    return annotated


def attach(
    err: BaseException | None,
    *ctx: Any,
    inspector: StackInspector | None = None,
    value_formatter: ValueFormatter | None = None,
) -> AnnotatedError | None:
    """Attach key/value context to *err*, attributed to the calling function.

    ``ctx`` alternates keys and values; an unpaired trailing item is dropped.
    Never captures a stack.
    """
    if err is None:
        return None
    func = UNKNOWN_FUNC
    if len(ctx) >= 2:
        _, inspector = _deps(inspector=inspector)
        func = inspector.caller_name(skip=1)
    return append_layer(err, func, ctx, value_formatter)
