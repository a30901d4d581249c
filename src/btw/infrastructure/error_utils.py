from __future__ import annotations

import asyncio
import functools
import inspect
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

from loguru import logger

from btw.application.annotate import append_layer, capture_traceback
from btw.application.formatting import format_error
from btw.errors import AnnotatedError

P = ParamSpec("P")
R = TypeVar("R")

_OWN_FRAMES = f"{__name__}:"


def _callable_name(func: Callable[..., Any]) -> str:
    return f"{func.__module__}:{func.__qualname__}"


def _annotate(exc: Exception, name: str, ctx: tuple[Any, ...]) -> AnnotatedError:
    if isinstance(exc, AnnotatedError):
        annotated = exc
    else:
        annotated = capture_traceback(exc)
        # drop decorator wrapper frames
        annotated.stack[:] = [
            f for f in annotated.stack if not f.func.startswith(_OWN_FRAMES)
        ]
    logger.debug("Annotating {} raised in {}", type(exc).__name__, name)
    return append_layer(annotated, name, ctx)


def log_error(
    err: BaseException | None,
    *,
    level: str | int = "ERROR",
    log=logger,  # loguru logger-like
) -> None:
    """Log the full :func:`format_error` report on behalf of the caller."""
    log.opt(depth=1).log(level, "{}", format_error(err))


def traced(*ctx: Any) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator annotating exceptions leaving the function with *ctx*.

    Plain exceptions get their traceback captured first; already annotated
    ones just gain a layer attributed to the decorated function.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        name = _callable_name(func)

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
                try:
                    return await func(*args, **kwargs)
                except asyncio.CancelledError:
                    raise
                except Exception as exc:
                    annotated = _annotate(exc, name, ctx)
                    if annotated is exc:
                        raise
                    raise annotated from exc

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                annotated = _annotate(exc, name, ctx)
                if annotated is exc:
                    raise
                raise annotated from exc

        return sync_wrapper  # type: ignore[return-value]

    return decorator
