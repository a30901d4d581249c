"""Render an error chain, its captured stacks and context into text."""

from __future__ import annotations

import io

from btw.config import Settings
from btw.container import get_container
from btw.errors import AnnotatedError, unwrap

INDENT = "\t"


def base_name(func: str) -> str:
    """Return the last path segment of a qualified function name.

    >>> base_name("app.store.disk:Writer.flush")
    'disk.Writer.flush'
    """
    module, sep, qualname = func.rpartition(":")
    if not sep:
        return func
    return f"{module.rpartition('.')[2]}.{qualname}" if module else qualname


def format_error(err: BaseException | None, *, settings: Settings | None = None) -> str:
    """Produce a report of *err*'s message and every annotated link in its chain."""
    if settings is None:
        settings = get_container().settings()

    out = io.StringIO()
    out.write(f"error: {err}")

    level = 1
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        if isinstance(err, AnnotatedError):
            _format_stack(level, err, out)
            _format_context(level, err, out, settings.max_column_width)
            level += 1
        err = unwrap(err)

    return out.getvalue()


def _format_stack(level: int, err: AnnotatedError, out: io.StringIO) -> None:
    indent = INDENT * level
    count = 0
    prev: str | None = None

    def flush() -> None:
        if count:
            out.write(f"\n{indent}     ... * {count + 1}")

    for frame in err.stack:
        curr = f"\n{indent}from {base_name(frame.func)}() at {frame.file}:{frame.line}"
        if curr == prev:
            count += 1
            continue
        flush()
        count = 0
        out.write(curr)
        prev = curr
    flush()


def _format_context(
    level: int, err: AnnotatedError, out: io.StringIO, max_width: int
) -> None:
    widths = [0, 0]
    for layer in err.context:
        for i, item in enumerate(layer.values):
            if len(item) <= max_width:
                widths[i % 2] = max(widths[i % 2], len(item))

    indent = INDENT * level
    tags: set[str] = set()
    for layer in err.context:
        for pos, (key, value) in enumerate(layer.pairs()):
            if key in tags:
                continue
            tags.add(key)
            out.write(f"\n{indent}[ {key:<{widths[0]}} ]    {value:>{widths[1]}}")
            if pos == 0:
                out.write(f"    by {base_name(layer.func)}()")
