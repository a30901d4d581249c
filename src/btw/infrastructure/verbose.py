from __future__ import annotations

from typing import Any


def _has_own_text(value: Any) -> bool:
    cls = type(value)
    return cls.__str__ is not object.__str__ or cls.__repr__ is not object.__repr__


def _render(value: Any) -> str:
    if isinstance(value, str):
        return value
    if _has_own_text(value):
        return str(value)
    fields = getattr(value, "__dict__", None)
    if not fields:
        return str(value)
    body = ", ".join(f"{k}={v!r}" for k, v in fields.items())
    return f"{type(value).__name__}({body})"


def verbose_format(value: Any) -> str:
    """Render *value* for a context column, keeping field names visible.

    Strings pass through unquoted. Anything that defines its own text form
    (dataclasses, pydantic models, containers, exceptions) goes through
    ``str``. Plain objects fall back to ``TypeName(field=value, ...)``.
    A value whose text form raises is rendered as a placeholder naming the
    failure.
    """
    try:
        return _render(value)
    except Exception as exc:
        return f"<{type(value).__name__}: str raised {exc!r}>"
