from __future__ import annotations

from .stack import FrameStackInspector, NullStackInspector, qualified_name
from .verbose import verbose_format

__all__ = [
    "FrameStackInspector",
    "NullStackInspector",
    "qualified_name",
    "verbose_format",
]
