"""Annotated errors: capture a stack once, attach context on the way up, format at the top."""

from __future__ import annotations

from loguru import logger

from .application.annotate import attach, capture, capture_traceback
from .application.formatting import format_error
from .config import Settings
from .container import configure, reset_configuration
from .domain.models import Frame, Layer
from .errors import AnnotatedError, unwrap
from .infrastructure.error_utils import log_error, traced

logger.disable(__name__)

__all__ = [
    "AnnotatedError",
    "Frame",
    "Layer",
    "Settings",
    "attach",
    "capture",
    "capture_traceback",
    "configure",
    "format_error",
    "log_error",
    "reset_configuration",
    "traced",
    "unwrap",
]
