from __future__ import annotations

import functools
from typing import Any

from dependency_injector import containers, providers

from btw.domain.protocols import StackInspector, ValueFormatter
from btw.infrastructure.stack import FrameStackInspector
from btw.infrastructure.verbose import verbose_format

from .config import Settings


# ---------- DI container ----------
class AppContainer(containers.DeclarativeContainer):
    """Dependency Injector container holding the process-wide defaults."""

    settings = providers.Singleton(Settings)
    inspector: providers.Singleton[StackInspector] = providers.Singleton(
        FrameStackInspector
    )
    value_formatter: providers.Object[ValueFormatter] = providers.Object(
        verbose_format
    )


# ---------- bootstrap helpers ----------


def build_container(settings: Settings | None = None) -> containers.DynamicContainer:
    """Create a container, optionally pinned to *settings*."""
    container = AppContainer()
    if settings is not None:
        container.settings.override(providers.Object(settings))
    return container


@functools.cache
def get_container() -> containers.DynamicContainer:
    """Return the container used when callers pass no explicit dependencies."""
    return build_container()


def configure(**overrides: Any) -> Settings:
    """Replace the default settings with a validated copy carrying *overrides*."""
    unknown = sorted(set(overrides) - set(Settings.model_fields))
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(unknown)}")
    container = get_container()
    current = container.settings()
    settings = Settings(**{**current.model_dump(), **overrides})
    container.settings.override(providers.Object(settings))
    return settings


def reset_configuration() -> None:
    """Drop overrides made by :func:`configure`."""
    container = get_container()
    container.settings.reset_override()
    container.settings.reset()
