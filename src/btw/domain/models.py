from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

UNKNOWN_FUNC = "???"


class ConfiguredBaseModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Frame(ConfiguredBaseModel):
    """One call-site snapshot."""

    func: str
    file: str
    line: int


class Layer(ConfiguredBaseModel):
    """Context contributed by a single ``attach`` call.

    ``values`` alternates key, value, key, value, ...
    """

    func: str = UNKNOWN_FUNC
    values: tuple[str, ...] = ()

    @field_validator("values", mode="after")
    @classmethod
    def _drop_unpaired(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return v[: len(v) // 2 * 2]

    def pairs(self) -> list[tuple[str, str]]:
        return list(zip(self.values[::2], self.values[1::2]))
