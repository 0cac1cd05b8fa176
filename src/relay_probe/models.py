"""Data models for relay-probe."""

from pathlib import Path
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from relay_probe import constants


class ReadResult(BaseModel):
    """Outcome of one read from the input resource.

    End-of-resource is carried by ``has_more`` alone, never by a byte value,
    so a unit equal to any particular value (including 0xFF) is always data.
    """

    model_config = ConfigDict(frozen=True)

    unit: Annotated[int, Field(ge=constants.MIN_UNIT, le=constants.MAX_UNIT)] | None = Field(
        default=None,
        description="Byte read from the resource (None at end-of-resource)",
    )
    has_more: bool = Field(description="False once the resource is exhausted")

    @model_validator(mode="after")
    def _unit_matches_has_more(self) -> Self:
        if self.has_more and self.unit is None:
            raise ValueError("has_more=True requires a unit")
        if not self.has_more and self.unit is not None:
            raise ValueError("end-of-resource carries no unit")
        return self

    @classmethod
    def exhausted(cls) -> Self:
        return cls(has_more=False)


class RelayReport(BaseModel):
    """Summary of a relay that ran to end-of-resource."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(description="Input resource that was relayed")
    units_relayed: int = Field(ge=0, description="Bytes written to the sink")
