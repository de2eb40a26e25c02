"""Pydantic models describing the JSON payloads printed by the CLI."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .session import Outcome
from .units import UnitDefinition, aliases_for

__all__ = ["ConversionPayload", "UnitPayload"]


class UnitPayload(BaseModel):
    """Public description of a catalog unit."""

    id: str = Field(..., description="Catalog identifier")
    code: str = Field(..., description="Canonical short code")
    singular: str = Field(..., description="Display name used for exactly one unit")
    plural: str = Field(..., description="Display name used for any other amount")
    category: str = Field(..., description="Measured quantity (Length, Weight, Temperature)")
    multiplier: float = Field(..., description="Size in the category base unit; 0 for temperatures")
    aliases: List[str] = Field(default_factory=list, description="Accepted spellings, case-insensitive")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_definition(cls, definition: UnitDefinition) -> "UnitPayload":
        return cls(
            id=definition.id,
            code=definition.code,
            singular=definition.singular,
            plural=definition.plural,
            category=str(definition.category),
            multiplier=definition.multiplier,
            aliases=list(aliases_for(definition)),
        )


class ConversionPayload(BaseModel):
    """Structured result of a single request."""

    input: str
    status: str = Field(..., description="converted, impossible, negative or parse_error")
    message: str
    value: Optional[float] = None
    result: Optional[float] = None
    source: Optional[UnitPayload] = None
    target: Optional[UnitPayload] = None

    @classmethod
    def from_outcome(cls, line: str, outcome: Outcome) -> "ConversionPayload":
        conversion = outcome.conversion
        if conversion is None:
            return cls(input=line, status=outcome.kind.value, message=outcome.message)
        return cls(
            input=line,
            status=outcome.kind.value,
            message=outcome.message,
            value=conversion.value,
            result=conversion.result,
            source=UnitPayload.from_definition(conversion.source),
            target=UnitPayload.from_definition(conversion.target),
        )
