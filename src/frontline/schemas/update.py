from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class TilePatch(BaseModel):
    """Partial update of one cell. Absent fields reset the attribute to its default."""

    model_config = ConfigDict(extra="ignore")

    kind: Any = Field(None, description="Cell type code (mountain/open/city/general)")
    units: Any = Field(None, description="Army count, checked against the cell's domain on apply")
    owner: Any = Field(None, description="Owning player id, checked against the cell's domain on apply")


class UpdateEnvelope(BaseModel):
    """One inbound server message."""

    model_config = ConfigDict(extra="ignore")

    height: StrictInt = Field(..., ge=0, description="Number of rows of the map")
    width: StrictInt = Field(..., ge=0, description="Number of columns of the map")
    players: Any = Field(..., description="Player roster, passed through untouched")
    turn: Any = Field(..., description="Turn counter, passed through untouched")
    tiles: list[tuple[StrictInt, TilePatch | None]] = Field(
        ..., description="Sparse [index, patch] pairs; a null patch hides the cell"
    )
