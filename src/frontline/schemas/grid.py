from typing import Any

from pydantic import BaseModel, Field

from frontline.domain.enums import CellType


class CellSnapshot(BaseModel):
    index: int = Field(..., ge=0, description="Linear index of the cell")
    row: int = Field(..., ge=0, description="Row of the cell")
    col: int = Field(..., ge=0, description="Column of the cell")
    kind: CellType = Field(default=CellType.OPEN, description="Cell type")
    units: int | None = Field(None, ge=0, description="Army count (null if unknown)")
    owner: int | None = Field(None, ge=0, description="Owning player (null if unowned)")
    visible: bool = Field(default=False, description="Whether the player sees the cell")
    selected: bool = Field(default=False, description="Whether the cell is the current selection")


class GridSnapshot(BaseModel):
    height: int = Field(..., ge=0, description="Number of rows")
    width: int = Field(..., ge=0, description="Number of columns")
    selected: int | None = Field(None, description="Index of the selected cell")
    turn: Any = Field(None, description="Last turn reported by the server")
    cells: list[CellSnapshot] = Field(default_factory=list)


class ClickRequest(BaseModel):
    index: int = Field(..., description="Index of the clicked cell")


class KeyRequest(BaseModel):
    code: str = Field(..., min_length=1, description="Key code as reported by the input source")
