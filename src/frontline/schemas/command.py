from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from frontline.domain.enums import Direction


class MoveCommand(BaseModel):
    """Outbound request to move the units of ``from`` one cell in ``direction``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: Literal["move"] = Field(default="move", description="Command discriminator")
    from_: StrictInt = Field(..., alias="from", ge=0, description="Index of the source cell")
    direction: Direction = Field(..., description="Direction of the move (up/down/left/right)")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
