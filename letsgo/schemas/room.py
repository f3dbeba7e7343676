from pydantic import BaseModel

from letsgo.schemas.common import Money


class RoomOut(BaseModel):
    id: int
    name: str
    hourly_rate: Money
    status: str

    model_config = {"from_attributes": True}
