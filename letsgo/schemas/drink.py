from pydantic import BaseModel

from letsgo.schemas.common import Money


class DrinkOut(BaseModel):
    id: int
    name: str
    price: Money
    is_available: bool

    model_config = {"from_attributes": True}
