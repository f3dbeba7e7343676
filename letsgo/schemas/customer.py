from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class CustomerOut(BaseModel):
    id: int
    name: str
    phone: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
