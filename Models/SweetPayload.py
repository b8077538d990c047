from decimal import Decimal
from pydantic import BaseModel, StrictInt

class SweetPayload(BaseModel):
    name: str | None = None
    category: str | None = None
    price: Decimal | None = None
    quantity: StrictInt | None = None

    def supplied_fields(self) -> dict:
        return self.model_dump(exclude_none=True)
