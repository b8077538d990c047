from pydantic import BaseModel, StrictInt

class StockRequest(BaseModel):
    quantity: StrictInt | None = None
