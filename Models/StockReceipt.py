from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from Models.Sweet import Sweet


class StockReceipt(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    sweet: Sweet

    def to_response(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class PurchaseReceipt(StockReceipt):
    purchased_quantity: int
    remaining_stock: int

    @property
    def message(self) -> str:
        return f"Successfully purchased {self.purchased_quantity} {self.sweet.name}(s)"


class RestockReceipt(StockReceipt):
    restocked_quantity: int
    total_stock: int

    @property
    def message(self) -> str:
        return f"Successfully restocked {self.restocked_quantity} {self.sweet.name}(s)"
