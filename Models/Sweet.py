from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum
from pydantic import ConfigDict, Field, computed_field, field_serializer, field_validator
from pydantic.alias_generators import to_camel
from Models.DynamoModel import DynamoModel
from Models.Errors import InsufficientStockError, InvalidQuantityError

LOW_STOCK_THRESHOLD = 5
PRICE_STEP = Decimal("0.01")
MAX_QUANTITY = 1_000_000_000


class Category(str, Enum):
    CAKE = "Cake"
    COOKIE = "Cookie"
    CANDY = "Candy"
    ICE_CREAM = "Ice Cream"
    PIE = "Pie"
    PASTRY = "Pastry"
    CHOCOLATE = "Chocolate"
    OTHER = "Other"


def round_price(price) -> Decimal:
    # Quantize the decimal representation, not the binary float.
    if not isinstance(price, Decimal):
        price = Decimal(str(price))
    try:
        return price.quantize(PRICE_STEP, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError("Price is too large")


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class Sweet(DynamoModel):
    """One product of the catalog with its price and stock count.

    Stock mutations go through ``purchase`` and ``restock``, which hand a
    delta to the store so the decrement/increment is applied atomically on
    the stored record. Both return the record as the store reports it after
    the write.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    sweet_id: str = Field(alias="id")
    name: str
    category: Category = Category.OTHER
    price: Decimal
    quantity: int = Field(default=0, ge=0)
    created_at: str | None = None
    updated_at: str | None = None

    @field_validator("price")
    @classmethod
    def _round_price(cls, price: Decimal) -> Decimal:
        rounded = round_price(price)
        if rounded <= 0:
            raise ValueError("Price must be greater than 0")
        return rounded

    @field_validator("quantity", mode="before")
    @classmethod
    def _integral_quantity(cls, quantity):
        # DynamoDB hands numbers back as Decimal
        if isinstance(quantity, Decimal) and quantity == quantity.to_integral_value():
            return int(quantity)
        return quantity

    @field_serializer("price", when_used="json")
    def _serialize_price(self, price: Decimal) -> float:
        return float(price)

    @computed_field(alias="inStock")
    @property
    def in_stock(self) -> bool:
        return self.quantity > 0

    @computed_field(alias="stockStatus")
    @property
    def stock_status(self) -> str:
        if self.quantity == 0:
            return "Out of Stock"
        if self.quantity < LOW_STOCK_THRESHOLD:
            return "Low Stock"
        return "In Stock"

    def to_dynamodb_item(self) -> dict:
        item = super().to_dynamodb_item()
        # Lower-cased copies let scans filter case-insensitively.
        item["name_key"] = self.name.lower()
        item["category_key"] = self.category.value.lower()
        return item

    def to_response(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

    def can_purchase(self, requested_quantity: int) -> bool:
        return 0 < requested_quantity <= self.quantity

    def purchase(self, requested_quantity: int, store) -> "Sweet":
        if not self.can_purchase(requested_quantity):
            raise InsufficientStockError()
        attributes = store.adjust_quantity(self.sweet_id, -requested_quantity, utc_timestamp())
        return Sweet.from_dynamodb_item(attributes)

    def restock(self, additional_quantity: int, store) -> "Sweet":
        if additional_quantity <= 0:
            raise InvalidQuantityError()
        attributes = store.adjust_quantity(self.sweet_id, additional_quantity, utc_timestamp())
        return Sweet.from_dynamodb_item(attributes)
