import logging
import uuid
from Models.Errors import FieldError, InvalidIdentifierError, NotFoundError, ValidationError
from Models.SearchCriteria import SearchCriteria
from Models.StockReceipt import PurchaseReceipt, RestockReceipt
from Models.Sweet import MAX_QUANTITY, Sweet, utc_timestamp
from Services.search import search_sweets
from Services.validation import validate_sweet_fields

logger = logging.getLogger(__name__)


def new_sweet_id() -> str:
    return str(uuid.uuid4())


def parse_sweet_id(sweet_id: str) -> str:
    try:
        return str(uuid.UUID(sweet_id))
    except (ValueError, TypeError, AttributeError):
        raise InvalidIdentifierError(sweet_id)


def _require_quantity(quantity):
    if quantity is None:
        raise ValidationError([FieldError(field="quantity", message="quantity is required")])
    if quantity > MAX_QUANTITY:
        raise ValidationError([FieldError(field="quantity", message=f"Quantity cannot exceed {MAX_QUANTITY}")])
    return quantity


class InventoryService:
    """Catalog and stock operations over an injected store.

    Holds no state between calls; every operation reads what it needs from
    the store and writes its result back before returning.
    """

    def __init__(self, store, id_factory=new_sweet_id):
        self.store = store
        self.id_factory = id_factory

    def create(self, fields: dict) -> Sweet:
        cleaned = validate_sweet_fields(fields)
        now = utc_timestamp()
        sweet = Sweet(sweet_id=self.id_factory(), created_at=now, updated_at=now, **cleaned)
        self.store.put_new(sweet.to_dynamodb_item())
        logger.info("Created sweet %s (%s)", sweet.sweet_id, sweet.name)
        return sweet

    def get_all(self) -> list[Sweet]:
        return search_sweets(self.store, SearchCriteria())

    def search(self, criteria: SearchCriteria) -> list[Sweet]:
        return search_sweets(self.store, criteria)

    def get_by_id(self, sweet_id: str) -> Sweet:
        sweet_id = parse_sweet_id(sweet_id)
        item = self.store.get(sweet_id)
        if item is None:
            raise NotFoundError(sweet_id)
        return Sweet.from_dynamodb_item(item)

    def update(self, sweet_id: str, fields: dict) -> Sweet:
        existing = self.get_by_id(sweet_id)
        cleaned = validate_sweet_fields(fields, partial=True)
        updated = existing.model_copy(update={**cleaned, "updated_at": utc_timestamp()})
        self.store.replace(updated.to_dynamodb_item())
        logger.info("Updated sweet %s fields=%s", updated.sweet_id, sorted(cleaned))
        return updated

    def delete(self, sweet_id: str) -> Sweet:
        sweet_id = parse_sweet_id(sweet_id)
        removed = Sweet.from_dynamodb_item(self.store.delete(sweet_id))
        logger.info("Deleted sweet %s", sweet_id)
        return removed

    def purchase(self, sweet_id: str, quantity: int | None) -> PurchaseReceipt:
        quantity = _require_quantity(quantity)
        sweet = self.get_by_id(sweet_id).purchase(quantity, self.store)
        logger.info("Purchased %s of sweet %s, %s left", quantity, sweet.sweet_id, sweet.quantity)
        return PurchaseReceipt(sweet=sweet, purchased_quantity=quantity, remaining_stock=sweet.quantity)

    def restock(self, sweet_id: str, quantity: int | None) -> RestockReceipt:
        quantity = _require_quantity(quantity)
        sweet = self.get_by_id(sweet_id).restock(quantity, self.store)
        logger.info("Restocked %s of sweet %s, %s in stock", quantity, sweet.sweet_id, sweet.quantity)
        return RestockReceipt(sweet=sweet, restocked_quantity=quantity, total_stock=sweet.quantity)
