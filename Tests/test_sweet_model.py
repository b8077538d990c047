from decimal import Decimal
import pytest
from pydantic import ValidationError as PydanticValidationError
from Models.Errors import InsufficientStockError, InvalidQuantityError
from Models.Sweet import Category, Sweet, round_price


def make_sweet(**overrides):
    fields = {"sweet_id": "2f1c1f0e-8f55-4b8e-9a53-5f0a3c1e2d11", "name": "Choco Bar",
              "category": "Chocolate", "price": Decimal("2.50"), "quantity": 10}
    fields.update(overrides)
    return Sweet(**fields)


@pytest.mark.parametrize("quantity, status", [(0, "Out of Stock"), (1, "Low Stock"), (4, "Low Stock"), (5, "In Stock"), (50, "In Stock")])
def test_stock_status_boundaries(quantity, status):
    assert make_sweet(quantity=quantity).stock_status == status

def test_in_stock_flag():
    assert make_sweet(quantity=1).in_stock is True
    assert make_sweet(quantity=0).in_stock is False

def test_category_defaults_to_other():
    sweet = Sweet(sweet_id="x", name="Mystery", price=Decimal("1"))
    assert sweet.category == Category.OTHER
    assert sweet.quantity == 0

def test_price_rounds_half_up():
    assert round_price(Decimal("1.005")) == Decimal("1.01")
    assert round_price(Decimal("2.344")) == Decimal("2.34")
    assert make_sweet(price=Decimal("1.005")).price == Decimal("1.01")

def test_price_must_stay_positive():
    with pytest.raises(PydanticValidationError):
        make_sweet(price=Decimal("0"))
    with pytest.raises(PydanticValidationError):
        make_sweet(price=Decimal("0.004"))

def test_quantity_cannot_be_negative():
    with pytest.raises(PydanticValidationError):
        make_sweet(quantity=-1)

def test_unknown_category_rejected():
    with pytest.raises(PydanticValidationError):
        make_sweet(category="Bread")

def test_response_uses_api_field_names():
    data = make_sweet(quantity=3).to_response()
    assert data["id"] == "2f1c1f0e-8f55-4b8e-9a53-5f0a3c1e2d11"
    assert data["price"] == 2.5
    assert data["category"] == "Chocolate"
    assert data["inStock"] is True
    assert data["stockStatus"] == "Low Stock"
    assert "createdAt" in data
    assert "name_key" not in data

def test_dynamodb_item_carries_search_keys():
    item = make_sweet(name="Ice Pop", category="Ice Cream").to_dynamodb_item()
    assert item["sweet_id"] == "2f1c1f0e-8f55-4b8e-9a53-5f0a3c1e2d11"
    assert item["price"] == Decimal("2.50")
    assert item["category"] == "Ice Cream"
    assert item["name_key"] == "ice pop"
    assert item["category_key"] == "ice cream"

def test_from_dynamodb_item_accepts_decimal_numbers():
    item = make_sweet().to_dynamodb_item()
    item["quantity"] = Decimal("7")
    sweet = Sweet.from_dynamodb_item(item)
    assert sweet.quantity == 7
    assert isinstance(sweet.quantity, int)

@pytest.mark.parametrize("requested, expected", [(1, True), (10, True), (0, False), (-1, False), (11, False)])
def test_can_purchase(requested, expected):
    assert make_sweet(quantity=10).can_purchase(requested) is expected

@pytest.mark.parametrize("requested", [0, -1, 11])
def test_purchase_rejected_leaves_store_untouched(fake_store, requested):
    sweet = make_sweet(quantity=10)
    fake_store.put_new(sweet.to_dynamodb_item())
    with pytest.raises(InsufficientStockError):
        sweet.purchase(requested, fake_store)
    assert fake_store.items[sweet.sweet_id]["quantity"] == 10
    assert fake_store.writes == 1

def test_purchase_decrements_by_delta(fake_store):
    sweet = make_sweet(quantity=10)
    fake_store.put_new(sweet.to_dynamodb_item())
    updated = sweet.purchase(3, fake_store)
    assert updated.quantity == 7
    assert updated.updated_at is not None
    assert fake_store.items[sweet.sweet_id]["quantity"] == 7

def test_purchase_fails_when_store_has_less_than_snapshot(fake_store):
    sweet = make_sweet(quantity=10)
    fake_store.put_new(sweet.to_dynamodb_item())
    fake_store.items[sweet.sweet_id]["quantity"] = 2  # sold elsewhere since the read
    with pytest.raises(InsufficientStockError):
        sweet.purchase(5, fake_store)
    assert fake_store.items[sweet.sweet_id]["quantity"] == 2

@pytest.mark.parametrize("additional", [0, -5])
def test_restock_requires_positive_quantity(fake_store, additional):
    sweet = make_sweet(quantity=10)
    fake_store.put_new(sweet.to_dynamodb_item())
    with pytest.raises(InvalidQuantityError):
        sweet.restock(additional, fake_store)
    assert fake_store.items[sweet.sweet_id]["quantity"] == 10

def test_restock_increments(fake_store):
    sweet = make_sweet(quantity=0)
    fake_store.put_new(sweet.to_dynamodb_item())
    updated = sweet.restock(12, fake_store)
    assert updated.quantity == 12
    assert updated.stock_status == "In Stock"
