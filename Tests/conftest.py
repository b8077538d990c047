import copy
import uuid
from decimal import Decimal
import boto3
import pytest
from moto import mock_aws
from DB.DB import Config
from Models.Errors import DuplicateError, InsufficientStockError, NotFoundError
from Models.Sweet import Sweet

REGION = "ap-southeast-2"
TABLE_NAME = "sweet-shop"


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "test_secret_key")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setattr(Config, "DB_REGION_NAME", REGION)
    monkeypatch.setattr(Config, "DB_ACCESS_KEY_ID", "testing")
    monkeypatch.setattr(Config, "DB_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setattr(Config, "TABLE_NAME", TABLE_NAME)


# Mock DynamoDB setup
@pytest.fixture
def sweets_table(mock_env):
    with mock_aws():
        ddb = boto3.resource('dynamodb', region_name=REGION)
        table = ddb.create_table(
            TableName=TABLE_NAME,
            KeySchema=[{'AttributeName': 'sweet_id', 'KeyType': 'HASH'}],
            AttributeDefinitions=[{'AttributeName': 'sweet_id', 'AttributeType': 'S'}],
            BillingMode='PAY_PER_REQUEST'
        )
        yield table


@pytest.fixture
def seed_sweet():
    """Return a helper that writes a sweet straight into a table."""
    def _seed(table, name="Choco Bar", category="Chocolate", price="2.50", quantity=10):
        sweet = Sweet(sweet_id=str(uuid.uuid4()), name=name, category=category,
                      price=Decimal(str(price)), quantity=quantity)
        table.put_item(Item=sweet.to_dynamodb_item())
        return sweet
    return _seed


class FakeSweetStore:
    """In-memory stand-in for SweetStore with the same conditional semantics."""

    def __init__(self):
        self.items = {}
        self.writes = 0

    def put_new(self, item):
        if item["sweet_id"] in self.items:
            raise DuplicateError("id")
        self.items[item["sweet_id"]] = copy.deepcopy(item)
        self.writes += 1
        return item

    def get(self, sweet_id):
        item = self.items.get(sweet_id)
        return copy.deepcopy(item) if item is not None else None

    def scan(self, filter_expression=None):
        # Filtering is covered against moto; the fake only lists.
        assert filter_expression is None
        return [copy.deepcopy(item) for item in self.items.values()]

    def replace(self, item):
        if item["sweet_id"] not in self.items:
            raise NotFoundError(item["sweet_id"])
        self.items[item["sweet_id"]] = copy.deepcopy(item)
        self.writes += 1
        return item

    def delete(self, sweet_id):
        if sweet_id not in self.items:
            raise NotFoundError(sweet_id)
        self.writes += 1
        return self.items.pop(sweet_id)

    def adjust_quantity(self, sweet_id, delta, updated_at):
        item = self.items.get(sweet_id)
        if item is None:
            if delta < 0:
                raise InsufficientStockError()
            raise NotFoundError(sweet_id)
        if delta < 0 and item["quantity"] < -delta:
            raise InsufficientStockError()
        item["quantity"] += delta
        item["updated_at"] = updated_at
        self.writes += 1
        return copy.deepcopy(item)


@pytest.fixture
def fake_store():
    return FakeSweetStore()
