from decimal import Decimal, DecimalException, InvalidOperation
from boto3.dynamodb.types import DYNAMODB_CONTEXT
from pydantic import BaseModel


def _text(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


def _decimal(value: str | None) -> Decimal | None:
    value = _text(value)
    if value is None:
        return None
    try:
        parsed = Decimal(value)
    except InvalidOperation:
        return None
    if not parsed.is_finite():
        return None
    try:
        # Bounds DynamoDB cannot hold exactly would fail the scan.
        return DYNAMODB_CONTEXT.create_decimal(parsed)
    except DecimalException:
        return None


def _flag(value: str | None) -> bool | None:
    return {"true": True, "false": False}.get(value)


class SearchCriteria(BaseModel):
    name: str | None = None
    category: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    in_stock: bool | None = None

    @classmethod
    def from_query(cls, name: str | None = None, category: str | None = None,
                   min_price: str | None = None, max_price: str | None = None,
                   in_stock: str | None = None) -> "SearchCriteria":
        """Build criteria from raw query-string values.

        Blank values, unparseable price bounds and an ``in_stock`` other than
        exactly "true"/"false" all count as not supplied.
        """
        return cls(
            name=_text(name),
            category=_text(category),
            min_price=_decimal(min_price),
            max_price=_decimal(max_price),
            in_stock=_flag(in_stock),
        )

    @property
    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())
