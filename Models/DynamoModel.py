from decimal import Decimal
from enum import Enum
from pydantic import BaseModel


def to_dynamodb_value(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, float):
        return Decimal(str(value))
    return value


class DynamoModel(BaseModel):
    def to_dynamodb_item(self) -> dict:
        return {name: to_dynamodb_value(getattr(self, name)) for name in type(self).model_fields}

    @classmethod
    def from_dynamodb_item(cls, dynamodb_item: dict):
        return cls.model_validate(dynamodb_item)
