from functools import reduce
from operator import and_
from boto3.dynamodb.conditions import Attr
from Models.SearchCriteria import SearchCriteria
from Models.Sweet import Sweet


def build_filter_expression(criteria: SearchCriteria):
    """Translate search criteria into a DynamoDB filter, or None to match everything."""
    conditions = []
    if criteria.name is not None:
        conditions.append(Attr("name_key").contains(criteria.name.lower()))
    if criteria.category is not None:
        conditions.append(Attr("category_key").eq(criteria.category.lower()))
    if criteria.min_price is not None:
        conditions.append(Attr("price").gte(criteria.min_price))
    if criteria.max_price is not None:
        conditions.append(Attr("price").lte(criteria.max_price))
    if criteria.in_stock is True:
        conditions.append(Attr("quantity").gt(0))
    elif criteria.in_stock is False:
        conditions.append(Attr("quantity").eq(0))

    if not conditions:
        return None
    return reduce(and_, conditions)


def sort_by_name(sweets: list[Sweet]) -> list[Sweet]:
    return sorted(sweets, key=lambda sweet: sweet.name)


def search_sweets(store, criteria: SearchCriteria) -> list[Sweet]:
    items = store.scan(build_filter_expression(criteria))
    return sort_by_name([Sweet.from_dynamodb_item(item) for item in items])
