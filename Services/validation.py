from Models.Errors import FieldError, ValidationError
from Models.Sweet import MAX_QUANTITY, Category, round_price

REQUIRED_FIELDS = ("name", "category", "price", "quantity")
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100

CATEGORIES = {category.value: category for category in Category}


def _check_name(name: str, errors: list) -> str:
    name = name.strip()
    if len(name) < NAME_MIN_LENGTH:
        errors.append(FieldError(field="name", message=f"Sweet name must be at least {NAME_MIN_LENGTH} characters long"))
    elif len(name) > NAME_MAX_LENGTH:
        errors.append(FieldError(field="name", message=f"Sweet name cannot exceed {NAME_MAX_LENGTH} characters"))
    return name


def _check_category(category: str, errors: list):
    category = category.strip()
    if category not in CATEGORIES:
        errors.append(FieldError(field="category", message=f"{category} is not a valid category"))
        return None
    return CATEGORIES[category]


def _check_price(price, errors: list):
    try:
        rounded = round_price(price)
    except ValueError as e:
        errors.append(FieldError(field="price", message=str(e)))
        return None
    if rounded <= 0:
        errors.append(FieldError(field="price", message="Price must be greater than 0"))
    return rounded


def _check_quantity(quantity: int, errors: list) -> int:
    if quantity < 0:
        errors.append(FieldError(field="quantity", message="Quantity cannot be negative"))
    elif quantity > MAX_QUANTITY:
        errors.append(FieldError(field="quantity", message=f"Quantity cannot exceed {MAX_QUANTITY}"))
    return quantity


CHECKS = {
    "name": _check_name,
    "category": _check_category,
    "price": _check_price,
    "quantity": _check_quantity,
}


def validate_sweet_fields(fields: dict, partial: bool = False) -> dict:
    """Check sweet fields and return their cleaned values.

    With ``partial`` only the supplied fields are checked, otherwise every
    field in REQUIRED_FIELDS must be present. Every problem found is
    collected before raising, so a single ValidationError names all the
    offending fields.
    """
    errors = []
    if not partial:
        for field in REQUIRED_FIELDS:
            if fields.get(field) is None:
                errors.append(FieldError(field=field, message=f"{field} is required"))

    cleaned = {}
    for field, check in CHECKS.items():
        if fields.get(field) is not None:
            cleaned[field] = check(fields[field], errors)

    if errors:
        raise ValidationError(errors)
    return cleaned
