from typing import List, Optional
from pydantic import BaseModel


class ErrorCodes:
    """Centralized error code constants"""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "SWEET_NOT_FOUND"
    INVALID_IDENTIFIER = "INVALID_SWEET_ID"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    DUPLICATE = "DUPLICATE_SWEET"
    UNEXPECTED = "UNEXPECTED_ERROR"


class FieldError(BaseModel):
    field: str
    message: str


class SweetShopError(Exception):
    """Base exception for inventory operations."""
    status_code = 500

    def __init__(
        self,
        message: str,
        errors: Optional[List[FieldError]] = None,
        code: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        self.code = code

    def __str__(self):
        error_details = f" - Errors: {', '.join(e.message for e in self.errors)}" if self.errors else ""
        code_details = f" [Code: {self.code}]" if self.code else ""
        return f"{self.__class__.__name__}: {self.message}{error_details}{code_details}"


class ValidationError(SweetShopError):
    """Raised when one or more fields fail validation."""
    status_code = 400

    def __init__(self, errors: List[FieldError]):
        super().__init__(
            message=", ".join(error.message for error in errors),
            errors=errors,
            code=ErrorCodes.VALIDATION_ERROR
        )

    @property
    def fields(self) -> List[str]:
        return [error.field for error in self.errors]


class NotFoundError(SweetShopError):
    """Raised when a requested sweet doesn't exist."""
    status_code = 404

    def __init__(self, sweet_id: str = ""):
        super().__init__(message="Sweet not found", code=ErrorCodes.NOT_FOUND)
        self.sweet_id = sweet_id


class InvalidIdentifierError(SweetShopError):
    """Raised when a sweet id is not a well-formed identifier."""
    status_code = 400

    def __init__(self, sweet_id: str = ""):
        super().__init__(message="Invalid sweet ID", code=ErrorCodes.INVALID_IDENTIFIER)
        self.sweet_id = sweet_id


class InsufficientStockError(SweetShopError):
    """Raised when a purchase asks for a non-positive amount or more than is in stock."""
    status_code = 400

    def __init__(self, message: str = "Insufficient stock or invalid quantity"):
        super().__init__(message=message, code=ErrorCodes.INSUFFICIENT_STOCK)


class InvalidQuantityError(SweetShopError):
    status_code = 400

    def __init__(self, message: str = "Restock quantity must be positive"):
        super().__init__(message=message, code=ErrorCodes.INVALID_QUANTITY)


class DuplicateError(SweetShopError):
    status_code = 400

    def __init__(self, field: str = "id"):
        super().__init__(message=f"{field} already exists", code=ErrorCodes.DUPLICATE)
        self.field = field


class UnexpectedError(SweetShopError):
    """Anything the caller cannot fix. The message stays generic."""
    status_code = 500

    def __init__(self, action: str = "processing request"):
        super().__init__(message=f"Server error while {action}", code=ErrorCodes.UNEXPECTED)
