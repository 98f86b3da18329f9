from __future__ import annotations


class CatalogError(Exception):
    """
    Base class for errors surfaced to API clients. Carries the HTTP status code
    and the human-readable message rendered as {"message": ...}.
    """
    status_code: int = 500
    default_message: str = "An unexpected error occurred."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CatalogError):
    status_code = 400
    default_message = "Invalid request."


class MalformedQuery(ValidationError):
    default_message = "Invalid search query format. Must be valid JSON."


class InvalidProductId(ValidationError):
    default_message = "Invalid productId. Must be a number."


class InvalidStatus(ValidationError):
    default_message = "Invalid status. Must be 'active', 'inactive', or 'deleted'."


class InvalidId(ValidationError):
    default_message = "Invalid product ID."


class MissingField(ValidationError):
    default_message = "Fields name, price, description, and categoryName are required."


class InvalidPrice(ValidationError):
    default_message = "Invalid price. Must be a non-negative number."


class CategoryNotFound(ValidationError):
    default_message = "Category not found."


class CategoryDeleted(ValidationError):
    default_message = "Cannot add product. Category is marked as deleted."


class MissingImage(ValidationError):
    default_message = "Product image file is required."


class InvalidFileType(ValidationError):
    default_message = "Only image files are allowed."


class NotFound(CatalogError):
    status_code = 404
    default_message = "Product not found."


class UnexpectedError(CatalogError):
    status_code = 500
