"""
Константы сообщений.

Стабильные тексты сообщений, которые возвращаются клиентам в Result.
"""


class MessageConstants:
    """Тексты сообщений API."""

    # Success Messages
    OPERATION_SUCCESSFUL = "Operation completed successfully"
    CREATE_SUCCESSFUL = "Record created successfully"
    UPDATE_SUCCESSFUL = "Record updated successfully"
    DELETE_SUCCESSFUL = "Record deleted successfully"

    # Product Messages
    PRODUCT_CREATED = "Product created successfully"
    PRODUCT_UPDATED = "Product updated successfully"
    PRODUCT_DELETED = "Product deleted successfully"
    PRODUCT_NOT_FOUND = "Product not found"
    PRODUCT_ALREADY_EXISTS = "Product with this name already exists"
    PRODUCT_STOCK_UPDATED = "Product stock updated successfully"
    PRODUCT_ACTIVATED = "Product activated successfully"
    PRODUCT_DEACTIVATED = "Product deactivated successfully"

    # Category Messages
    CATEGORY_CREATED = "Category created successfully"
    CATEGORY_UPDATED = "Category updated successfully"
    CATEGORY_DELETED = "Category deleted successfully"
    CATEGORY_NOT_FOUND = "Category not found"
    CATEGORY_ALREADY_EXISTS = "Category with this name already exists"
    CATEGORY_ACTIVATED = "Category activated successfully"
    CATEGORY_DEACTIVATED = "Category deactivated successfully"
    CATEGORY_HAS_PRODUCTS = "Cannot delete category that contains products"

    # Validation Messages
    VALIDATION_FAILED = "Validation failed"
    REQUIRED_FIELD = "This field is required"
    INVALID_FORMAT = "Invalid format"
    INVALID_RANGE = "Value is out of valid range"
    DUPLICATE_VALUE = "Duplicate value not allowed"

    # Error Messages
    INTERNAL_SERVER_ERROR = "An internal server error occurred"
    UNAUTHORIZED_ACCESS = "Unauthorized access"
    FORBIDDEN_ACCESS = "Access forbidden"
    BAD_REQUEST = "Bad request"
    NOT_FOUND = "Resource not found"
    CONFLICT = "Resource conflict"

    # Database Messages
    DATABASE_CONNECTION_FAILED = "Database connection failed"
    TRANSACTION_FAILED = "Transaction failed"
    CONCURRENCY_CONFLICT = "Record was modified by another user"
