from .result import FieldError, ValidationResult
from .category_validator import validate_category
from .expense_validator import validate_expense
__all__ = [
    "FieldError",
    "ValidationResult",
    "validate_category",
    "validate_expense",
]
