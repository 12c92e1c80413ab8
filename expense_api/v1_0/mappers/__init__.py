from .category_mapper import category_to_dto, dto_to_category
from .expense_mapper import expense_to_dto, dto_to_expense
__all__ = [
    "category_to_dto",
    "dto_to_category",
    "expense_to_dto",
    "dto_to_expense",
]
