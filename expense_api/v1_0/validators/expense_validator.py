from decimal import Decimal

from expense_api.v1_0.entities import ExpenseDTO
from .result import ValidationResult

# NUMERIC(14, 2)
AMOUNT_MAX_DIGITS = 14
AMOUNT_SCALE = 2
AMOUNT_LIMIT = Decimal(10) ** (AMOUNT_MAX_DIGITS - AMOUNT_SCALE)

def validate_expense(dto: ExpenseDTO) -> ValidationResult:
    result = ValidationResult()

    amount = dto.amount
    if amount is None:
        result.add("amount", "required", "must not be null")
    else:
        if abs(amount) >= AMOUNT_LIMIT:
            result.add("amount", "range", f"must be less than {AMOUNT_LIMIT} in magnitude")
        if -amount.as_tuple().exponent > AMOUNT_SCALE:
            result.add("amount", "scale", f"must have at most {AMOUNT_SCALE} decimal places")

    if dto.expense_date is None:
        result.add("expenseDate", "required", "must not be null")

    if dto.category_dto is None:
        result.add("categoryDto", "required", "must not be null")
    elif dto.category_dto.id is None:
        result.add("categoryDto.id", "required", "must not be null")

    return result
