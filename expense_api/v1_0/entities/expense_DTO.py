import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, StrictInt, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from .category_DTO import CategoryDTO

ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")

class ExpenseDTO(BaseModel):
    """
    Wire shape of an expense.

    On input only ``categoryDto.id`` is read from the nested category; on
    output the nested category is the fully resolved row.
    """
    id: Optional[StrictInt] = None
    amount: Optional[Decimal] = None
    expense_date: Optional[date] = None
    category_dto: Optional[CategoryDTO] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "amount": 138.75,
                "expenseDate": "2025-10-09",
                "categoryDto": {"id": 2},
            }
        },
    )

    @field_validator("expense_date", mode="before")
    @classmethod
    def _iso_calendar_date(cls, v: Any):
        if v is None:
            return v
        if isinstance(v, datetime):
            raise ValueError("expenseDate must be a calendar date, not a datetime")
        if isinstance(v, date):
            return v
        if isinstance(v, str) and ISO_DATE.fullmatch(v):
            return v
        raise ValueError("expenseDate must be an ISO-8601 date (YYYY-MM-DD)")

    @field_serializer("amount", when_used="json")
    def _amount_as_number(self, amount: Optional[Decimal]):
        return None if amount is None else float(amount)
