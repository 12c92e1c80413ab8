from datetime import date
from decimal import Decimal
from sqlalchemy import Numeric, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .base import Base
from .category import Category

class Expense(Base):
    __tablename__ = "expense"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(14, 2, asdecimal=True), nullable=False)
    expense_date: Mapped[date] = mapped_column(Date, nullable=False)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("category.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    category: Mapped[Category] = relationship(Category, lazy="selectin")
