"""Income/expense ledger schemas."""

from decimal import Decimal

from pydantic import BaseModel, Field

from .common import CalendarDate, TransactionType


class Transaction(BaseModel):
    """A single income or expense ledger entry."""

    id: str
    type: TransactionType
    date: CalendarDate
    amount: Decimal = Field(gt=0)
    description: str = Field(min_length=1)
    category: str | None = None


class BalanceSummary(BaseModel):
    """Whole-ledger totals."""

    total_income: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    net_balance: Decimal = Decimal("0")
