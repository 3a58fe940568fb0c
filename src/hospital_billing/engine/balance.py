"""Income/expense balance over the transaction ledger."""

from collections.abc import Iterable
from decimal import Decimal

from ..schemas.common import TransactionType
from ..schemas.transaction import BalanceSummary, Transaction


def calculate_balance_summary(transactions: Iterable[Transaction]) -> BalanceSummary:
    """Total income, total expenses and their difference over all transactions."""
    total_income = Decimal("0")
    total_expenses = Decimal("0")

    for txn in transactions:
        if txn.type == TransactionType.INCOME:
            total_income += txn.amount
        elif txn.type == TransactionType.EXPENSE:
            total_expenses += txn.amount

    return BalanceSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        net_balance=total_income - total_expenses,
    )
