"""Shared types for hospital billing schemas."""

from datetime import date, datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, BeforeValidator


class PriceType(str, Enum):
    """Pricing modes a service can be billed under."""

    FIXED = "Fixed"
    SLAB_BASED = "Slab-Based"


class CommissionType(str, Enum):
    """How a referral commission is computed."""

    FIXED = "Fixed"
    PERCENTAGE = "Percentage"


class PaymentStatus(str, Enum):
    """Hospital payment status of a bill entry."""

    PENDING = "Pending"
    RECEIVED = "Received"
    PARTIALLY_PAID = "Partially Paid"


class TransactionType(str, Enum):
    """Ledger transaction direction."""

    INCOME = "Income"
    EXPENSE = "Expense"


class SelectOption(BaseModel):
    """Value/label pair for selection lists."""

    value: str
    label: str


def to_calendar_date(value: object) -> object:
    """Drop the time of day from datetimes; leave anything else to pydantic."""
    if isinstance(value, datetime):
        return value.date()
    return value


MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_long_date(value: date) -> str:
    """Format a date as e.g. ``October 15th, 2023``."""
    day = value.day
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{MONTH_NAMES[value.month - 1]} {day}{suffix}, {value.year}"


CalendarDate = Annotated[date, BeforeValidator(to_calendar_date)]
