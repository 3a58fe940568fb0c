"""Billing computation engine: pricing, commission, bill reports and balances."""

from .balance import calculate_balance_summary
from .bill_entry import build_bill_entry
from .bill_report import generate_hospital_bill_report, summarize_entries
from .claims_report import (
    get_hospitals_for_billing_select,
    get_total_claims_report,
    search_claim_status,
)
from .commission import calculate_commission
from .pricing import resolve_price, slab_price

__all__ = [
    "resolve_price",
    "slab_price",
    "calculate_commission",
    "build_bill_entry",
    "generate_hospital_bill_report",
    "summarize_entries",
    "calculate_balance_summary",
    "get_total_claims_report",
    "search_claim_status",
    "get_hospitals_for_billing_select",
]
