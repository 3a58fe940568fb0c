"""Hospital billing schemas for master data, ledgers and generated reports."""

from .bill_report import BillEntry, BillFilters, BillReport, BillSummary, ServiceLine
from .claims_report import (
    ClaimReportItem,
    ClaimSearchParams,
    ClaimStatus,
    ReportFilters,
)
from .common import (
    CommissionType,
    PaymentStatus,
    PriceType,
    SelectOption,
    TransactionType,
    format_long_date,
)
from .hospital import CommissionPolicy, HospitalDetails, HospitalReference
from .service import (
    FixedPricing,
    ServiceDefinition,
    ServicePricing,
    SlabPricing,
    pricing_from_fields,
)
from .transaction import BalanceSummary, Transaction
from .usage import BillableUsageRecord

__all__ = [
    # Common
    "PriceType",
    "CommissionType",
    "PaymentStatus",
    "TransactionType",
    "SelectOption",
    "format_long_date",
    # Service master
    "FixedPricing",
    "SlabPricing",
    "ServicePricing",
    "ServiceDefinition",
    "pricing_from_fields",
    # Hospital directory
    "CommissionPolicy",
    "HospitalReference",
    "HospitalDetails",
    # Usage records
    "BillableUsageRecord",
    # Bill report
    "BillFilters",
    "ServiceLine",
    "BillEntry",
    "BillSummary",
    "BillReport",
    # Claims report
    "ReportFilters",
    "ClaimReportItem",
    "ClaimSearchParams",
    "ClaimStatus",
    # Ledger
    "Transaction",
    "BalanceSummary",
]
