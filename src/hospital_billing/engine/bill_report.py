"""Hospital bill report generation over a date range."""

from collections.abc import Iterable
from datetime import date

from ..config import BillingConfig
from ..exceptions import HospitalNotFound, InvalidDateRange
from ..repository import BillingRepository
from ..schemas.bill_report import BillEntry, BillFilters, BillReport, BillSummary
from ..schemas.common import format_long_date
from ..schemas.usage import BillableUsageRecord
from .bill_entry import build_bill_entry


def generate_hospital_bill_report(
    filters: BillFilters,
    repository: BillingRepository,
    config: BillingConfig | None = None,
) -> BillReport:
    """Generate the bill of one hospital for an inclusive date range.

    Steps:
    - Reject a range whose end precedes its start
    - Resolve the hospital (HospitalNotFound if absent)
    - Select its admissions dated within the range, in store order
    - Price and commission each admission
    - Sum entries into the summary

    No matching admissions is not an error: the report has no entries and
    a zero summary.
    """
    check_date_range(filters.date_from, filters.date_to)

    hospital = repository.get_hospital(filters.hospital_id)
    if hospital is None:
        raise HospitalNotFound(filters.hospital_id)

    records = select_records(
        repository.list_usage_records(filters.hospital_id),
        filters.hospital_id,
        filters.date_from,
        filters.date_to,
    )
    entries = [
        build_bill_entry(record, hospital, repository.get_service, config)
        for record in records
    ]

    return BillReport(
        hospital_name=hospital.name,
        reference_person=hospital.reference.name,
        date_from=format_long_date(filters.date_from),
        date_to=format_long_date(filters.date_to),
        entries=entries,
        summary=summarize_entries(entries),
    )


def check_date_range(date_from: date | None, date_to: date | None) -> None:
    """Raise InvalidDateRange if both bounds are given and reversed."""
    if date_from is not None and date_to is not None and date_to < date_from:
        raise InvalidDateRange(
            f"End date {date_to.isoformat()} cannot be earlier than start date {date_from.isoformat()}"
        )


def select_records(
    records: Iterable[BillableUsageRecord],
    hospital_id: str,
    date_from: date,
    date_to: date,
) -> list[BillableUsageRecord]:
    """Records of a hospital admitted within ``[date_from, date_to]``."""
    return [
        r
        for r in records
        if r.hospital_id == hospital_id and date_from <= r.admission_date <= date_to
    ]


def summarize_entries(entries: list[BillEntry]) -> BillSummary:
    """Field-wise totals of bill entries."""
    summary = BillSummary()
    for entry in entries:
        summary.total_bill_amount += entry.total_service_amount
        summary.total_commission += entry.calculated_commission
        summary.total_net_to_hospital += entry.net_amount_to_hospital
    return summary
