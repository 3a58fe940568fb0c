"""Claim listing, claim status lookup and hospital selection lists."""

from ..repository import BillingRepository
from ..schemas.claims_report import (
    ClaimReportItem,
    ClaimSearchParams,
    ClaimStatus,
    ReportFilters,
)
from ..schemas.common import SelectOption, format_long_date
from ..schemas.usage import BillableUsageRecord
from .bill_report import check_date_range

NOT_AVAILABLE = "N/A"
UNKNOWN_HOSPITAL = "Unknown Hospital"


def get_total_claims_report(
    filters: ReportFilters, repository: BillingRepository
) -> list[ClaimReportItem]:
    """List claims, optionally narrowed to a hospital and date range.

    Each date bound is applied only when given; both are inclusive.
    """
    check_date_range(filters.date_from, filters.date_to)

    records = repository.list_usage_records(filters.hospital_id or None)
    if filters.hospital_id:
        records = [r for r in records if r.hospital_id == filters.hospital_id]
    if filters.date_from is not None:
        records = [r for r in records if r.admission_date >= filters.date_from]
    if filters.date_to is not None:
        records = [r for r in records if r.admission_date <= filters.date_to]

    items: list[ClaimReportItem] = []
    for record in records:
        hospital = repository.get_hospital(record.hospital_id)
        items.append(
            ClaimReportItem(
                id=record.record_id,
                claim_number=record.claim_number or NOT_AVAILABLE,
                patient_name=record.patient_name or NOT_AVAILABLE,
                hospital_name=hospital.name if hospital else UNKNOWN_HOSPITAL,
                admission_date=format_long_date(record.admission_date),
                claim_stage=record.claim_stage or NOT_AVAILABLE,
                policy_number=record.policy_number or NOT_AVAILABLE,
            )
        )
    return items


def search_claim_status(
    params: ClaimSearchParams, repository: BillingRepository
) -> ClaimStatus | None:
    """Find a claim of a hospital by claim number, policy number or patient name.

    Only the first search field given is used. Patient names match
    case-insensitively on substring. Returns None when nothing matches or
    no search field is given.
    """
    records = [
        r
        for r in repository.list_usage_records(params.hospital_id)
        if r.hospital_id == params.hospital_id
    ]

    found: BillableUsageRecord | None = None
    if params.claim_number:
        found = next((r for r in records if r.claim_number == params.claim_number), None)
    elif params.policy_number:
        found = next(
            (r for r in records if r.policy_number == params.policy_number), None
        )
    elif params.patient_name:
        needle = params.patient_name.lower()
        found = next(
            (
                r
                for r in records
                if r.patient_name and needle in r.patient_name.lower()
            ),
            None,
        )

    if found is None:
        return None

    hospital = repository.get_hospital(found.hospital_id)
    return ClaimStatus(
        reference_no=found.record_id,
        claim_stage=found.claim_stage,
        status_date=found.admission_date,
        hospital_id=found.hospital_id,
        hospital_name=hospital.name if hospital else None,
        claim_number=found.claim_number,
        policy_number=found.policy_number,
        patient_name=found.patient_name,
    )


def get_hospitals_for_billing_select(
    repository: BillingRepository,
) -> list[SelectOption]:
    """Active hospitals as selection options."""
    return [
        SelectOption(value=h.id, label=h.name)
        for h in repository.list_hospitals()
        if h.is_active
    ]
