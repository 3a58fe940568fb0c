"""Claim listing and claim status lookup schemas."""

from pydantic import BaseModel, Field

from .common import CalendarDate


class ReportFilters(BaseModel):
    """Optional filters of the total claims report."""

    date_from: CalendarDate | None = None
    date_to: CalendarDate | None = None
    hospital_id: str | None = None


class ClaimReportItem(BaseModel):
    """One row of the total claims report."""

    id: str
    claim_number: str
    patient_name: str
    hospital_name: str
    admission_date: str
    claim_stage: str
    policy_number: str


class ClaimSearchParams(BaseModel):
    """Claim status search within one hospital.

    The first given of claim number, policy number and patient name is used.
    """

    hospital_id: str = Field(min_length=1)
    claim_number: str | None = None
    policy_number: str | None = None
    patient_name: str | None = None


class ClaimStatus(BaseModel):
    """A claim status search hit."""

    reference_no: str
    claim_stage: str | None = None
    status_date: CalendarDate
    hospital_id: str
    hospital_name: str | None = None
    claim_number: str | None = None
    policy_number: str | None = None
    patient_name: str | None = None
