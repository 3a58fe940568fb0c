"""Admission/claim records that bills are generated from."""

from pydantic import BaseModel, Field

from .common import CalendarDate, PaymentStatus


class BillableUsageRecord(BaseModel):
    """One patient admission at a hospital.

    ``record_id`` is the admission/claim reference number. The claim fields
    are used by the claims report and claim status lookup; billing only
    reads the identity, patient, date and hospital.
    """

    record_id: str = Field(min_length=1)
    patient_name: str | None = None
    admission_date: CalendarDate
    hospital_id: str = Field(min_length=1)
    service_ids: list[str] = []
    claim_stage: str | None = None
    claim_number: str | None = None
    policy_number: str | None = None
    payment_status: PaymentStatus | None = None
