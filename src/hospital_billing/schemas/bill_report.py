"""Output schemas for hospital bill generation."""

from decimal import Decimal

from pydantic import BaseModel, Field

from .common import CalendarDate, CommissionType, PaymentStatus


class BillFilters(BaseModel):
    """Hospital and inclusive date range a bill is generated for."""

    hospital_id: str = Field(min_length=1)
    date_from: CalendarDate
    date_to: CalendarDate


class ServiceLine(BaseModel):
    """A priced service on a bill entry."""

    name: str
    price: Decimal


class BillEntry(BaseModel):
    """One admission's billed services, commission and net payable."""

    admission_id: str
    patient_name: str
    admission_date: str
    services_details: list[ServiceLine]
    total_service_amount: Decimal
    commission_type: CommissionType
    commission_rate: Decimal
    calculated_commission: Decimal
    # Not clamped: a fixed commission may exceed the billed amount.
    net_amount_to_hospital: Decimal
    payment_status: PaymentStatus


class BillSummary(BaseModel):
    """Field-wise totals over all entries of a bill report."""

    total_bill_amount: Decimal = Decimal("0")
    total_commission: Decimal = Decimal("0")
    total_net_to_hospital: Decimal = Decimal("0")


class BillReport(BaseModel):
    """Complete hospital bill for a date range."""

    hospital_name: str
    reference_person: str
    date_from: str
    date_to: str
    entries: list[BillEntry] = []
    summary: BillSummary
