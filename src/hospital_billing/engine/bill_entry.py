"""Build one priced and commissioned bill entry per admission."""

from collections.abc import Callable
from decimal import Decimal

from ..config import BillingConfig
from ..exceptions import ServiceNotFound
from ..schemas.bill_report import BillEntry, ServiceLine
from ..schemas.common import format_long_date
from ..schemas.hospital import HospitalDetails
from ..schemas.service import ServiceDefinition
from ..schemas.usage import BillableUsageRecord
from .commission import calculate_commission
from .pricing import resolve_price

ServiceLookup = Callable[[str], ServiceDefinition | None]


def build_bill_entry(
    record: BillableUsageRecord,
    hospital: HospitalDetails,
    get_service: ServiceLookup,
    config: BillingConfig | None = None,
) -> BillEntry:
    """Price an admission against its hospital's services and commission.

    Admissions do not yet record which services they consumed, so every
    admission is billed the hospital's first ``max_billed_services``
    associated services. A hospital with no associated services gets one
    fallback line so no entry is empty.
    """
    config = config or BillingConfig()

    services_details = _price_services(hospital, get_service, config)
    total_service_amount = sum((line.price for line in services_details), Decimal("0"))

    policy = hospital.reference.commission
    calculated_commission = calculate_commission(total_service_amount, policy)

    return BillEntry(
        admission_id=record.record_id,
        patient_name=record.patient_name or "N/A",
        admission_date=format_long_date(record.admission_date),
        services_details=services_details,
        total_service_amount=total_service_amount,
        commission_type=policy.commission_type,
        commission_rate=policy.value,
        calculated_commission=calculated_commission,
        net_amount_to_hospital=total_service_amount - calculated_commission,
        payment_status=record.payment_status or config.default_payment_status,
    )


def _price_services(
    hospital: HospitalDetails, get_service: ServiceLookup, config: BillingConfig
) -> list[ServiceLine]:
    """Resolve the billed service lines of a hospital."""
    lines: list[ServiceLine] = []
    for service_id in hospital.associated_service_ids[: config.max_billed_services]:
        service = get_service(service_id)
        if service is None:
            raise ServiceNotFound(service_id)
        lines.append(ServiceLine(name=service.name, price=resolve_price(service.pricing)))

    if not lines:
        lines.append(
            ServiceLine(
                name=config.fallback_service_name,
                price=config.fallback_service_amount,
            )
        )
    return lines
