"""Read-only data access for the billing engine."""

from collections.abc import Iterable, Sequence
from typing import Protocol

from .schemas import (
    BillableUsageRecord,
    HospitalDetails,
    ServiceDefinition,
    Transaction,
)


class BillingRepository(Protocol):
    """Point-in-time view of the records bills and balances are computed from."""

    def get_hospital(self, hospital_id: str) -> HospitalDetails | None: ...

    def list_hospitals(self) -> Sequence[HospitalDetails]: ...

    def get_service(self, service_id: str) -> ServiceDefinition | None: ...

    def list_usage_records(
        self, hospital_id: str | None = None
    ) -> Sequence[BillableUsageRecord]: ...

    def list_transactions(self) -> Sequence[Transaction]: ...


class InMemoryBillingRepository:
    """BillingRepository over plain in-memory collections.

    Listing methods return copies of the internal lists, so callers see a
    snapshot that later additions do not change.
    """

    def __init__(
        self,
        hospitals: Iterable[HospitalDetails] = (),
        services: Iterable[ServiceDefinition] = (),
        usage_records: Iterable[BillableUsageRecord] = (),
        transactions: Iterable[Transaction] = (),
    ):
        self._hospitals: dict[str, HospitalDetails] = {h.id: h for h in hospitals}
        self._services: dict[str, ServiceDefinition] = {s.id: s for s in services}
        self._usage_records: list[BillableUsageRecord] = list(usage_records)
        self._transactions: list[Transaction] = list(transactions)

    def get_hospital(self, hospital_id: str) -> HospitalDetails | None:
        return self._hospitals.get(hospital_id)

    def list_hospitals(self) -> list[HospitalDetails]:
        return list(self._hospitals.values())

    def get_service(self, service_id: str) -> ServiceDefinition | None:
        return self._services.get(service_id)

    def list_usage_records(
        self, hospital_id: str | None = None
    ) -> list[BillableUsageRecord]:
        if hospital_id is None:
            return list(self._usage_records)
        return [r for r in self._usage_records if r.hospital_id == hospital_id]

    def list_transactions(self) -> list[Transaction]:
        return list(self._transactions)

    def add_hospital(self, hospital: HospitalDetails) -> None:
        self._hospitals[hospital.id] = hospital

    def add_service(self, service: ServiceDefinition) -> None:
        self._services[service.id] = service

    def add_usage_record(self, record: BillableUsageRecord) -> None:
        self._usage_records.append(record)

    def add_transaction(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)
