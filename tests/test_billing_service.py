"""Tests for the billing service facade, claim listings and configuration."""

import json
import logging
import pytest
from datetime import date
from decimal import Decimal

from hospital_billing import BillingService, InMemoryBillingRepository
from hospital_billing.config import BillingConfig, load_billing_config
from hospital_billing.exceptions import HospitalNotFound, InvalidDateRange
from hospital_billing.schemas import (
    BillableUsageRecord,
    BillFilters,
    ClaimSearchParams,
    CommissionPolicy,
    CommissionType,
    FixedPricing,
    HospitalDetails,
    HospitalReference,
    PaymentStatus,
    ReportFilters,
    ServiceDefinition,
    SlabPricing,
    Transaction,
    TransactionType,
)


def _hospital(
    hospital_id: str,
    name: str,
    service_ids: list[str],
    commission: CommissionPolicy,
    is_active: bool = True,
) -> HospitalDetails:
    return HospitalDetails(
        id=hospital_id,
        name=name,
        associated_service_ids=service_ids,
        reference=HospitalReference(name=f"{name} Referrer", commission=commission),
        is_active=is_active,
    )


def _claim(
    reference_no: str,
    hospital_id: str,
    admission_date: str,
    patient_name: str | None,
    claim_stage: str,
    claim_number: str | None = None,
    policy_number: str | None = None,
) -> BillableUsageRecord:
    return BillableUsageRecord(
        record_id=reference_no,
        hospital_id=hospital_id,
        admission_date=admission_date,
        patient_name=patient_name,
        claim_stage=claim_stage,
        claim_number=claim_number,
        policy_number=policy_number,
    )


@pytest.fixture
def repository() -> InMemoryBillingRepository:
    """A small portal dataset across three hospitals."""
    services = [
        ServiceDefinition(id="service1", name="Consultation", pricing=FixedPricing(amount=Decimal("500"))),
        ServiceDefinition(id="service2", name="Surgery", pricing=FixedPricing(amount=Decimal("2500"))),
        ServiceDefinition(
            id="service3",
            name="Physiotherapy",
            pricing=SlabPricing(
                base_price=Decimal("800"),
                base_limit=Decimal("5"),
                additional_price_per_slab=Decimal("150"),
                slab_size=Decimal("1"),
            ),
        ),
    ]
    hospitals = [
        _hospital(
            "hosp1",
            "General Hospital",
            ["service1", "service2"],
            CommissionPolicy(commission_type=CommissionType.PERCENTAGE, value=Decimal("5")),
        ),
        _hospital(
            "hosp2",
            "City Central Clinic",
            ["service3"],
            CommissionPolicy(commission_type=CommissionType.FIXED, value=Decimal("1000")),
        ),
        _hospital(
            "hosp3",
            "Mercy Hospital",
            [],
            CommissionPolicy(commission_type=CommissionType.PERCENTAGE, value=Decimal("10")),
            is_active=False,
        ),
    ]
    claims = [
        _claim("REF001", "hosp1", "2023-10-15", "Alice Johnson", "Settled", claim_number="12345"),
        _claim("REF005", "hosp1", "2023-10-25", "Carol White", "Denied", policy_number="POL123XYZ"),
        _claim("REF003", "hosp1", "2023-09-20", "John Doe", "Admitted", claim_number="10001"),
        _claim("REF002", "hosp2", "2023-11-01", "Bob Williams", "Submitted", "20001", "POL9876"),
        _claim("REF013", "hosp2", "2023-12-01", "Robert Jones", "Admitted", claim_number="20002"),
        _claim("REF099", "hosp9", "2023-10-20", None, "Admitted"),
    ]
    transactions = [
        Transaction(id="txn1", type=TransactionType.INCOME, date=date(2024, 1, 5), amount=Decimal("15000"), description="Claim settlement", category="Settlements"),
        Transaction(id="txn2", type=TransactionType.EXPENSE, date=date(2024, 1, 8), amount=Decimal("2500.50"), description="Office rent"),
        Transaction(id="txn3", type=TransactionType.INCOME, date=date(2024, 2, 1), amount=Decimal("7200.25"), description="Commission received"),
    ]
    return InMemoryBillingRepository(
        hospitals=hospitals, services=services, usage_records=claims, transactions=transactions
    )


@pytest.fixture
def service(repository) -> BillingService:
    return BillingService(repository, BillingConfig())


# ============================================================================
# BILL REPORT TESTS
# ============================================================================


class TestGenerateHospitalBillReport:
    """Tests for hospital bill generation through the service."""

    def test_percentage_hospital(self, service):
        """October bill of General Hospital covers its two October claims."""
        report = service.generate_hospital_bill_report(
            BillFilters(hospital_id="hosp1", date_from=date(2023, 10, 1), date_to=date(2023, 10, 31))
        )
        assert report.hospital_name == "General Hospital"
        assert report.reference_person == "General Hospital Referrer"
        assert [e.admission_id for e in report.entries] == ["REF001", "REF005"]
        assert report.summary.total_bill_amount == Decimal("6000")
        assert report.summary.total_commission == Decimal("300")
        assert report.summary.total_net_to_hospital == Decimal("5700")

    def test_fixed_commission_slab_hospital(self, service):
        """Slab services bill their base price; fixed commission applies per entry."""
        report = service.generate_hospital_bill_report(
            BillFilters(hospital_id="hosp2", date_from="2023-11-01", date_to="2023-12-01")
        )
        assert len(report.entries) == 2
        for entry in report.entries:
            assert entry.total_service_amount == Decimal("800")
            assert entry.calculated_commission == Decimal("1000")
            assert entry.net_amount_to_hospital == Decimal("-200")
            assert entry.payment_status == PaymentStatus.PENDING
        assert report.summary.total_net_to_hospital == Decimal("-400")

    def test_unknown_hospital(self, service, caplog):
        """Unknown hospitals raise and are logged as rejected."""
        with caplog.at_level(logging.WARNING, logger="hospital_billing.billing_service"):
            with pytest.raises(HospitalNotFound):
                service.generate_hospital_bill_report(
                    BillFilters(hospital_id="hosp404", date_from=date(2023, 1, 1), date_to=date(2023, 12, 31))
                )
        assert "hosp404" in caplog.text

    def test_reversed_range(self, service):
        """A reversed date range raises before any lookup."""
        with pytest.raises(InvalidDateRange):
            service.generate_hospital_bill_report(
                BillFilters(hospital_id="hosp404", date_from=date(2023, 12, 31), date_to=date(2023, 1, 1))
            )

    def test_store_snapshot_not_mutated(self, service, repository):
        """Generating a bill leaves the repository records untouched."""
        before = [r.model_copy() for r in repository.list_usage_records()]
        service.generate_hospital_bill_report(
            BillFilters(hospital_id="hosp1", date_from=date(2023, 1, 1), date_to=date(2023, 12, 31))
        )
        assert repository.list_usage_records() == before


# ============================================================================
# BALANCE SUMMARY TESTS
# ============================================================================


class TestOverallBalanceSummary:
    """Tests for the whole-ledger balance."""

    def test_balance(self, service):
        """Balance covers every transaction in the ledger."""
        summary = service.calculate_overall_balance_summary()
        assert summary.total_income == Decimal("22200.25")
        assert summary.total_expenses == Decimal("2500.50")
        assert summary.net_balance == Decimal("19699.75")

    def test_balance_recomputed_after_ledger_change(self, service, repository):
        """Summaries are recomputed from the ledger on each call."""
        service.calculate_overall_balance_summary()
        repository.add_transaction(
            Transaction(id="txn4", type=TransactionType.EXPENSE, date=date(2024, 2, 2), amount=Decimal("19699.75"), description="Payout")
        )
        assert service.calculate_overall_balance_summary().net_balance == Decimal("0")

    def test_empty_ledger(self):
        """An empty ledger balances to zero."""
        summary = BillingService(InMemoryBillingRepository(), BillingConfig()).calculate_overall_balance_summary()
        assert (summary.total_income, summary.total_expenses, summary.net_balance) == (0, 0, 0)


# ============================================================================
# CLAIMS REPORT & LOOKUP TESTS
# ============================================================================


class TestClaimsReport:
    """Tests for the total claims report."""

    def test_all_claims(self, service):
        """No filters lists every claim in store order."""
        items = service.get_total_claims_report(ReportFilters())
        assert [i.id for i in items] == ["REF001", "REF005", "REF003", "REF002", "REF013", "REF099"]

    def test_hospital_and_date_filters(self, service):
        """Hospital and inclusive date bounds narrow the listing."""
        items = service.get_total_claims_report(
            ReportFilters(hospital_id="hosp1", date_from=date(2023, 10, 15), date_to=date(2023, 10, 25))
        )
        assert [i.id for i in items] == ["REF001", "REF005"]

    def test_only_upper_bound(self, service):
        """A lone upper bound is applied on its own."""
        items = service.get_total_claims_report(ReportFilters(date_to=date(2023, 9, 30)))
        assert [i.id for i in items] == ["REF003"]

    def test_placeholders(self, service):
        """Missing claim attributes and unknown hospitals get placeholders."""
        items = service.get_total_claims_report(ReportFilters(hospital_id="hosp9"))
        assert len(items) == 1
        item = items[0]
        assert item.hospital_name == "Unknown Hospital"
        assert item.patient_name == "N/A"
        assert item.claim_number == "N/A"
        assert item.policy_number == "N/A"
        assert item.admission_date == "October 20th, 2023"

    def test_reversed_range(self, service):
        """Both bounds given and reversed is rejected."""
        with pytest.raises(InvalidDateRange):
            service.get_total_claims_report(
                ReportFilters(date_from=date(2024, 1, 2), date_to=date(2024, 1, 1))
            )


class TestClaimStatusSearch:
    """Tests for claim status lookup."""

    def test_by_claim_number(self, service):
        """Claim numbers match exactly within the hospital."""
        result = service.search_claim_status(ClaimSearchParams(hospital_id="hosp1", claim_number="12345"))
        assert result is not None
        assert result.reference_no == "REF001"
        assert result.hospital_name == "General Hospital"
        assert result.claim_stage == "Settled"

    def test_by_policy_number(self, service):
        """Policy number is used when no claim number is given."""
        result = service.search_claim_status(ClaimSearchParams(hospital_id="hosp1", policy_number="POL123XYZ"))
        assert result.reference_no == "REF005"

    def test_by_partial_patient_name(self, service):
        """Patient names match case-insensitively on substring."""
        result = service.search_claim_status(ClaimSearchParams(hospital_id="hosp2", patient_name="robert"))
        assert result.reference_no == "REF013"

    def test_claim_number_takes_priority(self, service):
        """Only the first given search field is used."""
        result = service.search_claim_status(
            ClaimSearchParams(hospital_id="hosp1", claim_number="99999", patient_name="Alice")
        )
        assert result is None

    def test_other_hospital_not_searched(self, service):
        """Claims of other hospitals never match."""
        result = service.search_claim_status(ClaimSearchParams(hospital_id="hosp2", claim_number="12345"))
        assert result is None

    def test_no_search_fields(self, service):
        """Without any search field nothing is found."""
        assert service.search_claim_status(ClaimSearchParams(hospital_id="hosp1")) is None


class TestHospitalSelect:
    """Tests for the billing hospital selection list."""

    def test_active_hospitals_only(self, service):
        """Inactive hospitals are not offered."""
        options = service.get_hospitals_for_billing_select()
        assert [(o.value, o.label) for o in options] == [
            ("hosp1", "General Hospital"),
            ("hosp2", "City Central Clinic"),
        ]


# ============================================================================
# CONFIGURATION TESTS
# ============================================================================


class TestBillingConfig:
    """Tests for loading the billing configuration."""

    def test_defaults(self):
        """Defaults match the standard billing rules."""
        config = BillingConfig()
        assert config.max_billed_services == 3
        assert config.fallback_service_name == "General Services"
        assert config.fallback_service_amount == Decimal("5000")
        assert config.default_payment_status == PaymentStatus.PENDING

    def test_missing_file_gives_defaults(self, tmp_path):
        """A missing config file is not an error."""
        assert load_billing_config(tmp_path / "absent.json") == BillingConfig()

    def test_missing_file_logged(self, tmp_path, caplog):
        """Falling back to defaults is visible at INFO."""
        with caplog.at_level(logging.INFO, logger="hospital_billing.config"):
            load_billing_config(tmp_path / "absent.json")
        assert "absent.json" in caplog.text
        assert any(r.levelno == logging.INFO for r in caplog.records)

    def test_load_billing_section(self, tmp_path):
        """Values are read from the billing section."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"billing": {"max_billed_services": 2, "fallback_service_amount": "4000"}}))
        config = load_billing_config(path)
        assert config.max_billed_services == 2
        assert config.fallback_service_amount == Decimal("4000")
        assert config.fallback_service_name == "General Services"

    def test_env_var_path(self, tmp_path, monkeypatch):
        """The config path can come from the environment."""
        path = tmp_path / "billing.json"
        path.write_text(json.dumps({"billing": {"max_billed_services": 1}}))
        monkeypatch.setenv("HOSPITAL_BILLING_CONFIG", str(path))
        assert load_billing_config().max_billed_services == 1

    def test_config_caps_billed_services(self, repository):
        """The service cap is taken from the config."""
        service = BillingService(repository, BillingConfig(max_billed_services=1))
        report = service.generate_hospital_bill_report(
            BillFilters(hospital_id="hosp1", date_from=date(2023, 10, 15), date_to=date(2023, 10, 15))
        )
        assert report.entries[0].total_service_amount == Decimal("500")
