"""Billing service entry points for the portal layer.

Binds a repository and a billing configuration to the engine:
1. Hospital bill report for a date range
2. Whole-ledger income/expense balance
3. Claims report, claim status lookup and hospital selection list
"""

import logging

from .config import BillingConfig, load_billing_config
from .engine import (
    calculate_balance_summary,
    generate_hospital_bill_report,
    get_hospitals_for_billing_select,
    get_total_claims_report,
    search_claim_status,
)
from .exceptions import BillingError
from .repository import BillingRepository
from .schemas import (
    BalanceSummary,
    BillFilters,
    BillReport,
    ClaimReportItem,
    ClaimSearchParams,
    ClaimStatus,
    ReportFilters,
    SelectOption,
)

logger = logging.getLogger(__name__)


class BillingService:
    """Stateless facade over a read-only billing repository."""

    def __init__(
        self, repository: BillingRepository, config: BillingConfig | None = None
    ):
        self.repository = repository
        self.config = config or load_billing_config()

    def generate_hospital_bill_report(self, filters: BillFilters) -> BillReport:
        """Bill of one hospital; raises HospitalNotFound or InvalidDateRange."""
        logger.info(
            "Generating bill for hospital %s from %s to %s",
            filters.hospital_id,
            filters.date_from,
            filters.date_to,
        )
        try:
            report = generate_hospital_bill_report(filters, self.repository, self.config)
        except BillingError as e:
            logger.warning("Bill generation rejected: %s", e)
            raise

        logger.debug(
            "Bill for %s: %d entries, total %s, commission %s",
            report.hospital_name,
            len(report.entries),
            report.summary.total_bill_amount,
            report.summary.total_commission,
        )
        return report

    def calculate_overall_balance_summary(self) -> BalanceSummary:
        """Income, expenses and net balance over the whole ledger."""
        transactions = self.repository.list_transactions()
        summary = calculate_balance_summary(transactions)
        logger.debug(
            "Balance over %d transactions: net %s", len(transactions), summary.net_balance
        )
        return summary

    def get_hospitals_for_billing_select(self) -> list[SelectOption]:
        return get_hospitals_for_billing_select(self.repository)

    def get_total_claims_report(self, filters: ReportFilters) -> list[ClaimReportItem]:
        try:
            items = get_total_claims_report(filters, self.repository)
        except BillingError as e:
            logger.warning("Claims report rejected: %s", e)
            raise
        logger.debug("Claims report: %d claims", len(items))
        return items

    def search_claim_status(self, params: ClaimSearchParams) -> ClaimStatus | None:
        result = search_claim_status(params, self.repository)
        if result is None:
            logger.info("No claim found in hospital %s", params.hospital_id)
        return result
