"""Hospital billing and commission engine for a claims administration portal."""

from .billing_service import BillingService
from .config import BillingConfig, load_billing_config
from .repository import BillingRepository, InMemoryBillingRepository

__all__ = [
    "BillingService",
    "BillingConfig",
    "load_billing_config",
    "BillingRepository",
    "InMemoryBillingRepository",
]
