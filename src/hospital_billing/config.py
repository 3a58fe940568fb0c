"""Configuration for the billing engine."""

import json
import logging
import os
from decimal import Decimal
from pathlib import Path

from pydantic import BaseModel, Field

from .schemas.common import PaymentStatus

logger = logging.getLogger(__name__)

CONFIG_FILE = "configs/config.json"
CONFIG_ENV_VAR = "HOSPITAL_BILLING_CONFIG"


class BillingConfig(BaseModel):
    """Tunable constants of bill generation."""

    # Placeholder for real per-admission usage tracking: only the first
    # associated services of a hospital are billed.
    max_billed_services: int = Field(default=3, ge=0)
    fallback_service_name: str = "General Services"
    fallback_service_amount: Decimal = Field(default=Decimal("5000"), ge=0, decimal_places=2)
    default_payment_status: PaymentStatus = PaymentStatus.PENDING


def load_billing_config(path: str | Path | None = None) -> BillingConfig:
    """Load the ``billing`` section of the config file.

    The path defaults to ``$HOSPITAL_BILLING_CONFIG`` and then to
    ``configs/config.json``. A missing file yields the defaults.
    """
    config_path = Path(path or os.getenv(CONFIG_ENV_VAR) or CONFIG_FILE)
    if not config_path.exists():
        logger.info("No config file at %s, using billing defaults", config_path)
        return BillingConfig()

    raw = json.loads(config_path.read_text())
    return BillingConfig.model_validate(raw.get("billing", {}))
