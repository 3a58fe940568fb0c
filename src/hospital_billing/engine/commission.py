"""Referral commission calculation."""

from decimal import ROUND_HALF_UP, Decimal

from ..exceptions import InvalidPricing
from ..schemas.common import CommissionType
from ..schemas.hospital import CommissionPolicy, validate_commission_policy

CENT = Decimal("0.01")


def calculate_commission(base: Decimal, policy: CommissionPolicy) -> Decimal:
    """Commission owed on a billed amount.

    Fixed commissions are owed in full whatever the base. Percentage
    commissions are ``base * value / 100`` rounded half-up to the cent.
    The base must be whole cents, so a percentage of at most 100 never
    exceeds it.
    """
    validate_commission_policy(policy.commission_type, policy.value)
    if base != base.quantize(CENT):
        raise InvalidPricing(f"Billed amount must be in whole cents, got {base}")

    if policy.commission_type == CommissionType.FIXED:
        return policy.value

    return (base * policy.value / 100).quantize(CENT, rounding=ROUND_HALF_UP)
