"""Service price resolution for fixed and slab-based services."""

from decimal import ROUND_CEILING, Decimal

from ..exceptions import InvalidPricing
from ..schemas.service import FixedPricing, SlabPricing

_SLAB_FIELDS = ("base_price", "base_limit", "additional_price_per_slab", "slab_size")


def resolve_price(
    pricing: FixedPricing | SlabPricing | None, quantity: Decimal | None = None
) -> Decimal:
    """Return the price of one use of a service.

    Fixed services cost their amount. Slab-based services cost their base
    price, since a bill line is one whole-service use. Passing an explicit
    ``quantity`` prices slab services by tier instead (see ``slab_price``).
    """
    if pricing is None:
        raise InvalidPricing("Service has no pricing")

    if isinstance(pricing, FixedPricing):
        if pricing.amount is None:
            raise InvalidPricing("Fixed pricing is missing its amount")
        return pricing.amount

    if isinstance(pricing, SlabPricing):
        missing = [f for f in _SLAB_FIELDS if getattr(pricing, f, None) is None]
        if missing:
            raise InvalidPricing(f"Slab pricing is missing {', '.join(missing)}")
        if quantity is None:
            return pricing.base_price
        return slab_price(pricing, quantity)

    raise InvalidPricing(f"Unsupported pricing: {type(pricing).__name__}")


def slab_price(pricing: SlabPricing, quantity: Decimal) -> Decimal:
    """Tiered price for ``quantity`` units of a slab-based service.

    The base price covers up to ``base_limit`` units. Each started block of
    ``slab_size`` units beyond the limit adds ``additional_price_per_slab``.
    """
    if quantity < 0:
        raise InvalidPricing(f"Usage quantity must be non-negative, got {quantity}")
    if pricing.slab_size <= 0:
        raise InvalidPricing("Slab size must be positive")

    excess = quantity - pricing.base_limit
    if excess <= 0:
        return pricing.base_price

    slabs = (excess / pricing.slab_size).to_integral_value(rounding=ROUND_CEILING)
    return pricing.base_price + slabs * pricing.additional_price_per_slab
