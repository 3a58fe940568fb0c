"""Service master schemas and pricing variants."""

from decimal import Decimal
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, ValidationError

from ..exceptions import InvalidPricing
from .common import PriceType


class FixedPricing(BaseModel):
    """Flat price per service use."""

    price_type: Literal[PriceType.FIXED] = PriceType.FIXED
    amount: Decimal = Field(ge=0, decimal_places=2)


class SlabPricing(BaseModel):
    """Base price up to a limit, plus a price per additional slab."""

    price_type: Literal[PriceType.SLAB_BASED] = PriceType.SLAB_BASED
    base_price: Decimal = Field(ge=0, decimal_places=2)
    base_limit: Decimal = Field(ge=0)
    additional_price_per_slab: Decimal = Field(ge=0, decimal_places=2)
    slab_size: Decimal = Field(gt=0)


ServicePricing = Annotated[
    Union[FixedPricing, SlabPricing], Field(discriminator="price_type")
]


class ServiceDefinition(BaseModel):
    """A billable service from the service master."""

    id: str
    name: str
    pricing: ServicePricing
    is_active: bool = True


def pricing_from_fields(
    price_type: PriceType | str,
    fixed_price: Decimal | float | None = None,
    slabs: dict[str, Any] | None = None,
) -> FixedPricing | SlabPricing:
    """Build a pricing variant from a price type plus two optional fields.

    Service master forms submit a discriminator alongside an optional fixed
    price and optional slab details. Exactly the field named by the
    discriminator must be present.
    """
    try:
        kind = PriceType(price_type)
    except ValueError:
        raise InvalidPricing(f"Unknown price type: {price_type!r}") from None

    if kind == PriceType.FIXED:
        if fixed_price is None:
            raise InvalidPricing("Fixed price is required for Fixed price type")
        if slabs is not None:
            raise InvalidPricing("Fixed price type must not carry slab details")
        try:
            return FixedPricing(amount=Decimal(str(fixed_price)))
        except ValidationError as e:
            raise InvalidPricing(f"Invalid fixed price: {e}") from e

    if slabs is None:
        raise InvalidPricing("Slab details are required for Slab-Based price type")
    if fixed_price is not None:
        raise InvalidPricing("Slab-Based price type must not carry a fixed price")
    try:
        return SlabPricing.model_validate(slabs)
    except ValidationError as e:
        raise InvalidPricing(f"Invalid slab details: {e}") from e
