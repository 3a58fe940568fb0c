"""Hospital directory schemas."""

from decimal import Decimal

from pydantic import BaseModel, model_validator

from ..exceptions import InvalidCommissionPolicy
from .common import CommissionType


class CommissionPolicy(BaseModel):
    """Commission owed to the hospital's reference person."""

    commission_type: CommissionType
    value: Decimal

    @model_validator(mode="after")
    def _check_value(self) -> "CommissionPolicy":
        validate_commission_policy(self.commission_type, self.value)
        return self


def validate_commission_policy(commission_type: CommissionType, value: Decimal) -> None:
    """Raise InvalidCommissionPolicy unless value fits the commission type."""
    if value < 0:
        raise InvalidCommissionPolicy(
            f"Commission value must be non-negative, got {value}"
        )
    if commission_type == CommissionType.PERCENTAGE and value > 100:
        raise InvalidCommissionPolicy(
            f"Percentage commission must be between 0 and 100, got {value}"
        )


class HospitalReference(BaseModel):
    """Referring party of a hospital and the commission agreed with them."""

    name: str
    mobile: str | None = None
    commission: CommissionPolicy


class HospitalDetails(BaseModel):
    """Hospital directory entry."""

    id: str
    name: str
    associated_service_ids: list[str] = []
    reference: HospitalReference
    is_active: bool = True
