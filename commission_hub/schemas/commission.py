from decimal import Decimal

from commission_hub.schemas.common import CamelModel, Money, Rate


class CommissionProfileBase(CamelModel):
    profile_name: int
    commission_fixed: Decimal
    commission_percentage: Decimal


class CommissionProfileCreate(CommissionProfileBase):
    pass


class CommissionProfileUpdate(CommissionProfileBase):
    pass


class CommissionProfileOut(CamelModel):
    id: int
    profile_name: int
    commission_fixed: Money
    commission_percentage: Rate
