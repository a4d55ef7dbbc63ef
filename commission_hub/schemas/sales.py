from datetime import datetime
from decimal import Decimal

from commission_hub.schemas.common import CamelModel, Money


class SalesCreate(CamelModel):
    personnel_id: int
    report_date: datetime
    sales_amount: Decimal


class SalesOut(CamelModel):
    id: int
    personnel_id: int
    report_date: datetime
    sales_amount: Money
