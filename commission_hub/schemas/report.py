from datetime import date
from typing import List

from commission_hub.schemas.common import CamelModel, Money, Rate


class ReportPeriod(CamelModel):
    """A calendar month; start_date and end_date are both inclusive"""
    year: int
    month: int
    month_name: str
    start_date: date
    end_date: date

    @property
    def days_in_month(self) -> int:
        return self.end_date.day


class TopPerformer(CamelModel):
    personnel_id: int
    personnel_name: str
    total_sales: Money
    transaction_count: int


class ManagementOverviewSummary(CamelModel):
    total_sales: Money
    total_transactions: int
    average_per_person: Money
    days_with_no_sales: int
    days_in_month: int
    active_personnel_count: int


class ManagementOverview(CamelModel):
    report_period: ReportPeriod
    summary: ManagementOverviewSummary
    top_performers: List[TopPerformer]


class PersonnelPayout(CamelModel):
    personnel_id: int
    personnel_name: str
    monthly_sales: Money
    commission_fixed: Money
    commission_percentage: Rate
    commission_variable: Money
    total_payout: Money


class CommissionPayoutSummary(CamelModel):
    report_period: ReportPeriod
    total_sales: Money
    total_fixed_commissions: Money
    total_variable_commissions: Money
    total_payout: Money
    personnel_count: int


class CommissionPayout(CamelModel):
    summary: CommissionPayoutSummary
    personnel_payouts: List[PersonnelPayout]
