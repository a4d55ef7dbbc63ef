"""
Monthly report computations

Pure functions over row objects. Sales rows need ``personnel_id``, ``personnel_name``,
``report_date`` and ``sales_amount`` attributes; payout source rows need ``personnel_id``,
``personnel_name``, ``commission_fixed`` and ``commission_percentage``. SQLAlchemy result
rows and the NamedTuples below both qualify.

All money is Decimal and rounded to cents with ROUND_HALF_EVEN, midpoints go to the even cent.
"""
from decimal import Decimal, ROUND_HALF_EVEN
from typing import Iterable, List, NamedTuple

from commission_hub.config import TOP_PERFORMER_LIMIT
from commission_hub.schemas.report import (
    ReportPeriod, TopPerformer, ManagementOverviewSummary, ManagementOverview,
    PersonnelPayout, CommissionPayoutSummary, CommissionPayout,
)
from commission_hub.utils.period import iter_days, to_day

ZERO = Decimal('0')
CENT = Decimal('0.01')


class SaleRow(NamedTuple):
    personnel_id: int
    personnel_name: str
    report_date: object
    sales_amount: Decimal


class PayoutSourceRow(NamedTuple):
    personnel_id: int
    personnel_name: str
    commission_fixed: Decimal
    commission_percentage: Decimal


def to_decimal(value) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(value) -> Decimal:
    """Round to 2 decimals, midpoints to the even cent (111.525 -> 111.52)"""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_EVEN)


def group_sales_by_personnel(sales_rows: Iterable) -> List[TopPerformer]:
    """One entry per personnel id, in the order each id is first seen"""
    groups = {}
    for row in sales_rows:
        group = groups.get(row.personnel_id)
        if group is None:
            group = groups[row.personnel_id] = {
                "personnel_id": row.personnel_id,
                "personnel_name": row.personnel_name,
                "total_sales": ZERO,
                "transaction_count": 0,
            }
        group["total_sales"] += to_decimal(row.sales_amount)
        group["transaction_count"] += 1
    return [TopPerformer(**group) for group in groups.values()]


def rank_top_performers(sales_rows: Iterable, limit: int = TOP_PERFORMER_LIMIT) -> List[TopPerformer]:
    """
    Rank personnel by their summed sales, highest first

    sorted() is stable, so personnel with equal totals keep their first-seen order.
    """
    groups = group_sales_by_personnel(sales_rows)
    ranked = sorted(groups, key=lambda performer: performer.total_sales, reverse=True)
    return ranked[:limit]


def average_per_person(total_sales, personnel_count: int) -> Decimal:
    if not personnel_count:
        return round_money(ZERO)
    return round_money(to_decimal(total_sales) / Decimal(personnel_count))


def count_days_without_sales(period: ReportPeriod, sale_dates: Iterable) -> int:
    days_with_sales = {to_day(value) for value in sale_dates}
    return sum(1 for day in iter_days(period) if day not in days_with_sales)


def build_management_overview(period: ReportPeriod, sales_rows: Iterable,
                              personnel_count: int) -> ManagementOverview:
    """
    Args:
        period: the report month
        sales_rows: sales inside the month, already narrowed to one person when filtered
        personnel_count: every personnel on record, never narrowed by the personnel filter
    """
    sales_rows = list(sales_rows)
    total_sales = sum((to_decimal(row.sales_amount) for row in sales_rows), ZERO)

    summary = ManagementOverviewSummary(
        total_sales=total_sales,
        total_transactions=len(sales_rows),
        average_per_person=average_per_person(total_sales, personnel_count),
        days_with_no_sales=count_days_without_sales(period, (row.report_date for row in sales_rows)),
        days_in_month=period.days_in_month,
        active_personnel_count=personnel_count,
    )
    return ManagementOverview(
        report_period=period,
        summary=summary,
        top_performers=rank_top_performers(sales_rows),
    )


def compute_payout(personnel_id: int, personnel_name: str, commission_fixed, commission_percentage,
                   monthly_sales) -> PersonnelPayout:
    """
    The variable part and the grand total are rounded independently:
    total_payout is rounded from the unrounded percentage * sales product.
    """
    commission_fixed = to_decimal(commission_fixed)
    commission_percentage = to_decimal(commission_percentage)
    monthly_sales = to_decimal(monthly_sales)
    raw_variable = commission_percentage * monthly_sales

    return PersonnelPayout(
        personnel_id=personnel_id,
        personnel_name=personnel_name,
        monthly_sales=monthly_sales,
        commission_fixed=commission_fixed,
        commission_percentage=commission_percentage,
        commission_variable=round_money(raw_variable),
        total_payout=round_money(commission_fixed + raw_variable),
    )


def sum_sales_by_personnel(sales_rows: Iterable) -> dict:
    totals = {}
    for row in sales_rows:
        totals[row.personnel_id] = totals.get(row.personnel_id, ZERO) + to_decimal(row.sales_amount)
    return totals


def build_commission_payout(period: ReportPeriod, personnel_rows: Iterable,
                            sales_rows: Iterable) -> CommissionPayout:
    """
    Args:
        period: the report month
        personnel_rows: personnel joined to their commission profile, one payout row each
        sales_rows: sales inside the month; rows of personnel not listed are ignored
    """
    monthly_totals = sum_sales_by_personnel(sales_rows)
    payouts = [
        compute_payout(row.personnel_id, row.personnel_name, row.commission_fixed,
                       row.commission_percentage, monthly_totals.get(row.personnel_id, ZERO))
        for row in personnel_rows
    ]

    summary = CommissionPayoutSummary(
        report_period=period,
        total_sales=sum((p.monthly_sales for p in payouts), ZERO),
        total_fixed_commissions=sum((p.commission_fixed for p in payouts), ZERO),
        total_variable_commissions=sum((p.commission_variable for p in payouts), ZERO),
        total_payout=sum((p.total_payout for p in payouts), ZERO),
        personnel_count=len(payouts),
    )
    return CommissionPayout(summary=summary, personnel_payouts=payouts)

