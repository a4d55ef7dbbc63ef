"""
Render report objects as CSV text or Excel workbooks
"""
import csv
import io
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Tuple

import pandas as pd

from commission_hub.schemas.report import ManagementOverview, CommissionPayout, ReportPeriod

MANAGEMENT_OVERVIEW = "management-overview"
COMMISSION_PAYOUT = "commission-payout"

CSV_MEDIA_TYPE = "text/csv"
EXCEL_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def format_currency(value) -> str:
    """$1,234.50"""
    amount = Decimal(str(value)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    return f"${amount:,.2f}"


def format_percentage(value) -> str:
    """0.05 -> 5.0%"""
    percent = (Decimal(str(value)) * 100).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)
    return f"{percent:.1f}%"


def report_filename(report_name: str, period: ReportPeriod, extension: str = "csv") -> str:
    return f"{report_name}-{period.year}-{period.month:02d}.{extension}"


def _management_overview_sections(report: ManagementOverview) -> Tuple[List[list], List[str], List[list]]:
    summary = report.summary
    metrics = [
        ["Total Sales", format_currency(summary.total_sales)],
        ["Total Transactions", summary.total_transactions],
        ["Average Per Person", format_currency(summary.average_per_person)],
        ["Days with No Sales", summary.days_with_no_sales],
        ["Days in Month", summary.days_in_month],
        ["Active Personnel Count", summary.active_personnel_count],
    ]
    header = ["Rank", "Personnel Name", "Total Sales", "Transaction Count"]
    details = [
        [rank, performer.personnel_name, format_currency(performer.total_sales), performer.transaction_count]
        for rank, performer in enumerate(report.top_performers, start=1)
    ]
    return metrics, header, details


def _commission_payout_sections(report: CommissionPayout) -> Tuple[List[list], List[str], List[list]]:
    summary = report.summary
    metrics = [
        ["Total Sales", format_currency(summary.total_sales)],
        ["Total Fixed Commissions", format_currency(summary.total_fixed_commissions)],
        ["Total Variable Commissions", format_currency(summary.total_variable_commissions)],
        ["Total Payout", format_currency(summary.total_payout)],
        ["Personnel Count", summary.personnel_count],
    ]
    header = ["Personnel Name", "Monthly Sales", "Fixed Commission", "Commission %",
              "Variable Commission", "Total Payout"]
    details = [
        [payout.personnel_name,
         format_currency(payout.monthly_sales),
         format_currency(payout.commission_fixed),
         format_percentage(payout.commission_percentage),
         format_currency(payout.commission_variable),
         format_currency(payout.total_payout)]
        for payout in report.personnel_payouts
    ]
    return metrics, header, details


def _write_csv(title: str, metrics: List[list], detail_title: str, header: List[str],
               details: List[list]) -> str:
    # csv.writer quotes any field holding a comma, quote or line break
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow([title])
    writer.writerow([])
    writer.writerow(["Summary"])
    writer.writerow(["Metric", "Value"])
    writer.writerows(metrics)
    writer.writerow([])
    writer.writerow([detail_title])
    writer.writerow(header)
    writer.writerows(details)
    return output.getvalue()


def render_management_overview_csv(report: ManagementOverview) -> str:
    period = report.report_period
    metrics, header, details = _management_overview_sections(report)
    return _write_csv(f"Management Overview Report - {period.month_name} {period.year}",
                      metrics, "Top Performers", header, details)


def render_commission_payout_csv(report: CommissionPayout) -> str:
    period = report.summary.report_period
    metrics, header, details = _commission_payout_sections(report)
    return _write_csv(f"Commission Payout Report - {period.month_name} {period.year}",
                      metrics, "Personnel Payouts", header, details)


def _export_to_excel(metrics: List[list], detail_sheet: str, header: List[str], details: List[list]) -> bytes:
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine='openpyxl') as writer:
        pd.DataFrame(metrics, columns=["Metric", "Value"]).to_excel(writer, sheet_name="Summary", index=False)
        pd.DataFrame(details, columns=header).to_excel(writer, sheet_name=detail_sheet, index=False)
    output.seek(0)
    return output.getvalue()


def render_management_overview_excel(report: ManagementOverview) -> bytes:
    metrics, header, details = _management_overview_sections(report)
    return _export_to_excel(metrics, "Top Performers", header, details)


def render_commission_payout_excel(report: CommissionPayout) -> bytes:
    metrics, header, details = _commission_payout_sections(report)
    return _export_to_excel(metrics, "Personnel Payouts", header, details)
