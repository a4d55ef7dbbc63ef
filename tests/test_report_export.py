import csv
import io
from datetime import datetime
from decimal import Decimal

from commission_hub.services.report_engine import (
    SaleRow, PayoutSourceRow, build_management_overview, build_commission_payout,
)
from commission_hub.utils.period import resolve_period
from commission_hub.utils.report_export import (
    format_currency, format_percentage, report_filename,
    render_management_overview_csv, render_commission_payout_csv,
    render_management_overview_excel, MANAGEMENT_OVERVIEW, COMMISSION_PAYOUT,
)

JULY_2025 = resolve_period(2025, 7)


def _rows(text):
    return list(csv.reader(io.StringIO(text)))


def test_format_currency():
    assert format_currency(Decimal("1234.5")) == "$1,234.50"
    assert format_currency(Decimal("0")) == "$0.00"
    assert format_currency(Decimal("1000000")) == "$1,000,000.00"


def test_format_percentage():
    assert format_percentage(Decimal("0.05")) == "5.0%"
    assert format_percentage(Decimal("0.033333")) == "3.3%"
    assert format_percentage(Decimal("1")) == "100.0%"


def test_report_filename():
    assert report_filename(MANAGEMENT_OVERVIEW, JULY_2025) == "management-overview-2025-07.csv"
    assert report_filename(COMMISSION_PAYOUT, resolve_period(2025, 11), "xlsx") == "commission-payout-2025-11.xlsx"


def test_management_overview_csv_layout():
    sales = [
        SaleRow(1, "John Smith", datetime(2025, 7, 15), Decimal("1250.00")),
        SaleRow(2, "Sarah Johnson", datetime(2025, 7, 18), Decimal("2150.00")),
    ]
    report = build_management_overview(JULY_2025, sales, personnel_count=2)
    rows = _rows(render_management_overview_csv(report))

    assert rows[0] == ["Management Overview Report - July 2025"]
    assert rows[1] == []
    assert rows[2] == ["Summary"]
    assert rows[3] == ["Metric", "Value"]
    assert ["Total Sales", "$3,400.00"] in rows
    assert ["Average Per Person", "$1,700.00"] in rows
    assert ["Days with No Sales", "29"] in rows

    header_index = rows.index(["Rank", "Personnel Name", "Total Sales", "Transaction Count"])
    assert rows[header_index - 1] == ["Top Performers"]
    assert rows[header_index + 1] == ["1", "Sarah Johnson", "$2,150.00", "1"]
    assert rows[header_index + 2] == ["2", "John Smith", "$1,250.00", "1"]


def test_commission_payout_csv_quotes_names_with_commas():
    personnel = [PayoutSourceRow(1, "Smith, John", Decimal("500.00"), Decimal("0.05"))]
    sales = [SaleRow(1, "Smith, John", datetime(2025, 7, 15), Decimal("1000.00"))]
    report = build_commission_payout(JULY_2025, personnel, sales)
    text = render_commission_payout_csv(report)

    assert '"Smith, John"' in text
    rows = _rows(text)
    assert rows[0] == ["Commission Payout Report - July 2025"]
    assert ["Total Payout", "$550.00"] in rows
    header_index = rows.index(["Personnel Name", "Monthly Sales", "Fixed Commission", "Commission %",
                               "Variable Commission", "Total Payout"])
    assert rows[header_index - 1] == ["Personnel Payouts"]
    assert rows[header_index + 1] == ["Smith, John", "$1,000.00", "$500.00", "5.0%", "$50.00", "$550.00"]


def test_management_overview_excel_is_a_workbook():
    report = build_management_overview(JULY_2025, [], personnel_count=0)
    content = render_management_overview_excel(report)

    # xlsx files are zip archives
    assert content[:2] == b"PK"
