from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from commission_hub.database import get_db
from commission_hub.services.report_service import ReportService
from commission_hub.utils.exceptions import ValidationFailed
from commission_hub.utils.logger import app_logger
from commission_hub.utils.period import resolve_period
from commission_hub.utils.report_export import (
    MANAGEMENT_OVERVIEW, COMMISSION_PAYOUT, CSV_MEDIA_TYPE, EXCEL_MEDIA_TYPE, report_filename,
    render_management_overview_csv, render_commission_payout_csv,
    render_management_overview_excel, render_commission_payout_excel,
)
from commission_hub.utils.responses import api_success, api_error, api_internal_error, file_response

router = APIRouter()

REPORT_FORMATS = ["json", "csv", "excel"]


def _check_format(format: str) -> str:
    report_format = (format or "json").lower()
    if report_format not in REPORT_FORMATS:
        raise ValidationFailed([f"Invalid format. Must be one of: {', '.join(REPORT_FORMATS)}"])
    return report_format


@router.get("/management-overview")
async def get_management_overview(
        year: Optional[int] = Query(None, description="Report year, defaults to the current year"),
        month: Optional[int] = Query(None, description="Report month 1-12, defaults to the current month"),
        personnel_id: Optional[int] = Query(None, alias="personnelId"),
        format: str = Query("json", description=f"Response format: {', '.join(REPORT_FORMATS)}"),
        db: AsyncSession = Depends(get_db)
):
    """
    Monthly totals, top 5 performers, average per person and days without sales
    - personnelId narrows the sales to one person; the average still divides by all personnel
    """
    try:
        report_format = _check_format(format)
        period = resolve_period(year, month)
        report = await ReportService.get_management_overview(db, period, personnel_id)

        if report_format == "csv":
            return file_response(render_management_overview_csv(report).encode("utf-8"),
                                 report_filename(MANAGEMENT_OVERVIEW, period), CSV_MEDIA_TYPE)
        if report_format == "excel":
            return file_response(render_management_overview_excel(report),
                                 report_filename(MANAGEMENT_OVERVIEW, period, "xlsx"), EXCEL_MEDIA_TYPE)
        return api_success(report)

    except ValidationFailed as e:
        return api_error(e.message, e.errors)
    except SQLAlchemyError as e:
        app_logger.error(f"get_management_overview Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"Error generating management overview: {str(e)}", exc_info=True)
        return api_internal_error()


@router.get("/commission-payout")
async def get_commission_payout(
        year: Optional[int] = Query(None, description="Report year, defaults to the current year"),
        month: Optional[int] = Query(None, description="Report month 1-12, defaults to the current month"),
        personnel_id: Optional[int] = Query(None, alias="personnelId"),
        format: str = Query("json", description=f"Response format: {', '.join(REPORT_FORMATS)}"),
        db: AsyncSession = Depends(get_db)
):
    """
    Fixed plus variable commission for every personnel in the month
    """
    try:
        report_format = _check_format(format)
        period = resolve_period(year, month)
        report = await ReportService.get_commission_payout(db, period, personnel_id)

        if report_format == "csv":
            return file_response(render_commission_payout_csv(report).encode("utf-8"),
                                 report_filename(COMMISSION_PAYOUT, period), CSV_MEDIA_TYPE)
        if report_format == "excel":
            return file_response(render_commission_payout_excel(report),
                                 report_filename(COMMISSION_PAYOUT, period, "xlsx"), EXCEL_MEDIA_TYPE)
        return api_success(report)

    except ValidationFailed as e:
        return api_error(e.message, e.errors)
    except SQLAlchemyError as e:
        app_logger.error(f"get_commission_payout Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"Error generating commission payout: {str(e)}", exc_info=True)
        return api_internal_error()
