from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from commission_hub.models.commission import CommissionProfileModel
from commission_hub.models.personnel import PersonnelModel
from commission_hub.schemas.report import ReportPeriod, ManagementOverview, CommissionPayout
from commission_hub.services.personnel_service import PersonnelService
from commission_hub.services.report_engine import build_management_overview, build_commission_payout
from commission_hub.services.sales_service import SalesService
from commission_hub.utils.logger import app_logger
from commission_hub.utils.period import period_range


class ReportService:

    @staticmethod
    async def get_management_overview(db: AsyncSession, period: ReportPeriod,
                                      personnel_id: Optional[int] = None) -> ManagementOverview:
        """
        Monthly sales overview

        The average per person always divides by the number of all personnel on record,
        also when the report is narrowed to one person.
        """
        app_logger.info(f"Starting get_management_overview for {period.year}-{period.month:02d}, "
                        f"personnel_id: {personnel_id}")
        start, end = period_range(period)

        sales_rows = await SalesService.get_sales_in_range(db, start, end, personnel_id)
        app_logger.debug(f"Fetched {len(sales_rows)} sales rows for the management overview")

        personnel_count = await PersonnelService.count_personnel(db)
        report = build_management_overview(period, sales_rows, personnel_count)

        app_logger.info(f"Management overview {period.year}-{period.month:02d}: "
                        f"total {report.summary.total_sales}, {report.summary.total_transactions} transactions")
        return report

    @staticmethod
    async def get_commission_payout(db: AsyncSession, period: ReportPeriod,
                                    personnel_id: Optional[int] = None) -> CommissionPayout:
        app_logger.info(f"Starting get_commission_payout for {period.year}-{period.month:02d}, "
                        f"personnel_id: {personnel_id}")
        start, end = period_range(period)

        query = (
            select(
                PersonnelModel.id.label('personnel_id'),
                PersonnelModel.name.label('personnel_name'),
                CommissionProfileModel.commission_fixed,
                CommissionProfileModel.commission_percentage,
            )
            .join(CommissionProfileModel, PersonnelModel.commission_profile_id == CommissionProfileModel.id)
            .order_by(PersonnelModel.id)
        )
        if personnel_id is not None:
            query = query.where(PersonnelModel.id == personnel_id)

        result = await db.execute(query)
        personnel_rows = result.fetchall()
        app_logger.debug(f"Fetched {len(personnel_rows)} personnel rows for the commission payout")

        sales_rows = await SalesService.get_sales_in_range(db, start, end, personnel_id)
        report = build_commission_payout(period, personnel_rows, sales_rows)

        app_logger.info(f"Commission payout {period.year}-{period.month:02d}: "
                        f"{report.summary.personnel_count} personnel, total payout {report.summary.total_payout}")
        return report
