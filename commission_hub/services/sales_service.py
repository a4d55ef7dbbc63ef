from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from commission_hub.models.personnel import PersonnelModel
from commission_hub.models.sales import SalesModel
from commission_hub.schemas.sales import SalesCreate, SalesOut
from commission_hub.services.personnel_service import PersonnelService
from commission_hub.utils.exceptions import ValidationFailed, BusinessRuleViolation, EntityNotFound
from commission_hub.utils.logger import app_logger
from commission_hub.utils.period import to_day

AMOUNT_PRECISION = Decimal('0.01')


class SalesService:

    @staticmethod
    async def get_sales(db: AsyncSession, personnel_id: Optional[int] = None,
                        date_from: Optional[date] = None, date_to: Optional[date] = None) -> List[SalesOut]:
        """
        List sales, newest first

        Args:
            personnel_id: only this person's sales
            date_from: first day included
            date_to: last day included, the whole day counts
        """
        app_logger.info(f"Fetching sales personnel_id={personnel_id}, from={date_from}, to={date_to}")
        query = select(SalesModel)
        if personnel_id is not None:
            query = query.where(SalesModel.personnel_id == personnel_id)
        if date_from is not None:
            query = query.where(SalesModel.report_date >= datetime.combine(date_from, datetime.min.time()))
        if date_to is not None:
            query = query.where(
                SalesModel.report_date < datetime.combine(date_to + timedelta(days=1), datetime.min.time())
            )
        query = query.order_by(SalesModel.report_date.desc(), SalesModel.id.desc())

        result = await db.execute(query)
        sales = result.scalars().all()
        app_logger.info(f"Fetched {len(sales)} sales records")
        return [SalesOut.model_validate(s) for s in sales]

    @staticmethod
    async def get_sale(db: AsyncSession, sales_id: int) -> SalesOut:
        sale = await db.get(SalesModel, sales_id)
        if sale is None:
            raise EntityNotFound(f"Sales record with ID {sales_id} not found")
        return SalesOut.model_validate(sale)

    @staticmethod
    async def create_sale(db: AsyncSession, sales_data: SalesCreate, today: Optional[date] = None) -> SalesOut:
        """
        Record a sale

        Raises:
            ValidationFailed: negative amount
            BusinessRuleViolation: report date after today, or unknown personnel
        """
        if sales_data.sales_amount < 0:
            raise ValidationFailed(["Sales amount must be non-negative"])

        today = today or date.today()
        if to_day(sales_data.report_date) > today:
            app_logger.warning(f"Rejected future dated sale {sales_data.report_date} (today {today})")
            raise BusinessRuleViolation("Report date cannot be in the future")

        if not await PersonnelService.personnel_exists(db, sales_data.personnel_id):
            raise BusinessRuleViolation(f"Personnel with ID {sales_data.personnel_id} does not exist")

        # the column holds naive timestamps
        report_date = sales_data.report_date.replace(tzinfo=None)
        sale = SalesModel(
            personnel_id=sales_data.personnel_id,
            report_date=report_date,
            sales_amount=sales_data.sales_amount.quantize(AMOUNT_PRECISION, rounding=ROUND_HALF_UP),
        )
        db.add(sale)
        await db.commit()
        await db.refresh(sale)
        app_logger.info(f"Created sales record {sale.id} for personnel {sale.personnel_id}")
        return SalesOut.model_validate(sale)

    @staticmethod
    async def delete_sale(db: AsyncSession, sales_id: int) -> bool:
        sale = await db.get(SalesModel, sales_id)
        if sale is None:
            raise EntityNotFound(f"Sales record with ID {sales_id} not found")
        await db.delete(sale)
        await db.commit()
        app_logger.info(f"Deleted sales record {sales_id}")
        return True

    @staticmethod
    async def get_sales_in_range(db: AsyncSession, start: datetime, end: datetime,
                                 personnel_id: Optional[int] = None):
        """Sales rows joined to their personnel name inside [start, end), oldest first"""
        query = (
            select(
                SalesModel.id,
                SalesModel.personnel_id,
                PersonnelModel.name.label('personnel_name'),
                SalesModel.report_date,
                SalesModel.sales_amount,
            )
            .join(PersonnelModel, SalesModel.personnel_id == PersonnelModel.id)
            .where(SalesModel.report_date >= start, SalesModel.report_date < end)
            .order_by(SalesModel.report_date, SalesModel.id)
        )
        if personnel_id is not None:
            query = query.where(SalesModel.personnel_id == personnel_id)

        result = await db.execute(query)
        return result.fetchall()
