"""
Demo rows for development databases

Only loaded by the application lifespan when the active environment sets load_demo_data.
"""
from datetime import datetime
from decimal import Decimal

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from commission_hub.models.commission import CommissionProfileModel
from commission_hub.models.personnel import PersonnelModel
from commission_hub.models.sales import SalesModel
from commission_hub.utils.logger import app_logger

DEMO_COMMISSION_PROFILES = [
    {"id": 1, "profile_name": 1, "commission_fixed": Decimal("500.00"), "commission_percentage": Decimal("0.050000")},
    {"id": 2, "profile_name": 2, "commission_fixed": Decimal("750.00"), "commission_percentage": Decimal("0.030000")},
    {"id": 3, "profile_name": 3, "commission_fixed": Decimal("300.00"), "commission_percentage": Decimal("0.080000")},
]

DEMO_PERSONNEL = [
    {"id": 1, "name": "John Smith", "age": 25, "phone": "555-0101", "commission_profile_id": 1,
     "bank_name": "Chase Bank", "bank_account_no": "1234567890"},
    {"id": 2, "name": "Sarah Johnson", "age": 28, "phone": "555-0102", "commission_profile_id": 2,
     "bank_name": "Wells Fargo", "bank_account_no": "2345678901"},
    {"id": 3, "name": "Michael Brown", "age": 32, "phone": "555-0103", "commission_profile_id": 1,
     "bank_name": "Bank of America", "bank_account_no": "3456789012"},
    {"id": 4, "name": "Emily Davis", "age": 24, "phone": "555-0104", "commission_profile_id": 3,
     "bank_name": "Citibank", "bank_account_no": "4567890123"},
    {"id": 5, "name": "David Wilson", "age": 29, "phone": "555-0105", "commission_profile_id": 2,
     "bank_name": "TD Bank", "bank_account_no": "5678901234"},
]

DEMO_SALES = [
    {"id": 1, "personnel_id": 1, "report_date": datetime(2025, 7, 15), "sales_amount": Decimal("1250.00")},
    {"id": 2, "personnel_id": 1, "report_date": datetime(2025, 7, 20), "sales_amount": Decimal("980.50")},
    {"id": 3, "personnel_id": 2, "report_date": datetime(2025, 7, 18), "sales_amount": Decimal("2150.00")},
    {"id": 4, "personnel_id": 2, "report_date": datetime(2025, 7, 22), "sales_amount": Decimal("1875.50")},
    {"id": 5, "personnel_id": 3, "report_date": datetime(2025, 7, 25), "sales_amount": Decimal("950.00")},
]


async def load_demo_data(db: AsyncSession) -> bool:
    """
    Insert the demo rows into an empty database

    Returns:
        bool: False when commission profiles already exist and nothing was inserted
    """
    result = await db.execute(select(func.count(CommissionProfileModel.id)))
    if result.scalar_one():
        app_logger.info("Database already holds data, demo rows skipped")
        return False

    db.add_all([CommissionProfileModel(**row) for row in DEMO_COMMISSION_PROFILES])
    await db.flush()
    db.add_all([PersonnelModel(**row) for row in DEMO_PERSONNEL])
    await db.flush()
    db.add_all([SalesModel(**row) for row in DEMO_SALES])
    await db.commit()

    app_logger.info(f"Loaded demo data: {len(DEMO_COMMISSION_PROFILES)} commission profiles, "
                    f"{len(DEMO_PERSONNEL)} personnel, {len(DEMO_SALES)} sales")
    return True
