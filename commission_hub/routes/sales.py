from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from commission_hub.database import get_db
from commission_hub.schemas.sales import SalesCreate
from commission_hub.services.sales_service import SalesService
from commission_hub.utils.exceptions import ValidationFailed, BusinessRuleViolation, EntityNotFound
from commission_hub.utils.logger import app_logger
from commission_hub.utils.responses import api_success, api_error, api_internal_error

router = APIRouter()


@router.get("")
async def get_sales(personnel_id: Optional[int] = Query(None, alias="personnelId"),
                    date_from: Optional[date] = Query(None, alias="from"),
                    date_to: Optional[date] = Query(None, alias="to"),
                    db: AsyncSession = Depends(get_db)):
    try:
        data = await SalesService.get_sales(db, personnel_id, date_from, date_to)
        return api_success(data)
    except SQLAlchemyError as e:
        app_logger.error(f"get_sales Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"get_sales An error occurred: {str(e)}", exc_info=True)
        return api_internal_error()


@router.get("/{sales_id}")
async def get_sale(sales_id: int, db: AsyncSession = Depends(get_db)):
    try:
        data = await SalesService.get_sale(db, sales_id)
        return api_success(data)
    except EntityNotFound as e:
        return api_error(e.message, status_code=status.HTTP_404_NOT_FOUND)
    except SQLAlchemyError as e:
        app_logger.error(f"get_sale {sales_id} Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"get_sale {sales_id} An error occurred: {str(e)}", exc_info=True)
        return api_internal_error()


@router.post("")
async def create_sale(sale: SalesCreate, db: AsyncSession = Depends(get_db)):
    try:
        data = await SalesService.create_sale(db, sale)
        return api_success(data, "Sales record created successfully", status_code=status.HTTP_201_CREATED)
    except ValidationFailed as e:
        return api_error(e.message, e.errors)
    except BusinessRuleViolation as e:
        return api_error(e.message)
    except SQLAlchemyError as e:
        app_logger.error(f"create_sale Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"create_sale An error occurred: {str(e)}", exc_info=True)
        return api_internal_error()


@router.delete("/{sales_id}")
async def delete_sale(sales_id: int, db: AsyncSession = Depends(get_db)):
    try:
        await SalesService.delete_sale(db, sales_id)
        return api_success(message=f"Sales record with ID {sales_id} deleted successfully")
    except EntityNotFound as e:
        return api_error(e.message, status_code=status.HTTP_404_NOT_FOUND)
    except SQLAlchemyError as e:
        app_logger.error(f"delete_sale {sales_id} Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"delete_sale {sales_id} An error occurred: {str(e)}", exc_info=True)
        return api_internal_error()
