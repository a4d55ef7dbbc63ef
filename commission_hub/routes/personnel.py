from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from commission_hub.database import get_db
from commission_hub.schemas.personnel import PersonnelCreate, PersonnelUpdate
from commission_hub.services.personnel_service import PersonnelService
from commission_hub.utils.exceptions import ValidationFailed, BusinessRuleViolation, EntityNotFound
from commission_hub.utils.logger import app_logger
from commission_hub.utils.responses import api_success, api_error, api_internal_error

router = APIRouter()


@router.get("")
async def get_all_personnel(db: AsyncSession = Depends(get_db)):
    try:
        data = await PersonnelService.get_all_personnel(db)
        return api_success(data)
    except SQLAlchemyError as e:
        app_logger.error(f"get_all_personnel Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"get_all_personnel An error occurred: {str(e)}", exc_info=True)
        return api_internal_error()


@router.get("/{personnel_id}")
async def get_personnel(personnel_id: int, db: AsyncSession = Depends(get_db)):
    try:
        data = await PersonnelService.get_personnel(db, personnel_id)
        return api_success(data)
    except EntityNotFound as e:
        return api_error(e.message, status_code=status.HTTP_404_NOT_FOUND)
    except SQLAlchemyError as e:
        app_logger.error(f"get_personnel {personnel_id} Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"get_personnel {personnel_id} An error occurred: {str(e)}", exc_info=True)
        return api_internal_error()


@router.post("")
async def create_personnel(personnel: PersonnelCreate, db: AsyncSession = Depends(get_db)):
    try:
        data = await PersonnelService.create_personnel(db, personnel)
        return api_success(data, "Personnel created successfully", status_code=status.HTTP_201_CREATED)
    except ValidationFailed as e:
        return api_error(e.message, e.errors)
    except SQLAlchemyError as e:
        app_logger.error(f"create_personnel Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"create_personnel An error occurred: {str(e)}", exc_info=True)
        return api_internal_error()


@router.put("/{personnel_id}")
async def update_personnel(personnel_id: int, personnel: PersonnelUpdate, db: AsyncSession = Depends(get_db)):
    try:
        data = await PersonnelService.update_personnel(db, personnel_id, personnel)
        return api_success(data, "Personnel updated successfully")
    except ValidationFailed as e:
        return api_error(e.message, e.errors)
    except EntityNotFound as e:
        return api_error(e.message, status_code=status.HTTP_404_NOT_FOUND)
    except SQLAlchemyError as e:
        app_logger.error(f"update_personnel {personnel_id} Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"update_personnel {personnel_id} An error occurred: {str(e)}", exc_info=True)
        return api_internal_error()


@router.delete("/{personnel_id}")
async def delete_personnel(personnel_id: int, confirm: bool = Query(False),
                           db: AsyncSession = Depends(get_db)):
    """
    Delete a personnel record and every sales record it owns, requires ?confirm=true
    """
    try:
        await PersonnelService.delete_personnel(db, personnel_id, confirm)
        return api_success(message="Personnel deleted successfully. Associated sales records have been removed.")
    except BusinessRuleViolation as e:
        return api_error(e.message)
    except EntityNotFound as e:
        return api_error(e.message, status_code=status.HTTP_404_NOT_FOUND)
    except SQLAlchemyError as e:
        app_logger.error(f"delete_personnel {personnel_id} Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"delete_personnel {personnel_id} An error occurred: {str(e)}", exc_info=True)
        return api_internal_error()
