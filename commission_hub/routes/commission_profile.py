from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from commission_hub.database import get_db
from commission_hub.schemas.commission import CommissionProfileCreate, CommissionProfileUpdate
from commission_hub.services.commission_profile_service import CommissionProfileService
from commission_hub.utils.exceptions import ValidationFailed, BusinessRuleViolation, EntityNotFound
from commission_hub.utils.logger import app_logger
from commission_hub.utils.responses import api_success, api_error, api_internal_error

router = APIRouter()


@router.get("")
async def get_commission_profiles(db: AsyncSession = Depends(get_db)):
    try:
        data = await CommissionProfileService.get_all_profiles(db)
        return api_success(data)
    except SQLAlchemyError as e:
        app_logger.error(f"get_commission_profiles Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"get_commission_profiles An error occurred: {str(e)}", exc_info=True)
        return api_internal_error()


@router.get("/{profile_id}")
async def get_commission_profile(profile_id: int, db: AsyncSession = Depends(get_db)):
    try:
        data = await CommissionProfileService.get_profile(db, profile_id)
        return api_success(data)
    except EntityNotFound as e:
        return api_error(e.message, status_code=status.HTTP_404_NOT_FOUND)
    except SQLAlchemyError as e:
        app_logger.error(f"get_commission_profile {profile_id} Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"get_commission_profile {profile_id} An error occurred: {str(e)}", exc_info=True)
        return api_internal_error()


@router.post("")
async def create_commission_profile(profile: CommissionProfileCreate, db: AsyncSession = Depends(get_db)):
    try:
        data = await CommissionProfileService.create_profile(db, profile)
        return api_success(data, "Commission profile created successfully", status_code=status.HTTP_201_CREATED)
    except ValidationFailed as e:
        return api_error(e.message, e.errors)
    except SQLAlchemyError as e:
        app_logger.error(f"create_commission_profile Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"create_commission_profile An error occurred: {str(e)}", exc_info=True)
        return api_internal_error()


@router.put("/{profile_id}")
async def update_commission_profile(profile_id: int, profile: CommissionProfileUpdate,
                                    db: AsyncSession = Depends(get_db)):
    try:
        data = await CommissionProfileService.update_profile(db, profile_id, profile)
        return api_success(data, "Commission profile updated successfully")
    except ValidationFailed as e:
        return api_error(e.message, e.errors)
    except EntityNotFound as e:
        return api_error(e.message, status_code=status.HTTP_404_NOT_FOUND)
    except SQLAlchemyError as e:
        app_logger.error(f"update_commission_profile {profile_id} Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"update_commission_profile {profile_id} An error occurred: {str(e)}", exc_info=True)
        return api_internal_error()


@router.delete("/{profile_id}")
async def delete_commission_profile(profile_id: int, db: AsyncSession = Depends(get_db)):
    try:
        await CommissionProfileService.delete_profile(db, profile_id)
        return api_success(message=f"Commission profile with ID {profile_id} deleted successfully")
    except BusinessRuleViolation as e:
        return api_error(e.message)
    except EntityNotFound as e:
        return api_error(e.message, status_code=status.HTTP_404_NOT_FOUND)
    except SQLAlchemyError as e:
        app_logger.error(f"delete_commission_profile {profile_id} Database error: {str(e)}")
        return api_internal_error()
    except Exception as e:
        app_logger.error(f"delete_commission_profile {profile_id} An error occurred: {str(e)}", exc_info=True)
        return api_internal_error()
