from typing import List, Optional

from sqlalchemy import select, func, delete
from sqlalchemy.ext.asyncio import AsyncSession

from commission_hub.models.personnel import PersonnelModel
from commission_hub.models.sales import SalesModel
from commission_hub.schemas.personnel import PersonnelBase, PersonnelOut
from commission_hub.services.commission_profile_service import CommissionProfileService
from commission_hub.utils.exceptions import ValidationFailed, BusinessRuleViolation, EntityNotFound
from commission_hub.utils.logger import app_logger

MINIMUM_AGE = 19
NAME_MAX_LENGTH = 50
PHONE_MAX_LENGTH = 20
BANK_FIELD_MAX_LENGTH = 20


def _clean_optional(value: Optional[str]) -> Optional[str]:
    """Trim, and store blank values as NULL"""
    if value is None or not value.strip():
        return None
    return value.strip()


class PersonnelService:

    @staticmethod
    async def validate_personnel(db: AsyncSession, personnel_data: PersonnelBase) -> List[str]:
        """Collect every field and reference problem of a personnel payload"""
        errors = []
        name = (personnel_data.name or "").strip()
        phone = (personnel_data.phone or "").strip()

        if not name:
            errors.append("Name cannot be empty or whitespace only")
        elif len(name) > NAME_MAX_LENGTH:
            errors.append(f"Name cannot exceed {NAME_MAX_LENGTH} characters")

        if not phone:
            errors.append("Phone cannot be empty or whitespace only")
        elif len(phone) > PHONE_MAX_LENGTH:
            errors.append(f"Phone cannot exceed {PHONE_MAX_LENGTH} characters")

        if personnel_data.age < MINIMUM_AGE:
            errors.append(f"Age must be {MINIMUM_AGE} or older")

        bank_name = _clean_optional(personnel_data.bank_name)
        if bank_name and len(bank_name) > BANK_FIELD_MAX_LENGTH:
            errors.append(f"Bank name cannot exceed {BANK_FIELD_MAX_LENGTH} characters")
        bank_account_no = _clean_optional(personnel_data.bank_account_no)
        if bank_account_no and len(bank_account_no) > BANK_FIELD_MAX_LENGTH:
            errors.append(f"Bank account number cannot exceed {BANK_FIELD_MAX_LENGTH} characters")

        profile_id = personnel_data.commission_profile_id
        if profile_id is None or profile_id <= 0:
            errors.append("Commission profile ID must be provided")
        elif not await CommissionProfileService.profile_exists(db, profile_id):
            errors.append(f"Commission profile with ID {profile_id} does not exist")

        return errors

    @staticmethod
    def _apply(personnel: PersonnelModel, personnel_data: PersonnelBase):
        personnel.name = personnel_data.name.strip()
        personnel.age = personnel_data.age
        personnel.phone = personnel_data.phone.strip()
        personnel.commission_profile_id = personnel_data.commission_profile_id
        personnel.bank_name = _clean_optional(personnel_data.bank_name)
        personnel.bank_account_no = _clean_optional(personnel_data.bank_account_no)

    @staticmethod
    async def _check(db: AsyncSession, personnel_data: PersonnelBase):
        errors = await PersonnelService.validate_personnel(db, personnel_data)
        if errors:
            app_logger.warning(f"Personnel rejected: {errors}")
            raise ValidationFailed(errors)

    @staticmethod
    async def _get_model(db: AsyncSession, personnel_id: int) -> PersonnelModel:
        personnel = await db.get(PersonnelModel, personnel_id)
        if personnel is None:
            raise EntityNotFound(f"Personnel with ID {personnel_id} not found")
        return personnel

    @staticmethod
    async def get_all_personnel(db: AsyncSession) -> List[PersonnelOut]:
        result = await db.execute(select(PersonnelModel).order_by(PersonnelModel.id))
        personnel = result.scalars().all()
        app_logger.info(f"Fetched {len(personnel)} personnel")
        return [PersonnelOut.model_validate(p) for p in personnel]

    @staticmethod
    async def get_personnel(db: AsyncSession, personnel_id: int) -> PersonnelOut:
        personnel = await PersonnelService._get_model(db, personnel_id)
        return PersonnelOut.model_validate(personnel)

    @staticmethod
    async def personnel_exists(db: AsyncSession, personnel_id: int) -> bool:
        return await db.get(PersonnelModel, personnel_id) is not None

    @staticmethod
    async def count_personnel(db: AsyncSession) -> int:
        result = await db.execute(select(func.count(PersonnelModel.id)))
        return result.scalar_one()

    @staticmethod
    async def create_personnel(db: AsyncSession, personnel_data: PersonnelBase) -> PersonnelOut:
        await PersonnelService._check(db, personnel_data)

        personnel = PersonnelModel()
        PersonnelService._apply(personnel, personnel_data)
        db.add(personnel)
        await db.commit()
        await db.refresh(personnel)
        app_logger.info(f"Created personnel {personnel.id} ({personnel.name})")
        return PersonnelOut.model_validate(personnel)

    @staticmethod
    async def update_personnel(db: AsyncSession, personnel_id: int, personnel_data: PersonnelBase) -> PersonnelOut:
        await PersonnelService._check(db, personnel_data)

        personnel = await PersonnelService._get_model(db, personnel_id)
        PersonnelService._apply(personnel, personnel_data)
        await db.commit()
        await db.refresh(personnel)
        app_logger.info(f"Updated personnel {personnel_id}")
        return PersonnelOut.model_validate(personnel)

    @staticmethod
    async def delete_personnel(db: AsyncSession, personnel_id: int, confirm: bool = False) -> int:
        """
        Delete a personnel record together with all of its sales

        Args:
            db: database session
            personnel_id: personnel to delete
            confirm: must be True, deleting also removes the sales history

        Returns:
            int: number of sales records removed with the personnel

        Raises:
            BusinessRuleViolation: confirm was not given
            EntityNotFound: no personnel with this id
        """
        if not confirm:
            raise BusinessRuleViolation("Delete confirmation required. Add ?confirm=true to the request.")

        personnel = await PersonnelService._get_model(db, personnel_id)

        result = await db.execute(delete(SalesModel).where(SalesModel.personnel_id == personnel_id))
        removed_sales = result.rowcount or 0
        await db.delete(personnel)
        await db.commit()
        app_logger.info(f"Deleted personnel {personnel_id} and {removed_sales} sales records")
        return removed_sales
