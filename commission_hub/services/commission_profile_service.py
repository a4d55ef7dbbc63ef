from decimal import Decimal, ROUND_HALF_UP
from typing import List

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from commission_hub.models.commission import CommissionProfileModel
from commission_hub.models.personnel import PersonnelModel
from commission_hub.schemas.commission import CommissionProfileBase, CommissionProfileOut
from commission_hub.utils.exceptions import ValidationFailed, BusinessRuleViolation, EntityNotFound
from commission_hub.utils.logger import app_logger

FIXED_PRECISION = Decimal('0.01')
PERCENTAGE_PRECISION = Decimal('0.000001')


class CommissionProfileService:

    @staticmethod
    def validate_profile(profile_data: CommissionProfileBase) -> List[str]:
        errors = []
        if profile_data.profile_name < 1:
            errors.append("Profile name must be a positive integer")
        if profile_data.commission_fixed < 0:
            errors.append("Commission fixed amount must be non-negative")
        if not 0 <= profile_data.commission_percentage <= 1:
            errors.append("Commission percentage must be between 0 and 1")
        return errors

    @staticmethod
    def _check(profile_data: CommissionProfileBase):
        errors = CommissionProfileService.validate_profile(profile_data)
        if errors:
            app_logger.warning(f"Commission profile rejected: {errors}")
            raise ValidationFailed(errors)

    @staticmethod
    def _apply(profile: CommissionProfileModel, profile_data: CommissionProfileBase):
        profile.profile_name = profile_data.profile_name
        profile.commission_fixed = profile_data.commission_fixed.quantize(FIXED_PRECISION, rounding=ROUND_HALF_UP)
        profile.commission_percentage = profile_data.commission_percentage.quantize(PERCENTAGE_PRECISION,
                                                                                    rounding=ROUND_HALF_UP)

    @staticmethod
    async def get_all_profiles(db: AsyncSession) -> List[CommissionProfileOut]:
        result = await db.execute(
            select(CommissionProfileModel).order_by(CommissionProfileModel.profile_name, CommissionProfileModel.id)
        )
        profiles = result.scalars().all()
        app_logger.info(f"Fetched {len(profiles)} commission profiles")
        return [CommissionProfileOut.model_validate(p) for p in profiles]

    @staticmethod
    async def _get_model(db: AsyncSession, profile_id: int) -> CommissionProfileModel:
        profile = await db.get(CommissionProfileModel, profile_id)
        if profile is None:
            raise EntityNotFound(f"Commission profile with ID {profile_id} not found")
        return profile

    @staticmethod
    async def get_profile(db: AsyncSession, profile_id: int) -> CommissionProfileOut:
        profile = await CommissionProfileService._get_model(db, profile_id)
        return CommissionProfileOut.model_validate(profile)

    @staticmethod
    async def create_profile(db: AsyncSession, profile_data: CommissionProfileBase) -> CommissionProfileOut:
        CommissionProfileService._check(profile_data)
        profile = CommissionProfileModel()
        CommissionProfileService._apply(profile, profile_data)
        db.add(profile)
        await db.commit()
        await db.refresh(profile)
        app_logger.info(f"Created commission profile {profile.id} (profile name {profile.profile_name})")
        return CommissionProfileOut.model_validate(profile)

    @staticmethod
    async def update_profile(db: AsyncSession, profile_id: int,
                             profile_data: CommissionProfileBase) -> CommissionProfileOut:
        CommissionProfileService._check(profile_data)
        profile = await CommissionProfileService._get_model(db, profile_id)
        CommissionProfileService._apply(profile, profile_data)
        await db.commit()
        await db.refresh(profile)
        app_logger.info(f"Updated commission profile {profile_id}")
        return CommissionProfileOut.model_validate(profile)

    @staticmethod
    async def count_personnel_references(db: AsyncSession, profile_id: int) -> int:
        result = await db.execute(
            select(func.count(PersonnelModel.id)).where(PersonnelModel.commission_profile_id == profile_id)
        )
        return result.scalar_one()

    @staticmethod
    async def profile_exists(db: AsyncSession, profile_id: int) -> bool:
        return await db.get(CommissionProfileModel, profile_id) is not None

    @staticmethod
    async def delete_profile(db: AsyncSession, profile_id: int) -> bool:
        """
        Delete a commission profile nobody is assigned to

        Raises:
            EntityNotFound: no profile with this id
            BusinessRuleViolation: personnel still reference the profile
        """
        profile = await CommissionProfileService._get_model(db, profile_id)

        references = await CommissionProfileService.count_personnel_references(db, profile_id)
        if references:
            app_logger.warning(f"Refused to delete commission profile {profile_id}: "
                               f"{references} personnel reference it")
            raise BusinessRuleViolation(
                f"Cannot delete commission profile {profile_id}: "
                f"it is referenced by {references} personnel record(s)"
            )

        await db.delete(profile)
        await db.commit()
        app_logger.info(f"Deleted commission profile {profile_id}")
        return True
