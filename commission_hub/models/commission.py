from sqlalchemy import Column, Integer, DECIMAL, CheckConstraint
from sqlalchemy.orm import relationship

from commission_hub.models.base import Base


class CommissionProfileModel(Base):
    """
    Commission profile
    A fixed payout amount plus a percentage of monthly sales, assigned to personnel
    """
    __tablename__ = "commission_profile"
    __table_args__ = (
        CheckConstraint("commission_fixed >= 0", name="ck_commission_profile_fixed"),
        CheckConstraint("commission_percentage >= 0 AND commission_percentage <= 1",
                        name="ck_commission_profile_percentage"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    profile_name = Column(Integer, nullable=False)  # display label
    commission_fixed = Column(DECIMAL(10, 2), nullable=False)
    commission_percentage = Column(DECIMAL(10, 6), nullable=False)  # 0.05 means 5%

    personnel = relationship("PersonnelModel", back_populates="commission_profile", lazy="raise",
                             passive_deletes="all")
