from sqlalchemy import Column, Integer, String, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship

from commission_hub.models.base import Base


class PersonnelModel(Base):
    """
    Sales personnel
    Every person belongs to exactly one commission profile and owns their sales records
    """
    __tablename__ = "personnel"
    __table_args__ = (
        CheckConstraint("age >= 19", name="ck_personnel_age"),
        CheckConstraint("length(trim(name)) > 0", name="ck_personnel_name"),
        CheckConstraint("length(trim(phone)) > 0", name="ck_personnel_phone"),
        Index("ix_personnel_commission_profile_id", "commission_profile_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    age = Column(Integer, nullable=False)
    phone = Column(String(20), nullable=False)
    commission_profile_id = Column(Integer, ForeignKey("commission_profile.id", ondelete="RESTRICT"),
                                   nullable=False)
    bank_name = Column(String(20))
    bank_account_no = Column(String(20))

    commission_profile = relationship("CommissionProfileModel", back_populates="personnel", lazy="raise")
    sales = relationship("SalesModel", back_populates="personnel", lazy="raise",
                         cascade="all, delete-orphan", passive_deletes=True)
