from sqlalchemy import Column, Integer, DateTime, DECIMAL, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship

from commission_hub.models.base import Base


class SalesModel(Base):
    __tablename__ = "sales"
    # report_date not in the future is enforced by SalesService
    __table_args__ = (
        CheckConstraint("sales_amount >= 0", name="ck_sales_amount"),
        Index("ix_sales_personnel_id", "personnel_id"),
        Index("ix_sales_report_date", "report_date"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    personnel_id = Column(Integer, ForeignKey("personnel.id", ondelete="CASCADE"), nullable=False)
    report_date = Column(DateTime, nullable=False)
    sales_amount = Column(DECIMAL(10, 2), nullable=False)

    personnel = relationship("PersonnelModel", back_populates="sales", lazy="raise")
