from typing import Optional

from commission_hub.schemas.common import CamelModel


class PersonnelBase(CamelModel):
    name: str
    age: int
    phone: str
    commission_profile_id: int
    bank_name: Optional[str] = None
    bank_account_no: Optional[str] = None


class PersonnelCreate(PersonnelBase):
    pass


class PersonnelUpdate(PersonnelBase):
    pass


class PersonnelOut(PersonnelBase):
    id: int
