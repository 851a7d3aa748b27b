from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field
from shared.core.schemas import CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


# ----------------- Base -----------------
class GuestBase(EmptyStringModel):
    name: str = Field(..., max_length=100)
    phone: str = Field(..., max_length=15)
    email: Optional[EmailStr] = None
    id_proof_type: Optional[str] = None
    id_proof_number: Optional[str] = None
    address: Optional[str] = None


# ----------------- Create -----------------
class GuestCreate(GuestBase):
    pass


# ----------------- Out -----------------
class GuestOut(BaseModel):
    id: int
    name: str
    phone: str
    email: Optional[str] = None
    id_proof_type: Optional[str] = None
    id_proof_number: Optional[str] = None
    address: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


# ----------------- Request -----------------
class GuestRequest(CommonQueryParams):
    pass
