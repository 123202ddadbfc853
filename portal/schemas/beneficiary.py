"""
Beneficiary Pydantic schemas for request/response validation.
"""
from pydantic import BaseModel, EmailStr, Field, computed_field, field_validator
from typing import List, Optional
from datetime import date, datetime
from portal.utils.constants import Gender, DisabilityType
from portal.utils.date_utils import calculate_age, today


class BeneficiaryDraft(BaseModel):
    """Registration form submitted by staff, validated once at the boundary."""
    name: str = Field(..., min_length=2, max_length=100)
    date_of_birth: date
    gender: Gender
    disability_type: DisabilityType
    disability_percentage: Optional[int] = Field(None, description="Clamped to 0-100")
    guardian_name: str = Field(..., min_length=2, max_length=100)
    guardian_phone: str = Field(..., min_length=10, max_length=15)
    guardian_email: Optional[EmailStr] = None
    address: str = Field(..., min_length=5, max_length=500)
    city: str = Field(..., min_length=2, max_length=100)
    state: str = Field(..., min_length=2, max_length=100)
    pincode: str = Field(..., min_length=6, max_length=6)
    aadhaar_number: Optional[str] = Field(None, max_length=12)
    udid_number: Optional[str] = Field(None, max_length=50)
    notes: Optional[str] = Field(None, max_length=1000)

    class Config:
        str_strip_whitespace = True

    @field_validator('guardian_email', 'aadhaar_number', 'udid_number', 'notes', mode='before')
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('disability_percentage', mode='before')
    @classmethod
    def clamp_percentage(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return None
            try:
                v = float(v)
            except ValueError:
                return v
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return int(min(max(v, 0), 100))
        return v

    @field_validator('date_of_birth')
    @classmethod
    def not_in_future(cls, v: date) -> date:
        if v > today():
            raise ValueError("Date of birth cannot be in the future")
        return v


class BeneficiaryRecord(BaseModel):
    """Stored beneficiary with derived display fields."""
    id: str
    name: str
    date_of_birth: date
    gender: str
    disability_type: str
    disability_percentage: Optional[int] = None
    guardian_name: str
    guardian_phone: str
    guardian_email: Optional[str] = None
    address: str
    city: str
    state: str
    pincode: str
    aadhaar_number: Optional[str] = None
    udid_number: Optional[str] = None
    notes: Optional[str] = None
    created_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @computed_field
    @property
    def age(self) -> int:
        return calculate_age(self.date_of_birth)


class BeneficiaryListResponse(BaseModel):
    """Response for the beneficiary directory."""
    beneficiaries: List[BeneficiaryRecord]
    total_count: int
    order_by: str
    search: Optional[str] = None
