from pydantic import BaseModel, field_validator, validate_email
from typing import Optional, List

class ContactIn(BaseModel):
    """Contact sub-record as sent by clients"""
    type: str
    value: str
    
    @field_validator('type')
    @classmethod
    def validate_type(cls, v):
        if not v.strip():
            raise ValueError('Contact type must not be blank')
        return v

class Contact(BaseModel):
    type: str
    value: str
    
    model_config = {"from_attributes": True}

class EmployeeCreate(BaseModel):
    """Model for creating or fully replacing an employee

    Values are stored exactly as sent; validators only reject.
    """
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    contacts: List[ContactIn] = []
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Name must not be blank')
        return v
    
    @field_validator('email')
    @classmethod
    def validate_email_address(cls, v):
        # Rejects malformed addresses but keeps the client's spelling
        validate_email(v)
        return v

class EmployeeSummary(BaseModel):
    """List projection, contacts excluded"""
    id: int
    name: str
    email: str
    
    model_config = {"from_attributes": True}

class EmployeeDetail(BaseModel):
    """Employee with its contacts"""
    id: int
    name: str
    email: str
    contacts: List[Contact] = []
    
    model_config = {"from_attributes": True}
