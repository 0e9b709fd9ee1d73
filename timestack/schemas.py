import uuid
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field


# data for user registration
class UserCreate(BaseModel):
    name: str = Field(max_length=255)
    email: EmailStr
    profile_picture: Optional[str] = Field(default=None, max_length=500)


class UserResponse(BaseModel):
    id: uuid.UUID
    name: str
    email: EmailStr
    profile_picture: Optional[str] = None
    workspace_id: uuid.UUID

    class Config:
        from_attributes = True


class ClientCreate(BaseModel):
    name: str = Field(max_length=255)
    currency: str = Field(max_length=10)
    notes: str = Field(default="", max_length=255)
    payment_method: str = Field(max_length=255)
    # at least one address to send invoices to
    emails: List[EmailStr] = Field(min_length=1)
    preference_channel: str = Field(max_length=255)


class ClientResponse(BaseModel):
    id: uuid.UUID
    workspace_id: uuid.UUID
    name: str
    currency: str
    notes: str
    payment_method: str
    emails: List[str]
    preference_channel: str

    class Config:
        from_attributes = True


class ProjectCreate(BaseModel):
    name: str = Field(max_length=255)
    hourly_rate: Optional[float] = None
    client_id: Optional[uuid.UUID] = None


class ProjectResponse(BaseModel):
    id: uuid.UUID
    workspace_id: uuid.UUID
    name: str
    hourly_rate: Optional[float] = None
    client_id: Optional[uuid.UUID] = None

    class Config:
        from_attributes = True


class TaskCreate(BaseModel):
    name: str
    is_billable: bool = False
    project_id: Optional[uuid.UUID] = None


class TaskResponse(BaseModel):
    id: uuid.UUID
    workspace_id: uuid.UUID
    name: str
    is_billable: bool
    project_id: Optional[uuid.UUID] = None

    class Config:
        from_attributes = True


class TagCreate(BaseModel):
    name: str = Field(max_length=20)
    color: str = Field(max_length=30)


class TagResponse(BaseModel):
    id: uuid.UUID
    workspace_id: uuid.UUID
    name: str
    color: str

    class Config:
        from_attributes = True


class HealthResponse(BaseModel):
    status: str
    database: str
    redis: str
