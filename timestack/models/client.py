import uuid
from typing import TYPE_CHECKING, List, Optional

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql
from sqlmodel import Column, Field, Relationship, SQLModel

from timestack.models.user import NO_ORPHAN_HANDLING

if TYPE_CHECKING:
    from timestack.models.project import Project
    from timestack.models.user import User

# varchar(320)[] on PostgreSQL, JSON elsewhere
EmailList = sa.JSON().with_variant(postgresql.ARRAY(sa.String(320)), "postgresql")


class Client(SQLModel, table=True):
    __tablename__ = "client"
    __table_args__ = {"schema": "core"}

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    workspace_id: uuid.UUID = Field(foreign_key="core.user.workspace_id")

    name: str = Field(max_length=255)
    currency: str = Field(max_length=10)
    notes: str = Field(max_length=255)
    payment_method: str = Field(max_length=255)
    emails: List[str] = Field(sa_column=Column(EmailList, nullable=False))
    preference_channel: str = Field(max_length=255)

    user: Optional["User"] = Relationship(back_populates="clients")
    projects: List["Project"] = Relationship(back_populates="client", sa_relationship_kwargs=NO_ORPHAN_HANDLING)
