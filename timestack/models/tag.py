import uuid
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

from timestack.models.project import ProjectTag

if TYPE_CHECKING:
    from timestack.models.project import Project
    from timestack.models.user import User


class Tag(SQLModel, table=True):
    __tablename__ = "tag"
    __table_args__ = {"schema": "core"}

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    workspace_id: uuid.UUID = Field(foreign_key="core.user.workspace_id")
    name: str = Field(max_length=20)
    color: str = Field(max_length=30)

    user: Optional["User"] = Relationship(back_populates="tags")
    projects: List["Project"] = Relationship(back_populates="tags", link_model=ProjectTag)
