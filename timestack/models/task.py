import uuid
from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from timestack.models.project import Project
    from timestack.models.user import User


class Task(SQLModel, table=True):
    __tablename__ = "task"
    __table_args__ = {"schema": "core"}

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    workspace_id: uuid.UUID = Field(foreign_key="core.user.workspace_id")
    name: str
    is_billable: bool
    project_id: Optional[uuid.UUID] = Field(default=None, foreign_key="core.project.id")

    user: Optional["User"] = Relationship(back_populates="tasks")
    project: Optional["Project"] = Relationship(back_populates="tasks")
