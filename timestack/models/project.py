import uuid
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

from timestack.models.user import NO_ORPHAN_HANDLING

if TYPE_CHECKING:
    from timestack.models.client import Client
    from timestack.models.tag import Tag
    from timestack.models.task import Task
    from timestack.models.user import User


class ProjectTag(SQLModel, table=True):
    __tablename__ = "project_tag"
    __table_args__ = {"schema": "core"}

    # join rows go away with their project; tags are never cascaded
    project_id: uuid.UUID = Field(foreign_key="core.project.id", primary_key=True, index=True, ondelete="CASCADE")
    tag_id: uuid.UUID = Field(foreign_key="core.tag.id", primary_key=True, index=True)


class Project(SQLModel, table=True):
    __tablename__ = "project"
    __table_args__ = {"schema": "core"}

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    workspace_id: uuid.UUID = Field(foreign_key="core.user.workspace_id")
    name: str = Field(max_length=255)
    hourly_rate: Optional[float] = None
    client_id: Optional[uuid.UUID] = Field(default=None, foreign_key="core.client.id")

    user: Optional["User"] = Relationship(back_populates="projects")
    client: Optional["Client"] = Relationship(back_populates="projects")
    tasks: List["Task"] = Relationship(back_populates="project", sa_relationship_kwargs=NO_ORPHAN_HANDLING)
    tags: List["Tag"] = Relationship(back_populates="projects", link_model=ProjectTag)
