import uuid
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import event, inspect
from sqlmodel import Field, Relationship, SQLModel

from timestack.exceptions import ImmutableFieldError

if TYPE_CHECKING:
    from timestack.models.client import Client
    from timestack.models.project import Project
    from timestack.models.tag import Tag
    from timestack.models.task import Task

# children are never removed implicitly; the database decides
NO_ORPHAN_HANDLING = {"passive_deletes": "all"}


class User(SQLModel, table=True):
    __tablename__ = "user"
    __table_args__ = {"schema": "core"}

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=320, unique=True)
    profile_picture: Optional[str] = Field(default=None, max_length=500)

    # one workspace per user, generated on insert
    workspace_id: uuid.UUID = Field(default_factory=uuid.uuid4, unique=True, nullable=False)

    clients: List["Client"] = Relationship(back_populates="user", sa_relationship_kwargs=NO_ORPHAN_HANDLING)
    projects: List["Project"] = Relationship(back_populates="user", sa_relationship_kwargs=NO_ORPHAN_HANDLING)
    tasks: List["Task"] = Relationship(back_populates="user", sa_relationship_kwargs=NO_ORPHAN_HANDLING)
    tags: List["Tag"] = Relationship(back_populates="user", sa_relationship_kwargs=NO_ORPHAN_HANDLING)


@event.listens_for(User, "before_update")
def _freeze_workspace_id(mapper, connection, target: User) -> None:
    if inspect(target).attrs.workspace_id.history.has_changes():
        raise ImmutableFieldError(f"workspace_id of user {target.id} cannot change")
