"""Workspace-scoped reads and writes.

Every child row carries the ``workspace_id`` of its owner. The foreign keys
only guarantee that the workspace exists; the checks here make sure a project
points at a client of the same workspace, a task at a project of the same
workspace, and so on.
"""

import logging
import uuid
from typing import List, Optional

from sqlmodel import Session, select

from timestack.exceptions import RecordNotFoundError, WorkspaceMismatchError, WorkspaceNotFoundError
from timestack.models import Client, Project, Tag, Task, User
from timestack.schemas import ClientCreate, ProjectCreate, TagCreate, TaskCreate, UserCreate

logger = logging.getLogger(__name__)


def create_user(db: Session, data: UserCreate) -> User:
    user = User(name=data.name, email=data.email, profile_picture=data.profile_picture)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Created user %s with workspace %s", user.id, user.workspace_id)
    return user


def get_user(db: Session, user_id: uuid.UUID) -> User:
    user = db.get(User, user_id)
    if not user:
        raise RecordNotFoundError("user", user_id)
    return user


def get_workspace_owner(db: Session, workspace_id: uuid.UUID) -> User:
    owner = db.exec(select(User).where(User.workspace_id == workspace_id)).first()
    if not owner:
        raise WorkspaceNotFoundError(workspace_id)
    return owner


def _scoped(db: Session, model, record_id: uuid.UUID, workspace_id: uuid.UUID, kind: str):
    record = db.get(model, record_id)
    if not record:
        raise RecordNotFoundError(kind, record_id)
    if record.workspace_id != workspace_id:
        raise WorkspaceMismatchError(kind, record_id, workspace_id)
    return record


# --- clients ---
def create_client(db: Session, workspace_id: uuid.UUID, data: ClientCreate) -> Client:
    get_workspace_owner(db, workspace_id)

    client = Client(workspace_id=workspace_id, **data.model_dump(mode="json"))
    db.add(client)
    db.commit()
    db.refresh(client)
    return client


def list_clients(db: Session, workspace_id: uuid.UUID) -> List[Client]:
    get_workspace_owner(db, workspace_id)
    return list(db.exec(select(Client).where(Client.workspace_id == workspace_id)).all())


# --- projects ---
def create_project(db: Session, workspace_id: uuid.UUID, data: ProjectCreate) -> Project:
    get_workspace_owner(db, workspace_id)
    if data.client_id is not None:
        _scoped(db, Client, data.client_id, workspace_id, "client")

    project = Project(
        workspace_id=workspace_id,
        name=data.name,
        hourly_rate=data.hourly_rate,
        client_id=data.client_id,
    )
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


def list_projects(db: Session, workspace_id: uuid.UUID) -> List[Project]:
    get_workspace_owner(db, workspace_id)
    return list(db.exec(select(Project).where(Project.workspace_id == workspace_id)).all())


def get_project(db: Session, workspace_id: uuid.UUID, project_id: uuid.UUID) -> Project:
    return _scoped(db, Project, project_id, workspace_id, "project")


def delete_project(db: Session, workspace_id: uuid.UUID, project_id: uuid.UUID) -> None:
    """Delete a project. Its tag links go with it, tags and tasks do not."""
    project = get_project(db, workspace_id, project_id)
    db.delete(project)
    db.commit()
    logger.info("Deleted project %s from workspace %s", project_id, workspace_id)


def attach_tag(db: Session, workspace_id: uuid.UUID, project_id: uuid.UUID, tag_id: uuid.UUID) -> Project:
    project = get_project(db, workspace_id, project_id)
    tag = _scoped(db, Tag, tag_id, workspace_id, "tag")

    if tag not in project.tags:
        project.tags.append(tag)
        db.add(project)
        db.commit()
        db.refresh(project)
    return project


# --- tasks ---
def create_task(db: Session, workspace_id: uuid.UUID, data: TaskCreate) -> Task:
    get_workspace_owner(db, workspace_id)
    if data.project_id is not None:
        get_project(db, workspace_id, data.project_id)

    task = Task(
        workspace_id=workspace_id,
        name=data.name,
        is_billable=data.is_billable,
        project_id=data.project_id,
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def list_tasks(db: Session, workspace_id: uuid.UUID, project_id: Optional[uuid.UUID] = None) -> List[Task]:
    get_workspace_owner(db, workspace_id)
    statement = select(Task).where(Task.workspace_id == workspace_id)
    if project_id is not None:
        statement = statement.where(Task.project_id == project_id)
    return list(db.exec(statement).all())


# --- tags ---
def create_tag(db: Session, workspace_id: uuid.UUID, data: TagCreate) -> Tag:
    get_workspace_owner(db, workspace_id)

    tag = Tag(workspace_id=workspace_id, name=data.name, color=data.color)
    db.add(tag)
    db.commit()
    db.refresh(tag)
    return tag


def list_tags(db: Session, workspace_id: uuid.UUID) -> List[Tag]:
    get_workspace_owner(db, workspace_id)
    return list(db.exec(select(Tag).where(Tag.workspace_id == workspace_id)).all())
