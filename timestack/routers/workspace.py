import uuid
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from timestack.database import get_db
from timestack.schemas import (
    ClientCreate,
    ClientResponse,
    ProjectCreate,
    ProjectResponse,
    TagCreate,
    TagResponse,
)
from timestack.services import workspace as service

router = APIRouter(prefix="/workspaces/{workspace_id}", tags=["Workspace"])


# 1. clients
@router.post("/clients", response_model=ClientResponse, status_code=201)
def create_client(workspace_id: uuid.UUID, client_data: ClientCreate, db: Session = Depends(get_db)):
    return service.create_client(db, workspace_id, client_data)


@router.get("/clients", response_model=List[ClientResponse])
def list_clients(workspace_id: uuid.UUID, db: Session = Depends(get_db)):
    return service.list_clients(db, workspace_id)


# 2. projects
@router.post("/projects", response_model=ProjectResponse, status_code=201)
def create_project(workspace_id: uuid.UUID, project_data: ProjectCreate, db: Session = Depends(get_db)):
    # the client has to live in the same workspace
    return service.create_project(db, workspace_id, project_data)


@router.get("/projects", response_model=List[ProjectResponse])
def list_projects(workspace_id: uuid.UUID, db: Session = Depends(get_db)):
    return service.list_projects(db, workspace_id)


@router.delete("/projects/{project_id}", status_code=204)
def delete_project(workspace_id: uuid.UUID, project_id: uuid.UUID, db: Session = Depends(get_db)):
    service.delete_project(db, workspace_id, project_id)
    return Response(status_code=204)


@router.put("/projects/{project_id}/tags/{tag_id}", response_model=List[TagResponse])
def attach_tag(workspace_id: uuid.UUID, project_id: uuid.UUID, tag_id: uuid.UUID, db: Session = Depends(get_db)):
    project = service.attach_tag(db, workspace_id, project_id, tag_id)
    return list(project.tags)


# 3. tags
@router.post("/tags", response_model=TagResponse, status_code=201)
def create_tag(workspace_id: uuid.UUID, tag_data: TagCreate, db: Session = Depends(get_db)):
    return service.create_tag(db, workspace_id, tag_data)


@router.get("/tags", response_model=List[TagResponse])
def list_tags(workspace_id: uuid.UUID, db: Session = Depends(get_db)):
    return service.list_tags(db, workspace_id)
