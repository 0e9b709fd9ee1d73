import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from timestack.database import get_db
from timestack.schemas import TaskCreate, TaskResponse
from timestack.services import workspace as service

router = APIRouter(prefix="/workspaces/{workspace_id}", tags=["Task"])


@router.post("/tasks", response_model=TaskResponse, status_code=201)
def create_task(workspace_id: uuid.UUID, task_data: TaskCreate, db: Session = Depends(get_db)):
    return service.create_task(db, workspace_id, task_data)


@router.get("/tasks", response_model=List[TaskResponse])
def list_tasks(workspace_id: uuid.UUID, project_id: Optional[uuid.UUID] = None, db: Session = Depends(get_db)):
    return service.list_tasks(db, workspace_id, project_id=project_id)
