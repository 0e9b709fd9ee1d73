import uuid

from fastapi import APIRouter, Depends
from sqlmodel import Session

from timestack.database import get_db
from timestack.schemas import UserCreate, UserResponse
from timestack.services import workspace as service

router = APIRouter(tags=["User"])


# 1. register a user (a fresh workspace comes with it)
@router.post("/users", response_model=UserResponse, status_code=201)
def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    # duplicate emails are rejected by the unique constraint (409)
    return service.create_user(db, user_data)


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(user_id: uuid.UUID, db: Session = Depends(get_db)):
    return service.get_user(db, user_id)
