# taskflow/api/auth.py

from pydantic import BaseModel
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from taskflow.api.deps import get_current_user_id, get_settings
from taskflow.config import Settings
from taskflow.core import identity
from taskflow.database import get_db


router = APIRouter()


# -------------------------------
# Request / Response Schemas
# -------------------------------

class RegisterRequest(BaseModel):
    email: str | None = None
    username: str | None = None
    password: str | None = None
    confirmPassword: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class UserSummary(BaseModel):
    id: str
    email: str
    username: str


class LoginUser(BaseModel):
    id: str
    email: str


class RegisterResponse(BaseModel):
    message: str
    user: UserSummary


class LoginResponse(BaseModel):
    message: str
    token: str
    user: LoginUser


# -------------------------------
# Endpoints
# -------------------------------

@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(req: RegisterRequest, db: Session = Depends(get_db)):
    user = identity.register(db, req.email, req.username, req.password, req.confirmPassword)
    return {"message": "User created", "user": user}


@router.post("/login", response_model=LoginResponse)
def login(req: LoginRequest, db: Session = Depends(get_db),
          settings: Settings = Depends(get_settings)):
    result = identity.login(db, settings, req.email, req.password)
    return {"message": "Login successful", **result}


@router.get("/me", response_model=UserSummary)
def read_me(current_user: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return identity.get_self(db, current_user)


@router.get("/users", response_model=list[UserSummary])
def list_users(db: Session = Depends(get_db)):
    """
    Debug listing of every registered account, without password hashes.
    """
    return identity.list_users(db)
