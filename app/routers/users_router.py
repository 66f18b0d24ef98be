"""Users API: registration, login and the caller's profile."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.auth.security import create_access_token
from app.db import get_db
from app.models.user import User
from app.routers.utils.dependencies import get_current_user
from app.schemas.user import TokenRead, UserLogin, UserRead, UserRegister, UserUpdate
from app.services.user_service import UserService

router = APIRouter(tags=["users"])


@router.post("/users/register", response_model=UserRead, status_code=201)
def register(data: UserRegister, db: Session = Depends(get_db)) -> UserRead:
    """Create an account. 409 when the email is already registered."""
    user = UserService(db).create_user(data)
    return UserRead.model_validate(user)


@router.post("/users/login", response_model=TokenRead)
def login(data: UserLogin, db: Session = Depends(get_db)) -> TokenRead:
    """Exchange email and password for a bearer token."""
    user = UserService(db).authenticate(data.email, data.password)
    return TokenRead(access_token=create_access_token(str(user.id)))


@router.get("/me", response_model=UserRead)
def get_me(current_user: User = Depends(get_current_user)) -> UserRead:
    return UserRead.model_validate(current_user)


@router.patch("/me", response_model=UserRead)
def update_me(
    data: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserRead:
    """Update email, name and/or password of the caller."""
    user = UserService(db).update_user(current_user, data)
    return UserRead.model_validate(user)
