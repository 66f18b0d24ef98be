"""User registration, credential checks and profile updates."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session as DBSession

from app.auth.security import get_password_hash, verify_password
from app.exceptions import AuthenticationError, ConflictError
from app.models.user import User
from app.schemas.user import UserRegister, UserUpdate


class UserService:
    def __init__(self, db: DBSession) -> None:
        self.db = db

    def get_user(self, user_id: UUID) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email.lower()).first()

    def create_user(self, data: UserRegister) -> User:
        """Register a user. Raises ConflictError when the email is taken."""
        if self.get_user_by_email(data.email) is not None:
            raise ConflictError("The email is already registered")
        user = User(
            email=data.email.lower(),
            name=data.name,
            password_hash=get_password_hash(data.password),
        )
        self.db.add(user)
        self._commit_unique()
        self.db.refresh(user)
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Return the user for valid credentials; raise AuthenticationError otherwise."""
        user = self.get_user_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid credentials")
        return user

    def update_user(self, user: User, data: UserUpdate) -> User:
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        if "email" in update_data:
            email = update_data["email"].lower()
            existing = self.get_user_by_email(email)
            if existing is not None and existing.id != user.id:
                raise ConflictError("E-mail already in use")
            user.email = email
        if "name" in update_data:
            user.name = update_data["name"]
        if "password" in update_data:
            user.password_hash = get_password_hash(update_data["password"])
        self._commit_unique()
        self.db.refresh(user)
        return user

    def _commit_unique(self) -> None:
        # Concurrent registrations can still race past the lookup above.
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError("E-mail already in use") from e
