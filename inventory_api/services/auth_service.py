from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_api.core.exceptions import (
    InvalidCredentialsError,
    StoreError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from inventory_api.core.security import create_access_token, hash_password, verify_password
from inventory_api.db.session import get_db
from inventory_api.models import models, schemas

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session):
        self.db = db

    def register(self, payload: schemas.RegisterRequest) -> models.User:
        existing = self._find_by_email(payload.email)
        if existing:
            raise UserAlreadyExistsError(payload.email)

        user = models.User(email=payload.email, password_hash=hash_password(payload.password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # Lost a race with a concurrent registration of the same email
            self.db.rollback()
            raise UserAlreadyExistsError(payload.email) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError("create user") from exc
        self.db.refresh(user)
        logger.info("Registered user id=%s", user.id)
        return user

    def login(self, payload: schemas.LoginRequest) -> tuple[str, models.User]:
        user = self._find_by_email(payload.email)
        if not user or not verify_password(payload.password, user.password_hash):
            raise InvalidCredentialsError()
        return create_access_token(user.id, user.email), user

    def get_user(self, user_id: int) -> models.User:
        user = self.db.get(models.User, user_id)
        if not user:
            raise UserNotFoundError(user_id)
        return user

    def refresh(self, user_id: int) -> str:
        user = self.get_user(user_id)
        return create_access_token(user.id, user.email)

    def _find_by_email(self, email: str) -> models.User | None:
        try:
            return self.db.query(models.User).filter(models.User.email == email).one_or_none()
        except SQLAlchemyError as exc:
            raise StoreError("fetch user") from exc


def get_auth_service(db: Annotated[Session, Depends(get_db)]) -> AuthService:
    return AuthService(db)
