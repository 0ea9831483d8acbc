from typing import Annotated

from fastapi import APIRouter, Depends, Header, HTTPException

from inventory_api import metrics
from inventory_api.core.audit import log_audit_event, log_failure
from inventory_api.core.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from inventory_api.core.security import TokenExpiredError, TokenValidationError, decode_token
from inventory_api.models import schemas
from inventory_api.services.auth_service import AuthService, get_auth_service

router = APIRouter()

AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


def get_current_user_id(authorization: str = Header(None)) -> int:
    if not authorization or not authorization.lower().startswith("bearer "):
        log_failure("auth.token.parse", user_id=None, error="missing_token")
        raise HTTPException(status_code=401, detail="Missing token")
    token = authorization.split(" ", 1)[1].strip()
    if not token:
        log_failure("auth.token.parse", user_id=None, error="missing_token")
        raise HTTPException(status_code=401, detail="Missing token")
    try:
        payload = decode_token(token)
        return int(payload["sub"])
    except TokenExpiredError as exc:
        log_failure("auth.token.expired", user_id=None, error="expired")
        raise HTTPException(status_code=401, detail="Token expired") from exc
    except (TokenValidationError, KeyError, ValueError) as exc:
        log_failure("auth.token.invalid", user_id=None, error="invalid")
        raise HTTPException(status_code=401, detail="Invalid token") from exc


CurrentUserDep = Annotated[int, Depends(get_current_user_id)]


@router.post("/register", response_model=schemas.RegisterOut, status_code=201)
def register(payload: schemas.RegisterRequest, svc: AuthServiceDep):
    """Create a user account."""
    try:
        user = svc.register(payload)
    except UserAlreadyExistsError:
        log_failure("auth.register", user_id=None, error="duplicate_email")
        raise
    metrics.user_registered()
    log_audit_event("auth.register", user_id=user.id)
    return schemas.RegisterOut(user=schemas.UserOut.model_validate(user))


@router.post("/login", response_model=schemas.LoginOut)
def login(payload: schemas.LoginRequest, svc: AuthServiceDep):
    """Exchange email and password for a bearer token."""
    try:
        token, user = svc.login(payload)
    except InvalidCredentialsError:
        metrics.login_failed()
        log_failure("auth.login", user_id=None, error="invalid_credentials")
        raise
    metrics.login_succeeded()
    log_audit_event("auth.login", user_id=user.id)
    return schemas.LoginOut(token=token, user=schemas.UserOut.model_validate(user))


@router.get("/profile", response_model=schemas.ProfileOut)
def profile(current_user_id: CurrentUserDep, svc: AuthServiceDep):
    user = svc.get_user(current_user_id)
    return schemas.ProfileOut(user=schemas.UserOut.model_validate(user))


@router.post("/refresh", response_model=schemas.TokenRefreshOut)
def refresh_token(current_user_id: CurrentUserDep, svc: AuthServiceDep):
    token = svc.refresh(current_user_id)
    log_audit_event("auth.refresh", user_id=current_user_id)
    return schemas.TokenRefreshOut(token=token)
