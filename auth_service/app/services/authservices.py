import logging

from fastapi import status
from sqlalchemy.orm import Session

from shared.core import auth
from shared.helpers.json_response_helper import error_response
from shared.models.users import Users
from shared.utils.app_status_code import AppStatusCode
from shared.utils.enums import UserRole, UserStatus
from ..schemas import authschemas

logger = logging.getLogger(__name__)


def get_user_by_username(db: Session, username: str):
    return db.query(Users).filter(Users.username == username).first()


def login(db: Session, request: authschemas.LoginRequest) -> authschemas.LoginResponse:
    user = get_user_by_username(db, request.username)

    # Same answer for unknown user and wrong password
    if not user or not user.verify_password(request.password):
        logger.warning("Login attempt failed for username: %s", request.username)
        return error_response(
            message="Invalid credentials",
            status_code=str(AppStatusCode.AUTHENTICATION_CREDENTIALS_INVALID),
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    if user.status != UserStatus.ACTIVE.value:
        return error_response(
            message="User is not active. Access denied",
            status_code=str(AppStatusCode.AUTHENTICATION_USER_INACTIVE),
            http_status=status.HTTP_403_FORBIDDEN
        )

    token = auth.create_access_token({
        "user_id": user.id,
        "username": user.username,
        "role": user.role})

    return authschemas.LoginResponse(access_token=token, role=user.role)


def register(db: Session, request: authschemas.RegisterRequest) -> authschemas.RegisterResponse:
    if get_user_by_username(db, request.username):
        logger.warning("Registration failed for username: %s - already exists", request.username)
        return error_response(
            message="Username already exists",
            status_code=str(AppStatusCode.DUPLICATE_ADD_ERROR),
            http_status=status.HTTP_400_BAD_REQUEST
        )

    if request.role not in {role.value for role in UserRole}:
        return error_response(
            message=f"Invalid role: {request.role}",
            status_code=str(AppStatusCode.INVALID_INPUT),
            http_status=status.HTTP_400_BAD_REQUEST
        )

    user = Users(username=request.username, role=request.role)
    user.set_password(request.password)
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info("User registered successfully: %s", user.username)
    return authschemas.RegisterResponse(message="User created successfully", user_id=user.id)
