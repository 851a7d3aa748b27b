from datetime import datetime, timedelta, timezone
from fastapi import Depends, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from shared.models.users import Users
from shared.utils.app_status_code import AppStatusCode
from shared.utils.enums import UserRole, UserStatus
from shared.core.config import settings
from shared.helpers.json_response_helper import error_response
from shared.core.schemas import UserToken
from shared.core.database import get_auth_db as get_db

security = HTTPBearer()


def create_access_token(data: dict):
    payload = data.copy()
    expires = datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload['exp'] = expires
    # "sub" must be a string for jose
    if 'user_id' in payload:
        payload['sub'] = str(payload['user_id'])

    return jwt.encode(payload, settings.JWT_SECRET,
                      algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> UserToken:
    """Verify and decode a JWT token."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET,
                             algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return error_response(
            message="Invalid or expired token",
            status_code=str(AppStatusCode.AUTHENTICATION_TOKEN_EXPIRED),
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    if not payload.get("user_id") or not payload.get("username"):
        return error_response(
            message="Invalid token structure",
            status_code=str(AppStatusCode.AUTHENTICATION_TOKEN_INVALID),
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    return UserToken(**payload)


def validate_current_token(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
):
    user_data = verify_token(credentials.credentials)

    user = db.query(Users).filter(Users.id == user_data.user_id).first()

    if not user:
        return error_response(
            message="User not found",
            status_code=str(AppStatusCode.AUTHENTICATION_USER_INVALID),
            http_status=401
        )

    if user.status.lower() != UserStatus.ACTIVE.value:
        return error_response(
            message="User is not active. Access denied",
            status_code=str(AppStatusCode.AUTHENTICATION_USER_INACTIVE),
            http_status=403
        )

    user_data.status = user.status
    user_data.role = user.role
    return user_data


def allow_admin(current_user: UserToken = Depends(validate_current_token)):
    if current_user.role.lower() != UserRole.ADMIN.value:
        return error_response(
            message="Access forbidden: Admins only",
            status_code=str(AppStatusCode.UNAUTHORIZED_ACTION),
            http_status=403
        )

    return current_user
