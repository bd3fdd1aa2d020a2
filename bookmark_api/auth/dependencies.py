import logging
from dataclasses import dataclass

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from bookmark_api.auth import jwt_handler
from bookmark_api.core.config import Settings
from bookmark_api.core.errors import AuthError
from bookmark_api.database import get_db
from bookmark_api.models.user import User

logger = logging.getLogger(__name__)

# auto_error=False so a missing header is reported as 401, not 403
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, passed explicitly into every service call."""

    user_id: int
    email: str


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db),
) -> Identity:
    if credentials is None:
        raise AuthError("Not authenticated")

    try:
        payload = jwt_handler.decode_access_token(settings, credentials.credentials)
    except jwt.ExpiredSignatureError as exc:
        raise AuthError("Token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthError("Invalid token") from exc

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError) as exc:
        raise AuthError("Invalid token subject") from exc

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        logger.info("Token for unknown user id %s rejected", user_id)
        raise AuthError("User not found")
    return Identity(user_id=user.id, email=user.email)
