from datetime import datetime, timedelta, timezone

import jwt

from bookmark_api.core.config import Settings


def create_access_token(
    settings: Settings,
    subject: str,
    email: str | None = None,
    expires_minutes: int | None = None,
) -> str:
    expire_minutes = expires_minutes or settings.jwt_expires_minutes
    now = datetime.now(timezone.utc)
    expire = now + timedelta(minutes=expire_minutes)
    payload = {"sub": subject, "exp": expire, "iat": now}
    if email is not None:
        payload["email"] = email
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(settings: Settings, token: str) -> dict:
    """Raises jwt.InvalidTokenError (or a subclass) when the token is unusable."""
    return jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[settings.jwt_algorithm],
        options={"require": ["sub", "exp"]},
    )
