import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from bookmark_api.auth import jwt_handler
from bookmark_api.auth.passwords import hash_password, verify_password
from bookmark_api.core.config import Settings
from bookmark_api.core.errors import AuthError, DatabaseUnavailableError, InvalidInputError
from bookmark_api.models.user import User
from bookmark_api.schemas.auth import AuthDto

logger = logging.getLogger(__name__)


class AuthService:
    """Creates accounts and exchanges credentials for access tokens."""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings

    def signup(self, dto: AuthDto) -> str:
        email = str(dto.email)
        if self.db.query(User.id).filter(User.email == email).first() is not None:
            raise InvalidInputError("Credentials taken")

        user = User(email=email, hashed_password=hash_password(dto.password))
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError as exc:
            # lost a race with a concurrent signup for the same email
            self.db.rollback()
            raise InvalidInputError("Credentials taken") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Signup failed for %s", email)
            raise DatabaseUnavailableError() from exc

        logger.info("User %s signed up", user.id)
        return self.sign_token(user)

    def signin(self, dto: AuthDto) -> str:
        email = str(dto.email)
        user = self.db.query(User).filter(User.email == email).first()
        if user is None or not verify_password(dto.password, user.hashed_password):
            logger.warning("Failed signin for %s", email)
            raise AuthError("Credentials incorrect")
        return self.sign_token(user)

    def sign_token(self, user: User) -> str:
        return jwt_handler.create_access_token(self.settings, subject=str(user.id), email=user.email)
