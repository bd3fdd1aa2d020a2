import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from bookmark_api.auth.dependencies import Identity
from bookmark_api.core.errors import AuthError, DatabaseUnavailableError, InvalidInputError
from bookmark_api.models.user import User
from bookmark_api.schemas.user import EditUserDto

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def get_me(self, identity: Identity) -> User:
        user = self.db.query(User).filter(User.id == identity.user_id).first()
        if user is None:
            raise AuthError("User not found")
        return user

    def edit_me(self, identity: Identity, dto: EditUserDto) -> User:
        user = self.get_me(identity)
        changes = dto.model_dump(exclude_unset=True)

        new_email = changes.get("email")
        if new_email is not None and new_email != user.email:
            taken = (
                self.db.query(User.id)
                .filter(User.email == new_email, User.id != user.id)
                .first()
            )
            if taken is not None:
                raise InvalidInputError("Email already in use")

        for field, value in changes.items():
            setattr(user, field, value)

        try:
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError as exc:
            self.db.rollback()
            raise InvalidInputError("Email already in use") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Profile update failed for user %s", identity.user_id)
            raise DatabaseUnavailableError() from exc

        logger.info("User %s updated %s", user.id, ", ".join(sorted(changes)) or "nothing")
        return user
