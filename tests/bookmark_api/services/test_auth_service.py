import pytest

from bookmark_api.auth import jwt_handler
from bookmark_api.core.errors import AuthError, InvalidInputError
from bookmark_api.models.user import User
from bookmark_api.schemas.auth import AuthDto
from bookmark_api.services.auth_service import AuthService


def test_signup_persists_user_with_hashed_password(db_session, settings) -> None:
    AuthService(db_session, settings).signup(AuthDto(email='vlad@gmail.com', password='123'))

    stored = db_session.query(User).filter(User.email == 'vlad@gmail.com').one()
    assert stored.hashed_password != '123'
    assert stored.created_at is not None


def test_signup_rejects_taken_email(db_session, settings) -> None:
    service = AuthService(db_session, settings)
    service.signup(AuthDto(email='vlad@gmail.com', password='123'))

    with pytest.raises(InvalidInputError) as exception_info:
        service.signup(AuthDto(email='vlad@gmail.com', password='456'))

    assert exception_info.value.status_code == 400
    assert exception_info.value.detail == 'Credentials taken'
    assert db_session.query(User).count() == 1


def test_signin_returns_token_for_user(db_session, settings) -> None:
    service = AuthService(db_session, settings)
    service.signup(AuthDto(email='vlad@gmail.com', password='123'))

    token = service.signin(AuthDto(email='vlad@gmail.com', password='123'))

    payload = jwt_handler.decode_access_token(settings, token)
    stored = db_session.query(User).filter(User.email == 'vlad@gmail.com').one()
    assert payload['sub'] == str(stored.id)
    assert payload['email'] == 'vlad@gmail.com'


def test_signin_rejects_wrong_password(db_session, settings) -> None:
    service = AuthService(db_session, settings)
    service.signup(AuthDto(email='vlad@gmail.com', password='123'))

    with pytest.raises(AuthError) as exception_info:
        service.signin(AuthDto(email='vlad@gmail.com', password='wrong'))

    assert exception_info.value.status_code == 401
    assert exception_info.value.detail == 'Credentials incorrect'


def test_signin_rejects_unknown_email(db_session, settings) -> None:
    with pytest.raises(AuthError):
        AuthService(db_session, settings).signin(AuthDto(email='nobody@gmail.com', password='123'))
