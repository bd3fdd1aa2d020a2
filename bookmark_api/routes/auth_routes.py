from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from bookmark_api.auth.dependencies import get_settings
from bookmark_api.core.config import Settings
from bookmark_api.database import get_db
from bookmark_api.schemas.auth import AuthDto, TokenResponse
from bookmark_api.services.auth_service import AuthService

router = APIRouter(tags=['auth'])


def get_auth_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(db, settings)


@router.post('/signup', response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def signup(dto: AuthDto, service: AuthService = Depends(get_auth_service)):
    return TokenResponse(access_token=service.signup(dto))


@router.post('/signin', response_model=TokenResponse, status_code=status.HTTP_200_OK)
def signin(dto: AuthDto, service: AuthService = Depends(get_auth_service)):
    return TokenResponse(access_token=service.signin(dto))
