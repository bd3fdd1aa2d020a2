from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bookmark_api.auth.dependencies import Identity, get_current_identity
from bookmark_api.database import get_db
from bookmark_api.schemas.user import EditUserDto, UserResponse
from bookmark_api.services.user_service import UserService

router = APIRouter(tags=['users'])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


@router.get('/me', response_model=UserResponse)
def get_me(
    identity: Identity = Depends(get_current_identity),
    service: UserService = Depends(get_user_service),
):
    return service.get_me(identity)


@router.patch('', response_model=UserResponse)
def edit_me(
    dto: EditUserDto,
    identity: Identity = Depends(get_current_identity),
    service: UserService = Depends(get_user_service),
):
    return service.edit_me(identity, dto)
