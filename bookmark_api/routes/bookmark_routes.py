from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from bookmark_api.auth.dependencies import Identity, get_current_identity
from bookmark_api.database import get_db
from bookmark_api.schemas.bookmark import BookmarkResponse, CreateBookmarkDto, EditBookmarkDto
from bookmark_api.services.bookmark_service import BookmarkService

router = APIRouter(tags=['bookmarks'])


def get_bookmark_service(db: Session = Depends(get_db)) -> BookmarkService:
    return BookmarkService(db)


@router.get('', response_model=list[BookmarkResponse])
def list_bookmarks(
    identity: Identity = Depends(get_current_identity),
    service: BookmarkService = Depends(get_bookmark_service),
):
    return service.list(identity)


@router.post('', response_model=BookmarkResponse, status_code=status.HTTP_201_CREATED)
def create_bookmark(
    dto: CreateBookmarkDto,
    identity: Identity = Depends(get_current_identity),
    service: BookmarkService = Depends(get_bookmark_service),
):
    return service.create(identity, dto)


@router.get('/{bookmark_id}', response_model=BookmarkResponse)
def get_bookmark(
    bookmark_id: int,
    identity: Identity = Depends(get_current_identity),
    service: BookmarkService = Depends(get_bookmark_service),
):
    return service.get_by_id(identity, bookmark_id)


@router.patch('/{bookmark_id}', response_model=BookmarkResponse)
def edit_bookmark(
    bookmark_id: int,
    dto: EditBookmarkDto,
    identity: Identity = Depends(get_current_identity),
    service: BookmarkService = Depends(get_bookmark_service),
):
    return service.edit(identity, bookmark_id, dto)


@router.delete('/{bookmark_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_bookmark(
    bookmark_id: int,
    identity: Identity = Depends(get_current_identity),
    service: BookmarkService = Depends(get_bookmark_service),
):
    service.delete(identity, bookmark_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
