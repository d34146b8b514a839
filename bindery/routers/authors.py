from fastapi import APIRouter, Depends

from bindery.deps import get_store
from bindery.errors import ApiError, NotFoundError, store_errors
from bindery.schemas.author import (
    AuthorCreate,
    AuthorDetail,
    AuthorResponse,
    AuthorUpdate,
    LinkBooksRequest,
    LinkBooksResponse,
)
from bindery.schemas.common import ErrorResponse, MessageResponse
from bindery.services import library
from bindery.store import RecordStore

router = APIRouter(
    prefix="/api/authors", tags=["authors"], responses={500: {"model": ErrorResponse}}
)


@router.get("", response_model=list[AuthorDetail])
async def list_authors(store: RecordStore = Depends(get_store)):
    with store_errors("Error fetching authors"):
        return await library.list_authors(store)


@router.post("", response_model=AuthorResponse)
async def create_author(data: AuthorCreate, store: RecordStore = Depends(get_store)):
    with store_errors("Error creating author"):
        return await library.create_author(store, data.name)


@router.put(
    "/{author_id}/books", response_model=LinkBooksResponse, responses={404: {"model": ErrorResponse}}
)
async def link_books(
    author_id: str, data: LinkBooksRequest, store: RecordStore = Depends(get_store)
):
    with store_errors("Error linking books to author"):
        try:
            author = await library.link_books_to_author(store, author_id, data.book_ids)
        except NotFoundError as e:
            raise ApiError(404, str(e)) from e
    return LinkBooksResponse(message="Books linked to author successfully", author=author)


# A missing author is a null 200 here, unlike update and link.
@router.get("/{author_id}", response_model=AuthorDetail | None)
async def get_author(author_id: str, store: RecordStore = Depends(get_store)):
    with store_errors("Error fetching author"):
        return await library.get_author(store, author_id)


@router.put(
    "/{author_id}", response_model=AuthorResponse, responses={404: {"model": ErrorResponse}}
)
async def update_author(
    author_id: str, data: AuthorUpdate, store: RecordStore = Depends(get_store)
):
    with store_errors("Error updating author"):
        try:
            return await library.update_author(store, author_id, data.name)
        except NotFoundError as e:
            raise ApiError(404, str(e)) from e


@router.delete("/{author_id}", response_model=MessageResponse)
async def delete_author(author_id: str, store: RecordStore = Depends(get_store)):
    with store_errors("Error deleting author"):
        await library.delete_author(store, author_id)
    return MessageResponse(message="Author deleted successfully")
