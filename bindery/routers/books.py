from fastapi import APIRouter, Depends

from bindery.deps import get_store
from bindery.errors import ApiError, NotFoundError, store_errors
from bindery.schemas.book import BookCreate, BookDetail, BookResponse, BookUpdate
from bindery.schemas.common import ErrorResponse, MessageResponse
from bindery.services import library
from bindery.store import RecordStore

router = APIRouter(
    prefix="/api/books", tags=["books"], responses={500: {"model": ErrorResponse}}
)


@router.get("", response_model=list[BookDetail])
async def list_books(store: RecordStore = Depends(get_store)):
    with store_errors("Error fetching books"):
        return await library.list_books(store)


@router.post("", response_model=BookResponse)
async def create_book(data: BookCreate, store: RecordStore = Depends(get_store)):
    with store_errors("Error creating book"):
        return await library.create_book(store, data.title, data.author_id)


@router.get("/{book_id}", response_model=BookDetail | None)
async def get_book(book_id: str, store: RecordStore = Depends(get_store)):
    with store_errors("Error fetching book"):
        return await library.get_book(store, book_id)


@router.put(
    "/{book_id}", response_model=BookResponse, responses={404: {"model": ErrorResponse}}
)
async def update_book(book_id: str, data: BookUpdate, store: RecordStore = Depends(get_store)):
    with store_errors("Error updating book"):
        try:
            return await library.update_book(store, book_id, data.title)
        except NotFoundError as e:
            raise ApiError(404, str(e)) from e


@router.delete("/{book_id}", response_model=MessageResponse)
async def delete_book(book_id: str, store: RecordStore = Depends(get_store)):
    with store_errors("Error deleting book"):
        await library.delete_book(store, book_id)
    return MessageResponse(message="Book deleted successfully")
