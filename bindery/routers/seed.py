from fastapi import APIRouter, Depends

from bindery.deps import get_store
from bindery.errors import store_errors
from bindery.schemas.common import ErrorResponse, SeedResponse
from bindery.services import library
from bindery.store import RecordStore

router = APIRouter(tags=["seed"], responses={500: {"model": ErrorResponse}})


@router.post("/api/insert-data", response_model=SeedResponse)
async def insert_sample_data(store: RecordStore = Depends(get_store)):
    with store_errors("Error inserting sample data"):
        seeded = await library.seed_sample_data(store)
    return SeedResponse(message="Sample data inserted", authors=seeded.authors, books=seeded.books)
