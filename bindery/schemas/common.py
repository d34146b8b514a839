from pydantic import BaseModel

from bindery.schemas.author import AuthorResponse
from bindery.schemas.book import BookResponse


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    message: str
    error: str | None = None


class SeedResponse(BaseModel):
    message: str
    authors: list[AuthorResponse]
    books: list[BookResponse]
