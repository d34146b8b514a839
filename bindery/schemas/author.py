from pydantic import BaseModel, ConfigDict, Field


class AuthorCreate(BaseModel):
    name: str


class AuthorUpdate(BaseModel):
    name: str


class LinkBooksRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    book_ids: list[str] = Field(alias="bookIds")


class AuthorResponse(BaseModel):
    id: str
    name: str | None
    books: list[str] = []


class AuthorDetail(BaseModel):
    id: str
    name: str | None
    books: list["BookResponse"] = []


class LinkBooksResponse(BaseModel):
    message: str
    author: AuthorResponse


from bindery.schemas.book import BookResponse  # noqa: E402

AuthorDetail.model_rebuild()
