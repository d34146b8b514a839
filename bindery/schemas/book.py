from pydantic import BaseModel, ConfigDict, Field


class BookCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    author_id: str | None = Field(None, alias="authorId")


class BookUpdate(BaseModel):
    title: str


class BookResponse(BaseModel):
    id: str
    title: str | None
    author: list[str] = []


class BookDetail(BaseModel):
    id: str
    title: str | None
    author: list["AuthorResponse"] = []


from bindery.schemas.author import AuthorResponse  # noqa: E402

BookDetail.model_rebuild()
