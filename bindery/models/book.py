from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from bindery.database import Base


class Book(Base):
    __tablename__ = "books"

    id: Mapped[str] = mapped_column(String(24), primary_key=True)
    title: Mapped[str | None] = mapped_column(String(500))
    # Author ids, not kept in sync with Author.books
    author: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
