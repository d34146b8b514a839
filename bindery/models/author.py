from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from bindery.database import Base


class Author(Base):
    __tablename__ = "authors"

    id: Mapped[str] = mapped_column(String(24), primary_key=True)
    name: Mapped[str | None] = mapped_column(String(300))
    # Book ids, not kept in sync with Book.author
    books: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
