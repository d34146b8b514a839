"""Author/book operations and the reference-list rules between them.

``Author.books`` and ``Book.author`` are independent lists. Linking books to
an author replaces the author's list and leaves the books untouched; deletes
never cascade. Reads populate the counterpart list, dropping ids that no
longer resolve.
"""

import logging
from dataclasses import dataclass, field

from bindery.errors import NotFoundError
from bindery.store import Document, RecordStore

logger = logging.getLogger(__name__)

AUTHORS = "authors"
BOOKS = "books"


async def list_authors(store: RecordStore) -> list[Document]:
    authors = await store.find_all(AUTHORS)
    return await store.populate(authors, "books", BOOKS)


async def list_books(store: RecordStore) -> list[Document]:
    books = await store.find_all(BOOKS)
    return await store.populate(books, "author", AUTHORS)


async def get_author(store: RecordStore, author_id: str) -> Document | None:
    """Return the populated author, or None when the id doesn't resolve."""
    author = await store.find_by_id(AUTHORS, author_id)
    return await store.populate(author, "books", BOOKS)


async def get_book(store: RecordStore, book_id: str) -> Document | None:
    """Return the populated book, or None when the id doesn't resolve."""
    book = await store.find_by_id(BOOKS, book_id)
    return await store.populate(book, "author", AUTHORS)


async def create_author(store: RecordStore, name: str) -> Document:
    return await store.insert(AUTHORS, {"name": name, "books": []})


async def create_book(store: RecordStore, title: str, author_id: str | None) -> Document:
    # The author id is stored as-is; it is not checked against the authors collection.
    return await store.insert(BOOKS, {"title": title, "author": author_id})


async def link_books_to_author(
    store: RecordStore, author_id: str, book_ids: list[str]
) -> Document:
    """Overwrite the author's book list with ``book_ids``.

    The books' own author lists are not updated.
    """
    author = await store.find_by_id(AUTHORS, author_id)
    if author is None:
        logger.info("Link skipped, author %s not found", author_id)
        raise NotFoundError("Author not found")

    updated = await store.update_by_id(AUTHORS, author_id, {"books": list(book_ids)})
    if updated is None:
        # deleted between the lookup and the write
        raise NotFoundError("Author not found")
    return updated


async def update_author(store: RecordStore, author_id: str, name: str) -> Document:
    updated = await store.update_by_id(AUTHORS, author_id, {"name": name})
    if updated is None:
        logger.info("Update skipped, author %s not found", author_id)
        raise NotFoundError("Author not found")
    return updated


async def update_book(store: RecordStore, book_id: str, title: str) -> Document:
    updated = await store.update_by_id(BOOKS, book_id, {"title": title})
    if updated is None:
        logger.info("Update skipped, book %s not found", book_id)
        raise NotFoundError("Book not found")
    return updated


async def delete_author(store: RecordStore, author_id: str) -> bool:
    return await store.delete_by_id(AUTHORS, author_id)


async def delete_book(store: RecordStore, book_id: str) -> bool:
    return await store.delete_by_id(BOOKS, book_id)


@dataclass
class SeedResult:
    authors: list[Document] = field(default_factory=list)
    books: list[Document] = field(default_factory=list)


async def seed_sample_data(store: RecordStore) -> SeedResult:
    """Insert two authors and three books, then link each author to their books."""
    result = SeedResult()

    author1 = await create_author(store, "Author 1")
    author2 = await create_author(store, "Author 2")

    book1 = await create_book(store, "Book 1", author1["id"])
    book2 = await create_book(store, "Book 2", author1["id"])
    book3 = await create_book(store, "Book 3", author2["id"])
    result.books = [book1, book2, book3]

    author1 = await link_books_to_author(store, author1["id"], [book1["id"], book2["id"]])
    author2 = await link_books_to_author(store, author2["id"], [book3["id"]])
    result.authors = [author1, author2]

    logger.info("Seeded %d authors and %d books", len(result.authors), len(result.books))
    return result
