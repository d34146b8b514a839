"""Service-level tests for the author/book relationship rules."""

import pytest

from bindery.errors import NotFoundError
from bindery.id import new_id
from bindery.services import library


@pytest.mark.asyncio
async def test_create_author_starts_with_no_books(store):
    for name in ["Ada", "", "Ünïcode name", "x" * 200]:
        author = await library.create_author(store, name)
        assert author["name"] == name
        assert author["books"] == []


@pytest.mark.asyncio
async def test_create_book_sets_single_author(store):
    ada = await library.create_author(store, "Ada")
    book = await library.create_book(store, "Notes", ada["id"])
    assert book["author"] == [ada["id"]]

    fetched = await library.get_book(store, book["id"])
    assert fetched["author"] == [ada]


@pytest.mark.asyncio
async def test_link_replaces_not_appends(store):
    ada = await library.create_author(store, "Ada")
    b1 = await library.create_book(store, "B1", None)
    b2 = await library.create_book(store, "B2", None)
    b3 = await library.create_book(store, "B3", None)

    await library.link_books_to_author(store, ada["id"], [b1["id"]])
    linked = await library.link_books_to_author(store, ada["id"], [b2["id"], b3["id"]])
    assert linked["books"] == [b2["id"], b3["id"]]

    fetched = await library.get_author(store, ada["id"])
    assert [b["title"] for b in fetched["books"]] == ["B2", "B3"]


@pytest.mark.asyncio
async def test_link_accepts_unknown_book_ids(store):
    ada = await library.create_author(store, "Ada")
    missing = new_id()
    linked = await library.link_books_to_author(store, ada["id"], [missing, missing])
    assert linked["books"] == [missing, missing]


@pytest.mark.asyncio
async def test_link_missing_author_writes_nothing(store):
    with pytest.raises(NotFoundError):
        await library.link_books_to_author(store, new_id(), [new_id()])
    assert await library.list_authors(store) == []


@pytest.mark.asyncio
async def test_update_missing_records(store):
    with pytest.raises(NotFoundError, match="Author not found"):
        await library.update_author(store, new_id(), "Nobody")
    with pytest.raises(NotFoundError, match="Book not found"):
        await library.update_book(store, new_id(), "Nothing")


@pytest.mark.asyncio
async def test_get_missing_records_return_none(store):
    assert await library.get_author(store, new_id()) is None
    assert await library.get_book(store, new_id()) is None


@pytest.mark.asyncio
async def test_delete_is_idempotent(store):
    ada = await library.create_author(store, "Ada")
    assert await library.delete_author(store, ada["id"]) is True
    assert await library.delete_author(store, ada["id"]) is True
    assert await library.delete_book(store, new_id()) is True


@pytest.mark.asyncio
async def test_seed_sample_data(store):
    seeded = await library.seed_sample_data(store)
    assert len(seeded.authors) == 2
    assert len(seeded.books) == 3
    author1, author2 = seeded.authors
    assert author1["books"] == [b["id"] for b in seeded.books[:2]]
    assert author2["books"] == [seeded.books[2]["id"]]
    assert seeded.books[2]["author"] == [author2["id"]]


@pytest.mark.asyncio
async def test_update_missing_records_are_logged(store, caplog):
    missing = new_id()
    with caplog.at_level("INFO", logger="bindery.services.library"):
        with pytest.raises(NotFoundError):
            await library.update_author(store, missing, "Nobody")
        with pytest.raises(NotFoundError):
            await library.update_book(store, missing, "Nothing")
    messages = [r.getMessage() for r in caplog.records]
    assert f"Update skipped, author {missing} not found" in messages
    assert f"Update skipped, book {missing} not found" in messages
