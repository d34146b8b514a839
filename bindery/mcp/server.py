from fastmcp import FastMCP

from bindery.mcp.client import BinderyClient
from bindery.mcp.tools.authors import (
    add_author as _add_author,
    get_author as _get_author,
    link_books as _link_books,
    list_authors as _list_authors,
    remove_author as _remove_author,
    rename_author as _rename_author,
)
from bindery.mcp.tools.books import (
    add_book as _add_book,
    get_book as _get_book,
    list_books as _list_books,
    remove_book as _remove_book,
    retitle_book as _retitle_book,
)


def create_mcp_server(client: BinderyClient) -> FastMCP:
    mcp = FastMCP(
        name="bindery",
        instructions=(
            "Bindery stores authors and books. Records are identified by 24-character "
            "hex ids. An author's book list and a book's author list are maintained "
            "separately: linking books to an author does not change the books."
        ),
    )

    @mcp.tool()
    async def list_authors() -> list[dict]:
        """List every author with their linked books resolved."""
        return await _list_authors(client)

    @mcp.tool()
    async def get_author(author_id: str) -> dict:
        """Get one author with their linked books resolved."""
        return await _get_author(client, author_id=author_id)

    @mcp.tool()
    async def add_author(name: str, book_ids: list[str] | None = None) -> dict:
        """Create an author, optionally linking existing book ids to them."""
        return await _add_author(client, name=name, book_ids=book_ids)

    @mcp.tool()
    async def rename_author(author_id: str, name: str) -> dict:
        """Change an author's name."""
        return await _rename_author(client, author_id=author_id, name=name)

    @mcp.tool()
    async def link_books(author_id: str, book_ids: list[str]) -> dict:
        """Replace an author's book list with the given book ids."""
        return await _link_books(client, author_id=author_id, book_ids=book_ids)

    @mcp.tool()
    async def remove_author(author_id: str) -> dict:
        """Delete an author. Books that reference them are left as they are."""
        return await _remove_author(client, author_id=author_id)

    @mcp.tool()
    async def list_books(title: str | None = None) -> list[dict]:
        """List books with their authors resolved, optionally filtered by title."""
        return await _list_books(client, title=title)

    @mcp.tool()
    async def get_book(book_id: str) -> dict:
        """Get one book with its author resolved."""
        return await _get_book(client, book_id=book_id)

    @mcp.tool()
    async def add_book(title: str, author_id: str | None = None) -> dict:
        """Create a book, optionally naming its author by id."""
        return await _add_book(client, title=title, author_id=author_id)

    @mcp.tool()
    async def retitle_book(book_id: str, title: str) -> dict:
        """Change a book's title."""
        return await _retitle_book(client, book_id=book_id, title=title)

    @mcp.tool()
    async def remove_book(book_id: str) -> dict:
        """Delete a book. Authors that list it are left as they are."""
        return await _remove_book(client, book_id=book_id)

    return mcp
