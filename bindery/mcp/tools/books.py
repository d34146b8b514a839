from bindery.mcp.client import BinderyClient


async def list_books(client: BinderyClient, title: str | None = None) -> list[dict]:
    books = await client.get("/api/books")
    if title:
        needle = title.lower()
        books = [b for b in books if needle in (b.get("title") or "").lower()]
    return books


async def get_book(client: BinderyClient, book_id: str) -> dict:
    book = await client.get(f"/api/books/{book_id}")
    if book is None:
        return {"error": True, "status": 404, "message": "Book not found", "detail": None}
    return book


async def add_book(client: BinderyClient, title: str, author_id: str | None = None) -> dict:
    payload = {"title": title}
    if author_id:
        payload["authorId"] = author_id
    return await client.post("/api/books", json=payload)


async def retitle_book(client: BinderyClient, book_id: str, title: str) -> dict:
    return await client.put(f"/api/books/{book_id}", json={"title": title})


async def remove_book(client: BinderyClient, book_id: str) -> dict:
    return await client.delete(f"/api/books/{book_id}")
