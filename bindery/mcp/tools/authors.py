from bindery.mcp.client import BinderyClient


async def list_authors(client: BinderyClient) -> list[dict]:
    return await client.get("/api/authors")


async def get_author(client: BinderyClient, author_id: str) -> dict:
    author = await client.get(f"/api/authors/{author_id}")
    if author is None:
        return {"error": True, "status": 404, "message": "Author not found", "detail": None}
    return author


async def add_author(client: BinderyClient, name: str, book_ids: list[str] | None = None) -> dict:
    author = await client.post("/api/authors", json={"name": name})
    if author.get("error") or not book_ids:
        return author
    linked = await client.put(f"/api/authors/{author['id']}/books", json={"bookIds": book_ids})
    if linked.get("error"):
        return linked
    return linked["author"]


async def rename_author(client: BinderyClient, author_id: str, name: str) -> dict:
    return await client.put(f"/api/authors/{author_id}", json={"name": name})


async def link_books(client: BinderyClient, author_id: str, book_ids: list[str]) -> dict:
    return await client.put(f"/api/authors/{author_id}/books", json={"bookIds": book_ids})


async def remove_author(client: BinderyClient, author_id: str) -> dict:
    return await client.delete(f"/api/authors/{author_id}")
