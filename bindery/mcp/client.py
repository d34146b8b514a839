from httpx import AsyncClient, Response


class BinderyClient:
    """Thin wrapper around httpx.AsyncClient that turns API responses into
    plain values for MCP tool returns."""

    def __init__(self, http: AsyncClient) -> None:
        self.http = http

    async def get(self, path: str, **kwargs) -> dict | list | None:
        resp = await self.http.get(path, **kwargs)
        return self._handle(resp)

    async def post(self, path: str, **kwargs) -> dict | list | None:
        resp = await self.http.post(path, **kwargs)
        return self._handle(resp)

    async def put(self, path: str, **kwargs) -> dict | list | None:
        resp = await self.http.put(path, **kwargs)
        return self._handle(resp)

    async def delete(self, path: str, **kwargs) -> dict | list | None:
        resp = await self.http.delete(path, **kwargs)
        return self._handle(resp)

    def _handle(self, resp: Response) -> dict | list | None:
        if resp.status_code >= 500:
            raise RuntimeError(f"Server error {resp.status_code}: {resp.text}")
        if resp.status_code >= 400:
            body = resp.json()
            return {
                "error": True,
                "status": resp.status_code,
                "message": body.get("message", resp.text),
                "detail": body.get("error"),
            }
        return resp.json()
