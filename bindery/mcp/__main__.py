import asyncio

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from bindery.app import create_app
from bindery.config import LOG_LEVEL
from bindery.database import engine, init_db
from bindery.logging_config import setup_logging
from bindery.mcp.client import BinderyClient
from bindery.mcp.server import create_mcp_server


async def prepare_database():
    """Create tables before serving. ASGITransport doesn't run the app lifespan."""
    await init_db()
    # pooled connections belong to this loop, not the one the server runs on
    await engine.dispose()


def create_client(app: FastAPI | None = None) -> BinderyClient:
    app = app or create_app()
    # unhandled errors come back as the 500 body instead of raising here
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    http = AsyncClient(transport=transport, base_url="http://localhost")
    return BinderyClient(http)


def main():
    setup_logging(LOG_LEVEL)
    asyncio.run(prepare_database())

    mcp = create_mcp_server(create_client())
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
