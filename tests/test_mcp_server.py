from unittest.mock import AsyncMock, MagicMock, patch

import pytest

import bindery.mcp.__main__ as entry
from bindery.config import LOG_LEVEL
from bindery.mcp.client import BinderyClient
from bindery.mcp.server import create_mcp_server
from bindery.services import library


def test_mcp_server_name(client):
    mcp = create_mcp_server(BinderyClient(client))
    assert mcp.name == "bindery"


def test_main_configures_logging_and_runs_stdio():
    server = MagicMock()
    with (
        patch.object(entry, "setup_logging") as setup_logging,
        patch.object(entry, "prepare_database", MagicMock()),
        patch.object(entry.asyncio, "run") as run,
        patch.object(entry, "create_client", MagicMock()),
        patch.object(entry, "create_mcp_server", return_value=server),
    ):
        entry.main()

    setup_logging.assert_called_once_with(LOG_LEVEL)
    run.assert_called_once()
    server.run.assert_called_once_with(transport="stdio")


@pytest.mark.asyncio
async def test_entry_client_reports_unhandled_errors(app):
    bc = entry.create_client(app)
    with patch.object(library, "list_authors", AsyncMock(side_effect=RuntimeError("boom"))):
        with pytest.raises(RuntimeError, match="Internal server error"):
            await bc.get("/api/authors")
    await bc.http.aclose()
