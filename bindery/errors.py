"""Exception types shared by the store, the service layer and the routers."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """The record store could not complete an operation."""


class InvalidIdentifierError(StoreError):
    """A record id (or a referenced id) is not a well-formed identifier."""


class NotFoundError(Exception):
    """The record a write targets does not exist."""


class ApiError(Exception):
    """Rendered by the app as a ``{message, error}`` JSON body."""

    def __init__(self, status_code: int, message: str, error: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error


@contextmanager
def store_errors(message: str) -> Iterator[None]:
    """Turn a StoreError raised inside the block into a 500 ApiError."""
    try:
        yield
    except StoreError as e:
        logger.error("%s: %s", message, e)
        raise ApiError(500, message, str(e)) from e
