"""Document-style access to the ``authors`` and ``books`` collections.

Each row is treated as a self-contained document: scalar fields plus JSON
lists of ids pointing into the other collection. ``populate`` resolves those
lists at read time.
"""

import logging
from collections.abc import AsyncIterator, Iterable, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bindery.database import Base
from bindery.errors import InvalidIdentifierError, StoreError
from bindery.id import is_valid_id, new_id, normalize_id
from bindery.models import Author, Book

logger = logging.getLogger(__name__)

Document = dict[str, Any]


@dataclass(frozen=True)
class Collection:
    name: str
    model: type[Base]
    fields: tuple[str, ...]
    references: tuple[str, ...] = ()


COLLECTIONS: dict[str, Collection] = {
    "authors": Collection("authors", Author, fields=("name", "books"), references=("books",)),
    "books": Collection("books", Book, fields=("title", "author"), references=("author",)),
}


def _collection(name: str) -> Collection:
    try:
        return COLLECTIONS[name]
    except KeyError:
        raise StoreError(f"Unknown collection: {name}") from None


def _check_id(collection: Collection, record_id: str) -> str:
    if not is_valid_id(record_id):
        raise InvalidIdentifierError(
            f"Invalid identifier {record_id!r} for collection {collection.name}"
        )
    return normalize_id(record_id)


def _to_document(collection: Collection, row: Base) -> Document:
    doc: Document = {"id": row.id}
    for name in collection.fields:
        value = getattr(row, name)
        doc[name] = list(value or []) if name in collection.references else value
    return doc


def _clean_fields(collection: Collection, fields: dict[str, Any]) -> dict[str, Any]:
    """Drop unknown keys and normalize reference lists."""
    cleaned = {}
    for name, value in fields.items():
        if name not in collection.fields:
            continue
        if name in collection.references:
            if value is None:
                value = []
            elif isinstance(value, str):
                value = [value]
            for ref in value:
                if not is_valid_id(ref):
                    raise InvalidIdentifierError(
                        f"Invalid identifier {ref!r} in {collection.name}.{name}"
                    )
            value = [normalize_id(ref) for ref in value]
        cleaned[name] = value
    return cleaned


class RecordStore:
    """Find/insert/update/delete/populate over named collections.

    Every write is committed before the call returns. Driver errors surface as
    StoreError with the driver's message.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def _driver(self) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreError(str(e)) from e

    async def find_all(self, collection: str) -> list[Document]:
        coll = _collection(collection)
        async with self._driver():
            result = await self.session.execute(select(coll.model).order_by(coll.model.id))
            return [_to_document(coll, row) for row in result.scalars().all()]

    async def find_by_id(self, collection: str, record_id: str) -> Document | None:
        coll = _collection(collection)
        record_id = _check_id(coll, record_id)
        async with self._driver():
            row = await self.session.get(coll.model, record_id)
            return _to_document(coll, row) if row is not None else None

    async def insert(self, collection: str, fields: dict[str, Any]) -> Document:
        coll = _collection(collection)
        values = {name: [] for name in coll.references}
        values.update(_clean_fields(coll, fields))
        row = coll.model(id=new_id(), **values)
        async with self._driver():
            self.session.add(row)
            await self.session.commit()
        logger.debug("Inserted %s/%s", coll.name, row.id)
        return _to_document(coll, row)

    async def update_by_id(
        self, collection: str, record_id: str, fields: dict[str, Any]
    ) -> Document | None:
        coll = _collection(collection)
        record_id = _check_id(coll, record_id)
        values = _clean_fields(coll, fields)
        async with self._driver():
            row = await self.session.get(coll.model, record_id)
            if row is None:
                return None
            for name, value in values.items():
                setattr(row, name, value)
            await self.session.commit()
        logger.debug("Updated %s/%s fields=%s", coll.name, record_id, sorted(values))
        return _to_document(coll, row)

    async def delete_by_id(self, collection: str, record_id: str) -> bool:
        coll = _collection(collection)
        record_id = _check_id(coll, record_id)
        async with self._driver():
            row = await self.session.get(coll.model, record_id)
            if row is not None:
                await self.session.delete(row)
                await self.session.commit()
        logger.debug("Deleted %s/%s", coll.name, record_id)
        return True

    async def _find_many(self, collection: str, ids: Iterable[str]) -> list[Document]:
        coll = _collection(collection)
        wanted = list({normalize_id(i) for i in ids if is_valid_id(i)})
        if not wanted:
            return []
        async with self._driver():
            result = await self.session.execute(select(coll.model).where(coll.model.id.in_(wanted)))
            return [_to_document(coll, row) for row in result.scalars().all()]

    async def populate(
        self,
        records: Document | Sequence[Document] | None,
        field: str,
        target: str,
    ) -> Document | list[Document] | None:
        """Replace the ids in ``field`` with the referenced ``target`` records.

        Ids that no longer resolve are dropped from the list. Accepts a single
        document or a sequence and returns the same shape.
        """
        if records is None:
            return None
        single = isinstance(records, dict)
        docs = [records] if single else list(records)

        refs = [ref for doc in docs for ref in doc.get(field) or []]
        resolved = {doc["id"]: doc for doc in await self._find_many(target, refs)}

        populated = [
            {**doc, field: [resolved[ref] for ref in doc.get(field) or [] if ref in resolved]}
            for doc in docs
        ]
        return populated[0] if single else populated
