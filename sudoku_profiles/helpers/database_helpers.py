"""Helpers for database operations."""

import os
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Union

from dotenv import load_dotenv
from loguru import logger
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from sudoku_profiles.errors import InvalidRequestError

load_dotenv()

DEFAULT_MONGO_URI = "mongodb://localhost:27017/"
DEFAULT_DB_NAME = "sudoku-db"
DEFAULT_ACTIVE_GAMES_COL = "UserActiveGames"

_client: Optional[AsyncMongoClient[Any]] = None
_db: Optional[AsyncDatabase[Any]] = None

Document = Mapping[str, Any]
FilterList = Sequence[Mapping[str, Any]]


@dataclass(frozen=True)
class ModelKind:
    """Names the stored resource a gateway call operates on."""

    name: str
    collection: str


USER_ACTIVE_GAMES = ModelKind(
    name="UserActiveGames",
    collection=os.getenv("ACTIVE_GAMES_COLLECTION", DEFAULT_ACTIVE_GAMES_COL),
)


class PersistenceGateway(Protocol):
    """Create/search/update/delete by a list of alternative match clauses."""

    async def create(
        self, docs: Union[Document, Sequence[Document]], model: ModelKind
    ) -> Dict[str, Any]: ...

    async def search_matching_any(
        self, filters: FilterList, model: ModelKind
    ) -> List[Dict[str, Any]]: ...

    async def update_matching_any(
        self, filters: FilterList, patch: Document, model: ModelKind
    ) -> Dict[str, Any]: ...

    async def delete_matching_any(
        self, filters: FilterList, model: ModelKind
    ) -> Dict[str, Any]: ...


def get_db() -> AsyncDatabase[Any]:
    """Return a MongoDB database handle.

    Looks for MONGO_URI and MONGO_DB_NAME in env; falls back to localhost
    defaults. The client connects lazily on first operation.
    """
    global _client, _db
    if _db is not None:
        return _db

    uri = os.getenv("MONGO_URI")
    if not uri:
        uri = DEFAULT_MONGO_URI
        logger.debug(f"MONGO_URI not set in env; defaulting to local db ({uri})")

    _client = AsyncMongoClient(uri, tz_aware=True)
    _db = _client[os.getenv("MONGO_DB_NAME", DEFAULT_DB_NAME)]
    return _db


async def ping_db() -> bool:
    """Return True if the server answers a ping."""
    try:
        await get_db().client.admin.command("ping")
    except Exception as e:
        logger.error(f"ping_db failed: {e}")
        return False
    return True


async def close_db() -> None:
    """Close the cached client, if any."""
    global _client, _db
    if _client is not None:
        await _client.close()
    _client = None
    _db = None


def match_any(filters: FilterList) -> Dict[str, Any]:
    """Combine alternative clauses into one Mongo query."""
    if not filters:
        raise ValueError("at least one filter clause is required")
    if len(filters) == 1:
        return dict(filters[0])
    return {"$or": [dict(f) for f in filters]}


def _as_doc_list(docs: Union[Document, Sequence[Document]]) -> List[Dict[str, Any]]:
    if isinstance(docs, Mapping):
        return [dict(docs)]
    out = [dict(d) for d in docs]
    if not out:
        raise InvalidRequestError("at least one document is required")
    return out


def _public_doc(doc: Dict[str, Any]) -> Dict[str, Any]:
    if "_id" in doc:
        doc["id"] = str(doc.pop("_id"))
    return doc


class MongoGateway:
    """PersistenceGateway backed by a pymongo async database."""

    def __init__(self, db: AsyncDatabase[Any]) -> None:
        self._db = db

    def _collection(self, model: ModelKind) -> AsyncCollection[Any]:
        return self._db[model.collection]

    async def create(
        self, docs: Union[Document, Sequence[Document]], model: ModelKind
    ) -> Dict[str, Any]:
        """Insert one or more documents (copies; the caller's are untouched)."""
        to_insert = _as_doc_list(docs)
        result = await self._collection(model).insert_many(to_insert)
        ids = [str(i) for i in result.inserted_ids]
        logger.debug(f"Inserted {len(ids)} document(s) into '{model.collection}'")
        return {"inserted_count": len(ids), "inserted_ids": ids}

    async def search_matching_any(
        self, filters: FilterList, model: ModelKind
    ) -> List[Dict[str, Any]]:
        """Return every document matching at least one clause."""
        where = match_any(filters)
        logger.debug(f"Searching '{model.collection}' where={where}")
        docs = await self._collection(model).find(where).to_list(None)
        logger.debug(f"Found {len(docs)} documents matching.")
        return [_public_doc(d) for d in docs]

    async def update_matching_any(
        self, filters: FilterList, patch: Document, model: ModelKind
    ) -> Dict[str, Any]:
        """``$set`` the patch on every document matching at least one clause."""
        if not patch:
            raise InvalidRequestError("update patch must not be empty")
        where = match_any(filters)
        logger.debug(f"Updating '{model.collection}' where={where} patch={patch}")
        result = await self._collection(model).update_many(
            where, {"$set": dict(patch)}
        )
        return {
            "matched_count": result.matched_count,
            "modified_count": result.modified_count,
        }

    async def delete_matching_any(
        self, filters: FilterList, model: ModelKind
    ) -> Dict[str, Any]:
        """Delete every document matching at least one clause."""
        where = match_any(filters)
        logger.debug(f"Deleting from '{model.collection}' where={where}")
        result = await self._collection(model).delete_many(where)
        return {"deleted_count": result.deleted_count}
