"""Shared fixtures: an in-memory stand-in for the Firestore service."""
from __future__ import annotations

import copy
from typing import Any

import pytest

from emotodo.catalog import REQUIRED_EMOTIONS
from emotodo.config import get_settings
from emotodo.errors import StoreConnectionError, WriteError


class InMemoryStore:
    """Mimics ``FirestoreService`` list/set-with-merge on plain dicts."""

    def __init__(self, initial: dict[str, dict[str, dict[str, Any]]] | None = None) -> None:
        self.collections: dict[str, dict[str, dict[str, Any]]] = copy.deepcopy(initial or {})
        self.writes: list[tuple[str, str]] = []
        self.reads = 0
        self.fail_reads_after: int | None = None
        self.fail_write_on: str | None = None
        self.drop_on_write: set[str] = set()

    async def list_documents(self, collection: str) -> list[tuple[str, dict[str, Any]]]:
        if self.fail_reads_after is not None and self.reads >= self.fail_reads_after:
            raise StoreConnectionError(f"could not read collection '{collection}': unavailable")
        self.reads += 1
        docs = self.collections.get(collection, {})
        return [(doc_id, dict(fields)) for doc_id, fields in docs.items()]

    async def set_document(
        self, collection: str, doc_id: str, data: dict[str, Any], merge: bool = True
    ) -> None:
        if doc_id == self.fail_write_on:
            raise WriteError(doc_id, "permission denied")
        self.writes.append((collection, doc_id))
        if doc_id in self.drop_on_write:
            return
        docs = self.collections.setdefault(collection, {})
        if merge and doc_id in docs:
            docs[doc_id].update(data)
        else:
            docs[doc_id] = dict(data)

    def close(self) -> None:
        pass


@pytest.fixture
def make_store():
    """Factory for stores pre-populated with ``{collection: {id: fields}}``."""
    return InMemoryStore


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def seeded_store() -> InMemoryStore:
    return InMemoryStore(
        {"emotions": {e.id: e.to_document() for e in REQUIRED_EMOTIONS}}
    )


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
