"""Firestore async document service.

Provides a thin wrapper around ``google.cloud.firestore.AsyncClient`` with
the two operations the seeder needs (stream a collection, set-with-merge a
document) and translates Google client errors into the seeder's own
exception types so callers never have to import ``google.api_core``.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions
from google.auth.credentials import AnonymousCredentials
from google.cloud import firestore

from emotodo.config import Settings
from emotodo.errors import StoreConnectionError, WriteError

logger = logging.getLogger(__name__)

# Client errors that mean "the backend could not be reached or refused us".
_CONNECTION_ERRORS = (
    api_exceptions.GoogleAPICallError,
    api_exceptions.RetryError,
    auth_exceptions.GoogleAuthError,
)


class FirestoreService:
    """Async Firestore operations for a single project.

    Parameters
    ----------
    client:
        A ``google.cloud.firestore.AsyncClient``, usually built by
        :meth:`connect` from the seeder settings.
    """

    def __init__(self, client: firestore.AsyncClient) -> None:
        self._client = client

    @classmethod
    def connect(cls, settings: Settings) -> FirestoreService:
        """Build a client for ``settings.PROJECT_ID``.

        When an emulator host is configured the client talks to it with
        anonymous credentials; otherwise Application Default Credentials are
        resolved, which fails here if none are available.
        """
        kwargs: dict[str, Any] = {"project": settings.PROJECT_ID}
        if settings.uses_emulator:
            # The Google client only honours the emulator through the env var
            os.environ["FIRESTORE_EMULATOR_HOST"] = settings.EMULATOR_HOST
            kwargs["credentials"] = AnonymousCredentials()

        try:
            client = firestore.AsyncClient(**kwargs)
        except auth_exceptions.GoogleAuthError as exc:
            raise StoreConnectionError(
                f"could not resolve credentials for project '{settings.PROJECT_ID}': {exc}"
            ) from exc

        logger.info(
            "Connected to Firestore project %s%s",
            settings.PROJECT_ID,
            f" (emulator {settings.EMULATOR_HOST})" if settings.uses_emulator else "",
        )
        return cls(client)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def list_documents(self, collection: str) -> list[tuple[str, dict[str, Any]]]:
        """Return ``(id, fields)`` for every document in *collection*.

        An empty collection yields an empty list.
        """
        try:
            docs = [
                (snapshot.id, snapshot.to_dict() or {})
                async for snapshot in self._client.collection(collection).stream()
            ]
        except _CONNECTION_ERRORS as exc:
            raise StoreConnectionError(
                f"could not read collection '{collection}': {exc}"
            ) from exc

        logger.debug("Listed %d docs from %s", len(docs), collection)
        return docs

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def set_document(
        self,
        collection: str,
        doc_id: str,
        data: dict[str, Any],
        merge: bool = True,
    ) -> None:
        """Write *data* to ``collection/doc_id``.

        With ``merge=True`` fields already on the document but absent from
        *data* are kept; fields in *data* overwrite.
        """
        try:
            await self._client.collection(collection).document(doc_id).set(data, merge=merge)
        except _CONNECTION_ERRORS as exc:
            raise WriteError(doc_id, str(exc)) from exc
        logger.debug("Set doc %s/%s (merge=%s)", collection, doc_id, merge)

    def close(self) -> None:
        """Release the underlying gRPC channel."""
        self._client.close()
