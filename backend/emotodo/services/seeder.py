"""Idempotent seeding of the emotion catalog into Firestore.

Flow: connect → list existing → compute missing → (short-circuit if none)
→ upsert every catalog record with merge → re-list to verify.

Writes are issued one at a time in catalog order.  The first failing write
aborts the whole phase (``WriteError`` propagates); nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Literal, Sequence

from pydantic import BaseModel, Field

from emotodo.catalog import REQUIRED_EMOTIONS
from emotodo.config import Settings, get_settings
from emotodo.errors import StoreConnectionError
from emotodo.models.emotion import Emotion
from emotodo.services.firestore_service import FirestoreService

logger = logging.getLogger(__name__)

SeedStatus = Literal["already_seeded", "seeded", "verification_failed", "dry_run"]


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------

class VerificationResult(BaseModel):
    """Outcome of the post-write re-read."""

    ok: bool
    missing_ids: list[str] = Field(default_factory=list)
    error: str | None = None


class SeedReport(BaseModel):
    """Summary of one seeding run."""

    status: SeedStatus
    collection: str
    existing_ids: list[str] = Field(default_factory=list)
    missing_before: list[str] = Field(default_factory=list)
    written_ids: list[str] = Field(default_factory=list)
    missing_after: list[str] = Field(default_factory=list)
    would_write: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status != "verification_failed"


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

def compute_missing(
    existing_ids: Iterable[str],
    catalog: Sequence[Emotion] = REQUIRED_EMOTIONS,
) -> list[Emotion]:
    """Return catalog entries whose id is not in *existing_ids*, in catalog order."""
    present = set(existing_ids)
    return [emotion for emotion in catalog if emotion.id not in present]


# ---------------------------------------------------------------------------
# Seeder
# ---------------------------------------------------------------------------

class EmotionSeeder:
    """Runs the seeding procedure against a document store.

    *store* is anything exposing the :class:`FirestoreService` read/write
    coroutines (``list_documents`` and ``set_document``).
    """

    def __init__(
        self,
        store: FirestoreService,
        collection: str = "emotions",
        catalog: Sequence[Emotion] = REQUIRED_EMOTIONS,
    ) -> None:
        self._store = store
        self.collection = collection
        self.catalog = tuple(catalog)

    async def list_existing(self) -> list[tuple[str, dict[str, Any]]]:
        return await self._store.list_documents(self.collection)

    async def upsert_all(self) -> list[str]:
        """Set-with-merge every catalog record, in order.  Returns ids written."""
        logger.info("Creating/updating %d emotions in %s", len(self.catalog), self.collection)
        written: list[str] = []
        for emotion in self.catalog:
            await self._store.set_document(
                self.collection, emotion.id, emotion.to_document(), merge=True
            )
            written.append(emotion.id)
            logger.info(
                "  %s %s (%s/%s)", emotion.emoji, emotion.name, emotion.category, emotion.energy
            )
        return written

    async def verify(self) -> VerificationResult:
        """Re-list the collection and check every catalog id is present.

        A failed read confirms nothing, so every catalog id is reported
        missing.
        """
        try:
            docs = await self.list_existing()
        except StoreConnectionError as exc:
            logger.error("Verification read failed: %s", exc)
            return VerificationResult(
                ok=False, missing_ids=[e.id for e in self.catalog], error=str(exc)
            )

        missing = [e.id for e in compute_missing((doc_id for doc_id, _ in docs), self.catalog)]
        if missing:
            logger.error("Missing emotions after write: %s", ", ".join(missing))
        else:
            logger.info("All %d required emotions verified", len(self.catalog))
        return VerificationResult(ok=not missing, missing_ids=missing)

    async def run(self, dry_run: bool = False) -> SeedReport:
        existing = await self.list_existing()
        existing_ids = [doc_id for doc_id, _ in existing]
        missing = compute_missing(existing_ids, self.catalog)
        missing_ids = [e.id for e in missing]

        if existing_ids:
            logger.info("Found %d existing emotions in %s", len(existing_ids), self.collection)

        report = SeedReport(
            status="already_seeded",
            collection=self.collection,
            existing_ids=existing_ids,
            missing_before=missing_ids,
        )

        if not missing:
            logger.info("All %d required emotions already exist", len(self.catalog))
            return report

        logger.info("Missing %d emotions: %s", len(missing_ids), ", ".join(missing_ids))

        if dry_run:
            report.status = "dry_run"
            # A real run upserts the whole catalog once anything is missing
            report.would_write = [e.id for e in self.catalog]
            return report

        report.written_ids = await self.upsert_all()

        result = await self.verify()
        report.missing_after = result.missing_ids
        report.status = "seeded" if result.ok else "verification_failed"
        return report


async def seed_emotions(
    settings: Settings | None = None,
    dry_run: bool = False,
    collection: str | None = None,
) -> SeedReport:
    """Connect with *settings* (env by default) and seed the catalog.

    Raises ``StoreConnectionError`` / ``WriteError``; a verification
    mismatch is reported through ``SeedReport.status`` instead.
    """
    settings = settings or get_settings()
    store = FirestoreService.connect(settings)
    try:
        seeder = EmotionSeeder(store, collection=collection or settings.EMOTIONS_COLLECTION)
        return await seeder.run(dry_run=dry_run)
    finally:
        store.close()
