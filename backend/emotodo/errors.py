"""Exceptions raised while seeding the emotion catalog."""


class SeedError(Exception):
    """Base class for seeding failures."""


class StoreConnectionError(SeedError):
    """Firestore is unreachable or the credentials were rejected."""


class WriteError(SeedError):
    """A single emotion upsert failed; the write phase is aborted."""

    def __init__(self, emotion_id: str, message: str) -> None:
        super().__init__(f"failed to write emotion '{emotion_id}': {message}")
        self.emotion_id = emotion_id
