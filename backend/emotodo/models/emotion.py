"""Pydantic model for a single emotion record stored in Firestore."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums / Literals
# ---------------------------------------------------------------------------

Category = Literal["positive", "neutral", "negative"]

Energy = Literal["high", "medium", "low"]


class Emotion(BaseModel):
    """One predefined emotion.

    ``id`` doubles as the Firestore document key.  The stored field names are
    camelCase (``displayOrder``) so the documents match what the web client
    reads.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str
    emoji: str
    color: str = Field(..., pattern=r"^#[0-9a-fA-F]{6}$")
    category: Category
    energy: Energy
    display_order: int = Field(..., alias="displayOrder", ge=1, le=7)

    def to_document(self) -> dict[str, Any]:
        """Field map written to Firestore (camelCase keys, ``id`` included)."""
        return self.model_dump(by_alias=True)
