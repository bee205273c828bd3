"""The fixed catalog of emotions every EmoTodo installation needs.

Every other EmoTodo component expects these seven records to exist in
Firestore before it runs.
"""

from __future__ import annotations

from typing import Iterable

from emotodo.models.emotion import Category, Emotion, Energy

REQUIRED_EMOTIONS: tuple[Emotion, ...] = (
    Emotion(
        id="excited",
        name="Excited",
        emoji="🎉",
        color="#10b981",
        category="positive",
        energy="high",
        display_order=1,
    ),
    Emotion(
        id="motivated",
        name="Motivated",
        emoji="💪",
        color="#3b82f6",
        category="positive",
        energy="high",
        display_order=2,
    ),
    Emotion(
        id="calm",
        name="Calm",
        emoji="😌",
        color="#06b6d4",
        category="positive",
        energy="medium",
        display_order=3,
    ),
    Emotion(
        id="neutral",
        name="Neutral",
        emoji="😐",
        color="#6b7280",
        category="neutral",
        energy="medium",
        display_order=4,
    ),
    Emotion(
        id="tired",
        name="Tired",
        emoji="😴",
        color="#f59e0b",
        category="negative",
        energy="low",
        display_order=5,
    ),
    Emotion(
        id="anxious",
        name="Anxious",
        emoji="😰",
        color="#f97316",
        category="negative",
        energy="low",
        display_order=6,
    ),
    Emotion(
        id="overwhelmed",
        name="Overwhelmed",
        emoji="😵",
        color="#ef4444",
        category="negative",
        energy="low",
        display_order=7,
    ),
)

EMOTION_IDS: tuple[str, ...] = tuple(e.id for e in REQUIRED_EMOTIONS)

_BY_ID: dict[str, Emotion] = {e.id: e for e in REQUIRED_EMOTIONS}


def get_emotion(emotion_id: str) -> Emotion:
    """Return the catalog record for *emotion_id*; ``KeyError`` if unknown."""
    return _BY_ID[emotion_id]


def group_by_mood(
    catalog: Iterable[Emotion] = REQUIRED_EMOTIONS,
) -> list[tuple[tuple[Category, Energy], list[str]]]:
    """Group ids by ``(category, energy)``, keeping first-seen catalog order."""
    groups: dict[tuple[Category, Energy], list[str]] = {}
    for emotion in catalog:
        groups.setdefault((emotion.category, emotion.energy), []).append(emotion.id)
    return list(groups.items())


def format_mood_summary(catalog: Iterable[Emotion] = REQUIRED_EMOTIONS) -> list[str]:
    """Human-readable lines such as ``Positive (high energy): excited, motivated``."""
    return [
        f"{category.capitalize()} ({energy} energy): {', '.join(ids)}"
        for (category, energy), ids in group_by_mood(catalog)
    ]
