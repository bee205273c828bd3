"""Tests for the fixed emotion catalog and the Emotion model."""
import pytest
from pydantic import ValidationError

from emotodo.catalog import (
    EMOTION_IDS,
    REQUIRED_EMOTIONS,
    format_mood_summary,
    get_emotion,
    group_by_mood,
)
from emotodo.models.emotion import Emotion


class TestCatalog:
    """The catalog is exactly the seven predefined emotions."""

    def test_has_seven_unique_ids(self) -> None:
        assert len(REQUIRED_EMOTIONS) == 7
        assert len(set(EMOTION_IDS)) == 7

    def test_catalog_order(self) -> None:
        assert EMOTION_IDS == (
            "excited", "motivated", "calm", "neutral", "tired", "anxious", "overwhelmed",
        )

    def test_display_orders_cover_one_to_seven(self) -> None:
        assert [e.display_order for e in REQUIRED_EMOTIONS] == list(range(1, 8))

    def test_catalog_is_immutable(self) -> None:
        with pytest.raises(ValidationError):
            REQUIRED_EMOTIONS[0].name = "Thrilled"

    def test_get_emotion(self) -> None:
        calm = get_emotion("calm")
        assert calm.emoji == "😌"
        assert calm.color == "#06b6d4"
        assert (calm.category, calm.energy) == ("positive", "medium")

    def test_get_unknown_emotion(self) -> None:
        with pytest.raises(KeyError):
            get_emotion("bored")


class TestEmotionModel:
    """Validation and document serialisation."""

    def test_to_document_uses_camel_case(self) -> None:
        doc = get_emotion("excited").to_document()
        assert doc == {
            "id": "excited",
            "name": "Excited",
            "emoji": "🎉",
            "color": "#10b981",
            "category": "positive",
            "energy": "high",
            "displayOrder": 1,
        }

    def test_accepts_stored_field_names(self) -> None:
        emotion = Emotion.model_validate(get_emotion("tired").to_document())
        assert emotion == get_emotion("tired")

    @pytest.mark.parametrize(
        "override",
        [
            {"category": "ecstatic"},
            {"energy": "extreme"},
            {"color": "red"},
            {"displayOrder": 0},
            {"displayOrder": 8},
        ],
    )
    def test_rejects_invalid_fields(self, override: dict) -> None:
        data = {**get_emotion("neutral").to_document(), **override}
        with pytest.raises(ValidationError):
            Emotion.model_validate(data)


class TestMoodSummary:
    def test_groups_in_catalog_order(self) -> None:
        assert group_by_mood() == [
            (("positive", "high"), ["excited", "motivated"]),
            (("positive", "medium"), ["calm"]),
            (("neutral", "medium"), ["neutral"]),
            (("negative", "low"), ["tired", "anxious", "overwhelmed"]),
        ]

    def test_summary_lines(self) -> None:
        lines = format_mood_summary()
        assert lines[0] == "Positive (high energy): excited, motivated"
        assert lines[-1] == "Negative (low energy): tired, anxious, overwhelmed"
