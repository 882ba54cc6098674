"""Tests for topic normalization."""

import pytest

from rhetoric_trends.classify.topic import normalize_topic
from rhetoric_trends.data import TopicCategory


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Cross-strait relations", TopicCategory.TAIWAN),
        ("Semiconductor export controls", TopicCategory.TECHNOLOGY),
        ("South China Sea patrols", TopicCategory.MILITARY_AND_SECURITY),
        ("Xinjiang", TopicCategory.HUMAN_RIGHTS_AND_GOVERNANCE),
        ("Belt and Road Initiative", TopicCategory.BELT_AND_ROAD),
        ("Tariffs", TopicCategory.TRADE_AND_ECONOMY),
        ("United Nations reform", TopicCategory.MULTILATERAL_AND_GLOBAL),
        ("Bilateral relations", TopicCategory.DIPLOMACY),
    ],
)
def test_each_category(raw: str, expected: TopicCategory) -> None:
    assert normalize_topic(raw) == expected


def test_taiwan_checked_before_diplomacy() -> None:
    # "relations" alone would be Diplomacy
    assert normalize_topic("Taiwan relations") == TopicCategory.TAIWAN


def test_technology_checked_before_trade() -> None:
    assert normalize_topic("Chip trade restrictions") == TopicCategory.TECHNOLOGY


def test_military_checked_before_human_rights() -> None:
    assert normalize_topic("National security and Hong Kong") == TopicCategory.MILITARY_AND_SECURITY


def test_trade_checked_before_multilateral() -> None:
    assert normalize_topic("WTO trade rules") == TopicCategory.TRADE_AND_ECONOMY


def test_ai_requires_word_boundary_space() -> None:
    assert normalize_topic("AI governance") == TopicCategory.TECHNOLOGY
    # "ai" inside a word does not count
    assert normalize_topic("Maintaining relations") == TopicCategory.DIPLOMACY


def test_sanctions_are_human_rights_and_governance() -> None:
    assert normalize_topic("Sanctions") == TopicCategory.HUMAN_RIGHTS_AND_GOVERNANCE


def test_unmatched_is_other() -> None:
    assert normalize_topic("random unrelated text") == TopicCategory.OTHER


def test_empty_is_other() -> None:
    assert normalize_topic("") == TopicCategory.OTHER
