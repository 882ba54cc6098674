"""Tests for statement enrichment."""

from dataclasses import fields

from rhetoric_trends.data import (
    Article,
    CanonicalTone,
    EnrichedStatement,
    RawStatement,
    TopicCategory,
)
from rhetoric_trends.enrich import enrich, enrich_statement


def _article(url: str, date: str, *statements: RawStatement) -> Article:
    return Article(url=url, date=date, title=f"Title {url}", statements=statements)


def test_enrich_statement_copies_raw_and_article_fields() -> None:
    raw = RawStatement(
        speaker="Xi Jinping",
        speaker_type="head_of_state",
        speaker_title="President",
        speaker_importance=5,
        context="Meeting with a US delegation",
        quote_or_paraphrase="Cooperation benefits both sides.",
        topic="Bilateral relations",
        framing="win-win",
        tone="constructive",
        tone_intensity=2,
    )
    article = _article("https://example.com/a", "2024-09-03", raw)
    enriched = enrich_statement(raw, article)

    for f in fields(RawStatement):
        assert getattr(enriched, f.name) == getattr(raw, f.name)
    assert enriched.article_url == "https://example.com/a"
    assert enriched.article_date == "2024-09-03"
    assert enriched.article_title == "Title https://example.com/a"
    assert enriched.canonical_tone == CanonicalTone.COOPERATIVE
    assert enriched.topic_category == TopicCategory.DIPLOMACY
    assert enriched.is_us_relevant is True


def test_enrich_keeps_raw_tone_and_topic() -> None:
    raw = RawStatement(speaker="Spokesperson", tone="Confrontational/assertive", topic="Tariffs")
    enriched = enrich_statement(raw, _article("u", "2024-01-01", raw))
    assert enriched.tone == "Confrontational/assertive"
    assert enriched.canonical_tone == CanonicalTone.CONFRONTATIONAL
    assert enriched.topic == "Tariffs"
    assert enriched.topic_category == TopicCategory.TRADE_AND_ECONOMY


def test_enrich_one_output_per_statement_in_order() -> None:
    s1 = RawStatement(speaker="A")
    s2 = RawStatement(speaker="B")
    s3 = RawStatement(speaker="C")
    articles = {
        "u1": _article("u1", "2024-01-01", s1, s2),
        "u2": _article("u2", "2024-02-01"),
        "u3": _article("u3", "", s3),
    }
    result = enrich(articles)

    assert [s.speaker for s in result] == ["A", "B", "C"]
    assert [s.article_url for s in result] == ["u1", "u1", "u3"]
    assert all(isinstance(s, EnrichedStatement) for s in result)


def test_enrich_empty_corpus() -> None:
    assert enrich({}) == []


def test_enrich_is_total_for_minimal_statements() -> None:
    raw = RawStatement(speaker="")
    enriched = enrich_statement(raw, Article(url=""))
    assert enriched.canonical_tone in CanonicalTone
    assert enriched.topic_category in TopicCategory
    assert enriched.canonical_tone == CanonicalTone.NEUTRAL
    assert enriched.topic_category == TopicCategory.OTHER
    assert enriched.is_us_relevant is True
