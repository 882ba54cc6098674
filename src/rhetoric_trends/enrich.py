"""Attach article metadata and derived classifications to raw statements."""

from collections.abc import Mapping
from dataclasses import fields

from rhetoric_trends.classify import is_us_relevant, normalize_tone, normalize_topic
from rhetoric_trends.data import Article, EnrichedStatement, RawStatement


def enrich_statement(statement: RawStatement, article: Article) -> EnrichedStatement:
    """Classify one statement and copy in its parent article's url, date and title."""
    raw_fields = {f.name: getattr(statement, f.name) for f in fields(RawStatement)}
    return EnrichedStatement(
        **raw_fields,
        article_url=article.url,
        article_date=article.date,
        article_title=article.title,
        canonical_tone=normalize_tone(statement.tone),
        topic_category=normalize_topic(statement.topic),
        is_us_relevant=is_us_relevant(statement),
    )


def enrich(articles: Mapping[str, Article]) -> list[EnrichedStatement]:
    """Flatten and enrich every statement of every article.

    Every raw statement produces exactly one enriched statement, in article
    order then statement order.

    Args:
        articles: Articles keyed by identity (usually their URL).

    Returns:
        Enriched statements.
    """
    return [
        enrich_statement(statement, article)
        for article in articles.values()
        for statement in article.statements
    ]
