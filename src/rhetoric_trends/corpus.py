"""Read article/statement corpora from JSON.

Two article shapes are accepted: the extraction output
(``article_url``, ``article_date``, ``article_title``, ``statements``) and a
short form (``url``, ``date``, ``title``, ``statements``). A corpus is either
a list of articles or a mapping from article identity to article.
"""

import json
import logging
from pathlib import Path

from rhetoric_trends.data import Article, RawStatement

logger = logging.getLogger(__name__)


def _str_field(raw: dict[str, object], *names: str) -> str:
    for name in names:
        value = raw.get(name)
        if value is not None:
            return str(value)
    return ""


def _optional_str(raw: dict[str, object], name: str) -> str | None:
    value = raw.get(name)
    return None if value is None else str(value)


def _optional_int(value: object) -> int | None:
    # bool is an int subclass but never a meaningful score
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def parse_statement(raw: dict[str, object]) -> RawStatement:
    """Parse one statement dict, filling gaps instead of failing.

    Missing text fields become empty strings, a missing or non-integer
    ``tone_intensity`` becomes 0 and a non-integer ``speaker_importance``
    is treated as unknown.
    """
    intensity = _optional_int(raw.get("tone_intensity"))
    return RawStatement(
        speaker=_str_field(raw, "speaker"),
        context=_str_field(raw, "context"),
        quote_or_paraphrase=_str_field(raw, "quote_or_paraphrase"),
        topic=_str_field(raw, "topic"),
        framing=_str_field(raw, "framing"),
        tone=_str_field(raw, "tone"),
        tone_intensity=intensity if intensity is not None else 0,
        speaker_type=_optional_str(raw, "speaker_type"),
        speaker_title=_optional_str(raw, "speaker_title"),
        speaker_importance=_optional_int(raw.get("speaker_importance")),
    )


def parse_article(raw: dict[str, object], key: str = "") -> Article:
    """Parse one article dict.

    Args:
        raw: Article in either supported shape.
        key: Identity to fall back on when the article carries no URL.
    """
    raw_statements = raw.get("statements", [])
    statements: list[RawStatement] = []
    if isinstance(raw_statements, list):
        for item in raw_statements:
            if isinstance(item, dict):
                statements.append(parse_statement(item))
            else:
                logger.warning("Skipping non-object statement in article %s", key or raw)

    return Article(
        url=_str_field(raw, "article_url", "url") or key,
        date=_str_field(raw, "article_date", "date"),
        title=_str_field(raw, "article_title", "title"),
        statements=tuple(statements),
    )


def parse_corpus(raw: object) -> dict[str, Article]:
    """Parse a decoded JSON corpus into articles keyed by URL.

    Articles that share a URL are the same article: their statements are
    appended to the first occurrence.

    Raises:
        ValueError: If ``raw`` is neither a list nor a mapping.
    """
    if isinstance(raw, list):
        items = [("", item) for item in raw]
    elif isinstance(raw, dict):
        items = [(str(k), v) for k, v in raw.items()]
    else:
        msg = f"Corpus must be a list or mapping of articles, got {type(raw).__name__}"
        raise ValueError(msg)

    articles: dict[str, Article] = {}
    for key, item in items:
        if not isinstance(item, dict):
            logger.warning("Skipping non-object article entry %r", key or item)
            continue
        article = parse_article(item, key=key)
        existing = articles.get(article.url)
        if existing is None:
            articles[article.url] = article
            continue
        logger.warning("Merging statements of duplicate article %s", article.url)
        articles[article.url] = Article(
            url=existing.url,
            date=existing.date,
            title=existing.title,
            statements=existing.statements + article.statements,
        )
    return articles


def load_corpus(path: Path | str) -> dict[str, Article]:
    """Load a JSON corpus file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not a list or mapping.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        raw = json.load(f)
    articles = parse_corpus(raw)
    logger.info(
        "Loaded %d articles with %d statements from %s",
        len(articles),
        sum(len(a.statements) for a in articles.values()),
        path,
    )
    return articles
