"""Ordered keyword rules: the first rule whose keywords appear in the text wins."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class KeywordRule(Generic[T]):
    """Maps any substring hit from ``keywords`` to ``result``.

    Keywords are matched against already lower-cased text.
    """

    result: T
    keywords: tuple[str, ...]

    def matches(self, text: str) -> bool:
        return any(kw in text for kw in self.keywords)


def first_match(rules: Sequence[KeywordRule[T]], text: str, default: T) -> T:
    """Return the result of the first matching rule, or ``default``.

    Args:
        rules: Rules in priority order.
        text: Lower-cased text to test.
        default: Result when no rule matches.
    """
    for rule in rules:
        if rule.matches(text):
            return rule.result
    return default
