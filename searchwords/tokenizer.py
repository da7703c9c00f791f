"""Split a decoded search query into keywords."""

import re

STOP_WORDS = frozenset(
    {"a", "of", "the", "to", "or", "in", "is", "and", "for", "+", "on", "at", "!", "-"}
)

# Negative search operators such as -site:example.com or -inurl:foo
DIRECTIVE_RE = re.compile(r"^-[a-z]+:")

_STRIP_RE = re.compile(r'[,"\\]')


def is_keyword(token: str) -> bool:
    """True if *token* is neither a stop word nor a search directive."""
    return token not in STOP_WORDS and not DIRECTIVE_RE.match(token)


def tokenize(query: str) -> list[str]:
    """Return the query's keywords, de-duplicated, in first-seen order."""
    cleaned = _STRIP_RE.sub("", query).replace("+", " ")
    words = []
    seen = set()
    for token in cleaned.split():
        if token in seen or not is_keyword(token):
            continue
        seen.add(token)
        words.append(token)
    return words
