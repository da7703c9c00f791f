"""Search query extraction from a record's referrer URL."""

import re
from functools import cached_property
from urllib.parse import unquote_plus

from searchwords.records import LogRecord
from searchwords.tokenizer import tokenize

QUERY_PARAM_RE = re.compile(r"[?&]q=([^&]*)")
CACHE_PREFIX_RE = re.compile(r"^cache:\S+\s+")


def decode_query(referrer: str | None) -> str | None:
    """Return the normalised ``q=`` value of *referrer*, or None if absent.

    An empty ``q=`` value is returned as ``""``, not None.
    """
    if not referrer:
        return None
    m = QUERY_PARAM_RE.search(referrer)
    if not m:
        return None
    query = unquote_plus(m.group(1)).lower().strip()
    return CACHE_PREFIX_RE.sub("", query)


class ExtractedQuery:
    """The search query carried by one log record, if any."""

    def __init__(self, query: str | None, referrer: str | None = None):
        self.query = query
        self.referrer = referrer

    @property
    def present(self) -> bool:
        return self.query is not None

    @cached_property
    def words(self) -> list[str]:
        if self.query is None:
            return []
        return tokenize(self.query)

    def __repr__(self) -> str:
        return f"ExtractedQuery({self.query!r})"


def extract_query(record: LogRecord) -> ExtractedQuery:
    return ExtractedQuery(decode_query(record.referrer), record.referrer)
