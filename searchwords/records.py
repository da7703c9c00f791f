"""Access-log record parsing.

Only one record shape is recognised, the combined log format with a quoted
referrer and user agent::

    127.0.0.1 - - [01/Jan/2008:00:00:00 +0000] "GET / HTTP/1.1" 200 100 "http://ref/" "UA"

Lines that do not fit (local hits, truncated writes, other formats) yield a
record with only ``raw`` set.
"""

import re
from dataclasses import dataclass

LOG_PATTERN = re.compile(
    r'^(?P<client>[\d.]+) \S+ \S+ '
    r'\[(?P<timestamp>[^\]]+)\] '
    r'"(?P<request>[^"]*)" '
    r'(?P<status>\d+) '
    r'(?P<size>\S+) '
    r'"(?P<referrer>[^"]*)" '
    r'"[^"]*"'
)


@dataclass(frozen=True)
class LogRecord:
    raw: str
    client: str | None = None
    timestamp: str | None = None
    request: str | None = None
    status: int | None = None
    size: str | None = None
    referrer: str | None = None
    # Never filled in: the user agent is matched but not captured.
    browser: str | None = None

    @property
    def parsed(self) -> bool:
        return self.client is not None


def parse_record(line: str) -> LogRecord:
    """Parse a single access-log line. Never raises on malformed input."""
    stripped = line.rstrip("\r\n")
    m = LOG_PATTERN.match(stripped)
    if not m:
        return LogRecord(raw=stripped)

    return LogRecord(
        raw=stripped,
        client=m.group("client"),
        timestamp=m.group("timestamp"),
        request=m.group("request"),
        status=int(m.group("status")),
        size=m.group("size"),
        referrer=m.group("referrer"),
    )
