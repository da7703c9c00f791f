from searchwords.query import ExtractedQuery


def make_line(referrer: str, client: str = "127.0.0.1") -> str:
    return (
        f'{client} - - [1/Jan/2008:00:00:00] "GET / HTTP/1.1" 200 100 '
        f'"{referrer}" "UA"\n'
    )


def q(query: str) -> ExtractedQuery:
    return ExtractedQuery(query)
