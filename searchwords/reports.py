"""Report variants — each accumulates queries and prints one view of them.

Every report implements the same two-step contract:

* ``consume(extracted)`` once per log line that carries a search query
* ``emit()`` once after the last line

``queries`` and ``words`` stream their output from ``consume``; the others
aggregate counts and print everything from ``emit``.
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

from searchwords.config import ReportConfig
from searchwords.query import ExtractedQuery

logger = logging.getLogger(__name__)

KEY_WIDTH = 60
COUNT_WIDTH = 10


def _by_count(counts: dict[str, int]) -> list[tuple[str, int]]:
    """Descending count; ties keep insertion order."""
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)


class Report:
    """Base class for all reports."""

    name = ""

    def __init__(self, min_count: int = 0, out: TextIO | None = None):
        self.min_count = min_count
        self.out = out if out is not None else sys.stdout

    def consume(self, extracted: ExtractedQuery) -> None:
        raise NotImplementedError

    def emit(self) -> None:
        """Print the final output. Streaming reports have nothing left to print."""

    def _print(self, text: str) -> None:
        print(text, file=self.out)


class RawQueryReport(Report):
    name = "queries"

    def consume(self, extracted: ExtractedQuery) -> None:
        self._print(extracted.query)


class RawWordReport(Report):
    name = "words"

    def consume(self, extracted: ExtractedQuery) -> None:
        self._print(" ".join(extracted.words))


class TableReport(Report):
    """Counts one or more string keys per query and prints a frequency table."""

    def __init__(self, min_count: int = 0, out: TextIO | None = None):
        super().__init__(min_count, out)
        self.counts: dict[str, int] = {}

    def keys(self, extracted: ExtractedQuery) -> list[str]:
        raise NotImplementedError

    def consume(self, extracted: ExtractedQuery) -> None:
        for key in self.keys(extracted):
            self.counts[key] = self.counts.get(key, 0) + 1

    def emit(self) -> None:
        for key, count in _by_count(self.counts):
            if count < self.min_count:
                continue
            self._print(f"{key:<{KEY_WIDTH}}{count:>{COUNT_WIDTH}}")


class QueryTableReport(TableReport):
    name = "querytable"

    def keys(self, extracted: ExtractedQuery) -> list[str]:
        return [extracted.query]


class CleanQueryTableReport(TableReport):
    name = "cleanquerytable"

    def keys(self, extracted: ExtractedQuery) -> list[str]:
        return [" ".join(extracted.words)]


class WordTableReport(TableReport):
    name = "wordtable"

    def keys(self, extracted: ExtractedQuery) -> list[str]:
        return extracted.words


@dataclass
class WordNode:
    count: int = 0
    # Directed: related["b"] on node "a" is kept apart from related["a"] on "b".
    related: dict[str, int] = field(default_factory=dict)


class GraphReport(Report):
    """Word occurrence counts plus word-to-word co-occurrence within a query."""

    name = "graph"

    def __init__(self, min_count: int = 0, out: TextIO | None = None):
        super().__init__(min_count, out)
        self.nodes: dict[str, WordNode] = {}

    def node(self, word: str) -> WordNode:
        node = self.nodes.get(word)
        if node is None:
            node = self.nodes[word] = WordNode()
        return node

    def consume(self, extracted: ExtractedQuery) -> None:
        words = extracted.words
        for word in words:
            node = self.node(word)
            node.count += 1
            for other in words:
                if other != word:
                    node.related[other] = node.related.get(other, 0) + 1

    def sorted_nodes(self) -> list[tuple[str, WordNode]]:
        return sorted(self.nodes.items(), key=lambda item: item[1].count, reverse=True)

    def emit(self) -> None:
        for word, node in self.sorted_nodes():
            if node.count < self.min_count:
                continue
            self._print(f"{word} {node.count}")
            for other, count in _by_count(node.related):
                self._print(f"    {other} {count}")


class DotGraphReport(GraphReport):
    """GraphReport aggregation rendered as an undirected GraphViz graph."""

    name = "dot"

    def __init__(
        self,
        min_count: int = 0,
        out: TextIO | None = None,
        with_counts: bool = False,
        url: str | None = None,
        linked_only: bool = False,
    ):
        super().__init__(min_count, out)
        self.with_counts = with_counts
        self.url = url
        self.linked_only = linked_only

    def color_step(self) -> int:
        top = max((node.count for node in self.nodes.values()), default=0)
        return 128 // max(1, top)

    def node_statement(self, word: str, node: WordNode, step: int) -> str:
        # Hex is not zero-padded.
        attrs = [f'style=filled, fillcolor="#0000{127 + node.count * step:x}"']
        if self.with_counts:
            attrs.append(f'label="{word} ({node.count})"')
        if self.url:
            attrs.append(f'URL="{self.url.replace("%s", word)}"')
        return f'  "{word}" [{", ".join(attrs)}];'

    def emit(self) -> None:
        step = self.color_step()
        self._print("graph {")
        for word, node in self.sorted_nodes():
            if node.count < self.min_count:
                continue
            if self.linked_only and not node.related:
                continue
            self._print(self.node_statement(word, node, step))
            for other, count in _by_count(node.related):
                # Each pair is seen from both ends; only the greater name draws it.
                if count >= self.min_count and word > other:
                    self._print(f'  "{word}" -- "{other}";')
        self._print("}")


REPORTS: dict[str, type[Report]] = {
    cls.name: cls
    for cls in (
        RawQueryReport,
        RawWordReport,
        QueryTableReport,
        CleanQueryTableReport,
        WordTableReport,
        GraphReport,
        DotGraphReport,
    )
}


def build_report(config: ReportConfig, out: TextIO | None = None) -> Report:
    """Factory that returns the report selected by *config*."""
    cls = REPORTS[config.report]
    logger.debug("Building %s report (min=%d)", cls.name, config.min_count)
    if cls is DotGraphReport:
        return DotGraphReport(
            config.min_count,
            out,
            with_counts=config.dot_with_counts,
            url=config.dot_url,
            linked_only=config.dot_linked_only,
        )
    return cls(config.min_count, out)
