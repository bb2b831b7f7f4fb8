"""Chart index — aggregate charts from named repositories and query them.

Charts are keyed as ``<repo>/<chart>-<version>``. The repository name is
part of the key, so the same chart published by two repositories yields
two entries, and a query such as ``stable/nginx`` only matches charts
from the ``stable`` repository.

The index is built once and then queried. It provides no locking.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from chartsearch.search.models import ChartEntry, Result
from chartsearch.search.ranking import FIELD_SEPARATOR, calc_score, match_line

logger = logging.getLogger(__name__)


class QueryError(ValueError):
    """A search query could not be compiled."""

    def __init__(self, pattern: str, diagnostic: str):
        self.pattern = pattern
        self.diagnostic = diagnostic
        super().__init__(f"error parsing regexp: {diagnostic}: `{pattern}`")


class Index:
    """In-memory search index over charts from one or more repositories."""

    def __init__(self, ignore_case: bool = False, sep: str = FIELD_SEPARATOR):
        self.ignore_case = ignore_case
        self.sep = sep
        self._charts: dict[str, ChartEntry] = {}
        self._lines: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._charts)

    def __contains__(self, key: str) -> bool:
        return key in self._charts

    def add_repo(self, repo_name: str, entries: Iterable[ChartEntry]) -> None:
        """Add every chart of a repository to the index.

        Existing keys are overwritten. Names and versions are not validated.
        """
        count = 0
        for entry in entries:
            key = f"{repo_name}/{entry.qualified_id}"
            self._charts[key] = entry
            self._lines[key] = self._index_line(key, entry)
            count += 1
        logger.debug("Indexed %d charts from repository %r", count, repo_name)

    def all(self) -> list[Result]:
        """Return every chart in the index, each with a score of 0."""
        return [Result(name=k, score=0, chart=v) for k, v in self._charts.items()]

    def search(self, query: str, threshold: int, use_regexp: bool = False) -> list[Result]:
        """Search the index.

        Args:
            query: A literal substring, or a regular expression when
                *use_regexp* is set.
            threshold: Maximum score a result may have to be returned.
            use_regexp: Treat *query* as a regular expression.

        Returns:
            Matching results in no particular order. Use ``sort_score`` to
            order them.

        Raises:
            QueryError: *use_regexp* is set and *query* does not compile.
        """
        if use_regexp:
            return self.search_regexp(query, threshold)
        return self.search_literal(query, threshold)

    def search_literal(self, term: str, threshold: int) -> list[Result]:
        """Search for a literal substring of the name, description or keywords."""
        if self.ignore_case:
            term = term.lower()

        results = []
        for key, line in self._lines.items():
            if self.ignore_case:
                line = line.lower()
            pos = line.find(term)
            if pos == -1:
                continue
            self._collect(results, key, line, pos, threshold)

        logger.debug("Literal search %r matched %d charts", term, len(results))
        return results

    def search_regexp(self, pattern: str, threshold: int) -> list[Result]:
        """Search using a regular expression. The first match per chart counts."""
        flags = re.IGNORECASE if self.ignore_case else 0
        try:
            regex = re.compile(pattern, flags)
        except re.error as e:
            raise QueryError(pattern, str(e)) from e

        results = []
        for key, line in self._lines.items():
            m = regex.search(line)
            if m is None:
                continue
            self._collect(results, key, line, m.start(), threshold)

        logger.debug("Regexp search %r matched %d charts", pattern, len(results))
        return results

    def _collect(
        self, results: list[Result], key: str, line: str, pos: int, threshold: int
    ) -> None:
        score = calc_score(pos, line, self.sep)
        if score > threshold:
            return
        results.append(Result(name=key, score=score, chart=self._charts[key]))

    def _index_line(self, key: str, entry: ChartEntry) -> str:
        fields = [key, entry.description]
        if entry.keywords:
            fields.append(" ".join(entry.keywords))
        return match_line(*fields, sep=self.sep)
