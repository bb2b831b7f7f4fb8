"""Search — in-memory index and ranking for chart repositories.

This package provides:
- Catalog: an index aggregating charts from many named repositories
- Matching: literal substring and regular expression queries
- Ranking: position-of-match scoring and deterministic result ordering
"""

from chartsearch.search.index import Index, QueryError
from chartsearch.search.models import ChartEntry, Result
from chartsearch.search.ranking import FIELD_SEPARATOR, calc_score, sort_score

__all__ = [
    "ChartEntry",
    "FIELD_SEPARATOR",
    "Index",
    "QueryError",
    "Result",
    "calc_score",
    "sort_score",
]
