"""Ranking — score a match by its position and order results deterministically.

A match line is a chart's qualified name followed by its description (and
keywords), joined by ``FIELD_SEPARATOR``. The score of a match is the index
of the field it starts in, so a hit on the name beats a hit in the
description, and hits in the same field tie and fall back to name order.
"""

from __future__ import annotations

from chartsearch.search.models import Result

# Not whitespace, not alphanumeric, and not expected in chart metadata.
FIELD_SEPARATOR = "\x00"


def match_line(*fields: str, sep: str = FIELD_SEPARATOR) -> str:
    """Join the searchable fields of a chart into one scan target."""
    return sep.join(fields)


def calc_score(match_index: int, line: str, sep: str = FIELD_SEPARATOR) -> int:
    """Return the field tier containing *match_index* within *line*.

    Counts the separators that occur before the match start, so the first
    field scores 0, the second 1, and so on without an upper bound.
    """
    if match_index <= 0:
        return 0
    return line.count(sep, 0, match_index)


def sort_score(results: list[Result]) -> None:
    """Sort results in place by score, then by name.

    ``(score, name)`` is a total order over distinct results, so the output
    does not depend on the input order.
    """
    results.sort(key=lambda r: (r.score, r.name))
