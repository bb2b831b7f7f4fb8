"""Search data models — chart entries and query results."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChartEntry:
    """One version of a chart, as published by a repository."""

    name: str
    version: str
    description: str = ""
    url: str = ""
    keywords: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Loaders hand over lists; keep the entry immutable once created.
        if not isinstance(self.keywords, tuple):
            object.__setattr__(self, "keywords", tuple(self.keywords))

    @property
    def qualified_id(self) -> str:
        return f"{self.name}-{self.version}"


@dataclass(frozen=True)
class Result:
    """A single search hit. Lower scores are better matches."""

    name: str
    score: int
    chart: ChartEntry | None = None
