"""Chart repository ``index.yaml`` loading.

An index file looks like::

    apiVersion: v1
    entries:
      nginx:
        - name: nginx
          version: 1.2.0
          description: An nginx web server
          urls:
            - https://charts.example.com/nginx-1.2.0.tgz
          keywords: [web, proxy]

Each chart maps to a list of version records.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from chartsearch.search.index import Index
from chartsearch.search.models import ChartEntry

logger = logging.getLogger(__name__)


class RepositoryIndexError(ValueError):
    """A repository index file is missing or malformed."""


def load_index_file(path: str | Path) -> list[ChartEntry]:
    """Read a repository index file and return one entry per chart version."""
    path = Path(path)
    try:
        with open(path) as f:
            # Scalars stay strings so versions like 1.10 are not read as floats.
            data = yaml.load(f, Loader=yaml.BaseLoader)
    except OSError as e:
        raise RepositoryIndexError(f"Cannot read repository index {path}: {e}") from e
    except yaml.YAMLError as e:
        raise RepositoryIndexError(f"Invalid YAML in repository index {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("entries"), dict):
        raise RepositoryIndexError(f"Repository index {path} has no 'entries' mapping")

    entries = []
    for chart_name, versions in data["entries"].items():
        for record in versions or []:
            if not isinstance(record, dict):
                raise RepositoryIndexError(
                    f"Repository index {path}: malformed version record for chart {chart_name!r}"
                )
            entries.append(_record_to_entry(str(chart_name), record))

    logger.debug("Loaded %d chart versions from %s", len(entries), path)
    return entries


def load_repositories(index: Index, repositories: dict[str, str | Path]) -> Index:
    """Load each ``{repo_name: index_path}`` pair into *index*."""
    for repo_name, path in repositories.items():
        index.add_repo(repo_name, load_index_file(path))
    return index


def _record_to_entry(chart_name: str, record: dict) -> ChartEntry:
    urls = record.get("urls") or []
    return ChartEntry(
        name=str(record.get("name") or chart_name),
        version=str(record.get("version", "")),
        description=str(record.get("description") or ""),
        url=urls[0] if urls else "",
        keywords=[str(k) for k in record.get("keywords") or []],
    )
