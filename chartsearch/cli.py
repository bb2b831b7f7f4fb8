"""chartsearch CLI — search charts across chart repositories."""

import logging

import click
from click.core import ParameterSource
from rich.console import Console
from rich.table import Table

from chartsearch import __version__

console = Console()


def _parse_repo(ctx, param, values: tuple) -> dict[str, str]:
    repos = {}
    for value in values:
        name, sep, path = value.partition("=")
        if not sep or not name or not path:
            raise click.BadParameter(f"expected NAME=PATH, got {value!r}")
        repos[name] = path
    return repos


def _from_command_line(ctx: click.Context, name: str) -> bool:
    return ctx.get_parameter_source(name) is ParameterSource.COMMANDLINE


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """chartsearch — search charts across chart repositories.

    Repositories are chart repository index files, named on the command
    line with --repo or listed in a YAML config file.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ── Search ───────────────────────────────────────────────────────────


@main.command()
@click.argument("keywords", nargs=-1)
@click.option("--config", "-c", "config_path", default=None, help="Config file (default: $CHARTSEARCH_CONFIG)")
@click.option(
    "--repo",
    "repos",
    multiple=True,
    callback=_parse_repo,
    metavar="NAME=PATH",
    help="Repository index file to search (repeatable)",
)
@click.option("--regexp/--no-regexp", "-r", default=False, help="Treat keywords as a regular expression")
@click.option("--max-score", type=int, default=None, help="Hide results scoring above this")
@click.option("--ignore-case/--match-case", "-i", default=False, help="Match case-insensitively")
def search(
    keywords: tuple,
    config_path: str | None,
    repos: dict[str, str],
    regexp: bool,
    max_score: int | None,
    ignore_case: bool,
):
    """Search chart names and descriptions for KEYWORDS.

    With no KEYWORDS, every chart in every repository is listed.
    """
    from chartsearch.config import ConfigError, load_config
    from chartsearch.repo.index_file import RepositoryIndexError, load_repositories
    from chartsearch.search.index import Index, QueryError
    from chartsearch.search.ranking import sort_score

    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    # Flags given on the command line override the config file.
    ctx = click.get_current_context()
    repositories = {**config.repositories, **repos}
    if _from_command_line(ctx, "regexp"):
        config.regexp = regexp
    if _from_command_line(ctx, "ignore_case"):
        config.ignore_case = ignore_case
    if max_score is not None:
        config.max_score = max_score

    try:
        index = load_repositories(Index(ignore_case=config.ignore_case), repositories)
    except RepositoryIndexError as e:
        raise click.ClickException(str(e)) from e

    if keywords:
        query = " ".join(keywords)
        try:
            results = index.search(query, config.max_score, config.regexp)
        except QueryError as e:
            raise click.ClickException(str(e)) from e
    else:
        results = index.all()

    sort_score(results)

    if not results:
        console.print("No results found")
        return

    table = Table()
    table.add_column("NAME", style="cyan", no_wrap=True)
    table.add_column("VERSION")
    table.add_column("DESCRIPTION")

    for result in results:
        table.add_row(result.name, result.chart.version, result.chart.description)

    console.print(table)


# ── Repositories ─────────────────────────────────────────────────────


@main.command()
@click.option("--config", "-c", "config_path", default=None, help="Config file (default: $CHARTSEARCH_CONFIG)")
def repos(config_path: str | None):
    """List the repositories named in the config file."""
    from chartsearch.config import ConfigError, load_config

    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if not config.repositories:
        console.print("[yellow]No repositories configured.[/]")
        return

    table = Table(title=f"Repositories ({len(config.repositories)})")
    table.add_column("Name", style="cyan")
    table.add_column("Index file")

    for name, path in sorted(config.repositories.items()):
        table.add_row(name, str(path))

    console.print(table)


if __name__ == "__main__":
    main()
