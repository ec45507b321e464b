from pathlib import Path
from typing import Annotated

import typer

from scouting_search.cli._logging import configure_logging
from scouting_search.cli._output import (
    print_career,
    print_comparison,
    print_error,
    print_grade_card,
    print_import_summary,
    print_pipeline_report,
    print_samples,
    print_search_results,
    print_seasons,
)
from scouting_search.cli.factory import build_search_context
from scouting_search.config import Settings, load_settings
from scouting_search.domain.result import Err, Ok
from scouting_search.domain.search import SearchFilters
from scouting_search.exceptions import ConfigurationError, EmbeddingError, NoStatsFoundError
from scouting_search.grading.engine import grade_season
from scouting_search.ingest.csv_source import CsvSource
from scouting_search.ingest.loader import SeasonLoader

app = typer.Typer(name="scout", help="Scouting search: graded season summaries and semantic player search")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Scouting search: graded season summaries and semantic player search."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


def _settings() -> Settings:
    try:
        return load_settings()
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


_LimitOpt = Annotated[int | None, typer.Option("--limit", help="Maximum number of rows")]
_NameArg = Annotated[str, typer.Argument(help="Player name (partial, case-insensitive)")]


@app.command(name="import")
def import_seasons(
    path: Annotated[Path, typer.Argument(help="CSV file of season stat lines")],
) -> None:
    """Import season stats from a CSV file, grading each season."""
    settings = _settings()
    with build_search_context(settings) as ctx:
        loader = SeasonLoader(CsvSource(path), ctx.player_repo, ctx.season_stats_repo, conn=ctx.conn)
        match loader.load():
            case Ok(summary):
                print_import_summary(summary)
            case Err(e):
                location = f" (row {e.row_number})" if e.row_number is not None else ""
                print_error(f"{e.message}{location}")
                raise typer.Exit(code=1)


@app.command()
def generate(
    batch_size: Annotated[int | None, typer.Option("--batch-size", help="Summaries per embedding call")] = None,
    limit: _LimitOpt = None,
) -> None:
    """Generate and store summary embeddings for every qualifying season."""
    settings = _settings()
    if batch_size is None:
        batch_size = settings.batch_size
    with build_search_context(settings) as ctx:
        try:
            report = ctx.pipeline.run(batch_size=batch_size, limit=limit)
        except (EmbeddingError, ValueError) as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
    print_pipeline_report(report)


@app.command()
def sample(limit: Annotated[int, typer.Option("--limit", help="Number of summaries to show")] = 5) -> None:
    """Print generated summaries without embedding them."""
    settings = _settings()
    with build_search_context(settings) as ctx:
        samples = ctx.pipeline.sample(limit)
    print_samples(samples)


@app.command()
def search(
    query: Annotated[str, typer.Argument(help="Free-text scouting description")],
    position: Annotated[str | None, typer.Option("--position", help="Position code, matched as a substring")] = None,
    min_war: Annotated[float | None, typer.Option("--min-war")] = None,
    max_war: Annotated[float | None, typer.Option("--max-war")] = None,
    min_overall: Annotated[float | None, typer.Option("--min-overall", help="Minimum overall grade")] = None,
    max_overall: Annotated[float | None, typer.Option("--max-overall", help="Maximum overall grade")] = None,
    min_hit: Annotated[float | None, typer.Option("--min-hit", help="Minimum hit grade")] = None,
    max_hit: Annotated[float | None, typer.Option("--max-hit", help="Maximum hit grade")] = None,
    min_power: Annotated[float | None, typer.Option("--min-power", help="Minimum power grade")] = None,
    max_power: Annotated[float | None, typer.Option("--max-power", help="Maximum power grade")] = None,
    min_fielding: Annotated[float | None, typer.Option("--min-fielding", help="Minimum fielding grade")] = None,
    max_fielding: Annotated[float | None, typer.Option("--max-fielding", help="Maximum fielding grade")] = None,
    min_speed: Annotated[float | None, typer.Option("--min-speed", help="Minimum speed grade")] = None,
    max_speed: Annotated[float | None, typer.Option("--max-speed", help="Maximum speed grade")] = None,
    year_start: Annotated[int | None, typer.Option("--year-start")] = None,
    year_end: Annotated[int | None, typer.Option("--year-end")] = None,
    limit: _LimitOpt = None,
) -> None:
    """Search seasons by similarity to QUERY, constrained by exact filters."""
    if (year_start is None) != (year_end is None):
        print_error("--year-start and --year-end must be given together")
        raise typer.Exit(code=1)
    filters = SearchFilters(
        position=position,
        min_war=min_war,
        max_war=max_war,
        min_overall_grade=min_overall,
        max_overall_grade=max_overall,
        min_hit_grade=min_hit,
        max_hit_grade=max_hit,
        min_power_grade=min_power,
        max_power_grade=max_power,
        min_fielding_grade=min_fielding,
        max_fielding_grade=max_fielding,
        min_speed_grade=min_speed,
        max_speed_grade=max_speed,
        year_range=(year_start, year_end) if year_start is not None and year_end is not None else None,
    )
    settings = _settings()
    with build_search_context(settings) as ctx:
        try:
            results = ctx.search_engine.search(query, filters, settings.search_limit if limit is None else limit)
        except EmbeddingError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
    print_search_results(results)


@app.command()
def stats(
    name: _NameArg,
    year: Annotated[int | None, typer.Option("--year", help="Restrict to one season")] = None,
) -> None:
    """Show season stat lines for a player."""
    settings = _settings()
    with build_search_context(settings) as ctx:
        seasons = ctx.player_stats_service.get_player_stats(name, year)
    print_seasons(seasons)


@app.command()
def career(name: _NameArg) -> None:
    """Show career totals and peak for a player."""
    settings = _settings()
    with build_search_context(settings) as ctx:
        try:
            summary = ctx.player_stats_service.career_summary(name)
        except NoStatsFoundError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
    print_career(summary)
    print_seasons(list(summary.seasons))


@app.command()
def compare(
    player1: Annotated[str, typer.Argument(help="First player")],
    player2: Annotated[str, typer.Argument(help="Second player")],
) -> None:
    """Compare two careers side by side."""
    settings = _settings()
    with build_search_context(settings) as ctx:
        try:
            comparison = ctx.player_stats_service.compare(player1, player2)
        except NoStatsFoundError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
    print_comparison(comparison)


@app.command()
def card(
    name: _NameArg,
    year: Annotated[int, typer.Argument(help="Season year")],
) -> None:
    """Show the full scouting grade card for one season."""
    settings = _settings()
    with build_search_context(settings) as ctx:
        seasons = ctx.player_stats_service.get_player_stats(name, year)
    if not seasons:
        print_error(str(NoStatsFoundError(name)))
        raise typer.Exit(code=1)
    season = seasons[0]
    print_grade_card(season, grade_season(season))
