from rich.console import Console
from rich.table import Table

from scouting_search.domain.career import CareerSummary, PlayerComparison
from scouting_search.domain.grades import PlayerGrades
from scouting_search.domain.pipeline import ImportSummary, PipelineReport
from scouting_search.domain.search import SearchResult
from scouting_search.domain.season_stats import SeasonStats
from scouting_search.grading.descriptions import format_rate, format_war
from scouting_search.grading.engine import describe_fielding, describe_grade

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def _opt(value: float | int | None, fmt: str = "{:.0f}") -> str:
    return "-" if value is None else fmt.format(value)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_import_summary(summary: ImportSummary) -> None:
    console.print(f"[bold green]Imported[/bold green] [bold]{summary.source_detail}[/bold]")
    console.print(f"  Rows read: {summary.rows_read}")
    console.print(f"  Seasons loaded: {summary.seasons_loaded}")
    console.print(f"  Players loaded: {summary.players_loaded}")


def print_pipeline_report(report: PipelineReport) -> None:
    console.print(f"[bold green]Generated[/bold green] [bold]{report.embedding_type}[/bold] embeddings")
    console.print(f"  Seasons fetched: {report.seasons_fetched}")
    console.print(f"  Batches: {report.batches}")
    console.print(f"  Records saved: {report.records_saved}")


def print_samples(samples: list[tuple[SeasonStats, str]]) -> None:
    if not samples:
        console.print("No seasons found.")
        return
    for season, summary in samples:
        console.print(f"[bold]{season.player_season_id}[/bold]")
        console.print(f"  {summary}", soft_wrap=True)
        console.print()


def print_search_results(results: list[SearchResult]) -> None:
    if not results:
        console.print("No matching seasons found.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Player")
    table.add_column("Year", justify="right")
    table.add_column("Team")
    table.add_column("Pos")
    table.add_column("WAR", justify="right")
    table.add_column("wRC+", justify="right")
    table.add_column("OVR", justify="right")
    table.add_column("Sim", justify="right")
    for i, r in enumerate(results, start=1):
        table.add_row(
            str(i),
            r.player_name,
            str(r.year),
            r.team,
            r.position,
            format_war(r.war),
            _opt(r.wrc_plus),
            _opt(r.overall_grade),
            _opt(r.similarity, "{:.3f}"),
        )
    console.print(table)


def print_seasons(seasons: list[SeasonStats]) -> None:
    if not seasons:
        console.print("No seasons found.")
        return
    table = Table(show_edge=False, pad_edge=False)
    for name, justify in (
        ("Year", "right"),
        ("Player", "left"),
        ("Team", "left"),
        ("Pos", "left"),
        ("PA", "right"),
        ("HR", "right"),
        ("SB", "right"),
        ("AVG", "right"),
        ("OBP", "right"),
        ("SLG", "right"),
        ("wRC+", "right"),
        ("WAR", "right"),
    ):
        table.add_column(name, justify=justify)
    for s in seasons:
        table.add_row(
            str(s.year),
            s.player_name,
            s.team,
            s.position,
            str(s.pa),
            str(s.hr),
            str(s.sb),
            format_rate(s.avg),
            format_rate(s.obp),
            format_rate(s.slg),
            _opt(s.wrc_plus),
            format_war(s.war),
        )
    console.print(table)


def print_career(summary: CareerSummary) -> None:
    c = summary.career
    console.print(f"[bold]{c.player_name}[/bold] ({c.first_season}-{c.last_season}, {c.seasons} seasons)")
    console.print(f"  G/PA: {c.g}/{c.pa}  HR: {c.hr}  SB: {c.sb}")
    console.print(f"  WAR: {format_war(c.war)} ({format_war(c.avg_war)} per season)")
    console.print(f"  Avg wRC+: {_opt(c.avg_wrc_plus)}")
    console.print(f"  Peak: {format_war(c.peak_war)} WAR in {c.peak_year}")
    console.print(f"  Best 7 seasons: {format_war(c.peak_7yr_war)} WAR  JAWS: {format_war(c.jaws)}")


def print_comparison(comparison: PlayerComparison) -> None:
    a = comparison.player1.career
    b = comparison.player2.career
    d = comparison.diff
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("")
    table.add_column(a.player_name, justify="right")
    table.add_column(b.player_name, justify="right")
    table.add_column("Diff", justify="right")
    table.add_row("Seasons", str(a.seasons), str(b.seasons), f"{d.longevity_diff:+d}")
    table.add_row("WAR", format_war(a.war), format_war(b.war), f"{d.war_diff:+.1f}")
    table.add_row("Peak WAR", format_war(a.peak_war), format_war(b.peak_war), f"{d.peak_diff:+.1f}")
    table.add_row("Best 7", format_war(a.peak_7yr_war), format_war(b.peak_7yr_war), f"{d.peak_7yr_diff:+.1f}")
    table.add_row("JAWS", format_war(a.jaws), format_war(b.jaws), "")
    console.print(table)


def print_grade_card(season: SeasonStats, grades: PlayerGrades) -> None:
    console.print(f"[bold]{season.player_name}[/bold] {season.year} ({season.team}, {grades.position})")
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Tool")
    table.add_column("Grade", justify="right")
    table.add_column("Description")
    rows: list[tuple[str, float | None]] = [
        ("Overall", grades.overall),
        ("Offense", grades.offense),
        ("Power", grades.power),
        ("Hit", grades.hit),
        ("Discipline", grades.discipline),
        ("Contact", grades.contact),
        ("Speed", grades.speed),
        ("Hard contact", grades.hard_contact),
        ("Exit velocity", grades.exit_velo),
    ]
    for label, grade in rows:
        if grade is None:
            table.add_row(label, "-", "")
        else:
            table.add_row(label, f"{grade:.0f}", describe_grade(grade, verbose=True))
    if grades.fielding is None:
        table.add_row("Fielding", "-", "did not field")
    else:
        table.add_row("Fielding", f"{grades.fielding:.0f}", describe_fielding(grades.fielding))
    console.print(table)
