from scouting_search.domain.career import CareerTotals, PlayerComparison
from scouting_search.domain.search import SearchResult
from scouting_search.domain.season_stats import SeasonStats
from scouting_search.grading.descriptions import format_rate, format_war


def _opt(value: float | int | None, fmt: str = "{:.0f}") -> str:
    return "" if value is None else fmt.format(value)


def format_table(
    headers: list[str],
    rows: list[list[str]],
    alignments: list[str] | None = None,
) -> str:
    """Format data as a plain-text table with aligned columns.

    ``alignments`` is a list of ``"l"`` or ``"r"`` per column. Defaults to
    left-aligned for all columns.
    """
    if not rows:
        return ""
    if alignments is None:
        alignments = ["l"] * len(headers)

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    def _pad(text: str, width: int, align: str) -> str:
        if align == "r":
            return text.rjust(width)
        return text.ljust(width)

    lines = ["  ".join(_pad(h, col_widths[i], alignments[i]) for i, h in enumerate(headers))]
    lines.append("  ".join("-" * w for w in col_widths))
    for row in rows:
        lines.append("  ".join(_pad(row[i], col_widths[i], alignments[i]) for i in range(len(headers))))
    return "\n".join(lines)


def format_no_results(entity: str, **filters: object) -> str:
    """Return a human-readable 'no results' message with non-None filters."""
    parts = [f"{key}={value!r}" for key, value in filters.items() if value is not None]
    filter_str = f" matching {', '.join(parts)}" if parts else ""
    return f"No {entity} found{filter_str}."


def format_search_results(results: list[SearchResult]) -> str:
    """Numbered results, each with its stat line and the stored summary text."""
    blocks: list[str] = []
    for i, r in enumerate(results, start=1):
        header = (
            f"{i}. {r.player_name} ({r.year}, {r.team}, {r.position}) "
            f"WAR {format_war(r.war)}, wRC+ {_opt(r.wrc_plus) or '-'}, "
            f"OVR {_opt(r.overall_grade) or '-'}, similarity {_opt(r.similarity, '{:.3f}') or '-'}"
        )
        blocks.append(f"{header}\n   {r.summary_text}")
    return "\n\n".join(blocks)


def format_season_table(seasons: list[SeasonStats]) -> str:
    headers = ["Year", "Name", "Team", "Pos", "Age", "G", "PA", "HR", "SB", "AVG", "OBP", "SLG", "wRC+", "WAR"]
    alignments = ["r", "l", "l", "l", "r", "r", "r", "r", "r", "r", "r", "r", "r", "r"]
    rows = [
        [
            str(s.year),
            s.player_name,
            s.team,
            s.position,
            str(s.age),
            str(s.g),
            str(s.pa),
            str(s.hr),
            str(s.sb),
            format_rate(s.avg),
            format_rate(s.obp),
            format_rate(s.slg),
            _opt(s.wrc_plus),
            format_war(s.war),
        ]
        for s in seasons
    ]
    return format_table(headers, rows, alignments)


def format_career(career: CareerTotals) -> str:
    lines = [
        f"{career.player_name} ({career.first_season}-{career.last_season}, {career.seasons} seasons)",
        f"  G/PA: {career.g}/{career.pa}",
        f"  HR: {career.hr}  SB: {career.sb}",
        f"  WAR: {format_war(career.war)} ({format_war(career.avg_war)} per season)",
        f"  Avg wRC+: {_opt(career.avg_wrc_plus) or '-'}",
        f"  Peak: {format_war(career.peak_war)} WAR in {career.peak_year}",
        f"  Best 7 seasons: {format_war(career.peak_7yr_war)} WAR",
        f"  JAWS: {format_war(career.jaws)}",
    ]
    return "\n".join(lines)


def format_comparison(comparison: PlayerComparison) -> str:
    a = comparison.player1.career
    b = comparison.player2.career
    headers = ["", a.player_name, b.player_name, "Diff"]
    rows = [
        ["Seasons", str(a.seasons), str(b.seasons), f"{comparison.diff.longevity_diff:+d}"],
        ["WAR", format_war(a.war), format_war(b.war), f"{comparison.diff.war_diff:+.1f}"],
        ["Peak WAR", format_war(a.peak_war), format_war(b.peak_war), f"{comparison.diff.peak_diff:+.1f}"],
        ["Best 7", format_war(a.peak_7yr_war), format_war(b.peak_7yr_war), f"{comparison.diff.peak_7yr_diff:+.1f}"],
        ["JAWS", format_war(a.jaws), format_war(b.jaws), ""],
        ["HR", str(a.hr), str(b.hr), ""],
        ["SB", str(a.sb), str(b.sb), ""],
    ]
    return format_table(headers, rows, ["l", "r", "r", "r"])
