from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, TextColumn, BarColumn, SpinnerColumn
from rich.table import Table

from glass_solver.models.report import CrosscheckReport


def get_console() -> Console:
    return Console(stderr=True)


def get_progress(console: Console) -> Progress:
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(bar_width=30),
        TextColumn("{task.completed}/{task.total}"),
        console=console,
        transient=True,
    )


def render_report(report: CrosscheckReport) -> Panel:
    """Summary table of a crosscheck sweep, listing any mismatches."""
    summary = Table(show_header=False, show_edge=False, padding=(0, 2))
    summary.add_column("Field", style="cyan", no_wrap=True)
    summary.add_column("Value", justify="right")
    summary.add_row("Max capacity", str(report.max_capacity))
    summary.add_row("Capacity pairs", str(report.pairs))
    summary.add_row("Targets compared", str(report.compared))
    summary.add_row("Mismatches", f"[red]{len(report.mismatches)}[/red]" if report.mismatches else "[green]0[/green]")

    if not report.mismatches:
        return Panel(summary, title="Crosscheck", border_style="green", padding=(1, 1))

    table = Table(title="Mismatches")
    for column in ("a", "b", "ta", "tb", "expected", "actual"):
        table.add_column(column, justify="right")
    for m in report.mismatches:
        table.add_row(str(m.a), str(m.b), str(m.ta), str(m.tb), str(m.expected), f"[red]{m.actual}[/red]")

    grid = Table.grid()
    grid.add_row(summary)
    grid.add_row(table)
    return Panel(grid, title="Crosscheck", border_style="red", padding=(1, 1))
