from typing import IO

import click

from glass_solver.crosscheck import DEFAULT_MAX_CAPACITY, crosscheck as run_crosscheck
from glass_solver.solver import solve as solve_instance
from glass_solver.ui import get_console, get_progress, render_report
from glass_solver.utils import configure_logging, read_instance, InstanceFormatError


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Log solver decisions to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Minimum fill/empty/pour operations to reach target glass levels."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(solve)


@cli.command()
@click.argument("input_file", type=click.File("r"), default="-")
@click.option("--exact", is_flag=True, help="Key visited states exactly instead of by fingerprint")
def solve(input_file: IO[str], exact: bool):
    """Solve one instance read from INPUT_FILE (stdin by default)."""
    try:
        instance = read_instance(input_file)
    except InstanceFormatError as e:
        raise click.ClickException(str(e)) from e

    click.echo(solve_instance(instance.capacities, instance.targets, exact=exact))


@cli.command()
@click.option("--max-capacity", "-m", default=DEFAULT_MAX_CAPACITY, show_default=True, type=click.IntRange(min=1))
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
def crosscheck(max_capacity: int, as_json: bool):
    """Compare the two-glass closed form against exhaustive search."""
    console = get_console()
    with get_progress(console) as progress:
        task = progress.add_task("Sweeping capacity pairs", total=max_capacity * max_capacity)
        report = run_crosscheck(max_capacity, progress=progress, task=task)

    if as_json:
        click.echo(report.model_dump_json(indent=2))
    else:
        console.print(render_report(report))

    if not report.ok:
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
