"""goto-slnx CLI - convert Visual Studio .sln files to .slnx."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from goto_slnx.config import ConvertConfig, ConvertResult
from goto_slnx.errors import SlnxError
from goto_slnx.pipeline import run_pipeline


@click.group()
def cli() -> None:
    """goto-slnx - One-step conversion of .sln solutions to .slnx."""
    pass


def _configure_logging(verbose: bool) -> None:
    from rich.console import Console
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _run_with_progress(config: ConvertConfig) -> ConvertResult:
    """Run the pipeline with Rich progress display."""
    from rich.console import Console
    from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
    from rich.table import Table

    console = Console()

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Initialising...", total=None)

        def on_phase(name, label):
            progress.update(task, description=label)

        result = run_pipeline(config, progress_callback=on_phase)

    # Summary table
    stats = result.stats
    table = Table(title=f"goto-slnx: {Path(result.input_path).name}", show_edge=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Projects", str(stats.get("projects", 0)))
    table.add_row("Folders", str(stats.get("folders", 0)))
    table.add_row("Solution configurations", str(stats.get("solution_configs", 0)))
    table.add_row("Build types", str(stats.get("build_types", 0)))
    table.add_row("Platforms", str(stats.get("platforms", 0)))
    table.add_row("Dependencies", str(stats.get("dependencies", 0)))
    table.add_row("Duration", f"{result.duration_ms:.1f}ms")

    console.print(table)

    if config.verbose and result.timings:
        timing_table = Table(title="Phase Timings", show_edge=False)
        timing_table.add_column("Phase", style="bold")
        timing_table.add_column("Time (ms)", justify="right")
        for phase, seconds in result.timings.items():
            timing_table.add_row(phase, f"{seconds * 1000:.1f}")
        console.print(timing_table)

    return result


def _run_quiet(config: ConvertConfig) -> ConvertResult:
    """Run the pipeline with no output."""
    return run_pipeline(config)


@cli.command("convert")
@click.argument("path", type=click.Path(exists=True))
@click.option("-o", "--output", "output_path", default=None, help="Output .slnx path (default: next to the .sln)")
@click.option("-f", "--force", is_flag=True, help="Overwrite an existing .slnx file")
@click.option("--dry-run", is_flag=True, help="Print the .slnx document instead of writing it")
@click.option("--verbose", is_flag=True, help="Show debug logging and per-phase timings")
@click.option("--quiet", is_flag=True, help="Suppress all output except errors")
def convert_cmd(
    path: str,
    output_path: str | None,
    force: bool,
    dry_run: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Convert PATH (a .sln file, or a directory holding one) to .slnx."""
    _configure_logging(verbose and not quiet)

    config = ConvertConfig(
        input_path=path,
        output_path=output_path,
        force=force,
        dry_run=dry_run,
        verbose=verbose,
        quiet=quiet,
    )

    try:
        if quiet or dry_run:
            result = _run_quiet(config)
        else:
            result = _run_with_progress(config)
    except SlnxError as e:
        raise click.ClickException(e.message) from e

    if dry_run:
        click.echo(result.document, nl=False)
        return

    if not quiet:
        from rich.console import Console
        Console().print(f"[green]Output written to:[/green] {result.output_path}")


if __name__ == "__main__":
    cli()
