"""Main CLI interface for Loom Downloader."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Any

import click
from rich.markup import escape

from loom_downloader import __version__
from loom_downloader.application.use_cases.check_dependencies import CheckDependenciesUseCase
from loom_downloader.application.use_cases.load_url_list import (
    DEFAULT_INPUT_FILE,
    LoadUrlListUseCase,
)
from loom_downloader.cli.utils import (
    RichDownloadReporter,
    console,
    display_batch_summary,
    display_dry_run_banner,
    display_dry_run_complete,
    display_error,
)
from loom_downloader.domain.exceptions import (
    ConfigurationError,
    DependencyMissingError,
    InputFileError,
    LoomDownloaderError,
)
from loom_downloader.domain.models.processing import BatchRun
from loom_downloader.infrastructure.container import (
    create_container,
    get_batch_service,
    get_configuration_provider,
)
from loom_downloader.infrastructure.logging_setup import configure_logging


class DownloaderCommand(click.Command):
    """Command that exits with status 1 on usage errors such as unknown options."""

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = 1
            raise


@click.command(cls=DownloaderCommand)
@click.version_option(version=__version__, prog_name="Loom Downloader")
@click.argument(
    "input_file",
    required=False,
    default=DEFAULT_INPUT_FILE,
    type=click.Path(path_type=Path),
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Download only the first URL to test the workflow",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output and list available formats before downloading",
)
@click.option(
    "--output",
    "-o",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Directory to save downloaded videos to (created if missing)",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to an optional YAML configuration file",
)
def cli(
    input_file: Path,
    dry_run: bool,
    verbose: bool,
    output_dir: Path,
    config_path: Path | None,
) -> None:
    """
    Loom Downloader - Batch-download videos that have an audio track.

    Reads one URL per line from INPUT_FILE (blank lines and lines starting
    with '#' are ignored). Videos without an audio stream are skipped; split
    video and audio streams are merged into a single MP4.
    """
    try:
        container = create_container(config_path)
    except ConfigurationError as e:
        console.print(f"[red]❌ Configuration Error:[/red] {escape(str(e))}")
        sys.exit(1)

    config_provider = get_configuration_provider(container)
    configure_logging(config_provider.get_logging_config(), verbose=verbose)

    dependency_check = CheckDependenciesUseCase(config_provider)
    try:
        dependency_check.ensure()
    except DependencyMissingError as e:
        for executable in e.missing:
            hint = dependency_check.install_hint(executable)
            display_error(
                f"{executable} is not installed",
                f"Install with: {hint}" if hint else None,
            )
        sys.exit(1)

    try:
        urls = LoadUrlListUseCase(input_file).execute()
    except InputFileError as e:
        display_error(e.message, f"Please create '{input_file}' with one Loom URL per line.")
        sys.exit(1)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        display_error(f"Cannot create output directory '{output_dir}': {e}")
        sys.exit(1)

    run = BatchRun(urls=urls, output_dir=output_dir, dry_run=dry_run, verbose=verbose)

    if dry_run:
        display_dry_run_banner()
        if not urls:
            console.print(f"[red]No URLs found in {escape(str(input_file))}[/red]")
            sys.exit(1)
    else:
        console.print(f"[green]Reading URLs from {escape(str(input_file))}...[/green]")
        console.print(f"[green]Downloading to {escape(str(output_dir))}...[/green]")

    try:
        service = get_batch_service(container, reporter=RichDownloadReporter(verbose=verbose))
        asyncio.run(service.process_batch(run))
    except LoomDownloaderError as e:
        console.print(f"[red]❌ Error:[/red] {escape(str(e))}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]❌ Unexpected Error:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        sys.exit(1)

    if dry_run:
        display_dry_run_complete()
        return

    display_batch_summary(run, verbose=verbose)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
