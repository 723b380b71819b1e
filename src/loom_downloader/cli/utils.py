"""Utility functions for CLI output."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from loom_downloader.domain.models.formats import FormatSet
from loom_downloader.domain.models.processing import (
    BatchRun,
    DownloadOutcome,
    VerificationResult,
)
from loom_downloader.domain.models.strategy import DownloadStrategy
from loom_downloader.domain.services.download_reporter import DownloadReporter

console = Console()


class RichDownloadReporter(DownloadReporter):
    """Prints a colored status line for each pipeline event."""

    def __init__(self, output: Console | None = None, verbose: bool = False) -> None:
        self.console = output or console
        self.verbose = verbose

    def url_started(self, url: str) -> None:
        self.console.print()
        self.console.rule(style="blue")
        self.console.print(f"[blue]Processing: {escape(url)}[/blue]")
        self.console.rule(style="blue")

    def listing_formats(self, url: str) -> None:
        self.console.print("[blue]Checking available formats...[/blue]")

    def audio_detected(self, format_set: FormatSet) -> None:
        self.console.print("[green]✓ Audio stream detected[/green]")
        if self.verbose and format_set.title:
            self.console.print(f"[dim]Title: {escape(format_set.title)}[/dim]")

    def url_skipped(self, outcome: DownloadOutcome, format_set: FormatSet) -> None:
        self.console.print("[red]⚠️  SKIPPING: No audio stream detected for this video[/red]")
        if format_set.inspection_failed:
            self.console.print(
                f"[yellow]Format metadata could not be read: "
                f"{escape(format_set.inspection_error or '')}[/yellow]"
            )
        self.console.print("[yellow]This video will not be downloaded.[/yellow]")

    def download_started(self, url: str, strategy: DownloadStrategy) -> None:
        if self.verbose:
            self.console.print(f"[dim]Formats: {escape(str(strategy))}[/dim]")
        self.console.print("[green]Downloading...[/green]")

    def download_succeeded(self, url: str) -> None:
        self.console.print("[green]✓ Download complete[/green]")

    def download_failed(self, url: str, error: Exception) -> None:
        self.console.print("[red]✗ Download failed[/red]")
        if self.verbose:
            self.console.print(f"[dim]{escape(str(error))}[/dim]")

    def verification_finished(self, result: VerificationResult, path: Path | None) -> None:
        if result == VerificationResult.CONFIRMED:
            self.console.print("[green]✓ Audio verified in downloaded file[/green]")
        else:
            self.console.print("[yellow]⚠️  Warning: Could not verify audio in downloaded file[/yellow]")

    def url_finished(self, outcome: DownloadOutcome) -> None:
        if outcome.is_skipped and outcome.reason and self.verbose:
            self.console.print(f"[dim]Skipped: {escape(outcome.reason)}[/dim]")


def display_error(message: str, hint: str | None = None) -> None:
    """Display a fatal error with an optional follow-up hint."""
    console.print(f"[red]Error: {escape(message)}[/red]")
    if hint:
        console.print(escape(hint))


def display_dry_run_banner() -> None:
    """Announce dry-run mode."""
    console.print(Panel(
        "[yellow]Will download only the first URL to test the workflow[/yellow]",
        title="[yellow]=== DRY RUN MODE ===[/yellow]",
        border_style="yellow"
    ))


def display_dry_run_complete() -> None:
    """Close a dry run with the hint to run the full batch."""
    console.print(Panel(
        "[yellow]If successful, run without --dry-run to download all videos[/yellow]",
        title="[green]=== DRY RUN COMPLETE ===[/green]",
        border_style="green"
    ))


def format_duration(seconds: float | None) -> str:
    """Format duration in seconds to human-readable format."""
    if seconds is None:
        return "Unknown"

    seconds = int(seconds)
    if seconds < 60:
        return f"{seconds}s"
    elif seconds < 3600:
        minutes = seconds // 60
        remaining_seconds = seconds % 60
        return f"{minutes}m {remaining_seconds}s"
    else:
        hours = seconds // 3600
        minutes = (seconds % 3600) // 60
        return f"{hours}h {minutes}m"


def display_batch_summary(run: BatchRun, verbose: bool = False) -> None:
    """Display the final tally of a batch run."""
    stats = run.stats

    console.print()
    console.rule("[blue]SUMMARY[/blue]", style="blue")
    console.print(f"[green]Successfully downloaded: {stats.succeeded}[/green]")
    console.print(f"[yellow]Skipped (no audio): {stats.skipped}[/yellow]")
    console.print(f"[red]Failed: {stats.failed}[/red]")

    if verbose:
        if stats.is_completed:
            console.print(f"[dim]Processing time: {format_duration(stats.processing_time_seconds)}[/dim]")
        for outcome in run.skipped_outcomes:
            console.print(f"[dim]  - {escape(outcome.url)}: {escape(outcome.reason or '')}[/dim]")
        for outcome in run.failed_outcomes:
            console.print(f"[dim]  ✗ {escape(outcome.url)}: {escape(outcome.reason or '')}[/dim]")
        for outcome in run.successful_outcomes:
            if outcome.verification is not None and not outcome.is_verified:
                console.print(f"[dim]  ? {escape(outcome.url)}: audio not verified[/dim]")

    console.print("\n[green]Done![/green]")
