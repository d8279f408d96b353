"""Progress tracking utilities."""

from typing import Any

from rich.console import Console
from rich.progress import (
    Progress,
    BarColumn,
    TextColumn,
    TimeRemainingColumn,
    MofNCompleteColumn,
)

from collection_export.core.errors import ExportError


class ProgressTracker:
    """Builds export progress bars and prints export status lines."""

    def __init__(self, console: Console = None):
        """
        Initialize progress tracker with console.

        Args:
            console: Console to render on; a default stdout console otherwise
        """
        self.console = console or Console()

    def create_progress_bar(self) -> Progress:
        """
        Create configured Progress instance.

        Returns:
            Progress for context manager use, passable to Exporter.export
        """
        return Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            "[progress.percentage]{task.percentage:>3.0f}%",
            "•",
            MofNCompleteColumn(),
            "•",
            TimeRemainingColumn(),
            console=self.console,
            transient=True
        )

    def run_export(self, exporter: Any, collection: Any) -> str:
        """
        Export a collection behind a progress bar and report the outcome.

        Args:
            exporter: Exporter to run
            collection: Records to export

        Returns:
            Full path to exported file
        """
        try:
            with self.create_progress_bar() as progress:
                filepath = exporter.export(collection, progress=progress)
        except (ExportError, OSError) as e:
            self.print_error(f"Export to {exporter.full_path} failed: {e}")
            raise

        self.print_success(f"Exported to [cyan]{filepath}[/cyan]")
        return filepath

    def print_success(self, message: str):
        """Print success message."""
        self.console.print(f"✅ {message}")

    def print_error(self, message: str):
        """Print error message."""
        self.console.print(f"❌ {message}")
