"""Rich console logging and output for evaluations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from vaxband.console.display import (
    print_age_summary,
    print_bands,
    print_labs,
    print_table_stats,
    print_vaccine_groups,
)


if TYPE_CHECKING:
    from vaxband.core.models import Evaluation, ReferenceTable
    from vaxband.core.types import AgeBand


class EvaluationConsole:
    """Rich console interface for evaluation results."""

    def __init__(self, verbose: bool = False) -> None:
        self.console = Console()
        self.verbose = verbose

    def setup_logging(self, level: str = "INFO") -> None:
        logging.basicConfig(
            level=level if self.verbose else "WARNING",
            format="%(message)s",
            handlers=[
                RichHandler(
                    console=self.console, rich_tracebacks=True, show_time=False, show_path=False
                )
            ],
            force=True,
        )

    def print_header(self, birth_date: str, reference_date: str) -> None:
        header = Text()
        header.append("vaxband", style="bold blue")
        header.append(" - Age-Based Vaccine Checker\n\n", style="dim")
        header.append("Date of Birth: ", style="bold")
        header.append(f"{birth_date}\n", style="green")
        header.append("As of: ", style="bold")
        header.append(reference_date, style="dim")
        self.console.print(Panel(header, border_style="blue"))

    def print_evaluation(self, evaluation: Evaluation) -> None:
        self.print_header(evaluation.birth_date, evaluation.reference_date.isoformat())
        print_age_summary(self.console, evaluation)
        self.console.print("\n[bold]Recommended Labs[/bold]")
        print_labs(self.console, evaluation.labs)
        self.console.print("\n[bold]Vaccines (from table)[/bold]")
        print_vaccine_groups(self.console, evaluation)

    def print_json(self, evaluation: Evaluation) -> None:
        self.console.print_json(data=evaluation.to_display_data())

    def print_bands(self, columns: dict[AgeBand, str]) -> None:
        print_bands(self.console, columns)

    def print_table_stats(self, reference: ReferenceTable) -> None:
        print_table_stats(self.console, reference)

    def print_error(self, error: str) -> None:
        self.console.print()
        self.console.print(
            Panel(f"[red]{escape(error)}[/red]", title="[red]Error[/red]", border_style="red")
        )
