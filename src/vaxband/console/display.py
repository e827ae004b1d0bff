"""Display components for console output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from vaxband.core.models import EMPTY_DISPLAY
from vaxband.core.status import cell_status
from vaxband.core.types import AgeBand, CellStatus


if TYPE_CHECKING:
    from rich.console import Console

    from vaxband.core.models import ClassifiedVaccine, Evaluation, LabRecommendation, ReferenceTable

PROMPT_MESSAGE = "Enter a valid date of birth to view results."
NO_LABS_MESSAGE = "No lab tests are required for this age."

STATUS_STYLES = {
    CellStatus.YES: "green",
    CellStatus.NO: "red",
    CellStatus.SOMETIMES: "yellow",
    CellStatus.INFO: "cyan",
}


def print_age_summary(console: Console, evaluation: Evaluation) -> None:
    """Print the exact age and band pills."""
    age_text = evaluation.age.label if evaluation.age else EMPTY_DISPLAY
    band_text = evaluation.band.label if evaluation.band else EMPTY_DISPLAY
    console.print(
        f"[bold]Exact Age:[/bold] {age_text}    [bold]Age Band:[/bold] [cyan]{band_text}[/cyan]"
    )


def print_prompt(console: Console) -> None:
    """Print the state shown when there is no valid birth date."""
    console.print(f"  [yellow]⚠[/yellow] {PROMPT_MESSAGE}")


def _vaccine_table(title: str, items: list[ClassifiedVaccine], empty: str) -> Table | str:
    if not items:
        return f"[dim]{empty}[/dim]"
    table = Table(title=f"{title} ({len(items)})", border_style="dim", title_justify="left")
    table.add_column("Vaccine", style="bold", width=28)
    table.add_column("Status", width=10)
    table.add_column("Note")
    for item in items:
        style = STATUS_STYLES[item.cell_status]
        table.add_row(
            escape(item.vaccine_name),
            f"[{style}]{item.cell_status.badge}[/{style}]",
            escape(item.cell_text) or EMPTY_DISPLAY,
        )
    return table


def print_vaccine_groups(console: Console, evaluation: Evaluation) -> None:
    """Print required, not required and case-by-case vaccines."""
    groups = evaluation.vaccines
    if groups is None:
        print_prompt(console)
        return
    console.print(_vaccine_table("YES (Required)", groups.required,
                                 "No required vaccines in this band."))
    console.print(_vaccine_table("NO (Not Required)", groups.not_required,
                                 "No “not required” items in this band."))
    if groups.other:
        console.print(_vaccine_table("Case-by-case / Info", groups.other, ""))


def print_labs(console: Console, labs: list[LabRecommendation] | None) -> None:
    """Print recommended lab tests."""
    if labs is None:
        print_prompt(console)
        return
    if not labs:
        console.print(f"  [dim]{NO_LABS_MESSAGE}[/dim]")
        return
    table = Table(title="Recommended Labs", border_style="blue", title_justify="left")
    table.add_column("Test", style="bold")
    table.add_column("Reason", style="dim")
    for lab in labs:
        table.add_row(escape(lab.test_name), escape(lab.rationale))
    console.print(table)


def print_bands(console: Console, columns: dict[AgeBand, str]) -> None:
    """Print the age bands with their table column headers."""
    table = Table(title="Age Bands", border_style="blue")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Band", style="bold")
    table.add_column("Label")
    table.add_column("Column Header", style="dim")
    for band in AgeBand:
        table.add_row(str(band.rank), band.value, band.label, escape(columns.get(band, EMPTY_DISPLAY)))
    console.print(table)


def print_table_stats(console: Console, reference: ReferenceTable) -> None:
    """Print per-band status counts for a reference table."""
    console.print(
        Panel(
            f"[bold]Source:[/bold] {escape(reference.source)}\n"
            f"[bold]Vaccines:[/bold] {len(reference)}",
            title="Reference Table",
            border_style="blue",
        )
    )
    table = Table(title="Status by Band", border_style="dim")
    table.add_column("Band", style="bold")
    for status in CellStatus:
        table.add_column(status.badge, justify="right", style=STATUS_STYLES[status])
    for band in AgeBand:
        counts = dict.fromkeys(CellStatus, 0)
        for record in reference.records:
            counts[cell_status(record.cell(band))] += 1
        table.add_row(band.label, *(str(counts[status]) for status in CellStatus))
    console.print(table)
