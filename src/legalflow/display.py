"""Rich display utilities for the LegalFlow CLI."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from legalflow_runtime.capabilities import CAPABILITIES
from legalflow_runtime.config import CapabilityDefaults
from legalflow_runtime.events import (
    Event,
    StepActivatedEvent,
    StepCompletedEvent,
    StepFailedEvent,
    WorkflowStartedEvent,
)
from legalflow_runtime.models import PlanStep, RunStatus, StepStatus, WorkflowResult

console = Console()

STATUS_STYLES = {
    StepStatus.PENDING: ("○", "dim"),
    StepStatus.ACTIVE: ("●", "yellow"),
    StepStatus.COMPLETED: ("✓", "green"),
    StepStatus.ERROR: ("✗", "red"),
}


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]✓[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]✗[/] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[bold yellow]⚠[/] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[bold blue]ℹ[/] {message}")


def _status_cell(status: StepStatus) -> str:
    icon, style = STATUS_STYLES[status]
    return f"[{style}]{icon} {status.value}[/]"


def print_plan(plan: list[PlanStep], title: str = "Plan") -> None:
    """Print a table of plan steps."""
    table = Table(title=title)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Agent", style="bold")
    table.add_column("Summary")
    table.add_column("Status")

    for step in plan:
        table.add_row(
            str(step.step_number),
            step.agent,
            step.summary or step.instruction,
            _status_cell(step.status),
        )

    console.print(table)


def print_event(event: Event) -> None:
    """Print one run event as a progress line. Used as an event bus handler."""
    if isinstance(event, WorkflowStartedEvent):
        print_info(f"Run [cyan]{event.run_id}[/] started with {event.total_steps} steps")
    elif isinstance(event, StepActivatedEvent):
        console.print(
            f"  [yellow]●[/] Step {event.step_number} [bold]{event.step.agent}[/]: "
            f"{event.step.summary}"
        )
    elif isinstance(event, StepCompletedEvent):
        console.print(
            f"  [green]✓[/] Step {event.step_number} completed "
            f"[dim]({event.duration_seconds:.2f}s)[/]"
        )
    elif isinstance(event, StepFailedEvent):
        console.print(f"  [red]✗[/] Step {event.step_number} failed: {event.error}")


def print_result(result: WorkflowResult, show_outputs: bool = False) -> None:
    """Print the outcome panel of a run."""
    if show_outputs:
        for step in result.steps_with_status(StepStatus.COMPLETED):
            console.print()
            console.print(
                Panel(
                    json.dumps(step.result, indent=2, ensure_ascii=False),
                    title=f"[bold]Step {step.step_number} ({step.agent})[/]",
                    border_style="dim",
                )
            )

    console.print()
    print_plan(result.plan, title="Final plan")

    if result.succeeded:
        style, heading = "green", "✓ Success"
    elif result.status == RunStatus.CANCELLED:
        style, heading = "yellow", "⚠ Cancelled"
    else:
        style, heading = "red", "✗ Failed"

    body = (
        f"[bold {style}]{result.outcome}[/]\n\n"
        f"[bold]Run:[/] {result.run_id}\n"
        f"[bold]Duration:[/] {result.duration_seconds:.2f}s"
    )
    if result.error:
        body += f"\n[bold]Error:[/] {result.error}"

    console.print()
    console.print(Panel(body, title=f"[bold {style}]{heading}[/]", border_style=style))


def print_agents(defaults: CapabilityDefaults) -> None:
    """Print the agent capabilities with their input mapping."""
    table = Table(title="Agents")
    table.add_column("Agent", style="cyan")
    table.add_column("Description")
    table.add_column("Input mapping")

    values = defaults.model_dump()
    for kind, capability in CAPABILITIES.items():
        lines = []
        for field, source in capability.mapping.items():
            if source.startswith("defaults."):
                _, section, key = source.split(".")
                source = f"{values[section][key]!r} [dim](default)[/]"
            lines.append(f"{field} ← {source}")
        table.add_row(kind.value, capability.description, "\n".join(lines))

    console.print(table)
