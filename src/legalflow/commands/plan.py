"""Plan command implementation."""

import asyncio

from legalflow.commands._common import EXIT_USAGE, build_service, resolve_config
from legalflow.display import console, print_error, print_plan
from legalflow.exceptions import LegalFlowError
from legalflow_runtime import Orchestrator


def plan_command(
    objective: str,
    dry: bool,
    model: str | None = None,
    provider: str | None = None,
) -> None:
    """Generate and print a plan without executing it.

    This function contains the business logic for the plan command.
    """
    config = resolve_config(model, provider)
    service = build_service(config, dry)
    orchestrator = Orchestrator(service, defaults=config.defaults, policy=config.execution)

    try:
        plan = asyncio.run(orchestrator.plan(objective))
    except LegalFlowError as e:
        print_error(e.message)
        raise SystemExit(EXIT_USAGE) from None

    console.print()
    print_plan(plan)
    for step in plan:
        console.print(f"\n[bold cyan]{step.step_number}.[/] [bold]{step.agent}[/]")
        console.print(f"  {step.instruction}")
