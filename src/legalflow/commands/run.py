"""Run command implementation."""

import asyncio

import typer

from legalflow.commands._common import EXIT_USAGE, build_service, resolve_config
from legalflow.display import console, print_error, print_event, print_result
from legalflow.exceptions import LegalFlowError
from legalflow_runtime import LocalEventBus, run_workflow


def run_command(
    objective: str,
    dry: bool,
    model: str | None = None,
    provider: str | None = None,
    as_json: bool = False,
    show_outputs: bool = False,
) -> None:
    """Plan and execute a workflow.

    This function contains the business logic for the run command.
    Exits 1 when a step fails or the run is cancelled, 2 when no plan could
    be generated or the configuration is invalid.
    """
    config = resolve_config(model, provider)
    service = build_service(config, dry, quiet=as_json)

    bus = LocalEventBus()
    if not as_json:
        bus.subscribe(print_event)
        console.print()

    try:
        result = asyncio.run(
            run_workflow(
                objective,
                service=service,
                defaults=config.defaults,
                policy=config.execution,
                event_bus=bus,
            )
        )
    except LegalFlowError as e:
        print_error(e.message)
        raise SystemExit(EXIT_USAGE) from None

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        print_result(result, show_outputs=show_outputs)

    if not result.succeeded:
        raise SystemExit(1)
