"""LegalFlow CLI - Main entry point.

Commands:
- run: Plan and execute a legal workflow
- plan: Generate a plan without executing it
- agents: List agent capabilities
- init: Write an example project config
"""

import logging
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from legalflow import __version__
from legalflow.commands import agents_command, init_command, plan_command, run_command
from legalflow.display import console

app = typer.Typer(
    help="LegalFlow - multi-step legal workflows.\n\n"
    "Turns a legal objective into a plan of AI agent steps and runs it.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"legalflow {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
    )


ModelOption = Annotated[
    Optional[str],
    typer.Option("--model", "-m", help="Model name, e.g. gpt-4o or openai:gpt-4o-mini"),
]
ProviderOption = Annotated[
    Optional[str],
    typer.Option("--provider", "-p", help="openai, anthropic, groq, ollama or google-gla"),
]
DryOption = Annotated[
    bool, typer.Option("--dry", help="Use demo responses instead of calling a model")
]
VerboseOption = Annotated[bool, typer.Option("--verbose", help="Show debug logging")]


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """LegalFlow - multi-step legal workflows."""
    pass


@app.command()
def run(
    objective: Annotated[str, typer.Argument(help="Legal objective to plan and run")],
    dry: DryOption = False,
    model: ModelOption = None,
    provider: ProviderOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
    outputs: Annotated[
        bool, typer.Option("--outputs", "-o", help="Print each completed step's output")
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Plan and execute a workflow.

    Examples:
        legalflow run "Research non-compete law in California then draft a clause"
        legalflow run "Review this lease and predict the outcome" --dry
        legalflow run "..." --json > result.json
    """
    setup_logging(verbose)
    run_command(objective, dry, model, provider, as_json=as_json, show_outputs=outputs)


@app.command()
def plan(
    objective: Annotated[str, typer.Argument(help="Legal objective to plan")],
    dry: DryOption = False,
    model: ModelOption = None,
    provider: ProviderOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Generate a plan without executing it.

    Examples:
        legalflow plan "Research X then draft Y"
        legalflow plan "Research X then draft Y" --dry
    """
    setup_logging(verbose)
    plan_command(objective, dry, model, provider)


@app.command()
def agents() -> None:
    """List agent capabilities and how plan steps map onto their inputs."""
    agents_command()


@app.command()
def init(
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite an existing config")
    ] = False,
) -> None:
    """Write an example .legalflow/config.yaml.

    Examples:
        legalflow init
        legalflow init --force
    """
    init_command(force)


if __name__ == "__main__":
    app()
