"""LegalFlow CLI commands.

Each command module contains the business logic for a CLI command.
The cli.py module handles typer options and argument parsing,
then delegates to these command functions.
"""

from legalflow.commands.agents import agents_command
from legalflow.commands.init import init_command
from legalflow.commands.plan import plan_command
from legalflow.commands.run import run_command

__all__ = [
    "agents_command",
    "init_command",
    "plan_command",
    "run_command",
]
