"""Agents command implementation."""

from legalflow.commands._common import resolve_config
from legalflow.display import print_agents


def agents_command() -> None:
    """List agent capabilities with the defaults from the project config."""
    config = resolve_config(None, None)
    print_agents(config.defaults)
