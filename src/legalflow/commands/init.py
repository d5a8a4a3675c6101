"""Init command implementation."""

from legalflow.config import config_path, save_example_config
from legalflow.display import console, print_error, print_info, print_success


def init_command(force: bool = False) -> None:
    """Write an example .legalflow/config.yaml in the current project.

    This function contains the business logic for the init command.
    """
    path = config_path()
    if path.exists() and not force:
        print_info(f"LegalFlow is already initialized ({path})")
        console.print("  Use [cyan]legalflow init --force[/] to overwrite it")
        return

    try:
        save_example_config(path)
    except OSError as e:
        print_error(f"Failed to write {path}: {e}")
        raise SystemExit(1) from None

    print_success(f"Wrote example config to {path}")
    console.print()
    console.print("[bold]Next steps:[/]")
    console.print("  1. Set your provider's API key, e.g. [cyan]export OPENAI_API_KEY=...[/]")
    console.print('  2. Try a dry run: [cyan]legalflow run "Research X then draft Y" --dry[/]')
