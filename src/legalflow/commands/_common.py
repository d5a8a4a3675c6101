"""Helpers shared by the plan and run commands."""

from legalflow.config import LegalFlowConfig, load_config, merge_cli_overrides
from legalflow.display import print_error, print_info, print_warning
from legalflow.exceptions import ConfigurationError
from legalflow_ai import PydanticAIService, demo_service
from legalflow_ai.config import get_api_key
from legalflow_ai.service import GenerativeModelService

# Exit code for plan generation and configuration errors
EXIT_USAGE = 2


def resolve_config(model: str | None, provider: str | None) -> LegalFlowConfig:
    """Load the project config with CLI overrides, exiting on invalid config."""
    try:
        return merge_cli_overrides(load_config(), model=model, provider=provider)
    except ConfigurationError as e:
        print_error(e.message)
        raise SystemExit(EXIT_USAGE) from None


def build_service(
    config: LegalFlowConfig, dry: bool, quiet: bool = False
) -> GenerativeModelService:
    """Demo service for --dry runs, otherwise the configured model."""
    if dry:
        if not quiet:
            print_info("Dry run: using demo responses, no model calls are made")
        return demo_service()

    service = PydanticAIService(config.ai)
    provider = service.model.split(":", 1)[0]
    if provider != "ollama" and not get_api_key(provider):  # type: ignore[arg-type]
        print_warning(f"No API key found for provider '{provider}'")
    if not quiet:
        print_info(f"Using model [cyan]{service.model}[/]")
    return service
