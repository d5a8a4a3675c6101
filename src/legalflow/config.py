"""Project configuration schema and loading."""

import os
from pathlib import Path
from typing import Any, get_args

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from legalflow.exceptions import ConfigurationError
from legalflow_ai.config import AIConfig, ModelProvider
from legalflow_runtime.config import CapabilityDefaults, ExecutionPolicy

CONFIG_DIR = ".legalflow"
CONFIG_FILE = "config.yaml"

MODEL_ENV_VAR = "LEGALFLOW_MODEL"
PROVIDER_ENV_VAR = "LEGALFLOW_PROVIDER"


class LegalFlowConfig(BaseModel):
    """Complete LegalFlow configuration.

    Loaded from .legalflow/config.yaml. Values are applied with precedence:
    1. CLI flags (highest)
    2. Environment (LEGALFLOW_MODEL, LEGALFLOW_PROVIDER)
    3. .legalflow/config.yaml
    4. Defaults (lowest)
    """

    ai: AIConfig = Field(default_factory=AIConfig)
    defaults: CapabilityDefaults = Field(default_factory=CapabilityDefaults)
    execution: ExecutionPolicy = Field(default_factory=ExecutionPolicy)


def config_path(project_root: Path | None = None) -> Path:
    if project_root is None:
        project_root = Path.cwd()
    return project_root / CONFIG_DIR / CONFIG_FILE


def _check_provider(provider: str, source: str) -> ModelProvider:
    if provider not in get_args(ModelProvider):
        raise ConfigurationError(
            f"Unknown provider '{provider}' in {source}; "
            f"expected one of: {', '.join(get_args(ModelProvider))}"
        )
    return provider  # type: ignore[return-value]


def apply_env_overrides(config: LegalFlowConfig) -> LegalFlowConfig:
    """Apply LEGALFLOW_MODEL / LEGALFLOW_PROVIDER on top of ``config``."""
    model = os.environ.get(MODEL_ENV_VAR)
    provider = os.environ.get(PROVIDER_ENV_VAR)
    if not model and not provider:
        return config

    updated = config.model_copy(deep=True)
    if model:
        updated.ai.model = model
    if provider:
        updated.ai.provider = _check_provider(provider, PROVIDER_ENV_VAR)
    return updated


def load_config(project_root: Path | None = None, use_env: bool = True) -> LegalFlowConfig:
    """Load configuration from .legalflow/config.yaml.

    Args:
        project_root: Project root directory (contains .legalflow/). Defaults to cwd.
        use_env: Apply environment variable overrides

    Returns:
        LegalFlowConfig with values from file, environment or defaults

    Raises:
        ConfigurationError: If the file is not valid YAML or has invalid values

    Example:
        config = load_config()
        print(f"Max steps: {config.execution.max_steps}")
    """
    path = config_path(project_root)

    raw_config: Any = {}
    if path.exists():
        try:
            with open(path) as f:
                raw_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigurationError(f"Invalid config in {path}: expected a mapping at the top level")

    try:
        config = LegalFlowConfig.model_validate(raw_config)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid config in {path}: {e}") from e

    return apply_env_overrides(config) if use_env else config


def merge_cli_overrides(
    config: LegalFlowConfig,
    model: str | None = None,
    provider: str | None = None,
) -> LegalFlowConfig:
    """Merge CLI flag overrides into config.

    Args:
        config: Base configuration from file and environment
        model: CLI override for the model name
        provider: CLI override for the provider

    Returns:
        New LegalFlowConfig with overrides applied

    Example:
        config = load_config()
        config = merge_cli_overrides(config, model="gpt-4o")
    """
    # Create a copy to avoid mutating original
    updated = config.model_copy(deep=True)

    if model is not None:
        updated.ai.model = model

    if provider is not None:
        updated.ai.provider = _check_provider(provider, "--provider")

    return updated


def save_example_config(output_path: Path) -> None:
    """Save an example configuration to file.

    Args:
        output_path: Path to write example config.yaml
    """
    defaults = LegalFlowConfig()
    example = {
        "ai": {
            "provider": "openai",
            "model": "gpt-4o-mini",
            "temperature": defaults.ai.temperature,
            "timeout": defaults.ai.timeout,
            "retries": defaults.ai.retries,
        },
        "defaults": defaults.defaults.model_dump(),
        "execution": defaults.execution.model_dump(),
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        yaml.dump(example, f, default_flow_style=False, sort_keys=False)
