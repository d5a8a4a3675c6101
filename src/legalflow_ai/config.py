"""AI model configuration for LegalFlow agents."""

import os
from typing import Literal

from pydantic import BaseModel, Field

ModelProvider = Literal["openai", "anthropic", "groq", "ollama", "google-gla"]


class AIConfig(BaseModel):
    """Configuration for AI model access."""

    provider: ModelProvider | None = Field(default=None)
    model: str | None = Field(default=None)
    temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    max_tokens: int | None = Field(default=None)
    timeout: float = Field(default=120.0, gt=0.0)
    retries: int = Field(default=1, ge=0, description="Output validation retries inside one call")


# Default model mappings
DEFAULT_MODELS = {
    "openai": "gpt-4o-mini",
    "anthropic": "claude-3-5-sonnet-latest",
    "groq": "llama-3.1-70b-versatile",
    "ollama": "llama3.2",
    "google-gla": "gemini-2.0-flash",
}

# Environment variable names for API keys
API_KEY_ENV_VARS = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "groq": "GROQ_API_KEY",
    "google-gla": "GEMINI_API_KEY",
}


def get_api_key(provider: ModelProvider) -> str | None:
    """Get API key from environment for the given provider."""
    env_var = API_KEY_ENV_VARS.get(provider)
    if env_var:
        return os.environ.get(env_var)
    return None


def infer_provider(model: str | None) -> ModelProvider:
    """Guess the provider from a bare model name."""
    if model is None:
        return "openai"
    if model.startswith("gpt") or model.startswith("o1"):
        return "openai"
    if model.startswith("claude"):
        return "anthropic"
    if model.startswith("gemini"):
        return "google-gla"
    if model.startswith("llama") or model.startswith("mixtral"):
        return "groq"
    return "openai"


def get_model(
    model: str | None = None,
    provider: ModelProvider | None = None,
) -> str:
    """Build a PydanticAI model string.

    Args:
        model: Model name (e.g., "gpt-4o", "claude-3-5-sonnet-latest").
            A name that already carries a "provider:" prefix is returned as is.
        provider: Provider name (inferred from model if not specified)

    Returns:
        Model string understood by pydantic_ai.Agent, e.g. "openai:gpt-4o-mini"
    """
    if model and ":" in model and model.split(":", 1)[0] in DEFAULT_MODELS:
        return model

    if provider is None:
        provider = infer_provider(model)

    if model is None:
        model = DEFAULT_MODELS.get(provider, "gpt-4o-mini")

    return f"{provider}:{model}"


def model_string(config: AIConfig) -> str:
    """Model string for a whole AIConfig."""
    return get_model(config.model, config.provider)
