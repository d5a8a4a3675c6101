"""Generative model service boundary.

The orchestrator never talks to an LLM directly. It calls
``generate_structured(template_id, payload)`` on a service and gets back an
instance of the template's output schema, or an exception.
"""

import asyncio
import logging
from typing import Any, Protocol

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from legalflow.exceptions import ModelServiceError, ModelTimeoutError, OutputValidationError
from legalflow_ai.config import AIConfig, model_string
from legalflow_ai.prompts import PromptTemplate, get_template, render_user_prompt

logger = logging.getLogger(__name__)


class GenerativeModelService(Protocol):
    """Protocol for structured-output model services."""

    async def generate_structured(self, template_id: str, payload: BaseModel) -> BaseModel:
        """Run one structured request and return the validated output."""
        ...


def validate_output(template: PromptTemplate, output: Any) -> BaseModel:
    """Check a raw model response against the template's output schema.

    Instances of the output type pass through; dicts are validated; anything
    else is rejected. Output is never coerced past schema validation.

    Raises:
        OutputValidationError: If the response does not fit the schema
    """
    expected = template.output_type
    if isinstance(output, expected):
        return output
    if output is None:
        raise OutputValidationError(template.id, expected.__name__, "model returned no output")
    if isinstance(output, dict):
        try:
            return expected.model_validate(output)
        except PydanticValidationError as e:
            raise OutputValidationError(template.id, expected.__name__, str(e)) from e
    raise OutputValidationError(
        template.id, expected.__name__, f"unexpected output type {type(output).__name__}"
    )


class PydanticAIService:
    """Model service backed by PydanticAI structured output.

    A fresh ``pydantic_ai.Agent`` is built per call with the template's output
    schema as ``output_type``, so the provider is asked for schema-constrained
    JSON and PydanticAI validates it before it reaches us.

    Usage:
        service = PydanticAIService(AIConfig(model="gpt-4o"))
        draft = await service.generate_structured("draft", DraftInput(...))
    """

    def __init__(self, config: AIConfig | None = None) -> None:
        self.config = config or AIConfig()
        self.model = model_string(self.config)

    def _model_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {"temperature": self.config.temperature}
        if self.config.max_tokens is not None:
            settings["max_tokens"] = self.config.max_tokens
        return settings

    async def generate_structured(self, template_id: str, payload: BaseModel) -> BaseModel:
        """Run one structured request.

        Args:
            template_id: Prompt template to use (see ``legalflow_ai.prompts.TEMPLATES``)
            payload: Typed input for the template

        Returns:
            Instance of the template's output schema

        Raises:
            UnknownTemplateError: If the template id is not registered
            ModelTimeoutError: If the call exceeds ``AIConfig.timeout``
            OutputValidationError: If the response does not fit the schema
            ModelServiceError: For any other provider failure
        """
        from pydantic_ai import Agent
        from pydantic_ai.exceptions import UnexpectedModelBehavior

        template = get_template(template_id)
        user_prompt = render_user_prompt(template, payload)

        agent = Agent(
            self.model,
            output_type=template.output_type,
            system_prompt=template.system_prompt,
            retries=self.config.retries,
        )

        logger.debug("Calling %s with template '%s'", self.model, template_id)
        try:
            result = await asyncio.wait_for(
                agent.run(user_prompt, model_settings=self._model_settings()),
                timeout=self.config.timeout,
            )
        except asyncio.TimeoutError as e:
            raise ModelTimeoutError(template_id, self.config.timeout) from e
        except UnexpectedModelBehavior as e:
            raise OutputValidationError(template_id, template.output_type.__name__, str(e)) from e
        except Exception as e:
            raise ModelServiceError(
                f"Model call for '{template_id}' failed: {e}", template_id=template_id
            ) from e

        return validate_output(template, result.output)
