"""Scripted model service for tests and offline demo runs.

Usage:
    service = ScriptedModelService({
        "plan": PlanDraft(plan=[...]),
        "research": ResearchOutput(summary="...", ranked_cases=[], key_principles=[]),
        "draft": RuntimeError("provider down"),
    })
    result = await run_workflow("Research X then draft Y", service=service)
    assert service.calls_for("research")
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from legalflow.exceptions import ModelServiceError
from legalflow_ai.prompts import get_template
from legalflow_ai.service import validate_output

Response = BaseModel | dict[str, Any] | Exception | Callable[[BaseModel], Any] | None


@dataclass(frozen=True)
class ModelCall:
    """A recorded call to the scripted service."""

    template_id: str
    payload: BaseModel


class ScriptedModelService:
    """Model service that answers from a script instead of an LLM.

    Each template id maps to a response or a list of responses consumed in
    order (the last one repeats). A response may be an output model, a dict
    validated against the template's schema, an exception to raise, or a
    callable receiving the typed input.
    """

    def __init__(
        self,
        responses: dict[str, Response | list[Response]] | None = None,
        delay: float = 0.0,
    ) -> None:
        self._responses: dict[str, list[Response]] = {}
        for template_id, response in (responses or {}).items():
            self.set_response(template_id, response)
        self.delay = delay
        self.calls: list[ModelCall] = []

    def set_response(self, template_id: str, response: Response | list[Response]) -> None:
        """Replace the scripted response(s) for a template."""
        get_template(template_id)
        self._responses[template_id] = list(response) if isinstance(response, list) else [response]

    def calls_for(self, template_id: str) -> list[ModelCall]:
        """Calls recorded for one template, in call order."""
        return [c for c in self.calls if c.template_id == template_id]

    def _next_response(self, template_id: str) -> Response:
        queue = self._responses.get(template_id)
        if not queue:
            raise ModelServiceError(
                f"No scripted response for '{template_id}'", template_id=template_id
            )
        return queue.pop(0) if len(queue) > 1 else queue[0]

    async def generate_structured(self, template_id: str, payload: BaseModel) -> BaseModel:
        template = get_template(template_id)
        if not isinstance(payload, template.input_type):
            raise ModelServiceError(
                f"Template '{template_id}' expects {template.input_type.__name__}, "
                f"got {type(payload).__name__}",
                template_id=template_id,
            )

        self.calls.append(ModelCall(template_id=template_id, payload=payload))
        response = self._next_response(template_id)

        if self.delay:
            await asyncio.sleep(self.delay)

        if isinstance(response, Exception):
            raise response
        if callable(response) and not isinstance(response, BaseModel):
            response = response(payload)
        return validate_output(template, response)
