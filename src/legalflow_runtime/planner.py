"""Plan generator.

Turns a free-text objective into an ordered list of pending PlanSteps with
one structured call to the model service.
"""

import logging

from legalflow.exceptions import LegalFlowError, PlanGenerationError
from legalflow_ai.schemas import PlanDraft, PlanRequest
from legalflow_ai.service import GenerativeModelService
from legalflow_runtime.config import ExecutionPolicy
from legalflow_runtime.models import PlanStep

logger = logging.getLogger(__name__)

PLAN_FAILED = "Could not create a valid workflow plan."


class PlanGenerator:
    """Generates workflow plans through the ``plan`` prompt template."""

    def __init__(
        self,
        service: GenerativeModelService,
        policy: ExecutionPolicy | None = None,
    ) -> None:
        self.service = service
        self.policy = policy or ExecutionPolicy()

    async def generate(self, objective: str) -> list[PlanStep]:
        """Generate a plan for ``objective``.

        The list order of the model's plan is authoritative: steps are
        numbered 1..N by position.

        Args:
            objective: The user's high-level legal objective

        Returns:
            Non-empty list of pending steps in execution order

        Raises:
            PlanGenerationError: If the service fails or returns no usable plan
        """
        try:
            draft = await self.service.generate_structured("plan", PlanRequest(objective=objective))
        except LegalFlowError as e:
            raise PlanGenerationError(f"{PLAN_FAILED} {e.message}") from e
        except Exception as e:
            raise PlanGenerationError(f"{PLAN_FAILED} {e}") from e

        if draft is None or not isinstance(draft, PlanDraft):
            raise PlanGenerationError(PLAN_FAILED)
        if not draft.plan:
            raise PlanGenerationError(f"{PLAN_FAILED} The plan has no steps.")
        if len(draft.plan) > self.policy.max_steps:
            raise PlanGenerationError(
                f"{PLAN_FAILED} The plan has {len(draft.plan)} steps "
                f"(limit {self.policy.max_steps})."
            )

        steps: list[PlanStep] = []
        for position, planned in enumerate(draft.plan, 1):
            if not planned.prompt.strip():
                raise PlanGenerationError(f"{PLAN_FAILED} Step {position} has no instruction.")
            if planned.step != position:
                logger.debug("Renumbering planned step %d as %d", planned.step, position)
            steps.append(
                PlanStep(
                    step_number=position,
                    agent=planned.agent,
                    instruction=planned.prompt,
                    summary=planned.summary,
                )
            )

        logger.info("Generated plan with %d steps: %s", len(steps), [s.agent for s in steps])
        return steps
