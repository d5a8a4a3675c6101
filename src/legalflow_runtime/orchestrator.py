"""Workflow entry point.

``run_workflow`` plans an objective and executes the plan, reporting every
step transition along the way.

Usage:
    result = await run_workflow(
        "Research non-compete enforceability in California, then draft a clause",
        on_step_update=lambda step: print(step.step_number, step.status.value),
    )
    print(result.outcome)
"""

import asyncio
import logging
from collections.abc import Callable

from legalflow.exceptions import InvalidArgumentError, WorkflowCancelledError
from legalflow_ai.config import AIConfig
from legalflow_ai.service import GenerativeModelService, PydanticAIService
from legalflow_runtime.bus import EventBus, LocalEventBus, NullEventBus, subscribe_step_updates
from legalflow_runtime.capabilities import AgentInvoker
from legalflow_runtime.config import CapabilityDefaults, ExecutionPolicy
from legalflow_runtime.executor import WorkflowExecutor, generate_run_id
from legalflow_runtime.models import PlanStep, WorkflowResult
from legalflow_runtime.planner import PlanGenerator

logger = logging.getLogger(__name__)


class Orchestrator:
    """Plans and executes legal workflows against one model service.

    Args:
        service: Generative model service (defaults to PydanticAIService)
        ai: AI config used to build the default service
        defaults: Values for agent inputs a plan step does not provide
        policy: Planner/executor policy
        event_bus: Bus that receives every run and step event
    """

    def __init__(
        self,
        service: GenerativeModelService | None = None,
        *,
        ai: AIConfig | None = None,
        defaults: CapabilityDefaults | None = None,
        policy: ExecutionPolicy | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.service = service or PydanticAIService(ai)
        self.defaults = defaults or CapabilityDefaults()
        self.policy = policy or ExecutionPolicy()
        self.event_bus = event_bus or NullEventBus()
        self.planner = PlanGenerator(self.service, self.policy)
        self.executor = WorkflowExecutor(
            AgentInvoker(self.service, self.defaults),
            event_bus=self.event_bus,
            policy=self.policy,
        )

    @staticmethod
    def _check_objective(objective: str) -> str:
        if not objective or not objective.strip():
            raise InvalidArgumentError("objective", "must not be empty")
        return objective.strip()

    async def plan(self, objective: str) -> list[PlanStep]:
        """Generate a plan without executing it."""
        return await self.planner.generate(self._check_objective(objective))

    async def execute(
        self,
        objective: str,
        plan: list[PlanStep],
        *,
        run_id: str | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WorkflowResult:
        """Execute an existing plan."""
        return await self.executor.execute(
            self._check_objective(objective), plan, run_id=run_id, cancel_event=cancel_event
        )

    async def run(
        self,
        objective: str,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> WorkflowResult:
        """Plan ``objective`` and execute the plan.

        Raises:
            InvalidArgumentError: If the objective is empty
            WorkflowCancelledError: If ``cancel_event`` is set before planning finishes
            PlanGenerationError: If no usable plan could be generated
        """
        objective = self._check_objective(objective)
        run_id = generate_run_id()
        if cancel_event is not None and cancel_event.is_set():
            raise WorkflowCancelledError(run_id)

        logger.info("Planning run %s", run_id)
        plan = await self.planner.generate(objective)
        if cancel_event is not None and cancel_event.is_set():
            raise WorkflowCancelledError(run_id)

        return await self.executor.execute(
            objective, plan, run_id=run_id, cancel_event=cancel_event
        )


async def run_workflow(
    objective: str,
    *,
    service: GenerativeModelService | None = None,
    ai: AIConfig | None = None,
    defaults: CapabilityDefaults | None = None,
    policy: ExecutionPolicy | None = None,
    on_step_update: Callable[[PlanStep], None] | None = None,
    event_bus: EventBus | None = None,
    cancel_event: asyncio.Event | None = None,
) -> WorkflowResult:
    """Plan and execute a legal workflow.

    Args:
        objective: Free-text legal objective
        service: Model service to use (defaults to PydanticAIService from ``ai``)
        ai: AI config for the default service
        defaults: Per-run agent input defaults
        policy: Planner/executor policy
        on_step_update: Called with a snapshot of each step on every transition;
            a NullEventBus is replaced by a LocalEventBus so the callback fires
        event_bus: Bus that receives every event of the run
        cancel_event: Set to stop the run before the next step

    Returns:
        WorkflowResult with ``plan`` and ``outcome``
    """
    bus = event_bus
    if on_step_update is not None:
        if bus is None or isinstance(bus, NullEventBus):
            bus = LocalEventBus()
        handler = subscribe_step_updates(bus, on_step_update)
    orchestrator = Orchestrator(
        service, ai=ai, defaults=defaults, policy=policy, event_bus=bus
    )
    try:
        return await orchestrator.run(objective, cancel_event=cancel_event)
    finally:
        if on_step_update is not None:
            bus.unsubscribe(handler)
