"""Workflow executor.

Runs a plan strictly in order: one step active at a time, each step's output
appended to the shared context before the next step starts, and the run
halted at the first failing step. Every status transition is published on the
event bus as it happens.
"""

import asyncio
import logging
import time
from datetime import datetime, timezone
from uuid import uuid4

from legalflow.exceptions import PlanGenerationError, ReporterError, WorkflowStepError
from legalflow_runtime.bus import EventBus, NullEventBus
from legalflow_runtime.capabilities import AgentInvoker
from legalflow_runtime.config import ExecutionPolicy
from legalflow_runtime.context import WorkflowContext
from legalflow_runtime.events import (
    Event,
    StepActivatedEvent,
    StepCompletedEvent,
    StepFailedEvent,
    WorkflowCancelledEvent,
    WorkflowCompletedEvent,
    WorkflowFailedEvent,
    WorkflowStartedEvent,
)
from legalflow_runtime.models import PlanStep, RunStatus, StepStatus, WorkflowResult

logger = logging.getLogger(__name__)

CANCELLED_OUTCOME = "Workflow cancelled."


def generate_run_id() -> str:
    """Generate a unique run ID."""
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    return f"run_{timestamp}_{uuid4().hex[:6]}"


def completed_outcome(step_count: int) -> str:
    noun = "step" if step_count == 1 else "steps"
    return f"Workflow completed successfully with {step_count} {noun}."


def failed_outcome(step_number: int) -> str:
    return f"Workflow failed at step {step_number}."


class _RunReporter:
    """Publishes the events of a single run with a per-run sequence number."""

    def __init__(self, run_id: str, bus: EventBus, policy: ExecutionPolicy) -> None:
        self.run_id = run_id
        self.bus = bus
        self.policy = policy
        self.sequence = 0

    def emit(self, event_class: type[Event], **fields: object) -> None:
        event = event_class(run_id=self.run_id, sequence=self.sequence, **fields)
        self.sequence += 1
        try:
            self.bus.emit(event)
        except Exception as e:
            if self.policy.reporter_failure == "raise":
                raise ReporterError(
                    f"Status reporter failed on {event.event_type.value}: {e}"
                ) from e
            logger.exception("Status reporter failed on %s", event.event_type.value)

    def step(
        self, event_class: type[Event], step: PlanStep, previous: StepStatus, **fields: object
    ) -> None:
        self.emit(event_class, step=step.model_copy(deep=True), previous_status=previous, **fields)


class WorkflowExecutor:
    """Executes plans through an AgentInvoker.

    The executor holds no per-run state, so one instance can execute several
    plans concurrently.

    Usage:
        executor = WorkflowExecutor(AgentInvoker(service), event_bus=bus)
        result = await executor.execute(objective, plan)
        print(result.outcome)
    """

    def __init__(
        self,
        invoker: AgentInvoker,
        event_bus: EventBus | None = None,
        policy: ExecutionPolicy | None = None,
    ) -> None:
        self.invoker = invoker
        self.event_bus = event_bus or NullEventBus()
        self.policy = policy or ExecutionPolicy()

    @staticmethod
    def _ordered(plan: list[PlanStep]) -> list[PlanStep]:
        """Copy the plan in ascending step order, rejecting malformed plans."""
        if not plan:
            raise PlanGenerationError("Plan has no steps")
        numbers = [step.step_number for step in plan]
        duplicates = sorted({n for n in numbers if numbers.count(n) > 1})
        if duplicates:
            raise PlanGenerationError(f"Plan has duplicate step numbers: {duplicates}")
        for step in plan:
            if step.status != StepStatus.PENDING:
                raise PlanGenerationError(
                    f"Step {step.step_number} is already {step.status.value}; "
                    "plans must start pending"
                )
            if step.result is not None:
                raise PlanGenerationError(
                    f"Step {step.step_number} is pending but already has a result"
                )
        return [step.model_copy(deep=True) for step in sorted(plan, key=lambda s: s.step_number)]

    async def execute(
        self,
        objective: str,
        plan: list[PlanStep],
        *,
        run_id: str | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WorkflowResult:
        """Execute ``plan`` for ``objective``.

        The caller's step objects are not modified; the returned result holds
        the executed copies.

        Args:
            objective: The objective the plan was generated from
            plan: Steps to run, all pending
            run_id: Run ID to report under (generated if omitted)
            cancel_event: Set to stop the run before the next step

        Returns:
            WorkflowResult with the final plan state and outcome

        Raises:
            PlanGenerationError: If the plan is empty or has duplicate or
                non-pending steps
            ReporterError: If a reporter fails and the policy is ``"raise"``
        """
        steps = self._ordered(plan)
        run_id = run_id or generate_run_id()
        reporter = _RunReporter(run_id, self.event_bus, self.policy)
        context = WorkflowContext(objective)
        start = time.perf_counter()

        def cancelled() -> bool:
            return cancel_event is not None and cancel_event.is_set()

        def elapsed() -> float:
            return round(time.perf_counter() - start, 3)

        logger.info("Starting run %s with %d steps", run_id, len(steps))
        reporter.emit(WorkflowStartedEvent, objective=objective, total_steps=len(steps))

        for step in steps:
            if cancelled():
                return self._cancelled(reporter, objective, steps, len(context), elapsed())

            previous = step.status
            step.activate()
            logger.info("Step %d (%s) active", step.step_number, step.agent)
            reporter.step(StepActivatedEvent, step, previous)

            step_start = time.perf_counter()
            error: str | None = None
            interrupted = False
            try:
                output = await self.invoker.invoke(
                    step.agent, step.instruction, context.text, step_number=step.step_number
                )
            except WorkflowStepError as e:
                error = e.message
            else:
                if cancelled():
                    error = CANCELLED_OUTCOME
                    interrupted = True
            step_duration = round(time.perf_counter() - step_start, 3)

            if error is not None:
                step.fail(error)
                logger.warning("Step %d (%s) failed: %s", step.step_number, step.agent, error)
                reporter.step(
                    StepFailedEvent,
                    step,
                    StepStatus.ACTIVE,
                    error=error,
                    duration_seconds=step_duration,
                )
                if interrupted:
                    return self._cancelled(
                        reporter, objective, steps, len(context), elapsed(), failed=step
                    )
                return self._failed(reporter, objective, steps, step, elapsed())

            result = output.model_dump(mode="json")
            step.complete(result)
            context.append(step.step_number, step.agent, result)
            logger.info("Step %d (%s) completed", step.step_number, step.agent)
            reporter.step(
                StepCompletedEvent, step, StepStatus.ACTIVE, duration_seconds=step_duration
            )

        outcome = completed_outcome(len(steps))
        duration = elapsed()
        logger.info("Run %s completed in %.2fs", run_id, duration)
        reporter.emit(
            WorkflowCompletedEvent,
            outcome=outcome,
            duration_seconds=duration,
            step_count=len(steps),
        )
        return WorkflowResult(
            run_id=run_id,
            objective=objective,
            plan=steps,
            outcome=outcome,
            status=RunStatus.SUCCESS,
            duration_seconds=duration,
        )

    def _failed(
        self,
        reporter: _RunReporter,
        objective: str,
        steps: list[PlanStep],
        failed: PlanStep,
        duration: float,
    ) -> WorkflowResult:
        outcome = failed_outcome(failed.step_number)
        error = failed.error or ""
        logger.warning("Run %s failed at step %d", reporter.run_id, failed.step_number)
        reporter.emit(
            WorkflowFailedEvent,
            outcome=outcome,
            error=error,
            failed_step=failed.step_number,
            duration_seconds=duration,
        )
        return WorkflowResult(
            run_id=reporter.run_id,
            objective=objective,
            plan=steps,
            outcome=outcome,
            status=RunStatus.FAILED,
            error=error,
            failed_step=failed.step_number,
            duration_seconds=duration,
        )

    def _cancelled(
        self,
        reporter: _RunReporter,
        objective: str,
        steps: list[PlanStep],
        completed_steps: int,
        duration: float,
        failed: PlanStep | None = None,
    ) -> WorkflowResult:
        logger.info("Run %s cancelled after %d completed steps", reporter.run_id, completed_steps)
        reporter.emit(
            WorkflowCancelledEvent,
            outcome=CANCELLED_OUTCOME,
            completed_steps=completed_steps,
            duration_seconds=duration,
        )
        return WorkflowResult(
            run_id=reporter.run_id,
            objective=objective,
            plan=steps,
            outcome=CANCELLED_OUTCOME,
            status=RunStatus.CANCELLED,
            error=failed.error if failed else None,
            failed_step=failed.step_number if failed else None,
            duration_seconds=duration,
        )
