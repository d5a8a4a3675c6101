"""Pydantic models for LegalFlow runs.

These models define the plan a run executes, the state machine of each
step and the result handed back to the caller.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from legalflow.exceptions import StepTransitionError


class AgentKind(str, Enum):
    """The closed set of agent capabilities a step can delegate to."""

    RESEARCH = "research"
    DRAFT = "draft"
    REVIEW = "review"
    PREDICT = "predict"
    NEGOTIATE = "negotiate"
    CROSS_EXAMINE = "cross-examine"


class StepStatus(str, Enum):
    """Status of a plan step."""

    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (StepStatus.COMPLETED, StepStatus.ERROR)


class RunStatus(str, Enum):
    """Status of a finished workflow run."""

    SUCCESS = "success"
    FAILED = "failed"
    CANCELLED = "cancelled"


class PlanStep(BaseModel):
    """A single step of a workflow plan.

    Steps move ``pending -> active -> completed | error`` and never leave a
    terminal state. ``result`` is set exactly when the step is terminal: the
    agent's output on success, ``{"error": message}`` on failure.
    """

    model_config = ConfigDict(validate_assignment=True)

    step_number: int = Field(..., ge=1, description="Execution order within the plan")
    agent: str = Field(..., description="Agent kind that performs the step")
    instruction: str = Field(..., description="Self-contained instruction for the agent")
    summary: str = Field(default="", description="Short human-readable intent")
    status: StepStatus = Field(default=StepStatus.PENDING, description="Execution status")
    result: dict[str, Any] | None = Field(default=None, description="Output or error payload")

    def _transition(self, allowed_from: StepStatus, to: StepStatus) -> None:
        if self.status != allowed_from:
            raise StepTransitionError(self.step_number, self.status.value, to.value)
        self.status = to

    def activate(self) -> None:
        """Mark the step as the one currently executing."""
        self._transition(StepStatus.PENDING, StepStatus.ACTIVE)

    def complete(self, result: dict[str, Any]) -> None:
        """Record the agent's output and finish the step."""
        self._transition(StepStatus.ACTIVE, StepStatus.COMPLETED)
        self.result = result

    def fail(self, message: str) -> None:
        """Record an error and finish the step."""
        self._transition(StepStatus.ACTIVE, StepStatus.ERROR)
        self.result = {"error": message}

    @property
    def error(self) -> str | None:
        if self.status == StepStatus.ERROR and self.result:
            return self.result.get("error")
        return None


class ContextEntry(BaseModel):
    """One completed step's output as recorded in the shared context."""

    model_config = ConfigDict(frozen=True)

    step_number: int
    agent: str
    output: dict[str, Any]


class WorkflowResult(BaseModel):
    """Outcome of one workflow run.

    ``plan`` shows exactly which steps completed, which one failed and which
    never ran; ``outcome`` is the short summary shown to the user.
    """

    run_id: str = Field(..., description="Unique run ID")
    objective: str = Field(..., description="The objective the plan was built from")
    plan: list[PlanStep] = Field(default_factory=list)
    outcome: str = Field(..., description="Short human-readable outcome")
    status: RunStatus = Field(..., description="Run status")
    error: str | None = Field(default=None, description="Error message if the run failed")
    failed_step: int | None = Field(default=None, description="Step number that failed")
    duration_seconds: float = Field(default=0.0, description="Total execution duration")

    @property
    def succeeded(self) -> bool:
        return self.status == RunStatus.SUCCESS

    def steps_with_status(self, status: StepStatus) -> list[PlanStep]:
        return [s for s in self.plan if s.status == status]
