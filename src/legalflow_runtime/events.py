"""Event models for LegalFlow runs.

Every status transition of a run is published as an event. Observers (the
CLI display, an ``on_step_update`` callback, test harnesses) subscribe to the
event bus instead of being called directly by the executor.
"""

from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from legalflow_runtime.models import PlanStep, StepStatus


class EventType(str, Enum):
    """Event type enumeration."""

    # Workflow lifecycle
    WORKFLOW_STARTED = "workflow.started"
    WORKFLOW_COMPLETED = "workflow.completed"
    WORKFLOW_FAILED = "workflow.failed"
    WORKFLOW_CANCELLED = "workflow.cancelled"

    # Step lifecycle
    STEP_ACTIVE = "step.active"
    STEP_COMPLETED = "step.completed"
    STEP_FAILED = "step.failed"


class BaseEvent(BaseModel):
    """Base event with common fields.

    Events are immutable facts. ``sequence`` increases by one per event within
    a run, so observers can check they saw transitions in order.
    """

    model_config = ConfigDict(frozen=True)

    event_id: str = Field(default_factory=lambda: uuid4().hex[:12])
    event_type: EventType
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    run_id: str
    sequence: int = Field(..., ge=0)


# Workflow lifecycle events


class WorkflowStartedEvent(BaseEvent):
    """Emitted when plan execution begins."""

    event_type: EventType = EventType.WORKFLOW_STARTED
    objective: str
    total_steps: int


class WorkflowCompletedEvent(BaseEvent):
    """Emitted when every step completed."""

    event_type: EventType = EventType.WORKFLOW_COMPLETED
    outcome: str
    duration_seconds: float
    step_count: int


class WorkflowFailedEvent(BaseEvent):
    """Emitted when a step failed and the run halted."""

    event_type: EventType = EventType.WORKFLOW_FAILED
    outcome: str
    error: str
    failed_step: int
    duration_seconds: float


class WorkflowCancelledEvent(BaseEvent):
    """Emitted when the run was cancelled between or during steps."""

    event_type: EventType = EventType.WORKFLOW_CANCELLED
    outcome: str
    completed_steps: int
    duration_seconds: float


# Step lifecycle events


class StepEvent(BaseEvent):
    """Base for events that carry a snapshot of one plan step."""

    step: PlanStep
    previous_status: StepStatus

    @property
    def step_number(self) -> int:
        return self.step.step_number


class StepActivatedEvent(StepEvent):
    """Emitted when a step starts executing."""

    event_type: EventType = EventType.STEP_ACTIVE


class StepCompletedEvent(StepEvent):
    """Emitted when a step finished with an output."""

    event_type: EventType = EventType.STEP_COMPLETED
    duration_seconds: float


class StepFailedEvent(StepEvent):
    """Emitted when a step finished with an error."""

    event_type: EventType = EventType.STEP_FAILED
    error: str
    duration_seconds: float


# Union type for all events
Event = (
    WorkflowStartedEvent
    | WorkflowCompletedEvent
    | WorkflowFailedEvent
    | WorkflowCancelledEvent
    | StepActivatedEvent
    | StepCompletedEvent
    | StepFailedEvent
)

STEP_EVENT_TYPES = [EventType.STEP_ACTIVE, EventType.STEP_COMPLETED, EventType.STEP_FAILED]

