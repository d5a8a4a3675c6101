"""LegalFlow runtime - plan, execute and report legal workflows.

Example:
    from legalflow_runtime import run_workflow

    result = await run_workflow("Research X then draft Y")
    for step in result.plan:
        print(step.step_number, step.agent, step.status.value)
    print(result.outcome)
"""

from legalflow_runtime.bus import (
    EventBus,
    LocalEventBus,
    NullEventBus,
    step_update_handler,
    subscribe_step_updates,
)
from legalflow_runtime.capabilities import (
    CAPABILITIES,
    AgentInvoker,
    Capability,
    build_input,
    resolve_kind,
)
from legalflow_runtime.config import CapabilityDefaults, ExecutionPolicy
from legalflow_runtime.context import WorkflowContext
from legalflow_runtime.events import (
    Event,
    EventType,
    StepActivatedEvent,
    StepCompletedEvent,
    StepEvent,
    StepFailedEvent,
    WorkflowCancelledEvent,
    WorkflowCompletedEvent,
    WorkflowFailedEvent,
    WorkflowStartedEvent,
)
from legalflow_runtime.executor import WorkflowExecutor
from legalflow_runtime.models import (
    AgentKind,
    ContextEntry,
    PlanStep,
    RunStatus,
    StepStatus,
    WorkflowResult,
)
from legalflow_runtime.orchestrator import Orchestrator, run_workflow
from legalflow_runtime.planner import PlanGenerator

__all__ = [
    # Entry point
    "run_workflow",
    "Orchestrator",
    # Components
    "PlanGenerator",
    "WorkflowExecutor",
    "AgentInvoker",
    "Capability",
    "CAPABILITIES",
    "build_input",
    "resolve_kind",
    # Models
    "AgentKind",
    "StepStatus",
    "RunStatus",
    "PlanStep",
    "ContextEntry",
    "WorkflowResult",
    "WorkflowContext",
    # Config
    "CapabilityDefaults",
    "ExecutionPolicy",
    # Events
    "Event",
    "EventType",
    "StepEvent",
    "StepActivatedEvent",
    "StepCompletedEvent",
    "StepFailedEvent",
    "WorkflowStartedEvent",
    "WorkflowCompletedEvent",
    "WorkflowFailedEvent",
    "WorkflowCancelledEvent",
    # Bus
    "EventBus",
    "LocalEventBus",
    "NullEventBus",
    "step_update_handler",
    "subscribe_step_updates",
]
