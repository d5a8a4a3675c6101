"""Tests for LegalFlow runtime models."""

import pytest

from legalflow.exceptions import StepTransitionError
from legalflow_runtime.models import (
    AgentKind,
    ContextEntry,
    PlanStep,
    RunStatus,
    StepStatus,
    WorkflowResult,
)


def _step(**kwargs: object) -> PlanStep:
    fields = {"step_number": 1, "agent": "research", "instruction": "Find cases"}
    fields.update(kwargs)
    return PlanStep(**fields)


class TestAgentKind:
    def test_closed_set(self) -> None:
        assert {k.value for k in AgentKind} == {
            "research",
            "draft",
            "review",
            "predict",
            "negotiate",
            "cross-examine",
        }

    def test_lookup_by_value(self) -> None:
        assert AgentKind("cross-examine") is AgentKind.CROSS_EXAMINE


class TestPlanStepTransitions:
    def test_new_step_is_pending_without_result(self) -> None:
        step = _step()
        assert step.status == StepStatus.PENDING
        assert step.result is None
        assert step.error is None

    def test_activate_then_complete(self) -> None:
        step = _step()
        step.activate()
        assert step.status == StepStatus.ACTIVE
        assert step.result is None

        step.complete({"summary": "done"})
        assert step.status == StepStatus.COMPLETED
        assert step.result == {"summary": "done"}
        assert step.status.is_terminal

    def test_activate_then_fail(self) -> None:
        step = _step()
        step.activate()
        step.fail("provider down")
        assert step.status == StepStatus.ERROR
        assert step.result == {"error": "provider down"}
        assert step.error == "provider down"

    def test_complete_requires_active(self) -> None:
        step = _step()
        with pytest.raises(StepTransitionError) as exc_info:
            step.complete({})
        assert exc_info.value.from_status == "pending"
        assert exc_info.value.to_status == "completed"

    def test_terminal_state_is_final(self) -> None:
        step = _step()
        step.activate()
        step.complete({})
        with pytest.raises(StepTransitionError):
            step.activate()
        with pytest.raises(StepTransitionError):
            step.fail("late error")
        assert step.status == StepStatus.COMPLETED

    def test_cannot_activate_twice(self) -> None:
        step = _step()
        step.activate()
        with pytest.raises(StepTransitionError):
            step.activate()

    def test_step_number_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            _step(step_number=0)

    def test_unknown_agent_is_accepted_at_construction(self) -> None:
        step = _step(agent="astrology")
        assert step.agent == "astrology"


class TestContextEntry:
    def test_is_frozen(self) -> None:
        entry = ContextEntry(step_number=1, agent="research", output={"a": 1})
        with pytest.raises(ValueError):
            entry.agent = "draft"  # type: ignore[misc]


class TestWorkflowResult:
    def test_succeeded(self) -> None:
        result = WorkflowResult(
            run_id="run_1", objective="x", outcome="ok", status=RunStatus.SUCCESS
        )
        assert result.succeeded
        assert not result.model_copy(update={"status": RunStatus.FAILED}).succeeded

    def test_steps_with_status(self) -> None:
        done = _step()
        done.activate()
        done.complete({})
        pending = _step(step_number=2)
        result = WorkflowResult(
            run_id="run_1",
            objective="x",
            plan=[done, pending],
            outcome="Workflow cancelled.",
            status=RunStatus.CANCELLED,
        )
        assert result.steps_with_status(StepStatus.PENDING) == [pending]
        assert result.steps_with_status(StepStatus.COMPLETED) == [done]
