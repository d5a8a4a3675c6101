"""Tests for event models and the event bus."""

import pytest

from legalflow_runtime.bus import (
    LocalEventBus,
    NullEventBus,
    step_update_handler,
    subscribe_step_updates,
)
from legalflow_runtime.events import (
    EventType,
    StepActivatedEvent,
    StepCompletedEvent,
    WorkflowStartedEvent,
)
from legalflow_runtime.models import PlanStep, StepStatus


def _step(status: StepStatus = StepStatus.ACTIVE) -> PlanStep:
    return PlanStep(step_number=1, agent="research", instruction="Find cases", status=status)


def _started(sequence: int = 0) -> WorkflowStartedEvent:
    return WorkflowStartedEvent(run_id="run_1", sequence=sequence, objective="x", total_steps=2)


def _activated(sequence: int = 1) -> StepActivatedEvent:
    return StepActivatedEvent(
        run_id="run_1", sequence=sequence, step=_step(), previous_status=StepStatus.PENDING
    )


class TestEventModels:
    def test_workflow_started_event(self) -> None:
        event = _started()
        assert event.event_type == EventType.WORKFLOW_STARTED
        assert event.total_steps == 2
        assert len(event.event_id) == 12

    def test_step_event_exposes_step_number(self) -> None:
        event = StepCompletedEvent(
            run_id="run_1",
            sequence=2,
            step=_step(StepStatus.COMPLETED),
            previous_status=StepStatus.ACTIVE,
            duration_seconds=0.5,
        )
        assert event.event_type == EventType.STEP_COMPLETED
        assert event.step_number == 1

    def test_events_are_frozen(self) -> None:
        event = _started()
        with pytest.raises(ValueError):
            event.sequence = 5  # type: ignore[misc]

    def test_sequence_must_not_be_negative(self) -> None:
        with pytest.raises(ValueError):
            _started(sequence=-1)

    def test_serialization(self) -> None:
        data = _activated().model_dump(mode="json")
        assert data["event_type"] == "step.active"
        assert data["step"]["status"] == "active"
        assert data["previous_status"] == "pending"


class TestLocalEventBus:
    def test_handlers_called_in_registration_order(self) -> None:
        bus = LocalEventBus()
        calls: list[str] = []
        bus.subscribe(lambda e: calls.append("first"))
        bus.subscribe(lambda e: calls.append("second"))

        bus.emit(_started())

        assert calls == ["first", "second"]

    def test_event_type_filter(self) -> None:
        bus = LocalEventBus()
        received = []
        bus.subscribe(received.append, [EventType.STEP_ACTIVE])

        bus.emit(_started())
        bus.emit(_activated())

        assert [e.event_type for e in received] == [EventType.STEP_ACTIVE]

    def test_unsubscribe(self) -> None:
        bus = LocalEventBus()
        received = []
        bus.subscribe(received.append)
        bus.unsubscribe(received.append)

        bus.emit(_started())

        assert received == []
        assert len(bus) == 0

    def test_handler_errors_propagate(self) -> None:
        bus = LocalEventBus()

        def broken(event: object) -> None:
            raise RuntimeError("boom")

        bus.subscribe(broken)
        with pytest.raises(RuntimeError):
            bus.emit(_started())

    def test_clear(self) -> None:
        bus = LocalEventBus()
        bus.subscribe(lambda e: None)
        bus.clear()
        assert len(bus) == 0


class TestNullEventBus:
    def test_discards_events(self) -> None:
        bus = NullEventBus()
        received = []
        bus.subscribe(received.append)
        bus.emit(_started())
        assert received == []


class TestStepUpdates:
    def test_handler_passes_step_snapshot(self) -> None:
        steps: list[PlanStep] = []
        handler = step_update_handler(steps.append)

        handler(_started())
        handler(_activated())

        assert len(steps) == 1
        assert steps[0].status == StepStatus.ACTIVE

    def test_subscribe_step_updates_ignores_run_events(self) -> None:
        bus = LocalEventBus()
        steps: list[PlanStep] = []
        handler = subscribe_step_updates(bus, steps.append)

        bus.emit(_started())
        bus.emit(_activated())
        bus.unsubscribe(handler)
        bus.emit(_activated(sequence=2))

        assert len(steps) == 1
