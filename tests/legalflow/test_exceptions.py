"""Tests for the LegalFlow exception hierarchy."""

from legalflow.exceptions import (
    AgentInvocationError,
    ConfigurationError,
    InvalidArgumentError,
    LegalFlowError,
    ModelServiceError,
    ModelTimeoutError,
    OutputValidationError,
    PlanGenerationError,
    ReporterError,
    StepTransitionError,
    UnknownAgentKindError,
    UnknownTemplateError,
    ValidationError,
    WorkflowCancelledError,
    WorkflowError,
    WorkflowStepError,
)


class TestHierarchy:
    def test_everything_is_a_legalflow_error(self) -> None:
        for cls in (
            ConfigurationError,
            InvalidArgumentError,
            PlanGenerationError,
            AgentInvocationError,
            UnknownAgentKindError,
            StepTransitionError,
            ReporterError,
            WorkflowCancelledError,
            ModelServiceError,
            ModelTimeoutError,
            OutputValidationError,
            UnknownTemplateError,
        ):
            assert issubclass(cls, LegalFlowError)

    def test_step_errors(self) -> None:
        assert issubclass(UnknownAgentKindError, WorkflowStepError)
        assert issubclass(AgentInvocationError, WorkflowStepError)
        assert issubclass(WorkflowStepError, WorkflowError)

    def test_service_errors_are_not_workflow_errors(self) -> None:
        assert not issubclass(ModelServiceError, WorkflowError)
        assert issubclass(ModelTimeoutError, ModelServiceError)

    def test_invalid_argument_is_validation_error(self) -> None:
        assert issubclass(InvalidArgumentError, ValidationError)


class TestMessages:
    def test_message_attribute(self) -> None:
        error = PlanGenerationError("Could not create a valid workflow plan.")
        assert error.message == "Could not create a valid workflow plan."
        assert str(error) == error.message

    def test_unknown_agent(self) -> None:
        error = UnknownAgentKindError("astrology", step_number=3)
        assert error.message == "Unknown agent: astrology"
        assert error.step_number == 3
        assert error.agent == "astrology"

    def test_invalid_argument(self) -> None:
        error = InvalidArgumentError("objective", "must not be empty")
        assert error.message == "Invalid argument 'objective': must not be empty"

    def test_step_transition(self) -> None:
        error = StepTransitionError(2, "completed", "active")
        assert error.message == "Step 2 cannot move from 'completed' to 'active'"

    def test_timeout(self) -> None:
        error = ModelTimeoutError("draft", 30.0)
        assert error.template_id == "draft"
        assert "30.0s" in error.message

    def test_cancelled(self) -> None:
        assert WorkflowCancelledError().message == "Workflow cancelled"
        assert WorkflowCancelledError("run_1").message == "Workflow run_1 cancelled"
