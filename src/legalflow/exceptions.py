"""LegalFlow exception hierarchy.

Provides a unified exception hierarchy for the orchestrator core, the model
service boundary and the CLI. This enables:
- User-friendly error messages in the CLI
- Programmatic error handling in library usage
- Clear distinction between plan, step and service failures

Usage:
    from legalflow.exceptions import PlanGenerationError, LegalFlowError

    try:
        result = await run_workflow("Research X then draft Y")
    except PlanGenerationError as e:
        print(f"No plan: {e.message}")
    except LegalFlowError as e:
        print(f"LegalFlow error: {e}")
"""


class LegalFlowError(Exception):
    """Base exception for all LegalFlow errors.

    All LegalFlow-specific exceptions inherit from this class, allowing
    callers to catch all LegalFlow errors with a single except clause.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# Configuration Errors


class ConfigurationError(LegalFlowError):
    """Error in LegalFlow configuration.

    Raised when .legalflow/config.yaml is invalid or contains
    incompatible settings.
    """

    pass


# Validation Errors


class ValidationError(LegalFlowError):
    """Base class for validation errors."""

    pass


class InvalidArgumentError(ValidationError):
    """Invalid command argument.

    Raised when a CLI argument or function parameter is invalid.
    """

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason}")


# Workflow Errors


class WorkflowError(LegalFlowError):
    """Base class for workflow-related errors."""

    pass


class PlanGenerationError(WorkflowError):
    """The plan generator produced no usable plan.

    Raised when the model service returns no plan, an empty plan or a
    malformed plan. Fatal to the run before any step executes.
    """

    pass


class WorkflowStepError(WorkflowError):
    """Base class for failures recorded against a single plan step."""

    def __init__(
        self, message: str, step_number: int | None = None, agent: str | None = None
    ) -> None:
        self.step_number = step_number
        self.agent = agent
        super().__init__(message)


class UnknownAgentKindError(WorkflowStepError):
    """A plan step names an agent outside the known capability set."""

    def __init__(self, agent: str, step_number: int | None = None) -> None:
        super().__init__(f"Unknown agent: {agent}", step_number=step_number, agent=agent)


class AgentInvocationError(WorkflowStepError):
    """The model service failed while executing a step.

    Covers service errors, timeouts and responses that fail schema
    validation. Fatal to the remaining run; completed steps keep their results.
    """

    pass


class StepTransitionError(WorkflowError):
    """A plan step was asked to make a transition its state machine forbids."""

    def __init__(self, step_number: int, from_status: str, to_status: str) -> None:
        self.step_number = step_number
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(
            f"Step {step_number} cannot move from '{from_status}' to '{to_status}'"
        )


class ReporterError(WorkflowError):
    """A status reporter raised while handling a step transition.

    Only raised when the execution policy asks for reporter failures to abort
    the run; the default policy logs them and continues.
    """

    pass


class WorkflowCancelledError(WorkflowError):
    """The run was cancelled before any step could start."""

    def __init__(self, run_id: str | None = None) -> None:
        self.run_id = run_id
        message = "Workflow cancelled"
        if run_id:
            message = f"Workflow {run_id} cancelled"
        super().__init__(message)


# Model Service Errors


class ModelServiceError(LegalFlowError):
    """Base class for generative model service failures."""

    def __init__(self, message: str, template_id: str | None = None) -> None:
        self.template_id = template_id
        super().__init__(message)


class UnknownTemplateError(ModelServiceError):
    """No prompt template is registered under the requested id."""

    def __init__(self, template_id: str) -> None:
        super().__init__(f"Unknown prompt template: {template_id}", template_id=template_id)


class ModelTimeoutError(ModelServiceError):
    """The model service did not answer within the configured timeout."""

    def __init__(self, template_id: str, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Model call for '{template_id}' timed out after {timeout_seconds}s",
            template_id=template_id,
        )


class OutputValidationError(ModelServiceError):
    """The model returned output that does not match the template's schema."""

    def __init__(self, template_id: str, expected_type: str, error: str) -> None:
        self.expected_type = expected_type
        self.error = error
        super().__init__(
            f"Output for '{template_id}' is not a valid {expected_type}: {error}",
            template_id=template_id,
        )
