"""LegalFlow - multi-step legal workflow orchestration.

Plans a sequence of legal AI agents from a free-text objective and runs
them in order, threading each result forward as context.
"""

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

__version__ = "0.1.0"

__all__ = [
    # Base exception
    "LegalFlowError",
    # Configuration
    "ConfigurationError",
    # Validation
    "ValidationError",
    "InvalidArgumentError",
    # Workflow
    "WorkflowError",
    "PlanGenerationError",
    "WorkflowStepError",
    "UnknownAgentKindError",
    "AgentInvocationError",
    "StepTransitionError",
    "ReporterError",
    "WorkflowCancelledError",
    # Model service
    "ModelServiceError",
    "UnknownTemplateError",
    "ModelTimeoutError",
    "OutputValidationError",
]
