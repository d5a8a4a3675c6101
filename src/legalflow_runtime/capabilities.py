"""Agent invocation adapter.

Maps a plan step's ``(agent, instruction, context)`` onto the typed input of
one agent capability, calls the model service once, and hands back the typed
output. Every capability is a registry entry; there is no per-agent branching
in the executor.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from pydantic import BaseModel

from legalflow.exceptions import AgentInvocationError, LegalFlowError, UnknownAgentKindError
from legalflow_ai.schemas import (
    CrossExamineInput,
    DraftInput,
    NegotiateInput,
    PredictInput,
    ResearchInput,
    ReviewInput,
)
from legalflow_ai.service import GenerativeModelService
from legalflow_runtime.config import CapabilityDefaults
from legalflow_runtime.models import AgentKind

logger = logging.getLogger(__name__)

InputBuilder = Callable[[str, str, CapabilityDefaults], BaseModel]


@dataclass(frozen=True)
class Capability:
    """One agent capability.

    Attributes:
        kind: The agent kind plan steps refer to
        template_id: Prompt template the model service runs
        build: ``(instruction, context_text, defaults) -> input model``
        description: One-line description for listings
        mapping: Input field -> where its value comes from, for listings
    """

    kind: AgentKind
    template_id: str
    build: InputBuilder
    description: str
    mapping: dict[str, str] = field(default_factory=dict)


def _research(instruction: str, context: str, defaults: CapabilityDefaults) -> ResearchInput:
    return ResearchInput(legal_query=instruction)


def _draft(instruction: str, context: str, defaults: CapabilityDefaults) -> DraftInput:
    return DraftInput(
        document_type=defaults.draft.document_type,
        tone=defaults.draft.tone,
        jurisdiction=defaults.draft.jurisdiction,
        prompt=instruction,
    )


def _review(instruction: str, context: str, defaults: CapabilityDefaults) -> ReviewInput:
    return ReviewInput(document_text=context)


def _predict(instruction: str, context: str, defaults: CapabilityDefaults) -> PredictInput:
    return PredictInput(
        case_type=defaults.predict.case_type,
        jurisdiction=defaults.predict.jurisdiction,
        judge_name=defaults.predict.judge_name,
        case_summary=instruction,
    )


def _negotiate(instruction: str, context: str, defaults: CapabilityDefaults) -> NegotiateInput:
    return NegotiateInput(
        current_clause=context,
        my_goal=instruction,
        opponent_position=defaults.negotiate.opponent_position,
        opponent_style=defaults.negotiate.opponent_style,
        negotiation_context=defaults.negotiate.negotiation_context,
    )


def _cross_examine(
    instruction: str, context: str, defaults: CapabilityDefaults
) -> CrossExamineInput:
    return CrossExamineInput(
        witness_statement=context,
        evidence_summary=instruction,
        my_role=defaults.cross_examine.my_role,
        simulation_role=defaults.cross_examine.simulation_role,
    )


CAPABILITIES: dict[AgentKind, Capability] = {
    AgentKind.RESEARCH: Capability(
        kind=AgentKind.RESEARCH,
        template_id="research",
        build=_research,
        description="Find and rank relevant case law and principles",
        mapping={"legal_query": "instruction"},
    ),
    AgentKind.DRAFT: Capability(
        kind=AgentKind.DRAFT,
        template_id="draft",
        build=_draft,
        description="Draft a legal document clause by clause",
        mapping={
            "prompt": "instruction",
            "document_type": "defaults.draft.document_type",
            "tone": "defaults.draft.tone",
            "jurisdiction": "defaults.draft.jurisdiction",
        },
    ),
    AgentKind.REVIEW: Capability(
        kind=AgentKind.REVIEW,
        template_id="review",
        build=_review,
        description="Review prior work for anomalies and key dates",
        mapping={"document_text": "context"},
    ),
    AgentKind.PREDICT: Capability(
        kind=AgentKind.PREDICT,
        template_id="predict",
        build=_predict,
        description="Predict a case outcome and recommend strategies",
        mapping={
            "case_summary": "instruction",
            "case_type": "defaults.predict.case_type",
            "jurisdiction": "defaults.predict.jurisdiction",
            "judge_name": "defaults.predict.judge_name",
        },
    ),
    AgentKind.NEGOTIATE: Capability(
        kind=AgentKind.NEGOTIATE,
        template_id="negotiate",
        build=_negotiate,
        description="Propose alternative clauses for a negotiation",
        mapping={
            "current_clause": "context",
            "my_goal": "instruction",
            "opponent_position": "defaults.negotiate.opponent_position",
            "opponent_style": "defaults.negotiate.opponent_style",
            "negotiation_context": "defaults.negotiate.negotiation_context",
        },
    ),
    AgentKind.CROSS_EXAMINE: Capability(
        kind=AgentKind.CROSS_EXAMINE,
        template_id="cross-examine",
        build=_cross_examine,
        description="Prepare a cross-examination and simulate it",
        mapping={
            "witness_statement": "context",
            "evidence_summary": "instruction",
            "my_role": "defaults.cross_examine.my_role",
            "simulation_role": "defaults.cross_examine.simulation_role",
        },
    ),
}

_missing = set(AgentKind) - set(CAPABILITIES)
if _missing:
    raise RuntimeError(f"No capability registered for: {sorted(k.value for k in _missing)}")


def resolve_kind(name: str) -> AgentKind:
    """Resolve an agent name from a plan step.

    Raises:
        UnknownAgentKindError: If the name is not one of the known kinds
    """
    try:
        return AgentKind(name)
    except ValueError:
        raise UnknownAgentKindError(name) from None


def build_input(
    agent: str,
    instruction: str,
    context: str,
    defaults: CapabilityDefaults | None = None,
) -> BaseModel:
    """Build the typed capability input for a step.

    Pure and deterministic: the same arguments always give an equal input.

    Raises:
        UnknownAgentKindError: If ``agent`` is not a known kind
    """
    capability = CAPABILITIES[resolve_kind(agent)]
    return capability.build(instruction, context, defaults or CapabilityDefaults())


class AgentInvoker:
    """Invokes one agent capability per call through the model service.

    Usage:
        invoker = AgentInvoker(service)
        output = await invoker.invoke("research", "Find cases on X", context.text)
    """

    def __init__(
        self,
        service: GenerativeModelService,
        defaults: CapabilityDefaults | None = None,
    ) -> None:
        self.service = service
        self.defaults = defaults or CapabilityDefaults()

    async def invoke(
        self,
        agent: str,
        instruction: str,
        context: str,
        step_number: int | None = None,
    ) -> BaseModel:
        """Run one capability.

        Args:
            agent: Agent kind named by the plan step
            instruction: The step's instruction
            context: Rendered workflow context so far
            step_number: Step being executed, attached to any error

        Returns:
            The capability's typed output

        Raises:
            UnknownAgentKindError: If ``agent`` is unknown; no service call is made
            AgentInvocationError: If building the input or the service call fails
        """
        try:
            kind = resolve_kind(agent)
        except UnknownAgentKindError as e:
            e.step_number = step_number
            raise

        capability = CAPABILITIES[kind]
        try:
            payload = capability.build(instruction, context, self.defaults)
        except Exception as e:
            raise AgentInvocationError(
                f"Invalid input for {kind.value} agent: {e}",
                step_number=step_number,
                agent=kind.value,
            ) from e

        logger.debug("Invoking %s agent (template '%s')", kind.value, capability.template_id)
        try:
            return await self.service.generate_structured(capability.template_id, payload)
        except LegalFlowError as e:
            raise AgentInvocationError(e.message, step_number=step_number, agent=kind.value) from e
        except Exception as e:
            raise AgentInvocationError(
                f"{kind.value} agent failed: {e}", step_number=step_number, agent=kind.value
            ) from e
