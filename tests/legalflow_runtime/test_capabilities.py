"""Tests for the agent invocation adapter."""

import pytest

from legalflow.exceptions import AgentInvocationError, OutputValidationError, UnknownAgentKindError
from legalflow_ai.mocks import ScriptedModelService
from legalflow_ai.schemas import (
    CrossExamineInput,
    DraftInput,
    NegotiateInput,
    PredictInput,
    ResearchInput,
    ResearchOutput,
    ReviewInput,
)
from legalflow_runtime.capabilities import (
    CAPABILITIES,
    AgentInvoker,
    build_input,
    resolve_kind,
)
from legalflow_runtime.config import CapabilityDefaults, DraftDefaults
from legalflow_runtime.models import AgentKind


class TestRegistry:
    def test_every_kind_has_a_capability(self) -> None:
        assert set(CAPABILITIES) == set(AgentKind)

    def test_template_ids_match_kind_names(self) -> None:
        for kind, capability in CAPABILITIES.items():
            assert capability.kind is kind
            assert capability.template_id == kind.value

    def test_resolve_kind(self) -> None:
        assert resolve_kind("negotiate") is AgentKind.NEGOTIATE

    def test_resolve_unknown_kind(self) -> None:
        with pytest.raises(UnknownAgentKindError) as exc_info:
            resolve_kind("astrology")
        assert exc_info.value.message == "Unknown agent: astrology"
        assert exc_info.value.agent == "astrology"


class TestBuildInput:
    def test_research_uses_instruction(self) -> None:
        payload = build_input("research", "Find cases", "CTX")
        assert payload == ResearchInput(legal_query="Find cases")

    def test_draft_uses_instruction_and_defaults(self) -> None:
        payload = build_input("draft", "Draft an NDA", "CTX")
        assert payload == DraftInput(
            document_type="contract", tone="neutral", jurisdiction="generic", prompt="Draft an NDA"
        )

    def test_review_uses_context(self) -> None:
        payload = build_input("review", "Review it", "CTX")
        assert payload == ReviewInput(document_text="CTX")

    def test_predict_defaults(self) -> None:
        payload = build_input("predict", "Slip and fall", "CTX")
        assert payload == PredictInput(
            case_type="civil", jurisdiction="generic", judge_name="other", case_summary="Slip and fall"
        )

    def test_negotiate_mapping(self) -> None:
        payload = build_input("negotiate", "Lower the cap", "CTX")
        assert payload == NegotiateInput(
            current_clause="CTX",
            my_goal="Lower the cap",
            opponent_position="Not specified",
            opponent_style="default",
            negotiation_context="Not specified",
        )

    def test_cross_examine_mapping(self) -> None:
        payload = build_input("cross-examine", "Phone records", "CTX")
        assert payload == CrossExamineInput(
            witness_statement="CTX",
            evidence_summary="Phone records",
            my_role="prosecution",
            simulation_role="witness",
        )

    def test_mapping_is_deterministic(self) -> None:
        for kind in AgentKind:
            first = build_input(kind.value, "instruction", "context")
            second = build_input(kind.value, "instruction", "context")
            assert first == second

    def test_defaults_override(self) -> None:
        defaults = CapabilityDefaults(
            draft=DraftDefaults(document_type="lease", tone="formal", jurisdiction="England")
        )
        payload = build_input("draft", "Draft a lease", "CTX", defaults)
        assert payload.document_type == "lease"
        assert payload.tone == "formal"
        assert payload.jurisdiction == "England"

    def test_unknown_kind(self) -> None:
        with pytest.raises(UnknownAgentKindError):
            build_input("astrology", "x", "y")


class TestAgentInvoker:
    @pytest.mark.asyncio
    async def test_invoke_returns_typed_output(self, research_output: ResearchOutput) -> None:
        service = ScriptedModelService({"research": research_output})
        invoker = AgentInvoker(service)

        output = await invoker.invoke("research", "Find cases", "Objective")

        assert output == research_output
        assert len(service.calls) == 1
        assert service.calls[0].payload == ResearchInput(legal_query="Find cases")

    @pytest.mark.asyncio
    async def test_unknown_kind_makes_no_service_call(self) -> None:
        service = ScriptedModelService()
        invoker = AgentInvoker(service)

        with pytest.raises(UnknownAgentKindError) as exc_info:
            await invoker.invoke("astrology", "x", "y", step_number=4)

        assert exc_info.value.step_number == 4
        assert service.calls == []

    @pytest.mark.asyncio
    async def test_service_error_is_wrapped(self) -> None:
        service = ScriptedModelService({"draft": RuntimeError("provider down")})
        invoker = AgentInvoker(service)

        with pytest.raises(AgentInvocationError) as exc_info:
            await invoker.invoke("draft", "Draft it", "ctx", step_number=2)

        error = exc_info.value
        assert "provider down" in error.message
        assert error.step_number == 2
        assert error.agent == "draft"
        assert isinstance(error.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_invalid_output_is_wrapped(self) -> None:
        service = ScriptedModelService({"research": {"ranked_cases": "not a list"}})
        invoker = AgentInvoker(service)

        with pytest.raises(AgentInvocationError) as exc_info:
            await invoker.invoke("research", "Find cases", "ctx")

        assert isinstance(exc_info.value.__cause__, OutputValidationError)

    @pytest.mark.asyncio
    async def test_exactly_one_call_per_invocation(self, research_output: ResearchOutput) -> None:
        service = ScriptedModelService({"research": research_output})
        invoker = AgentInvoker(service)

        await invoker.invoke("research", "a", "ctx")
        await invoker.invoke("research", "b", "ctx")

        assert [c.payload.legal_query for c in service.calls_for("research")] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_invoker_defaults_are_used(self) -> None:
        service = ScriptedModelService(
            {"predict": {"win_probability": 40, "prediction_summary": "Unlikely"}}
        )
        defaults = CapabilityDefaults.model_validate({"predict": {"case_type": "criminal"}})
        invoker = AgentInvoker(service, defaults)

        await invoker.invoke("predict", "Theft charge", "ctx")

        payload = service.calls[0].payload
        assert payload.case_type == "criminal"
        assert payload.judge_name == "other"
