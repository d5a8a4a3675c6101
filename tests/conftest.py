"""Shared pytest fixtures for LegalFlow tests.

Provides scripted model services and plan builders so tests never call a
real model.
"""

import pytest

from legalflow_ai.mocks import ScriptedModelService
from legalflow_ai.schemas import (
    DraftClause,
    DraftOutput,
    PlanDraft,
    PlannedStep,
    ResearchOutput,
    ReviewOutput,
)
from legalflow_runtime.models import PlanStep


def make_plan_draft(*agents: str) -> PlanDraft:
    """PlanDraft with one step per agent, numbered from 1."""
    return PlanDraft(
        plan=[
            PlannedStep(
                step=i,
                agent=agent,
                prompt=f"Step {i} instruction for {agent}",
                summary=f"Run {agent}",
            )
            for i, agent in enumerate(agents, 1)
        ]
    )


def make_plan(*agents: str) -> list[PlanStep]:
    """Pending PlanSteps with one step per agent, numbered from 1."""
    return [
        PlanStep(
            step_number=i,
            agent=agent,
            instruction=f"Step {i} instruction for {agent}",
            summary=f"Run {agent}",
        )
        for i, agent in enumerate(agents, 1)
    ]


@pytest.fixture
def research_output() -> ResearchOutput:
    return ResearchOutput(summary="Non-competes are void in California.")


@pytest.fixture
def draft_output() -> DraftOutput:
    return DraftOutput(
        title="Confidentiality Clause",
        full_draft="1. The Employee shall keep all information confidential.",
        clauses=[
            DraftClause(
                title="Confidentiality",
                content="The Employee shall keep all information confidential.",
                risk="low",
                risk_explanation="Standard wording.",
            )
        ],
    )


@pytest.fixture
def review_output() -> ReviewOutput:
    return ReviewOutput(summary="No anomalies found.")


@pytest.fixture
def scripted_service(
    research_output: ResearchOutput, draft_output: DraftOutput
) -> ScriptedModelService:
    """Service scripted for a research then draft workflow.

    Returns:
        ScriptedModelService with plan, research and draft responses
    """
    return ScriptedModelService(
        {
            "plan": make_plan_draft("research", "draft"),
            "research": research_output,
            "draft": draft_output,
        }
    )
