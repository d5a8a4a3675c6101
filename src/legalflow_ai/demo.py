"""Offline demo responses for ``legalflow run --dry``.

Builds a ScriptedModelService whose plan follows the agents named in the
objective and whose agents answer with short canned outputs that echo their
input, so a whole run can be exercised without an API key.
"""

import re

from legalflow_ai.mocks import ScriptedModelService
from legalflow_ai.schemas import (
    AlternativeClause,
    Anomaly,
    CrossExamineInput,
    CrossExamineOutput,
    DraftClause,
    DraftInput,
    DraftOutput,
    Inconsistency,
    KeyDate,
    KeyPrinciple,
    NegotiateInput,
    NegotiateOutput,
    PlanDraft,
    PlannedStep,
    PlanRequest,
    PredictInput,
    PredictOutput,
    RankedCase,
    ResearchInput,
    ResearchOutput,
    ReviewInput,
    ReviewOutput,
    StrategicQuestion,
    Strategy,
)

# Objective keywords that select an agent, checked in this order
AGENT_KEYWORDS: dict[str, tuple[str, ...]] = {
    "research": ("research", "find", "precedent", "case law"),
    "draft": ("draft", "write", "prepare a", "create a"),
    "review": ("review", "analy", "check"),
    "predict": ("predict", "outcome", "chances"),
    "negotiate": ("negotiat", "counter-offer"),
    "cross-examine": ("cross", "witness"),
}

SUMMARIES = {
    "research": "Research relevant case law and statutes",
    "draft": "Draft the requested document",
    "review": "Review the work so far for risks",
    "predict": "Predict the likely case outcome",
    "negotiate": "Prepare negotiation alternatives",
    "cross-examine": "Prepare the cross-examination",
}


def _shorten(text: str, limit: int = 80) -> str:
    text = " ".join(text.split())
    return text if len(text) <= limit else text[: limit - 3] + "..."


def _agents_for(objective: str) -> list[str]:
    lowered = objective.lower()
    found: list[tuple[int, str]] = []
    for agent, keywords in AGENT_KEYWORDS.items():
        positions = [m.start() for kw in keywords for m in re.finditer(re.escape(kw), lowered)]
        if positions:
            found.append((min(positions), agent))
    agents = [agent for _, agent in sorted(found)]
    return agents or ["research", "draft"]


def demo_plan(request: PlanRequest) -> PlanDraft:
    """Heuristic plan: one step per agent mentioned, in order of mention."""
    return PlanDraft(
        plan=[
            PlannedStep(
                step=i,
                agent=agent,
                prompt=f"{SUMMARIES[agent]} for: {request.objective}",
                summary=SUMMARIES[agent],
            )
            for i, agent in enumerate(_agents_for(request.objective), 1)
        ]
    )


def demo_research(payload: ResearchInput) -> ResearchOutput:
    return ResearchOutput(
        summary=f"Demo research summary for '{_shorten(payload.legal_query)}'.",
        ranked_cases=[
            RankedCase(
                rank=1,
                title="Demo Holdings v. Example Ltd",
                citation="(2020) 1 DEMO 1",
                jurisdiction="Supreme Court",
                date="2020-01-15",
                summary="Leading authority on the question raised.",
            )
        ],
        key_principles=[KeyPrinciple(principle="Freedom of contract", cases=["(2020) 1 DEMO 1"])],
    )


def demo_draft(payload: DraftInput) -> DraftOutput:
    title = f"Demo {payload.document_type.title()}"
    clause = DraftClause(
        title="Governing Law",
        content=f"This {payload.document_type} is governed by {payload.jurisdiction} law.",
        risk="low",
        risk_explanation="Standard clause.",
    )
    return DraftOutput(
        title=title,
        full_draft=f"{title}\n\n{_shorten(payload.prompt, 200)}\n\n1. {clause.content}",
        clauses=[clause],
    )


def demo_review(payload: ReviewInput) -> ReviewOutput:
    return ReviewOutput(
        summary=f"Reviewed {len(payload.document_text)} characters of prior work.",
        anomalies=[
            Anomaly(
                clause="Termination",
                description="No termination clause was found.",
                severity="medium",
                recommendation="Add a termination for convenience clause.",
            )
        ],
        key_dates=[KeyDate(date="2025-12-31", description="Demo expiry date")],
    )


def demo_predict(payload: PredictInput) -> PredictOutput:
    return PredictOutput(
        win_probability=60,
        prediction_summary=(
            f"Demo {payload.case_type} prediction before {payload.judge_name} judge."
        ),
        recommended_strategies=[Strategy(strategy="Settle early", success_rate=65)],
    )


def demo_negotiate(payload: NegotiateInput) -> NegotiateOutput:
    return NegotiateOutput(
        opponent_analysis=f"Opponent style '{payload.opponent_style}' assumed.",
        alternative_clauses=[
            AlternativeClause(
                clause=f"Revised clause aiming to {_shorten(payload.my_goal, 60)}",
                rationale="Balances both positions.",
                acceptance_probability=55,
            )
        ],
        batna_summary="Walk away and pursue litigation.",
    )


def demo_cross_examine(payload: CrossExamineInput) -> CrossExamineOutput:
    return CrossExamineOutput(
        inconsistencies=[
            Inconsistency(
                statement="Witness was at the office all day.",
                contradiction=_shorten(payload.evidence_summary, 120),
                significance="Undermines the alibi.",
            )
        ],
        witness_motivation="Possible loyalty to the employer.",
        questions=[
            StrategicQuestion(question="Where were you at noon?", purpose="Fix the timeline.")
        ],
        anticipated_objections=["Leading question"],
        simulation=f"Counsel ({payload.my_role}): Where were you at noon?\nWitness: At my desk.",
    )


def demo_service(delay: float = 0.0) -> ScriptedModelService:
    """ScriptedModelService answering every template with demo output."""
    return ScriptedModelService(
        {
            "plan": demo_plan,
            "research": demo_research,
            "draft": demo_draft,
            "review": demo_review,
            "predict": demo_predict,
            "negotiate": demo_negotiate,
            "cross-examine": demo_cross_examine,
        },
        delay=delay,
    )
