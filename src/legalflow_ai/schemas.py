"""Structured input and output schemas for every LegalFlow agent.

Each capability talks to the model service through a pair of pydantic
models: the input is rendered into the prompt, the output is the schema the
model's structured response must validate against.
"""

from typing import Literal

from pydantic import BaseModel, Field

AgentName = Literal["research", "draft", "review", "predict", "negotiate", "cross-examine"]
RiskLevel = Literal["low", "medium", "high"]


# Plan generation


class PlanRequest(BaseModel):
    """Input for plan generation."""

    objective: str = Field(..., description="The user's high-level legal objective")


class PlannedStep(BaseModel):
    """One step of a model-generated plan."""

    step: int = Field(..., description="A unique number for the step order")
    agent: AgentName = Field(..., description="The agent that performs this step")
    prompt: str = Field(..., description="Self-contained instruction passed to the agent")
    summary: str = Field(..., description="Short, user-friendly description of the step")


class PlanDraft(BaseModel):
    """Output of plan generation."""

    plan: list[PlannedStep] = Field(default_factory=list)


# Research


class ResearchInput(BaseModel):
    legal_query: str = Field(..., description="The legal query to research")


class RankedCase(BaseModel):
    rank: int
    title: str
    citation: str
    jurisdiction: str
    date: str
    summary: str = Field(..., description="Why the case is relevant to the query")


class KeyPrinciple(BaseModel):
    principle: str
    cases: list[str] = Field(default_factory=list, description="Citations discussing the principle")


class ResearchOutput(BaseModel):
    summary: str = Field(..., description="Summarized report of relevant cases and laws")
    ranked_cases: list[RankedCase] = Field(default_factory=list)
    key_principles: list[KeyPrinciple] = Field(default_factory=list)


# Drafting


class DraftInput(BaseModel):
    document_type: str
    tone: str
    jurisdiction: str
    prompt: str = Field(..., description="What the document must cover")


class DraftClause(BaseModel):
    title: str
    content: str
    risk: RiskLevel
    risk_explanation: str


class DraftOutput(BaseModel):
    title: str
    full_draft: str = Field(..., description="The complete, ready-to-use document")
    clauses: list[DraftClause] = Field(default_factory=list)


# Document review


class ReviewInput(BaseModel):
    document_text: str = Field(..., description="Full text of the document to analyze")


class Anomaly(BaseModel):
    clause: str
    description: str
    severity: RiskLevel
    recommendation: str
    improved_clause: str | None = None


class KeyDate(BaseModel):
    date: str
    description: str


class ReviewOutput(BaseModel):
    summary: str
    anomalies: list[Anomaly] = Field(default_factory=list)
    key_dates: list[KeyDate] = Field(default_factory=list)


# Outcome prediction


class PredictInput(BaseModel):
    case_type: str
    jurisdiction: str
    judge_name: str
    case_summary: str


class Strategy(BaseModel):
    strategy: str
    success_rate: int = Field(..., ge=0, le=100)


class PredictOutput(BaseModel):
    win_probability: int = Field(..., ge=0, le=100)
    prediction_summary: str
    recommended_strategies: list[Strategy] = Field(default_factory=list)


# Negotiation support


class NegotiateInput(BaseModel):
    current_clause: str
    my_goal: str
    opponent_position: str
    opponent_style: str
    negotiation_context: str


class AlternativeClause(BaseModel):
    clause: str
    rationale: str
    acceptance_probability: int = Field(..., ge=0, le=100)


class NegotiateOutput(BaseModel):
    opponent_analysis: str
    alternative_clauses: list[AlternativeClause] = Field(default_factory=list)
    batna_summary: str


# Cross-examination preparation


class CrossExamineInput(BaseModel):
    witness_statement: str
    evidence_summary: str
    my_role: str
    simulation_role: str


class Inconsistency(BaseModel):
    statement: str
    contradiction: str
    significance: str


class StrategicQuestion(BaseModel):
    question: str
    purpose: str


class CrossExamineOutput(BaseModel):
    inconsistencies: list[Inconsistency] = Field(default_factory=list)
    witness_motivation: str
    questions: list[StrategicQuestion] = Field(default_factory=list)
    anticipated_objections: list[str] = Field(default_factory=list)
    simulation: str = Field(..., description="Sample role-play dialogue")
