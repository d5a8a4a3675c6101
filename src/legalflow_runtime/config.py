"""Run-time policy for the orchestrator.

The fixed values the agents are called with when a plan step only supplies
an instruction live here as an explicit, overridable policy object.
"""

from typing import Literal

from pydantic import BaseModel, Field


class DraftDefaults(BaseModel):
    document_type: str = Field(default="contract")
    tone: str = Field(default="neutral")
    jurisdiction: str = Field(default="generic")


class PredictDefaults(BaseModel):
    case_type: str = Field(default="civil")
    jurisdiction: str = Field(default="generic")
    judge_name: str = Field(default="other")


class NegotiateDefaults(BaseModel):
    opponent_position: str = Field(default="Not specified")
    opponent_style: str = Field(default="default")
    negotiation_context: str = Field(default="Not specified")


class CrossExamineDefaults(BaseModel):
    my_role: str = Field(default="prosecution")
    simulation_role: str = Field(default="witness")


class CapabilityDefaults(BaseModel):
    """Values for agent input fields that a plan step does not provide."""

    draft: DraftDefaults = Field(default_factory=DraftDefaults)
    predict: PredictDefaults = Field(default_factory=PredictDefaults)
    negotiate: NegotiateDefaults = Field(default_factory=NegotiateDefaults)
    cross_examine: CrossExamineDefaults = Field(default_factory=CrossExamineDefaults)


class ExecutionPolicy(BaseModel):
    """How the planner and executor behave."""

    max_steps: int = Field(default=10, ge=1, description="Reject plans longer than this")
    reporter_failure: Literal["log", "raise"] = Field(
        default="log",
        description="'log' keeps running when a status reporter raises; 'raise' aborts the run",
    )
