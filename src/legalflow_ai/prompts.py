"""Prompt templates for the generative model service.

Every template id maps to a system prompt, a Jinja2 user-prompt template
(``templates/<id>.j2``) and the pydantic input/output schemas the call is
constrained to.
"""

from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from pydantic import BaseModel

from legalflow.exceptions import UnknownTemplateError
from legalflow_ai.schemas import (
    CrossExamineInput,
    CrossExamineOutput,
    DraftInput,
    DraftOutput,
    NegotiateInput,
    NegotiateOutput,
    PlanDraft,
    PlanRequest,
    PredictInput,
    PredictOutput,
    ResearchInput,
    ResearchOutput,
    ReviewInput,
    ReviewOutput,
)

TEMPLATES_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True)
class PromptTemplate:
    """A structured prompt: instructions plus the schemas that bound it."""

    id: str
    system_prompt: str
    input_type: type[BaseModel]
    output_type: type[BaseModel]

    @property
    def filename(self) -> str:
        return f"{self.id}.j2"


TEMPLATES: dict[str, PromptTemplate] = {
    t.id: t
    for t in (
        PromptTemplate(
            id="plan",
            system_prompt=(
                "You are a master legal workflow orchestrator. Analyze the user's high-level "
                "objective and break it down into a logical sequence of tasks that other AI "
                "agents can perform. Every step must be self-contained and detailed enough for "
                "the designated agent to act on it."
            ),
            input_type=PlanRequest,
            output_type=PlanDraft,
        ),
        PromptTemplate(
            id="research",
            system_prompt=(
                "You are an expert legal research assistant. Find the case law, statutes and "
                "precedents relevant to the query, rank the cases by relevance, jurisdiction and "
                "recency, and extract the key legal principles they establish."
            ),
            input_type=ResearchInput,
            output_type=ResearchOutput,
        ),
        PromptTemplate(
            id="draft",
            system_prompt=(
                "You are an expert legal drafting assistant. Generate a complete, well-structured "
                "document for the request. Give it a title, draft every necessary clause with a "
                "risk rating ('low', 'medium' or 'high') and a short explanation, and assemble the "
                "clauses into a clean, ready-to-use full draft."
            ),
            input_type=DraftInput,
            output_type=DraftOutput,
        ),
        PromptTemplate(
            id="review",
            system_prompt=(
                "You are an expert contract reviewer. Summarize the document, identify every "
                "anomaly, risk or missing standard clause with its severity, a recommendation and "
                "an improved clause, and extract all key dates and deadlines."
            ),
            input_type=ReviewInput,
            output_type=ReviewOutput,
        ),
        PromptTemplate(
            id="predict",
            system_prompt=(
                "You are a legal analyst specializing in predictive analytics. Estimate the "
                "probability of a favorable outcome (0-100), explain the factors behind it and "
                "propose two or three strategies with their predicted success rates."
            ),
            input_type=PredictInput,
            output_type=PredictOutput,
        ),
        PromptTemplate(
            id="negotiate",
            system_prompt=(
                "You are an expert legal negotiator. Analyze the opponent, propose alternative "
                "clauses that move toward the stated goal with their acceptance probability, and "
                "summarize the best alternative to a negotiated agreement."
            ),
            input_type=NegotiateInput,
            output_type=NegotiateOutput,
        ),
        PromptTemplate(
            id="cross-examine",
            system_prompt=(
                "You are an expert trial lawyer preparing a cross-examination. Compare the witness "
                "statement with the evidence, list every inconsistency and its significance, infer "
                "the witness's motivation, sequence strategic questions with their purpose, "
                "anticipate objections and write a short role-play simulation."
            ),
            input_type=CrossExamineInput,
            output_type=CrossExamineOutput,
        ),
    )
}


def _get_environment() -> Environment:
    """Get Jinja2 environment configured for prompt templates."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        undefined=StrictUndefined,
        keep_trailing_newline=False,
        autoescape=False,
    )


def get_template(template_id: str) -> PromptTemplate:
    """Look up a prompt template by id.

    Raises:
        UnknownTemplateError: If no template is registered under the id
    """
    try:
        return TEMPLATES[template_id]
    except KeyError:
        raise UnknownTemplateError(template_id) from None


def render_user_prompt(template: PromptTemplate, payload: BaseModel) -> str:
    """Render the user prompt for a call from its typed input.

    Args:
        template: The prompt template being invoked
        payload: Input model; must be an instance of ``template.input_type``

    Returns:
        The rendered user prompt
    """
    if not isinstance(payload, template.input_type):
        raise TypeError(
            f"Template '{template.id}' expects {template.input_type.__name__}, "
            f"got {type(payload).__name__}"
        )
    env = _get_environment()
    return env.get_template(template.filename).render(**payload.model_dump()).strip()
