"""LegalFlow AI - the generative model service behind every agent.

This module provides typed schemas, prompt templates and PydanticAI-backed
structured output for the legal agents.

Example:
    from legalflow_ai import PydanticAIService, AIConfig
    from legalflow_ai.schemas import ResearchInput

    service = PydanticAIService(AIConfig(model="gpt-4o"))
    report = await service.generate_structured(
        "research", ResearchInput(legal_query="Enforceability of non-compete clauses")
    )
    print(report.summary)
"""

from legalflow_ai.config import AIConfig, get_model
from legalflow_ai.demo import demo_service
from legalflow_ai.mocks import ModelCall, ScriptedModelService
from legalflow_ai.prompts import TEMPLATES, PromptTemplate, get_template, render_user_prompt
from legalflow_ai.service import GenerativeModelService, PydanticAIService, validate_output

__all__ = [
    "AIConfig",
    "get_model",
    "GenerativeModelService",
    "PydanticAIService",
    "ScriptedModelService",
    "ModelCall",
    "demo_service",
    "PromptTemplate",
    "TEMPLATES",
    "get_template",
    "render_user_prompt",
    "validate_output",
]
