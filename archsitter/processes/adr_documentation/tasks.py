"""Task definitions for the ADR documentation process."""

from pathlib import Path

from archsitter.runtime.task import define_task

from .models import (
    AdrDraft,
    AdrIndexUpdate,
    AdrNumbering,
    AdrPublication,
    AdrQualityScore,
    AdrReview,
    AdrRevision,
    AlternativesResearch,
    DecisionAnalysis,
)

PROMPTS = Path(__file__).parent / "prompts.yaml"

decision_analysis_task = define_task(
    "decision-analysis",
    title="Analyze decision need and scope",
    agent="architecture-analyst",
    output_model=DecisionAnalysis,
    labels=["agent", "adr", "decision-analysis"],
    prompt_source=PROMPTS,
)

alternatives_research_task = define_task(
    "alternatives-research",
    title="Research and analyze decision alternatives",
    agent="solutions-architect",
    output_model=AlternativesResearch,
    labels=["agent", "adr", "alternatives-research"],
    prompt_source=PROMPTS,
)

adr_numbering_task = define_task(
    "adr-numbering",
    title="Assign sequential ADR number",
    agent="adr-manager",
    output_model=AdrNumbering,
    labels=["agent", "adr", "numbering"],
    prompt_source=PROMPTS,
)

adr_drafting_task = define_task(
    "adr-drafting",
    title="Draft ADR {adrNumber} document",
    agent="technical-writer",
    output_model=AdrDraft,
    labels=["agent", "adr", "drafting", "documentation"],
    prompt_source=PROMPTS,
)

adr_quality_scoring_task = define_task(
    "adr-quality-scoring",
    title="Score ADR {adrNumber} quality and completeness",
    agent="adr-validator",
    output_model=AdrQualityScore,
    labels=["agent", "adr", "quality-scoring", "validation"],
    prompt_source=PROMPTS,
)

adr_review_task = define_task(
    "adr-review",
    title="Conduct ADR {adrNumber} review and approval",
    agent="architecture-review-board",
    output_model=AdrReview,
    labels=["agent", "adr", "review", "approval"],
    prompt_source=PROMPTS,
)

adr_revision_task = define_task(
    "adr-revision",
    title="Incorporate review feedback into ADR {adrNumber}",
    agent="technical-writer",
    output_model=AdrRevision,
    labels=["agent", "adr", "revision"],
    prompt_source=PROMPTS,
)

adr_publishing_task = define_task(
    "adr-publishing",
    title="Publish ADR {adrNumber} to repository",
    agent="adr-publisher",
    output_model=AdrPublication,
    labels=["agent", "adr", "publishing"],
    prompt_source=PROMPTS,
)

adr_index_update_task = define_task(
    "adr-index-update",
    title="Update ADR index and related links",
    agent="adr-indexer",
    output_model=AdrIndexUpdate,
    labels=["agent", "adr", "indexing"],
    prompt_source=PROMPTS,
)

TASKS = [
    decision_analysis_task,
    alternatives_research_task,
    adr_numbering_task,
    adr_drafting_task,
    adr_quality_scoring_task,
    adr_review_task,
    adr_revision_task,
    adr_publishing_task,
    adr_index_update_task,
]
