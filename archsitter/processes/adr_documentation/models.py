"""Input and task output models for the ADR documentation process."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from archsitter.processes.common import ProcessInputs
from archsitter.runtime.models import CamelModel, TaskOutput


class AdrDocumentationInputs(ProcessInputs):
    decision: str = ""
    context: dict[str, Any] = Field(default_factory=dict)
    stakeholders: list[str] = Field(default_factory=list)
    adr_number: int | str | None = None
    output_dir: str = "adr-output"
    related_adrs: list[str] = Field(default_factory=list)
    template: Literal["nygard", "madr", "custom"] = "nygard"
    require_approval: bool = True


# =============================================================================
# Task outputs
# =============================================================================


class DecisionScope(CamelModel):
    affected_components: list[str] = Field(default_factory=list)
    affected_teams: list[str] = Field(default_factory=list)
    impact_level: Literal["low", "medium", "high", "critical"] | None = None
    reversibility: Literal["easy", "moderate", "difficult", "irreversible"] | None = None


class DecisionAnalysis(TaskOutput):
    """Whether the decision is architecturally significant enough for an ADR."""

    warrants_adr: bool
    refined_decision: str | None = None
    scope: DecisionScope | None = None
    stakeholders: list[str] = Field(default_factory=list)
    recommendation: str | None = None
    alternative_documentation: str | None = None
    triggering_context: str | None = None


class Alternative(CamelModel):
    name: str
    description: str | None = None
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)
    feasibility: Literal["high", "medium", "low"] | None = None
    effort: str | None = None
    risk: Literal["low", "medium", "high"] | None = None


class Consequences(CamelModel):
    positive: list[str] = Field(default_factory=list)
    negative: list[str] = Field(default_factory=list)
    neutral: list[str] = Field(default_factory=list)


class AlternativesResearch(TaskOutput):
    alternatives: list[Alternative]
    recommended_option: str
    justification: str | None = None
    consequences: Consequences
    trade_offs: list[str] = Field(default_factory=list)
    assumptions: list[str] = Field(default_factory=list)


class AdrNumbering(TaskOutput):
    adr_number: str = Field(pattern=r"^[0-9]{4}$", description="Zero-padded, e.g. 0016")
    filename: str
    slug: str
    previous_highest: str | None = None


class AdrMetadata(CamelModel):
    number: str | None = None
    title: str | None = None
    status: str | None = None
    date: str | None = None
    deciders: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


class AdrDraft(TaskOutput):
    adr_document: str = Field(description="Full markdown content")
    metadata: AdrMetadata
    word_count: int | None = None
    estimated_read_time: str | None = None


class AdrComponentScores(CamelModel):
    context_clarity: float | None = None
    decision_clarity: float | None = None
    consequences_completeness: float | None = None
    alternatives_documented: float | None = None
    overall_quality: float | None = None


class AdrCompleteness(CamelModel):
    has_context: bool | None = None
    has_decision: bool | None = None
    has_consequences: bool | None = None
    has_alternatives: bool | None = None
    has_related_links: bool | None = None


class AdrQualityScore(TaskOutput):
    overall_score: float = Field(ge=0, le=100)
    component_scores: AdrComponentScores
    completeness: AdrCompleteness | None = None
    gaps: list[str] = Field(default_factory=list)
    recommendations: list[str]
    review_readiness: Literal["ready", "minor-improvements", "major-revisions"] | None = None
    strengths: list[str] = Field(default_factory=list)


class ReviewFeedback(CamelModel):
    reviewer: str | None = None
    comment: str | None = None
    severity: Literal["minor", "major", "blocker"] | None = None


class AdrReview(TaskOutput):
    approved: bool
    reviewers: list[str]
    feedback: list[ReviewFeedback]
    revisions_needed: bool = False
    revision_items: list[str] = Field(default_factory=list)
    concerns: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    approval_conditions: list[str] = Field(default_factory=list)


class AppliedChange(CamelModel):
    section: str | None = None
    change: str | None = None
    reason: str | None = None


class AdrRevision(TaskOutput):
    adr_document: str
    changes_applied: list[AppliedChange]


class AdrPublication(TaskOutput):
    published_path: str
    status: Literal["Accepted", "Proposed"]
    commit_hash: str | None = None
    publish_date: str
    notifications_sent: list[str] = Field(default_factory=list)


class AdrStatistics(CamelModel):
    accepted: int = 0
    proposed: int = 0
    deprecated: int = 0
    superseded: int = 0


class AdrIndexUpdate(TaskOutput):
    index_path: str
    total_adrs: int
    related_adrs_updated: list[str] = Field(default_factory=list)
    statistics: AdrStatistics | None = None
    tags_updated: list[str] = Field(default_factory=list)
