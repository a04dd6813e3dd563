"""Input and task output models for the technology stack evaluation process."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from archsitter.processes.common import ProcessInputs
from archsitter.runtime.models import CamelModel, PlanningOutput

Level = Literal["critical", "high", "medium", "low"]
Confidence = Literal["high", "medium", "low"]


class TechStackEvaluationInputs(ProcessInputs):
    project_name: str | None = None
    requirements: dict[str, Any] = Field(default_factory=dict)
    constraints: dict[str, Any] = Field(default_factory=dict)
    technology_category: str = "Technology Stack"
    candidate_list: list[Any] = Field(default_factory=list)
    output_dir: str = "tech-stack-evaluation-output"


# =============================================================================
# Requirements, candidates, criteria
# =============================================================================


class FunctionalRequirement(CamelModel):
    requirement: str
    priority: Literal["must-have", "should-have", "could-have", "wont-have"] | None = None
    description: str | None = None


class RequirementsDefinition(PlanningOutput):
    functional_requirements: list[FunctionalRequirement]
    non_functional_requirements: dict[str, dict[str, Any]]
    constraints: dict[str, Any]
    integration_requirements: list[dict[str, Any]] = Field(default_factory=list)
    critical_success_factors: list[str] = Field(default_factory=list)
    deal_breakers: list[str] = Field(default_factory=list)
    acceptance_criteria: list[str] = Field(default_factory=list)
    requirements_score: float | None = Field(default=None, ge=0, le=100)
    requirements_document: str | None = None


class LongListEntry(CamelModel):
    name: str
    version: str | None = None
    website: str | None = None
    included: bool | None = None
    reason: str | None = None


class Candidate(CamelModel):
    name: str
    version: str | None = None
    website: str | None = None
    github_repo: str | None = None
    maintainer: str | None = None
    maturity_level: Literal["early-adoption", "growing", "mature", "legacy"] | None = None
    community_size: Literal["small", "medium", "large", "very-large"] | None = None
    key_strengths: list[str] = Field(default_factory=list)
    known_limitations: list[str] = Field(default_factory=list)
    selection_rationale: str | None = None


class CandidateIdentification(PlanningOutput):
    long_list: list[LongListEntry]
    shortlist: list[Candidate]
    filtering_criteria: list[dict[str, Any]]
    excluded_technologies: list[dict[str, str]] = Field(default_factory=list)


class Criterion(CamelModel):
    category: str
    criterion: str
    weight: float
    scoring_guideline: str | None = None
    measurement_method: str | None = None


class ScoringScale(CamelModel):
    min: float
    max: float
    description: str | None = None


class PocScope(CamelModel):
    description: str
    key_features_to_test: list[str] = Field(default_factory=list)
    performance_metrics: list[str] = Field(default_factory=list)
    estimated_effort: str | None = None


class EvaluationCriteria(PlanningOutput):
    criteria: list[Criterion]
    categorized_criteria: dict[str, list[dict[str, Any]]] = Field(default_factory=dict)
    total_weight: float
    criteria_count: int | None = None
    scoring_scale: ScoringScale
    poc_scope: PocScope
    sensitivity_analysis: dict[str, list[str]] = Field(default_factory=dict)

    @property
    def count(self) -> int:
        return self.criteria_count if self.criteria_count is not None else len(self.criteria)


# =============================================================================
# Research and proofs of concept
# =============================================================================


class CandidateResearch(PlanningOutput):
    candidate_name: str
    version: str | None = None
    research_findings: dict[str, Any]
    sources: list[dict[str, str]]
    research_notes: str | None = None
    research_report: str | None = None


class DeveloperExperience(CamelModel):
    api_ease_of_use: float | None = Field(default=None, ge=0, le=10)
    documentation_quality: float | None = Field(default=None, ge=0, le=10)
    error_handling: float | None = Field(default=None, ge=0, le=10)
    debugging_experience: float | None = Field(default=None, ge=0, le=10)
    ide_support: float | None = Field(default=None, ge=0, le=10)
    overall_experience: float | None = Field(default=None, ge=0, le=10)


class PocResult(PlanningOutput):
    candidate_name: str
    implementation_time: dict[str, str]
    performance_metrics: dict[str, str]
    functional_validation: list[dict[str, Any]] = Field(default_factory=list)
    developer_experience: DeveloperExperience
    challenges_encountered: list[dict[str, str]] = Field(default_factory=list)
    surprises: list[dict[str, str]] = Field(default_factory=list)
    code_snippets: list[dict[str, str]] = Field(default_factory=list)
    recommendation: str | None = None
    poc_report: str | None = None


# =============================================================================
# Scoring, risks, recommendation
# =============================================================================


class RankedCandidate(CamelModel):
    rank: int
    name: str
    total_score: float
    weighted_score: float | None = None
    category_scores: dict[str, float] = Field(default_factory=dict)
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)


class TopRecommendation(CamelModel):
    name: str
    total_score: float
    confidence: Confidence | None = None
    score_gap: float | None = None
    justification: str | None = None


class ScoringComparison(PlanningOutput):
    ranked_candidates: list[RankedCandidate]
    comparison_matrix: dict[str, Any]
    top_recommendation: TopRecommendation
    sensitivity_analysis: dict[str, Any] = Field(default_factory=dict)
    close_comparisons: list[dict[str, Any]] = Field(default_factory=list)
    comparison_report: str | None = None


class TechnologyRisk(CamelModel):
    risk_id: str | None = None
    candidate: str | None = None
    category: (
        Literal["adoption", "technical", "vendor-community", "security", "cost", "long-term"]
        | None
    ) = None
    description: str
    severity: Level
    probability: Confidence | None = None
    impact: str | None = None
    mitigation_plan: str | None = None
    contingency_plan: str | None = None


class RiskAssessment(PlanningOutput):
    risks: list[TechnologyRisk]
    risks_by_candidate: dict[str, Any] = Field(default_factory=dict)
    overall_risk_assessment: dict[str, str]
    critical_risks: list[str] = Field(default_factory=list)
    risk_mitigation_timeline: list[dict[str, str]] = Field(default_factory=list)
    risk_assessment_report: str | None = None

    def critical(self) -> list[TechnologyRisk]:
        return [risk for risk in self.risks if risk.severity == "critical"]

    def unmitigated_critical_risks(self) -> list[TechnologyRisk]:
        return [risk for risk in self.critical() if not risk.mitigation_plan]


class FinalRecommendation(PlanningOutput):
    selected_technology: str
    version: str | None = None
    total_score: float | None = None
    risk_level: Level | None = None
    justification: dict[str, Any]
    confidence: Confidence
    confidence_factors: dict[str, str] = Field(default_factory=dict)
    alternatives_considered: list[dict[str, str]]
    implementation_guidance: dict[str, Any] = Field(default_factory=dict)
    next_steps: list[dict[str, str]] = Field(default_factory=list)
    stakeholder_approval_required: list[str] = Field(default_factory=list)
    recommendation_document: str | None = None


# =============================================================================
# ADR and onboarding
# =============================================================================


class TechnologyAdr(PlanningOutput):
    adr_number: int
    adr_path: str | None = None
    title: str | None = None
    status: Literal["proposed", "accepted", "deprecated", "superseded"]
    date: str | None = None
    author: str | None = None
    stakeholders: list[str] = Field(default_factory=list)
    adr_document: str
    related_adrs: list[dict[str, Any]] = Field(default_factory=list, alias="relatedADRs")


class OnboardingPhase(CamelModel):
    phase: str
    duration: str | None = None
    objectives: list[str] = Field(default_factory=list)
    activities: list[str] = Field(default_factory=list)
    deliverables: list[str] = Field(default_factory=list)
    success_criteria: list[str] = Field(default_factory=list)


class OnboardingPlan(PlanningOutput):
    skill_gap_analysis: dict[str, list[str]] = Field(default_factory=dict)
    learning_objectives: list[dict[str, str]] = Field(default_factory=list)
    learning_resources: list[dict[str, str]]
    phases: list[OnboardingPhase]
    training_required: bool | None = None
    training_approach: dict[str, Any] = Field(default_factory=dict)
    pilot_project: dict[str, Any] = Field(default_factory=dict)
    champions: list[dict[str, Any]] = Field(default_factory=list)
    estimated_duration: str
    estimated_cost: str
    timeline: dict[str, Any] = Field(default_factory=dict)
    plan_document: str | None = None
