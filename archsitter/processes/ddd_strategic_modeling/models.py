"""Input and task output models for the DDD strategic modeling process."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from archsitter.processes.common import ProcessInputs
from archsitter.runtime.models import CamelModel, TaskOutput

Level = Literal["critical", "high", "medium", "low"]
Complexity = Literal["very-high", "high", "medium", "low"]
SubdomainType = Literal["core", "supporting", "generic"]


class DddStrategicModelingInputs(ProcessInputs):
    project_name: str | None = None
    domain_description: str = ""
    stakeholders: list[Any] = Field(default_factory=list)
    existing_architecture: Any = None
    team_structure: dict[str, Any] = Field(default_factory=dict)
    output_dir: str = "ddd-strategic-modeling-output"


# =============================================================================
# Domain discovery and subdomains
# =============================================================================


class BusinessCapability(CamelModel):
    capability: str
    description: str | None = None
    business_value: Level | None = None
    change_frequency: Complexity | None = None
    complexity: Complexity | None = None
    sub_capabilities: list[str] = Field(default_factory=list)


class DomainConcept(CamelModel):
    concept: str
    type: Literal["entity", "value-object", "aggregate", "service", "event"] | None = None
    description: str | None = None
    related_capabilities: list[str] = Field(default_factory=list)


class DomainKnowledge(TaskOutput):
    business_capabilities: list[BusinessCapability]
    domain_concepts: list[DomainConcept]
    business_rules: list[dict[str, Any]] = Field(default_factory=list)
    complexity: Literal["simple", "moderate", "complex", "very-complex"]
    stakeholders: list[dict[str, Any]] = Field(default_factory=list)
    pain_points: list[str] = Field(default_factory=list)


class Subdomain(CamelModel):
    name: str
    type: SubdomainType
    description: str | None = None
    business_value: Level
    competitive_advantage: bool | None = None
    complexity: Complexity | None = None
    uncertainty: Literal["high", "medium", "low"] | None = None
    rationale: str | None = None
    related_capabilities: list[str] = Field(default_factory=list)


class SubdomainRecommendations(CamelModel):
    core_investment: str | None = None
    supporting_strategy: str | None = None
    generic_solutions: list[str] = Field(default_factory=list)
    build_vs_buy: list[dict[str, Any]] = Field(default_factory=list)


class SubdomainClassification(TaskOutput):
    subdomains: list[Subdomain]
    recommendations: SubdomainRecommendations
    investment_strategy: dict[str, list[str]] = Field(default_factory=dict)

    def of_type(self, kind: str) -> list[Subdomain]:
        return [s for s in self.subdomains if s.type == kind]


# =============================================================================
# Bounded contexts, language, context map
# =============================================================================


class BoundedContext(CamelModel):
    name: str
    type: SubdomainType
    responsibility: str
    scope: str
    subdomains: list[str] = Field(default_factory=list)
    capabilities: list[str] = Field(default_factory=list)
    business_rules: list[str] = Field(default_factory=list)
    modeling_complexity: Complexity | None = None
    public_interface: str | None = None
    boundaries: dict[str, list[str]] = Field(default_factory=dict)
    team_considerations: str | None = None


class BoundedContexts(TaskOutput):
    contexts: list[BoundedContext]
    boundary_justifications: dict[str, Any] = Field(default_factory=dict)
    size_assessment: dict[str, Any] = Field(default_factory=dict)


class GlossaryTerm(CamelModel):
    term: str
    definition: str
    context: str
    type: Literal["entity", "value-object", "aggregate", "service", "event", "concept"] | None = None
    synonyms: list[str] = Field(default_factory=list)
    related_terms: list[str] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)
    used_in_code: bool | None = None


class UbiquitousLanguage(TaskOutput):
    glossary: list[GlossaryTerm]
    context_specific_terms: dict[str, Any]
    conflicting_terms: list[dict[str, Any]] = Field(default_factory=list)

    def terms_for(self, context_name: str) -> list[GlossaryTerm]:
        return [term for term in self.glossary if term.context == context_name]


class ContextRelationship(CamelModel):
    upstream: str
    downstream: str
    pattern: Literal[
        "partnership",
        "shared-kernel",
        "customer-supplier",
        "conformist",
        "anti-corruption-layer",
        "open-host-service",
        "published-language",
        "separate-ways",
    ]
    description: str | None = None
    communication_pattern: (
        Literal["synchronous", "asynchronous", "event-driven", "batch", "none"] | None
    ) = None
    data_flow: str | None = None
    rationale: str | None = None
    risks: list[str] = Field(default_factory=list)


class ContextMapping(TaskOutput):
    relationships: list[ContextRelationship]
    strategic_patterns: list[str]
    integration_points: dict[str, list[Any]] = Field(default_factory=dict)
    diagram_path: str | None = None
    pattern_usage: dict[str, Any] = Field(default_factory=dict)


# =============================================================================
# Tactical shapes: aggregates and events
# =============================================================================


class Aggregate(CamelModel):
    name: str
    root_entity: str
    description: str | None = None
    members: dict[str, list[str]] = Field(default_factory=dict)
    invariants: list[str]
    business_rules: list[str] = Field(default_factory=list)
    boundaries: str | None = None
    estimated_size: Literal["small", "medium", "large"] | None = None


class AggregateAnalysis(TaskOutput):
    context_name: str
    aggregates: list[Aggregate]
    entities: list[dict[str, Any]] = Field(default_factory=list)
    value_objects: list[dict[str, Any]] = Field(default_factory=list)


class DomainEvent(CamelModel):
    name: str
    context: str
    publisher: str
    description: str | None = None
    trigger: str | None = None
    data: list[dict[str, Any]] = Field(default_factory=list)
    subscribers: list[str] = Field(default_factory=list)
    integration_event: bool | None = None
    event_type: Literal["domain-event", "integration-event"] | None = None


class DomainEvents(TaskOutput):
    events: list[DomainEvent]
    event_flow: list[dict[str, Any]]
    publish_subscribe_patterns: dict[str, Any] = Field(default_factory=dict)


# =============================================================================
# Teams and integration
# =============================================================================


class Team(CamelModel):
    team_name: str
    type: Literal["stream-aligned", "platform", "enabling", "complicated-subsystem"]
    owned_contexts: list[str]
    size: int | None = None
    skills: list[str] = Field(default_factory=list)
    cognitive_load: Literal["low", "medium", "high", "overloaded"] | None = None
    interactions: list[dict[str, Any]] = Field(default_factory=list)


class ContextOwnership(CamelModel):
    context: str
    team: str | None = None
    ownership_type: Literal["full", "shared", "external"] | None = None
    rationale: str | None = None


class TeamAlignment(TaskOutput):
    teams: list[Team]
    context_ownership: list[ContextOwnership]
    conways_law_alignment: bool
    team_interactions: list[dict[str, Any]] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)

    def owner_of(self, context_name: str) -> str | None:
        for ownership in self.context_ownership:
            if ownership.context == context_name:
                return ownership.team
        return None


class AntiCorruptionLayer(CamelModel):
    name: str
    protected_context: str
    external_system: str
    purpose: str | None = None
    components: dict[str, str] = Field(default_factory=dict)
    translation_direction: Literal["inbound", "outbound", "bidirectional"] | None = None
    complexity: Literal["low", "medium", "high"] | None = None


class AclDesign(TaskOutput):
    layers: list[AntiCorruptionLayer]
    translation_rules: list[dict[str, Any]] = Field(default_factory=list)
    protected_contexts: list[str] = Field(default_factory=list)


class SharedKernel(CamelModel):
    name: str
    contexts: list[str]
    shared_elements: list[str]
    rationale: str | None = None
    governance_model: str | None = None
    change_process: str | None = None
    risks: list[str] = Field(default_factory=list)


class SharedKernelAnalysis(TaskOutput):
    shared_kernels: list[SharedKernel]
    published_languages: list[dict[str, Any]]
    governance_model: dict[str, Any] = Field(default_factory=dict)


class IntegrationStrategy(TaskOutput):
    patterns: list[dict[str, Any]]
    communication_protocols: dict[str, Any]
    resilience_patterns: list[dict[str, Any]] = Field(default_factory=list)
    consistency_strategy: dict[str, list[str]] = Field(default_factory=dict)


# =============================================================================
# Validation, scoring, ADRs, documentation
# =============================================================================


class ValidationIssue(CamelModel):
    severity: Level
    category: str | None = None
    description: str
    location: str | None = None
    impact: str | None = None
    recommendation: str | None = None


class ModelValidation(TaskOutput):
    valid: bool
    issues: list[ValidationIssue]
    completeness: dict[str, float]
    recommendations: list[dict[str, Any]]
    strengths: list[str] = Field(default_factory=list)

    def critical_issues(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "critical"]


class StrategicQualityScore(TaskOutput):
    overall_score: float = Field(ge=0, le=100)
    component_scores: dict[str, float]
    quality_metrics: dict[str, str] = Field(default_factory=dict)
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    recommendations: list[dict[str, Any]] = Field(default_factory=list)
    readiness: Literal[
        "ready-for-tactical-design",
        "minor-refinements-needed",
        "major-refinements-needed",
        "needs-rework",
    ]


class StrategicAdr(CamelModel):
    number: int
    title: str
    status: Literal["proposed", "accepted", "deprecated", "superseded"] | None = None
    context: str
    decision: str
    consequences: str
    alternatives: list[str] = Field(default_factory=list)
    tradeoffs: list[str] = Field(default_factory=list)
    related_decisions: list[int] = Field(default_factory=list)


class AdrGeneration(TaskOutput):
    adrs: list[StrategicAdr]
    decision_log: list[dict[str, Any]] = Field(default_factory=list)


class StrategyDocument(TaskOutput):
    document_path: str
    executive_summary: str
    key_findings: list[dict[str, Any]]
    strategic_recommendations: list[dict[str, Any]] = Field(default_factory=list)
    next_steps: list[dict[str, Any]]
    success_criteria: list[str] = Field(default_factory=list)
