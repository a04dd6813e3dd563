"""Input and task output models for the data architecture process.

Data architecture tasks report their designs inline (diagrams, DDL,
reports) rather than as files, so every output extends ``PlanningOutput``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from archsitter.processes.common import ProcessInputs
from archsitter.runtime.models import CamelModel, PlanningOutput

Severity = Literal["critical", "high", "medium", "low"]


class DataArchitectureInputs(ProcessInputs):
    project_name: str | None = None
    requirements: dict[str, Any] = Field(default_factory=dict)
    existing_architecture: dict[str, Any] = Field(default_factory=dict)
    constraints: dict[str, Any] = Field(default_factory=dict)
    output_dir: str = "data-architecture-output"


# =============================================================================
# Requirements and models
# =============================================================================


class DataDomain(CamelModel):
    name: str
    description: str | None = None
    business_importance: Severity | None = None
    entities: list[str] = Field(default_factory=list)


class DataEntity(CamelModel):
    name: str
    domain: str | None = None
    description: str | None = None
    key_attributes: list[str] = Field(default_factory=list)
    estimated_record_count: str | None = None
    growth_rate: str | None = None


class DataSource(CamelModel):
    name: str
    type: Literal["database", "api", "file", "stream", "iot", "manual"] | None = None
    frequency: str | None = None
    volume: str | None = None
    format: str | None = None


class DataRequirements(PlanningOutput):
    data_domains: list[DataDomain]
    entities: list[DataEntity]
    data_sources: list[DataSource]
    volume_requirements: dict[str, Any] = Field(default_factory=dict)
    velocity_requirements: dict[str, Any] = Field(default_factory=dict)
    variety_requirements: dict[str, Any] = Field(default_factory=dict)
    quality_requirements: list[dict[str, Any]] = Field(default_factory=list)
    retention_requirements: list[dict[str, Any]] = Field(default_factory=list)
    compliance_requirements: list[dict[str, Any]] = Field(default_factory=list)
    access_patterns: list[dict[str, Any]] = Field(default_factory=list)
    requirements_report: str | None = Field(default=None, description="Markdown report")


class ConceptualEntity(CamelModel):
    name: str
    description: str | None = None
    domain: str | None = None
    key_attributes: list[str] = Field(default_factory=list)
    supertype: str | None = None
    subtypes: list[str] = Field(default_factory=list)


class EntityRelationship(CamelModel):
    name: str | None = None
    from_entity: str
    to_entity: str
    cardinality: Literal["one-to-one", "one-to-many", "many-to-many"]
    from_optional: bool | None = None
    to_optional: bool | None = None
    description: str | None = None


class ConceptualModel(PlanningOutput):
    entities: list[ConceptualEntity]
    relationships: list[EntityRelationship]
    business_rules: list[dict[str, Any]] = Field(default_factory=list)
    diagram: str = Field(description="Entity-relationship diagram in mermaid or text")
    design_decisions: list[dict[str, Any]] = Field(default_factory=list)


class LogicalTable(CamelModel):
    name: str
    description: str | None = None
    attributes: list[dict[str, Any]] = Field(default_factory=list)
    estimated_rows: str | None = None


class LogicalKey(CamelModel):
    table: str
    key_type: Literal["primary", "foreign", "unique", "composite"]
    columns: list[str] = Field(default_factory=list)
    referenced_table: str | None = None
    referenced_columns: list[str] = Field(default_factory=list)


class LogicalModel(PlanningOutput):
    tables: list[LogicalTable]
    collections: list[dict[str, Any]] = Field(default_factory=list)
    keys: list[LogicalKey]
    indexes: list[dict[str, Any]] = Field(default_factory=list)
    normalization: dict[str, Any] = Field(default_factory=dict)
    data_dictionary: str | None = None
    diagram: str

    @property
    def structure_count(self) -> int:
        """Tables, or collections for document stores."""
        return len(self.tables) or len(self.collections)


# =============================================================================
# Storage
# =============================================================================


class StorageCandidate(CamelModel):
    name: str
    type: (
        Literal[
            "relational",
            "nosql-document",
            "nosql-keyvalue",
            "nosql-columnar",
            "nosql-graph",
            "warehouse",
            "timeseries",
            "search",
            "object-storage",
            "cache",
        ]
        | None
    ) = None
    vendor: str | None = None
    deployment: Literal["cloud-managed", "self-hosted", "hybrid"] | None = None
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    use_cases: list[str] = Field(default_factory=list)
    cap_theorem: Literal["CP", "AP", "CA"] | None = None
    acid_compliance: bool | None = None
    scalability: Literal["vertical", "horizontal", "both"] | None = None
    licensing_cost: str | None = None


class StorageSelection(PlanningOutput):
    candidates: list[StorageCandidate]
    evaluation_criteria: dict[str, Any]
    polyglot_persistence: dict[str, Any] = Field(default_factory=dict)
    recommendations: list[str] = Field(default_factory=list)


class StorageEvaluation(PlanningOutput):
    technology_name: str
    data_model_fit: dict[str, Any] = Field(default_factory=dict)
    performance: dict[str, Any] = Field(default_factory=dict)
    scalability: dict[str, Any] = Field(default_factory=dict)
    availability: dict[str, Any] = Field(default_factory=dict)
    consistency: dict[str, Any] = Field(default_factory=dict)
    operational_complexity: dict[str, Any] = Field(default_factory=dict)
    security: dict[str, Any] = Field(default_factory=dict)
    cost_estimate: dict[str, Any]
    ecosystem: dict[str, Any] = Field(default_factory=dict)
    risks: list[dict[str, Any]] = Field(default_factory=list)
    fit_score: float = Field(ge=0, le=100)
    recommendation: str | None = None


class AdditionalStore(CamelModel):
    technology: str
    purpose: str | None = None
    data_domains: list[str] = Field(default_factory=list)


class StorageRecommendation(CamelModel):
    primary_database: str
    rationale: str | None = None
    additional_stores: list[AdditionalStore] = Field(default_factory=list)


class StorageArchitecture(PlanningOutput):
    recommendation: StorageRecommendation
    architecture: dict[str, Any]
    replication_strategy: dict[str, Any] = Field(default_factory=dict)
    caching_architecture: dict[str, Any] = Field(default_factory=dict)
    partitioning_strategy: dict[str, Any] = Field(default_factory=dict)
    quality_attributes: dict[str, Any] = Field(
        description="scalability, availability and consistency strategies"
    )
    monitoring: dict[str, Any] = Field(default_factory=dict)
    architecture_diagram: str | None = None
    design_decisions: list[dict[str, Any]] = Field(default_factory=list)

    def missing_quality_attributes(self, required: tuple[str, ...]) -> list[str]:
        return [name for name in required if not self.quality_attributes.get(name)]


class PhysicalModel(PlanningOutput):
    physical_structures: list[dict[str, Any]]
    indexes: list[dict[str, Any]]
    optimization: dict[str, Any] = Field(default_factory=dict)
    storage_configuration: dict[str, Any] = Field(default_factory=dict)
    ddl_scripts: dict[str, str]
    storage_estimate: dict[str, Any] = Field(default_factory=dict)


# =============================================================================
# Flow, integration, governance, security
# =============================================================================


class DataFlowDesign(PlanningOutput):
    data_flows: list[dict[str, Any]]
    pipelines: list[dict[str, Any]]
    transformations: list[dict[str, Any]] = Field(default_factory=list)
    data_lineage: dict[str, Any] = Field(default_factory=dict)
    orchestration: dict[str, Any] = Field(default_factory=dict)
    quality_gates: list[dict[str, Any]] = Field(default_factory=list)
    technologies: list[dict[str, Any]] = Field(default_factory=list)
    diagram: str


class DataIntegration(PlanningOutput):
    integration_points: list[dict[str, Any]]
    patterns: list[dict[str, Any]]
    data_contracts: list[dict[str, Any]] = Field(default_factory=list)
    synchronization: dict[str, Any] = Field(default_factory=dict)
    monitoring: dict[str, Any] = Field(default_factory=dict)


class GovernancePolicy(CamelModel):
    policy: str
    description: str | None = None
    scope: str | None = None
    enforcement: str | None = None


class DataGovernance(PlanningOutput):
    roles: list[dict[str, Any]]
    data_classification: list[dict[str, Any]] = Field(default_factory=list)
    policies: list[GovernancePolicy]
    quality_standards: list[dict[str, Any]] = Field(default_factory=list)
    metadata_management: dict[str, Any] = Field(default_factory=dict)
    lifecycle_management: list[dict[str, Any]] = Field(default_factory=list)
    master_data_management: dict[str, Any] = Field(default_factory=dict)
    data_catalog: dict[str, Any] = Field(default_factory=dict)
    standards: list[dict[str, Any]]


class ComplianceControl(CamelModel):
    standard: str
    requirements: list[str] = Field(default_factory=list)
    controls: list[str] = Field(default_factory=list)
    validation: str | None = None


class SecurityControl(CamelModel):
    control: str
    type: Literal["preventive", "detective", "corrective"] | None = None
    implementation: str | None = None


class DataSecurity(PlanningOutput):
    encryption: dict[str, Any]
    access_control: dict[str, Any]
    authentication: dict[str, Any] = Field(default_factory=dict)
    data_masking: dict[str, Any] = Field(default_factory=dict)
    tokenization: dict[str, Any] = Field(default_factory=dict)
    audit_logging: dict[str, Any] = Field(default_factory=dict)
    key_management: dict[str, Any] = Field(default_factory=dict)
    privacy_controls: list[dict[str, Any]] = Field(default_factory=list)
    compliance_controls: list[ComplianceControl] = Field(default_factory=list)
    controls: list[SecurityControl]
    threat_model: list[dict[str, Any]] = Field(default_factory=list)

    def missing_compliance(self, standards: list[str]) -> list[str]:
        """Required standards with no matching compliance control."""
        addressed = {control.standard for control in self.compliance_controls}
        return [standard for standard in standards if standard not in addressed]


# =============================================================================
# Migration, performance, DR, roadmap, risk
# =============================================================================


class DataMigration(PlanningOutput):
    current_state_assessment: dict[str, Any] = Field(default_factory=dict)
    approach: dict[str, Any]
    phases: list[dict[str, Any]]
    data_transformation: list[dict[str, Any]] = Field(default_factory=list)
    validation: dict[str, Any] = Field(default_factory=dict)
    downtime_minimization: dict[str, Any] = Field(default_factory=dict)
    rollback_strategy: dict[str, Any] | None = Field(
        default=None, description="Triggers, procedure, backup and recovery time"
    )
    cutover_plan: dict[str, Any] = Field(default_factory=dict)
    risks: list[dict[str, Any]] = Field(default_factory=list)
    timeline: dict[str, Any] = Field(default_factory=dict)


class PerformanceStrategy(PlanningOutput):
    performance_targets: list[dict[str, Any]]
    optimizations: list[dict[str, Any]]
    query_optimization: dict[str, Any] = Field(default_factory=dict)
    caching: dict[str, Any] = Field(default_factory=dict)
    resource_management: dict[str, Any] = Field(default_factory=dict)
    monitoring: dict[str, Any]
    load_testing: dict[str, Any] = Field(default_factory=dict)
    capacity_planning: dict[str, Any] = Field(default_factory=dict)


class DisasterRecovery(PlanningOutput):
    rpo: str
    rto: str
    backup_strategy: dict[str, Any]
    dr_architecture: dict[str, Any]
    failover_procedure: dict[str, Any] = Field(default_factory=dict)
    failback_procedure: dict[str, Any] = Field(default_factory=dict)
    testing: dict[str, Any] = Field(default_factory=dict)
    monitoring: dict[str, Any] = Field(default_factory=dict)
    runbooks: list[dict[str, Any]] = Field(default_factory=list)
    cost_estimate: dict[str, Any] = Field(default_factory=dict)


class RoadmapTimeline(CamelModel):
    total_duration: str
    start_date: str | None = None
    milestones: list[dict[str, Any]] = Field(default_factory=list)


class RoadmapCost(CamelModel):
    infrastructure: str | None = None
    tools: str | None = None
    personnel: str | None = None
    migration: str | None = None
    contingency: str | None = None
    total: str
    breakdown: list[dict[str, Any]] = Field(default_factory=list)


class ImplementationRoadmap(PlanningOutput):
    phases: list[dict[str, Any]]
    timeline: RoadmapTimeline
    cost: RoadmapCost
    team: list[dict[str, Any]] = Field(default_factory=list)
    risks: list[dict[str, Any]] = Field(default_factory=list)
    architecture_document: str | None = None
    roadmap_markdown: str | None = None


class DataArchitectureRisk(CamelModel):
    risk_id: str | None = None
    category: str | None = None
    description: str
    severity: Severity
    probability: Literal["high", "medium", "low"] | None = None
    impact: str | None = None
    mitigation_plan: str | None = None
    contingency_plan: str | None = None
    owner: str | None = None


class RiskAnalysis(PlanningOutput):
    risks: list[DataArchitectureRisk]
    critical_risks: list[str]
    overall_risk_level: Literal["high", "medium", "low"]
    risk_mitigation_timeline: list[dict[str, Any]] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)

    def unmitigated_critical_risks(self) -> list[DataArchitectureRisk]:
        return [r for r in self.risks if r.severity == "critical" and not r.mitigation_plan]
