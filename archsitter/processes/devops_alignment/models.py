"""Input and task output models for the DevOps architecture alignment process."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from archsitter.processes.common import ProcessInputs
from archsitter.runtime.models import CamelModel, TaskOutput

Severity = Literal["critical", "high", "medium", "low"]


class ScalabilityRequirements(CamelModel):
    target_load: str = "50K concurrent users"
    availability: str = "99.9%"
    regions: list[str] = Field(default_factory=lambda: ["us-east", "us-west"])


class DeploymentConstraints(CamelModel):
    downtime: str = "zero"
    rollback_time: str = "< 5 minutes"
    deployment_window: str = "anytime"
    compliance_requirements: list[str] = Field(default_factory=list)


class DevopsAlignmentInputs(ProcessInputs):
    project_name: str | None = None
    deployment_target: str = "kubernetes"
    release_frequency: str = "multiple-per-day"
    scalability_requirements: ScalabilityRequirements = Field(
        default_factory=ScalabilityRequirements
    )
    constraints: DeploymentConstraints = Field(default_factory=DeploymentConstraints)
    current_cicd: dict[str, Any] = Field(default_factory=dict, alias="currentCICD")
    existing_infrastructure: dict[str, Any] = Field(default_factory=dict)
    team_size: str = "medium"
    output_dir: str = "devops-architecture-output"


# =============================================================================
# Assessment and pipeline
# =============================================================================


class Assessment(CamelModel):
    cicd_maturity: Literal["manual", "basic", "automated", "advanced", "optimized"] | None = None
    deployment_frequency: str | None = None
    automation_level: float | None = Field(default=None, ge=0, le=100)
    infrastructure_as_code: bool | None = None
    monitoring_in_place: bool | None = None


class Gap(CamelModel):
    severity: Severity
    area: str
    description: str | None = None
    impact: str | None = None


class CurrentStateAssessment(TaskOutput):
    success: bool
    assessment: Assessment
    gaps: list[Gap]
    pain_points: list[str]
    recommendations: list[str] = Field(default_factory=list)

    def critical_gaps(self) -> list[Gap]:
        return [gap for gap in self.gaps if gap.severity == "critical"]


class PipelineStage(CamelModel):
    name: str
    type: str
    order: int | None = None
    parallel: bool | None = None
    quality_gate: bool | None = None
    tools: list[str] = Field(default_factory=list)


class PipelineArchitecture(CamelModel):
    stages: list[PipelineStage] = Field(default_factory=list)
    quality_gates: list[dict[str, Any]] = Field(default_factory=list)

    def stage_types(self) -> list[str]:
        return [stage.type for stage in self.stages]

    def missing_stages(self, required) -> list[str]:
        present = set(self.stage_types())
        return [stage for stage in required if stage not in present]


class PipelineAutomation(CamelModel):
    level: float = Field(ge=0, le=100)
    manual_steps: list[str] = Field(default_factory=list)


class PipelinePerformance(CamelModel):
    estimated_build_time: str | None = None
    parallelization: bool | None = None


class PipelineTooling(CamelModel):
    ci: str | None = None
    testing: list[str] = Field(default_factory=list)
    security: list[str] = Field(default_factory=list)
    artifact_storage: str | None = None


class PipelineDesign(TaskOutput):
    architecture: PipelineArchitecture
    automation: PipelineAutomation
    performance: PipelinePerformance
    tooling: PipelineTooling
    pipeline_diagram_path: str | None = None
    architecture_doc_path: str | None = None


# =============================================================================
# Deployment, feature flags, infrastructure
# =============================================================================


class DeploymentStrategy(CamelModel):
    pattern: Literal["blue-green", "canary", "rolling", "recreate", "a-b-testing", "shadow"]
    supports_zero_downtime: bool
    progressive_delivery: bool | None = None
    rollout_strategy: str | None = None
    health_check_strategy: dict[str, Any] = Field(default_factory=dict)


class Environment(CamelModel):
    name: str
    purpose: str | None = None
    promotion_criteria: list[str] = Field(default_factory=list)


class DeploymentStrategyDesign(TaskOutput):
    strategy: DeploymentStrategy
    environments: list[Environment]
    versioning: dict[str, str] = Field(default_factory=dict)


class FeatureFlagSystem(CamelModel):
    architecture: Literal["client-side", "server-side", "edge", "hybrid"] | None = None
    platform: str | None = None
    flag_types: list[str] = Field(default_factory=list)
    naming_convention: str | None = None


class FeatureFlagsDesign(TaskOutput):
    design: FeatureFlagSystem
    lifecycle: dict[str, Any]
    targeting: dict[str, Any] = Field(default_factory=dict)
    integration: dict[str, bool] = Field(default_factory=dict)


class IacSystem(CamelModel):
    tool: Literal["terraform", "cloudformation", "pulumi", "ansible", "helm", "cdk"] | None = None
    modules: list[dict[str, Any]] = Field(default_factory=list)
    state_management: dict[str, Any] = Field(default_factory=dict)


class IacDesign(TaskOutput):
    design: IacSystem
    environments: list[dict[str, Any]]
    secrets: dict[str, str] = Field(default_factory=dict)
    cicd_integration: dict[str, Any] = Field(default_factory=dict)


# =============================================================================
# Rollback, monitoring, release
# =============================================================================


class RollbackTrigger(CamelModel):
    type: Literal["automated", "manual"]
    condition: str
    action: str | None = None


class RollbackProcedures(CamelModel):
    triggers: list[RollbackTrigger] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)
    database_strategy: str | None = None
    feature_flag_rollback: bool | None = None


class RollbackDesign(TaskOutput):
    procedures: RollbackProcedures
    estimated_rollback_time: str
    runbooks: list[dict[str, str]] = Field(default_factory=list)
    testing: dict[str, Any] = Field(default_factory=dict)


class Sli(CamelModel):
    type: str
    metric: str | None = None
    measurement: str | None = None


class Slo(CamelModel):
    sli: str
    target: str
    window: str | None = None


class MonitoringPlan(CamelModel):
    slis: list[Sli] = Field(default_factory=list)
    slos: list[Slo] = Field(default_factory=list)
    deployment_metrics: list[str] = Field(default_factory=list)

    def missing_slis(self, required) -> list[str]:
        present = {sli.type for sli in self.slis}
        return [sli for sli in required if sli not in present]


class MonitoringDesign(TaskOutput):
    plan: MonitoringPlan
    tooling: dict[str, str]
    dashboards: list[dict[str, Any]] = Field(default_factory=list)
    alerting: dict[str, Any] = Field(default_factory=dict)


class ChecklistItem(CamelModel):
    task: str
    responsible: str | None = None
    mandatory: bool | None = None
    automated: bool | None = None


class ChecklistPhase(CamelModel):
    phase: Literal["pre-deployment", "deployment", "post-deployment"]
    items: list[ChecklistItem] = Field(default_factory=list)


class ReleaseChecklist(TaskOutput):
    checklist: list[ChecklistPhase]
    communication: dict[str, Any] = Field(default_factory=dict)
    approvals: dict[str, Any] = Field(default_factory=dict)


class RoadmapPhase(CamelModel):
    number: int
    name: str
    description: str | None = None
    tasks: list[dict[str, Any]] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    estimated_duration: str | None = None
    success_criteria: list[str] = Field(default_factory=list)


class ImplementationRoadmap(TaskOutput):
    roadmap: dict[str, Any]
    phases: list[RoadmapPhase]
    estimated_duration: str
    risks: list[dict[str, str]] = Field(default_factory=list)
    success_criteria: list[str] = Field(default_factory=list)
    executive_summary_path: str | None = None
    roadmap_path: str | None = None
