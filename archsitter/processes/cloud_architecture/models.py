"""Input and task output models for the cloud architecture design process."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from archsitter.config import CLOUD_DEFAULT_TARGET_QUALITY
from archsitter.processes.common import ProcessInputs
from archsitter.runtime.models import PlanningOutput


class CloudArchitectureInputs(ProcessInputs):
    project_name: str | None = None
    requirements: dict[str, Any] = Field(default_factory=dict)
    cloud_providers: list[str] = Field(default_factory=lambda: ["AWS", "Azure", "GCP"])
    target_quality: float = CLOUD_DEFAULT_TARGET_QUALITY
    output_dir: str = "cloud-architecture-output"


class CloudStrategy(PlanningOutput):
    approach: Literal["greenfield", "brownfield", "hybrid", "multi-cloud"]
    patterns: list[str]
    principles: list[str]
    compliance: list[str] = Field(default_factory=list)
    dr_strategy: str | None = None
    multi_region: bool | None = None
    summary: str


class ProviderSelection(PlanningOutput):
    selected_provider: Literal["AWS", "Azure", "GCP", "Multi-Cloud"]
    scoring: dict[str, Any] = Field(default_factory=dict)
    justification: str
    alternatives: list[str] = Field(default_factory=list)
    tradeoffs: list[str] = Field(default_factory=list)


class ComputeArchitecture(PlanningOutput):
    services: list[str]
    orchestration: str | None = None
    serverless: bool | None = None
    auto_scaling: dict[str, Any] = Field(default_factory=dict)
    deployment: str | None = None
    instance_types: list[str] = Field(default_factory=list)
    summary: str


class CloudDataArchitecture(PlanningOutput):
    databases: list[str]
    storage: dict[str, Any]
    caching: str | None = None
    replication: dict[str, Any] = Field(default_factory=dict)
    pipelines: list[str] = Field(default_factory=list)
    analytics: str | None = None
    backup: dict[str, Any] = Field(default_factory=dict)
    summary: str


class NetworkArchitecture(PlanningOutput):
    vpc: dict[str, Any]
    subnets: list[dict[str, Any]]
    routing: dict[str, Any] = Field(default_factory=dict)
    load_balancing: list[str] = Field(default_factory=list)
    api_gateway: str | None = None
    dns: str | None = None
    vpn: dict[str, Any] = Field(default_factory=dict)
    cdn: str | None = None
    summary: str


class SecurityCompliance(PlanningOutput):
    iam: dict[str, Any]
    authentication: str
    encryption: dict[str, Any]
    key_management: str | None = None
    network_security: list[str] = Field(default_factory=list)
    monitoring: list[str] = Field(default_factory=list)
    compliance: list[str] = Field(default_factory=list)
    incident_response: dict[str, Any] = Field(default_factory=dict)
    summary: str


class HighAvailability(PlanningOutput):
    multi_az: bool
    regional: dict[str, Any] = Field(default_factory=dict)
    auto_scaling: dict[str, Any] = Field(default_factory=dict)
    load_balancing: dict[str, Any] = Field(default_factory=dict)
    resilience: list[str] = Field(default_factory=list)
    backup: dict[str, Any] = Field(default_factory=dict)
    dr: dict[str, Any] = Field(default_factory=dict)
    sla: dict[str, Any]
    rpo: str | None = None
    rto: str | None = None
    summary: str


class CostOptimization(PlanningOutput):
    estimated_monthly_cost: float
    breakdown: dict[str, Any] = Field(default_factory=dict)
    optimizations: list[dict[str, Any]] = Field(default_factory=list)
    reservations: list[str] = Field(default_factory=list)
    spot_instances: bool | None = None
    monitoring: dict[str, Any] = Field(default_factory=dict)
    tco: dict[str, Any] = Field(default_factory=dict)
    savings_percentage: float | None = None
    summary: str


class InfrastructureAsCode(PlanningOutput):
    tool: Literal["Terraform", "CloudFormation", "ARM", "Pulumi"]
    modules: list[str]
    files: list[dict[str, Any]] = Field(default_factory=list)
    variables: dict[str, Any] = Field(default_factory=dict)
    environments: list[str] = Field(default_factory=list)
    pipeline: dict[str, Any] = Field(default_factory=dict)
    state_management: dict[str, Any] = Field(default_factory=dict)
    summary: str


class QualityValidation(PlanningOutput):
    score: float = Field(ge=0, le=100)
    assessment: dict[str, Any]
    risks: list[str] = Field(default_factory=list)
    gaps: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    well_architected: dict[str, Any] = Field(default_factory=dict)
    strengths: list[str] = Field(default_factory=list)
    summary: str | None = None
