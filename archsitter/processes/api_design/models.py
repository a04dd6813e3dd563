"""Input and task output models for the API design process."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from archsitter.processes.common import ProcessInputs
from archsitter.runtime.models import CamelModel, TaskOutput

Priority = Literal["critical", "high", "medium", "low"]


def _default_constraints() -> dict[str, Any]:
    return {
        "latency": "< 200ms p95",
        "authentication": "OAuth2",
        "rateLimit": "1000 req/min",
        "versioning": "URL-based",
        "compatibility": "backward-compatible",
    }


class ApiDesignInputs(ProcessInputs):
    project_name: str | None = None
    api_type: str = Field(default="REST", description="REST, GraphQL, gRPC, WebSocket or Hybrid")
    api_purpose: str = "General API"
    target_audience: str = Field(
        default="internal", description="internal, external-developers, public or partners"
    )
    constraints: dict[str, Any] = Field(default_factory=_default_constraints)
    domain_context: dict[str, Any] = Field(default_factory=dict)
    existing_apis: list[Any] = Field(default_factory=list, alias="existingAPIs")
    output_dir: str = "api-design-output"


# =============================================================================
# Requirements and architecture
# =============================================================================


class Requirement(CamelModel):
    id: str | None = None
    description: str | None = None
    priority: Priority | None = None
    category: str | None = None


class RequirementCategories(CamelModel):
    functional: list[Requirement] = Field(default_factory=list)
    non_functional: list[Any] = Field(default_factory=list)
    security: list[Any] = Field(default_factory=list)
    scalability: list[Any] = Field(default_factory=list)
    integration: list[Any] = Field(default_factory=list)


class DomainEntity(CamelModel):
    name: str
    description: str | None = None
    attributes: list[Any] = Field(default_factory=list)
    relationships: list[Any] = Field(default_factory=list)


class DomainModel(CamelModel):
    entities: list[DomainEntity] = Field(default_factory=list)
    relationships: list[Any] = Field(default_factory=list)
    business_capabilities: list[Any] = Field(default_factory=list)
    domain_diagram: str | None = None


class UseCase(CamelModel):
    id: str | None = None
    name: str
    actor: str | None = None
    description: str | None = None
    steps: list[Any] = Field(default_factory=list)
    priority: str | None = None


class RequirementsAnalysis(TaskOutput):
    success: bool
    requirement_categories: RequirementCategories
    domain_model: DomainModel
    use_cases: list[UseCase]
    stakeholders: list[dict[str, Any]] = Field(default_factory=list)
    constraints_analysis: dict[str, Any] = Field(default_factory=dict)
    total_requirements: int | None = None

    def missing_categories(self, required: tuple[str, ...]) -> list[str]:
        """Required requirement categories (camelCase names) that came back empty."""
        categories = self.requirement_categories.to_json_dict()
        return [name for name in required if not categories.get(name)]


class DesignPattern(CamelModel):
    pattern: str
    purpose: str | None = None
    application: str | None = None


class ArchitectureComponent(CamelModel):
    name: str
    type: str | None = None
    responsibility: str | None = None
    interfaces: list[Any] = Field(default_factory=list)


class ArchitectureDesign(TaskOutput):
    architecture_pattern: Literal[
        "RESTful", "Resource-Oriented", "GraphQL", "gRPC", "Event-Driven", "Hybrid"
    ]
    design_patterns: list[DesignPattern]
    components: list[ArchitectureComponent]
    layer_architecture: dict[str, Any] = Field(default_factory=dict)
    scalability_design: dict[str, Any] = Field(default_factory=dict)
    resilience_design: dict[str, Any] = Field(default_factory=dict)
    architecture_diagram_path: str | None = None
    architecture_doc_path: str | None = None
    decision_log: list[dict[str, Any]] = Field(default_factory=list)


# =============================================================================
# Resources, endpoints and schemas
# =============================================================================


class ResourceAttribute(CamelModel):
    name: str
    type: str
    required: bool = False
    validation: dict[str, Any] = Field(default_factory=dict)


class Resource(CamelModel):
    name: str
    description: str | None = None
    uri_pattern: str | None = None
    priority: Priority
    attributes: list[ResourceAttribute] = Field(default_factory=list)
    relationships: list[Any] = Field(default_factory=list)
    operations: list[str] = Field(default_factory=list)
    sub_resources: list[Any] = Field(default_factory=list)


class ResourceRelationship(CamelModel):
    from_: str = Field(alias="from")
    to: str
    type: Literal["one-to-one", "one-to-many", "many-to-many"]
    description: str | None = None


class ResourceModel(TaskOutput):
    resources: list[Resource]
    resource_hierarchy: dict[str, Any]
    resource_relationships: list[ResourceRelationship] = Field(default_factory=list)
    collection_design: dict[str, Any] = Field(default_factory=dict)


class Endpoint(CamelModel):
    resource: str | None = None
    operation: str | None = None
    method: str
    path: str
    summary: str | None = None
    description: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)
    request_body: dict[str, Any] = Field(default_factory=dict)
    responses: dict[str, Any] = Field(default_factory=dict)
    authentication: bool | None = None
    authorization: list[Any] = Field(default_factory=list)
    rate_limit: str | None = None
    idempotent: bool | None = None


class EndpointDesign(TaskOutput):
    success: bool
    category: str
    endpoint_count: int
    endpoints: list[Endpoint]


class SchemaExample(CamelModel):
    endpoint: str
    method: str | None = None
    status_code: int | None = None
    schema_: dict[str, Any] = Field(default_factory=dict, alias="schema")
    examples: list[Any] = Field(default_factory=list)


class SchemaDesign(TaskOutput):
    request_schemas: list[SchemaExample]
    response_schemas: list[SchemaExample]
    common_schemas: dict[str, Any]
    validation_rules: list[dict[str, Any]] = Field(default_factory=list)


class ErrorFormat(CamelModel):
    standard: Literal["RFC7807", "Custom", "JSON:API"] | None = None
    structure: dict[str, Any] = Field(default_factory=dict)
    example: dict[str, Any] = Field(default_factory=dict)


class ErrorCode(CamelModel):
    code: str
    http_status: int
    category: str | None = None
    message: str | None = None
    description: str | None = None
    resolution: str | None = None


class ErrorHandlingDesign(TaskOutput):
    error_format: ErrorFormat
    error_codes: list[ErrorCode]
    status_code_mapping: dict[str, Any]
    validation_errors: dict[str, Any] = Field(default_factory=dict)
    error_handling_best_practices: list[str] = Field(default_factory=list)


# =============================================================================
# Security, rate limiting, versioning
# =============================================================================


class SecurityGap(CamelModel):
    gap: str
    severity: Priority
    mitigation: str | None = None


class AuthDesign(TaskOutput):
    authentication_mechanism: Literal[
        "OAuth2", "JWT", "API-Key", "Basic-Auth", "SAML", "OpenID-Connect", "Mutual-TLS"
    ]
    authentication_flow: dict[str, Any] = Field(default_factory=dict)
    authorization_model: Literal["RBAC", "ABAC", "ACL", "ReBAC", "Hybrid"]
    roles_and_permissions: list[dict[str, Any]] = Field(default_factory=list)
    endpoint_authorization: list[dict[str, Any]] = Field(default_factory=list)
    security_headers: list[dict[str, Any]] = Field(default_factory=list)
    cors_policy: dict[str, Any] = Field(default_factory=dict)
    security_score: float = Field(ge=0, le=100)
    security_gaps: list[SecurityGap] = Field(default_factory=list)
    security_recommendations: list[str] = Field(default_factory=list)
    security_doc_path: str | None = None


class RateLimitTier(CamelModel):
    tier: str
    requests_per_minute: int | None = None
    requests_per_hour: int | None = None
    requests_per_day: int | None = None
    burst_limit: int | None = None
    description: str | None = None


class RateLimitingDesign(TaskOutput):
    rate_limiting_strategy: Literal["fixed-window", "sliding-window", "token-bucket", "leaky-bucket"]
    rate_limits: list[RateLimitTier]
    endpoint_specific_limits: list[dict[str, Any]] = Field(default_factory=list)
    rate_limit_headers: list[dict[str, Any]] = Field(default_factory=list)
    throttling_behavior: dict[str, Any] = Field(default_factory=dict)
    quota_management: dict[str, Any] = Field(default_factory=dict)


class VersioningStrategy(TaskOutput):
    versioning_strategy: Literal[
        "URL-based", "Header-based", "Query-param", "Content-negotiation", "Semantic-versioning"
    ]
    versioning_scheme: dict[str, Any] = Field(default_factory=dict)
    initial_version: str
    compatibility_rules: list[dict[str, Any]] = Field(default_factory=list)
    deprecation_policy: dict[str, Any]
    version_support: dict[str, Any] = Field(default_factory=dict)
    migration_guidance: dict[str, Any] = Field(default_factory=dict)


# =============================================================================
# Specification, documentation, contracts, SDKs
# =============================================================================


class ValidationIssue(CamelModel):
    path: str | None = None
    message: str
    severity: str | None = None


class FormalSpecification(TaskOutput):
    success: bool
    specification: dict[str, Any]
    format: Literal["OpenAPI-3.0", "OpenAPI-3.1", "GraphQL-Schema", "AsyncAPI"]
    version: str
    specification_path: str
    yaml_path: str | None = None
    json_path: str | None = None
    validation_passed: bool
    validation_errors: list[ValidationIssue] = Field(default_factory=list)
    validation_warnings: list[Any] = Field(default_factory=list)
    specification_stats: dict[str, Any] = Field(default_factory=dict)


class ApiDocumentation(TaskOutput):
    success: bool
    documentation: dict[str, Any] = Field(default_factory=dict)
    documentation_path: str
    interactive_docs_path: str
    getting_started_path: str | None = None
    authentication_guide_path: str | None = None
    reference_docs_path: str | None = None
    tutorials_path: str | None = None
    examples_path: str | None = None
    best_practices_path: str | None = None
    troubleshooting_path: str | None = None
    changelog_path: str | None = None
    code_examples: list[dict[str, Any]] = Field(default_factory=list)


class Contract(CamelModel):
    consumer: str
    provider: str
    endpoint: str | None = None
    interactions: list[Any] = Field(default_factory=list)
    contract_path: str | None = None


class ContractTestStrategy(CamelModel):
    framework: str | None = None
    consumer_tests: int | None = None
    provider_tests: int | None = None
    cicd_integration: str | None = None


class ContractTestingDesign(TaskOutput):
    contracts: list[Contract]
    test_strategy: ContractTestStrategy
    contracts_path: str
    broker_configuration: dict[str, Any] = Field(default_factory=dict)


class SdkDesign(TaskOutput):
    target_languages: list[str]
    generation_strategy: Literal["OpenAPI-Generator", "Custom-Templates", "Manual", "Hybrid"]
    sdk_architecture: dict[str, Any] = Field(default_factory=dict)
    sdk_features: list[dict[str, Any]] = Field(default_factory=list)
    distribution: list[dict[str, Any]] = Field(default_factory=list)
    sdk_design_doc_path: str


class ImprovementArea(CamelModel):
    area: str
    current_score: float | None = None
    recommendation: str | None = None
    impact: str | None = None


class DeveloperExperience(TaskOutput):
    dx_score: float = Field(ge=0, le=100)
    onboarding_flow: dict[str, Any]
    estimated_onboarding_time: str | None = None
    developer_portal: dict[str, Any] = Field(default_factory=dict)
    sandbox: dict[str, Any] = Field(default_factory=dict)
    community_resources: list[dict[str, Any]] = Field(default_factory=list)
    improvement_areas: list[ImprovementArea]


# =============================================================================
# Performance, monitoring, migration, roadmap, review
# =============================================================================


class CachingStrategy(CamelModel):
    levels: list[str] = Field(default_factory=list)
    cdn_enabled: bool | None = None
    http_caching: bool | None = None
    application_caching: bool | None = None


class OptimizationStrategy(CamelModel):
    strategy: str
    description: str | None = None
    expected_improvement: str | None = None


class Bottleneck(CamelModel):
    area: str
    impact: str | None = None
    mitigation: str | None = None


class PerformanceDesign(TaskOutput):
    caching_strategy: CachingStrategy
    cache_configuration: list[dict[str, Any]] = Field(default_factory=list)
    compression_strategy: dict[str, Any] = Field(default_factory=dict)
    optimization_strategies: list[OptimizationStrategy]
    estimated_p95_latency: str | float = Field(description="Estimated p95 latency, e.g. 150ms")
    estimated_throughput: str | None = None
    bottlenecks: list[Bottleneck] = Field(default_factory=list)
    performance_testing_strategy: str | None = None


class AlertingRule(CamelModel):
    rule: str
    condition: str | None = None
    severity: Literal["critical", "warning", "info"] | None = None
    notification: str | None = None


class ObservabilityTool(CamelModel):
    tool: str
    purpose: str | None = None
    integration: str | None = None


class MonitoringDesign(TaskOutput):
    metrics_strategy: dict[str, Any]
    slis: list[dict[str, Any]] = Field(default_factory=list)
    slos: list[dict[str, Any]] = Field(default_factory=list)
    logging_strategy: dict[str, Any] = Field(default_factory=dict)
    tracing_strategy: dict[str, Any] = Field(default_factory=dict)
    alerting_rules: list[AlertingRule]
    tools: list[ObservabilityTool]
    health_checks: list[dict[str, Any]] = Field(default_factory=list)


class MigrationRisk(CamelModel):
    risk: str
    severity: str | None = None
    mitigation: str | None = None


class MigrationStrategy(TaskOutput):
    migration_strategy: Literal["Big-Bang", "Phased", "Strangler-Fig", "Parallel-Run"]
    breaking_changes: list[dict[str, Any]] = Field(default_factory=list)
    phases: list[dict[str, Any]] = Field(default_factory=list)
    timeline: dict[str, Any]
    backward_compatibility: dict[str, Any] = Field(default_factory=dict)
    migration_tools: list[dict[str, Any]] = Field(default_factory=list)
    risks: list[MigrationRisk]
    rollback_plan: str | None = None


class RoadmapPhase(CamelModel):
    phase: str
    description: str | None = None
    duration: str | None = None
    effort: str | None = None
    deliverables: list[Any] = Field(default_factory=list)
    dependencies: list[Any] = Field(default_factory=list)
    milestones: list[Any] = Field(default_factory=list)


class RoadmapTimeline(CamelModel):
    total_duration: str
    start_date: str | None = None
    estimated_completion: str | None = None
    buffer: str | None = None


class RoadmapCost(CamelModel):
    development: str | None = None
    infrastructure: str | None = None
    testing: str | None = None
    documentation: str | None = None
    contingency: str | None = None
    total: str


class ImplementationRoadmap(TaskOutput):
    roadmap: dict[str, Any]
    phases: list[RoadmapPhase]
    timeline: RoadmapTimeline
    cost: RoadmapCost
    team: list[dict[str, Any]] = Field(default_factory=list)
    risks: list[dict[str, Any]] = Field(default_factory=list)
    roadmap_path: str


class ReviewIssue(CamelModel):
    severity: Priority
    category: str | None = None
    description: str
    recommendation: str | None = None


class ReviewRecommendation(CamelModel):
    area: str | None = None
    recommendation: str
    priority: str | None = None
    impact: str | None = None


class ReadinessAssessment(CamelModel):
    ready_for_implementation: bool
    ready_for_production: bool
    blockers: list[Any] = Field(default_factory=list)
    prerequisites: list[Any] = Field(default_factory=list)


class DesignReview(TaskOutput):
    quality_score: float = Field(ge=0, le=100)
    score_breakdown: dict[str, float] = Field(default_factory=dict)
    issues: list[ReviewIssue]
    recommendations: list[ReviewRecommendation]
    verdict: Literal[
        "Production-Ready", "Ready-with-Minor-Changes", "Requires-Revision", "Not-Ready"
    ]
    readiness_assessment: ReadinessAssessment
    recommendation: str | None = None
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    review_report_path: str
