"""Task definitions for the API design process."""

from pathlib import Path

from archsitter.runtime.task import define_task

from .models import (
    ApiDocumentation,
    ArchitectureDesign,
    AuthDesign,
    ContractTestingDesign,
    DesignReview,
    DeveloperExperience,
    EndpointDesign,
    ErrorHandlingDesign,
    FormalSpecification,
    ImplementationRoadmap,
    MigrationStrategy,
    MonitoringDesign,
    PerformanceDesign,
    RateLimitingDesign,
    RequirementsAnalysis,
    ResourceModel,
    SchemaDesign,
    SdkDesign,
    VersioningStrategy,
)

PROMPTS = Path(__file__).parent / "prompts.yaml"

requirements_analysis_task = define_task(
    "requirements-analysis",
    title="Phase 1: Requirements Analysis and Domain Modeling - {projectName}",
    agent="general-purpose",
    output_model=RequirementsAnalysis,
    labels=["agent", "api-design", "requirements", "domain-modeling"],
    prompt_source=PROMPTS,
)

api_architecture_design_task = define_task(
    "api-architecture-design",
    title="Phase 2: API Architecture Design - {projectName}",
    agent="general-purpose",
    output_model=ArchitectureDesign,
    labels=["agent", "api-design", "architecture", "patterns"],
    prompt_source=PROMPTS,
)

resource_modeling_task = define_task(
    "resource-modeling",
    title="Phase 3: Resource Modeling and Data Design - {projectName}",
    agent="general-purpose",
    output_model=ResourceModel,
    labels=["agent", "api-design", "resources", "data-modeling"],
    prompt_source=PROMPTS,
)

endpoint_design_task = define_task(
    "endpoint-design",
    title="Phase 4: Endpoint Design - {category} - {projectName}",
    agent="general-purpose",
    output_model=EndpointDesign,
    labels=["agent", "api-design", "endpoints", "{category}"],
    prompt_source=PROMPTS,
)

schema_design_task = define_task(
    "schema-design",
    title="Phase 5: Request/Response Schema Design - {projectName}",
    agent="general-purpose",
    output_model=SchemaDesign,
    labels=["agent", "api-design", "schemas", "validation"],
    prompt_source=PROMPTS,
)

error_handling_design_task = define_task(
    "error-handling-design",
    title="Phase 6: Error Handling Design - {projectName}",
    agent="general-purpose",
    output_model=ErrorHandlingDesign,
    labels=["agent", "api-design", "error-handling", "status-codes"],
    prompt_source=PROMPTS,
)

authentication_authorization_design_task = define_task(
    "authentication-authorization-design",
    title="Phase 7: Authentication and Authorization Design - {projectName}",
    agent="general-purpose",
    output_model=AuthDesign,
    labels=["agent", "api-design", "security", "authentication", "authorization"],
    prompt_source=PROMPTS,
)

rate_limiting_design_task = define_task(
    "rate-limiting-design",
    title="Phase 8: Rate Limiting and Throttling Design - {projectName}",
    agent="general-purpose",
    output_model=RateLimitingDesign,
    labels=["agent", "api-design", "rate-limiting", "throttling"],
    prompt_source=PROMPTS,
)

versioning_strategy_task = define_task(
    "versioning-strategy",
    title="Phase 9: API Versioning Strategy - {projectName}",
    agent="general-purpose",
    output_model=VersioningStrategy,
    labels=["agent", "api-design", "versioning", "evolution"],
    prompt_source=PROMPTS,
)

formal_specification_task = define_task(
    "formal-specification",
    title="Phase 10: Formal API Specification Generation - {projectName}",
    agent="general-purpose",
    output_model=FormalSpecification,
    labels=["agent", "api-design", "specification", "openapi", "graphql"],
    prompt_source=PROMPTS,
)

api_documentation_task = define_task(
    "api-documentation",
    title="Phase 11: API Documentation Generation - {projectName}",
    agent="general-purpose",
    output_model=ApiDocumentation,
    labels=["agent", "api-design", "documentation", "developer-experience"],
    prompt_source=PROMPTS,
)

contract_testing_design_task = define_task(
    "contract-testing-design",
    title="Phase 12: API Contract Testing Design - {projectName}",
    agent="general-purpose",
    output_model=ContractTestingDesign,
    labels=["agent", "api-design", "contract-testing", "quality"],
    prompt_source=PROMPTS,
)

sdk_design_task = define_task(
    "sdk-design",
    title="Phase 13: SDK and Client Library Design - {projectName}",
    agent="general-purpose",
    output_model=SdkDesign,
    labels=["agent", "api-design", "sdk", "client-libraries"],
    prompt_source=PROMPTS,
)

developer_experience_task = define_task(
    "developer-experience",
    title="Phase 14: Developer Experience Optimization - {projectName}",
    agent="general-purpose",
    output_model=DeveloperExperience,
    labels=["agent", "api-design", "developer-experience", "dx"],
    prompt_source=PROMPTS,
)

performance_design_task = define_task(
    "performance-design",
    title="Phase 15: Performance and Caching Design - {projectName}",
    agent="general-purpose",
    output_model=PerformanceDesign,
    labels=["agent", "api-design", "performance", "caching"],
    prompt_source=PROMPTS,
)

monitoring_observability_task = define_task(
    "monitoring-observability",
    title="Phase 16: Monitoring and Observability Design - {projectName}",
    agent="general-purpose",
    output_model=MonitoringDesign,
    labels=["agent", "api-design", "monitoring", "observability"],
    prompt_source=PROMPTS,
)

migration_strategy_task = define_task(
    "migration-strategy",
    title="Phase 17: Migration and Backward Compatibility Strategy - {projectName}",
    agent="general-purpose",
    output_model=MigrationStrategy,
    labels=["agent", "api-design", "migration", "backward-compatibility"],
    prompt_source=PROMPTS,
)

implementation_roadmap_task = define_task(
    "implementation-roadmap",
    title="Phase 18: Implementation Roadmap - {projectName}",
    agent="general-purpose",
    output_model=ImplementationRoadmap,
    labels=["agent", "api-design", "roadmap", "project-management"],
    prompt_source=PROMPTS,
)

design_review_task = define_task(
    "design-review",
    title="Phase 19: Comprehensive Design Review - {projectName}",
    agent="general-purpose",
    output_model=DesignReview,
    labels=["agent", "api-design", "design-review", "quality-assessment"],
    prompt_source=PROMPTS,
)

TASKS = [
    requirements_analysis_task,
    api_architecture_design_task,
    resource_modeling_task,
    endpoint_design_task,
    schema_design_task,
    error_handling_design_task,
    authentication_authorization_design_task,
    rate_limiting_design_task,
    versioning_strategy_task,
    formal_specification_task,
    api_documentation_task,
    contract_testing_design_task,
    sdk_design_task,
    developer_experience_task,
    performance_design_task,
    monitoring_observability_task,
    migration_strategy_task,
    implementation_roadmap_task,
    design_review_task,
]
