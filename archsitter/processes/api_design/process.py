"""API design and specification process.

Covers REST, GraphQL and gRPC APIs from requirements through resource
modeling, endpoint and schema design, security, versioning, formal
specification, documentation, SDKs and an implementation roadmap, with
quality gates on requirements, security, performance and overall design.
"""

from typing import Any

from archsitter.config import (
    API_DESIGN_QUALITY_THRESHOLD,
    API_REQUIRED_REQUIREMENT_CATEGORIES,
    API_SECURITY_THRESHOLD_EXTERNAL,
    API_SECURITY_THRESHOLD_INTERNAL,
)
from archsitter.processes.common import (
    dump,
    dump_artifacts,
    elapsed_seconds,
    error_result,
    first_number,
    metadata,
    parse_inputs,
)
from archsitter.runtime.context import ProcessContext, artifact_files

from .models import ApiDesignInputs, PerformanceDesign
from .tasks import (
    api_architecture_design_task,
    api_documentation_task,
    authentication_authorization_design_task,
    contract_testing_design_task,
    design_review_task,
    developer_experience_task,
    endpoint_design_task,
    error_handling_design_task,
    formal_specification_task,
    implementation_roadmap_task,
    migration_strategy_task,
    monitoring_observability_task,
    performance_design_task,
    rate_limiting_design_task,
    requirements_analysis_task,
    resource_modeling_task,
    schema_design_task,
    sdk_design_task,
    versioning_strategy_task,
)

SLUG = "api-design-specification"

# Endpoint design category -> resource priorities it covers
RESOURCE_CATEGORIES = {
    "core": ("critical", "high"),
    "supporting": ("medium",),
    "auxiliary": ("low",),
}


def performance_target_met(design: PerformanceDesign, latency_constraint: Any) -> bool:
    """True when the estimated p95 latency is within the latency constraint.

    Both sides are read as their first number ("< 200ms p95" -> 200). A
    constraint or estimate without a number never meets the target.
    """
    target = first_number(latency_constraint)
    estimate = first_number(design.estimated_p95_latency)
    if target is None or estimate is None:
        return False
    return estimate <= target


def process(inputs: dict[str, Any] | ApiDesignInputs, ctx: ProcessContext) -> dict[str, Any]:
    params = parse_inputs(ApiDesignInputs, inputs)
    project = params.project_name
    api_type = params.api_type
    audience = params.target_audience
    constraints = params.constraints
    output_dir = params.output_dir
    start = ctx.now()
    artifacts = []

    ctx.log("info", f"Starting API Design and Specification for {project}")
    ctx.log("info", f"API Type: {api_type}, Target Audience: {audience}")

    # ------------------------------------------------------------------
    # Phase 1: requirements and domain model
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 1: Analyzing requirements and modeling domain")
    requirements = ctx.task(
        requirements_analysis_task,
        {
            "projectName": project,
            "apiType": api_type,
            "apiPurpose": params.api_purpose,
            "targetAudience": audience,
            "domainContext": params.domain_context,
            "existingAPIs": params.existing_apis,
            "constraints": constraints,
            "outputDir": output_dir,
        },
    )

    if not requirements.success:
        return error_result(
            SLUG,
            start,
            "Failed to complete requirements analysis",
            "requirements-analysis",
            details=dump(requirements),
        )
    artifacts.extend(requirements.artifacts)

    missing_categories = requirements.missing_categories(API_REQUIRED_REQUIREMENT_CATEGORIES)
    if missing_categories:
        ctx.breakpoint(
            question=(
                f"Requirements analysis incomplete. Missing: {', '.join(missing_categories)}. "
                "Review and supplement requirements?"
            ),
            title="Requirements Completeness Check",
            context={
                "missingCategories": missing_categories,
                "identifiedRequirements": dump(requirements.requirement_categories),
                "recommendation": "Ensure all core requirement categories are addressed",
                "files": artifact_files(requirements.artifacts, "json"),
            },
        )

    # ------------------------------------------------------------------
    # Phase 2: architecture
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 2: Designing API architecture and selecting patterns")
    architecture = ctx.task(
        api_architecture_design_task,
        {
            "projectName": project,
            "apiType": api_type,
            "requirementsAnalysis": requirements,
            "constraints": constraints,
            "targetAudience": audience,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(architecture.artifacts)

    ctx.breakpoint(
        question=(
            f"Review API architecture for {project}. Architecture pattern: "
            f"{architecture.architecture_pattern}. Approve to proceed with detailed design?"
        ),
        title="API Architecture Review",
        context={
            "projectName": project,
            "architecture": dump(architecture),
            "patterns": dump(architecture.design_patterns),
            "files": [
                {
                    "path": architecture.architecture_diagram_path,
                    "format": "markdown",
                    "label": "Architecture Diagram",
                },
                {
                    "path": architecture.architecture_doc_path,
                    "format": "markdown",
                    "label": "Architecture Documentation",
                },
            ],
        },
    )

    # ------------------------------------------------------------------
    # Phase 3: resources
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 3: Modeling resources and designing data structures")
    resource_model = ctx.task(
        resource_modeling_task,
        {
            "projectName": project,
            "apiType": api_type,
            "requirementsAnalysis": requirements,
            "architectureDesign": architecture,
            "domainContext": params.domain_context,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(resource_model.artifacts)

    if not resource_model.resources:
        return error_result(
            SLUG,
            start,
            "No resources identified in resource modeling phase",
            "resource-modeling",
            artifacts,
            details=dump(resource_model),
        )

    # ------------------------------------------------------------------
    # Phase 4: endpoints, one task per non-empty resource category
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 4: Designing API endpoints in parallel by resource category")
    endpoint_thunks = []
    for category, priorities in RESOURCE_CATEGORIES.items():
        resources = [r for r in resource_model.resources if r.priority in priorities]
        if not resources:
            continue
        args = {
            "projectName": project,
            "category": category,
            "resources": resources,
            "apiType": api_type,
            "architectureDesign": architecture,
            "constraints": constraints,
            "outputDir": output_dir,
        }
        endpoint_thunks.append(lambda args=args: ctx.task(endpoint_design_task, args))

    endpoint_designs = ctx.parallel_all(endpoint_thunks)
    for design in endpoint_designs:
        artifacts.extend(design.artifacts)

    total_endpoints = sum(design.endpoint_count for design in endpoint_designs)
    ctx.log("info", f"Total endpoints designed: {total_endpoints}")

    # ------------------------------------------------------------------
    # Phase 5: schemas
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 5: Designing request and response schemas")
    schema_design = ctx.task(
        schema_design_task,
        {
            "projectName": project,
            "apiType": api_type,
            "endpointDesigns": endpoint_designs,
            "resourceModeling": resource_model,
            "architectureDesign": architecture,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(schema_design.artifacts)

    # ------------------------------------------------------------------
    # Phase 6: errors
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 6: Designing error handling and status code strategy")
    error_handling = ctx.task(
        error_handling_design_task,
        {
            "projectName": project,
            "apiType": api_type,
            "endpointDesigns": endpoint_designs,
            "architectureDesign": architecture,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(error_handling.artifacts)

    # ------------------------------------------------------------------
    # Phase 7: authentication and authorization
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 7: Designing authentication and authorization mechanisms")
    auth = ctx.task(
        authentication_authorization_design_task,
        {
            "projectName": project,
            "apiType": api_type,
            "targetAudience": audience,
            "constraints": constraints,
            "endpointDesigns": endpoint_designs,
            "architectureDesign": architecture,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(auth.artifacts)

    if audience != "internal" and auth.security_score < API_SECURITY_THRESHOLD_EXTERNAL:
        ctx.breakpoint(
            question=(
                f"Security score: {auth.security_score:g}/100 for {audience} API. Below "
                f"recommended threshold of {API_SECURITY_THRESHOLD_EXTERNAL}. "
                "Review and strengthen security measures?"
            ),
            title="Security Quality Gate",
            context={
                "securityScore": auth.security_score,
                "targetAudience": audience,
                "vulnerabilities": dump(auth.security_gaps),
                "recommendations": auth.security_recommendations,
                "files": artifact_files(auth.artifacts, "json"),
            },
        )

    # ------------------------------------------------------------------
    # Phase 8: rate limiting
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 8: Designing rate limiting and throttling strategies")
    rate_limiting = ctx.task(
        rate_limiting_design_task,
        {
            "projectName": project,
            "apiType": api_type,
            "targetAudience": audience,
            "constraints": constraints,
            "endpointDesigns": endpoint_designs,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(rate_limiting.artifacts)

    # ------------------------------------------------------------------
    # Phase 9: versioning
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 9: Designing API versioning and evolution strategy")
    versioning = ctx.task(
        versioning_strategy_task,
        {
            "projectName": project,
            "apiType": api_type,
            "constraints": constraints,
            "existingAPIs": params.existing_apis,
            "architectureDesign": architecture,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(versioning.artifacts)

    # ------------------------------------------------------------------
    # Phase 10: formal specification
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 10: Generating formal API specification")
    specification = ctx.task(
        formal_specification_task,
        {
            "projectName": project,
            "apiType": api_type,
            "architectureDesign": architecture,
            "endpointDesigns": endpoint_designs,
            "schemaDesign": schema_design,
            "errorHandlingDesign": error_handling,
            "authDesign": auth,
            "rateLimitingDesign": rate_limiting,
            "versioningStrategy": versioning,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(specification.artifacts)

    if not specification.validation_passed:
        ctx.breakpoint(
            question=(
                "API specification validation failed with "
                f"{len(specification.validation_errors)} errors. Review and fix validation issues?"
            ),
            title="Specification Validation",
            context={
                "validationErrors": dump(specification.validation_errors),
                "validationWarnings": specification.validation_warnings,
                "specificationPath": specification.specification_path,
                "files": artifact_files(specification.artifacts, "json"),
            },
        )

    # ------------------------------------------------------------------
    # Phase 11: documentation
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 11: Generating comprehensive API documentation")
    documentation = ctx.task(
        api_documentation_task,
        {
            "projectName": project,
            "apiType": api_type,
            "targetAudience": audience,
            "formalSpecification": specification,
            "architectureDesign": architecture,
            "endpointDesigns": endpoint_designs,
            "authDesign": auth,
            "errorHandlingDesign": error_handling,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(documentation.artifacts)

    # ------------------------------------------------------------------
    # Phase 12: contract testing
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 12: Designing API contract testing strategy")
    contract_testing = ctx.task(
        contract_testing_design_task,
        {
            "projectName": project,
            "apiType": api_type,
            "formalSpecification": specification,
            "endpointDesigns": endpoint_designs,
            "schemaDesign": schema_design,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(contract_testing.artifacts)

    # ------------------------------------------------------------------
    # Phase 13: SDKs
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 13: Designing SDK and client library strategy")
    sdk = ctx.task(
        sdk_design_task,
        {
            "projectName": project,
            "apiType": api_type,
            "targetAudience": audience,
            "formalSpecification": specification,
            "endpointDesigns": endpoint_designs,
            "authDesign": auth,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(sdk.artifacts)

    # ------------------------------------------------------------------
    # Phase 14: developer experience
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 14: Optimizing developer experience")
    dx = ctx.task(
        developer_experience_task,
        {
            "projectName": project,
            "apiType": api_type,
            "targetAudience": audience,
            "apiDocumentation": documentation,
            "sdkDesign": sdk,
            "formalSpecification": specification,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(dx.artifacts)

    # ------------------------------------------------------------------
    # Phase 15: performance and caching
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 15: Designing performance optimization and caching strategy")
    performance = ctx.task(
        performance_design_task,
        {
            "projectName": project,
            "apiType": api_type,
            "constraints": constraints,
            "endpointDesigns": endpoint_designs,
            "architectureDesign": architecture,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(performance.artifacts)

    performance_met = performance_target_met(performance, constraints.get("latency"))
    if not performance_met:
        ctx.breakpoint(
            question=(
                f"Estimated p95 latency: {performance.estimated_p95_latency} exceeds target: "
                f"{constraints.get('latency')}. Review performance design and optimization "
                "strategies?"
            ),
            title="Performance Quality Gate",
            context={
                "estimatedLatency": performance.estimated_p95_latency,
                "targetLatency": constraints.get("latency"),
                "bottlenecks": dump(performance.bottlenecks),
                "optimizations": dump(performance.optimization_strategies),
                "files": artifact_files(performance.artifacts, "json"),
            },
        )

    # ------------------------------------------------------------------
    # Phase 16: monitoring
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 16: Designing monitoring and observability strategy")
    monitoring = ctx.task(
        monitoring_observability_task,
        {
            "projectName": project,
            "apiType": api_type,
            "endpointDesigns": endpoint_designs,
            "performanceDesign": performance,
            "constraints": constraints,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(monitoring.artifacts)

    # ------------------------------------------------------------------
    # Phase 17: migration from existing APIs
    # ------------------------------------------------------------------
    migration = None
    if params.existing_apis:
        ctx.log("info", "Phase 17: Designing migration and backward compatibility strategy")
        migration = ctx.task(
            migration_strategy_task,
            {
                "projectName": project,
                "existingAPIs": params.existing_apis,
                "formalSpecification": specification,
                "versioningStrategy": versioning,
                "outputDir": output_dir,
            },
        )
        artifacts.extend(migration.artifacts)

    # ------------------------------------------------------------------
    # Phase 18: roadmap
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 18: Creating implementation roadmap")
    roadmap = ctx.task(
        implementation_roadmap_task,
        {
            "projectName": project,
            "apiType": api_type,
            "architectureDesign": architecture,
            "endpointDesigns": endpoint_designs,
            "formalSpecification": specification,
            "sdkDesign": sdk,
            "performanceDesign": performance,
            "monitoringDesign": monitoring,
            "migrationStrategy": migration,
            "constraints": constraints,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(roadmap.artifacts)

    # ------------------------------------------------------------------
    # Phase 19: design review
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 19: Conducting comprehensive design review")
    review = ctx.task(
        design_review_task,
        {
            "projectName": project,
            "apiType": api_type,
            "targetAudience": audience,
            "requirementsAnalysis": requirements,
            "architectureDesign": architecture,
            "formalSpecification": specification,
            "apiDocumentation": documentation,
            "performanceDesign": performance,
            "authDesign": auth,
            "implementationRoadmap": roadmap,
            "constraints": constraints,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(review.artifacts)

    quality_score = review.quality_score
    if quality_score < API_DESIGN_QUALITY_THRESHOLD:
        ctx.breakpoint(
            question=(
                f"Design quality score: {quality_score:g}/100. Below recommended threshold of "
                f"{API_DESIGN_QUALITY_THRESHOLD}. Review and address design issues?"
            ),
            title="Design Quality Gate",
            context={
                "qualityScore": quality_score,
                "issues": dump(review.issues),
                "recommendations": dump(review.recommendations),
                "verdict": review.verdict,
                "files": artifact_files(review.artifacts, "json"),
            },
        )

    # ------------------------------------------------------------------
    # Phase 20: stakeholder approval
    # ------------------------------------------------------------------
    spec_format = "graphql" if api_type == "GraphQL" else "yaml"
    ctx.breakpoint(
        question=(
            f"API Design and Specification complete for {project}. Quality Score: "
            f"{quality_score:g}/100, Total Endpoints: {total_endpoints}, API Type: {api_type}. "
            "Approve design for implementation?"
        ),
        title="Final API Design Review and Approval",
        context={
            "summary": {
                "projectName": project,
                "apiType": api_type,
                "targetAudience": audience,
                "totalEndpoints": total_endpoints,
                "totalResources": len(resource_model.resources),
                "qualityScore": quality_score,
                "securityScore": auth.security_score,
                "estimatedLatency": performance.estimated_p95_latency,
                "implementationTimeline": roadmap.timeline.total_duration,
                "estimatedCost": roadmap.cost.total,
            },
            "verdict": review.verdict,
            "readinessAssessment": dump(review.readiness_assessment),
            "recommendation": review.recommendation,
            "files": [
                {
                    "path": specification.specification_path,
                    "format": spec_format,
                    "label": "API Specification",
                },
                {
                    "path": documentation.documentation_path,
                    "format": "html",
                    "label": "API Documentation",
                },
                {
                    "path": architecture.architecture_diagram_path,
                    "format": "markdown",
                    "label": "Architecture Diagram",
                },
                {
                    "path": roadmap.roadmap_path,
                    "format": "markdown",
                    "label": "Implementation Roadmap",
                },
                {
                    "path": review.review_report_path,
                    "format": "markdown",
                    "label": "Design Review Report",
                },
            ],
        },
    )

    end = ctx.now()
    security_threshold = (
        API_SECURITY_THRESHOLD_INTERNAL if audience == "internal" else API_SECURITY_THRESHOLD_EXTERNAL
    )

    return {
        "success": True,
        "project_name": project,
        "api_type": api_type,
        "target_audience": audience,
        "api_specification": {
            "specification_path": specification.specification_path,
            "format": specification.format,
            "version": specification.version,
            "endpoint_count": total_endpoints,
            "resource_count": len(resource_model.resources),
            "validation_passed": specification.validation_passed,
        },
        "documentation": {
            "documentation_path": documentation.documentation_path,
            "interactive_docs_path": documentation.interactive_docs_path,
            "getting_started_path": documentation.getting_started_path,
            "reference_docs_path": documentation.reference_docs_path,
            "examples_path": documentation.examples_path,
        },
        "contracts": {
            "contract_count": len(contract_testing.contracts),
            "contracts_path": contract_testing.contracts_path,
            "test_strategy": dump(contract_testing.test_strategy),
        },
        "architecture": {
            "pattern": architecture.architecture_pattern,
            "design_patterns": dump(architecture.design_patterns),
            "diagram_path": architecture.architecture_diagram_path,
            "documentation_path": architecture.architecture_doc_path,
        },
        "security": {
            "authentication_mechanism": auth.authentication_mechanism,
            "authorization_model": auth.authorization_model,
            "security_score": auth.security_score,
            "security_features_path": auth.security_doc_path,
        },
        "performance": {
            "estimated_p95_latency": performance.estimated_p95_latency,
            "caching_strategy": dump(performance.caching_strategy),
            "optimizations": dump(performance.optimization_strategies),
            "performance_met": performance_met,
        },
        "versioning": {
            "strategy": versioning.versioning_strategy,
            "initial_version": versioning.initial_version,
            "deprecation_policy": versioning.deprecation_policy,
        },
        "sdk": {
            "target_languages": sdk.target_languages,
            "generation_strategy": sdk.generation_strategy,
            "sdk_design_path": sdk.sdk_design_doc_path,
        },
        "developer_experience": {
            "dx_score": dx.dx_score,
            "onboarding_time": dx.estimated_onboarding_time,
            "improvement_areas": dump(dx.improvement_areas),
        },
        "monitoring": {
            "metrics_strategy": monitoring.metrics_strategy,
            "observability_tools": dump(monitoring.tools),
            "alerting_rules": len(monitoring.alerting_rules),
        },
        "implementation_plan": {
            "timeline": dump(roadmap.timeline),
            "cost": dump(roadmap.cost),
            "phases": dump(roadmap.phases),
            "roadmap_path": roadmap.roadmap_path,
        },
        "migration": (
            {
                "required": True,
                "strategy": migration.migration_strategy,
                "timeline": migration.timeline,
                "risks": dump(migration.risks),
            }
            if migration is not None
            else None
        ),
        "design_review": {
            "quality_score": quality_score,
            "verdict": review.verdict,
            "readiness_assessment": dump(review.readiness_assessment),
            "issues": dump(review.issues),
            "recommendations": dump(review.recommendations),
            "review_report_path": review.review_report_path,
        },
        "quality_gates": {
            "requirements_complete": not missing_categories,
            "specification_valid": specification.validation_passed,
            "security_adequate": auth.security_score >= security_threshold,
            "performance_met": performance_met,
            "design_quality_met": quality_score >= API_DESIGN_QUALITY_THRESHOLD,
        },
        "artifacts": dump_artifacts(artifacts),
        "duration": elapsed_seconds(start, end),
        "metadata": metadata(
            SLUG, start, api_type=api_type, target_audience=audience, output_dir=output_dir
        ),
    }
