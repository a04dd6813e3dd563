"""Catalog of the architecture processes.

Every process is registered under its slug and can be looked up by slug
or by its full id (``specializations/software-architecture/<slug>``).
``run_process`` is the single entry point used by the CLI: it validates
inputs, wraps the run in a process span and turns a rejected breakpoint
into a failure result.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from archsitter.processes import (
    adr_documentation,
    api_design,
    cloud_architecture,
    data_architecture,
    ddd_strategic_modeling,
    devops_alignment,
    resilience_patterns,
    tech_stack_evaluation,
)
from archsitter.processes.common import PROCESS_ID_PREFIX, ProcessInputs, parse_inputs, process_id
from archsitter.runtime.context import ProcessContext
from archsitter.runtime.errors import ProcessHalted, UnknownProcessError
from archsitter.runtime.task import TaskDefinition
from archsitter.telemetry import process_span

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessSpec:
    """A registered process.

    Attributes:
        id: Full catalog id
        slug: Short name used on the command line
        title: Human-readable name
        description: One-paragraph summary
        inputs_model: Pydantic model validating the process inputs
        outputs: Top-level keys of a successful result
        run: The ``process(inputs, ctx)`` function
        tasks: Task definitions the process may call
    """

    id: str
    slug: str
    title: str
    description: str
    inputs_model: type[ProcessInputs]
    outputs: tuple[str, ...]
    run: Callable[[Any, ProcessContext], dict[str, Any]]
    tasks: tuple[TaskDefinition, ...] = field(default_factory=tuple)


def _spec(module, title: str, description: str, inputs_model, outputs) -> ProcessSpec:
    return ProcessSpec(
        id=process_id(module.SLUG),
        slug=module.SLUG,
        title=title,
        description=description,
        inputs_model=inputs_model,
        outputs=tuple(outputs),
        run=module.process,
        tasks=tuple(module.TASKS),
    )


_SPECS = [
    _spec(
        adr_documentation,
        "ADR Documentation",
        "Architecture Decision Record lifecycle: context analysis, alternatives research, "
        "drafting, stakeholder review, revision, publication and index maintenance.",
        adr_documentation.AdrDocumentationInputs,
        ["success", "adr_number", "decision", "status", "adr_document", "quality_score",
         "approved", "alternatives", "consequences", "related_adrs", "artifacts", "duration",
         "metadata"],
    ),
    _spec(
        resilience_patterns,
        "Resilience Patterns",
        "Failure point analysis followed by circuit breakers, retries, timeouts, bulkheads, "
        "fallbacks and rate limiting, with chaos testing, monitoring and runbooks.",
        resilience_patterns.ResiliencePatternsInputs,
        ["success", "system", "patterns_implemented", "resilience_score", "improvement",
         "failure_points_covered", "artifacts", "documentation", "monitoring", "runbooks",
         "metadata"],
    ),
    _spec(
        api_design,
        "API Design and Specification",
        "REST, GraphQL and gRPC API design from requirements to formal specification, "
        "documentation, SDKs and an implementation roadmap, with security, performance "
        "and design quality gates.",
        api_design.ApiDesignInputs,
        ["success", "project_name", "api_type", "target_audience", "api_specification",
         "documentation", "contracts", "architecture", "security", "performance", "versioning",
         "sdk", "developer_experience", "monitoring", "implementation_plan", "migration",
         "design_review", "quality_gates", "artifacts", "duration", "metadata"],
    ),
    _spec(
        data_architecture,
        "Data Architecture Design",
        "Data requirements, conceptual and logical models, storage selection, flows, "
        "integration, governance, security, migration, performance and disaster recovery.",
        data_architecture.DataArchitectureInputs,
        ["success", "project_name", "data_models", "storage_architecture", "data_flow",
         "data_integration", "governance", "security", "migration_plan",
         "performance_strategy", "disaster_recovery", "implementation_plan", "risks",
         "next_steps", "metadata"],
    ),
    _spec(
        ddd_strategic_modeling,
        "DDD Strategic Modeling",
        "Strategic domain-driven design: subdomain classification, bounded contexts, "
        "ubiquitous language, context mapping, team alignment and integration strategy.",
        ddd_strategic_modeling.DddStrategicModelingInputs,
        ["success", "project_name", "quality_score", "quality_met", "strategic_model",
         "bounded_contexts", "context_map", "team_alignment", "integration_strategy",
         "validation", "adrs", "strategy_document", "artifacts", "duration", "metadata"],
    ),
    _spec(
        devops_alignment,
        "DevOps Architecture Alignment",
        "CI/CD pipeline, deployment strategy, feature flags, infrastructure as code, "
        "rollback, deployment monitoring and release checklist aligned with the architecture.",
        devops_alignment.DevopsAlignmentInputs,
        ["success", "project_name", "cicd_architecture", "deployment_strategy",
         "feature_flags", "infrastructure_as_code", "rollback_procedures", "monitoring_plan",
         "release_checklist", "implementation_roadmap", "artifacts", "metrics", "metadata"],
    ),
    _spec(
        tech_stack_evaluation,
        "Technology Stack Evaluation",
        "Requirements, candidate shortlist, weighted criteria, research and proofs of "
        "concept per candidate, scoring, risk assessment, recommendation, ADR and onboarding.",
        tech_stack_evaluation.TechStackEvaluationInputs,
        ["success", "project_name", "technology_category", "recommendation",
         "evaluation_report", "adr", "onboarding_plan", "artifacts", "metadata"],
    ),
    _spec(
        cloud_architecture,
        "Cloud Architecture Design",
        "Cloud strategy, provider selection, compute, data and network design, security, "
        "high availability, cost optimization and infrastructure as code.",
        cloud_architecture.CloudArchitectureInputs,
        ["success", "process_slug", "category", "project_name", "architecture", "cost", "iac",
         "quality_score", "target_quality", "phases", "metadata"],
    ),
]

PROCESS_REGISTRY: dict[str, ProcessSpec] = {spec.slug: spec for spec in _SPECS}


def get_process(id_or_slug: str) -> ProcessSpec:
    """Resolve a process by slug or full id.

    Raises:
        UnknownProcessError: If no process matches
    """
    slug = id_or_slug.strip().strip("/")
    prefix = f"{PROCESS_ID_PREFIX}/"
    if slug.startswith(prefix):
        slug = slug[len(prefix) :]
    try:
        return PROCESS_REGISTRY[slug]
    except KeyError:
        raise UnknownProcessError(id_or_slug) from None


def list_processes() -> list[ProcessSpec]:
    return sorted(PROCESS_REGISTRY.values(), key=lambda spec: spec.slug)


def run_process(id_or_slug: str, inputs: Any, ctx: ProcessContext) -> dict[str, Any]:
    """Run a registered process.

    A rejected breakpoint ends the run with a result carrying
    ``halted: True``; any other error propagates.
    """
    spec = get_process(id_or_slug)
    params = parse_inputs(spec.inputs_model, inputs)
    logger.info(f"Running process {spec.id}", extra={"run_id": ctx.run_id})

    with process_span(spec.id, ctx.run_id) as span:
        try:
            result = spec.run(params, ctx)
        except ProcessHalted as e:
            logger.warning(f"Process {spec.slug} halted: {e}")
            span.set_attribute("process.halted", True)
            return {
                "success": False,
                "halted": True,
                "breakpoint": e.breakpoint_title,
                "feedback": e.feedback,
                "artifacts": [],
            }
        span.set_attribute("process.success", bool(result.get("success")))

    return result
