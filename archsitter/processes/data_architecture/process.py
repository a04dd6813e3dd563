"""Data architecture design process.

Designs data models, storage technologies, data flow, governance, security
and migration with quality gates between phases.
"""

from typing import Any

from archsitter.config import DATA_REQUIRED_QUALITY_ATTRIBUTES, DATA_STORAGE_CANDIDATES_TO_EVALUATE
from archsitter.processes.common import dump, error_result, metadata, parse_inputs
from archsitter.runtime.context import ProcessContext

from .models import DataArchitectureInputs
from .tasks import (
    conceptual_data_model_task,
    data_architecture_risk_analysis_task,
    data_flow_design_task,
    data_governance_task,
    data_integration_task,
    data_migration_task,
    data_requirements_analysis_task,
    data_security_task,
    disaster_recovery_task,
    implementation_roadmap_task,
    logical_data_model_task,
    performance_optimization_task,
    physical_data_model_task,
    storage_architecture_task,
    storage_evaluation_task,
    storage_selection_task,
)

SLUG = "data-architecture-design"
VERSION = "1.0.0"


def _file(output_dir: str, name: str, fmt: str) -> dict[str, str]:
    return {"path": f"{output_dir}/{name}", "format": fmt}


def process(
    inputs: dict[str, Any] | DataArchitectureInputs, ctx: ProcessContext
) -> dict[str, Any]:
    params = parse_inputs(DataArchitectureInputs, inputs)
    project = params.project_name
    constraints = params.constraints
    output_dir = params.output_dir
    start = ctx.now()

    ctx.log("info", f"Starting Data Architecture Design for {project}")

    # Phase 1: requirements
    ctx.log("info", "Phase 1: Analyzing data requirements")
    data_requirements = ctx.task(
        data_requirements_analysis_task,
        {
            "projectName": project,
            "requirements": params.requirements,
            "existingArchitecture": params.existing_architecture,
            "constraints": constraints,
        },
    )

    if not data_requirements.data_domains:
        return error_result(
            SLUG,
            start,
            "No data domains identified. Cannot proceed without understanding data domains.",
            "data-requirements-analysis",
            data_requirements=None,
        )

    ctx.breakpoint(
        question=(
            f"Review data requirements for {project}. Identified "
            f"{len(data_requirements.data_domains)} data domains and "
            f"{len(data_requirements.entities)} entities. Are requirements complete?"
        ),
        title="Data Requirements Review",
        context={
            "projectName": project,
            "requirements": dump(data_requirements),
            "files": [
                _file(output_dir, "phase1-data-requirements.json", "json"),
                _file(output_dir, "phase1-data-requirements-report.md", "markdown"),
            ],
        },
    )

    # Phases 2-3: conceptual and logical models
    ctx.log("info", "Phase 2: Designing conceptual data model")
    conceptual = ctx.task(
        conceptual_data_model_task,
        {
            "projectName": project,
            "dataRequirements": data_requirements,
            "existingArchitecture": params.existing_architecture,
        },
    )

    ctx.log("info", "Phase 3: Designing logical data model")
    logical = ctx.task(
        logical_data_model_task,
        {
            "projectName": project,
            "conceptualModel": conceptual,
            "dataRequirements": data_requirements,
            "requirements": params.requirements,
        },
    )

    ctx.breakpoint(
        question=(
            f"Review data models for {project}. Conceptual model defines "
            f"{len(conceptual.entities)} entities. Logical model includes "
            f"{logical.structure_count} tables/collections. Approve?"
        ),
        title="Data Models Review",
        context={
            "projectName": project,
            "conceptualModel": dump(conceptual),
            "logicalModel": dump(logical),
            "files": [
                _file(output_dir, "phase2-conceptual-model.json", "json"),
                _file(output_dir, "phase3-logical-model.json", "json"),
                _file(output_dir, "phase3-logical-model-diagram.md", "markdown"),
            ],
        },
    )

    # Phase 4: storage candidates, top ones evaluated in parallel
    ctx.log("info", "Phase 4: Selecting and evaluating storage technologies")
    storage_candidates = ctx.task(
        storage_selection_task,
        {
            "projectName": project,
            "logicalModel": logical,
            "dataRequirements": data_requirements,
            "requirements": params.requirements,
            "constraints": constraints,
        },
    )

    evaluation_thunks = []
    top_candidates = storage_candidates.candidates[:DATA_STORAGE_CANDIDATES_TO_EVALUATE]
    for index, candidate in enumerate(top_candidates, start=1):
        args = {
            "projectName": project,
            "candidateIndex": index,
            "candidate": candidate,
            "logicalModel": logical,
            "dataRequirements": data_requirements,
            "requirements": params.requirements,
            "constraints": constraints,
        }
        evaluation_thunks.append(lambda args=args: ctx.task(storage_evaluation_task, args))
    evaluations = ctx.parallel_all(evaluation_thunks)

    # Phase 5: storage architecture
    ctx.log("info", "Phase 5: Designing storage architecture")
    storage = ctx.task(
        storage_architecture_task,
        {
            "projectName": project,
            "storageCandidates": storage_candidates,
            "detailedStorageEvaluations": evaluations,
            "logicalModel": logical,
            "dataRequirements": data_requirements,
            "constraints": constraints,
        },
    )

    missing_attributes = storage.missing_quality_attributes(DATA_REQUIRED_QUALITY_ATTRIBUTES)
    if missing_attributes:
        ctx.breakpoint(
            question=(
                f"Storage architecture missing quality attributes: {', '.join(missing_attributes)}. "
                "Should we refine the architecture?"
            ),
            title="Storage Quality Attributes Gap",
            context={
                "projectName": project,
                "missingAttributes": missing_attributes,
                "recommendation": "Define scalability, availability, and consistency strategies",
            },
        )

    ctx.breakpoint(
        question=(
            f"Review storage architecture for {project}. Recommended: "
            f"{storage.recommendation.primary_database} with "
            f"{len(storage.recommendation.additional_stores)} additional stores. Approve?"
        ),
        title="Storage Architecture Review",
        context={
            "projectName": project,
            "architecture": dump(storage),
            "files": [
                _file(output_dir, "phase5-storage-architecture.json", "json"),
                _file(output_dir, "phase5-storage-architecture-diagram.md", "markdown"),
            ],
        },
    )

    # Phases 6-8: physical model, flow, integration
    ctx.log("info", "Phase 6: Designing physical data model")
    physical = ctx.task(
        physical_data_model_task,
        {
            "projectName": project,
            "logicalModel": logical,
            "storageArchitecture": storage,
            "dataRequirements": data_requirements,
            "requirements": params.requirements,
        },
    )

    ctx.log("info", "Phase 7: Designing data flow")
    data_flow = ctx.task(
        data_flow_design_task,
        {
            "projectName": project,
            "physicalModel": physical,
            "storageArchitecture": storage,
            "dataRequirements": data_requirements,
            "requirements": params.requirements,
        },
    )

    ctx.log("info", "Phase 8: Designing data integration")
    integration = ctx.task(
        data_integration_task,
        {
            "projectName": project,
            "dataFlow": data_flow,
            "storageArchitecture": storage,
            "existingArchitecture": params.existing_architecture,
            "requirements": params.requirements,
        },
    )

    # Phases 9-10: governance and security
    ctx.log("info", "Phase 9: Designing data governance")
    governance = ctx.task(
        data_governance_task,
        {
            "projectName": project,
            "physicalModel": physical,
            "storageArchitecture": storage,
            "dataRequirements": data_requirements,
            "constraints": constraints,
        },
    )

    ctx.log("info", "Phase 10: Designing data security")
    security = ctx.task(
        data_security_task,
        {
            "projectName": project,
            "physicalModel": physical,
            "storageArchitecture": storage,
            "dataGovernance": governance,
            "constraints": constraints,
        },
    )

    missing_compliance = security.missing_compliance(constraints.get("compliance") or [])
    if missing_compliance:
        ctx.breakpoint(
            question=(
                "Security design missing compliance controls for: "
                f"{', '.join(missing_compliance)}. Should we add these controls?"
            ),
            title="Compliance Gap Warning",
            context={
                "projectName": project,
                "missingCompliance": missing_compliance,
                "recommendation": "Add compliance controls for all required standards",
            },
        )

    ctx.breakpoint(
        question=(
            f"Review data governance and security for {project}. Governance policies: "
            f"{len(governance.policies)}. Security controls: {len(security.controls)}. Approve?"
        ),
        title="Governance and Security Review",
        context={
            "projectName": project,
            "governance": dump(governance),
            "security": dump(security),
            "files": [
                _file(output_dir, "phase9-data-governance.json", "json"),
                _file(output_dir, "phase10-data-security.json", "json"),
            ],
        },
    )

    # Phase 11: migration, only when replacing an existing architecture
    migration = None
    if params.existing_architecture:
        ctx.log("info", "Phase 11: Planning data migration")
        migration = ctx.task(
            data_migration_task,
            {
                "projectName": project,
                "existingArchitecture": params.existing_architecture,
                "physicalModel": physical,
                "storageArchitecture": storage,
                "dataRequirements": data_requirements,
                "constraints": constraints,
            },
        )

        if not migration.rollback_strategy:
            ctx.breakpoint(
                question=(
                    "Migration plan lacks rollback strategy. "
                    "Should we develop one before proceeding?"
                ),
                title="Migration Rollback Missing",
                context={
                    "projectName": project,
                    "migration": dump(migration),
                    "recommendation": "Always include rollback strategy for data migrations",
                },
            )

    # Phases 12-14: performance, DR, roadmap
    ctx.log("info", "Phase 12: Planning performance optimization")
    performance = ctx.task(
        performance_optimization_task,
        {
            "projectName": project,
            "physicalModel": physical,
            "storageArchitecture": storage,
            "dataFlow": data_flow,
            "requirements": params.requirements,
        },
    )

    ctx.log("info", "Phase 13: Planning disaster recovery and backup")
    disaster_recovery = ctx.task(
        disaster_recovery_task,
        {
            "projectName": project,
            "storageArchitecture": storage,
            "dataRequirements": data_requirements,
            "constraints": constraints,
        },
    )

    ctx.log("info", "Phase 14: Creating implementation roadmap")
    roadmap = ctx.task(
        implementation_roadmap_task,
        {
            "projectName": project,
            "physicalModel": physical,
            "storageArchitecture": storage,
            "dataFlow": data_flow,
            "dataIntegration": integration,
            "dataGovernance": governance,
            "dataSecurity": security,
            "dataMigration": migration,
            "performanceStrategy": performance,
            "drStrategy": disaster_recovery,
            "constraints": constraints,
        },
    )

    # Phase 15: risks
    ctx.log("info", "Phase 15: Analyzing data architecture risks")
    risk_analysis = ctx.task(
        data_architecture_risk_analysis_task,
        {
            "projectName": project,
            "storageArchitecture": storage,
            "dataMigration": migration,
            "implementationRoadmap": roadmap,
            "constraints": constraints,
        },
    )

    unmitigated = risk_analysis.unmitigated_critical_risks()
    if unmitigated:
        ctx.breakpoint(
            question=(
                f"{len(unmitigated)} critical risks lack mitigation plans. "
                "Should we develop mitigation strategies before proceeding?"
            ),
            title="Critical Risk Warning",
            context={
                "projectName": project,
                "criticalRisks": dump(unmitigated),
                "recommendation": "Develop mitigation strategies for all critical risks",
            },
        )

    ctx.breakpoint(
        question=(
            f"Data Architecture Design complete for {project}. Storage: "
            f"{storage.recommendation.primary_database}. Timeline: "
            f"{roadmap.timeline.total_duration}. Cost: {roadmap.cost.total}. Approve to proceed?"
        ),
        title="Data Architecture Design Approval",
        context={
            "projectName": project,
            "summary": {
                "storageArchitecture": dump(storage.recommendation),
                "dataDomains": len(data_requirements.data_domains),
                "entities": len(conceptual.entities),
                "estimatedTimeline": roadmap.timeline.total_duration,
                "estimatedCost": roadmap.cost.total,
            },
            "files": [
                _file(output_dir, "final-data-architecture.json", "json"),
                _file(output_dir, "final-data-architecture.md", "markdown"),
                _file(output_dir, "implementation-roadmap.md", "markdown"),
            ],
        },
    )

    return {
        "success": True,
        "project_name": project,
        "data_models": {
            "conceptual": dump(conceptual),
            "logical": dump(logical),
            "physical": dump(physical),
        },
        "storage_architecture": dump(storage),
        "data_flow": dump(data_flow),
        "data_integration": dump(integration),
        "governance": dump(governance),
        "security": dump(security),
        "migration_plan": dump(migration),
        "performance_strategy": dump(performance),
        "disaster_recovery": dump(disaster_recovery),
        "implementation_plan": dump(roadmap),
        "risks": dump(risk_analysis),
        "next_steps": roadmap.phases,
        "metadata": metadata(SLUG, start, version=VERSION),
    }
