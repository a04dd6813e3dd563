"""DevOps architecture alignment process.

Aligns an architecture with delivery practice: current state, CI/CD
pipeline, deployment strategy, feature flags, infrastructure as code,
rollback, deployment monitoring, release checklist and roadmap.
"""

from typing import Any

from archsitter.config import DEVOPS_REQUIRED_PIPELINE_STAGES, DEVOPS_REQUIRED_SLIS
from archsitter.processes.common import (
    dump,
    dump_artifacts,
    duration_minutes,
    elapsed_seconds,
    error_result,
    metadata,
    parse_inputs,
)
from archsitter.runtime.context import ProcessContext, artifact_files

from .models import DevopsAlignmentInputs, RollbackDesign
from .tasks import (
    cicd_pipeline_design_task,
    current_state_assessment_task,
    deployment_monitoring_design_task,
    deployment_strategy_design_task,
    feature_flags_design_task,
    implementation_roadmap_task,
    infrastructure_as_code_design_task,
    release_checklist_creation_task,
    rollback_procedures_design_task,
)

SLUG = "devops-architecture-alignment"


def rollback_exceeds_constraint(design: RollbackDesign, constraint: Any) -> bool:
    """True when the estimated rollback time is longer than allowed.

    Both durations are read in minutes; if either cannot be parsed the
    constraint is not considered exceeded.
    """
    estimate = duration_minutes(design.estimated_rollback_time)
    limit = duration_minutes(constraint)
    if estimate is None or limit is None:
        return False
    return estimate > limit


def _labelled(path: str | None, label: str) -> list[dict[str, Any]]:
    if not path:
        return []
    return [{"path": path, "format": "markdown", "label": label}]


def process(
    inputs: dict[str, Any] | DevopsAlignmentInputs, ctx: ProcessContext
) -> dict[str, Any]:
    params = parse_inputs(DevopsAlignmentInputs, inputs)
    project = params.project_name
    target = params.deployment_target
    frequency = params.release_frequency
    scalability = params.scalability_requirements
    constraints = params.constraints
    output_dir = params.output_dir
    start = ctx.now()
    artifacts = []

    ctx.log("info", f"Starting DevOps Architecture Alignment for {project}")
    ctx.log("info", f"Deployment Target: {target}, Release Frequency: {frequency}")
    ctx.log(
        "info",
        f"Scalability: {scalability.target_load}, Availability: {scalability.availability}",
    )

    # ------------------------------------------------------------------
    # Phase 1: current state
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 1: Assessing current CI/CD and deployment architecture")
    assessment = ctx.task(
        current_state_assessment_task,
        {
            "projectName": project,
            "currentCICD": params.current_cicd,
            "existingInfrastructure": params.existing_infrastructure,
            "teamSize": params.team_size,
            "deploymentTarget": target,
            "outputDir": output_dir,
        },
    )

    if not assessment.success:
        return error_result(
            SLUG,
            start,
            "Failed to complete current state assessment",
            "current-state-assessment",
            details=dump(assessment),
        )
    artifacts.extend(assessment.artifacts)

    critical_gaps = assessment.critical_gaps()
    if critical_gaps:
        ctx.breakpoint(
            question=(
                f"Current state assessment found {len(critical_gaps)} critical gaps: "
                f"{', '.join(gap.area for gap in critical_gaps)}. Review assessment and continue?"
            ),
            title="Current State Assessment - Critical Gaps Identified",
            context={
                "criticalGaps": dump(critical_gaps),
                "allGaps": dump(assessment.gaps),
                "painPoints": assessment.pain_points,
                "recommendation": (
                    "Review identified gaps and prioritize fixes in upcoming architecture design"
                ),
            },
            artifacts=assessment.artifacts,
        )

    # ------------------------------------------------------------------
    # Phase 2: CI/CD pipeline
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 2: Designing CI/CD pipeline architecture")
    pipeline = ctx.task(
        cicd_pipeline_design_task,
        {
            "projectName": project,
            "deploymentTarget": target,
            "releaseFrequency": frequency,
            "currentStateAssessment": assessment,
            "scalabilityRequirements": scalability,
            "constraints": constraints,
            "teamSize": params.team_size,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(pipeline.artifacts)
    stages = pipeline.architecture.stages

    missing_stages = pipeline.architecture.missing_stages(DEVOPS_REQUIRED_PIPELINE_STAGES)
    if missing_stages:
        ctx.breakpoint(
            question=(
                f"CI/CD pipeline missing critical stages: {', '.join(missing_stages)}. "
                "Review pipeline design?"
            ),
            title="CI/CD Pipeline Completeness Check",
            context={
                "missingStages": missing_stages,
                "currentStages": pipeline.architecture.stage_types(),
                "recommendation": "Add missing stages to ensure comprehensive CI/CD coverage",
                "files": _labelled(pipeline.pipeline_diagram_path, "Pipeline Architecture Diagram"),
            },
        )

    ctx.breakpoint(
        question=(
            f"Review CI/CD pipeline architecture for {project}. Pipeline includes {len(stages)} "
            f"stages with {pipeline.automation.level:g}% automation. "
            "Approve to proceed with deployment strategy?"
        ),
        title="CI/CD Pipeline Architecture Review",
        context={
            "projectName": project,
            "pipelineArchitecture": dump(pipeline.architecture),
            "automationMetrics": dump(pipeline.automation),
            "estimatedBuildTime": pipeline.performance.estimated_build_time,
            "tooling": dump(pipeline.tooling),
            "files": _labelled(pipeline.pipeline_diagram_path, "Pipeline Diagram")
            + _labelled(pipeline.architecture_doc_path, "Architecture Documentation"),
        },
    )

    # ------------------------------------------------------------------
    # Phase 3: deployment strategy
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 3: Designing deployment strategy and release patterns")
    deployment = ctx.task(
        deployment_strategy_design_task,
        {
            "projectName": project,
            "deploymentTarget": target,
            "releaseFrequency": frequency,
            "scalabilityRequirements": scalability,
            "constraints": constraints,
            "cicdArchitecture": pipeline.architecture,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(deployment.artifacts)
    strategy = deployment.strategy

    if constraints.downtime == "zero" and not strategy.supports_zero_downtime:
        ctx.breakpoint(
            question=(
                "Deployment strategy does not support zero-downtime requirement. "
                f"Current strategy: {strategy.pattern}. Revise strategy?"
            ),
            title="Zero-Downtime Requirement Not Met",
            context={
                "requiredDowntime": constraints.downtime,
                "currentStrategy": dump(strategy),
                "recommendation": "Consider blue-green, canary, or rolling deployment patterns",
            },
            artifacts=deployment.artifacts,
        )

    # ------------------------------------------------------------------
    # Phase 4: feature flags and infrastructure as code
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 4: Designing feature flags and Infrastructure as Code (parallel)")
    flags_args = {
        "projectName": project,
        "deploymentStrategy": strategy,
        "releaseFrequency": frequency,
        "outputDir": output_dir,
    }
    iac_args = {
        "projectName": project,
        "deploymentTarget": target,
        "scalabilityRequirements": scalability,
        "existingInfrastructure": params.existing_infrastructure,
        "outputDir": output_dir,
    }
    feature_flags, iac = ctx.parallel_all(
        [
            lambda: ctx.task(feature_flags_design_task, flags_args),
            lambda: ctx.task(infrastructure_as_code_design_task, iac_args),
        ]
    )
    artifacts.extend(feature_flags.artifacts)
    artifacts.extend(iac.artifacts)

    # ------------------------------------------------------------------
    # Phase 5: rollback
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 5: Designing rollback procedures and disaster recovery")
    rollback = ctx.task(
        rollback_procedures_design_task,
        {
            "projectName": project,
            "deploymentStrategy": strategy,
            "constraints": constraints,
            "deploymentTarget": target,
            "featureFlagsDesign": feature_flags,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(rollback.artifacts)

    if rollback_exceeds_constraint(rollback, constraints.rollback_time):
        ctx.breakpoint(
            question=(
                f"Estimated rollback time ({rollback.estimated_rollback_time}) exceeds "
                f"constraint ({constraints.rollback_time}). Review procedures?"
            ),
            title="Rollback Time Constraint",
            context={
                "estimatedTime": rollback.estimated_rollback_time,
                "requiredTime": constraints.rollback_time,
                "procedures": dump(rollback.procedures),
                "recommendation": "Optimize rollback procedures or adjust automation level",
            },
            artifacts=rollback.artifacts,
        )

    # ------------------------------------------------------------------
    # Phase 6: deployment monitoring
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 6: Designing deployment monitoring and observability")
    monitoring = ctx.task(
        deployment_monitoring_design_task,
        {
            "projectName": project,
            "deploymentTarget": target,
            "deploymentStrategy": strategy,
            "scalabilityRequirements": scalability,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(monitoring.artifacts)
    plan = monitoring.plan

    missing_slis = plan.missing_slis(DEVOPS_REQUIRED_SLIS)
    if missing_slis:
        ctx.breakpoint(
            question=(
                f"Monitoring plan missing critical SLIs: {', '.join(missing_slis)}. "
                "Review monitoring design?"
            ),
            title="Monitoring Completeness Check",
            context={
                "missingSLIs": missing_slis,
                "definedSLIs": [sli.type for sli in plan.slis],
                "recommendation": "Add missing SLIs to ensure comprehensive monitoring",
            },
            artifacts=monitoring.artifacts,
        )

    # ------------------------------------------------------------------
    # Phase 7: release checklist
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 7: Creating release checklist and operational runbooks")
    release = ctx.task(
        release_checklist_creation_task,
        {
            "projectName": project,
            "cicdArchitecture": pipeline.architecture,
            "deploymentStrategy": strategy,
            "rollbackProcedures": rollback.procedures,
            "monitoringPlan": plan,
            "constraints": constraints,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(release.artifacts)
    checklist = release.checklist

    # ------------------------------------------------------------------
    # Phase 8: roadmap
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 8: Creating implementation roadmap and comprehensive documentation")
    roadmap = ctx.task(
        implementation_roadmap_task,
        {
            "projectName": project,
            "currentStateAssessment": assessment,
            "cicdArchitecture": pipeline.architecture,
            "deploymentStrategy": strategy,
            "featureFlagsDesign": feature_flags,
            "iacDesign": iac,
            "rollbackProcedures": rollback.procedures,
            "monitoringPlan": plan,
            "releaseChecklist": checklist,
            "teamSize": params.team_size,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(roadmap.artifacts)

    summary = {
        "cicdStages": len(stages),
        "deploymentPattern": strategy.pattern,
        "zeroDowntime": strategy.supports_zero_downtime,
        "rollbackTime": rollback.estimated_rollback_time,
        "monitoringSLIs": len(plan.slis),
        "releaseChecklistItems": len(checklist),
        "implementationPhases": len(roadmap.phases),
        "estimatedImplementationTime": roadmap.estimated_duration,
    }
    ctx.breakpoint(
        question=(
            f"DevOps Architecture Alignment complete for {project}. Review comprehensive "
            f"architecture including CI/CD pipeline, deployment strategy ({strategy.pattern}), "
            "rollback procedures, and monitoring plan. Approve for implementation?"
        ),
        title="Final DevOps Architecture Review",
        context={
            "projectName": project,
            "summary": summary,
            "artifacts": dump_artifacts(artifacts),
            "files": _labelled(roadmap.executive_summary_path, "Executive Summary")
            + _labelled(roadmap.roadmap_path, "Implementation Roadmap"),
        },
    )

    end = ctx.now()
    duration = elapsed_seconds(start, end)

    ctx.log("info", f"DevOps Architecture Alignment completed in {duration:.1f}s")
    ctx.log("info", f"Generated {len(artifacts)} artifacts")

    return {
        "success": True,
        "project_name": project,
        "cicd_architecture": dump(pipeline.architecture),
        "deployment_strategy": dump(strategy),
        "feature_flags": dump(feature_flags.design),
        "infrastructure_as_code": dump(iac.design),
        "rollback_procedures": dump(rollback.procedures),
        "monitoring_plan": dump(plan),
        "release_checklist": dump(checklist),
        "implementation_roadmap": roadmap.roadmap,
        "artifacts": dump_artifacts(artifacts),
        "metrics": {
            "total_artifacts": len(artifacts),
            "pipeline_stages": len(stages),
            "automation_level": pipeline.automation.level,
            "deployment_pattern": strategy.pattern,
            "supports_zero_downtime": strategy.supports_zero_downtime,
            "rollback_time": rollback.estimated_rollback_time,
            "monitoring_slis": len(plan.slis),
            "release_checklist_items": len(checklist),
            "implementation_phases": len(roadmap.phases),
            "estimated_duration": roadmap.estimated_duration,
            "processing_duration": duration,
        },
        "metadata": metadata(
            SLUG,
            start,
            process_slug=SLUG,
            category="Operational Architecture",
            specialization_slug="software-architecture",
            completed_at=end.isoformat(),
            duration=duration,
        ),
    }
