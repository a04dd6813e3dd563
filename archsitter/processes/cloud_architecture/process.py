"""Cloud architecture design process.

Strategy, provider selection, compute/data/network design, security and
compliance, high availability, cost optimization, infrastructure as code
and a closing quality validation against a target score.
"""

from typing import Any

from archsitter.processes.common import dump, metadata, parse_inputs
from archsitter.runtime.context import ProcessContext

from .models import CloudArchitectureInputs
from .tasks import (
    create_infrastructure_as_code_task,
    define_cloud_strategy_task,
    design_compute_architecture_task,
    design_data_architecture_task,
    design_high_availability_task,
    design_network_architecture_task,
    optimize_costs_task,
    plan_security_compliance_task,
    select_cloud_provider_task,
    validate_architecture_quality_task,
)

SLUG = "cloud-architecture-design"


def _markdown(output_dir: str, *names: str) -> list[dict[str, str]]:
    return [{"path": f"{output_dir}/{name}.md", "format": "markdown"} for name in names]


def process(
    inputs: dict[str, Any] | CloudArchitectureInputs, ctx: ProcessContext
) -> dict[str, Any]:
    params = parse_inputs(CloudArchitectureInputs, inputs)
    project = params.project_name
    requirements = params.requirements
    target_quality = params.target_quality
    output_dir = params.output_dir
    phases = []

    def record(number: int, name: str, result: Any) -> None:
        phases.append({"phase": number, "name": name, "result": dump(result)})

    # Phase 1: strategy
    ctx.log("info", "Phase 1: Defining cloud strategy...")
    strategy = ctx.task(
        define_cloud_strategy_task,
        {
            "projectName": project,
            "requirements": requirements,
            "cloudProviders": params.cloud_providers,
        },
    )
    record(1, "Cloud Strategy", strategy)

    ctx.breakpoint(
        question="Review cloud strategy and approach. Proceed with provider selection?",
        title="Cloud Strategy Review",
        context={"strategy": dump(strategy), "files": _markdown(output_dir, "cloud-strategy")},
    )

    # Phase 2: provider
    ctx.log("info", "Phase 2: Selecting cloud provider...")
    selection = ctx.task(
        select_cloud_provider_task,
        {
            "projectName": project,
            "requirements": requirements,
            "strategy": strategy,
            "candidates": params.cloud_providers,
        },
    )
    record(2, "Provider Selection", selection)
    provider = selection.selected_provider

    ctx.breakpoint(
        question=f"Selected: {provider}. Proceed with architecture design?",
        title="Provider Selection Review",
        context={
            "provider": dump(selection),
            "files": _markdown(output_dir, "provider-selection"),
        },
    )

    # Phase 3: compute, data and network in parallel
    ctx.log("info", "Phase 3: Designing architecture components in parallel...")
    design_args = {
        "projectName": project,
        "requirements": requirements,
        "provider": provider,
        "strategy": strategy,
    }
    compute, data, network = ctx.parallel_all(
        [
            lambda: ctx.task(design_compute_architecture_task, design_args),
            lambda: ctx.task(design_data_architecture_task, design_args),
            lambda: ctx.task(design_network_architecture_task, design_args),
        ]
    )
    components = {"compute": dump(compute), "data": dump(data), "network": dump(network)}
    phases.append({"phase": 3, "name": "Architecture Design", "result": components})

    ctx.breakpoint(
        question=(
            "Review compute, data, and network architecture. "
            "Proceed with security and compliance?"
        ),
        title="Architecture Components Review",
        context={
            "architecture": components,
            "files": _markdown(
                output_dir, "compute-architecture", "data-architecture", "network-architecture"
            ),
        },
    )

    # Phase 4: security and compliance
    ctx.log("info", "Phase 4: Planning security and compliance...")
    security = ctx.task(
        plan_security_compliance_task,
        {
            "projectName": project,
            "requirements": requirements,
            "provider": provider,
            "compute": compute,
            "data": data,
            "network": network,
        },
    )
    record(4, "Security & Compliance", security)

    ctx.breakpoint(
        question="Review security and compliance design. Proceed with HA design?",
        title="Security Review",
        context={"security": dump(security), "files": _markdown(output_dir, "security-design")},
    )

    # Phases 5-6: availability and cost
    ctx.log("info", "Phase 5: Designing high availability...")
    availability = ctx.task(
        design_high_availability_task,
        {
            "projectName": project,
            "requirements": requirements,
            "provider": provider,
            "compute": compute,
            "data": data,
            "network": network,
            "security": security,
        },
    )
    record(5, "High Availability", availability)

    ctx.log("info", "Phase 6: Optimizing costs...")
    cost = ctx.task(
        optimize_costs_task,
        {
            "projectName": project,
            "requirements": requirements,
            "provider": provider,
            "compute": compute,
            "data": data,
            "network": network,
            "security": security,
            "ha": availability,
        },
    )
    record(6, "Cost Optimization", cost)

    ctx.breakpoint(
        question="Review HA design and cost estimates. Proceed with IaC generation?",
        title="HA & Cost Review",
        context={
            "ha": dump(availability),
            "cost": dump(cost),
            "files": _markdown(output_dir, "ha-design", "cost-estimate"),
        },
    )

    # Phase 7: infrastructure as code
    ctx.log("info", "Phase 7: Creating Infrastructure as Code...")
    iac = ctx.task(
        create_infrastructure_as_code_task,
        {
            "projectName": project,
            "provider": provider,
            "compute": compute,
            "data": data,
            "network": network,
            "security": security,
            "ha": availability,
        },
    )
    record(7, "Infrastructure as Code", iac)

    # Phase 8: validation
    ctx.log("info", "Phase 8: Validating architecture quality...")
    quality = ctx.task(
        validate_architecture_quality_task,
        {
            "projectName": project,
            "requirements": requirements,
            "targetQuality": target_quality,
            "architecture": {
                "strategy": strategy,
                "provider": selection,
                "compute": compute,
                "data": data,
                "network": network,
                "security": security,
                "ha": availability,
                "cost": cost,
                "iac": iac,
            },
        },
    )
    record(8, "Quality Validation", quality)

    ctx.breakpoint(
        question=(
            f"Architecture quality: {quality.score:g}/{target_quality:g}. "
            "Approve final architecture?"
        ),
        title="Final Architecture Review",
        context={
            "quality": dump(quality),
            "summary": {
                "projectName": project,
                "selectedProvider": provider,
                "qualityScore": quality.score,
                "phases": phases,
            },
            "files": _markdown(
                output_dir, "cloud-architecture-diagram", "final-architecture-report"
            ),
        },
    )

    return {
        "success": quality.score >= target_quality,
        "process_slug": SLUG,
        "category": "software-architecture",
        "project_name": project,
        "architecture": {
            "strategy": dump(strategy),
            "provider": provider,
            "compute": dump(compute),
            "data": dump(data),
            "network": dump(network),
            "security": dump(security),
            "high_availability": dump(availability),
        },
        "cost": dump(cost),
        "iac": dump(iac),
        "quality_score": quality.score,
        "target_quality": target_quality,
        "phases": phases,
        "metadata": metadata(SLUG, ctx.now(), specialization_slug="software-architecture"),
    }
