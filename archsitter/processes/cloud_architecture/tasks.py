"""Task definitions for the cloud architecture design process."""

from pathlib import Path

from archsitter.runtime.task import define_task

from .models import (
    CloudDataArchitecture,
    CloudStrategy,
    ComputeArchitecture,
    CostOptimization,
    HighAvailability,
    InfrastructureAsCode,
    NetworkArchitecture,
    ProviderSelection,
    QualityValidation,
    SecurityCompliance,
)

PROMPTS = Path(__file__).parent / "prompts.yaml"

define_cloud_strategy_task = define_task(
    "define-cloud-strategy",
    title="Define Cloud Strategy: {projectName}",
    agent="cloud-strategist",
    output_model=CloudStrategy,
    labels=["agent", "cloud-architecture", "strategy", "phase-1"],
    prompt_source=PROMPTS,
)

select_cloud_provider_task = define_task(
    "select-cloud-provider",
    title="Select Cloud Provider: {projectName}",
    agent="cloud-provider-evaluator",
    output_model=ProviderSelection,
    labels=["agent", "cloud-architecture", "provider-selection", "phase-2"],
    prompt_source=PROMPTS,
)

design_compute_architecture_task = define_task(
    "design-compute-architecture",
    title="Design Compute Architecture: {projectName}",
    agent="compute-architect",
    output_model=ComputeArchitecture,
    labels=["agent", "cloud-architecture", "compute", "phase-3"],
    prompt_source=PROMPTS,
)

design_data_architecture_task = define_task(
    "design-data-architecture",
    title="Design Data Architecture: {projectName}",
    agent="data-architect",
    output_model=CloudDataArchitecture,
    labels=["agent", "cloud-architecture", "data", "phase-3"],
    prompt_source=PROMPTS,
)

design_network_architecture_task = define_task(
    "design-network-architecture",
    title="Design Network Architecture: {projectName}",
    agent="network-architect",
    output_model=NetworkArchitecture,
    labels=["agent", "cloud-architecture", "network", "phase-3"],
    prompt_source=PROMPTS,
)

plan_security_compliance_task = define_task(
    "plan-security-compliance",
    title="Plan Security & Compliance: {projectName}",
    agent="security-architect",
    output_model=SecurityCompliance,
    labels=["agent", "cloud-architecture", "security", "phase-4"],
    prompt_source=PROMPTS,
)

design_high_availability_task = define_task(
    "design-high-availability",
    title="Design High Availability: {projectName}",
    agent="ha-architect",
    output_model=HighAvailability,
    labels=["agent", "cloud-architecture", "high-availability", "phase-5"],
    prompt_source=PROMPTS,
)

optimize_costs_task = define_task(
    "optimize-costs",
    title="Optimize Costs: {projectName}",
    agent="cost-optimizer",
    output_model=CostOptimization,
    labels=["agent", "cloud-architecture", "cost-optimization", "phase-6"],
    prompt_source=PROMPTS,
)

create_infrastructure_as_code_task = define_task(
    "create-infrastructure-as-code",
    title="Create Infrastructure as Code: {projectName}",
    agent="iac-engineer",
    output_model=InfrastructureAsCode,
    labels=["agent", "cloud-architecture", "iac", "phase-7"],
    prompt_source=PROMPTS,
)

validate_architecture_quality_task = define_task(
    "validate-architecture-quality",
    title="Validate Architecture Quality: {projectName}",
    agent="architecture-quality-validator",
    output_model=QualityValidation,
    labels=["agent", "cloud-architecture", "quality-validation", "phase-8"],
    prompt_source=PROMPTS,
)

TASKS = [
    define_cloud_strategy_task,
    select_cloud_provider_task,
    design_compute_architecture_task,
    design_data_architecture_task,
    design_network_architecture_task,
    plan_security_compliance_task,
    design_high_availability_task,
    optimize_costs_task,
    create_infrastructure_as_code_task,
    validate_architecture_quality_task,
]
