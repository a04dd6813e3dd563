"""Task definitions for the DevOps architecture alignment process."""

from pathlib import Path

from archsitter.runtime.task import define_task

from .models import (
    CurrentStateAssessment,
    DeploymentStrategyDesign,
    FeatureFlagsDesign,
    IacDesign,
    ImplementationRoadmap,
    MonitoringDesign,
    PipelineDesign,
    ReleaseChecklist,
    RollbackDesign,
)

PROMPTS = Path(__file__).parent / "prompts.yaml"

current_state_assessment_task = define_task(
    "current-state-assessment",
    title="Assess current CI/CD and deployment state: {projectName}",
    agent="devops-assessor",
    output_model=CurrentStateAssessment,
    labels=["agent", "devops", "assessment", "phase-1"],
    prompt_source=PROMPTS,
)

cicd_pipeline_design_task = define_task(
    "cicd-pipeline-design",
    title="Design CI/CD pipeline architecture: {projectName}",
    agent="pipeline-architect",
    output_model=PipelineDesign,
    labels=["agent", "devops", "cicd", "pipeline", "phase-2"],
    prompt_source=PROMPTS,
)

deployment_strategy_design_task = define_task(
    "deployment-strategy-design",
    title="Design deployment strategy: {projectName}",
    agent="deployment-strategist",
    output_model=DeploymentStrategyDesign,
    labels=["agent", "devops", "deployment", "strategy", "phase-3"],
    prompt_source=PROMPTS,
)

feature_flags_design_task = define_task(
    "feature-flags-design",
    title="Design feature flags system: {projectName}",
    agent="feature-flag-architect",
    output_model=FeatureFlagsDesign,
    labels=["agent", "devops", "feature-flags", "phase-4"],
    prompt_source=PROMPTS,
)

infrastructure_as_code_design_task = define_task(
    "infrastructure-as-code-design",
    title="Design Infrastructure as Code: {projectName}",
    agent="iac-architect",
    output_model=IacDesign,
    labels=["agent", "devops", "iac", "infrastructure", "phase-4"],
    prompt_source=PROMPTS,
)

rollback_procedures_design_task = define_task(
    "rollback-procedures-design",
    title="Design rollback procedures: {projectName}",
    agent="rollback-engineer",
    output_model=RollbackDesign,
    labels=["agent", "devops", "rollback", "disaster-recovery", "phase-5"],
    prompt_source=PROMPTS,
)

deployment_monitoring_design_task = define_task(
    "deployment-monitoring-design",
    title="Design deployment monitoring and observability: {projectName}",
    agent="observability-architect",
    output_model=MonitoringDesign,
    labels=["agent", "devops", "monitoring", "observability", "phase-6"],
    prompt_source=PROMPTS,
)

release_checklist_creation_task = define_task(
    "release-checklist-creation",
    title="Create release checklist: {projectName}",
    agent="release-manager",
    output_model=ReleaseChecklist,
    labels=["agent", "devops", "release", "checklist", "phase-7"],
    prompt_source=PROMPTS,
)

implementation_roadmap_task = define_task(
    "implementation-roadmap",
    title="Create implementation roadmap: {projectName}",
    agent="implementation-planner",
    output_model=ImplementationRoadmap,
    labels=["agent", "devops", "roadmap", "implementation", "phase-8"],
    prompt_source=PROMPTS,
)

TASKS = [
    current_state_assessment_task,
    cicd_pipeline_design_task,
    deployment_strategy_design_task,
    feature_flags_design_task,
    infrastructure_as_code_design_task,
    rollback_procedures_design_task,
    deployment_monitoring_design_task,
    release_checklist_creation_task,
    implementation_roadmap_task,
]
