"""Task definitions for the data architecture process."""

from pathlib import Path

from archsitter.runtime.task import define_task

from .models import (
    ConceptualModel,
    DataFlowDesign,
    DataGovernance,
    DataIntegration,
    DataMigration,
    DataRequirements,
    DataSecurity,
    DisasterRecovery,
    ImplementationRoadmap,
    LogicalModel,
    PerformanceStrategy,
    PhysicalModel,
    RiskAnalysis,
    StorageArchitecture,
    StorageEvaluation,
    StorageSelection,
)

PROMPTS = Path(__file__).parent / "prompts.yaml"

data_requirements_analysis_task = define_task(
    "data-requirements-analysis",
    title="Phase 1: Data Requirements Analysis - {projectName}",
    agent="general-purpose",
    output_model=DataRequirements,
    labels=["data-architecture", "planning", "requirements", "analysis"],
    prompt_source=PROMPTS,
)

conceptual_data_model_task = define_task(
    "conceptual-data-model",
    title="Phase 2: Conceptual Data Model Design - {projectName}",
    agent="general-purpose",
    output_model=ConceptualModel,
    labels=["data-architecture", "planning", "conceptual-model", "erd"],
    prompt_source=PROMPTS,
)

logical_data_model_task = define_task(
    "logical-data-model",
    title="Phase 3: Logical Data Model Design - {projectName}",
    agent="general-purpose",
    output_model=LogicalModel,
    labels=["data-architecture", "planning", "logical-model", "schema"],
    prompt_source=PROMPTS,
)

storage_selection_task = define_task(
    "storage-selection",
    title="Phase 4: Storage Technology Selection - {projectName}",
    agent="general-purpose",
    output_model=StorageSelection,
    labels=["data-architecture", "planning", "storage-selection", "evaluation"],
    prompt_source=PROMPTS,
)

storage_evaluation_task = define_task(
    "storage-evaluation",
    title="Phase 4.{candidateIndex}: Storage Evaluation - {candidate[name]}",
    agent="general-purpose",
    output_model=StorageEvaluation,
    labels=["data-architecture", "planning", "storage-evaluation", "candidate-{candidateIndex}"],
    prompt_source=PROMPTS,
)

storage_architecture_task = define_task(
    "storage-architecture",
    title="Phase 5: Storage Architecture Design - {projectName}",
    agent="general-purpose",
    output_model=StorageArchitecture,
    labels=["data-architecture", "planning", "storage-architecture", "design"],
    prompt_source=PROMPTS,
)

physical_data_model_task = define_task(
    "physical-data-model",
    title="Phase 6: Physical Data Model Design - {projectName}",
    agent="general-purpose",
    output_model=PhysicalModel,
    labels=["data-architecture", "planning", "physical-model", "optimization"],
    prompt_source=PROMPTS,
)

data_flow_design_task = define_task(
    "data-flow-design",
    title="Phase 7: Data Flow Design - {projectName}",
    agent="general-purpose",
    output_model=DataFlowDesign,
    labels=["data-architecture", "planning", "data-flow", "etl"],
    prompt_source=PROMPTS,
)

data_integration_task = define_task(
    "data-integration",
    title="Phase 8: Data Integration Architecture - {projectName}",
    agent="general-purpose",
    output_model=DataIntegration,
    labels=["data-architecture", "planning", "integration", "interoperability"],
    prompt_source=PROMPTS,
)

data_governance_task = define_task(
    "data-governance",
    title="Phase 9: Data Governance Design - {projectName}",
    agent="general-purpose",
    output_model=DataGovernance,
    labels=["data-architecture", "planning", "governance", "policy"],
    prompt_source=PROMPTS,
)

data_security_task = define_task(
    "data-security",
    title="Phase 10: Data Security Design - {projectName}",
    agent="general-purpose",
    output_model=DataSecurity,
    labels=["data-architecture", "planning", "security", "compliance"],
    prompt_source=PROMPTS,
)

data_migration_task = define_task(
    "data-migration",
    title="Phase 11: Data Migration Strategy - {projectName}",
    agent="general-purpose",
    output_model=DataMigration,
    labels=["data-architecture", "planning", "migration", "transition"],
    prompt_source=PROMPTS,
)

performance_optimization_task = define_task(
    "performance-optimization",
    title="Phase 12: Performance Optimization Strategy - {projectName}",
    agent="general-purpose",
    output_model=PerformanceStrategy,
    labels=["data-architecture", "planning", "performance", "optimization"],
    prompt_source=PROMPTS,
)

disaster_recovery_task = define_task(
    "disaster-recovery",
    title="Phase 13: Disaster Recovery and Backup Strategy - {projectName}",
    agent="general-purpose",
    output_model=DisasterRecovery,
    labels=["data-architecture", "planning", "disaster-recovery", "backup"],
    prompt_source=PROMPTS,
)

implementation_roadmap_task = define_task(
    "implementation-roadmap",
    title="Phase 14: Implementation Roadmap - {projectName}",
    agent="general-purpose",
    output_model=ImplementationRoadmap,
    labels=["data-architecture", "planning", "roadmap", "project-management"],
    prompt_source=PROMPTS,
)

data_architecture_risk_analysis_task = define_task(
    "data-architecture-risk-analysis",
    title="Phase 15: Data Architecture Risk Analysis - {projectName}",
    agent="general-purpose",
    output_model=RiskAnalysis,
    labels=["data-architecture", "planning", "risk-analysis", "risk-management"],
    prompt_source=PROMPTS,
)

TASKS = [
    data_requirements_analysis_task,
    conceptual_data_model_task,
    logical_data_model_task,
    storage_selection_task,
    storage_evaluation_task,
    storage_architecture_task,
    physical_data_model_task,
    data_flow_design_task,
    data_integration_task,
    data_governance_task,
    data_security_task,
    data_migration_task,
    performance_optimization_task,
    disaster_recovery_task,
    implementation_roadmap_task,
    data_architecture_risk_analysis_task,
]
