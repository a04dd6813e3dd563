"""Task definitions for the DDD strategic modeling process."""

from pathlib import Path

from archsitter.runtime.task import define_task

from .models import (
    AclDesign,
    AdrGeneration,
    AggregateAnalysis,
    BoundedContexts,
    ContextMapping,
    DomainEvents,
    DomainKnowledge,
    IntegrationStrategy,
    ModelValidation,
    SharedKernelAnalysis,
    StrategicQualityScore,
    StrategyDocument,
    SubdomainClassification,
    TeamAlignment,
    UbiquitousLanguage,
)

PROMPTS = Path(__file__).parent / "prompts.yaml"

domain_knowledge_discovery_task = define_task(
    "domain-knowledge-discovery",
    title="Phase 1: Domain Knowledge Discovery - {projectName}",
    agent="domain-expert",
    output_model=DomainKnowledge,
    labels=["ddd", "strategic-modeling", "domain-discovery", "architecture"],
    prompt_source=PROMPTS,
)

subdomain_classification_task = define_task(
    "subdomain-classification",
    title="Phase 2: Subdomain Classification - {projectName}",
    agent="subdomain-strategist",
    output_model=SubdomainClassification,
    labels=["ddd", "strategic-modeling", "subdomain-classification", "architecture"],
    prompt_source=PROMPTS,
)

bounded_context_identification_task = define_task(
    "bounded-context-identification",
    title="Phase 3: Bounded Context Identification - {projectName}",
    agent="context-mapper",
    output_model=BoundedContexts,
    labels=["ddd", "strategic-modeling", "bounded-contexts", "architecture"],
    prompt_source=PROMPTS,
)

ubiquitous_language_task = define_task(
    "ubiquitous-language",
    title="Phase 4: Ubiquitous Language Definition - {projectName}",
    agent="language-curator",
    output_model=UbiquitousLanguage,
    labels=["ddd", "strategic-modeling", "ubiquitous-language", "terminology"],
    prompt_source=PROMPTS,
)

context_mapping_task = define_task(
    "context-mapping",
    title="Phase 5: Context Mapping - {projectName}",
    agent="integration-architect",
    output_model=ContextMapping,
    labels=["ddd", "strategic-modeling", "context-mapping", "integration-patterns"],
    prompt_source=PROMPTS,
)

aggregate_identification_task = define_task(
    "aggregate-identification",
    title="Phase 6: Aggregate Identification - {boundedContext[name]}",
    agent="aggregate-designer",
    output_model=AggregateAnalysis,
    labels=["ddd", "strategic-modeling", "aggregates", "tactical-design"],
    prompt_source=PROMPTS,
)

domain_event_identification_task = define_task(
    "domain-event-identification",
    title="Phase 7: Domain Event Identification - {projectName}",
    agent="event-modeler",
    output_model=DomainEvents,
    labels=["ddd", "strategic-modeling", "domain-events", "event-storming"],
    prompt_source=PROMPTS,
)

team_topology_alignment_task = define_task(
    "team-topology-alignment",
    title="Phase 8: Team Topology Alignment - {projectName}",
    agent="org-designer",
    output_model=TeamAlignment,
    labels=["ddd", "strategic-modeling", "team-topology", "conways-law"],
    prompt_source=PROMPTS,
)

anti_corruption_layer_task = define_task(
    "anti-corruption-layer",
    title="Phase 9: Anti-Corruption Layer Design - {projectName}",
    agent="acl-architect",
    output_model=AclDesign,
    labels=["ddd", "strategic-modeling", "anti-corruption-layer", "integration"],
    prompt_source=PROMPTS,
)

shared_kernel_task = define_task(
    "shared-kernel",
    title="Phase 10: Shared Kernel Identification - {projectName}",
    agent="kernel-analyst",
    output_model=SharedKernelAnalysis,
    labels=["ddd", "strategic-modeling", "shared-kernel", "published-language"],
    prompt_source=PROMPTS,
)

integration_strategy_task = define_task(
    "integration-strategy",
    title="Phase 11: Integration Strategy - {projectName}",
    agent="integration-strategist",
    output_model=IntegrationStrategy,
    labels=["ddd", "strategic-modeling", "integration-strategy", "distributed-systems"],
    prompt_source=PROMPTS,
)

strategic_model_validation_task = define_task(
    "strategic-model-validation",
    title="Phase 12: Strategic Model Validation - {projectName}",
    agent="model-validator",
    output_model=ModelValidation,
    labels=["ddd", "strategic-modeling", "validation", "quality-assurance"],
    prompt_source=PROMPTS,
)

strategic_quality_scoring_task = define_task(
    "strategic-quality-scoring",
    title="Phase 13: Strategic Quality Scoring - {projectName}",
    agent="quality-assessor",
    output_model=StrategicQualityScore,
    labels=["ddd", "strategic-modeling", "quality-scoring", "assessment"],
    prompt_source=PROMPTS,
)

adr_generation_task = define_task(
    "adr-generation",
    title="Phase 14: ADR Generation - {projectName}",
    agent="adr-author",
    output_model=AdrGeneration,
    labels=["ddd", "strategic-modeling", "adr", "architecture-decisions"],
    prompt_source=PROMPTS,
)

strategy_documentation_task = define_task(
    "strategy-documentation",
    title="Phase 15: Strategy Documentation - {projectName}",
    agent="technical-writer",
    output_model=StrategyDocument,
    labels=["ddd", "strategic-modeling", "documentation", "strategy"],
    prompt_source=PROMPTS,
)

TASKS = [
    domain_knowledge_discovery_task,
    subdomain_classification_task,
    bounded_context_identification_task,
    ubiquitous_language_task,
    context_mapping_task,
    aggregate_identification_task,
    domain_event_identification_task,
    team_topology_alignment_task,
    anti_corruption_layer_task,
    shared_kernel_task,
    integration_strategy_task,
    strategic_model_validation_task,
    strategic_quality_scoring_task,
    adr_generation_task,
    strategy_documentation_task,
]
