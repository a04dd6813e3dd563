"""DDD strategic modeling process.

Discovers the domain, classifies subdomains, draws bounded contexts and
the context map, then works through aggregates, events, team alignment
and integration before validating, scoring and documenting the model.
"""

from typing import Any

from archsitter.config import DDD_MIN_BUSINESS_CAPABILITIES, DDD_QUALITY_THRESHOLD
from archsitter.processes.common import (
    dump,
    dump_artifacts,
    elapsed_seconds,
    error_result,
    metadata,
    parse_inputs,
)
from archsitter.runtime.context import ProcessContext

from .models import Aggregate, DddStrategicModelingInputs
from .tasks import (
    adr_generation_task,
    aggregate_identification_task,
    anti_corruption_layer_task,
    bounded_context_identification_task,
    context_mapping_task,
    domain_event_identification_task,
    domain_knowledge_discovery_task,
    integration_strategy_task,
    shared_kernel_task,
    strategic_model_validation_task,
    strategic_quality_scoring_task,
    strategy_documentation_task,
    subdomain_classification_task,
    team_topology_alignment_task,
    ubiquitous_language_task,
)

SLUG = "ddd-strategic-modeling"
VERSION = "1.0.0"


def process(
    inputs: dict[str, Any] | DddStrategicModelingInputs, ctx: ProcessContext
) -> dict[str, Any]:
    params = parse_inputs(DddStrategicModelingInputs, inputs)
    project = params.project_name
    output_dir = params.output_dir
    start = ctx.now()
    artifacts = []

    ctx.log("info", f"Starting DDD Strategic Modeling for {project}")

    # ------------------------------------------------------------------
    # Phase 1: domain knowledge
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 1: Discovering domain knowledge and business capabilities")
    knowledge = ctx.task(
        domain_knowledge_discovery_task,
        {
            "projectName": project,
            "domainDescription": params.domain_description,
            "stakeholders": params.stakeholders,
            "existingArchitecture": params.existing_architecture,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(knowledge.artifacts)

    if len(knowledge.business_capabilities) < DDD_MIN_BUSINESS_CAPABILITIES:
        return error_result(
            SLUG,
            start,
            "Insufficient business capabilities identified. Strategic modeling requires at "
            f"least {DDD_MIN_BUSINESS_CAPABILITIES} distinct business capabilities.",
            "domain-knowledge-discovery",
            artifacts,
            recommendation="Conduct additional domain expert interviews or event storming sessions",
            domain_knowledge=dump(knowledge),
        )

    # ------------------------------------------------------------------
    # Phase 2: subdomains
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 2: Classifying subdomains into Core, Supporting, and Generic")
    classification = ctx.task(
        subdomain_classification_task,
        {
            "projectName": project,
            "domainKnowledge": knowledge,
            "businessCapabilities": knowledge.business_capabilities,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(classification.artifacts)

    core = classification.of_type("core")
    supporting = classification.of_type("supporting")
    generic = classification.of_type("generic")

    if not core:
        return error_result(
            SLUG,
            start,
            "No core subdomains identified. Every system must have at least one core domain "
            "that provides competitive advantage.",
            "subdomain-classification",
            artifacts,
            recommendation="Re-evaluate business capabilities to identify core differentiators",
            subdomain_classification=dump(classification),
        )

    ctx.breakpoint(
        question=(
            f"Subdomain classification complete. Identified {len(core)} core domain(s), "
            f"{len(supporting)} supporting domain(s), and {len(generic)} generic domain(s). "
            "Core domains receive highest investment. Approve classification?"
        ),
        title="Subdomain Classification Review",
        context={
            "projectName": project,
            "subdomains": dump(classification.subdomains),
            "coreCount": len(core),
            "recommendations": dump(classification.recommendations),
        },
        artifacts=artifacts,
    )

    # ------------------------------------------------------------------
    # Phases 3-5: bounded contexts, language, context map
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 3: Identifying bounded contexts and their boundaries")
    bounded = ctx.task(
        bounded_context_identification_task,
        {
            "projectName": project,
            "domainKnowledge": knowledge,
            "subdomainClassification": classification,
            "teamStructure": params.team_structure,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(bounded.artifacts)
    contexts = bounded.contexts

    ctx.log("info", "Phase 4: Defining ubiquitous language per bounded context")
    language = ctx.task(
        ubiquitous_language_task,
        {
            "projectName": project,
            "boundedContexts": contexts,
            "domainKnowledge": knowledge,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(language.artifacts)

    ctx.log("info", "Phase 5: Mapping context relationships and integration patterns")
    context_map = ctx.task(
        context_mapping_task,
        {
            "projectName": project,
            "boundedContexts": contexts,
            "subdomainClassification": classification,
            "domainKnowledge": knowledge,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(context_map.artifacts)

    ctx.breakpoint(
        question=(
            f"Bounded contexts and context map complete. Identified {len(contexts)} bounded "
            f"context(s) with {len(context_map.relationships)} relationship(s). Context mapping "
            f"patterns include: {', '.join(context_map.strategic_patterns)}. "
            "Review strategic model?"
        ),
        title="Strategic Model Review",
        context={
            "projectName": project,
            "boundedContexts": dump(contexts),
            "relationships": dump(context_map.relationships),
            "strategicPatterns": context_map.strategic_patterns,
        },
        artifacts=artifacts,
    )

    # ------------------------------------------------------------------
    # Phase 6: aggregates per bounded context
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 6: Identifying aggregates and consistency boundaries")
    aggregate_thunks = []
    for bounded_context in contexts:
        args = {
            "projectName": project,
            "boundedContext": bounded_context,
            "ubiquitousLanguage": language.terms_for(bounded_context.name),
            "domainKnowledge": knowledge,
            "outputDir": output_dir,
        }
        aggregate_thunks.append(lambda args=args: ctx.task(aggregate_identification_task, args))
    aggregate_analysis = ctx.parallel_all(aggregate_thunks)
    for analysis in aggregate_analysis:
        artifacts.extend(analysis.artifacts)

    # ------------------------------------------------------------------
    # Phases 7-11: events, teams, ACLs, shared kernels, integration
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 7: Identifying domain events and event flows")
    events = ctx.task(
        domain_event_identification_task,
        {
            "projectName": project,
            "boundedContexts": contexts,
            "aggregateAnalysis": aggregate_analysis,
            "contextMapping": context_map,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(events.artifacts)

    ctx.log("info", "Phase 8: Aligning team structure with bounded contexts (Conway's Law)")
    teams = ctx.task(
        team_topology_alignment_task,
        {
            "projectName": project,
            "boundedContexts": contexts,
            "subdomainClassification": classification,
            "teamStructure": params.team_structure,
            "contextMapping": context_map,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(teams.artifacts)

    ctx.log("info", "Phase 9: Designing anti-corruption layers for external integrations")
    acl = ctx.task(
        anti_corruption_layer_task,
        {
            "projectName": project,
            "boundedContexts": contexts,
            "contextMapping": context_map,
            "existingArchitecture": params.existing_architecture,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(acl.artifacts)

    ctx.log("info", "Phase 10: Identifying shared kernels and published languages")
    shared_kernels = ctx.task(
        shared_kernel_task,
        {
            "projectName": project,
            "boundedContexts": contexts,
            "contextMapping": context_map,
            "ubiquitousLanguage": language,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(shared_kernels.artifacts)

    ctx.log("info", "Phase 11: Defining integration strategies between bounded contexts")
    integration = ctx.task(
        integration_strategy_task,
        {
            "projectName": project,
            "contextMapping": context_map,
            "boundedContexts": contexts,
            "domainEvents": events,
            "aclDesign": acl,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(integration.artifacts)

    # ------------------------------------------------------------------
    # Phase 12: validation
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 12: Validating strategic model consistency and completeness")
    validation = ctx.task(
        strategic_model_validation_task,
        {
            "projectName": project,
            "domainKnowledge": knowledge,
            "subdomainClassification": classification,
            "boundedContexts": contexts,
            "contextMapping": context_map,
            "ubiquitousLanguage": language,
            "aggregateAnalysis": aggregate_analysis,
            "domainEvents": events,
            "teamAlignment": teams,
            "aclDesign": acl,
            "integrationStrategy": integration,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(validation.artifacts)

    critical_issues = validation.critical_issues()
    if critical_issues:
        ctx.breakpoint(
            question=(
                f"Strategic model validation found {len(critical_issues)} critical issue(s). "
                "These must be resolved before proceeding. Review validation results?"
            ),
            title="Critical Validation Issues",
            context={
                "projectName": project,
                "criticalIssues": dump(critical_issues),
                "recommendation": "Address critical issues before finalizing strategic model",
            },
        )

    # ------------------------------------------------------------------
    # Phase 13: quality score
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 13: Scoring strategic design quality and alignment")
    quality = ctx.task(
        strategic_quality_scoring_task,
        {
            "projectName": project,
            "domainKnowledge": knowledge,
            "subdomainClassification": classification,
            "boundedContexts": contexts,
            "contextMapping": context_map,
            "ubiquitousLanguage": language,
            "teamAlignment": teams,
            "modelValidation": validation,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(quality.artifacts)

    overall_score = quality.overall_score
    quality_met = overall_score >= DDD_QUALITY_THRESHOLD

    # ------------------------------------------------------------------
    # Phases 14-15: ADRs and strategy document
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 14: Generating Architecture Decision Records for strategic choices")
    adrs = ctx.task(
        adr_generation_task,
        {
            "projectName": project,
            "subdomainClassification": classification,
            "boundedContexts": contexts,
            "contextMapping": context_map,
            "teamAlignment": teams,
            "integrationStrategy": integration,
            "qualityScore": quality,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(adrs.artifacts)

    ctx.log("info", "Phase 15: Generating comprehensive strategic DDD documentation")
    document = ctx.task(
        strategy_documentation_task,
        {
            "projectName": project,
            "domainKnowledge": knowledge,
            "subdomainClassification": classification,
            "boundedContexts": contexts,
            "ubiquitousLanguage": language,
            "contextMapping": context_map,
            "aggregateAnalysis": aggregate_analysis,
            "domainEvents": events,
            "teamAlignment": teams,
            "aclDesign": acl,
            "sharedKernelAnalysis": shared_kernels,
            "integrationStrategy": integration,
            "modelValidation": validation,
            "qualityScore": quality,
            "adrGeneration": adrs,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(document.artifacts)

    verdict = (
        "Strategic model meets quality standards!"
        if quality_met
        else "Strategic model may need refinement."
    )
    ctx.breakpoint(
        question=(
            f"DDD Strategic Modeling complete for {project}. Overall quality score: "
            f"{overall_score:g}/100. {verdict} Total bounded contexts: {len(contexts)}. "
            f"Core subdomains: {len(core)}. Strategic patterns identified: "
            f"{len(context_map.strategic_patterns)}. Approve strategic model for tactical design?"
        ),
        title="Strategic Model Approval",
        context={
            "projectName": project,
            "overallScore": overall_score,
            "qualityMet": quality_met,
            "boundedContextCount": len(contexts),
            "coreSubdomainCount": len(core),
            "strategicPatternCount": len(context_map.strategic_patterns),
            "teamCount": len(teams.teams),
            "summary": {
                "boundedContexts": len(contexts),
                "coreSubdomains": len(core),
                "supportingSubdomains": len(supporting),
                "genericSubdomains": len(generic),
                "contextRelationships": len(context_map.relationships),
                "strategicPatterns": len(context_map.strategic_patterns),
                "teams": len(teams.teams),
                "qualityScore": overall_score,
            },
        },
        artifacts=artifacts,
    )

    aggregates_by_context: dict[str, list[Aggregate]] = {}
    for analysis in aggregate_analysis:
        aggregates_by_context.setdefault(analysis.context_name, analysis.aggregates)
    end = ctx.now()

    return {
        "success": True,
        "project_name": project,
        "quality_score": overall_score,
        "quality_met": quality_met,
        "strategic_model": {
            "domain_knowledge": {
                "business_capabilities": dump(knowledge.business_capabilities),
                "domain_complexity": knowledge.complexity,
                "stakeholders": knowledge.stakeholders,
            },
            "subdomain_classification": {
                "core": dump(core),
                "supporting": dump(supporting),
                "generic": dump(generic),
                "investment_recommendations": dump(classification.recommendations),
            },
            "bounded_contexts": [
                {
                    "name": bc.name,
                    "type": bc.type,
                    "responsibility": bc.responsibility,
                    "capabilities": bc.capabilities,
                    "aggregates": dump(aggregates_by_context.get(bc.name, [])),
                    "team_ownership": teams.owner_of(bc.name),
                }
                for bc in contexts
            ],
            "context_mapping": {
                "relationships": dump(context_map.relationships),
                "strategic_patterns": context_map.strategic_patterns,
                "integration_points": context_map.integration_points,
            },
            "ubiquitous_language": {
                "glossary": dump(language.glossary),
                "context_specific_terms": language.context_specific_terms,
                "conflicting_terms": language.conflicting_terms,
            },
            "domain_events": {
                "events": dump(events.events),
                "event_flow": events.event_flow,
                "publish_subscribe_patterns": events.publish_subscribe_patterns,
            },
        },
        "bounded_contexts": dump(contexts),
        "context_map": {
            "relationships": dump(context_map.relationships),
            "strategic_patterns": context_map.strategic_patterns,
            "diagram": context_map.diagram_path,
        },
        "team_alignment": {
            "teams": dump(teams.teams),
            "context_ownership": dump(teams.context_ownership),
            "conways_law_alignment": teams.conways_law_alignment,
            "recommendations": teams.recommendations,
        },
        "integration_strategy": {
            "patterns": integration.patterns,
            "anti_corruption_layers": dump(acl.layers),
            "shared_kernels": dump(shared_kernels.shared_kernels),
            "published_languages": shared_kernels.published_languages,
        },
        "validation": {
            "valid": validation.valid,
            "issues": dump(validation.issues),
            "completeness": validation.completeness,
            "recommendations": validation.recommendations,
        },
        "adrs": dump(adrs.adrs),
        "strategy_document": document.document_path,
        "artifacts": dump_artifacts(artifacts),
        "duration": elapsed_seconds(start, end),
        "metadata": metadata(
            SLUG,
            start,
            project_name=project,
            output_dir=output_dir,
            version=VERSION,
            category="Advanced Architecture",
            specialization_slug="software-architecture",
        ),
    }
