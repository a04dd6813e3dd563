"""Technology stack evaluation process.

Requirements, candidate shortlist, weighted criteria, per-candidate
research and proofs of concept, scoring, risk assessment, a final
recommendation with its ADR and a team onboarding plan.
"""

from typing import Any

from archsitter.config import TECH_STACK_MIN_CANDIDATES, TECH_STACK_REQUIREMENTS_THRESHOLD
from archsitter.processes.common import dump, error_result, metadata, parse_inputs
from archsitter.runtime.context import ProcessContext

from .models import TechStackEvaluationInputs
from .tasks import (
    assess_risks_task,
    build_poc_task,
    create_adr_task,
    create_onboarding_plan_task,
    define_evaluation_criteria_task,
    define_requirements_task,
    identify_candidates_task,
    make_recommendation_task,
    research_candidate_task,
    score_and_compare_task,
)

SLUG = "tech-stack-evaluation"
VERSION = "1.0.0"


def _file(output_dir: str, name: str, fmt: str) -> dict[str, str]:
    return {"path": f"{output_dir}/{name}", "format": fmt}


def _per_candidate(ctx: ProcessContext, task_def, shortlist, base_args: dict[str, Any]) -> list:
    """Run one task per shortlisted candidate in parallel, numbering from 1."""
    thunks = []
    for index, candidate in enumerate(shortlist, start=1):
        args = {**base_args, "candidateIndex": index, "candidate": candidate}
        thunks.append(lambda args=args: ctx.task(task_def, args))
    return ctx.parallel_all(thunks)


def process(
    inputs: dict[str, Any] | TechStackEvaluationInputs, ctx: ProcessContext
) -> dict[str, Any]:
    params = parse_inputs(TechStackEvaluationInputs, inputs)
    project = params.project_name
    category = params.technology_category
    constraints = params.constraints
    output_dir = params.output_dir
    start = ctx.now()

    ctx.log("info", f"Starting Technology Stack Evaluation for {project} ({category})")

    # Phase 1: requirements
    requirements = ctx.task(
        define_requirements_task,
        {
            "projectName": project,
            "requirements": params.requirements,
            "constraints": constraints,
            "technologyCategory": category,
        },
    )

    score = requirements.requirements_score
    if score is None or score < TECH_STACK_REQUIREMENTS_THRESHOLD:
        return error_result(
            SLUG,
            start,
            f"Requirements are insufficiently defined. Score: {score}",
            "requirements-definition",
            recommendation=(
                "Refine requirements with more specific functional and non-functional criteria"
            ),
        )

    ctx.breakpoint(
        question=(
            f"Review technology evaluation requirements for {project}. Category: {category}. "
            f"Requirements score: {score:g}/100. Approve to proceed?"
        ),
        title="Requirements Review",
        context={
            "projectName": project,
            "technologyCategory": category,
            "requirements": dump(requirements),
            "files": [
                _file(output_dir, "phase1-requirements.json", "json"),
                _file(output_dir, "phase1-requirements.md", "markdown"),
            ],
        },
    )

    # Phase 2: candidates
    candidates = ctx.task(
        identify_candidates_task,
        {
            "projectName": project,
            "technologyCategory": category,
            "requirements": requirements,
            "constraints": constraints,
            "initialCandidates": params.candidate_list,
        },
    )
    shortlist = candidates.shortlist

    if len(shortlist) < TECH_STACK_MIN_CANDIDATES:
        ctx.breakpoint(
            question=(
                f"Only {len(shortlist)} candidates identified for {category}. "
                "Should we expand the search or proceed with limited options?"
            ),
            title="Insufficient Candidates Warning",
            context={
                "projectName": project,
                "candidates": dump(shortlist),
                "recommendation": "Expand research to include at least 3-4 viable candidates",
            },
        )

    # Phase 3: evaluation criteria
    criteria = ctx.task(
        define_evaluation_criteria_task,
        {
            "projectName": project,
            "technologyCategory": category,
            "requirements": requirements,
            "constraints": constraints,
            "candidates": shortlist,
        },
    )

    ctx.breakpoint(
        question=(
            f"Review evaluation criteria for {category}. {criteria.count} criteria defined "
            "with weighted scoring. Approve criteria?"
        ),
        title="Evaluation Criteria Review",
        context={
            "projectName": project,
            "criteria": dump(criteria),
            "files": [_file(output_dir, "phase3-evaluation-criteria.json", "json")],
        },
    )

    # Phases 4-5: research and proofs of concept, one task per candidate
    research = _per_candidate(
        ctx,
        research_candidate_task,
        shortlist,
        {
            "projectName": project,
            "technologyCategory": category,
            "evaluationCriteria": criteria,
            "requirements": requirements,
        },
    )
    pocs = _per_candidate(
        ctx,
        build_poc_task,
        shortlist,
        {
            "projectName": project,
            "technologyCategory": category,
            "requirements": requirements,
            "pocScope": criteria.poc_scope,
        },
    )
    poc_files = [
        _file(output_dir, f"phase5-poc-{index}-{poc.candidate_name}.md", "markdown")
        for index, poc in enumerate(pocs, start=1)
    ]

    ctx.breakpoint(
        question=(
            f"Proof of Concepts complete for all {len(shortlist)} candidates. Review "
            "implementations and performance results before scoring?"
        ),
        title="PoC Review",
        context={"projectName": project, "pocResults": dump(pocs), "files": poc_files},
    )

    # Phases 6-7: scoring and risks
    scoring = ctx.task(
        score_and_compare_task,
        {
            "projectName": project,
            "technologyCategory": category,
            "candidates": shortlist,
            "candidateResearch": research,
            "pocResults": pocs,
            "evaluationCriteria": criteria,
        },
    )
    risks = ctx.task(
        assess_risks_task,
        {
            "projectName": project,
            "technologyCategory": category,
            "candidates": shortlist,
            "scoringComparison": scoring,
            "requirements": requirements,
            "constraints": constraints,
        },
    )

    unmitigated = risks.unmitigated_critical_risks()
    if unmitigated:
        ctx.breakpoint(
            question=(
                f"{len(unmitigated)} critical risks identified without mitigation plans. "
                "Should we develop mitigation strategies before proceeding?"
            ),
            title="Critical Risk Warning",
            context={
                "projectName": project,
                "criticalRisks": dump(unmitigated),
                "recommendation": "Develop mitigation strategies for all critical risks",
            },
        )

    top = scoring.top_recommendation
    ctx.breakpoint(
        question=(
            f"Technology evaluation complete. Top recommendation: {top.name} "
            f"(Score: {top.total_score:g}/100). Review comparison matrix and risks?"
        ),
        title="Scoring and Risk Review",
        context={
            "projectName": project,
            "comparison": dump(scoring),
            "risks": dump(risks),
            "files": [
                _file(output_dir, "phase6-comparison-matrix.json", "json"),
                _file(output_dir, "phase6-comparison-report.md", "markdown"),
                _file(output_dir, "phase7-risk-assessment.json", "json"),
            ],
        },
    )

    # Phases 8-10: recommendation, ADR, onboarding
    recommendation = ctx.task(
        make_recommendation_task,
        {
            "projectName": project,
            "technologyCategory": category,
            "scoringComparison": scoring,
            "riskAssessment": risks,
            "requirements": requirements,
            "constraints": constraints,
        },
    )
    adr = ctx.task(
        create_adr_task,
        {
            "projectName": project,
            "technologyCategory": category,
            "recommendation": recommendation,
            "candidates": shortlist,
            "scoringComparison": scoring,
            "riskAssessment": risks,
            "requirements": requirements,
        },
    )
    onboarding = ctx.task(
        create_onboarding_plan_task,
        {
            "projectName": project,
            "technologyCategory": category,
            "recommendation": recommendation,
            "constraints": constraints,
            "team": constraints.get("teamSkills") or [],
        },
    )

    final_files = [
        _file(output_dir, "phase8-final-recommendation.json", "json"),
        _file(output_dir, "phase8-final-recommendation.md", "markdown"),
        _file(output_dir, "phase9-adr.md", "markdown"),
        _file(output_dir, "phase10-onboarding-plan.md", "markdown"),
    ]
    ctx.breakpoint(
        question=(
            f"Technology Stack Evaluation complete for {project}. Recommendation: "
            f"{recommendation.selected_technology}. ADR created. Onboarding plan ready. "
            "Approve final recommendation?"
        ),
        title="Final Recommendation Approval",
        context={
            "projectName": project,
            "recommendation": dump(recommendation),
            "estimatedOnboardingTime": onboarding.estimated_duration,
            "estimatedCost": onboarding.estimated_cost,
            "files": final_files,
        },
    )

    artifact_paths = [
        f"{output_dir}/phase1-requirements.json",
        f"{output_dir}/phase1-requirements.md",
        f"{output_dir}/phase2-candidates.json",
        f"{output_dir}/phase3-evaluation-criteria.json",
        *(f["path"] for f in poc_files),
        f"{output_dir}/phase6-comparison-matrix.json",
        f"{output_dir}/phase6-comparison-report.md",
        f"{output_dir}/phase7-risk-assessment.json",
        *(f["path"] for f in final_files),
    ]

    return {
        "success": True,
        "project_name": project,
        "technology_category": category,
        "recommendation": {
            "selected_technology": recommendation.selected_technology,
            "justification": recommendation.justification,
            "total_score": recommendation.total_score,
            "confidence": recommendation.confidence,
            "alternatives_considered": recommendation.alternatives_considered,
        },
        "evaluation_report": {
            "requirements": dump(requirements),
            "candidates_evaluated": len(shortlist),
            "scoring_matrix": scoring.comparison_matrix,
            "top_three_candidates": dump(scoring.ranked_candidates[:3]),
            "risks_identified": len(risks.risks),
            "critical_risks": len(risks.critical()),
        },
        "adr": {"adr_number": adr.adr_number, "adr_path": adr.adr_path, "status": adr.status},
        "onboarding_plan": {
            "estimated_duration": onboarding.estimated_duration,
            "estimated_cost": onboarding.estimated_cost,
            "phases": dump(onboarding.phases),
            "training_required": onboarding.training_required,
        },
        "artifacts": artifact_paths,
        "metadata": metadata(SLUG, start, version=VERSION),
    }
