"""ADR documentation process.

Takes an architectural decision from analysis through alternatives
research, numbering, drafting, quality scoring, review and publication,
and keeps the ADR index up to date.
"""

from typing import Any

from archsitter.config import ADR_QUALITY_THRESHOLD
from archsitter.processes.common import dump_artifacts, elapsed_seconds, metadata, parse_inputs
from archsitter.runtime.context import ProcessContext

from .models import AdrDocumentationInputs
from .tasks import (
    adr_drafting_task,
    adr_index_update_task,
    adr_numbering_task,
    adr_publishing_task,
    adr_quality_scoring_task,
    adr_review_task,
    adr_revision_task,
    alternatives_research_task,
    decision_analysis_task,
)

SLUG = "adr-documentation"


def process(
    inputs: dict[str, Any] | AdrDocumentationInputs, ctx: ProcessContext
) -> dict[str, Any]:
    params = parse_inputs(AdrDocumentationInputs, inputs)
    output_dir = params.output_dir
    start = ctx.now()
    artifacts = []

    ctx.log("info", "Starting ADR Documentation Process")

    # ------------------------------------------------------------------
    # Phase 1: decision need and scope
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 1: Identifying decision need and scope")
    analysis = ctx.task(
        decision_analysis_task,
        {
            "decision": params.decision,
            "context": params.context,
            "stakeholders": params.stakeholders,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(analysis.artifacts)

    if not analysis.warrants_adr:
        ctx.log("warn", "Decision does not warrant ADR - recommend alternative documentation")
        return {
            "success": False,
            "reason": "Decision does not warrant ADR",
            "recommendation": analysis.recommendation,
            "alternative_documentation": analysis.alternative_documentation,
            "artifacts": dump_artifacts(artifacts),
            "metadata": metadata(SLUG, start),
        }

    decision = analysis.refined_decision or params.decision

    # ------------------------------------------------------------------
    # Phase 2: alternatives
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 2: Researching decision alternatives")
    research = ctx.task(
        alternatives_research_task,
        {
            "decision": decision,
            "context": params.context,
            "constraints": params.context.get("constraints", {}),
            "requirements": params.context.get("requirements", {}),
            "outputDir": output_dir,
        },
    )
    artifacts.extend(research.artifacts)

    # ------------------------------------------------------------------
    # Phase 3: number
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 3: Assigning ADR number")
    numbering = ctx.task(
        adr_numbering_task,
        {"proposedNumber": params.adr_number, "outputDir": output_dir, "decision": decision},
    )
    adr_number = numbering.adr_number
    artifacts.extend(numbering.artifacts)

    # ------------------------------------------------------------------
    # Phase 4: draft
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 4: Drafting ADR document")
    draft = ctx.task(
        adr_drafting_task,
        {
            "adrNumber": adr_number,
            "decision": decision,
            "context": params.context,
            "alternatives": research.alternatives,
            "chosenOption": research.recommended_option,
            "consequences": research.consequences,
            "relatedAdrs": params.related_adrs,
            "template": params.template,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(draft.artifacts)

    # ------------------------------------------------------------------
    # Phase 5: quality scoring
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 5: Evaluating ADR quality")
    quality = ctx.task(
        adr_quality_scoring_task,
        {
            "adrNumber": adr_number,
            "adrDocument": draft.adr_document,
            "decision": decision,
            "alternatives": research.alternatives,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(quality.artifacts)

    quality_met = quality.overall_score >= ADR_QUALITY_THRESHOLD
    verdict = (
        "Quality meets standards!" if quality_met else "Quality below threshold, review recommended."
    )
    ctx.breakpoint(
        question=(
            f"ADR {adr_number} draft complete. Quality score: {quality.overall_score:g}/100. "
            f"{verdict} Review draft?"
        ),
        title="ADR Draft Review",
        context={
            "summary": {
                "adrNumber": adr_number,
                "decision": decision,
                "qualityScore": quality.overall_score,
                "qualityMet": quality_met,
                "alternativesConsidered": len(research.alternatives),
                "consequencesDocumented": len(research.consequences.positive)
                + len(research.consequences.negative),
            }
        },
        artifacts=artifacts,
    )

    # ------------------------------------------------------------------
    # Phase 6: review and approval
    # ------------------------------------------------------------------
    final_document = draft.adr_document
    review = None

    if params.require_approval:
        ctx.log("info", "Phase 6: Conducting review and approval")
        review = ctx.task(
            adr_review_task,
            {
                "adrNumber": adr_number,
                "adrDocument": draft.adr_document,
                "stakeholders": params.stakeholders,
                "qualityScore": quality,
                "outputDir": output_dir,
            },
        )
        artifacts.extend(review.artifacts)

        outcome = "Approved by reviewers!" if review.approved else "Requires revisions."
        ctx.breakpoint(
            question=f"ADR {adr_number} review complete. {outcome} Proceed with publication?",
            title="ADR Approval Gate",
            context={
                "summary": {
                    "adrNumber": adr_number,
                    "approved": review.approved,
                    "reviewersCount": len(review.reviewers),
                    "feedbackItems": len(review.feedback),
                    "revisionsNeeded": review.revisions_needed,
                }
            },
            artifacts=artifacts,
        )

        if review.revisions_needed and review.approved:
            ctx.log("info", "Incorporating review feedback")
            revision = ctx.task(
                adr_revision_task,
                {
                    "adrNumber": adr_number,
                    "adrDocument": draft.adr_document,
                    "feedback": review.feedback,
                    "outputDir": output_dir,
                },
            )
            final_document = revision.adr_document
            artifacts.extend(revision.artifacts)

    # ------------------------------------------------------------------
    # Phase 7: publish
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 7: Publishing ADR")
    publication = ctx.task(
        adr_publishing_task,
        {
            "adrNumber": adr_number,
            "adrDocument": final_document,
            "relatedAdrs": params.related_adrs,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(publication.artifacts)

    # ------------------------------------------------------------------
    # Phase 8: index and links
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 8: Updating ADR index and related links")
    index_update = ctx.task(
        adr_index_update_task,
        {
            "adrNumber": adr_number,
            "decision": decision,
            "status": "Accepted",
            "relatedAdrs": params.related_adrs,
            "tags": params.context.get("tags", []),
            "outputDir": output_dir,
        },
    )
    artifacts.extend(index_update.artifacts)

    end = ctx.now()

    return {
        "success": True,
        "adr_number": adr_number,
        "decision": decision,
        "status": "Accepted",
        "adr_document": publication.published_path,
        "quality_score": quality.overall_score,
        "approved": review.approved if review is not None else True,
        "alternatives": {
            "total": len(research.alternatives),
            "chosen": research.recommended_option,
        },
        "consequences": {
            "positive": len(research.consequences.positive),
            "negative": len(research.consequences.negative),
            "neutral": len(research.consequences.neutral),
        },
        "related_adrs": len(params.related_adrs),
        "artifacts": dump_artifacts(artifacts),
        "duration": elapsed_seconds(start, end),
        "metadata": metadata(SLUG, start, output_dir=output_dir, template=params.template),
    }
