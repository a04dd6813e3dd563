"""Tests for the ADR documentation process."""

import pytest

from archsitter.processes.adr_documentation import process
from archsitter.runtime.context import BreakpointResponse
from archsitter.runtime.errors import ProcessHalted


@pytest.fixture
def responses(md):
    return {
        "decision-analysis": {
            "warrantsAdr": True,
            "refinedDecision": "Adopt PostgreSQL as the primary datastore",
            "scope": {"impactLevel": "high", "reversibility": "difficult"},
            "artifacts": [md("adr-output/decision-analysis.md")],
        },
        "alternatives-research": {
            "alternatives": [
                {"name": "PostgreSQL", "pros": ["mature"], "cons": ["ops"]},
                {"name": "MongoDB", "pros": ["flexible"], "cons": ["consistency"]},
            ],
            "recommendedOption": "PostgreSQL",
            "consequences": {
                "positive": ["ACID transactions", "rich ecosystem"],
                "negative": ["schema migrations"],
                "neutral": [],
            },
            "artifacts": [md("adr-output/alternatives.md")],
        },
        "adr-numbering": {
            "adrNumber": "0016",
            "filename": "0016-adopt-postgresql.md",
            "slug": "adopt-postgresql",
            "artifacts": [],
        },
        "adr-drafting": {
            "adrDocument": "# 16. Adopt PostgreSQL\n\n## Status\nProposed\n",
            "metadata": {"number": "0016", "status": "Proposed"},
            "artifacts": [md("adr-output/0016-adopt-postgresql.md")],
        },
        "adr-quality-scoring": {
            "overallScore": 86,
            "componentScores": {"contextClarity": 90, "decisionClarity": 85},
            "recommendations": ["Link the data retention ADR"],
            "artifacts": [],
        },
        "adr-review": {
            "approved": True,
            "reviewers": ["alice", "bob"],
            "feedback": [{"reviewer": "alice", "comment": "Add cost notes", "severity": "minor"}],
            "revisionsNeeded": False,
            "artifacts": [],
        },
        "adr-revision": {
            "adrDocument": "# 16. Adopt PostgreSQL (revised)\n",
            "changesApplied": [{"section": "Consequences", "change": "Added cost notes"}],
            "artifacts": [],
        },
        "adr-publishing": {
            "publishedPath": "docs/adr/0016-adopt-postgresql.md",
            "status": "Accepted",
            "publishDate": "2025-01-01",
            "artifacts": [],
        },
        "adr-index-update": {
            "indexPath": "docs/adr/README.md",
            "totalAdrs": 16,
            "artifacts": [md("docs/adr/README.md")],
        },
    }


@pytest.fixture
def inputs():
    return {
        "decision": "Choose a primary database",
        "context": {"tags": ["data"], "constraints": {"budget": "low"}},
        "stakeholders": ["alice", "bob"],
        "relatedAdrs": ["0003", "0009"],
    }


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


class TestAdrHappyPath:
    def test_runs_every_phase_in_order(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        assert result["success"] is True
        assert ctx.task_names() == [
            "decision-analysis",
            "alternatives-research",
            "adr-numbering",
            "adr-drafting",
            "adr-quality-scoring",
            "adr-review",
            "adr-publishing",
            "adr-index-update",
        ]
        assert ctx.breakpoint_titles() == ["ADR Draft Review", "ADR Approval Gate"]

    def test_result_summarizes_the_adr(self, make_ctx, responses, inputs):
        result = process(inputs, make_ctx(responses))

        assert result["adr_number"] == "0016"
        assert result["decision"] == "Adopt PostgreSQL as the primary datastore"
        assert result["status"] == "Accepted"
        assert result["adr_document"] == "docs/adr/0016-adopt-postgresql.md"
        assert result["quality_score"] == 86
        assert result["approved"] is True
        assert result["alternatives"] == {"total": 2, "chosen": "PostgreSQL"}
        assert result["consequences"] == {"positive": 2, "negative": 1, "neutral": 0}
        assert result["related_adrs"] == 2

    def test_collects_artifacts_and_metadata(self, make_ctx, responses, inputs):
        result = process(inputs, make_ctx(responses))

        paths = [artifact["path"] for artifact in result["artifacts"]]
        assert paths == [
            "adr-output/decision-analysis.md",
            "adr-output/alternatives.md",
            "adr-output/0016-adopt-postgresql.md",
            "docs/adr/README.md",
        ]
        assert result["metadata"]["process_id"] == (
            "specializations/software-architecture/adr-documentation"
        )
        assert result["metadata"]["timestamp"] == "2025-01-01T00:00:00+00:00"
        assert result["metadata"]["template"] == "nygard"
        assert result["duration"] == 1.0

    def test_refined_decision_flows_into_later_tasks(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        process(inputs, ctx)

        drafting = ctx.calls_for("adr-drafting")[0]
        assert drafting.args["decision"] == "Adopt PostgreSQL as the primary datastore"
        assert drafting.args["chosenOption"] == "PostgreSQL"
        assert drafting.descriptor["agent"]["prompt"]["context"]["adrNumber"] == "0016"

    def test_draft_review_reports_quality(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        process(inputs, ctx)

        draft_review = ctx.breakpoints[0]
        summary = draft_review.context["summary"]
        assert summary["qualityMet"] is True
        assert summary["alternativesConsidered"] == 2
        assert summary["consequencesDocumented"] == 3
        assert "Quality meets standards!" in draft_review.question


# ---------------------------------------------------------------------------
# Branches
# ---------------------------------------------------------------------------


class TestAdrBranches:
    def test_decision_not_warranting_adr_stops_early(self, make_ctx, md, inputs):
        ctx = make_ctx(
            {
                "decision-analysis": {
                    "warrantsAdr": False,
                    "recommendation": "Document in the team wiki",
                    "alternativeDocumentation": "wiki",
                    "artifacts": [md("adr-output/decision-analysis.md")],
                }
            }
        )

        result = process(inputs, ctx)

        assert result["success"] is False
        assert result["reason"] == "Decision does not warrant ADR"
        assert result["recommendation"] == "Document in the team wiki"
        assert ctx.task_names() == ["decision-analysis"]
        assert ctx.breakpoints == []

    def test_low_quality_is_flagged_in_draft_review(self, make_ctx, responses, inputs):
        responses["adr-quality-scoring"]["overallScore"] = 55
        ctx = make_ctx(responses)

        process(inputs, ctx)

        assert ctx.breakpoints[0].context["summary"]["qualityMet"] is False
        assert "Quality below threshold" in ctx.breakpoints[0].question

    def test_no_approval_skips_review(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        result = process({**inputs, "requireApproval": False}, ctx)

        assert "adr-review" not in ctx.task_names()
        assert ctx.breakpoint_titles() == ["ADR Draft Review"]
        assert result["approved"] is True

    def test_approved_with_revisions_runs_revision(self, make_ctx, responses, inputs):
        responses["adr-review"]["revisionsNeeded"] = True
        ctx = make_ctx(responses)

        process(inputs, ctx)

        assert "adr-revision" in ctx.task_names()
        publishing = ctx.calls_for("adr-publishing")[0]
        assert publishing.args["adrDocument"] == "# 16. Adopt PostgreSQL (revised)\n"

    def test_rejected_review_with_revisions_skips_revision(self, make_ctx, responses, inputs):
        responses["adr-review"].update({"approved": False, "revisionsNeeded": True})
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        assert "adr-revision" not in ctx.task_names()
        assert result["approved"] is False

    def test_rejected_breakpoint_halts(self, make_ctx, responses, inputs):
        ctx = make_ctx(
            responses,
            approvals={"ADR Draft Review": BreakpointResponse(False, "Needs more context")},
        )

        with pytest.raises(ProcessHalted) as exc_info:
            process(inputs, ctx)

        assert exc_info.value.breakpoint_title == "ADR Draft Review"
        assert exc_info.value.feedback == "Needs more context"
        assert "adr-review" not in ctx.task_names()
