"""Tests for the DevOps architecture alignment process."""

import pytest

from archsitter.processes.devops_alignment import process
from archsitter.processes.devops_alignment.models import RollbackDesign
from archsitter.processes.devops_alignment.process import rollback_exceeds_constraint

STAGE_TYPES = ["source-control", "build", "test", "security-scan", "artifact-storage", "deployment"]


@pytest.fixture
def responses(md):
    return {
        "current-state-assessment": {
            "success": True,
            "assessment": {"cicdMaturity": "basic", "automationLevel": 40},
            "gaps": [{"severity": "medium", "area": "testing"}],
            "painPoints": ["manual releases"],
            "artifacts": [md("devops-architecture-output/current-state.md")],
        },
        "cicd-pipeline-design": {
            "architecture": {
                "stages": [{"name": t.title(), "type": t} for t in STAGE_TYPES],
            },
            "automation": {"level": 95},
            "performance": {"estimatedBuildTime": "8 minutes"},
            "tooling": {"ci": "GitHub Actions"},
            "pipelineDiagramPath": "devops-architecture-output/pipeline.md",
            "artifacts": [],
        },
        "deployment-strategy-design": {
            "strategy": {"pattern": "canary", "supportsZeroDowntime": True},
            "environments": [{"name": "staging"}, {"name": "production"}],
            "artifacts": [],
        },
        "feature-flags-design": {
            "design": {"platform": "Unleash"},
            "lifecycle": {"cleanup": "30 days"},
            "artifacts": [],
        },
        "infrastructure-as-code-design": {
            "design": {"tool": "terraform"},
            "environments": [{"name": "production"}],
            "artifacts": [md("devops-architecture-output/iac.md")],
        },
        "rollback-procedures-design": {
            "procedures": {
                "triggers": [{"type": "automated", "condition": "error rate above 2%"}],
                "steps": ["shift traffic back"],
            },
            "estimatedRollbackTime": "3 minutes",
            "artifacts": [],
        },
        "deployment-monitoring-design": {
            "plan": {
                "slis": [
                    {"type": "latency"},
                    {"type": "error-rate"},
                    {"type": "availability"},
                    {"type": "throughput"},
                ],
                "slos": [{"sli": "availability", "target": "99.9%"}],
            },
            "tooling": {"metrics": "Prometheus"},
            "artifacts": [],
        },
        "release-checklist-creation": {
            "checklist": [
                {"phase": "pre-deployment", "items": [{"task": "freeze schema"}]},
                {"phase": "post-deployment", "items": [{"task": "watch dashboards"}]},
            ],
            "artifacts": [],
        },
        "implementation-roadmap": {
            "roadmap": {"quarters": 2},
            "phases": [{"number": 1, "name": "Pipeline"}, {"number": 2, "name": "Canary"}],
            "estimatedDuration": "10 weeks",
            "executiveSummaryPath": "devops-architecture-output/summary.md",
            "artifacts": [],
        },
    }


@pytest.fixture
def inputs():
    return {"projectName": "Storefront", "currentCICD": {"tool": "Jenkins"}}


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


class TestDevopsFlow:
    def test_completes_with_two_reviews(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        assert result["success"] is True
        assert ctx.breakpoint_titles() == [
            "CI/CD Pipeline Architecture Review",
            "Final DevOps Architecture Review",
        ]

    def test_feature_flags_and_iac_both_run(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        process(inputs, ctx)

        assert ctx.calls_for("feature-flags-design")
        assert ctx.calls_for("infrastructure-as-code-design")
        assert ctx.task_names()[-1] == "implementation-roadmap"

    def test_current_cicd_alias_reaches_assessment(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        process(inputs, ctx)

        call = ctx.calls_for("current-state-assessment")[0]
        assert call.args["currentCICD"] == {"tool": "Jenkins"}

    def test_metrics(self, make_ctx, responses, inputs):
        result = process(inputs, make_ctx(responses))

        metrics = result["metrics"]
        assert metrics["pipeline_stages"] == 6
        assert metrics["automation_level"] == 95
        assert metrics["deployment_pattern"] == "canary"
        assert metrics["supports_zero_downtime"] is True
        assert metrics["rollback_time"] == "3 minutes"
        assert metrics["monitoring_slis"] == 4
        assert metrics["release_checklist_items"] == 2
        assert metrics["implementation_phases"] == 2
        assert metrics["total_artifacts"] == 2

    def test_result_sections_and_metadata(self, make_ctx, responses, inputs):
        result = process(inputs, make_ctx(responses))

        assert result["feature_flags"] == {"platform": "Unleash", "flagTypes": []}
        assert result["infrastructure_as_code"]["tool"] == "terraform"
        assert result["implementation_roadmap"] == {"quarters": 2}
        assert result["metadata"]["category"] == "Operational Architecture"
        assert result["metadata"]["completed_at"] == "2025-01-01T00:00:01+00:00"

    def test_final_review_files(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        process(inputs, ctx)

        assert ctx.breakpoints[-1].context["files"] == [
            {
                "path": "devops-architecture-output/summary.md",
                "format": "markdown",
                "label": "Executive Summary",
            }
        ]


# ---------------------------------------------------------------------------
# Gates
# ---------------------------------------------------------------------------


class TestDevopsGates:
    def test_failed_assessment(self, make_ctx, responses, inputs):
        responses["current-state-assessment"]["success"] = False
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        assert result["success"] is False
        assert result["phase"] == "current-state-assessment"
        assert result["details"]["painPoints"] == ["manual releases"]

    def test_critical_gaps(self, make_ctx, responses, inputs):
        responses["current-state-assessment"]["gaps"].append(
            {"severity": "critical", "area": "no automated tests"}
        )
        ctx = make_ctx(responses)

        process(inputs, ctx)

        gate = ctx.breakpoints[0]
        assert gate.title == "Current State Assessment - Critical Gaps Identified"
        assert "no automated tests" in gate.question
        assert gate.context["files"] == [
            {"path": "devops-architecture-output/current-state.md", "format": "markdown"}
        ]

    def test_missing_pipeline_stages(self, make_ctx, responses, inputs):
        stages = responses["cicd-pipeline-design"]["architecture"]["stages"]
        responses["cicd-pipeline-design"]["architecture"]["stages"] = [
            s for s in stages if s["type"] != "security-scan"
        ]
        ctx = make_ctx(responses)

        process(inputs, ctx)

        gate = next(b for b in ctx.breakpoints if b.title == "CI/CD Pipeline Completeness Check")
        assert gate.context["missingStages"] == ["security-scan"]

    def test_zero_downtime_not_supported(self, make_ctx, responses, inputs):
        responses["deployment-strategy-design"]["strategy"] = {
            "pattern": "recreate",
            "supportsZeroDowntime": False,
        }
        ctx = make_ctx(responses)

        process(inputs, ctx)

        assert "Zero-Downtime Requirement Not Met" in ctx.breakpoint_titles()

    def test_downtime_allowed_skips_zero_downtime_gate(self, make_ctx, responses, inputs):
        responses["deployment-strategy-design"]["strategy"] = {
            "pattern": "recreate",
            "supportsZeroDowntime": False,
        }
        ctx = make_ctx(responses)

        process({**inputs, "constraints": {"downtime": "30 minutes"}}, ctx)

        assert "Zero-Downtime Requirement Not Met" not in ctx.breakpoint_titles()

    def test_slow_rollback(self, make_ctx, responses, inputs):
        responses["rollback-procedures-design"]["estimatedRollbackTime"] = "12 minutes"
        ctx = make_ctx(responses)

        process(inputs, ctx)

        gate = next(b for b in ctx.breakpoints if b.title == "Rollback Time Constraint")
        assert gate.context["requiredTime"] == "< 5 minutes"

    def test_missing_slis(self, make_ctx, responses, inputs):
        responses["deployment-monitoring-design"]["plan"]["slis"] = [{"type": "latency"}]
        ctx = make_ctx(responses)

        process(inputs, ctx)

        gate = next(b for b in ctx.breakpoints if b.title == "Monitoring Completeness Check")
        assert gate.context["missingSLIs"] == ["error-rate", "availability", "throughput"]


class TestRollbackExceedsConstraint:
    def _design(self, estimate):
        return RollbackDesign(procedures={}, estimatedRollbackTime=estimate, artifacts=[])

    def test_within_limit(self):
        assert rollback_exceeds_constraint(self._design("3 minutes"), "< 5 minutes") is False

    def test_over_limit(self):
        assert rollback_exceeds_constraint(self._design("7 min"), "< 5 minutes") is True

    def test_units_are_normalized(self):
        assert rollback_exceeds_constraint(self._design("240s"), "< 5 minutes") is False
        assert rollback_exceeds_constraint(self._design("1 hour"), "< 5 minutes") is True

    def test_unparseable_estimate_does_not_trip(self):
        assert rollback_exceeds_constraint(self._design("quick"), "< 5 minutes") is False

    def test_unparseable_constraint_does_not_trip(self):
        assert rollback_exceeds_constraint(self._design("7 minutes"), "asap") is False
