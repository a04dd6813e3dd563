"""Tests for the technology stack evaluation process."""

import pytest

from archsitter.processes.tech_stack_evaluation import process
from archsitter.processes.tech_stack_evaluation.models import EvaluationCriteria


def _research(args):
    return {
        "candidateName": args["candidate"].name,
        "researchFindings": {"maturity": "high"},
        "sources": [{"title": "docs"}],
    }


def _poc(args):
    return {
        "candidateName": args["candidate"].name,
        "implementationTime": {"total": "2 days"},
        "performanceMetrics": {"p95": "12ms"},
        "developerExperience": {"overallExperience": 8},
    }


@pytest.fixture
def responses():
    return {
        "define-requirements": {
            "functionalRequirements": [{"requirement": "pub/sub", "priority": "must-have"}],
            "nonFunctionalRequirements": {"throughput": {"target": "50k msg/s"}},
            "constraints": {"license": "OSS"},
            "requirementsScore": 85,
        },
        "identify-candidates": {
            "longList": [{"name": "Kafka"}, {"name": "RabbitMQ"}, {"name": "NATS"}, {"name": "ZeroMQ"}],
            "shortlist": [{"name": "Kafka"}, {"name": "RabbitMQ"}, {"name": "NATS"}],
            "filteringCriteria": [{"criterion": "managed offering"}],
        },
        "define-evaluation-criteria": {
            "criteria": [
                {"category": "performance", "criterion": "throughput", "weight": 0.5},
                {"category": "operations", "criterion": "operability", "weight": 0.5},
            ],
            "totalWeight": 1.0,
            "scoringScale": {"min": 0, "max": 10},
            "pocScope": {"description": "publish and consume 1M messages"},
        },
        "research-candidate": _research,
        "build-poc": _poc,
        "score-and-compare": {
            "rankedCandidates": [
                {"rank": 1, "name": "Kafka", "totalScore": 88},
                {"rank": 2, "name": "NATS", "totalScore": 81},
                {"rank": 3, "name": "RabbitMQ", "totalScore": 74},
            ],
            "comparisonMatrix": {"Kafka": {"throughput": 9}},
            "topRecommendation": {"name": "Kafka", "totalScore": 88, "confidence": "high"},
        },
        "assess-risks": {
            "risks": [
                {
                    "description": "operational complexity",
                    "severity": "critical",
                    "mitigationPlan": "use managed service",
                },
                {"description": "skills gap", "severity": "medium"},
            ],
            "overallRiskAssessment": {"level": "medium"},
        },
        "make-recommendation": {
            "selectedTechnology": "Kafka",
            "totalScore": 88,
            "justification": {"summary": "best throughput"},
            "confidence": "high",
            "alternativesConsidered": [{"name": "NATS", "reason": "smaller ecosystem"}],
        },
        "create-adr": {
            "adrNumber": 7,
            "adrPath": "docs/adr/0007-use-kafka.md",
            "status": "proposed",
            "adrDocument": "# 7. Use Kafka",
            "relatedADRs": [{"number": 3}],
        },
        "create-onboarding-plan": {
            "learningResources": [{"title": "Kafka: The Definitive Guide"}],
            "phases": [{"phase": "foundations", "duration": "2 weeks"}],
            "trainingRequired": True,
            "estimatedDuration": "6 weeks",
            "estimatedCost": "$15k",
        },
    }


@pytest.fixture
def inputs():
    return {
        "projectName": "Event Backbone",
        "technologyCategory": "Message Broker",
        "constraints": {"teamSkills": ["java", "python"]},
    }


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


class TestTechStackFlow:
    def test_completes_with_recommendation(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        assert result["success"] is True
        assert result["recommendation"]["selected_technology"] == "Kafka"
        assert result["recommendation"]["confidence"] == "high"
        assert ctx.breakpoint_titles() == [
            "Requirements Review",
            "Evaluation Criteria Review",
            "PoC Review",
            "Scoring and Risk Review",
            "Final Recommendation Approval",
        ]

    def test_research_and_poc_per_candidate(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        process(inputs, ctx)

        for task_name in ("research-candidate", "build-poc"):
            calls = ctx.calls_for(task_name)
            assert sorted((c.args["candidateIndex"], c.args["candidate"].name) for c in calls) == [
                (1, "Kafka"),
                (2, "RabbitMQ"),
                (3, "NATS"),
            ]

    def test_poc_review_files_follow_shortlist_order(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        process(inputs, ctx)

        poc_review = next(b for b in ctx.breakpoints if b.title == "PoC Review")
        assert [f["path"] for f in poc_review.context["files"]] == [
            "tech-stack-evaluation-output/phase5-poc-1-Kafka.md",
            "tech-stack-evaluation-output/phase5-poc-2-RabbitMQ.md",
            "tech-stack-evaluation-output/phase5-poc-3-NATS.md",
        ]

    def test_onboarding_gets_team_skills(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        process(inputs, ctx)

        assert ctx.calls_for("create-onboarding-plan")[0].args["team"] == ["java", "python"]

    def test_evaluation_report_adr_and_onboarding(self, make_ctx, responses, inputs):
        result = process(inputs, make_ctx(responses))

        report = result["evaluation_report"]
        assert report["candidates_evaluated"] == 3
        assert [c["name"] for c in report["top_three_candidates"]] == ["Kafka", "NATS", "RabbitMQ"]
        assert report["risks_identified"] == 2
        assert report["critical_risks"] == 1
        assert result["adr"] == {
            "adr_number": 7,
            "adr_path": "docs/adr/0007-use-kafka.md",
            "status": "proposed",
        }
        assert result["onboarding_plan"]["estimated_duration"] == "6 weeks"
        assert result["onboarding_plan"]["training_required"] is True

    def test_artifact_paths(self, make_ctx, responses, inputs):
        result = process({**inputs, "outputDir": "out"}, make_ctx(responses))

        artifacts = result["artifacts"]
        assert artifacts[0] == "out/phase1-requirements.json"
        assert "out/phase5-poc-2-RabbitMQ.md" in artifacts
        assert artifacts[-1] == "out/phase10-onboarding-plan.md"
        assert len(artifacts) == 14


# ---------------------------------------------------------------------------
# Gates
# ---------------------------------------------------------------------------


class TestTechStackGates:
    @pytest.mark.parametrize(("score", "shown"), [(None, "None"), (69, "69.0")])
    def test_weak_requirements(self, make_ctx, responses, inputs, score, shown):
        responses["define-requirements"]["requirementsScore"] = score
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        assert result["success"] is False
        assert result["phase"] == "requirements-definition"
        assert result["error"] == f"Requirements are insufficiently defined. Score: {shown}"
        assert ctx.task_names() == ["define-requirements"]

    def test_threshold_score_passes(self, make_ctx, responses, inputs):
        responses["define-requirements"]["requirementsScore"] = 70

        result = process(inputs, make_ctx(responses))

        assert result["success"] is True

    def test_short_shortlist_warns(self, make_ctx, responses, inputs):
        responses["identify-candidates"]["shortlist"] = [{"name": "Kafka"}, {"name": "NATS"}]
        ctx = make_ctx(responses)

        process(inputs, ctx)

        assert "Insufficient Candidates Warning" in ctx.breakpoint_titles()
        assert len(ctx.calls_for("build-poc")) == 2

    def test_unmitigated_critical_risk(self, make_ctx, responses, inputs):
        responses["assess-risks"]["risks"].append(
            {"description": "license change", "severity": "critical"}
        )
        ctx = make_ctx(responses)

        process(inputs, ctx)

        warning = next(b for b in ctx.breakpoints if b.title == "Critical Risk Warning")
        assert [r["description"] for r in warning.context["criticalRisks"]] == ["license change"]


class TestEvaluationCriteriaCount:
    def _criteria(self, **extra):
        return EvaluationCriteria(
            criteria=[{"category": "perf", "criterion": "latency", "weight": 1.0}],
            totalWeight=1.0,
            scoringScale={"min": 0, "max": 10},
            pocScope={"description": "spike"},
            **extra,
        )

    def test_defaults_to_number_of_criteria(self):
        assert self._criteria().count == 1

    def test_reported_count_wins(self):
        assert self._criteria(criteriaCount=12).count == 12
