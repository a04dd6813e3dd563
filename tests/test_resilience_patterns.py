"""Tests for the resilience patterns process."""

import pytest

from archsitter.processes.resilience_patterns import process
from archsitter.processes.resilience_patterns.models import ChaosTestResults


def _failure_point(fp_id, component, pattern, severity="critical"):
    return {
        "id": fp_id,
        "component": component,
        "type": "dependency",
        "severity": severity,
        "impact": "checkout unavailable",
        "likelihood": "medium",
        "recommendedPattern": pattern,
    }


@pytest.fixture
def responses(md):
    return {
        "failure-point-analysis": {
            "failurePoints": [
                _failure_point("FP-1", "payments", "circuit-breaker"),
                _failure_point("FP-2", "inventory", "retry", severity="high"),
            ],
            "criticalCount": 1,
            "highCount": 1,
            "artifacts": [md("resilience-output/failure-analysis.md")],
        },
        "resilience-pattern-selection": {
            "patterns": ["circuit-breaker", "retry"],
            "circuitBreakerConfig": {"failureThreshold": 0.5},
            "retryPolicies": {"default": {"maxRetries": 3}},
            "chaosScenarios": ["kill payments pod"],
            "artifacts": [],
        },
        "circuit-breaker-design": {
            "implemented": True,
            "circuitBreakers": [
                {"name": "payments-cb", "component": "payments", "failureThreshold": 0.5, "timeout": 30}
            ],
            "artifacts": [md("resilience-output/circuit-breakers.md")],
        },
        "retry-logic-configuration": {
            "implemented": True,
            "retryPolicies": [
                {
                    "name": "inventory-retry",
                    "component": "inventory",
                    "maxRetries": 3,
                    "backoffStrategy": "exponential",
                }
            ],
            "artifacts": [md("resilience-output/retry-policies.md")],
        },
        "pattern-integration": {
            "integrated": True,
            "testResults": {"totalTests": 12, "passedTests": 12, "failedTests": 0},
            "artifacts": [],
        },
        "chaos-engineering-test": {
            "totalTests": 4,
            "passedTests": 3,
            "failedTests": 1,
            "failures": [{"test": "latency injection", "pattern": "retry"}],
            "artifacts": [md("resilience-output/chaos-test-report.md")],
        },
        "auto-remediation": {
            "remediated": True,
            "changes": [{"pattern": "retry", "parameter": "maxRetries", "oldValue": 3, "newValue": 5}],
            "artifacts": [],
        },
        "monitoring-setup": {
            "configured": True,
            "dashboards": [{"name": "Resilience"}],
            "alerts": [{"name": "circuit-open", "severity": "critical"}],
            "artifacts": [],
        },
        "resilience-validation": {
            "resilienceScore": 82,
            "improvement": "+35%",
            "artifacts": [],
        },
        "resilience-documentation": {
            "documents": [{"title": "Resilience guide", "path": "resilience-output/guide.md"}],
            "runbooks": [{"title": "Circuit open", "pattern": "circuit-breaker"}],
            "monitoringDashboards": ["grafana/resilience"],
            "artifacts": [md("resilience-output/guide.md")],
        },
    }


@pytest.fixture
def inputs():
    return {
        "system": "checkout",
        "components": ["payments", "inventory"],
        "slas": {"availability": "99.9%"},
    }


# ---------------------------------------------------------------------------
# Process flow
# ---------------------------------------------------------------------------


class TestResilienceFlow:
    def test_implements_only_selected_patterns(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        assert result["success"] is True
        assert result["patterns_implemented"] == ["circuitBreakers", "retryLogic"]
        names = ctx.task_names()
        assert "bulkhead-implementation" not in names
        assert "timeout-configuration" not in names
        assert "rate-limiting-implementation" not in names
        assert "fallback-implementation" not in names

    def test_pattern_tasks_get_their_failure_points(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        process(inputs, ctx)

        cb_call = ctx.calls_for("circuit-breaker-design")[0]
        assert [fp.id for fp in cb_call.args["failurePoints"]] == ["FP-1"]
        assert cb_call.args["slas"] == {"availability": "99.9%"}
        assert cb_call.args["configuration"] == {"failureThreshold": 0.5}

    def test_result_fields(self, make_ctx, responses, inputs):
        result = process(inputs, make_ctx(responses))

        assert result["system"] == "checkout"
        assert result["resilience_score"] == 82
        assert result["improvement"] == "+35%"
        assert result["failure_points_covered"] == 2
        assert result["monitoring"] == ["grafana/resilience"]
        assert result["runbooks"] == [{"title": "Circuit open", "pattern": "circuit-breaker"}]
        assert result["metadata"]["chaos_testing_enabled"] is True

    def test_breakpoints(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        process(inputs, ctx)

        assert ctx.breakpoint_titles() == [
            "Failure Point Analysis Review",
            "Pattern Implementation Review",
            "Chaos Testing Results",
        ]
        assert ctx.breakpoints[2].context["summary"] == "Pass rate: 75%"

    def test_validation_receives_chaos_results(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        process(inputs, ctx)

        validation_call = ctx.calls_for("resilience-validation")[0]
        assert validation_call.args["chaosTestResults"].passed_tests == 3


# ---------------------------------------------------------------------------
# Optional phases
# ---------------------------------------------------------------------------


class TestResilienceOptions:
    def test_no_failure_points_returns_early(self, make_ctx, inputs):
        ctx = make_ctx(
            {"failure-point-analysis": {"failurePoints": [], "criticalCount": 0, "artifacts": []}}
        )

        result = process(inputs, ctx)

        assert result["success"] is True
        assert result["reason"] == "No failure points requiring resilience patterns"
        assert ctx.task_names() == ["failure-point-analysis"]

    def test_auto_remediation_runs_on_failed_chaos_tests(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        process({**inputs, "autoRemediation": True}, ctx)

        assert "auto-remediation" in ctx.task_names()

    def test_auto_remediation_skipped_when_disabled(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        process(inputs, ctx)

        assert "auto-remediation" not in ctx.task_names()

    def test_chaos_and_monitoring_can_be_disabled(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        result = process(
            {**inputs, "chaosTestingEnabled": False, "monitoringIntegration": False}, ctx
        )

        assert "chaos-engineering-test" not in ctx.task_names()
        assert "monitoring-setup" not in ctx.task_names()
        assert "Chaos Testing Results" not in ctx.breakpoint_titles()
        assert result["monitoring"] == []
        assert ctx.calls_for("resilience-validation")[0].args["chaosTestResults"] is None


class TestChaosPassRate:
    def test_rounds_percentage(self):
        results = ChaosTestResults(totalTests=3, passedTests=2, failedTests=1, artifacts=[])

        assert results.pass_rate == 67

    def test_zero_when_nothing_ran(self):
        results = ChaosTestResults(totalTests=0, passedTests=0, failedTests=0, artifacts=[])

        assert results.pass_rate == 0
