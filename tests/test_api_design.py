"""Tests for the API design and specification process."""

import pytest

from archsitter.processes.api_design import process
from archsitter.processes.api_design.models import PerformanceDesign
from archsitter.processes.api_design.process import performance_target_met

ENDPOINTS_PER_CATEGORY = {"core": 3, "supporting": 2, "auxiliary": 1}


def _endpoint_design(args):
    category = args["category"]
    count = ENDPOINTS_PER_CATEGORY[category]
    return {
        "success": True,
        "category": category,
        "endpointCount": count,
        "endpoints": [{"method": "GET", "path": f"/{category}/{i}"} for i in range(count)],
        "artifacts": [],
    }


@pytest.fixture
def responses(md):
    return {
        "requirements-analysis": {
            "success": True,
            "requirementCategories": {
                "functional": [{"id": "FR-1", "description": "Place orders", "priority": "high"}],
                "nonFunctional": ["p95 under 200ms"],
                "security": ["OAuth2 for partners"],
                "scalability": ["10k requests per second"],
            },
            "domainModel": {"entities": [{"name": "Order"}, {"name": "Customer"}]},
            "useCases": [{"name": "Place order", "actor": "customer"}],
            "artifacts": [md("api-design-output/requirements.json", format="json")],
        },
        "api-architecture-design": {
            "architecturePattern": "RESTful",
            "designPatterns": [{"pattern": "Repository"}],
            "components": [{"name": "gateway"}],
            "architectureDiagramPath": "api-design-output/architecture-diagram.md",
            "architectureDocPath": "api-design-output/architecture.md",
            "artifacts": [],
        },
        "resource-modeling": {
            "resources": [
                {"name": "orders", "priority": "critical"},
                {"name": "customers", "priority": "medium"},
            ],
            "resourceHierarchy": {"orders": ["items"]},
            "artifacts": [],
        },
        "endpoint-design": _endpoint_design,
        "schema-design": {
            "requestSchemas": [],
            "responseSchemas": [],
            "commonSchemas": {"Money": {"type": "object"}},
            "artifacts": [],
        },
        "error-handling-design": {
            "errorFormat": {"standard": "RFC7807"},
            "errorCodes": [{"code": "ORDER_NOT_FOUND", "httpStatus": 404}],
            "statusCodeMapping": {"404": "not found"},
            "artifacts": [],
        },
        "authentication-authorization-design": {
            "authenticationMechanism": "OAuth2",
            "authorizationModel": "RBAC",
            "securityScore": 88,
            "securityDocPath": "api-design-output/security.md",
            "artifacts": [],
        },
        "rate-limiting-design": {
            "rateLimitingStrategy": "token-bucket",
            "rateLimits": [{"tier": "free", "requestsPerMinute": 60}],
            "artifacts": [],
        },
        "versioning-strategy": {
            "versioningStrategy": "URL-based",
            "initialVersion": "v1",
            "deprecationPolicy": {"noticePeriod": "6 months"},
            "artifacts": [],
        },
        "formal-specification": {
            "success": True,
            "specification": {"openapi": "3.1.0"},
            "format": "OpenAPI-3.1",
            "version": "1.0.0",
            "specificationPath": "api-design-output/openapi.yaml",
            "validationPassed": True,
            "artifacts": [],
        },
        "api-documentation": {
            "success": True,
            "documentationPath": "api-design-output/docs/index.html",
            "interactiveDocsPath": "api-design-output/docs/swagger.html",
            "artifacts": [],
        },
        "contract-testing-design": {
            "contracts": [{"consumer": "web", "provider": "orders-api"}],
            "testStrategy": {"framework": "Pact"},
            "contractsPath": "api-design-output/contracts",
            "artifacts": [],
        },
        "sdk-design": {
            "targetLanguages": ["python", "typescript"],
            "generationStrategy": "OpenAPI-Generator",
            "sdkDesignDocPath": "api-design-output/sdk.md",
            "artifacts": [],
        },
        "developer-experience": {
            "dxScore": 80,
            "onboardingFlow": {"steps": 4},
            "estimatedOnboardingTime": "15 minutes",
            "improvementAreas": [],
            "artifacts": [],
        },
        "performance-design": {
            "cachingStrategy": {"levels": ["cdn", "application"]},
            "optimizationStrategies": [{"strategy": "cursor pagination"}],
            "estimatedP95Latency": "150ms",
            "artifacts": [],
        },
        "monitoring-observability": {
            "metricsStrategy": {"red": True},
            "alertingRules": [{"rule": "5xx rate above 1%", "severity": "critical"}],
            "tools": [{"tool": "Prometheus"}],
            "artifacts": [],
        },
        "migration-strategy": {
            "migrationStrategy": "Strangler-Fig",
            "timeline": {"total": "3 months"},
            "risks": [{"risk": "client breakage"}],
            "artifacts": [],
        },
        "implementation-roadmap": {
            "roadmap": {"milestones": 3},
            "phases": [{"phase": "MVP", "duration": "6 weeks"}],
            "timeline": {"totalDuration": "12 weeks"},
            "cost": {"total": "$120k"},
            "roadmapPath": "api-design-output/roadmap.md",
            "artifacts": [],
        },
        "design-review": {
            "qualityScore": 85,
            "issues": [],
            "recommendations": [{"recommendation": "Add ETags"}],
            "verdict": "Production-Ready",
            "readinessAssessment": {"readyForImplementation": True, "readyForProduction": False},
            "reviewReportPath": "api-design-output/review.md",
            "artifacts": [],
        },
    }


@pytest.fixture
def inputs():
    return {"projectName": "Orders API", "apiPurpose": "Order management"}


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


class TestApiDesignHappyPath:
    def test_passes_every_gate(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        assert result["success"] is True
        assert ctx.breakpoint_titles() == [
            "API Architecture Review",
            "Final API Design Review and Approval",
        ]
        assert result["quality_gates"] == {
            "requirements_complete": True,
            "specification_valid": True,
            "security_adequate": True,
            "performance_met": True,
            "design_quality_met": True,
        }

    def test_endpoints_designed_per_non_empty_category(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        categories = {call.args["category"] for call in ctx.calls_for("endpoint-design")}
        assert categories == {"core", "supporting"}
        assert result["api_specification"]["endpoint_count"] == 5
        assert result["api_specification"]["resource_count"] == 2

    def test_core_category_gets_critical_and_high_resources(self, make_ctx, responses, inputs):
        responses["resource-modeling"]["resources"].append({"name": "payments", "priority": "high"})
        ctx = make_ctx(responses)

        process(inputs, ctx)

        core = next(c for c in ctx.calls_for("endpoint-design") if c.args["category"] == "core")
        assert [r.name for r in core.args["resources"]] == ["orders", "payments"]

    def test_result_sections(self, make_ctx, responses, inputs):
        result = process(inputs, make_ctx(responses))

        assert result["project_name"] == "Orders API"
        assert result["api_type"] == "REST"
        assert result["target_audience"] == "internal"
        assert result["architecture"]["pattern"] == "RESTful"
        assert result["security"]["authentication_mechanism"] == "OAuth2"
        assert result["versioning"]["initial_version"] == "v1"
        assert result["sdk"]["target_languages"] == ["python", "typescript"]
        assert result["contracts"]["contract_count"] == 1
        assert result["implementation_plan"]["timeline"] == {"totalDuration": "12 weeks"}
        assert result["design_review"]["verdict"] == "Production-Ready"
        assert result["migration"] is None
        assert result["metadata"]["api_type"] == "REST"

    def test_final_review_lists_specification_files(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        process(inputs, ctx)

        final = ctx.breakpoints[-1]
        assert final.context["summary"]["totalEndpoints"] == 5
        assert final.context["summary"]["estimatedCost"] == "$120k"
        assert final.context["files"][0] == {
            "path": "api-design-output/openapi.yaml",
            "format": "yaml",
            "label": "API Specification",
        }

    def test_graphql_specification_file_format(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        process({**inputs, "apiType": "GraphQL"}, ctx)

        assert ctx.breakpoints[-1].context["files"][0]["format"] == "graphql"


# ---------------------------------------------------------------------------
# Failures and quality gates
# ---------------------------------------------------------------------------


class TestApiDesignGates:
    def test_failed_requirements_analysis(self, make_ctx, responses, inputs):
        responses["requirements-analysis"]["success"] = False
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        assert result["success"] is False
        assert result["phase"] == "requirements-analysis"
        assert result["error"] == "Failed to complete requirements analysis"
        assert ctx.task_names() == ["requirements-analysis"]

    def test_missing_requirement_categories(self, make_ctx, responses, inputs):
        responses["requirements-analysis"]["requirementCategories"]["scalability"] = []
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        gate = ctx.breakpoints[0]
        assert gate.title == "Requirements Completeness Check"
        assert gate.context["missingCategories"] == ["scalability"]
        assert gate.context["files"] == [
            {"path": "api-design-output/requirements.json", "format": "json"}
        ]
        assert result["quality_gates"]["requirements_complete"] is False

    def test_no_resources(self, make_ctx, responses, inputs):
        responses["resource-modeling"]["resources"] = []
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        assert result["success"] is False
        assert result["phase"] == "resource-modeling"
        assert "endpoint-design" not in ctx.task_names()

    def test_external_api_below_security_threshold(self, make_ctx, responses, inputs):
        responses["authentication-authorization-design"]["securityScore"] = 75
        ctx = make_ctx(responses)

        result = process({**inputs, "targetAudience": "public"}, ctx)

        assert "Security Quality Gate" in ctx.breakpoint_titles()
        assert result["quality_gates"]["security_adequate"] is False

    def test_internal_api_uses_lower_security_threshold(self, make_ctx, responses, inputs):
        responses["authentication-authorization-design"]["securityScore"] = 75
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        assert "Security Quality Gate" not in ctx.breakpoint_titles()
        assert result["quality_gates"]["security_adequate"] is True

    def test_slow_estimate_trips_performance_gate(self, make_ctx, responses, inputs):
        responses["performance-design"]["estimatedP95Latency"] = "250ms"
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        assert "Performance Quality Gate" in ctx.breakpoint_titles()
        assert result["performance"]["performance_met"] is False

    def test_invalid_specification(self, make_ctx, responses, inputs):
        responses["formal-specification"].update(
            {"validationPassed": False, "validationErrors": [{"message": "missing $ref"}]}
        )
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        assert "Specification Validation" in ctx.breakpoint_titles()
        assert result["quality_gates"]["specification_valid"] is False

    def test_low_design_quality(self, make_ctx, responses, inputs):
        responses["design-review"]["qualityScore"] = 60
        ctx = make_ctx(responses)

        result = process(inputs, ctx)

        assert "Design Quality Gate" in ctx.breakpoint_titles()
        assert result["quality_gates"]["design_quality_met"] is False

    def test_existing_apis_trigger_migration(self, make_ctx, responses, inputs):
        ctx = make_ctx(responses)

        result = process({**inputs, "existingAPIs": [{"name": "orders-v0"}]}, ctx)

        assert "migration-strategy" in ctx.task_names()
        assert result["migration"]["required"] is True
        assert result["migration"]["strategy"] == "Strangler-Fig"


class TestPerformanceTargetMet:
    def _design(self, latency):
        return PerformanceDesign(
            cachingStrategy={},
            optimizationStrategies=[],
            estimatedP95Latency=latency,
            artifacts=[],
        )

    def test_within_target(self):
        assert performance_target_met(self._design("150ms"), "< 200ms p95") is True

    def test_equal_to_target(self):
        assert performance_target_met(self._design(200), "< 200ms p95") is True

    def test_over_target(self):
        assert performance_target_met(self._design("210 ms"), "< 200ms p95") is False

    def test_constraint_without_number(self):
        assert performance_target_met(self._design("150ms"), "fast") is False

    def test_missing_constraint(self):
        assert performance_target_met(self._design("150ms"), None) is False
