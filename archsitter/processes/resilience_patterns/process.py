"""Resilience patterns process.

Finds failure points, selects patterns, implements the selected patterns in
parallel, then integrates, chaos-tests, monitors, scores and documents them.
"""

from collections.abc import Callable
from typing import Any

from archsitter.processes.common import dump_artifacts, elapsed_seconds, metadata, parse_inputs
from archsitter.runtime.context import ProcessContext
from archsitter.runtime.models import CamelModel

from .models import FailurePointAnalysis, PatternSelection, PatternSkipped, ResiliencePatternsInputs
from .tasks import (
    auto_remediation_task,
    bulkhead_implementation_task,
    chaos_engineering_test_task,
    circuit_breaker_design_task,
    failure_point_analysis_task,
    fallback_implementation_task,
    monitoring_setup_task,
    pattern_integration_task,
    rate_limiting_implementation_task,
    resilience_documentation_task,
    resilience_pattern_selection_task,
    resilience_validation_task,
    retry_logic_configuration_task,
    timeout_configuration_task,
)

SLUG = "resilience-patterns"

# Result key -> (pattern name used by the selection, task, selection fields passed on)
PATTERNS = {
    "circuitBreakers": (
        "circuit-breaker",
        circuit_breaker_design_task,
        {"slas": None, "configuration": "circuit_breaker_config"},
    ),
    "bulkheads": (
        "bulkhead",
        bulkhead_implementation_task,
        {"resourceLimits": "resource_limits", "isolationStrategy": "isolation_strategy"},
    ),
    "retryLogic": (
        "retry",
        retry_logic_configuration_task,
        {"retryPolicies": "retry_policies", "backoffStrategies": "backoff_strategies"},
    ),
    "timeouts": (
        "timeout",
        timeout_configuration_task,
        {"slas": None, "timeoutStrategy": "timeout_strategy"},
    ),
    "rateLimiting": (
        "rate-limiter",
        rate_limiting_implementation_task,
        {"rateLimits": "rate_limits"},
    ),
    "fallbacks": (
        "fallback",
        fallback_implementation_task,
        {"fallbackStrategies": "fallback_strategies"},
    ),
}


def _pattern_thunks(
    ctx: ProcessContext,
    params: ResiliencePatternsInputs,
    analysis: FailurePointAnalysis,
    selection: PatternSelection,
) -> dict[str, Callable[[], CamelModel]]:
    thunks = {}
    for key, (pattern, task_def, fields) in PATTERNS.items():
        if pattern not in selection.patterns:
            thunks[key] = PatternSkipped
            continue

        args: dict[str, Any] = {
            "failurePoints": [
                fp for fp in analysis.failure_points if fp.recommended_pattern == pattern
            ],
            "components": params.components,
        }
        for arg, field in fields.items():
            # None means "pass the process input of the same name"
            args[arg] = getattr(params, arg) if field is None else getattr(selection, field)
        args["outputDir"] = params.output_dir

        thunks[key] = lambda task_def=task_def, args=args: ctx.task(task_def, args)
    return thunks


def process(
    inputs: dict[str, Any] | ResiliencePatternsInputs, ctx: ProcessContext
) -> dict[str, Any]:
    params = parse_inputs(ResiliencePatternsInputs, inputs)
    output_dir = params.output_dir
    start = ctx.now()
    artifacts = []
    patterns_implemented = []

    ctx.log("info", "Starting Resilience Pattern Implementation Process")

    # ------------------------------------------------------------------
    # Phase 1: failure points
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 1: Identifying failure points and vulnerabilities")
    analysis = ctx.task(
        failure_point_analysis_task,
        {
            "system": params.system,
            "components": params.components,
            "slas": params.slas,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(analysis.artifacts)

    if not analysis.failure_points:
        ctx.log("warn", "No significant failure points identified")
        return {
            "success": True,
            "reason": "No failure points requiring resilience patterns",
            "recommendation": "Continue monitoring for emerging issues",
            "artifacts": dump_artifacts(artifacts),
            "metadata": metadata(SLUG, start),
        }

    ctx.breakpoint(
        question=(
            f"Identified {len(analysis.failure_points)} failure points. "
            "Review and approve pattern strategy?"
        ),
        title="Failure Point Analysis Review",
        context={
            "files": [
                {"path": f"{output_dir}/failure-analysis.md", "format": "markdown"},
                {"path": f"{output_dir}/failure-points.json", "format": "json"},
            ],
            "summary": (
                f"Critical: {analysis.critical_count}, High: {analysis.high_count}, "
                f"Medium: {analysis.medium_count}"
            ),
        },
    )

    # ------------------------------------------------------------------
    # Phase 2: pattern selection
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 2: Selecting appropriate resilience patterns")
    selection = ctx.task(
        resilience_pattern_selection_task,
        {
            "failurePoints": analysis.failure_points,
            "components": params.components,
            "slas": params.slas,
            "systemConstraints": analysis.constraints,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(selection.artifacts)

    # ------------------------------------------------------------------
    # Phase 3: pattern implementations
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 3: Designing and implementing resilience patterns")
    implementations = ctx.parallel_all(_pattern_thunks(ctx, params, analysis, selection))

    for key, result in implementations.items():
        if result.implemented:
            patterns_implemented.append(key)
            artifacts.extend(getattr(result, "artifacts", []))

    ctx.breakpoint(
        question=(
            f"Implemented {len(patterns_implemented)} resilience patterns. "
            "Review implementations before testing?"
        ),
        title="Pattern Implementation Review",
        context={
            "files": [
                {"path": f"{output_dir}/implementation-summary.md", "format": "markdown"},
                {"path": f"{output_dir}/pattern-configurations.json", "format": "json"},
            ],
            "summary": f"Patterns: {', '.join(patterns_implemented)}",
        },
    )

    # ------------------------------------------------------------------
    # Phase 4: integration
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 4: Integrating patterns and running integration tests")
    integration = ctx.task(
        pattern_integration_task,
        {
            "implementations": implementations,
            "components": params.components,
            "system": params.system,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(integration.artifacts)

    # ------------------------------------------------------------------
    # Phase 5: chaos engineering
    # ------------------------------------------------------------------
    chaos = None
    if params.chaos_testing_enabled:
        ctx.log("info", "Phase 5: Running chaos engineering tests")
        chaos = ctx.task(
            chaos_engineering_test_task,
            {
                "system": params.system,
                "components": params.components,
                "patternsImplemented": patterns_implemented,
                "failurePoints": analysis.failure_points,
                "testScenarios": selection.chaos_scenarios,
                "outputDir": output_dir,
            },
        )
        artifacts.extend(chaos.artifacts)

        ctx.breakpoint(
            question=(
                f"Chaos tests completed with {chaos.passed_tests}/{chaos.total_tests} passing. "
                "Review results?"
            ),
            title="Chaos Testing Results",
            context={
                "files": [
                    {"path": f"{output_dir}/chaos-test-report.md", "format": "markdown"},
                    {"path": f"{output_dir}/chaos-test-results.json", "format": "json"},
                ],
                "summary": f"Pass rate: {chaos.pass_rate}%",
            },
        )

        if chaos.failed_tests > 0 and params.auto_remediation:
            ctx.log("info", "Running auto-remediation for failed chaos tests")
            remediation = ctx.task(
                auto_remediation_task,
                {
                    "failedTests": chaos.failures,
                    "implementations": implementations,
                    "outputDir": output_dir,
                },
            )
            artifacts.extend(remediation.artifacts)

    # ------------------------------------------------------------------
    # Phase 6: monitoring
    # ------------------------------------------------------------------
    if params.monitoring_integration:
        ctx.log("info", "Phase 6: Setting up monitoring and alerting")
        monitoring = ctx.task(
            monitoring_setup_task,
            {
                "system": params.system,
                "components": params.components,
                "patternsImplemented": patterns_implemented,
                "implementations": implementations,
                "slas": params.slas,
                "outputDir": output_dir,
            },
        )
        artifacts.extend(monitoring.artifacts)

    # ------------------------------------------------------------------
    # Phase 7: scoring
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 7: Calculating resilience score and validating implementation")
    validation = ctx.task(
        resilience_validation_task,
        {
            "system": params.system,
            "components": params.components,
            "patternsImplemented": patterns_implemented,
            "failureAnalysis": analysis,
            "patternSelection": selection,
            "chaosTestResults": chaos,
            "slas": params.slas,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(validation.artifacts)

    # ------------------------------------------------------------------
    # Phase 8: documentation and runbooks
    # ------------------------------------------------------------------
    ctx.log("info", "Phase 8: Generating documentation and operational runbooks")
    documentation = ctx.task(
        resilience_documentation_task,
        {
            "system": params.system,
            "components": params.components,
            "patternsImplemented": patterns_implemented,
            "implementations": implementations,
            "validation": validation,
            "failureAnalysis": analysis,
            "outputDir": output_dir,
        },
    )
    artifacts.extend(documentation.artifacts)

    duration = elapsed_seconds(start, ctx.now())
    ctx.log("info", f"Resilience Pattern Implementation completed in {duration:.1f}s")

    return {
        "success": True,
        "system": params.system,
        "patterns_implemented": patterns_implemented,
        "resilience_score": validation.resilience_score,
        "improvement": validation.improvement,
        "failure_points_covered": len(analysis.failure_points),
        "artifacts": dump_artifacts(artifacts),
        "documentation": [doc.to_json_dict() for doc in documentation.documents],
        "monitoring": documentation.monitoring_dashboards if params.monitoring_integration else [],
        "runbooks": [runbook.to_json_dict() for runbook in documentation.runbooks],
        "metadata": metadata(
            SLUG,
            start,
            duration=duration,
            chaos_testing_enabled=params.chaos_testing_enabled,
            monitoring_integration=params.monitoring_integration,
        ),
    }
