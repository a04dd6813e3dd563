"""Input and task output models for the resilience patterns process."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from archsitter.processes.common import ProcessInputs
from archsitter.runtime.models import CamelModel, TaskOutput


class ResiliencePatternsInputs(ProcessInputs):
    system: str = ""
    components: list[Any] = Field(default_factory=list)
    slas: dict[str, Any] = Field(default_factory=dict)
    output_dir: str = "resilience-output"
    chaos_testing_enabled: bool = True
    monitoring_integration: bool = True
    auto_remediation: bool = False


class FailurePoint(CamelModel):
    id: str
    component: str
    type: str
    description: str | None = None
    severity: Literal["critical", "high", "medium", "low"]
    impact: str
    likelihood: str
    current_handling: str | None = None
    recommended_pattern: str
    dependencies: list[str] = Field(default_factory=list)


class FailurePointAnalysis(TaskOutput):
    failure_points: list[FailurePoint]
    critical_count: int
    high_count: int = 0
    medium_count: int = 0
    constraints: dict[str, Any] = Field(default_factory=dict)


class PatternSelection(TaskOutput):
    patterns: list[str] = Field(
        description="Any of circuit-breaker, bulkhead, retry, timeout, rate-limiter, fallback"
    )
    circuit_breaker_config: dict[str, Any] = Field(default_factory=dict)
    resource_limits: dict[str, Any] = Field(default_factory=dict)
    isolation_strategy: str | None = None
    retry_policies: dict[str, Any] = Field(default_factory=dict)
    backoff_strategies: dict[str, Any] = Field(default_factory=dict)
    timeout_strategy: dict[str, Any] = Field(default_factory=dict)
    rate_limits: dict[str, Any] = Field(default_factory=dict)
    fallback_strategies: dict[str, Any] = Field(default_factory=dict)
    chaos_scenarios: list[Any] = Field(default_factory=list)


# =============================================================================
# Pattern implementations
# =============================================================================


class PatternImplementation(TaskOutput):
    implemented: bool
    configuration: dict[str, Any] = Field(default_factory=dict)


class PatternSkipped(CamelModel):
    """Placeholder for a pattern the selection did not pick."""

    implemented: bool = False
    reason: str = "Not selected"


class CircuitBreaker(CamelModel):
    name: str
    component: str
    failure_threshold: float
    success_threshold: float | None = None
    timeout: float
    half_open_requests: int | None = None


class CircuitBreakerDesign(PatternImplementation):
    circuit_breakers: list[CircuitBreaker]
    code: list[Any] = Field(default_factory=list)


class Bulkhead(CamelModel):
    name: str
    component: str
    max_concurrent: int
    max_queue: int
    reject_policy: str | None = None


class BulkheadImplementation(PatternImplementation):
    bulkheads: list[Bulkhead]


class RetryPolicy(CamelModel):
    name: str
    component: str
    max_retries: int
    backoff_strategy: str
    initial_delay: float | None = None
    max_delay: float | None = None
    jitter: bool | None = None
    retryable_errors: list[Any] = Field(default_factory=list)


class RetryLogicConfiguration(PatternImplementation):
    retry_policies: list[RetryPolicy]


class TimeoutPolicy(CamelModel):
    name: str
    component: str
    timeout: float
    connection_timeout: float | None = None
    read_timeout: float | None = None
    write_timeout: float | None = None


class TimeoutConfiguration(PatternImplementation):
    timeouts: list[TimeoutPolicy]


class RateLimiter(CamelModel):
    name: str
    component: str
    limit: float
    window: str
    strategy: str | None = None


class RateLimitingImplementation(PatternImplementation):
    rate_limiters: list[RateLimiter]


class Fallback(CamelModel):
    name: str
    component: str
    strategy: str
    cache_enabled: bool | None = None
    default_value: str | None = None


class FallbackImplementation(PatternImplementation):
    fallbacks: list[Fallback]


# =============================================================================
# Integration, testing, monitoring, validation
# =============================================================================


class IntegrationTestCounts(CamelModel):
    total_tests: int = 0
    passed_tests: int = 0
    failed_tests: int = 0


class PatternIntegration(TaskOutput):
    integrated: bool
    test_results: IntegrationTestCounts
    issues: list[Any] = Field(default_factory=list)


class ChaosFailure(CamelModel):
    test: str | None = None
    reason: str | None = None
    pattern: str | None = None
    recommendation: str | None = None


class ChaosTestResults(TaskOutput):
    total_tests: int
    passed_tests: int
    failed_tests: int
    failures: list[ChaosFailure] = Field(default_factory=list)

    @property
    def pass_rate(self) -> int:
        """Passed tests as a rounded percentage (0 when nothing ran)."""
        if not self.total_tests:
            return 0
        return round(self.passed_tests / self.total_tests * 100)


class ConfigurationChange(CamelModel):
    pattern: str | None = None
    parameter: str | None = None
    old_value: Any = None
    new_value: Any = None
    reason: str | None = None


class AutoRemediation(TaskOutput):
    remediated: bool
    changes: list[ConfigurationChange]
    re_test_results: dict[str, Any] = Field(default_factory=dict)


class Dashboard(CamelModel):
    name: str | None = None
    url: str | None = None
    panels: list[Any] = Field(default_factory=list)


class Alert(CamelModel):
    name: str | None = None
    condition: str | None = None
    severity: str | None = None
    runbook: str | None = None


class MonitoringSetup(TaskOutput):
    configured: bool
    dashboards: list[Dashboard]
    alerts: list[Alert]


class ResilienceGap(CamelModel):
    area: str | None = None
    severity: str | None = None
    description: str | None = None


class ResilienceValidation(TaskOutput):
    resilience_score: float = Field(ge=0, le=100)
    improvement: str
    gaps: list[ResilienceGap] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class DocumentRef(CamelModel):
    title: str | None = None
    path: str | None = None
    type: str | None = None


class RunbookRef(CamelModel):
    title: str | None = None
    pattern: str | None = None
    path: str | None = None


class ResilienceDocumentation(TaskOutput):
    documents: list[DocumentRef]
    runbooks: list[RunbookRef]
    diagrams: list[Any] = Field(default_factory=list)
    monitoring_dashboards: list[Any] = Field(default_factory=list)
