"""Task definitions for the resilience patterns process."""

from pathlib import Path

from archsitter.runtime.task import define_task

from .models import (
    AutoRemediation,
    BulkheadImplementation,
    ChaosTestResults,
    CircuitBreakerDesign,
    FailurePointAnalysis,
    FallbackImplementation,
    MonitoringSetup,
    PatternIntegration,
    PatternSelection,
    RateLimitingImplementation,
    ResilienceDocumentation,
    ResilienceValidation,
    RetryLogicConfiguration,
    TimeoutConfiguration,
)

PROMPTS = Path(__file__).parent / "prompts.yaml"

failure_point_analysis_task = define_task(
    "failure-point-analysis",
    title="Analyze system failure points and vulnerabilities",
    agent="resilience-analyst",
    output_model=FailurePointAnalysis,
    labels=["agent", "resilience", "analysis", "failure-points"],
    prompt_source=PROMPTS,
)

resilience_pattern_selection_task = define_task(
    "resilience-pattern-selection",
    title="Select and configure appropriate resilience patterns",
    agent="pattern-architect",
    output_model=PatternSelection,
    labels=["agent", "resilience", "pattern-selection"],
    prompt_source=PROMPTS,
)

circuit_breaker_design_task = define_task(
    "circuit-breaker-design",
    title="Design and implement circuit breaker patterns",
    agent="circuit-breaker-engineer",
    output_model=CircuitBreakerDesign,
    labels=["agent", "resilience", "circuit-breaker", "implementation"],
    prompt_source=PROMPTS,
)

bulkhead_implementation_task = define_task(
    "bulkhead-implementation",
    title="Implement bulkhead isolation patterns",
    agent="bulkhead-engineer",
    output_model=BulkheadImplementation,
    labels=["agent", "resilience", "bulkhead", "implementation"],
    prompt_source=PROMPTS,
)

retry_logic_configuration_task = define_task(
    "retry-logic-configuration",
    title="Configure retry logic with backoff strategies",
    agent="retry-engineer",
    output_model=RetryLogicConfiguration,
    labels=["agent", "resilience", "retry", "implementation"],
    prompt_source=PROMPTS,
)

timeout_configuration_task = define_task(
    "timeout-configuration",
    title="Configure timeout policies for operations",
    agent="timeout-engineer",
    output_model=TimeoutConfiguration,
    labels=["agent", "resilience", "timeout", "implementation"],
    prompt_source=PROMPTS,
)

rate_limiting_implementation_task = define_task(
    "rate-limiting-implementation",
    title="Implement rate limiting patterns",
    agent="rate-limiter-engineer",
    output_model=RateLimitingImplementation,
    labels=["agent", "resilience", "rate-limiting", "implementation"],
    prompt_source=PROMPTS,
)

fallback_implementation_task = define_task(
    "fallback-implementation",
    title="Implement fallback and degradation mechanisms",
    agent="fallback-engineer",
    output_model=FallbackImplementation,
    labels=["agent", "resilience", "fallback", "implementation"],
    prompt_source=PROMPTS,
)

pattern_integration_task = define_task(
    "pattern-integration",
    title="Integrate resilience patterns and run integration tests",
    agent="integration-engineer",
    output_model=PatternIntegration,
    labels=["agent", "resilience", "integration", "testing"],
    prompt_source=PROMPTS,
)

chaos_engineering_test_task = define_task(
    "chaos-engineering-test",
    title="Run chaos engineering tests to validate resilience",
    agent="chaos-engineer",
    output_model=ChaosTestResults,
    labels=["agent", "resilience", "chaos-engineering", "testing"],
    prompt_source=PROMPTS,
)

auto_remediation_task = define_task(
    "auto-remediation",
    title="Auto-remediate failed chaos tests",
    agent="remediation-engineer",
    output_model=AutoRemediation,
    labels=["agent", "resilience", "remediation"],
    prompt_source=PROMPTS,
)

monitoring_setup_task = define_task(
    "monitoring-setup",
    title="Set up monitoring and alerting for resilience patterns",
    agent="monitoring-engineer",
    output_model=MonitoringSetup,
    labels=["agent", "resilience", "monitoring", "observability"],
    prompt_source=PROMPTS,
)

resilience_validation_task = define_task(
    "resilience-validation",
    title="Calculate resilience score and validate implementation",
    agent="resilience-validator",
    output_model=ResilienceValidation,
    labels=["agent", "resilience", "validation", "scoring"],
    prompt_source=PROMPTS,
)

resilience_documentation_task = define_task(
    "resilience-documentation",
    title="Generate comprehensive resilience documentation and runbooks",
    agent="documentation-specialist",
    output_model=ResilienceDocumentation,
    labels=["agent", "resilience", "documentation", "runbooks"],
    prompt_source=PROMPTS,
)

TASKS = [
    failure_point_analysis_task,
    resilience_pattern_selection_task,
    circuit_breaker_design_task,
    bulkhead_implementation_task,
    retry_logic_configuration_task,
    timeout_configuration_task,
    rate_limiting_implementation_task,
    fallback_implementation_task,
    pattern_integration_task,
    chaos_engineering_test_task,
    auto_remediation_task,
    monitoring_setup_task,
    resilience_validation_task,
    resilience_documentation_task,
]
