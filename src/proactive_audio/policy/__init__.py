from proactive_audio.policy.sentinel_policy import (
    CORRECTION_PREFIX,
    SAFETY_ALERT_TEMPLATE,
    NonTrigger,
    RiskDomain,
    SentinelPolicy,
    SentinelState,
    StatementAssessment,
    Transition,
    TriggerCategory,
    format_correction,
    format_safety_alert,
)
from proactive_audio.policy.scenarios import (
    POLICY_SCENARIOS,
    PolicyScenario,
    ScenarioResult,
    run_scenario,
    run_scenarios,
)

__all__ = [
    "CORRECTION_PREFIX",
    "SAFETY_ALERT_TEMPLATE",
    "NonTrigger",
    "RiskDomain",
    "SentinelPolicy",
    "SentinelState",
    "StatementAssessment",
    "Transition",
    "TriggerCategory",
    "format_correction",
    "format_safety_alert",
    "POLICY_SCENARIOS",
    "PolicyScenario",
    "ScenarioResult",
    "run_scenario",
    "run_scenarios",
]
