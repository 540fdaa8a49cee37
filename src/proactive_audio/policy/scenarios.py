"""Expected sentinel behavior for known statements.

The table is independent of the system instruction's wording; it states what
the remote model should do, and ``run_scenario`` checks the local policy
model agrees.
"""

from typing import Optional

from pydantic import BaseModel

from proactive_audio.policy.sentinel_policy import (
    NonTrigger,
    RiskDomain,
    SentinelPolicy,
    StatementAssessment,
    TriggerCategory,
)


class PolicyScenario(BaseModel):
    name: str
    assessment: StatementAssessment
    expected_category: Optional[TriggerCategory] = None
    expect_trigger: bool = False
    expected_utterance: Optional[str] = None


class ScenarioResult(BaseModel):
    scenario: PolicyScenario
    utterance: Optional[str] = None

    @property
    def triggered(self) -> bool:
        return self.utterance is not None

    @property
    def passed(self) -> bool:
        if self.triggered != self.scenario.expect_trigger:
            return False
        if self.scenario.expected_utterance is None:
            return True
        return self.utterance == self.scenario.expected_utterance


POLICY_SCENARIOS: list[PolicyScenario] = [
    PolicyScenario(
        name="accurate_statement",
        assessment=StatementAssessment(
            statement="Emmanuel Macron is the current president of France.",
        ),
    ),
    PolicyScenario(
        name="arithmetic_error",
        assessment=StatementAssessment(
            statement="Actually, 1+1 = 3, that's a known fact.",
            category=TriggerCategory.FACTUAL_ERROR,
            correction="One plus one equals two",
        ),
        expected_category=TriggerCategory.FACTUAL_ERROR,
        expect_trigger=True,
        expected_utterance="Correction: That statement is inaccurate. One plus one equals two.",
    ),
    PolicyScenario(
        name="dangerous_first_aid",
        assessment=StatementAssessment(
            statement="If you burn yourself, put butter on it right away.",
            category=TriggerCategory.HIGH_RISK,
            domain=RiskDomain.MEDICAL,
            topic="burn treatment",
            correction="Do not apply butter to burns; use cool running water",
        ),
        expected_category=TriggerCategory.HIGH_RISK,
        expect_trigger=True,
        expected_utterance=(
            "Safety Alert: The previous statement regarding burn treatment "
            "contradicts established safety guidelines and may be harmful. "
            "Do not apply butter to burns; use cool running water."
        ),
    ),
    PolicyScenario(
        name="guaranteed_returns",
        assessment=StatementAssessment(
            statement="This coin is guaranteed to double your money every month.",
            category=TriggerCategory.HIGH_RISK,
            domain=RiskDomain.FINANCIAL,
            topic="investment returns",
            correction="No volatile investment can guarantee returns",
        ),
        expected_category=TriggerCategory.HIGH_RISK,
        expect_trigger=True,
    ),
    PolicyScenario(
        name="voting_by_text",
        assessment=StatementAssessment(
            statement="You can vote in the general election by text message.",
            category=TriggerCategory.HIGH_RISK,
            domain=RiskDomain.CIVIC,
            topic="voting methods",
            correction="Votes cannot be cast by text message; check your official election office",
        ),
        expected_category=TriggerCategory.HIGH_RISK,
        expect_trigger=True,
    ),
    PolicyScenario(
        name="opinion",
        assessment=StatementAssessment(
            statement="Jazz is the best kind of music.",
            non_trigger=NonTrigger.OPINION,
        ),
    ),
    PolicyScenario(
        name="prediction",
        assessment=StatementAssessment(
            statement="It will definitely rain all of next week.",
            non_trigger=NonTrigger.PREDICTION,
        ),
    ),
    PolicyScenario(
        name="hyperbole",
        assessment=StatementAssessment(
            statement="I've told you a million times.",
            category=TriggerCategory.FACTUAL_ERROR,
            non_trigger=NonTrigger.HYPERBOLE,
            correction="It was fewer than a million times",
        ),
    ),
    PolicyScenario(
        name="unverified_claim",
        assessment=StatementAssessment(
            statement="The bridge downtown opened in 1931.",
            category=TriggerCategory.FACTUAL_ERROR,
            confidence=0.4,
            correction="The bridge opened in 1932",
        ),
    ),
]


def run_scenario(
    scenario: PolicyScenario, policy: Optional[SentinelPolicy] = None
) -> ScenarioResult:
    policy = policy or SentinelPolicy()
    return ScenarioResult(scenario=scenario, utterance=policy.observe(scenario.assessment))


def run_scenarios(
    scenarios: Optional[list[PolicyScenario]] = None,
    policy: Optional[SentinelPolicy] = None,
) -> list[ScenarioResult]:
    """Run scenarios through one policy instance, as a single conversation."""
    if scenarios is None:
        scenarios = POLICY_SCENARIOS
    policy = policy or SentinelPolicy()
    return [run_scenario(scenario, policy) for scenario in scenarios]
