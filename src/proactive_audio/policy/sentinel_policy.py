"""Local model of the silent-sentinel behavioral policy.

The remote model executes the policy from the system instruction text. This
module encodes the same contract as a state machine so its expected decisions
can be checked without a live session. Deciding *whether* a statement is false
is out of scope: each statement arrives already assessed.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from proactive_audio.core.config.sentinel_config import DEFAULT_CONFIDENCE_THRESHOLD

CORRECTION_PREFIX = "Correction: That statement is inaccurate."
SAFETY_ALERT_TEMPLATE = (
    "Safety Alert: The previous statement regarding {topic} contradicts "
    "established safety guidelines and may be harmful."
)


class SentinelState(str, Enum):
    SILENT = "silent"
    EVALUATING = "evaluating"
    INTERVENING = "intervening"


class TriggerCategory(str, Enum):
    """Conditions that allow the sentinel to break silence."""

    FACTUAL_ERROR = "factual_error"  # Category 1
    HIGH_RISK = "high_risk"  # Category 2


class RiskDomain(str, Enum):
    MEDICAL = "medical"
    FINANCIAL = "financial"
    PUBLIC_SAFETY = "public_safety"
    CIVIC = "civic"


class NonTrigger(str, Enum):
    """Statement kinds that never trigger, whatever their truth."""

    OPINION = "opinion"
    PREFERENCE = "preference"
    PREDICTION = "prediction"
    HYPERBOLE = "hyperbole"
    NO_CONSENSUS = "no_consensus"


def _sentence(text: str) -> str:
    text = text.strip()
    return text if text.endswith((".", "!", "?")) else f"{text}."


def format_correction(fact: str) -> str:
    """Format A: correction of an objective falsehood."""
    return f"{CORRECTION_PREFIX} {_sentence(fact)}"


def format_safety_alert(topic: str, guidance: str) -> str:
    """Format B: alert for high-risk misinformation."""
    return f"{SAFETY_ALERT_TEMPLATE.format(topic=topic)} {_sentence(guidance)}"


class StatementAssessment(BaseModel):
    """An externally produced judgement about one statement.

    Attributes:
        statement: The statement as heard.
        category: Trigger category, or None when the statement is accurate.
        domain: Risk domain of a Category 2 statement.
        non_trigger: Set when the statement is an opinion, prediction, etc.
        confidence: Confidence in the verification, 0..1.
        correction: Corrected fact (Category 1) or guidance (Category 2).
        topic: Topic named by a Category 2 alert.
    """

    statement: str
    category: Optional[TriggerCategory] = None
    domain: Optional[RiskDomain] = None
    non_trigger: Optional[NonTrigger] = None
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    correction: Optional[str] = None
    topic: Optional[str] = None

    @model_validator(mode="after")
    def check_trigger_details(self) -> "StatementAssessment":
        if self.category is not None and not self.correction:
            raise ValueError("a triggering assessment needs a correction")
        if self.category == TriggerCategory.HIGH_RISK and not self.topic:
            raise ValueError("a high-risk assessment needs a topic")
        return self


class Transition(BaseModel):
    source: SentinelState
    target: SentinelState
    statement: str


class SentinelPolicy:
    """State machine: SILENT -> EVALUATING -> (INTERVENING ->) SILENT."""

    def __init__(self, confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD):
        self.confidence_threshold = confidence_threshold
        self.state = SentinelState.SILENT
        self.history: list[Transition] = []

    def should_intervene(self, assessment: StatementAssessment) -> bool:
        if assessment.category is None or assessment.non_trigger is not None:
            return False
        # Unsure means silent
        return assessment.confidence >= self.confidence_threshold

    def render(self, assessment: StatementAssessment) -> str:
        if assessment.category == TriggerCategory.HIGH_RISK:
            return format_safety_alert(assessment.topic, assessment.correction)
        return format_correction(assessment.correction)

    def observe(self, assessment: StatementAssessment) -> Optional[str]:
        """Process one statement; return the single utterance, or None for silence."""
        self._transition(SentinelState.EVALUATING, assessment.statement)
        if not self.should_intervene(assessment):
            self._transition(SentinelState.SILENT, assessment.statement)
            return None

        self._transition(SentinelState.INTERVENING, assessment.statement)
        utterance = self.render(assessment)
        self._transition(SentinelState.SILENT, assessment.statement)
        return utterance

    def _transition(self, target: SentinelState, statement: str) -> None:
        self.history.append(
            Transition(source=self.state, target=target, statement=statement)
        )
        self.state = target
