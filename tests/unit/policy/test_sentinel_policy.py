"""Tests for the local sentinel policy model."""

import pytest
from pydantic import ValidationError

from proactive_audio.policy import (
    CORRECTION_PREFIX,
    SAFETY_ALERT_TEMPLATE,
    SentinelPolicy,
    SentinelState,
    StatementAssessment,
    TriggerCategory,
    NonTrigger,
    format_correction,
    format_safety_alert,
)
from proactive_audio.prompts import SYSTEM_INSTRUCTION


def factual_error(confidence=1.0):
    return StatementAssessment(
        statement="Water boils at 50 degrees Celsius at sea level.",
        category=TriggerCategory.FACTUAL_ERROR,
        confidence=confidence,
        correction="Water boils at 100 degrees Celsius at sea level",
    )


class TestFormats:
    def test_format_a(self):
        assert format_correction("One plus one equals two") == (
            "Correction: That statement is inaccurate. One plus one equals two."
        )

    def test_format_a_keeps_existing_punctuation(self):
        assert format_correction("  It is 1969!  ").endswith("It is 1969!")

    def test_format_b(self):
        assert format_safety_alert("burn treatment", "Use cool running water") == (
            "Safety Alert: The previous statement regarding burn treatment contradicts "
            "established safety guidelines and may be harmful. Use cool running water."
        )

    def test_formats_match_system_instruction(self):
        assert f"{CORRECTION_PREFIX} [Insert concise, correct fact]." in SYSTEM_INSTRUCTION
        assert SAFETY_ALERT_TEMPLATE.format(topic="[Topic]") in SYSTEM_INSTRUCTION


class TestSystemInstruction:
    def test_declares_both_categories(self):
        assert "#### Category 1: Verifiably False Objective Information" in SYSTEM_INSTRUCTION
        assert "#### Category 2: High-Risk Misinformation" in SYSTEM_INSTRUCTION

    @pytest.mark.parametrize(
        "domain",
        ["**Medical & Health:**", "**Financial:**", "**Personal & Public Safety:**", "**Civic Integrity:**"],
    )
    def test_lists_risk_domains(self, domain):
        assert domain in SYSTEM_INSTRUCTION

    def test_silence_is_default_and_final(self):
        assert "Absolute Silence is Default" in SYSTEM_INSTRUCTION
        assert SYSTEM_INSTRUCTION.rstrip().endswith(
            "Immediately terminate output after the correction."
        )


class TestSentinelPolicy:
    def test_starts_silent(self):
        assert SentinelPolicy().state == SentinelState.SILENT

    def test_accurate_statement_stays_silent(self):
        policy = SentinelPolicy()

        utterance = policy.observe(StatementAssessment(statement="Paris is in France."))

        assert utterance is None
        assert [t.target for t in policy.history] == [SentinelState.EVALUATING, SentinelState.SILENT]

    def test_intervention_returns_to_silence(self):
        policy = SentinelPolicy()

        utterance = policy.observe(factual_error())

        assert utterance.startswith(CORRECTION_PREFIX)
        assert policy.state == SentinelState.SILENT
        assert [t.target for t in policy.history] == [
            SentinelState.EVALUATING,
            SentinelState.INTERVENING,
            SentinelState.SILENT,
        ]

    def test_low_confidence_stays_silent(self):
        assert SentinelPolicy(confidence_threshold=0.9).observe(factual_error(0.5)) is None

    def test_threshold_is_inclusive(self):
        assert SentinelPolicy(confidence_threshold=0.5).observe(factual_error(0.5)) is not None

    @pytest.mark.parametrize("kind", list(NonTrigger))
    def test_non_triggers_never_intervene(self, kind):
        assessment = factual_error().model_copy(update={"non_trigger": kind})

        assert SentinelPolicy().observe(assessment) is None

    def test_one_utterance_per_statement(self):
        policy = SentinelPolicy()

        utterances = [policy.observe(factual_error()) for _ in range(3)]

        assert len(utterances) == 3
        assert sum(t.target == SentinelState.INTERVENING for t in policy.history) == 3


class TestStatementAssessment:
    def test_trigger_requires_correction(self):
        with pytest.raises(ValidationError):
            StatementAssessment(statement="x", category=TriggerCategory.FACTUAL_ERROR)

    def test_high_risk_requires_topic(self):
        with pytest.raises(ValidationError):
            StatementAssessment(
                statement="x", category=TriggerCategory.HIGH_RISK, correction="y"
            )

    def test_confidence_bounds(self):
        with pytest.raises(ValidationError):
            StatementAssessment(statement="x", confidence=1.2)
