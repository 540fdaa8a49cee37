"""Pytest configuration and fixtures for proactive-audio tests."""

import pytest
from unittest.mock import Mock

from proactive_audio.controller import LiveSessionContext, ProactiveAudioController
from proactive_audio.core.config import build_session_configuration
from proactive_audio.core.event_stream import SessionEventStream


@pytest.fixture
def mock_logger():
    """Mock logger for tests."""
    return Mock()


@pytest.fixture
def event_stream(mock_logger):
    """Create a SessionEventStream for testing."""
    return SessionEventStream(logger=mock_logger)


@pytest.fixture
def live_context(event_stream, mock_logger):
    """Create a LiveSessionContext publishing to the test event stream."""
    return LiveSessionContext(event_stream=event_stream, logger=mock_logger)


@pytest.fixture
def session_setters():
    """A mock whose children record set_model/set_config calls in order."""
    return Mock(name="session")


@pytest.fixture
def controller(session_setters):
    """Controller bound to the recording setters, not yet mounted."""
    return ProactiveAudioController(session_setters.set_model, session_setters.set_config)


@pytest.fixture
def session_config():
    return build_session_configuration()
