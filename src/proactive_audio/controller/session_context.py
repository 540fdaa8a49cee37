import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from google.genai import types

from proactive_audio.core.config.live_config import SessionConfiguration
from proactive_audio.core.event import EventType, SessionEvent
from proactive_audio.core.event_stream import SessionEventStream


class SessionContextError(Exception):
    """Raised when a session context receives submissions out of order."""


class SessionContext(ABC):
    """Owner of a live session's model and configuration.

    Both setters take full replacement values; there are no merge semantics.
    """

    @abstractmethod
    def set_model(self, model: str) -> None:
        pass

    @abstractmethod
    def set_config(self, config: SessionConfiguration) -> None:
        pass


class LiveSessionContext(SessionContext):
    """In-process session context holding the declared model and configuration.

    It does not open a connection. ``connect_kwargs()`` returns the arguments
    of ``genai.Client().aio.live.connect`` for whatever layer does.
    """

    def __init__(
        self,
        event_stream: Optional[SessionEventStream] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.model: Optional[str] = None
        self.config: Optional[SessionConfiguration] = None
        self.submission_count = 0
        self._event_stream = event_stream
        self._logger = logger or logging.getLogger(__name__)

    def set_model(self, model: str) -> None:
        self.model = model
        self._logger.debug(f"Live session model set to {model}")
        self._publish(EventType.MODEL_SET, {"model": model})

    def set_config(self, config: SessionConfiguration) -> None:
        if self.model is None:
            raise SessionContextError(
                "A model must be set before the session configuration"
            )
        self.config = config
        self.submission_count += 1
        self._logger.debug(
            f"Live session configuration replaced (submission {self.submission_count})"
        )
        self._publish(EventType.CONFIG_SET, {"model": self.model, "config": config.to_payload()})

    def connect_config(self) -> types.LiveConnectConfig:
        if self.model is None or self.config is None:
            raise SessionContextError(
                "Both a model and a configuration are required to connect"
            )
        return self.config.to_live_connect_config()

    def connect_kwargs(self) -> dict[str, Any]:
        """Arguments for ``client.aio.live.connect(**kwargs)``."""
        config = self.connect_config()
        return {"model": self.model, "config": config}

    def _publish(self, event_type: EventType, content: dict[str, Any]) -> None:
        if self._event_stream is not None:
            self._event_stream.add_event(SessionEvent(type=event_type, content=content))
