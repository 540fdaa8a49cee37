from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class EventType(str, Enum):
    """Kinds of events published by a session context."""

    MODEL_SET = "model_set"
    CONFIG_SET = "config_set"


class SessionEvent(BaseModel):
    type: EventType
    content: dict[str, Any] = Field(default_factory=dict)
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())
