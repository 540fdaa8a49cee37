"""Live session configuration sent to the Gemini Live API.

``SessionConfiguration`` mirrors the camelCase setup payload of a live
session and is frozen: a new submission always builds a new object.
"""

from typing import Any, Optional

from google.genai import types
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from proactive_audio.prompts import SYSTEM_INSTRUCTION

# Native-audio model with proactive audio support
LIVE_MODEL = "models/gemini-2.5-flash-native-audio-preview-09-2025"


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class GoogleSearch(_WireModel):
    model_config = ConfigDict(extra="forbid")


class ToolDeclaration(_WireModel):
    """One tool the remote model may call; serializes as e.g. `{"googleSearch": {}}`."""

    model_config = ConfigDict(extra="forbid")

    google_search: Optional[GoogleSearch] = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def google_search_tool() -> ToolDeclaration:
    return ToolDeclaration(google_search=GoogleSearch())


class InstructionPart(_WireModel):
    text: str = Field(min_length=1)


class SystemInstruction(_WireModel):
    parts: tuple[InstructionPart, ...] = Field(min_length=1)

    @property
    def text(self) -> str:
        return "".join(part.text for part in self.parts)


class Proactivity(_WireModel):
    """Whether the session may speak without an explicit user turn."""

    proactive_audio: bool = False


class SessionConfiguration(_WireModel):
    """Configuration for a proactive-audio live session.

    Attributes:
        response_modalities: Output channels of the session. Must not be empty.
        system_instruction: The policy document governing the remote model.
        proactivity: Permission to emit output unprompted.
        tools: Tool declarations, forwarded as declared.
    """

    response_modalities: tuple[types.Modality, ...] = Field(min_length=1)
    system_instruction: SystemInstruction
    proactivity: Proactivity = Field(default_factory=Proactivity)
    tools: tuple[ToolDeclaration, ...] = ()

    def to_payload(self) -> dict[str, Any]:
        """Return the wire payload (camelCase, JSON-compatible)."""
        payload = self.model_dump(mode="json", by_alias=True, exclude={"tools"})
        payload["tools"] = [tool.to_payload() for tool in self.tools]
        return payload

    def to_live_connect_config(self) -> types.LiveConnectConfig:
        """Convert to the google-genai type accepted by ``aio.live.connect``."""
        return types.LiveConnectConfig(
            response_modalities=list(self.response_modalities),
            system_instruction=types.Content(
                parts=[types.Part(text=part.text) for part in self.system_instruction.parts]
            ),
            proactivity=types.ProactivityConfig(
                proactive_audio=self.proactivity.proactive_audio
            ),
            tools=[types.Tool.model_validate(tool.to_payload()) for tool in self.tools],
        )


def select_model() -> str:
    return LIVE_MODEL


def build_session_configuration() -> SessionConfiguration:
    """Build the silent-sentinel configuration: audio out, proactive, search."""
    return SessionConfiguration(
        response_modalities=(types.Modality.AUDIO,),
        system_instruction=SystemInstruction(
            parts=(InstructionPart(text=SYSTEM_INSTRUCTION),)
        ),
        proactivity=Proactivity(proactive_audio=True),
        tools=(google_search_tool(),),
    )
