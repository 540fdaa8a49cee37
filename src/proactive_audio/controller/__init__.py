from proactive_audio.controller.effect import DependencyEffect
from proactive_audio.controller.session_context import (
    LiveSessionContext,
    SessionContext,
    SessionContextError,
)
from proactive_audio.controller.proactive_audio_controller import ProactiveAudioController

__all__ = [
    'DependencyEffect',
    'LiveSessionContext',
    'SessionContext',
    'SessionContextError',
    'ProactiveAudioController',
]
