from proactive_audio.core.config.live_config import (
    LIVE_MODEL,
    GoogleSearch,
    InstructionPart,
    Proactivity,
    SessionConfiguration,
    SystemInstruction,
    ToolDeclaration,
    build_session_configuration,
    google_search_tool,
    select_model,
)
from proactive_audio.core.config.sentinel_config import SentinelConfig, load_sentinel_config

__all__ = [
    'LIVE_MODEL',
    'GoogleSearch',
    'InstructionPart',
    'Proactivity',
    'SessionConfiguration',
    'SystemInstruction',
    'ToolDeclaration',
    'build_session_configuration',
    'google_search_tool',
    'select_model',
    'SentinelConfig',
    'load_sentinel_config',
]
