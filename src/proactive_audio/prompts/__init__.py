from proactive_audio.prompts.sentinel_prompt import (
    SYSTEM_INSTRUCTION,
    SYSTEM_INSTRUCTION_VERSION,
)

__all__ = ["SYSTEM_INSTRUCTION", "SYSTEM_INSTRUCTION_VERSION"]
