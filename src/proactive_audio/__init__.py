"""Silent Sentinel: proactive-audio configuration for Gemini Live sessions."""

__version__ = "0.1.0"
