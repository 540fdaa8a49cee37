"""
Console subscriber for session events.
"""

from threading import Lock
from typing import Optional

from rich.console import Console

from proactive_audio.core.event import EventType, SessionEvent


class ConsoleSubscriber:
    """Subscriber that reports model and configuration submissions."""

    def __init__(self, console: Optional[Console] = None, minimal: bool = False):
        self.console = console or Console()
        self.minimal = minimal
        self._lock = Lock()

    def handle_event(self, event: SessionEvent) -> None:
        with self._lock:
            if event.type == EventType.MODEL_SET:
                self._handle_model_set_event(event)
            elif event.type == EventType.CONFIG_SET:
                self._handle_config_set_event(event)

    def _handle_model_set_event(self, event: SessionEvent) -> None:
        if not self.minimal:
            self.console.print(f"[dim]model →[/dim] [bold]{event.content['model']}[/bold]")

    def _handle_config_set_event(self, event: SessionEvent) -> None:
        config = event.content.get("config", {})
        modalities = ", ".join(config.get("responseModalities", []))
        proactive = config.get("proactivity", {}).get("proactiveAudio", False)
        tools = ", ".join(
            name for tool in config.get("tools", []) for name in tool
        )
        self.console.print(
            f"[dim]config →[/dim] modalities=[bold]{modalities}[/bold] "
            f"proactive_audio=[bold]{proactive}[/bold] tools=[bold]{tools}[/bold]"
        )
