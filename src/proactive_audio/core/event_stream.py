import asyncio
import inspect
import logging
from typing import Any, Callable, Optional

from proactive_audio.core.event import SessionEvent

Subscriber = Callable[[SessionEvent], Any]


class SessionEventStream:
    """Fans session events out to subscribers.

    A subscriber may be a plain function or a coroutine function; coroutines
    run as tasks on the current event loop. Subscriber failures are logged and
    never reach the publisher.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._subscribers: list[Subscriber] = []
        self._pending_tasks: set[asyncio.Task] = set()
        self._logger = logger or logging.getLogger(__name__)

    def subscribe(self, callback: Subscriber) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def add_event(self, event: SessionEvent) -> None:
        """Notify every subscriber, in subscription order."""
        for callback in list(self._subscribers):
            try:
                result = callback(event)
            except Exception as e:
                self._logger.error(f"Error in event subscriber: {e}")
                continue
            if inspect.iscoroutine(result):
                self._schedule(result)

    def _schedule(self, coro) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            self._logger.error(
                "Async event subscriber skipped: no running event loop"
            )
            return
        task = loop.create_task(coro)
        self._pending_tasks.add(task)
        task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Task) -> None:
        self._pending_tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            self._logger.error(f"Error in async event subscriber: {task.exception()}")
