"""Controller that keeps a live session in silent-sentinel mode.

On mount, and whenever the identity of ``set_model`` or ``set_config``
changes, the controller selects the model, builds a fresh
``SessionConfiguration`` and hands both to the session context, model first.
Nothing is awaited, validated or retried here: failures raised by the setters
belong to the session context and propagate to the caller unchanged.
"""

import asyncio
import inspect
from typing import Any, Callable, Optional

from proactive_audio.controller.effect import DependencyEffect
from proactive_audio.controller.session_context import SessionContext
from proactive_audio.core.config.live_config import (
    SessionConfiguration,
    build_session_configuration,
    select_model,
)
from proactive_audio.core.logger import logger

SetModel = Callable[[str], Any]
SetConfig = Callable[[SessionConfiguration], Any]


class ProactiveAudioController:
    def __init__(self, set_model: SetModel, set_config: SetConfig):
        self._set_model = set_model
        self._set_config = set_config
        self._effect = DependencyEffect(self._submit)
        self._pending_tasks: set[asyncio.Task] = set()
        self.mounted = False

    @classmethod
    def from_context(cls, context: SessionContext) -> "ProactiveAudioController":
        return cls(context.set_model, context.set_config)

    @property
    def dependencies(self) -> tuple[SetConfig, SetModel]:
        return (self._set_config, self._set_model)

    @property
    def submission_count(self) -> int:
        return self._effect.run_count

    def mount(self) -> None:
        """Activate the controller; submits unless already applied for these setters."""
        self.mounted = True
        self._sync()

    def rebind(
        self,
        set_model: Optional[SetModel] = None,
        set_config: Optional[SetConfig] = None,
    ) -> None:
        """Swap the injected setters. A changed setter triggers one resubmission."""
        if set_model is not None:
            self._set_model = set_model
        if set_config is not None:
            self._set_config = set_config
        if self.mounted:
            self._sync()

    def bind_context(self, context: SessionContext) -> None:
        self.rebind(set_model=context.set_model, set_config=context.set_config)

    def unmount(self) -> None:
        """Deactivate. The remote session keeps its configuration."""
        self.mounted = False
        self._effect.reset()

    def _sync(self) -> None:
        if not self._effect.run(self.dependencies):
            logger.debug("Session dependencies unchanged, skipping resubmission")

    def _submit(self) -> None:
        model = select_model()
        config = build_session_configuration()
        logger.info(f"Submitting proactive-audio configuration for {model}")
        self._dispatch(self._set_model(model))
        self._dispatch(self._set_config(config))

    def _dispatch(self, result: Any) -> None:
        # Async setters are scheduled in call order and never awaited.
        if not inspect.iscoroutine(result):
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            result.close()
            raise
        task = loop.create_task(result)
        self._pending_tasks.add(task)
        task.add_done_callback(self._pending_tasks.discard)
