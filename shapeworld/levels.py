"""Asynchronous level transitions.

Switching levels unloads the current level scene and loads the new one,
which takes several frames. The session never waits for it: a load puts the
restored shapes in the roster immediately and the level catches up when its
transition task finishes. Until then ``enabled`` is False, which the session
uses to pause rate-driven spawning.

Transitions run as ``asyncio`` tasks on the session's loop. A request made
while no loop is running is kept and started by the next ``pump()``.
Requests are served one at a time in arrival order.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional, Protocol

logger = logging.getLogger(__name__)

LevelLoadedCallback = Callable[[int], None]


class SceneBackend(Protocol):
    """Whatever actually loads and unloads level scenes."""

    async def load(self, level_index: int) -> None:
        ...

    async def unload(self, level_index: int) -> None:
        ...


class HeadlessSceneBackend:
    """Scene backend with no scene graph; each step takes one loop turn."""

    def __init__(self) -> None:
        self.loaded: List[int] = []

    async def load(self, level_index: int) -> None:
        await asyncio.sleep(0)
        self.loaded.append(level_index)

    async def unload(self, level_index: int) -> None:
        await asyncio.sleep(0)
        if level_index in self.loaded:
            self.loaded.remove(level_index)


class AsyncLevelLoader:
    """Fire-and-forget level transitions (``LevelTransitions`` protocol)."""

    def __init__(self, backend: Optional[SceneBackend] = None) -> None:
        self._backend: SceneBackend = backend if backend is not None else HeadlessSceneBackend()
        self._task: Optional[asyncio.Task] = None
        self._pending: List[int] = []
        self._callbacks: List[LevelLoadedCallback] = []
        self.loaded_level = 0
        self.enabled = True

    @property
    def is_transitioning(self) -> bool:
        return bool(self._pending) or (self._task is not None and not self._task.done())

    def on_level_loaded(self, callback: LevelLoadedCallback) -> None:
        """Register *callback* to run with the level index after each transition."""
        self._callbacks.append(callback)

    def begin_transition(self, level_index: int) -> None:
        """Start moving to *level_index* without waiting for it."""
        self.enabled = False
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running loop; level %d transition deferred", level_index)
            self._pending.append(level_index)
            return
        self._schedule(loop, level_index)

    def pump(self) -> int:
        """Start deferred transitions. Must be called from inside a running loop.

        Returns:
            Number of transitions started
        """
        if not self._pending:
            return 0
        loop = asyncio.get_running_loop()
        pending, self._pending = self._pending, []
        for level_index in pending:
            self._schedule(loop, level_index)
        return len(pending)

    async def wait_idle(self) -> None:
        """Wait until every requested transition has finished."""
        self.pump()
        while self._task is not None and not self._task.done():
            await self._task

    def _schedule(self, loop: asyncio.AbstractEventLoop, level_index: int) -> None:
        previous = self._task
        self._task = loop.create_task(
            self._transition(level_index, previous), name=f"level_transition_{level_index}"
        )

    async def _transition(self, level_index: int, previous: Optional[asyncio.Task]) -> None:
        if previous is not None and not previous.done():
            await asyncio.wait([previous])
        self.enabled = False
        try:
            if self.loaded_level > 0:
                await self._backend.unload(self.loaded_level)
            await self._backend.load(level_index)
        except Exception as e:
            logger.error("Level %d transition failed: %s", level_index, e, exc_info=True)
            self.enabled = True
            return

        self.loaded_level = level_index
        self.enabled = True
        logger.info("Level %d active", level_index)
        for callback in self._callbacks:
            callback(level_index)
