"""Registry of background tasks keyed by identifier."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class TaskEntity:
    """A spawned task and its running flag."""

    task_id: int
    task: asyncio.Task | None
    is_running: bool = True

    def stop(self) -> None:
        """Mark the entity stopped and release the task handle without cancelling it."""
        self.is_running = False
        self.task = None


class TaskRegistry:
    """Spawns coroutines as tasks and remembers them by identifier."""

    def __init__(self) -> None:
        self._tasks: dict[int, TaskEntity] = {}

    async def spawn(self, task_id: int, coro: Coroutine[Any, Any, None]) -> TaskEntity:
        """Start ``coro`` as a task and store it under ``task_id``, replacing any previous entry."""
        entity = TaskEntity(task_id, asyncio.create_task(coro))
        self._tasks[task_id] = entity
        logger.info("spawned task with id %s", task_id)
        return entity

    def get(self, task_id: int) -> TaskEntity | None:
        """Return the entity stored under ``task_id``, or None."""
        return self._tasks.get(task_id)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)