"""Republishes the active plan whenever a plan file changes.

The watcher polls a snapshot of the plans directory in a background asyncio
task and turns the differences into created/modified/deleted events. Every
qualifying ``.md`` event triggers a reload of the active plan, except the one
event swallowed after ``set_updating_from_ui(True)``: a writer that already
knows the new state arms that latch before writing so its own change is not
reloaded back.
"""

from __future__ import annotations

import asyncio
import contextlib
import threading
from collections.abc import AsyncIterator, Callable
from pathlib import Path

from loguru import logger

from src.domain.entities.plan import Plan
from src.domain.errors import PlanError, StorageError
from src.domain.ports.plan_repo_port import PlanRepoPort
from src.domain.ports.plan_watch_port import PlanWatchPort, PlanWatchState, StateCallback
from src.domain.value_objects.plan_file_event import PlanFileEvent
from src.infrastructure.watching.directory_snapshot import (
    DirectorySnapshot,
    diff_snapshots,
    take_snapshot,
)

DEFAULT_POLL_INTERVAL = 1.0
DEFAULT_SUPPRESSION_DELAY = 0.1


class PlanChangeWatcher(PlanWatchPort):
    def __init__(
        self,
        repo: PlanRepoPort,
        plans_dir: Path,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        suppression_delay: float = DEFAULT_SUPPRESSION_DELAY,
    ) -> None:
        self.repo = repo
        self.plans_dir = plans_dir
        self.poll_interval = poll_interval
        self.suppression_delay = suppression_delay

        self._state = PlanWatchState()
        self._subscribers: list[StateCallback] = []
        self._snapshot: DirectorySnapshot = {}

        self._latch_lock = threading.Lock()
        self._updating_from_ui = False

        self._running = False
        self._stop_event: asyncio.Event | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> PlanWatchState:
        return self._state

    @property
    def current_plan(self) -> Plan | None:
        return self._state.plan

    @property
    def reload_counter(self) -> int:
        return self._state.reload_counter

    @property
    def is_running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Begin watching. A second call while running only logs a warning."""
        if self._running:
            logger.warning("Plan watcher already running for {}", self.plans_dir)
            return

        try:
            await asyncio.to_thread(self.plans_dir.mkdir, parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError("create directory", self.plans_dir, str(e)) from e
        self._snapshot = await asyncio.to_thread(take_snapshot, self.plans_dir)
        self._running = True
        logger.info("Watching plans directory: {}", self.plans_dir)

        await self.reload_now()

        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self._watch_loop(), name="plan-change-watcher")

    async def stop(self) -> None:
        if not self._running:
            logger.debug("Plan watcher already stopped")
            return

        self._running = False
        if self._stop_event is not None:
            self._stop_event.set()
        if self._task is not None:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
        self._task = None
        self._stop_event = None
        self._snapshot = {}
        logger.info("Stopped watching {}", self.plans_dir)

    def set_updating_from_ui(self, updating: bool) -> None:
        with self._latch_lock:
            self._updating_from_ui = updating
        logger.debug("UI update flag set to {}", updating)

    def _consume_ui_latch(self) -> bool:
        with self._latch_lock:
            if not self._updating_from_ui:
                return False
            self._updating_from_ui = False
            return True

    def subscribe(self, callback: StateCallback) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    async def updates(self) -> AsyncIterator[PlanWatchState]:
        """Yield the current state, then every state published afterwards."""
        queue: asyncio.Queue[PlanWatchState] = asyncio.Queue()
        unsubscribe = self.subscribe(queue.put_nowait)
        try:
            yield self._state
            while True:
                yield await queue.get()
        finally:
            unsubscribe()

    async def reload_now(self) -> Plan | None:
        try:
            plan = await self.repo.get_active_plan()
        except PlanError as e:
            logger.warning("Failed to reload active plan: {}", e)
            plan = None
        except Exception:
            logger.exception("Unexpected error while reloading active plan")
            plan = None

        if plan is not None:
            logger.info("Loaded plan '{}' with {} tasks", plan.name, len(plan.tasks))
        else:
            logger.info("No active plan found")

        self._publish(PlanWatchState(plan=plan, reload_counter=self._state.reload_counter + 1))
        return plan

    async def check_for_changes(self) -> int:
        """Scan the directory once and dispatch the resulting events.

        Returns the number of reloads performed.
        """
        current = await asyncio.to_thread(take_snapshot, self.plans_dir)
        events = diff_snapshots(self._snapshot, current)
        self._snapshot = current

        reloads = 0
        for event in events:
            if event.is_markdown and await self._handle_event(event):
                reloads += 1
        return reloads

    async def _handle_event(self, event: PlanFileEvent) -> bool:
        if self._consume_ui_latch():
            logger.debug("Ignoring {} event for {} (update from UI)", event.kind.value, event.path.name)
            if self.suppression_delay > 0:
                await asyncio.sleep(self.suppression_delay)
            return False

        logger.info("Plan file {}: {}", event.kind.value, event.path.name)
        await self.reload_now()
        return True

    async def _watch_loop(self) -> None:
        assert self._stop_event is not None
        while self._running:
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=self.poll_interval)
                break
            except TimeoutError:
                pass

            try:
                await self.check_for_changes()
            except Exception:
                logger.exception("Error in plan watch loop")

    def _publish(self, state: PlanWatchState) -> None:
        self._state = state
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception:
                logger.exception("Plan watch subscriber failed")
