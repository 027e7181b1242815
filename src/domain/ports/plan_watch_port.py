from abc import ABC, abstractmethod
from collections.abc import Callable

from pydantic import BaseModel

from src.domain.entities.plan import Plan


class PlanWatchState(BaseModel, frozen=True):
    """Snapshot published after every reload attempt.

    ``plan`` is None both when no plan is active and when the reload failed;
    ``reload_counter`` distinguishes a reload from no activity.
    """

    plan: Plan | None = None
    reload_counter: int = 0


StateCallback = Callable[[PlanWatchState], None]


class PlanWatchPort(ABC):
    """Port for observing the active plan as files change."""

    @property
    @abstractmethod
    def state(self) -> PlanWatchState:
        """Latest published state."""

    @abstractmethod
    def set_updating_from_ui(self, updating: bool) -> None:
        """Arm (or disarm) suppression of the next file event."""

    @abstractmethod
    def subscribe(self, callback: StateCallback) -> Callable[[], None]:
        """Register a state callback; returns a function that unregisters it."""

    @abstractmethod
    async def reload_now(self) -> Plan | None:
        """Reload the active plan immediately and publish it."""
