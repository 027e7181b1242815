from src.domain.ports.file_store_port import FileStorePort
from src.domain.ports.plan_repo_port import PlanRepoPort
from src.domain.ports.plan_watch_port import PlanWatchPort, PlanWatchState, StateCallback

__all__ = [
    "FileStorePort",
    "PlanRepoPort",
    "PlanWatchPort",
    "PlanWatchState",
    "StateCallback",
]
