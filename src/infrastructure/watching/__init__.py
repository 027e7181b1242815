from src.infrastructure.watching.directory_snapshot import FileStamp, diff_snapshots, take_snapshot
from src.infrastructure.watching.plan_change_watcher import PlanChangeWatcher

__all__ = ["FileStamp", "PlanChangeWatcher", "diff_snapshots", "take_snapshot"]
