from pathlib import Path
from typing import NamedTuple

from src.domain.value_objects.plan_file_event import PlanFileEvent, PlanFileEventKind


class FileStamp(NamedTuple):
    mtime_ns: int
    size: int


DirectorySnapshot = dict[Path, FileStamp]


def take_snapshot(directory: Path) -> DirectorySnapshot:
    """Stamp every visible regular file directly inside ``directory``.

    A missing directory yields an empty snapshot, so removing the directory
    shows up as deletions.
    """
    snapshot: DirectorySnapshot = {}
    try:
        entries = list(directory.iterdir())
    except FileNotFoundError:
        return snapshot

    for entry in entries:
        if entry.name.startswith("."):
            continue
        try:
            stat = entry.stat()
        except OSError:
            # Removed between listing and stat
            continue
        if entry.is_file():
            snapshot[entry] = FileStamp(stat.st_mtime_ns, stat.st_size)
    return snapshot


def diff_snapshots(old: DirectorySnapshot, new: DirectorySnapshot) -> list[PlanFileEvent]:
    events: list[PlanFileEvent] = []
    for path in sorted(new.keys() - old.keys()):
        events.append(PlanFileEvent(kind=PlanFileEventKind.CREATED, path=path))
    for path in sorted(old.keys() & new.keys()):
        if old[path] != new[path]:
            events.append(PlanFileEvent(kind=PlanFileEventKind.MODIFIED, path=path))
    for path in sorted(old.keys() - new.keys()):
        events.append(PlanFileEvent(kind=PlanFileEventKind.DELETED, path=path))
    return events
