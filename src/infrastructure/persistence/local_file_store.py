from __future__ import annotations

import asyncio
import tempfile
from pathlib import Path

import aiofiles
from filelock import FileLock
from loguru import logger

from src.domain.errors import FileMissingError, StorageError
from src.domain.ports.file_store_port import FileStorePort

LOCK_FILE_NAME = ".plans.lock"


class LocalFileStore(FileStorePort):
    """FileStorePort over the local filesystem.

    Writes go through a temp file in the target directory followed by a
    rename, under a directory-wide file lock, so readers never observe a
    half-written plan.
    """

    def __init__(self, lock_timeout: float = 10.0) -> None:
        self.lock_timeout = lock_timeout

    async def read_file(self, path: Path) -> str:
        if not path.is_file():
            raise FileMissingError(path)
        try:
            async with aiofiles.open(path, encoding="utf-8") as f:
                return await f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError("read", path, str(e)) from e

    async def write_file(self, path: Path, content: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            lock = FileLock(path.parent / LOCK_FILE_NAME, timeout=self.lock_timeout)
            await asyncio.to_thread(lock.acquire)
            try:
                await self._atomic_write(path, content)
            finally:
                await asyncio.to_thread(lock.release)
        except OSError as e:
            raise StorageError("write", path, str(e)) from e

    async def _atomic_write(self, path: Path, content: str) -> None:
        # Hidden .tmp name keeps the temp file out of plan listings
        fd, temp_path_str = tempfile.mkstemp(dir=str(path.parent), prefix=".tmp_", suffix=".tmp")
        temp_path = Path(temp_path_str)

        try:
            async with aiofiles.open(fd, mode="w", encoding="utf-8", closefd=True) as f:
                await f.write(content)
            await asyncio.to_thread(temp_path.replace, path)
            logger.debug("Atomic write completed: {}", path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise

    def file_exists(self, path: Path) -> bool:
        return path.is_file()

    def directory_exists(self, path: Path) -> bool:
        return path.is_dir()

    async def create_directory(self, path: Path) -> None:
        try:
            await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError("create directory", path, str(e)) from e

    async def list_files(self, path: Path) -> list[Path]:
        def _list() -> list[Path]:
            return sorted(entry for entry in path.absolute().iterdir() if entry.is_file())

        try:
            return await asyncio.to_thread(_list)
        except OSError as e:
            raise StorageError("list", path, str(e)) from e

    async def delete_file(self, path: Path) -> None:
        if not path.is_file():
            raise FileMissingError(path)
        try:
            await asyncio.to_thread(path.unlink)
        except OSError as e:
            raise StorageError("delete", path, str(e)) from e
        logger.debug("Deleted file: {}", path)
