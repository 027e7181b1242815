from abc import ABC, abstractmethod
from pathlib import Path


class FileStorePort(ABC):
    """Port for the plain file operations the plan repository needs.

    Failures are reported as ``FileMissingError`` (reading an absent file) or
    ``StorageError`` (any other I/O failure).
    """

    @abstractmethod
    async def read_file(self, path: Path) -> str:
        """Return the UTF-8 text content of a file."""

    @abstractmethod
    async def write_file(self, path: Path, content: str) -> None:
        """Replace a file's content, creating parent directories as needed."""

    @abstractmethod
    def file_exists(self, path: Path) -> bool:
        """Check whether a regular file exists."""

    @abstractmethod
    def directory_exists(self, path: Path) -> bool:
        """Check whether a directory exists."""

    @abstractmethod
    async def create_directory(self, path: Path) -> None:
        """Create a directory and any missing parents."""

    @abstractmethod
    async def list_files(self, path: Path) -> list[Path]:
        """List regular files directly inside a directory, as absolute paths."""

    @abstractmethod
    async def delete_file(self, path: Path) -> None:
        """Delete a file."""
