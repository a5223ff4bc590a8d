"""File-system capability injected into catalog bootstrap code."""

from pathlib import Path
from typing import Protocol

from localekit.filesystem import directories, files
from localekit.filesystem.files import PathLike


class FileSystem(Protocol):
    """Operations the catalog bootstrap needs from the file system."""

    def create_directory(self, path: PathLike) -> bool: ...

    def dir_exists(self, path: PathLike) -> bool: ...

    def file_exists(self, path: PathLike) -> bool: ...

    def export_resource(
        self, package: str, resource: str, destination: PathLike
    ) -> Path: ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def create_directory(self, path: PathLike) -> bool:
        return directories.create_directory(path)

    def dir_exists(self, path: PathLike) -> bool:
        return directories.dir_exists(path)

    def file_exists(self, path: PathLike) -> bool:
        return files.file_exists(path)

    def export_resource(
        self, package: str, resource: str, destination: PathLike
    ) -> Path:
        return files.export_resource(package, resource, destination)
