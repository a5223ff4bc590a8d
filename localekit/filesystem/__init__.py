"""File-system helpers and the injectable FileSystem capability."""

from localekit.filesystem.capability import FileSystem, LocalFileSystem
from localekit.filesystem.directories import (
    create_directory,
    delete_dir,
    dir_exists,
    purge_dir,
)
from localekit.filesystem.files import (
    export_resource,
    file_exists,
    normalize_path,
    split_extension,
)

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "create_directory",
    "delete_dir",
    "dir_exists",
    "purge_dir",
    "export_resource",
    "file_exists",
    "normalize_path",
    "split_extension",
]
