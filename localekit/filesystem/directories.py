"""Directory helpers: creation, existence checks, purging and deletion."""

import shutil
from typing import Iterable

from localekit.errors import NotDeletedError
from localekit.filesystem.files import PathLike, normalize_path, split_extension
from localekit.logging import get_module_logger

logger = get_module_logger()


def dir_exists(path: PathLike) -> bool:
    """Check that ``path`` exists and is a directory."""
    return normalize_path(path).is_dir()


def create_directory(path: PathLike) -> bool:
    """Create a directory and any missing parents.

    Returns:
        True if the directory exists afterwards, False if it could not be
        created (e.g. missing permissions).
    """
    target = normalize_path(path)
    if target.is_dir():
        logger.debug("directory_exists", path=str(target))
        return True
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning("directory_not_created", path=str(target), error=str(e))
        return False
    logger.info("directory_created", path=str(target))
    return True


def delete_dir(path: PathLike) -> bool:
    """Remove a directory tree, or a single file or symlink.

    Symbolic links are removed as links; their targets are never followed.

    Returns:
        True if nothing exists at ``path`` afterwards.
    """
    target = normalize_path(path)
    try:
        if target.is_symlink() or target.is_file():
            target.unlink()
        elif target.is_dir():
            shutil.rmtree(target)
    except OSError as e:
        logger.warning("delete_failed", path=str(target), error=str(e))
    return not (target.exists() or target.is_symlink())


def purge_dir(
    path: PathLike,
    exclude_extensions: Iterable[str] = (),
    recursive: bool = False,
) -> None:
    """Remove the contents of a directory, keeping the directory itself.

    Args:
        path: Directory to purge.
        exclude_extensions: File extensions (without dot, case-insensitive)
            to keep, e.g. ``("jar", "log")``.
        recursive: Also delete sub-directories.

    Raises:
        NotDeletedError: If a file or sub-directory could not be deleted.
    """
    target = normalize_path(path)
    if not target.is_dir():
        return

    excluded = {ext.lower().lstrip(".") for ext in exclude_extensions}
    for entry in target.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            if recursive and not delete_dir(entry):
                raise NotDeletedError(f"Directory {entry} couldn't be deleted")
            continue

        _, ext = split_extension(entry.name)
        if ext.lower() in excluded:
            continue
        try:
            entry.unlink()
        except OSError as e:
            raise NotDeletedError(f"File {entry} couldn't be deleted") from e
