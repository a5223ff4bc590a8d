"""File helpers: path normalization, existence checks and resource export."""

import os
import shutil
import tempfile
from importlib import resources
from pathlib import Path
from typing import Tuple, Union

from localekit.errors import ResourceNotFoundError

PathLike = Union[str, "os.PathLike[str]"]


def normalize_path(path: PathLike) -> Path:
    """Collapse redundant separators and ``.``/``..`` segments.

    Backslashes are treated as separators so Windows-style paths from
    configuration files work on every platform.
    """
    text = os.fspath(path).replace("\\", "/")
    return Path(os.path.normpath(text))


def file_exists(path: PathLike) -> bool:
    """Check that ``path`` exists and is a regular file."""
    return normalize_path(path).is_file()


def split_extension(name: str) -> Tuple[str, str]:
    """Split a file name into (stem, extension without the dot).

    Example:
        >>> split_extension("locale-en.properties")
        ('locale-en', 'properties')
        >>> split_extension("README")
        ('README', '')
    """
    stem, ext = os.path.splitext(os.path.basename(name))
    return stem, ext[1:]


def export_resource(
    package: str,
    resource: str,
    destination: PathLike,
    overwrite: bool = False,
) -> Path:
    """Copy a packaged resource file to the filesystem.

    The content is written to a temporary file next to ``destination`` and
    moved into place once complete, so an interrupted copy never leaves a
    truncated file behind.

    Args:
        package: Dotted name of the package holding the resource.
        resource: File name of the resource inside the package.
        destination: Target file path; its directory must exist.
        overwrite: Replace an existing destination file.

    Returns:
        The normalized destination path.

    Raises:
        ResourceNotFoundError: If the package or resource does not exist.
        FileExistsError: If destination exists and overwrite is False.
        OSError: If the destination cannot be written.
    """
    target = normalize_path(destination)
    description = f"{package}/{resource}"
    try:
        source = resources.files(package).joinpath(resource)
        found = source.is_file()
    # TypeError: not a package; ValueError: empty package name
    except (ModuleNotFoundError, TypeError, ValueError) as e:
        raise ResourceNotFoundError(
            f"Resource package not found: {package}", source=description
        ) from e

    if not found:
        raise ResourceNotFoundError(
            f"Resource not found: {description}", source=description
        )
    if target.exists() and not overwrite:
        raise FileExistsError(f"Destination already exists: {target}")

    fd, partial = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".part", dir=target.parent
    )
    try:
        with os.fdopen(fd, "wb") as dst, source.open("rb") as src:
            shutil.copyfileobj(src, dst)
        # mkstemp creates the file owner-only
        os.chmod(partial, 0o644)
        if overwrite:
            os.replace(partial, target)
        else:
            # link fails with FileExistsError if the target appeared meanwhile
            os.link(partial, target)
    finally:
        if os.path.exists(partial):
            os.unlink(partial)
    return target
