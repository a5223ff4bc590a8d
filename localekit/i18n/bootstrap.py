"""Bootstrap of external catalog files.

Makes sure an external override catalog exists before it is loaded: the
directory is created when missing and the bundled catalog is exported as
the initial content of a missing file.
"""

from typing import Optional

from structlog.stdlib import BoundLogger

from localekit.errors import ResourceNotFoundError
from localekit.filesystem import FileSystem, split_extension
from localekit.i18n.models import BundledSource, ExternalSource
from localekit.logging import get_module_logger
from localekit.operations import OperationResult

logger = get_module_logger()


class ExternalCatalogBootstrap:
    """Prepares the external catalog file using an injected FileSystem.

    Attributes:
        filesystem: File-system capability used for all disk access.
        log: Logger for bootstrap events.
    """

    def __init__(self, filesystem: FileSystem, log: Optional[BoundLogger] = None):
        self.filesystem = filesystem
        self.log = log or logger

    def ensure(self, target: ExternalSource, seed: BundledSource) -> OperationResult:
        """Create the target catalog from ``seed`` if it does not exist yet.

        Args:
            target: External catalog that should exist afterwards.
            seed: Bundled catalog copied when the target file is missing.

        Returns:
            SUCCESS with ``target`` as data, or PERMANENT_ERROR with error code
            DIRECTORY_NOT_CREATED or CATALOG_NOT_EXPORTED.
        """
        directory = target.path.parent
        if not self.filesystem.dir_exists(directory):
            self.filesystem.create_directory(directory)
            if not self.filesystem.dir_exists(directory):
                self.log.error(
                    "locale_directory_not_created",
                    directory=str(directory),
                    hint="check that the application has write access",
                )
                return OperationResult.permanent_error(
                    f"The locale directory ({directory}) couldn't be created",
                    error_code="DIRECTORY_NOT_CREATED",
                )
            self.log.info("locale_directory_created", directory=str(directory))

        if self.filesystem.file_exists(target.path):
            return OperationResult.success(data=target, message="catalog present")

        _, seed_format = split_extension(seed.resource)
        _, target_format = split_extension(target.path.name)
        if seed_format.lower() != target_format.lower():
            self.log.error(
                "locale_file_format_mismatch",
                target=str(target.path),
                seed=seed.describe(),
            )
            return OperationResult.permanent_error(
                f"The locale file ({target.path}) can't be seeded from "
                f"{seed.describe()}: the file formats differ",
                error_code="CATALOG_NOT_EXPORTED",
            )

        try:
            self.filesystem.export_resource(seed.package, seed.resource, target.path)
        except (ResourceNotFoundError, OSError) as e:
            self.log.error(
                "locale_file_not_created",
                target=str(target.path),
                seed=seed.describe(),
                error=str(e),
            )
            return OperationResult.permanent_error(
                f"The locale file ({target.path}) couldn't be created: {e}",
                error_code="CATALOG_NOT_EXPORTED",
            )

        self.log.info(
            "locale_file_created",
            target=str(target.path),
            seed=seed.describe(),
        )
        return OperationResult.success(data=target, message="catalog created")
