"""Tests for localekit.i18n.bootstrap module."""

from pathlib import Path

import pytest

from localekit.errors import ResourceNotFoundError
from localekit.filesystem import LocalFileSystem
from localekit.i18n import (
    BundledSource,
    ExternalCatalogBootstrap,
    ExternalSource,
    LanguageTag,
    PropertiesCatalogLoader,
)
from localekit.operations import OperationStatus

SEED = BundledSource.for_language(LanguageTag.EN)


@pytest.mark.unit
class TestExternalCatalogBootstrap:
    """Tests for ExternalCatalogBootstrap.ensure()."""

    def test_existing_file_left_untouched(self, mock_filesystem, mock_logger):
        target = ExternalSource(Path("/opt/app/locale/messages.properties"))
        bootstrap = ExternalCatalogBootstrap(mock_filesystem, log=mock_logger)

        result = bootstrap.ensure(target, SEED)

        assert result.is_success
        assert result.data == target
        mock_filesystem.create_directory.assert_not_called()
        mock_filesystem.export_resource.assert_not_called()

    def test_missing_file_is_exported_from_seed(self, mock_filesystem, mock_logger):
        mock_filesystem.file_exists.return_value = False
        target = ExternalSource(Path("/opt/app/locale/messages.properties"))

        result = ExternalCatalogBootstrap(mock_filesystem, log=mock_logger).ensure(
            target, SEED
        )

        assert result.is_success
        mock_filesystem.export_resource.assert_called_once_with(
            "localekit.locales", "locale-en.properties", target.path
        )
        assert mock_logger.info.call_args.args[0] == "locale_file_created"

    def test_missing_directory_is_created(self, mock_filesystem, mock_logger):
        mock_filesystem.dir_exists.side_effect = [False, True]
        mock_filesystem.file_exists.return_value = False
        target = ExternalSource(Path("/opt/app/locale/messages.properties"))

        result = ExternalCatalogBootstrap(mock_filesystem, log=mock_logger).ensure(
            target, SEED
        )

        assert result.is_success
        mock_filesystem.create_directory.assert_called_once_with(
            Path("/opt/app/locale")
        )
        events = [c.args[0] for c in mock_logger.info.call_args_list]
        assert events == ["locale_directory_created", "locale_file_created"]

    def test_directory_not_created(self, mock_filesystem, mock_logger):
        mock_filesystem.dir_exists.return_value = False
        mock_filesystem.create_directory.return_value = False
        target = ExternalSource(Path("/readonly/locale/messages.properties"))

        result = ExternalCatalogBootstrap(mock_filesystem, log=mock_logger).ensure(
            target, SEED
        )

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "DIRECTORY_NOT_CREATED"
        mock_filesystem.export_resource.assert_not_called()
        assert mock_logger.error.call_args.args[0] == "locale_directory_not_created"

    @pytest.mark.parametrize(
        "error",
        [ResourceNotFoundError("Resource not found"), PermissionError("denied")],
    )
    def test_export_failure(self, mock_filesystem, mock_logger, error):
        mock_filesystem.file_exists.return_value = False
        mock_filesystem.export_resource.side_effect = error
        target = ExternalSource(Path("/opt/app/locale/messages.properties"))

        result = ExternalCatalogBootstrap(mock_filesystem, log=mock_logger).ensure(
            target, SEED
        )

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "CATALOG_NOT_EXPORTED"
        assert mock_logger.error.call_args.args[0] == "locale_file_not_created"

    @pytest.mark.parametrize("name", ["messages.yml", "messages.yaml", "messages"])
    def test_format_mismatch_is_not_seeded(self, mock_filesystem, mock_logger, name):
        """A properties seed is never written into a file of another format."""
        mock_filesystem.file_exists.return_value = False
        target = ExternalSource(Path("/opt/app/locale") / name)

        result = ExternalCatalogBootstrap(mock_filesystem, log=mock_logger).ensure(
            target, SEED
        )

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "CATALOG_NOT_EXPORTED"
        mock_filesystem.export_resource.assert_not_called()
        assert mock_logger.error.call_args.args[0] == "locale_file_format_mismatch"

    def test_extension_case_is_ignored(self, mock_filesystem, mock_logger):
        mock_filesystem.file_exists.return_value = False
        target = ExternalSource(Path("/opt/app/locale/MESSAGES.PROPERTIES"))

        result = ExternalCatalogBootstrap(mock_filesystem, log=mock_logger).ensure(
            target, SEED
        )

        assert result.is_success
        mock_filesystem.export_resource.assert_called_once()

    def test_seed_package_that_is_a_module(self, tmp_path, mock_logger):
        """A seed package naming a plain module fails as CATALOG_NOT_EXPORTED."""
        target = ExternalSource(tmp_path / "messages.properties")
        seed = BundledSource("locale-en.properties", package="localekit.errors")

        result = ExternalCatalogBootstrap(LocalFileSystem(), log=mock_logger).ensure(
            target, seed
        )

        assert result.error_code == "CATALOG_NOT_EXPORTED"
        assert not target.path.exists()

    def test_local_filesystem_end_to_end(self, tmp_path, mock_logger):
        """The seed catalog ends up on disk and loads like the bundled one."""
        target = ExternalSource(tmp_path / "app" / "locale" / "messages.properties")

        result = ExternalCatalogBootstrap(LocalFileSystem(), log=mock_logger).ensure(
            target, SEED
        )

        assert result.is_success
        assert target.path.is_file()
        loader = PropertiesCatalogLoader()
        assert dict(loader.load(target).messages) == dict(loader.load(SEED).messages)

    def test_local_filesystem_keeps_user_edits(self, tmp_path, mock_logger):
        target = ExternalSource(tmp_path / "messages.properties")
        target.path.write_text("greet=Howdy, {name}!\n", encoding="utf-8")

        ExternalCatalogBootstrap(LocalFileSystem(), log=mock_logger).ensure(
            target, SEED
        )

        assert target.path.read_text(encoding="utf-8") == "greet=Howdy, {name}!\n"
