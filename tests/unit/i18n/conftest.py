"""Feature-level fixtures for i18n tests.

Provides catalog files on disk and mocks for the injected capabilities.
"""

from unittest.mock import MagicMock

import pytest
import yaml

from localekit.i18n import ExternalSource, LanguageTag, PropertiesCatalogLoader
from tests.factories.i18n import write_properties_catalog


@pytest.fixture
def properties_catalog(tmp_path):
    """External properties catalog with greet, farewell and plain keys."""
    return write_properties_catalog(tmp_path)


@pytest.fixture
def external_source(properties_catalog):
    return ExternalSource(path=properties_catalog, language=LanguageTag.EN)


@pytest.fixture
def yaml_catalog(tmp_path):
    """YAML catalog with a nested section."""
    data = {
        "greet": "Hello, {name}!",
        "errors": {
            "not_found": "{item} not found",
            "http": {"forbidden": "Access denied"},
        },
        "count": 3,
    }
    path = tmp_path / "messages.yml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def properties_loader():
    return PropertiesCatalogLoader()


@pytest.fixture
def mock_filesystem():
    """FileSystem double where the directory and file already exist."""
    filesystem = MagicMock()
    filesystem.dir_exists.return_value = True
    filesystem.file_exists.return_value = True
    filesystem.create_directory.return_value = True
    return filesystem
