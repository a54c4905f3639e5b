"""Shared fixtures for lexerstyles tests."""

import pytest

from lexerstyles.core.color_table import ColorTable
from lexerstyles.core.dispatcher import StyleApplier
from lexerstyles.core.keywords import KeywordCatalog
from lexerstyles.core.languages import LanguageCatalog
from lexerstyles.core.surface import RecordingSurface
from lexerstyles.services.persistence import PersistenceCodec


@pytest.fixture
def color_table():
    return ColorTable()


@pytest.fixture
def keyword_catalog():
    return KeywordCatalog()


@pytest.fixture
def catalog():
    return LanguageCatalog()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def applier(color_table, keyword_catalog):
    return StyleApplier(colors=color_table, keywords=keyword_catalog)


@pytest.fixture
def codec(color_table):
    return PersistenceCodec(color_table)


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "config" / "settings.json"
