"""Tests for JSON settings."""

import json

from lexerstyles.core.color_table import ColorTable
from lexerstyles.core.models import Language, Rgba
from lexerstyles.core.surface import RecordingSurface
from lexerstyles.services.settings import (
    ApplicationSettings,
    FontSettings,
    SettingsManager,
)


def test_defaults_when_file_missing(settings_path):
    settings = SettingsManager(settings_path).settings
    assert settings.font.font_family == "Consolas"
    assert settings.font.font_size == 10
    assert settings.folding.margin == 2
    assert settings.detection.sniff_xml_contents


def test_round_trip(settings_path):
    manager = SettingsManager(settings_path)
    settings = manager.settings
    settings.font = FontSettings("Cascadia Mono", 13)
    settings.folding.marker_back = "#202020"
    settings.detection.sniff_xml_contents = False
    settings.last_language = "PYTHON"
    assert manager.save()

    loaded = SettingsManager(settings_path).settings
    assert loaded == settings


def test_corrupt_file_gives_defaults(settings_path):
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text("{not json", encoding="utf-8")
    assert SettingsManager(settings_path).settings == ApplicationSettings()


def test_partial_file_keeps_other_defaults(settings_path):
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text(json.dumps({"font": {"font_size": 14}}), encoding="utf-8")
    settings = SettingsManager(settings_path).settings
    assert settings.font.font_size == 14
    assert settings.font.font_family == "Consolas"
    assert settings.folding.width == 20


def test_observers_notified_on_save(settings_path):
    manager = SettingsManager(settings_path)
    seen = []
    manager.add_observer(seen.append)
    manager.save(ApplicationSettings(last_language="SQL"))
    assert [s.last_language for s in seen] == ["SQL"]


def test_reset(settings_path):
    manager = SettingsManager(settings_path)
    manager.settings.font.font_size = 20
    manager.save()
    assert manager.reset() == ApplicationSettings()
    assert SettingsManager(settings_path).settings.font.font_size == 10


def test_colors_file(settings_path, tmp_path):
    manager = SettingsManager(settings_path)
    assert manager.colors_file(Language.CS) == settings_path.parent / "colors" / "CS.xml"

    manager.settings.colors_directory = str(tmp_path / "custom")
    assert manager.colors_file(Language.SQL) == tmp_path / "custom" / "SQL.xml"


def test_remember_language(settings_path):
    manager = SettingsManager(settings_path)
    manager.remember_language(Language.YAML)
    assert SettingsManager(settings_path).settings.last_language == "YAML"


class TestApplier:

    def test_font_and_folding_from_settings(self):
        settings = ApplicationSettings()
        settings.font.font_family = "Menlo"
        settings.folding.width = 16
        settings.folding.marker_fore = "#102030"

        surface = RecordingSurface()
        settings.create_applier().apply(Language.CS, surface)
        assert surface.font_family == "Menlo"
        assert surface.fold_margin.width == 16
        assert surface.fold_margin.fore == Rgba(0x10, 0x20, 0x30)

    def test_invalid_color_falls_back(self):
        settings = ApplicationSettings()
        settings.folding.marker_back = "grey"
        assert settings.folding_config().marker_back == Rgba(0xA0, 0xA0, 0xA0)

    def test_uses_given_table(self):
        table = ColorTable()
        table.set_color(Language.CS, "CommentFore", Rgba(1, 2, 3))
        surface = RecordingSurface()
        ApplicationSettings().create_applier(colors=table).apply(Language.CS, surface)
        assert surface.style(1).fore == Rgba(1, 2, 3)
