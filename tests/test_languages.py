"""Tests for file name to language resolution."""

import pytest

from lexerstyles.core.languages import ExtensionEntry, LanguageCatalog
from lexerstyles.core.models import Language


class TestResolve:

    @pytest.mark.parametrize("name, expected", [
        ("Program.cs", Language.CS),
        ("main.cpp", Language.CPP),
        ("header.H", Language.CPP),
        ("build.xml", Language.XML),
        ("query.sql", Language.SQL),
        ("run.bat", Language.BATCH),
        ("readme.txt", Language.TEXT),
        ("setup.nsi", Language.NSIS),
        ("setup.iss", Language.INNOSETUP),
        ("unit.pas", Language.PASCAL),
        ("index.php", Language.PHP),
        ("index.html", Language.HTML),
        ("profile.ps1", Language.POWERSHELL),
        ("config.ini", Language.INI),
        ("tool.py", Language.PYTHON),
        ("compose.yml", Language.YAML),
        ("compose.yaml", Language.YAML),
        ("Main.java", Language.JAVA),
        ("app.js", Language.JAVASCRIPT),
        ("site.css", Language.CSS),
        ("Module.vb", Language.VBDOTNET),
        ("package.json", Language.JSON),
    ])
    def test_known_extensions(self, catalog, name, expected):
        assert catalog.resolve(name) is expected

    def test_extension_match_ignores_case(self, catalog):
        assert catalog.resolve("PROGRAM.CS") is Language.CS

    def test_uses_last_extension_only(self, catalog):
        assert catalog.resolve("archive.cs.bak") is Language.UNKNOWN
        assert catalog.resolve("dir.with.dots/file.py") is Language.PYTHON

    @pytest.mark.parametrize("name", ["Makefile", "notes.unknown", "", ".bashrc"])
    def test_unknown(self, catalog, name):
        assert catalog.resolve(name) is Language.UNKNOWN

    def test_accepts_paths(self, catalog, tmp_path):
        assert catalog.resolve(tmp_path / "a.sql") is Language.SQL


class TestXmlSniffing:

    def test_declaration_detected(self, catalog, tmp_path):
        path = tmp_path / "data.conf"
        path.write_text('<?xml version="1.0"?>\n<root/>\n', encoding="utf-8")
        assert catalog.resolve_path(path) is Language.XML
        assert catalog.is_xml_file(path)

    def test_declaration_after_bom(self, catalog, tmp_path):
        path = tmp_path / "data.conf"
        path.write_text('\ufeff<?xml version="1.0"?><root/>', encoding="utf-8")
        assert catalog.resolve_path(path) is Language.XML

    def test_sniffing_can_be_disabled(self, catalog, tmp_path):
        path = tmp_path / "data.conf"
        path.write_text('<?xml version="1.0"?><root/>', encoding="utf-8")
        assert catalog.resolve_path(path, sniff_xml=False) is Language.UNKNOWN

    def test_plain_file_stays_unknown(self, catalog, tmp_path):
        path = tmp_path / "data.conf"
        path.write_text("key = value\n", encoding="utf-8")
        assert catalog.resolve_path(path) is Language.UNKNOWN

    def test_missing_file_is_not_xml(self, catalog, tmp_path):
        assert not catalog.is_xml_file(tmp_path / "missing.conf")

    def test_extension_wins_over_contents(self, catalog, tmp_path):
        path = tmp_path / "script.py"
        path.write_text('<?xml version="1.0"?>', encoding="utf-8")
        assert catalog.resolve_path(path) is Language.PYTHON


class TestCatalog:

    def test_overlapping_extensions_rejected(self):
        with pytest.raises(ValueError):
            LanguageCatalog([
                ExtensionEntry(Language.CPP, ".h .cpp"),
                ExtensionEntry(Language.CS, ".cs .h"),
            ])

    def test_repeated_extension_within_one_language_allowed(self):
        catalog = LanguageCatalog([ExtensionEntry(Language.CPP, ".h .H")])
        assert catalog.resolve("x.h") is Language.CPP

    def test_extensions_of_language(self, catalog):
        assert catalog.extensions(Language.YAML) == [".yml", ".yaml"]
        assert catalog.extensions(Language.ERRORLIST) == []

    def test_languages_in_registration_order(self, catalog):
        languages = catalog.languages()
        assert languages[0] is Language.XML
        assert Language.ERRORLIST not in languages

    def test_display_names(self):
        assert LanguageCatalog.display_name(Language.CS) == "cs"
        assert LanguageCatalog.display_name(Language.VBDOTNET) == "vb"
        assert LanguageCatalog.display_name(Language.UNKNOWN) == "text"
        assert LanguageCatalog.from_display_name("Inno") is Language.INNOSETUP
        assert LanguageCatalog.from_display_name("cobol") is None

    def test_tokenizers(self):
        assert LanguageCatalog.tokenizer(Language.CS) == "cpp"
        assert LanguageCatalog.tokenizer(Language.NSIS) == 43
        assert LanguageCatalog.tokenizer(Language.TEXT) is None
        assert LanguageCatalog.tokenizer(Language.PHP) == "hypertext"
