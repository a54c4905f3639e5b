"""Tests for color document export and import."""

import xml.etree.ElementTree as ET

import pytest

from lexerstyles.core.color_table import ColorTable
from lexerstyles.core.errors import IOFailureError, ParseFailureError
from lexerstyles.core.models import Language, Rgba
from lexerstyles.services.persistence import (
    ColorDocument,
    ColorRecord,
    FailureKind,
    PersistenceCodec,
)


RED = Rgba(255, 0, 0)


class TestExport:

    def test_document_in_index_order(self, codec, color_table):
        document = codec.export(Language.CS)
        assert document.language is Language.CS
        assert [r.name for r in document.records] == color_table.semantic_names(Language.CS)

    def test_xml_layout(self, codec, color_table):
        color_table.set_color(Language.CS, "CommentFore", Rgba(0x12, 0x34, 0x56, 0x78))
        text = codec.to_xml(codec.export(Language.CS))
        assert text.startswith('<?xml version="1.0" encoding="utf-8"?>')

        root = ET.fromstring(text)
        assert root.tag == "Colors"
        assert root.get("Lexer") == "CS"
        assert root.get("Label") == "cs"

        record = next(e for e in root.iter("Color") if e.get("Name") == "CommentFore")
        assert record.get("R") == "12"
        assert record.get("G") == "34"
        assert record.get("B") == "56"
        assert record.get("A") == "78"
        assert record.get("HexARGB") == "78123456"

    def test_comment_fore_written_as_packed_argb(self, codec, color_table, tmp_path):
        color_table.set_color(Language.CS, "CommentFore", RED)
        path = tmp_path / "cs.xml"
        assert codec.export_to_file(Language.CS, path)

        root = ET.parse(path).getroot()
        record = next(e for e in root.iter("Color") if e.get("Name") == "CommentFore")
        assert record.get("HexARGB") == "FFFF0000"

    def test_export_unknown_language(self, codec, tmp_path):
        path = tmp_path / "text.xml"
        result = codec.export_to_file_result(Language.TEXT, path)
        assert not result.success
        assert result.error_kind is FailureKind.NOT_FOUND
        assert not path.exists()

    def test_export_failure_leaves_no_files(self, codec, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        result = codec.export_to_file_result(Language.CS, blocker / "cs.xml")
        assert not result.success
        assert result.error_kind is FailureKind.IO_FAILURE
        assert sorted(p.name for p in tmp_path.iterdir()) == ["blocker"]

    def test_export_to_directory_fails_and_writes_nothing(self, codec, tmp_path):
        target = tmp_path / "colors"
        target.mkdir()
        assert not codec.export_to_file(Language.CS, target)
        assert list(target.iterdir()) == []
        assert sorted(p.name for p in tmp_path.iterdir()) == ["colors"]

        result = codec.export_to_file_result(Language.CS, target)
        assert result.error_kind is FailureKind.IO_FAILURE

    def test_export_leaves_no_temp_files(self, codec, tmp_path):
        assert codec.export_to_file(Language.SQL, tmp_path / "sql.xml")
        assert [p.name for p in tmp_path.iterdir()] == ["sql.xml"]

    def test_export_overwrites(self, codec, color_table, tmp_path):
        path = tmp_path / "sql.xml"
        path.write_text("old", encoding="utf-8")
        assert codec.export_to_file(Language.SQL, path)
        assert ET.parse(path).getroot().tag == "Colors"


class TestRoundTrip:

    @pytest.mark.parametrize("language", [Language.CS, Language.HTML, Language.ERRORLIST])
    def test_file_round_trip(self, language, tmp_path):
        source = ColorTable()
        for i, name in enumerate(source.semantic_names(language)):
            source.set_color(language, name, Rgba(i % 256, (i * 7) % 256, 3, 200))

        path = tmp_path / "colors.xml"
        assert PersistenceCodec(source).export_to_file(language, path)

        target = ColorTable()
        assert PersistenceCodec(target).import_from_file(path, language)
        assert target.slots(language) == source.slots(language)

    def test_text_round_trip(self, codec, color_table):
        color_table.set_color(Language.YAML, "CommentFore", RED)
        text = codec.to_xml(codec.export(Language.YAML))

        other = ColorTable()
        assert PersistenceCodec(other).import_document(text, Language.YAML)
        assert other.color(Language.YAML, "CommentFore") == RED


class TestImport:

    def test_missing_file(self, codec, color_table, tmp_path):
        before = color_table.slots(Language.CS)
        result = codec.import_from_file_result(tmp_path / "missing.xml", Language.CS)
        assert not result.success
        assert result.error_kind is FailureKind.NOT_FOUND
        assert not codec.import_from_file(tmp_path / "missing.xml", Language.CS)
        assert color_table.slots(Language.CS) == before

    def test_malformed_file(self, codec, color_table, tmp_path):
        path = tmp_path / "broken.xml"
        path.write_text("<Colors><Color Name=", encoding="utf-8")
        before = color_table.slots(Language.CS)
        result = codec.import_from_file_result(path, Language.CS)
        assert result.error_kind is FailureKind.PARSE_FAILURE
        assert color_table.slots(Language.CS) == before

    def test_unknown_names_skipped(self, codec, color_table):
        text = (
            '<Colors Lexer="CS">'
            '<Color Name="CommentFore" HexARGB="FFFF0000"/>'
            '<Color Name="Retired" HexARGB="FF00FF00"/>'
            '<Color HexARGB="FF0000FF"/>'
            '</Colors>'
        )
        result = codec.import_document_result(text, Language.CS)
        assert result.success
        assert result.applied == 1
        assert result.skipped == ["Retired"]
        assert color_table.color(Language.CS, "CommentFore") == RED

    def test_channels_used_without_hex(self, codec, color_table):
        text = '<Colors><Color Name="CommentFore" R="FF" G="00" B="00" A="FF"/></Colors>'
        assert codec.import_document(text, Language.CS)
        assert color_table.color(Language.CS, "CommentFore") == RED

    def test_hex_wins_over_channels(self, codec, color_table):
        text = '<Colors><Color Name="CommentFore" R="00" G="00" B="00" A="00" HexARGB="FFFF0000"/></Colors>'
        assert codec.import_document(text, Language.CS)
        assert color_table.color(Language.CS, "CommentFore") == RED

    @pytest.mark.parametrize("hex_argb", ["FF0000", "0xFF0000", "+FF0000", "FF_FF_00_00", "FFFF00001"])
    def test_malformed_hex_falls_back_to_channels(self, codec, color_table, hex_argb):
        text = (
            f'<Colors><Color Name="CommentFore" R="FF" G="00" B="00" A="FF" '
            f'HexARGB="{hex_argb}"/></Colors>'
        )
        assert codec.import_document(text, Language.CS)
        assert color_table.color(Language.CS, "CommentFore") == RED
        assert color_table.color(Language.CS, "CommentFore").a == 0xFF

    def test_short_hex_without_channels_rejected(self, codec, color_table):
        text = '<Colors><Color Name="CommentFore" HexARGB="FF0000"/></Colors>'
        result = codec.import_document_result(text, Language.CS)
        assert not result.success
        assert result.error_kind is FailureKind.PARSE_FAILURE
        assert color_table.color(Language.CS, "CommentFore") == Rgba(0, 128, 0)

    def test_signed_channel_rejected(self, codec, color_table):
        text = '<Colors><Color Name="CommentFore" R="-1" G="00" B="00"/></Colors>'
        assert not codec.import_document(text, Language.CS)

    def test_unreadable_color_rejects_whole_document(self, codec, color_table):
        text = (
            '<Colors>'
            '<Color Name="DefaultFore" HexARGB="FFFF0000"/>'
            '<Color Name="CommentFore" HexARGB="zz"/>'
            '</Colors>'
        )
        assert not codec.import_document(text, Language.CS)
        assert color_table.color(Language.CS, "DefaultFore") == Rgba(0, 0, 0)

    def test_import_into_other_language(self, codec, color_table):
        document = ColorDocument(Language.CS, [ColorRecord("CommentFore", RED)])
        assert codec.import_document(document, Language.CPP)
        assert color_table.color(Language.CPP, "CommentFore") == RED
        assert color_table.color(Language.CS, "CommentFore") == Rgba(0, 128, 0)

    def test_import_into_language_without_table(self, codec):
        document = ColorDocument(None, [ColorRecord("CommentFore", RED)])
        result = codec.import_document_result(document, Language.TEXT)
        assert not result.success
        assert result.error_kind is FailureKind.NOT_FOUND

    def test_encoding_detected(self, codec, color_table, tmp_path):
        path = tmp_path / "utf16.xml"
        text = '<Colors><Color Name="CommentFore" HexARGB="FFFF0000"/></Colors>'
        path.write_bytes(b'\xff\xfe' + text.encode("utf-16-le"))
        assert codec.import_from_file(path, Language.CS)
        assert color_table.color(Language.CS, "CommentFore") == RED


class TestParse:

    def test_lexer_by_name_or_label(self):
        assert PersistenceCodec.parse('<Colors Lexer="VBDOTNET"/>').language is Language.VBDOTNET
        assert PersistenceCodec.parse('<Colors Lexer="vb"/>').language is Language.VBDOTNET
        assert PersistenceCodec.parse('<Colors/>').language is None

    def test_wrong_root(self):
        with pytest.raises(ParseFailureError):
            PersistenceCodec.parse("<Styles/>")

    def test_load_document_missing(self, codec, tmp_path):
        with pytest.raises(IOFailureError):
            codec.load_document(tmp_path / "missing.xml")

    def test_document_get(self):
        document = PersistenceCodec.parse(
            '<Colors><Color Name="A" HexARGB="FF000001"/></Colors>')
        assert document.get("A") == Rgba(0, 0, 1)
        assert document.get("B") is None
        assert len(document) == 1
