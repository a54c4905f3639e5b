"""Tests for Notepad++ style file import."""

import pytest

from lexerstyles.core.color_table import ColorTable
from lexerstyles.core.errors import IOFailureError, ParseFailureError
from lexerstyles.core.models import Language, LanguageSchema, Rgba, StyleEntry
from lexerstyles.services.notepadpp import NotepadPlusPlusTheme


STYLERS = """<?xml version="1.0" encoding="UTF-8" ?>
<NotepadPlus>
    <LexerStyles>
        <LexerType name="cs" desc="C#" ext="">
            <WordsStyle name="DEFAULT" styleID="11" fgColor="000000" bgColor="FFFFFF" fontName="" fontStyle="0" fontSize="" />
            <WordsStyle name="COMMENT" styleID="1" fgColor="FF0000" bgColor="101010" fontName="" fontStyle="2" fontSize="" />
            <WordsStyle name="instruction word" styleID="5" fgColor="0000AA" bgColor="" fontStyle="1" />
            <WordsStyle name="NOT IN TABLE" styleID="99" fgColor="123456" bgColor="654321" fontStyle="0" />
        </LexerType>
        <LexerType name="nsis" desc="NSIS" ext="">
            <WordsStyle name="COMMENT" styleID="1" fgColor="00AA00" bgColor="" fontStyle="0" />
        </LexerType>
    </LexerStyles>
    <GlobalStyles>
        <WidgetStyle name="Global override" styleID="0" fgColor="FFFF80" bgColor="FF8000" fontName="Courier New" fontStyle="0" fontSize="10" />
        <WidgetStyle name="Default Style" styleID="32" fgColor="000000" bgColor="FFFFFF" fontName="Fira Code" fontStyle="0" fontSize="11" />
        <WidgetStyle name="Fold" styleID="0" fgColor="808080" bgColor="F3F3F3" />
    </GlobalStyles>
</NotepadPlus>
"""


@pytest.fixture
def theme():
    return NotepadPlusPlusTheme.from_string(STYLERS)


class TestParse:

    def test_lexers_grouped_by_name(self, theme):
        assert set(theme.lexers) == {"cs", "nsis"}
        assert len(theme.word_styles(Language.CS)) == 4

    def test_word_style_fields(self, theme):
        comment = theme.word_styles(Language.CS)[1]
        assert comment.name == "COMMENT"
        assert comment.style_id == 1
        assert comment.fore == Rgba(255, 0, 0)
        assert comment.back == Rgba(0x10, 0x10, 0x10)
        assert comment.italic and not comment.bold
        assert comment.font_size is None

    def test_empty_color_is_none(self, theme):
        word = theme.word_styles(Language.CS)[2]
        assert word.back is None
        assert word.bold

    def test_widget_styles(self, theme):
        assert theme.default_font() == ("Fira Code", 11)
        assert theme.fold_colors() == (Rgba(0xF3, 0xF3, 0xF3), Rgba(0x80, 0x80, 0x80))

    def test_missing_widget_styles(self):
        theme = NotepadPlusPlusTheme.from_string("<NotepadPlus/>")
        assert theme.default_font() is None
        assert theme.fold_colors() is None
        assert theme.word_styles(Language.CS) == []

    def test_malformed_xml(self):
        with pytest.raises(ParseFailureError):
            NotepadPlusPlusTheme.from_string("<NotepadPlus><LexerType")

    def test_bad_color(self):
        with pytest.raises(ParseFailureError):
            NotepadPlusPlusTheme.from_string(
                '<NotepadPlus><LexerType name="cs">'
                '<WordsStyle name="COMMENT" fgColor="nothex"/>'
                '</LexerType></NotepadPlus>'
            )

    def test_from_file(self, tmp_path):
        path = tmp_path / "stylers.model.xml"
        path.write_text(STYLERS, encoding="utf-8")
        assert "cs" in NotepadPlusPlusTheme.from_file(path).lexers

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(IOFailureError):
            NotepadPlusPlusTheme.from_file(tmp_path / "missing.xml")


class TestApply:

    def test_colors_copied_by_external_name(self, theme, color_table):
        changed = theme.apply_to_table(color_table, Language.CS)
        # DEFAULT and COMMENT fore/back, INSTRUCTION WORD fore only
        assert changed == 5
        assert color_table.color(Language.CS, "CommentFore") == Rgba(255, 0, 0)
        assert color_table.color(Language.CS, "CommentBack") == Rgba(0x10, 0x10, 0x10)
        assert color_table.color(Language.CS, "WordFore") == Rgba(0, 0, 0xAA)
        assert color_table.color(Language.CS, "WordBack") == Rgba(255, 255, 255)

    def test_other_languages_untouched(self, theme, color_table):
        theme.apply_to_table(color_table, Language.CS)
        assert color_table.color(Language.CPP, "CommentFore") == Rgba(0, 128, 0)

    def test_all_matching_slots_set(self, theme):
        schema = LanguageSchema(Language.NSIS, (
            StyleEntry("Comment", "COMMENT", "008000"),
            StyleEntry("CommentBox", "COMMENT", "008000"),
        ))
        table = ColorTable({Language.NSIS: schema})
        assert theme.apply_to_table(table, Language.NSIS) == 2
        assert table.color(Language.NSIS, "CommentFore") == Rgba(0, 0xAA, 0)
        assert table.color(Language.NSIS, "CommentBoxFore") == Rgba(0, 0xAA, 0)

    def test_language_absent_from_theme(self, theme, color_table):
        assert theme.apply_to_table(color_table, Language.SQL) == 0
