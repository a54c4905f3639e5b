"""Tests for pushing language configurations to a surface."""

import pytest

from lexerstyles.core.dispatcher import (
    DEFAULT_DESCRIPTORS,
    FOLD_DEFAULT,
    SQL_FOLDING,
    StyleApplier,
)
from lexerstyles.core.errors import UnsupportedLanguageError
from lexerstyles.core.models import (
    AutomaticFold,
    FoldingConfig,
    FoldMarker,
    Language,
    MarkerSymbol,
    Rgba,
)
from lexerstyles.core.surface import RecordingSurface, StyleSurface


RED = Rgba(255, 0, 0)


def _first_index(names, name):
    return names.index(name)


def _last_index(names, name):
    return len(names) - 1 - names[::-1].index(name)


def test_every_language_has_descriptor():
    assert set(DEFAULT_DESCRIPTORS) == set(Language)


def test_recording_surface_satisfies_protocol(surface):
    assert isinstance(surface, StyleSurface)


class TestApply:

    def test_call_order(self, applier, surface):
        assert applier.apply(Language.SQL, surface)
        names = surface.call_names()
        assert names[0] == "reset_styles"
        assert _last_index(names, "set_style_attributes") < names.index("select_tokenizer")
        assert names.index("select_tokenizer") < _first_index(names, "set_keywords")
        assert _last_index(names, "set_keywords") < _first_index(names, "set_property")
        assert names[-2:] == ["configure_folding_margin", "enable_automatic_folding"]

    def test_language_properties_before_fold_defaults(self, applier, surface):
        applier.apply(Language.SQL, surface)
        properties = [args[0] for name, args in surface.calls if name == "set_property"]
        expected = [name for name, _ in SQL_FOLDING] + [name for name, _ in FOLD_DEFAULT]
        assert properties == expected

    def test_reset_uses_font(self, color_table, keyword_catalog, surface):
        applier = StyleApplier(colors=color_table, keywords=keyword_catalog,
                               font_family="Courier New", font_size=12)
        applier.apply(Language.CS, surface)
        assert surface.calls[0] == ("reset_styles", ("Courier New", 12))

    def test_styles_read_from_table(self, applier, color_table, surface):
        color_table.set_color(Language.CS, "CommentFore", RED)
        applier.apply(Language.CS, surface)
        comment = surface.style(1)
        assert comment.fore == RED
        assert comment.back == Rgba(255, 255, 255)
        assert not comment.bold

    def test_static_bold_and_italic(self, applier, surface):
        applier.apply(Language.CS, surface)
        assert surface.style(5).bold
        applier.apply(Language.PYTHON, surface)
        assert surface.style(15).italic

    def test_tokenizer_selection(self, applier, surface):
        applier.apply(Language.CS, surface)
        assert surface.tokenizer == "cpp"
        applier.apply(Language.NSIS, surface)
        assert surface.tokenizer == 43

    def test_folding(self, applier, surface):
        applier.apply(Language.CPP, surface)
        margin = surface.fold_margin
        assert (margin.margin, margin.width) == (2, 20)
        assert margin.glyphs[FoldMarker.FOLDER_SUB] is MarkerSymbol.VLINE
        assert margin.fore == Rgba(255, 255, 255)
        assert margin.back == Rgba(0xA0, 0xA0, 0xA0)
        assert surface.automatic_fold == AutomaticFold.SHOW | AutomaticFold.CLICK | AutomaticFold.CHANGE
        assert surface.properties["fold"] == "1"

    def test_custom_folding(self, color_table, keyword_catalog, surface):
        applier = StyleApplier(colors=color_table, keywords=keyword_catalog,
                               folding=FoldingConfig(margin=3, width=14, marker_back=RED))
        applier.apply(Language.CPP, surface)
        assert surface.fold_margin.margin == 3
        assert surface.fold_margin.back == RED

    def test_hypertext_paints_html_then_php(self, applier, color_table, surface):
        color_table.set_color(Language.PHP, "WordFore", RED)
        applier.apply(Language.HTML, surface)
        assert surface.tokenizer == "hypertext"
        assert surface.style(121).fore == RED
        assert surface.style(1).fore == color_table.color(Language.HTML, "TagFore")
        assert set(surface.keywords) == {0, 4}

    def test_php_matches_html(self, applier):
        html, php = RecordingSurface(), RecordingSurface()
        applier.apply(Language.HTML, html)
        applier.apply(Language.PHP, php)
        assert html.styles == php.styles
        assert html.keywords == php.keywords

    def test_entries_without_style_ids_not_painted(self, applier, surface):
        applier.apply(Language.ERRORLIST, surface)
        assert surface.style(24).fore == Rgba(0xFF, 0xE0, 0xA0)
        assert surface.properties["lexer.errorlist.value.separate"] == "1"

    @pytest.mark.parametrize("language", [Language.TEXT, Language.UNKNOWN])
    def test_plain_text(self, applier, surface, language):
        assert applier.apply(language, surface)
        assert surface.tokenizer is None
        assert surface.styles == {}
        assert surface.keywords == {}
        assert surface.fold_margin is None


class TestIdempotence:

    @pytest.mark.parametrize("language", list(Language))
    def test_twice_equals_once(self, applier, language):
        once, twice = RecordingSurface(), RecordingSurface()
        applier.apply(language, once)
        applier.apply(language, twice)
        applier.apply(language, twice)
        assert once.snapshot() == twice.snapshot()

    def test_reset_clears_previous_language(self, applier):
        fresh, reused = RecordingSurface(), RecordingSurface()
        applier.apply(Language.ERRORLIST, reused)
        applier.apply(Language.INI, reused)
        applier.apply(Language.INI, fresh)
        assert reused.styles == fresh.styles


class TestUnsupported:

    def test_missing_descriptor(self, color_table, keyword_catalog, surface):
        descriptors = dict(DEFAULT_DESCRIPTORS)
        del descriptors[Language.JSON]
        applier = StyleApplier(colors=color_table, keywords=keyword_catalog,
                               descriptors=descriptors)
        assert not applier.supports(Language.JSON)
        assert not applier.apply(Language.JSON, surface)
        assert surface.calls == []
        with pytest.raises(UnsupportedLanguageError):
            applier.apply_strict(Language.JSON, surface)


def test_apply_for_file(applier, surface):
    assert applier.apply_for_file("deploy.ps1", surface) is Language.POWERSHELL
    assert surface.tokenizer == "powershell"
    assert applier.apply_for_file("Makefile", surface) is Language.UNKNOWN
    assert surface.tokenizer is None
