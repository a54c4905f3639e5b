"""Tests for keyword sets."""

import pytest

from lexerstyles.core import keyword_data
from lexerstyles.core.keywords import HYPERTEXT_HTML_SET, HYPERTEXT_PHP_SET, KeywordCatalog
from lexerstyles.core.models import KeywordSet, Language


def test_cs_sets_pushed_in_order(keyword_catalog, surface):
    count = keyword_catalog.apply(Language.CS, surface)
    assert count == 2
    assert [args[0] for name, args in surface.calls] == [0, 1]
    assert "foreach" in surface.keywords[0].split()
    assert "string" in surface.keywords[1].split()


def test_cpp_has_doc_keywords(keyword_catalog):
    assert [s.set_index for s in keyword_catalog.sets(Language.CPP)] == [0, 1, 2]


def test_hypertext_cross_sets(keyword_catalog):
    for language in (Language.HTML, Language.PHP):
        indices = [s.set_index for s in keyword_catalog.sets(language)]
        assert indices == [HYPERTEXT_HTML_SET, HYPERTEXT_PHP_SET]
    assert keyword_catalog.words(Language.HTML, 4) == keyword_catalog.words(Language.PHP, 4)
    assert "div" in keyword_catalog.words(Language.PHP, 0).split()
    assert "echo" in keyword_catalog.words(Language.HTML, 4).split()


def test_innosetup_uses_pascal_words(keyword_catalog):
    assert keyword_catalog.words(Language.INNOSETUP, 0) == keyword_catalog.words(Language.PASCAL, 0)


def test_python_word_lists(keyword_catalog):
    words = keyword_catalog.words(Language.PYTHON, 0).split()
    assert {"lambda", "nonlocal", "async", "await", "match", "case", "None"} <= set(words)
    assert "print" not in words

    builtins = keyword_catalog.words(Language.PYTHON, 1).split()
    assert {"len", "print", "isinstance", "ValueError"} <= set(builtins)
    assert len(builtins) == len(set(builtins))


def test_python_word_lists_are_fixed(keyword_catalog):
    assert keyword_catalog.words(Language.PYTHON, 0) == keyword_data.PYTHON_KEYWORDS
    assert keyword_data.PYTHON_KEYWORDS.split()[:3] == ["False", "None", "True"]
    assert keyword_data.PYTHON_BUILTINS.split()[-1] == "zip"


@pytest.mark.parametrize("language", [Language.XML, Language.INI, Language.ERRORLIST,
                                      Language.TEXT, Language.UNKNOWN])
def test_languages_without_keywords(keyword_catalog, surface, language):
    assert keyword_catalog.apply(language, surface) == 0
    assert surface.keywords == {}


def test_set_words_replaces_and_adds(keyword_catalog):
    keyword_catalog.set_words(Language.SQL, 0, "select")
    keyword_catalog.set_words(Language.SQL, 3, "go")
    assert keyword_catalog.words(Language.SQL, 0) == "select"
    assert [s.set_index for s in keyword_catalog.sets(Language.SQL)] == [0, 3]


def test_set_words_negative_index(keyword_catalog):
    with pytest.raises(ValueError):
        keyword_catalog.set_words(Language.SQL, -1, "select")


def test_reset_restores_defaults(keyword_catalog):
    default = keyword_catalog.words(Language.SQL, 0)
    keyword_catalog.set_words(Language.SQL, 0, "select")
    keyword_catalog.reset()
    assert keyword_catalog.words(Language.SQL, 0) == default


def test_custom_sets_sorted_by_index(surface):
    catalog = KeywordCatalog([
        KeywordSet(Language.YAML, 2, "c"),
        KeywordSet(Language.YAML, 0, "a"),
        KeywordSet(Language.YAML, 1, "b"),
    ])
    catalog.apply(Language.YAML, surface)
    assert [args for _, args in surface.calls] == [(0, "a"), (1, "b"), (2, "c")]


def test_missing_set(keyword_catalog):
    assert keyword_catalog.words(Language.CS, 7) is None
