"""
Keyword catalog.

Holds the keyword sets of every language and pushes them to a text
surface in ascending set index order.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, TYPE_CHECKING

from lexerstyles.core import keyword_data as kw
from lexerstyles.core.models import KeywordSet, Language

if TYPE_CHECKING:
    from lexerstyles.core.surface import StyleSurface


# Hypertext tokenizer buckets: 0 HTML, 1 JavaScript, 2 VBScript, 3 Python, 4 PHP
HYPERTEXT_HTML_SET = 0
HYPERTEXT_PHP_SET = 4


def _default_sets() -> list[KeywordSet]:
    return [
        KeywordSet(Language.CS, 0, kw.CS_KEYWORDS),
        KeywordSet(Language.CS, 1, kw.CS_TYPE_WORDS),
        KeywordSet(Language.CPP, 0, kw.CPP_KEYWORDS),
        KeywordSet(Language.CPP, 1, kw.CPP_TYPE_WORDS),
        KeywordSet(Language.CPP, 2, kw.CPP_DOC_KEYWORDS),
        KeywordSet(Language.NSIS, 0, kw.NSIS_FUNCTIONS),
        KeywordSet(Language.NSIS, 1, kw.NSIS_VARIABLES),
        KeywordSet(Language.NSIS, 2, kw.NSIS_LUMP),
        KeywordSet(Language.SQL, 0, kw.SQL_KEYWORDS),
        KeywordSet(Language.BATCH, 0, kw.BATCH_KEYWORDS),
        KeywordSet(Language.PASCAL, 0, kw.PASCAL_KEYWORDS),
        KeywordSet(Language.INNOSETUP, 0, kw.PASCAL_KEYWORDS),
        KeywordSet(Language.HTML, HYPERTEXT_HTML_SET, kw.HTML_KEYWORDS),
        KeywordSet(Language.HTML, HYPERTEXT_PHP_SET, kw.PHP_KEYWORDS),
        KeywordSet(Language.PHP, HYPERTEXT_HTML_SET, kw.HTML_KEYWORDS),
        KeywordSet(Language.PHP, HYPERTEXT_PHP_SET, kw.PHP_KEYWORDS),
        KeywordSet(Language.PYTHON, 0, kw.PYTHON_KEYWORDS),
        KeywordSet(Language.PYTHON, 1, kw.PYTHON_BUILTINS),
        KeywordSet(Language.POWERSHELL, 0, kw.POWERSHELL_KEYWORDS),
        KeywordSet(Language.POWERSHELL, 1, kw.POWERSHELL_CMDLETS),
        KeywordSet(Language.POWERSHELL, 2, kw.POWERSHELL_ALIASES),
        KeywordSet(Language.YAML, 0, kw.YAML_KEYWORDS),
        KeywordSet(Language.JAVA, 0, kw.JAVA_KEYWORDS),
        KeywordSet(Language.JAVA, 1, kw.JAVA_TYPE_WORDS),
        KeywordSet(Language.JAVASCRIPT, 0, kw.JAVASCRIPT_KEYWORDS),
        KeywordSet(Language.JAVASCRIPT, 1, kw.JAVASCRIPT_GLOBALS),
        KeywordSet(Language.CSS, 0, kw.CSS_PROPERTIES),
        KeywordSet(Language.CSS, 1, kw.CSS_PSEUDO_CLASSES),
        KeywordSet(Language.VBDOTNET, 0, kw.VB_KEYWORDS),
        KeywordSet(Language.JSON, 0, kw.JSON_KEYWORDS),
        KeywordSet(Language.JSON, 1, kw.JSON_LD_KEYWORDS),
    ]


class KeywordCatalog:
    """Keyword sets per language, keyed by surface bucket index."""

    def __init__(self, sets: Optional[Iterable[KeywordSet]] = None):
        self._initial = list(_default_sets() if sets is None else sets)
        self._sets: dict[Language, dict[int, KeywordSet]] = {}
        self.reset()

    def reset(self) -> None:
        """Restore the sets the catalog was constructed with."""
        self._sets = {}
        for keyword_set in self._initial:
            self._sets.setdefault(keyword_set.language, {})[keyword_set.set_index] = keyword_set

    def sets(self, language: Language) -> list[KeywordSet]:
        """Get the sets of a language ordered by set index."""
        by_index = self._sets.get(language, {})
        return [by_index[i] for i in sorted(by_index)]

    def words(self, language: Language, set_index: int) -> Optional[str]:
        keyword_set = self._sets.get(language, {}).get(set_index)
        return keyword_set.words if keyword_set else None

    def set_words(self, language: Language, set_index: int, words: str) -> None:
        """Add or replace one keyword set."""
        if set_index < 0:
            raise ValueError(f"Keyword set index must not be negative: {set_index}")
        self._sets.setdefault(language, {})[set_index] = KeywordSet(language, set_index, words)

    def apply(self, language: Language, surface: 'StyleSurface') -> int:
        """Push every keyword set of a language to the surface. Returns the set count."""
        keyword_sets = self.sets(language)
        for keyword_set in keyword_sets:
            surface.set_keywords(keyword_set.set_index, keyword_set.words)
        logging.debug(
            f"KeywordCatalog - Applied {len(keyword_sets)} keyword sets for {language.name}"
        )
        return len(keyword_sets)
