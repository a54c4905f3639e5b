"""
Style application dispatcher.

Pushes a language's full configuration onto a text surface in a fixed
order:

1. reset styles and set the default font
2. style colors and static bold/italic flags
3. tokenizer selection
4. keyword sets
5. static per-language properties
6. folding margin, markers and automatic folding

Every step overwrites state, so applying the same language twice leaves
the surface exactly as applying it once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from lexerstyles.core.color_table import ColorTable
from lexerstyles.core.errors import UnsupportedLanguageError
from lexerstyles.core.keywords import KeywordCatalog
from lexerstyles.core.languages import LanguageCatalog
from lexerstyles.core.models import FoldingConfig, Language, TokenizerId
from lexerstyles.core.surface import StyleSurface


# =============================================================================
# Static Properties
# =============================================================================

Properties = tuple[tuple[str, str], ...]

FOLD_DEFAULT: Properties = (
    ("fold", "1"),
    ("fold.compact", "1"),
    ("fold.preprocessor", "1"),
)

XML_FOLDING: Properties = (
    ("fold.html", "1"),
    ("html.tags.case.sensitive", "1"),
)

SQL_FOLDING: Properties = (
    ("fold.sql.at.else", "1"),
    ("fold.comment", "1"),
    ("sql.backslash.escapes", "1"),
    ("lexer.sql.numbersign.comment", "1"),
    ("lexer.sql.allow.dotted.word", "1"),
)

HYPERTEXT_FOLDING: Properties = (
    ("fold.hypertext.comment", "1"),
    ("fold.hypertext.heredoc", "1"),
    ("fold.html.preprocessor", "1"),
    ("fold.html", "1"),
)

ERRORLIST_PROPERTIES: Properties = (
    ("lexer.errorlist.escape.sequences", "1"),
    ("lexer.errorlist.value.separate", "1"),
)


# =============================================================================
# Descriptors
# =============================================================================

@dataclass(frozen=True)
class LanguageDescriptor:
    """How one language is pushed to a surface."""
    language: Language
    style_languages: tuple[Language, ...]  # color tables painted, in order
    tokenizer: TokenizerId
    properties: Properties = ()
    folding: bool = True


def _descriptor(
    language: Language,
    styles: Optional[tuple[Language, ...]] = None,
    properties: Properties = (),
    folding: bool = True
) -> LanguageDescriptor:
    return LanguageDescriptor(
        language=language,
        style_languages=(language,) if styles is None else styles,
        tokenizer=LanguageCatalog.tokenizer(language),
        properties=properties,
        folding=folding,
    )


DEFAULT_DESCRIPTORS: dict[Language, LanguageDescriptor] = {
    descriptor.language: descriptor for descriptor in (
        _descriptor(Language.UNKNOWN, styles=(), folding=False),
        _descriptor(Language.TEXT, styles=(), folding=False),
        _descriptor(Language.CS),
        _descriptor(Language.CPP),
        _descriptor(Language.JAVA),
        _descriptor(Language.JAVASCRIPT),
        _descriptor(Language.XML, properties=XML_FOLDING),
        _descriptor(Language.HTML, styles=(Language.HTML, Language.PHP),
                    properties=HYPERTEXT_FOLDING),
        _descriptor(Language.PHP, styles=(Language.HTML, Language.PHP),
                    properties=HYPERTEXT_FOLDING),
        _descriptor(Language.CSS),
        _descriptor(Language.NSIS),
        _descriptor(Language.PASCAL),
        _descriptor(Language.INNOSETUP),
        _descriptor(Language.BATCH),
        _descriptor(Language.POWERSHELL),
        _descriptor(Language.VBDOTNET),
        _descriptor(Language.PYTHON),
        _descriptor(Language.SQL, properties=SQL_FOLDING),
        _descriptor(Language.INI),
        _descriptor(Language.YAML),
        _descriptor(Language.JSON),
        _descriptor(Language.ERRORLIST, properties=ERRORLIST_PROPERTIES),
    )
}


# =============================================================================
# Dispatcher
# =============================================================================

@dataclass
class StyleApplier:
    """Applies language configurations to text surfaces."""
    colors: ColorTable = field(default_factory=ColorTable)
    keywords: KeywordCatalog = field(default_factory=KeywordCatalog)
    font_family: str = "Consolas"
    font_size: int = 10
    folding: FoldingConfig = field(default_factory=FoldingConfig)
    descriptors: Mapping[Language, LanguageDescriptor] = field(
        default_factory=lambda: dict(DEFAULT_DESCRIPTORS)
    )

    def supports(self, language: Language) -> bool:
        return language in self.descriptors

    def apply(self, language: Language, surface: StyleSurface) -> bool:
        """
        Configure a surface for a language.

        Returns:
            False if the language has no dispatch entry, True otherwise
        """
        descriptor = self.descriptors.get(language)
        if descriptor is None:
            logging.warning(f"StyleApplier - No dispatch entry for {language.name}")
            return False

        logging.debug(f"StyleApplier - Applying {language.name}")

        surface.reset_styles(self.font_family, self.font_size)
        self._apply_styles(descriptor, surface)
        surface.select_tokenizer(descriptor.tokenizer)
        self.keywords.apply(language, surface)

        for name, value in descriptor.properties:
            surface.set_property(name, value)

        if descriptor.folding:
            self._apply_folding(surface)

        return True

    def apply_strict(self, language: Language, surface: StyleSurface) -> None:
        """Same as apply, raising UnsupportedLanguageError instead of returning False."""
        if not self.apply(language, surface):
            raise UnsupportedLanguageError(f"No dispatch entry for {language.name}")

    def apply_for_file(
        self,
        file_name: str,
        surface: StyleSurface,
        catalog: Optional[LanguageCatalog] = None
    ) -> Language:
        """Resolve a file name and apply its language. Returns the language used."""
        language = (catalog or LanguageCatalog()).resolve(file_name)
        self.apply(language, surface)
        return language

    def _apply_styles(self, descriptor: LanguageDescriptor, surface: StyleSurface) -> None:
        for style_language in descriptor.style_languages:
            schema = self.colors.schema(style_language)
            if schema is None:
                continue
            for entry in schema.entries:
                if not entry.style_ids:
                    continue
                fore = self.colors.color(style_language, entry.fore_name)
                back = self.colors.color(style_language, entry.back_name)
                for style_id in entry.style_ids:
                    surface.set_style_attributes(style_id, fore, back, entry.bold, entry.italic)

    def _apply_folding(self, surface: StyleSurface) -> None:
        for name, value in FOLD_DEFAULT:
            surface.set_property(name, value)

        config = self.folding
        surface.configure_folding_margin(
            config.margin,
            config.width,
            config.glyphs,
            config.marker_fore,
            config.marker_back,
        )
        surface.enable_automatic_folding(config.flags)
