"""
Notepad++ style file import.

Handles:
- Parsing stylers.model.xml and theme files (LexerType / WordsStyle rows)
- Global widget styles (Default Style, Fold)
- Copying word style colors into a ColorTable by external name
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from lexerstyles.core.color_table import ColorTable
from lexerstyles.core.errors import IOFailureError, ParseFailureError
from lexerstyles.core.languages import LanguageCatalog
from lexerstyles.core.models import Language, Rgba
from lexerstyles.services.file_io import FileIOService


FONT_STYLE_BOLD = 1
FONT_STYLE_ITALIC = 2

DEFAULT_STYLE_NAME = "Default Style"
FOLD_STYLE_NAME = "Fold"


def _parse_color(value: Optional[str]) -> Optional[Rgba]:
    if not value or not value.strip():
        return None
    try:
        return Rgba.from_hex(value)
    except ValueError as e:
        raise ParseFailureError(f"Invalid color value: {value!r}") from e


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ParseFailureError(f"Invalid number: {value!r}") from e


@dataclass(frozen=True)
class WordStyle:
    """One styled category of a Notepad++ lexer (or a global widget style)."""
    name: str
    style_id: Optional[int] = None
    fore: Optional[Rgba] = None
    back: Optional[Rgba] = None
    bold: bool = False
    italic: bool = False
    font_name: str = ""
    font_size: Optional[int] = None

    @classmethod
    def from_element(cls, element: ET.Element) -> 'WordStyle':
        font_style = _parse_int(element.get("fontStyle")) or 0
        return cls(
            name=element.get("name", ""),
            style_id=_parse_int(element.get("styleID")),
            fore=_parse_color(element.get("fgColor")),
            back=_parse_color(element.get("bgColor")),
            bold=bool(font_style & FONT_STYLE_BOLD),
            italic=bool(font_style & FONT_STYLE_ITALIC),
            font_name=element.get("fontName", "").strip(),
            font_size=_parse_int(element.get("fontSize")),
        )


# Global styles share the WordsStyle attributes
WidgetStyle = WordStyle


@dataclass
class NotepadPlusPlusTheme:
    """Word styles grouped by Notepad++ lexer name, plus global widget styles."""
    lexers: dict[str, list[WordStyle]] = field(default_factory=dict)
    widget_styles: dict[str, WidgetStyle] = field(default_factory=dict)

    @classmethod
    def from_string(cls, text: str) -> 'NotepadPlusPlusTheme':
        """
        Parse the contents of a Notepad++ style file.

        Raises:
            ParseFailureError: on malformed XML or attribute values
        """
        try:
            root = ET.fromstring(text)
        except ET.ParseError as e:
            raise ParseFailureError(f"Malformed Notepad++ style file: {e}") from e

        theme = cls()
        for lexer in root.iter("LexerType"):
            name = lexer.get("name", "").strip().lower()
            if not name:
                continue
            theme.lexers[name] = [
                WordStyle.from_element(element) for element in lexer.iter("WordsStyle")
            ]

        for element in root.iter("WidgetStyle"):
            style = WidgetStyle.from_element(element)
            if style.name:
                theme.widget_styles[style.name] = style

        logging.debug(
            f"NotepadPlusPlusTheme - Parsed {len(theme.lexers)} lexers, "
            f"{len(theme.widget_styles)} widget styles"
        )
        return theme

    @classmethod
    def from_file(
        cls,
        path: Path | str,
        file_io: Optional[FileIOService] = None
    ) -> 'NotepadPlusPlusTheme':
        """
        Load a Notepad++ style file.

        Raises:
            IOFailureError: if the file is missing or unreadable
            ParseFailureError: if the contents cannot be parsed
        """
        read = (file_io or FileIOService()).read_text(path)
        if not read.success:
            raise IOFailureError(read.error)
        return cls.from_string(read.content)

    def word_styles(self, language: Language) -> list[WordStyle]:
        """Get the word styles stored under a language's display label."""
        return self.lexers.get(LanguageCatalog.display_name(language), [])

    def apply_to_table(self, table: ColorTable, language: Language) -> int:
        """
        Copy word style colors into every slot with a matching external name.

        Matching ignores case. Styles without a color leave the slot as is.

        Returns:
            Number of slots changed
        """
        changed = 0
        for style in self.word_styles(language):
            if style.fore is not None:
                changed += table.set_external(language, style.name, style.fore, foreground=True)
            if style.back is not None:
                changed += table.set_external(language, style.name, style.back, foreground=False)

        logging.debug(
            f"NotepadPlusPlusTheme - Applied {changed} colors to {language.name}"
        )
        return changed

    def fold_colors(self) -> Optional[tuple[Rgba, Rgba]]:
        """
        Get (fore, back) folding marker colors from the Fold widget style.

        Notepad++ draws fold glyph outlines in the style background and
        fills them with the foreground, so the two are swapped here.
        """
        style = self.widget_styles.get(FOLD_STYLE_NAME)
        if style is None or style.fore is None or style.back is None:
            return None
        return style.back, style.fore

    def default_font(self) -> Optional[tuple[str, int]]:
        """Get (family, size) from the Default Style widget style."""
        style = self.widget_styles.get(DEFAULT_STYLE_NAME)
        if style is None or not style.font_name or not style.font_size:
            return None
        return style.font_name, style.font_size
