"""
StyleSurface implementation over a PyQt6 QsciScintilla editor.

Provides:
- QsciSurface, which turns dispatcher calls into Scintilla messages
- apply_language / apply_file helpers for editors owned by the caller
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional

from PyQt6.Qsci import QsciScintilla, QsciScintillaBase

from lexerstyles.core.dispatcher import StyleApplier
from lexerstyles.core.models import (
    AutomaticFold,
    FoldMarker,
    Language,
    MarkerSymbol,
    Rgba,
    TokenizerId,
)


STYLE_DEFAULT = 32
SC_MARGIN_SYMBOL = 0
# 0xFE000000 as a signed 32-bit long
SC_MASK_FOLDERS = -0x02000000
SCLEX_NULL = 1


def _encode(text: str) -> bytes:
    return text.encode('utf-8')


class QsciSurface:
    """Sends style configuration straight to a QsciScintilla widget."""

    def __init__(self, editor: QsciScintilla):
        self.editor = editor

    def _send(self, message: int, *args) -> int:
        return self.editor.SendScintilla(message, *args)

    # -------------------------------------------------------------------------
    # Styles
    # -------------------------------------------------------------------------

    def reset_styles(self, font_family: str, font_size: int) -> None:
        self._send(QsciScintillaBase.SCI_STYLERESETDEFAULT)
        self._send(QsciScintillaBase.SCI_STYLESETFONT, STYLE_DEFAULT, _encode(font_family))
        self._send(QsciScintillaBase.SCI_STYLESETSIZE, STYLE_DEFAULT, font_size)
        self._send(QsciScintillaBase.SCI_STYLECLEARALL)

    def set_style_attributes(
        self,
        style_id: int,
        fore: Rgba,
        back: Rgba,
        bold: bool,
        italic: bool = False
    ) -> None:
        self._send(QsciScintillaBase.SCI_STYLESETFORE, style_id, fore.bgr)
        self._send(QsciScintillaBase.SCI_STYLESETBACK, style_id, back.bgr)
        self._send(QsciScintillaBase.SCI_STYLESETBOLD, style_id, int(bold))
        self._send(QsciScintillaBase.SCI_STYLESETITALIC, style_id, int(italic))

    # -------------------------------------------------------------------------
    # Tokenizer
    # -------------------------------------------------------------------------

    def select_tokenizer(self, tokenizer: TokenizerId) -> None:
        if tokenizer is None:
            self._send(QsciScintillaBase.SCI_SETLEXER, SCLEX_NULL)
        elif isinstance(tokenizer, int):
            self._send(QsciScintillaBase.SCI_SETLEXER, tokenizer)
        else:
            self._send(QsciScintillaBase.SCI_SETLEXERLANGUAGE, 0, _encode(tokenizer))

    def set_keywords(self, set_index: int, words: str) -> None:
        self._send(QsciScintillaBase.SCI_SETKEYWORDS, set_index, _encode(words))

    def set_property(self, name: str, value: str) -> None:
        self._send(QsciScintillaBase.SCI_SETPROPERTY, _encode(name), _encode(value))

    # -------------------------------------------------------------------------
    # Folding
    # -------------------------------------------------------------------------

    def configure_folding_margin(
        self,
        margin: int,
        width: int,
        glyphs: Mapping[FoldMarker, MarkerSymbol],
        fore: Rgba,
        back: Rgba
    ) -> None:
        self._send(QsciScintillaBase.SCI_SETMARGINTYPEN, margin, SC_MARGIN_SYMBOL)
        self._send(QsciScintillaBase.SCI_SETMARGINMASKN, margin, SC_MASK_FOLDERS)
        self._send(QsciScintillaBase.SCI_SETMARGINSENSITIVEN, margin, 1)
        self._send(QsciScintillaBase.SCI_SETMARGINWIDTHN, margin, width)

        for marker, symbol in glyphs.items():
            self._send(QsciScintillaBase.SCI_MARKERDEFINE, int(marker), int(symbol))
            self._send(QsciScintillaBase.SCI_MARKERSETFORE, int(marker), fore.bgr)
            self._send(QsciScintillaBase.SCI_MARKERSETBACK, int(marker), back.bgr)

    def enable_automatic_folding(self, flags: AutomaticFold) -> None:
        self._send(QsciScintillaBase.SCI_SETAUTOMATICFOLD, int(flags))


def apply_language(
    editor: QsciScintilla,
    language: Language,
    applier: Optional[StyleApplier] = None
) -> bool:
    """Configure an editor for a language."""
    applier = applier or StyleApplier()
    applied = applier.apply(language, QsciSurface(editor))
    if applied:
        editor.recolor()
    return applied


def apply_file(
    editor: QsciScintilla,
    path: Path | str,
    applier: Optional[StyleApplier] = None
) -> Language:
    """Configure an editor for the language of a file name."""
    applier = applier or StyleApplier()
    language = applier.apply_for_file(str(path), QsciSurface(editor))
    editor.recolor()
    logging.debug(f"QsciSurface - {path} styled as {language.name}")
    return language
