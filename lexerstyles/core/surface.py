"""
Text styling surface interface.

Provides:
- StyleSurface, the operations the dispatcher issues against a text widget
- RecordingSurface, an in-memory surface that keeps the resulting state
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from lexerstyles.core.models import (
    AutomaticFold,
    FoldMarker,
    MarkerSymbol,
    Rgba,
    TokenizerId,
)


@runtime_checkable
class StyleSurface(Protocol):
    """Operations a text widget must support to receive a style configuration."""

    def reset_styles(self, font_family: str, font_size: int) -> None:
        """Clear every style attribute and set the default monospace font."""
        ...

    def set_style_attributes(
        self,
        style_id: int,
        fore: Rgba,
        back: Rgba,
        bold: bool,
        italic: bool = False
    ) -> None:
        ...

    def select_tokenizer(self, tokenizer: TokenizerId) -> None:
        """Select a lexer by name, by numeric id, or the null lexer for None."""
        ...

    def set_keywords(self, set_index: int, words: str) -> None:
        ...

    def set_property(self, name: str, value: str) -> None:
        ...

    def configure_folding_margin(
        self,
        margin: int,
        width: int,
        glyphs: Mapping[FoldMarker, MarkerSymbol],
        fore: Rgba,
        back: Rgba
    ) -> None:
        ...

    def enable_automatic_folding(self, flags: AutomaticFold) -> None:
        ...


@dataclass(frozen=True)
class StyleAttributes:
    """Resolved attributes of one surface style."""
    fore: Rgba
    back: Rgba
    bold: bool = False
    italic: bool = False


@dataclass
class FoldMargin:
    """Folding margin state recorded by RecordingSurface."""
    margin: int
    width: int
    glyphs: dict[FoldMarker, MarkerSymbol]
    fore: Rgba
    back: Rgba


@dataclass
class RecordingSurface:
    """
    Surface that records configuration in memory.

    Styles not set since the last reset report the default style. Keyword
    sets and properties persist across resets, as they do on a real widget.
    """
    font_family: str = ""
    font_size: int = 0
    default_style: StyleAttributes = StyleAttributes(Rgba(0, 0, 0), Rgba(0xFF, 0xFF, 0xFF))
    styles: dict[int, StyleAttributes] = field(default_factory=dict)
    tokenizer: TokenizerId = None
    keywords: dict[int, str] = field(default_factory=dict)
    properties: dict[str, str] = field(default_factory=dict)
    fold_margin: Optional[FoldMargin] = None
    automatic_fold: AutomaticFold = AutomaticFold.NONE
    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def reset_styles(self, font_family: str, font_size: int) -> None:
        self.calls.append(('reset_styles', (font_family, font_size)))
        self.font_family = font_family
        self.font_size = font_size
        self.styles.clear()

    def set_style_attributes(
        self,
        style_id: int,
        fore: Rgba,
        back: Rgba,
        bold: bool,
        italic: bool = False
    ) -> None:
        self.calls.append(('set_style_attributes', (style_id, fore, back, bold, italic)))
        self.styles[style_id] = StyleAttributes(fore, back, bold, italic)

    def select_tokenizer(self, tokenizer: TokenizerId) -> None:
        self.calls.append(('select_tokenizer', (tokenizer,)))
        self.tokenizer = tokenizer

    def set_keywords(self, set_index: int, words: str) -> None:
        self.calls.append(('set_keywords', (set_index, words)))
        self.keywords[set_index] = words

    def set_property(self, name: str, value: str) -> None:
        self.calls.append(('set_property', (name, value)))
        self.properties[name] = value

    def configure_folding_margin(
        self,
        margin: int,
        width: int,
        glyphs: Mapping[FoldMarker, MarkerSymbol],
        fore: Rgba,
        back: Rgba
    ) -> None:
        self.calls.append(('configure_folding_margin', (margin, width, dict(glyphs), fore, back)))
        self.fold_margin = FoldMargin(margin, width, dict(glyphs), fore, back)

    def enable_automatic_folding(self, flags: AutomaticFold) -> None:
        self.calls.append(('enable_automatic_folding', (flags,)))
        self.automatic_fold = flags

    def style(self, style_id: int) -> StyleAttributes:
        """Get the effective attributes of a style."""
        return self.styles.get(style_id, self.default_style)

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def snapshot(self) -> dict[str, Any]:
        """Get the observable state, without the call log."""
        return {
            'font_family': self.font_family,
            'font_size': self.font_size,
            'styles': dict(self.styles),
            'tokenizer': self.tokenizer,
            'keywords': dict(self.keywords),
            'properties': dict(self.properties),
            'fold_margin': self.fold_margin,
            'automatic_fold': self.automatic_fold,
        }
