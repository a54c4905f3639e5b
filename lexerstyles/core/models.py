"""
Core data models for the lexer style registry.

This module defines the data structures shared across the package:
- Language identifiers
- Colors and color slots
- Style schema entries
- Keyword sets
- Folding marker definitions

All models are designed to be:
- UI-agnostic (the Qt adapter lives in lexerstyles.ui)
- Immutable where practical
- Type-hinted for IDE support
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag, auto
from typing import Iterator, Optional, Union


# =============================================================================
# Enumerations
# =============================================================================

class Language(Enum):
    """Languages with a style configuration. Values are stable identifiers."""
    UNKNOWN = 0
    CS = 1
    CPP = 2
    XML = 3
    TEXT = 4
    NSIS = 5
    SQL = 6
    BATCH = 7
    PASCAL = 8
    PHP = 9
    HTML = 10
    POWERSHELL = 11
    INI = 12
    PYTHON = 13
    YAML = 14
    JAVA = 15
    JAVASCRIPT = 16
    CSS = 17
    INNOSETUP = 18
    VBDOTNET = 19
    JSON = 20
    ERRORLIST = 21

    @classmethod
    def from_string(cls, value: str) -> 'Language':
        """
        Look up a language by member name, case-insensitively.

        Raises:
            KeyError: if no member has that name
        """
        key = value.strip().upper()
        for language in cls:
            if language.name == key:
                return language
        raise KeyError(value)


class ColorRole(Enum):
    """Which half of a style a color slot paints."""
    FOREGROUND = auto()
    BACKGROUND = auto()


class FoldMarker(IntEnum):
    """Marker numbers reserved by the surface for folding symbols."""
    FOLDER_END = 25
    FOLDER_OPEN_MID = 26
    FOLDER_MID_TAIL = 27
    FOLDER_TAIL = 28
    FOLDER_SUB = 29
    FOLDER = 30
    FOLDER_OPEN = 31


class MarkerSymbol(IntEnum):
    """Marker glyphs used by the fold margin (surface numbering)."""
    VLINE = 9
    LCORNER = 10
    TCORNER = 11
    BOX_PLUS = 12
    BOX_PLUS_CONNECTED = 13
    BOX_MINUS = 14
    BOX_MINUS_CONNECTED = 15


class AutomaticFold(IntFlag):
    """Automatic folding behavior flags."""
    NONE = 0
    SHOW = 1
    CLICK = 2
    CHANGE = 4


# =============================================================================
# Colors
# =============================================================================

@dataclass(frozen=True)
class Rgba:
    """
    An 8-bit per channel color.

    The packed ARGB form (alpha in the top byte) is what persisted color
    documents carry; the BGR form is what Scintilla style messages expect.
    """
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel!r}")

    @classmethod
    def from_hex(cls, value: str) -> 'Rgba':
        """
        Create from 'RRGGBB' or 'AARRGGBB' hex text, with or without '#'.

        Raises:
            ValueError: if the text is not 6 or 8 hex digits
        """
        text = value.strip().lstrip('#')
        if len(text) == 6:
            text = 'FF' + text
        if len(text) != 8:
            raise ValueError(f"Invalid color hex: {value!r}")
        return cls.from_argb(int(text, 16))

    @classmethod
    def from_argb(cls, value: int) -> 'Rgba':
        """Create from a packed 0xAARRGGBB integer."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"Packed ARGB out of range: {value!r}")
        return cls(
            r=(value >> 16) & 0xFF,
            g=(value >> 8) & 0xFF,
            b=value & 0xFF,
            a=(value >> 24) & 0xFF,
        )

    @property
    def argb(self) -> int:
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    @property
    def hex_argb(self) -> str:
        return f"{self.argb:08X}"

    @property
    def hex_rgb(self) -> str:
        return f"{self.r:02X}{self.g:02X}{self.b:02X}"

    @property
    def bgr(self) -> int:
        return (self.b << 16) | (self.g << 8) | self.r

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b, self.a))


@dataclass(frozen=True)
class ColorSlot:
    """One fixed-position color entry of a language's color table."""
    color: Rgba
    external_name: str
    role: ColorRole
    semantic_name: str

    @property
    def is_foreground(self) -> bool:
        return self.role is ColorRole.FOREGROUND


# =============================================================================
# Schema Models
# =============================================================================

@dataclass(frozen=True)
class StyleEntry:
    """
    One style category of a language.

    Produces two color slots (foreground then background) named
    '<name>Fore' and '<name>Back'. The style ids are the surface style
    numbers painted with those colors; bold and italic are fixed per
    category and never stored in the color table.
    """
    name: str
    external_name: str
    fore: str
    back: str = "FFFFFF"
    style_ids: tuple[int, ...] = ()
    bold: bool = False
    italic: bool = False

    @property
    def fore_name(self) -> str:
        return f"{self.name}Fore"

    @property
    def back_name(self) -> str:
        return f"{self.name}Back"

    def default_slots(self) -> tuple[ColorSlot, ColorSlot]:
        return (
            ColorSlot(Rgba.from_hex(self.fore), self.external_name,
                      ColorRole.FOREGROUND, self.fore_name),
            ColorSlot(Rgba.from_hex(self.back), self.external_name,
                      ColorRole.BACKGROUND, self.back_name),
        )


@dataclass(frozen=True)
class LanguageSchema:
    """The authoritative style schema for one language."""
    language: Language
    entries: tuple[StyleEntry, ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for entry in self.entries:
            for name in (entry.fore_name, entry.back_name):
                if name in seen:
                    raise ValueError(
                        f"Duplicate semantic name {name} in {self.language.name} schema"
                    )
                seen.add(name)

    def default_slots(self) -> list[ColorSlot]:
        slots: list[ColorSlot] = []
        for entry in self.entries:
            slots.extend(entry.default_slots())
        return slots

    @property
    def slot_count(self) -> int:
        return len(self.entries) * 2


# =============================================================================
# Keyword Models
# =============================================================================

@dataclass(frozen=True)
class KeywordSet:
    """A space separated word list bound to one surface keyword bucket."""
    language: Language
    set_index: int
    words: str

    @property
    def word_list(self) -> list[str]:
        return self.words.split()


# =============================================================================
# Folding Models
# =============================================================================

DEFAULT_FOLD_GLYPHS: dict[FoldMarker, MarkerSymbol] = {
    FoldMarker.FOLDER: MarkerSymbol.BOX_PLUS,
    FoldMarker.FOLDER_OPEN: MarkerSymbol.BOX_MINUS,
    FoldMarker.FOLDER_END: MarkerSymbol.BOX_PLUS_CONNECTED,
    FoldMarker.FOLDER_MID_TAIL: MarkerSymbol.TCORNER,
    FoldMarker.FOLDER_OPEN_MID: MarkerSymbol.BOX_MINUS_CONNECTED,
    FoldMarker.FOLDER_SUB: MarkerSymbol.VLINE,
    FoldMarker.FOLDER_TAIL: MarkerSymbol.LCORNER,
}


@dataclass(frozen=True)
class FoldingConfig:
    """Fold margin layout pushed by the dispatcher."""
    margin: int = 2
    width: int = 20
    marker_fore: Rgba = Rgba(0xFF, 0xFF, 0xFF)
    marker_back: Rgba = Rgba(0xA0, 0xA0, 0xA0)
    glyphs: dict[FoldMarker, MarkerSymbol] = field(
        default_factory=lambda: dict(DEFAULT_FOLD_GLYPHS)
    )
    flags: AutomaticFold = AutomaticFold.SHOW | AutomaticFold.CLICK | AutomaticFold.CHANGE


# Tokenizer selection: a lexer name, a vendor numeric id, or None for the null lexer
TokenizerId = Optional[Union[str, int]]

ColorKey = Union[int, str]
ColorInput = Union[Rgba, ColorSlot]
