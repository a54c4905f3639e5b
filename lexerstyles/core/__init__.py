"""
Core style registry and dispatch.

Everything here is toolkit independent; editors are reached through the
StyleSurface protocol.
"""

from lexerstyles.core.models import (
    Language,
    ColorRole,
    Rgba,
    ColorSlot,
    StyleEntry,
    LanguageSchema,
    KeywordSet,
    FoldMarker,
    MarkerSymbol,
    AutomaticFold,
    FoldingConfig,
)
from lexerstyles.core.errors import (
    LexerStyleError,
    NotFoundError,
    CardinalityMismatchError,
    IOFailureError,
    ParseFailureError,
    UnsupportedLanguageError,
)
from lexerstyles.core.languages import (
    LanguageCatalog,
    ExtensionEntry,
)
from lexerstyles.core.color_table import (
    ColorIndex,
    ColorTable,
)
from lexerstyles.core.keywords import (
    KeywordCatalog,
)
from lexerstyles.core.surface import (
    StyleSurface,
    RecordingSurface,
    StyleAttributes,
)
from lexerstyles.core.dispatcher import (
    LanguageDescriptor,
    StyleApplier,
)

__all__ = [
    # Models
    'Language',
    'ColorRole',
    'Rgba',
    'ColorSlot',
    'StyleEntry',
    'LanguageSchema',
    'KeywordSet',
    'FoldMarker',
    'MarkerSymbol',
    'AutomaticFold',
    'FoldingConfig',
    # Errors
    'LexerStyleError',
    'NotFoundError',
    'CardinalityMismatchError',
    'IOFailureError',
    'ParseFailureError',
    'UnsupportedLanguageError',
    # Registry
    'LanguageCatalog',
    'ExtensionEntry',
    'ColorIndex',
    'ColorTable',
    'KeywordCatalog',
    # Dispatch
    'StyleSurface',
    'RecordingSurface',
    'StyleAttributes',
    'LanguageDescriptor',
    'StyleApplier',
]
