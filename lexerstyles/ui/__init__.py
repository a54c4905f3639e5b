"""
Qt editor integration. Importing this package requires PyQt6 with QScintilla.
"""

from lexerstyles.ui.scintilla_surface import (
    QsciSurface,
    apply_language,
    apply_file,
)

__all__ = [
    'QsciSurface',
    'apply_language',
    'apply_file',
]
