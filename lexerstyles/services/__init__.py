"""
File backed services: color persistence, Notepad++ import, settings.
"""

from lexerstyles.services.file_io import (
    FileIOService,
    ReadResult,
    WriteResult,
)
from lexerstyles.services.persistence import (
    PersistenceCodec,
    ColorDocument,
    ColorRecord,
    ExportResult,
    ImportResult,
    FailureKind,
)
from lexerstyles.services.notepadpp import (
    NotepadPlusPlusTheme,
    WordStyle,
)
from lexerstyles.services.settings import (
    SettingsManager,
    ApplicationSettings,
)

__all__ = [
    'FileIOService',
    'ReadResult',
    'WriteResult',
    'PersistenceCodec',
    'ColorDocument',
    'ColorRecord',
    'ExportResult',
    'ImportResult',
    'FailureKind',
    'NotepadPlusPlusTheme',
    'WordStyle',
    'SettingsManager',
    'ApplicationSettings',
]
