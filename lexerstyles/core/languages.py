"""
Language catalog.

Provides:
- File name to language resolution through static extension tables
- External display labels for each language
- Tokenizer selection ids for the text surface
- Optional XML detection from file contents
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from lexerstyles.core.models import Language, TokenizerId


@dataclass(frozen=True)
class ExtensionEntry:
    """Space separated extension list registered for one language."""
    language: Language
    extensions: str

    @property
    def extension_list(self) -> list[str]:
        return self.extensions.lower().split()


# Checked in this order; the first language listing an extension wins
DEFAULT_EXTENSIONS: tuple[ExtensionEntry, ...] = (
    ExtensionEntry(Language.XML,
                   ".xml .xaml .xsl .xslt .xsd .xul .kml .svg .mxml .xsml .wsdl .xlf "
                   ".xliff .xbl .sxbl .sitemap .gml .gpx .plist .resx .csproj .nuspec"),
    ExtensionEntry(Language.CS, ".cs"),
    ExtensionEntry(Language.CPP, ".h .hpp .hxx .cpp .cxx .cc .ino"),
    ExtensionEntry(Language.SQL, ".sql .sql_script"),
    ExtensionEntry(Language.BATCH, ".bat .cmd .btm .nt"),
    ExtensionEntry(Language.TEXT, ".txt"),
    ExtensionEntry(Language.NSIS, ".nsi .nsh"),
    ExtensionEntry(Language.INNOSETUP, ".iss"),
    ExtensionEntry(Language.PASCAL, ".pas"),
    ExtensionEntry(Language.PHP, ".php3 .phtml .php"),
    ExtensionEntry(Language.HTML, ".html .htm .shtml .shtm .xhtml .xht .hta"),
    ExtensionEntry(Language.POWERSHELL, ".ps1 .psd1 .psm1"),
    ExtensionEntry(Language.INI, ".ini"),
    ExtensionEntry(Language.PYTHON, ".py .pyw"),
    ExtensionEntry(Language.YAML, ".yml .yaml"),
    ExtensionEntry(Language.JAVA, ".java"),
    ExtensionEntry(Language.JAVASCRIPT, ".js .mjs"),
    ExtensionEntry(Language.CSS, ".css"),
    ExtensionEntry(Language.VBDOTNET, ".vb"),
    ExtensionEntry(Language.JSON, ".json"),
)

# Labels shared with Notepad++ style files and persisted documents
DISPLAY_NAMES: dict[Language, str] = {
    Language.CS: "cs",
    Language.CPP: "cpp",
    Language.XML: "xml",
    Language.TEXT: "text",
    Language.NSIS: "nsis",
    Language.INNOSETUP: "inno",
    Language.SQL: "sql",
    Language.BATCH: "batch",
    Language.PASCAL: "pascal",
    Language.PHP: "php",
    Language.HTML: "html",
    Language.POWERSHELL: "powershell",
    Language.INI: "ini",
    Language.PYTHON: "python",
    Language.YAML: "yaml",
    Language.JAVA: "java",
    Language.JAVASCRIPT: "javascript",
    Language.CSS: "css",
    Language.VBDOTNET: "vb",
    Language.JSON: "json",
    Language.ERRORLIST: "errorlist",
}

DEFAULT_DISPLAY_NAME = "text"

# Lexer names known to the surface; numeric ids for lexers it only knows by number
TOKENIZERS: dict[Language, TokenizerId] = {
    Language.UNKNOWN: None,
    Language.TEXT: None,
    Language.CS: "cpp",
    Language.CPP: "cpp",
    Language.JAVA: "cpp",
    Language.JAVASCRIPT: "cpp",
    Language.XML: "xml",
    Language.NSIS: 43,
    Language.INNOSETUP: 76,
    Language.YAML: 48,
    Language.SQL: "sql",
    Language.BATCH: "batch",
    Language.PASCAL: "pascal",
    Language.PHP: "hypertext",
    Language.HTML: "hypertext",
    Language.POWERSHELL: "powershell",
    Language.INI: "props",
    Language.PYTHON: "python",
    Language.CSS: "css",
    Language.VBDOTNET: "vb",
    Language.JSON: "json",
    Language.ERRORLIST: "errorlist",
}

XML_DETECTION_PREFIXES: tuple[str, ...] = ("<?xml ",)


class LanguageCatalog:
    """Resolves file names to languages."""

    def __init__(self, entries: Iterable[ExtensionEntry] = DEFAULT_EXTENSIONS):
        self._entries: tuple[ExtensionEntry, ...] = tuple(entries)
        self._owners: dict[str, Language] = {}
        self._build_extension_map()

    def _build_extension_map(self) -> None:
        """Build the extension lookup, rejecting extensions claimed twice."""
        for entry in self._entries:
            for ext in entry.extension_list:
                owner = self._owners.get(ext)
                if owner is not None and owner is not entry.language:
                    raise ValueError(
                        f"Extension {ext} registered for both "
                        f"{owner.name} and {entry.language.name}"
                    )
                self._owners[ext] = entry.language

    def resolve(self, file_name: str | Path) -> Language:
        """Get the language for a file based on its extension."""
        _, ext = os.path.splitext(str(file_name))
        ext = ext.lower()

        return self._owners.get(ext, Language.UNKNOWN)

    def resolve_path(self, path: str | Path, sniff_xml: bool = True) -> Language:
        """
        Resolve a file on disk.

        Falls back to looking at the start of the file for an XML
        declaration when the extension is not registered.
        """
        language = self.resolve(path)
        if language is Language.UNKNOWN and sniff_xml and self.is_xml_file(path):
            logging.debug(f"LanguageCatalog - {path} detected as XML from contents")
            return Language.XML
        return language

    def is_xml_file(self, path: str | Path) -> bool:
        """Check whether a file is XML by extension or by its first characters."""
        if self.resolve(path) is Language.XML:
            return True

        size = max(len(prefix) for prefix in XML_DETECTION_PREFIXES)
        try:
            with open(path, 'r', encoding='utf-8', errors='replace') as f:
                head = f.read(size + 1).lstrip('\ufeff')
        except OSError as e:
            logging.debug(f"LanguageCatalog - Could not read {path}: {e}")
            return False

        head = head.lower()
        return any(head.startswith(prefix.lower()) for prefix in XML_DETECTION_PREFIXES)

    def extensions(self, language: Language) -> list[str]:
        """Get the extensions registered for a language."""
        result: list[str] = []
        for entry in self._entries:
            if entry.language is language:
                result.extend(entry.extension_list)
        return result

    def languages(self) -> list[Language]:
        """Get languages with at least one registered extension."""
        seen: list[Language] = []
        for entry in self._entries:
            if entry.language not in seen:
                seen.append(entry.language)
        return seen

    @staticmethod
    def display_name(language: Language) -> str:
        """Get the external label of a language."""
        return DISPLAY_NAMES.get(language, DEFAULT_DISPLAY_NAME)

    @staticmethod
    def from_display_name(label: str) -> Optional[Language]:
        """Reverse of display_name; None when no language carries the label."""
        label = label.strip().lower()
        for language, name in DISPLAY_NAMES.items():
            if name == label:
                return language
        return None

    @staticmethod
    def tokenizer(language: Language) -> TokenizerId:
        """Get the surface tokenizer name or numeric id of a language."""
        return TOKENIZERS.get(language)
