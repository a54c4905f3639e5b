"""
Color table persistence.

Handles:
- Export of a language's colors to an XML color document
- Import of color documents back into a color table
- Atomic file writes and boolean or typed results

Document layout::

    <?xml version="1.0" encoding="utf-8"?>
    <Colors Lexer="CS" Label="cs">
      <Color Name="CommentFore" R="00" G="80" B="00" A="FF" HexARGB="FF008000" />
      ...
    </Colors>

Records are keyed by Name; HexARGB is the authoritative value.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Optional, Union

from lexerstyles.core.color_table import ColorTable
from lexerstyles.core.errors import IOFailureError, NotFoundError, ParseFailureError
from lexerstyles.core.languages import LanguageCatalog
from lexerstyles.core.models import Language, Rgba
from lexerstyles.services.file_io import FileIOService


ROOT_TAG = "Colors"
RECORD_TAG = "Color"

HEX_ARGB_PATTERN = re.compile(r"[0-9A-Fa-f]{8}")
HEX_CHANNEL_PATTERN = re.compile(r"[0-9A-Fa-f]{1,2}")


class FailureKind(Enum):
    """Why an export or import failed."""
    NOT_FOUND = auto()
    IO_FAILURE = auto()
    PARSE_FAILURE = auto()


@dataclass(frozen=True)
class ColorRecord:
    """One named color of a document."""
    name: str
    color: Rgba


@dataclass
class ColorDocument:
    """An ordered list of named colors owned by one language."""
    language: Optional[Language]
    records: list[ColorRecord] = field(default_factory=list)
    label: str = ""

    def get(self, name: str) -> Optional[Rgba]:
        for record in self.records:
            if record.name == name:
                return record.color
        return None

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class ExportResult:
    """Result of an export to file."""
    success: bool
    records_written: int = 0
    error: Optional[str] = None
    error_kind: Optional[FailureKind] = None


@dataclass
class ImportResult:
    """Result of an import into a color table."""
    success: bool
    applied: int = 0
    skipped: list[str] = field(default_factory=list)
    error: Optional[str] = None
    error_kind: Optional[FailureKind] = None


class PersistenceCodec:
    """Saves and restores the colors of a ColorTable."""

    def __init__(self, table: ColorTable, file_io: Optional[FileIOService] = None):
        self.table = table
        self.file_io = file_io or FileIOService()

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def export(self, language: Language) -> ColorDocument:
        """Build a document holding every color of a language, in index order."""
        index = self.table.index(language)
        records = [
            ColorRecord(name, self.table.slot(language, i).color)
            for i, name in enumerate(index.semantic_names)
        ]
        return ColorDocument(
            language=language,
            records=records,
            label=LanguageCatalog.display_name(language),
        )

    @staticmethod
    def to_xml(document: ColorDocument) -> str:
        """Serialize a document to XML text."""
        root = ET.Element(ROOT_TAG)
        root.set("Lexer", document.language.name if document.language else "")
        root.set("Label", document.label)

        for record in document.records:
            color = record.color
            element = ET.SubElement(root, RECORD_TAG)
            element.set("Name", record.name)
            element.set("R", f"{color.r:02X}")
            element.set("G", f"{color.g:02X}")
            element.set("B", f"{color.b:02X}")
            element.set("A", f"{color.a:02X}")
            element.set("HexARGB", color.hex_argb)

        ET.indent(root)
        body = ET.tostring(root, encoding="unicode")
        return f'<?xml version="1.0" encoding="utf-8"?>\n{body}\n'

    def export_to_file_result(self, language: Language, path: Path | str) -> ExportResult:
        """Export a language to a file, reporting why a failure happened."""
        try:
            document = self.export(language)
            text = self.to_xml(document)
        except NotFoundError as e:
            logging.error(f"PersistenceCodec - Cannot export {language.name}: {e}")
            return ExportResult(success=False, error=str(e), error_kind=FailureKind.NOT_FOUND)

        result = self.file_io.write_file(path, text, atomic=True)
        if not result.success:
            logging.error(f"PersistenceCodec - Failed to write {path}: {result.error}")
            return ExportResult(success=False, error=result.error,
                                error_kind=FailureKind.IO_FAILURE)

        logging.debug(f"PersistenceCodec - Exported {len(document)} colors of {language.name} to {path}")
        return ExportResult(success=True, records_written=len(document))

    def export_to_file(self, language: Language, path: Path | str) -> bool:
        """Export a language to a file. Any failure returns False and leaves no file behind."""
        return self.export_to_file_result(language, path).success

    # -------------------------------------------------------------------------
    # Import
    # -------------------------------------------------------------------------

    @staticmethod
    def parse(text: str) -> ColorDocument:
        """
        Parse XML text into a document.

        Raises:
            ParseFailureError: on malformed XML or an unreadable color
        """
        try:
            root = ET.fromstring(text)
        except ET.ParseError as e:
            raise ParseFailureError(f"Malformed color document: {e}") from e

        if root.tag != ROOT_TAG:
            raise ParseFailureError(f"Expected <{ROOT_TAG}> root element, found <{root.tag}>")

        lexer = root.get("Lexer", "")
        try:
            language: Optional[Language] = Language.from_string(lexer) if lexer else None
        except KeyError:
            language = LanguageCatalog.from_display_name(lexer)

        document = ColorDocument(language=language, label=root.get("Label", ""))
        for element in root.iter(RECORD_TAG):
            name = element.get("Name")
            if not name:
                continue
            document.records.append(ColorRecord(name, _record_color(element)))

        return document

    def import_document_result(
        self,
        document: Union[ColorDocument, str],
        language: Language
    ) -> ImportResult:
        """
        Write every named color of a document into a language's table.

        Unknown names are skipped. Not atomic: slots written before a failure
        keep their new colors.
        """
        if isinstance(document, str):
            try:
                document = self.parse(document)
            except ParseFailureError as e:
                logging.error(f"PersistenceCodec - {e}")
                return ImportResult(success=False, error=str(e),
                                    error_kind=FailureKind.PARSE_FAILURE)

        if document.language is not None and document.language is not language:
            logging.warning(
                f"PersistenceCodec - Importing {document.language.name} colors "
                f"into {language.name}"
            )

        try:
            index = self.table.index(language)
        except NotFoundError as e:
            logging.error(f"PersistenceCodec - {e}")
            return ImportResult(success=False, error=str(e), error_kind=FailureKind.NOT_FOUND)

        result = ImportResult(success=True)
        for record in document.records:
            if record.name not in index:
                result.skipped.append(record.name)
                continue
            self.table.set_color(language, record.name, record.color)
            result.applied += 1

        if result.skipped:
            logging.warning(
                f"PersistenceCodec - Skipped unknown colors for {language.name}: "
                f"{', '.join(result.skipped)}"
            )
        return result

    def import_document(self, document: Union[ColorDocument, str], language: Language) -> bool:
        return self.import_document_result(document, language).success

    def import_from_file_result(self, path: Path | str, language: Language) -> ImportResult:
        """Import a color file, reporting why a failure happened."""
        read = self.file_io.read_text(path)
        if not read.success:
            kind = FailureKind.NOT_FOUND if read.not_found else FailureKind.IO_FAILURE
            logging.error(f"PersistenceCodec - Cannot read {path}: {read.error}")
            return ImportResult(success=False, error=read.error, error_kind=kind)

        return self.import_document_result(read.content, language)

    def import_from_file(self, path: Path | str, language: Language) -> bool:
        """Import a color file. Missing, unreadable or malformed files return False."""
        return self.import_from_file_result(path, language).success

    def load_document(self, path: Path | str) -> ColorDocument:
        """
        Read and parse a color file without touching the table.

        Raises:
            IOFailureError: if the file is missing or unreadable
            ParseFailureError: if the contents are not a color document
        """
        read = self.file_io.read_text(path)
        if not read.success:
            raise IOFailureError(read.error)
        return self.parse(read.content)


def _record_color(element: ET.Element) -> Rgba:
    """Read a record's color: HexARGB first, then the channel attributes."""
    hex_argb = element.get("HexARGB")
    if hex_argb and HEX_ARGB_PATTERN.fullmatch(hex_argb):
        return Rgba.from_argb(int(hex_argb, 16))

    values = [element.get(key, "") for key in ("R", "G", "B")] + [element.get("A", "FF")]
    if not all(HEX_CHANNEL_PATTERN.fullmatch(value) for value in values):
        raise ParseFailureError(
            f"Unreadable color for {element.get('Name')}: {hex_argb!r}"
        )
    red, green, blue, alpha = (int(value, 16) for value in values)
    return Rgba(red, green, blue, alpha)
