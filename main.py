"""
Command line entry point for lexerstyles.

This module handles:
- Command line argument parsing
- Logging configuration
- Loading saved color customizations
- The resolve, export, import, npp-import, show and languages commands
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Optional, List

from lexerstyles import __version__
from lexerstyles.core.color_table import ColorTable
from lexerstyles.core.errors import LexerStyleError
from lexerstyles.core.languages import LanguageCatalog
from lexerstyles.core.models import Language
from lexerstyles.core.surface import RecordingSurface
from lexerstyles.services.notepadpp import NotepadPlusPlusTheme
from lexerstyles.services.persistence import PersistenceCodec
from lexerstyles.services.settings import SettingsManager


# =============================================================================
# Constants
# =============================================================================

APP_NAME = "lexerstyles"
APP_VERSION = __version__

EXIT_OK = 0
EXIT_FAILURE = 1


# =============================================================================
# Enums
# =============================================================================

class Command(Enum):
    """Command line commands."""
    RESOLVE = auto()
    EXPORT = auto()
    IMPORT = auto()
    NPP_IMPORT = auto()
    SHOW = auto()
    LANGUAGES = auto()


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class CommandLineArgs:
    """Parsed command line arguments."""
    command: Command = Command.LANGUAGES
    language: Optional[str] = None
    path: Optional[str] = None
    config_file: Optional[str] = None
    log_level: str = "WARNING"
    debug: bool = False


# =============================================================================
# Logging Setup
# =============================================================================

class LogFormatter(logging.Formatter):
    """Custom log formatter with colors for console."""

    COLORS = {
        logging.INFO: '\033[32m',      # Green
        logging.WARNING: '\033[33m',   # Yellow
        logging.ERROR: '\033[31m',     # Red
        logging.CRITICAL: '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__(
            fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)

        if self.use_colors:
            color = self.COLORS.get(record.levelno, '')
            return f"{color}{formatted}{self.RESET}"

        return formatted


def setup_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure application logging.

    Args:
        level: Log level string
        log_file: Optional file path for logging

    Returns:
        Root logger instance
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers
    root_logger.handlers.clear()

    # Console output is reserved for command results
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(LogFormatter(use_colors=True))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(LogFormatter(use_colors=False))
        root_logger.addHandler(file_handler)

    # chardet logs every probe at debug level
    logging.getLogger('chardet').setLevel(logging.WARNING)

    return root_logger


# =============================================================================
# Argument Parsing
# =============================================================================

def parse_arguments(args: Optional[List[str]] = None) -> CommandLineArgs:
    """
    Parse command line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv)

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Per-language lexer styles for Scintilla editors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s resolve src/main.cpp          Print the language of a file
  %(prog)s export cs cs-colors.xml       Save C# colors to a file
  %(prog)s import cs cs-colors.xml       Load C# colors from a file
  %(prog)s npp-import cs stylers.xml     Take C# colors from a Notepad++ theme
  %(prog)s show python                   Print the styles pushed for Python
        """
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    resolve_parser = subparsers.add_parser('resolve', help='Print the language of a file')
    resolve_parser.add_argument('path', help='File name or path')

    export_parser = subparsers.add_parser('export', help='Write a color document')
    export_parser.add_argument('language', help='Language name, e.g. cs or PYTHON')
    export_parser.add_argument('path', help='Destination file')

    import_parser = subparsers.add_parser('import', help='Read a color document')
    import_parser.add_argument('language', help='Language name')
    import_parser.add_argument('path', help='Color document to read')

    npp_parser = subparsers.add_parser('npp-import', help='Read colors from a Notepad++ style file')
    npp_parser.add_argument('language', help='Language name')
    npp_parser.add_argument('path', help='stylers.model.xml or theme file')

    show_parser = subparsers.add_parser('show', help='Print the configuration pushed for a language')
    show_parser.add_argument('language', help='Language name')

    subparsers.add_parser('languages', help='List languages and their extensions')

    # Configuration
    parser.add_argument(
        '-c', '--config',
        help='Configuration file path'
    )

    # Logging
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default='WARNING',
        help='Log level'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'{APP_NAME} {APP_VERSION}'
    )

    parsed = parser.parse_args(args)

    result = CommandLineArgs()
    result.command = Command[parsed.command.upper().replace('-', '_')]
    result.language = getattr(parsed, 'language', None)
    result.path = getattr(parsed, 'path', None)
    result.config_file = parsed.config
    result.debug = parsed.debug

    # Log level
    if parsed.debug:
        result.log_level = 'DEBUG'
    elif parsed.verbose:
        result.log_level = 'INFO'
    else:
        result.log_level = parsed.log_level

    return result


def parse_language(value: str) -> Language:
    """Accept an enum name (CS, VBDOTNET) or a display label (cs, vb)."""
    try:
        return Language.from_string(value)
    except KeyError:
        language = LanguageCatalog.from_display_name(value)
        if language is None:
            raise LexerStyleError(f"Unknown language: {value}") from None
        return language


# =============================================================================
# Commands
# =============================================================================

class Application:
    """Runs one command against the saved color customizations."""

    def __init__(self, settings: SettingsManager):
        self.settings = settings
        self.catalog = LanguageCatalog()
        self.colors = ColorTable()
        self.codec = PersistenceCodec(self.colors)

    def load_saved_colors(self, language: Language) -> None:
        """Apply the user's saved colors for a language, if any."""
        path = self.settings.colors_file(language)
        if path.exists():
            self.codec.import_from_file(path, language)

    def save_colors(self, language: Language) -> bool:
        path = self.settings.colors_file(language)
        if not self.codec.export_to_file(language, path):
            return False
        logging.info(f"Application - Saved {language.name} colors to {path}")
        return True

    def run(self, args: CommandLineArgs) -> int:
        handlers = {
            Command.RESOLVE: self.resolve,
            Command.EXPORT: self.export,
            Command.IMPORT: self.import_colors,
            Command.NPP_IMPORT: self.import_notepadpp,
            Command.SHOW: self.show,
            Command.LANGUAGES: self.languages,
        }
        return handlers[args.command](args)

    def resolve(self, args: CommandLineArgs) -> int:
        sniff = self.settings.settings.detection.sniff_xml_contents
        language = self.catalog.resolve_path(args.path, sniff_xml=sniff)
        print(language.name)
        return EXIT_OK

    def export(self, args: CommandLineArgs) -> int:
        language = parse_language(args.language)
        self.load_saved_colors(language)
        result = self.codec.export_to_file_result(language, args.path)
        if not result.success:
            print(f"Export failed: {result.error}", file=sys.stderr)
            return EXIT_FAILURE
        print(f"Exported {result.records_written} colors to {args.path}")
        return EXIT_OK

    def import_colors(self, args: CommandLineArgs) -> int:
        language = parse_language(args.language)
        self.load_saved_colors(language)
        result = self.codec.import_from_file_result(args.path, language)
        if not result.success:
            print(f"Import failed: {result.error}", file=sys.stderr)
            return EXIT_FAILURE
        if not self.save_colors(language):
            return EXIT_FAILURE
        print(f"Imported {result.applied} colors ({len(result.skipped)} skipped)")
        return EXIT_OK

    def import_notepadpp(self, args: CommandLineArgs) -> int:
        language = parse_language(args.language)
        self.load_saved_colors(language)
        theme = NotepadPlusPlusTheme.from_file(args.path)
        changed = theme.apply_to_table(self.colors, language)
        if not self.save_colors(language):
            return EXIT_FAILURE
        print(f"Imported {changed} colors from {args.path}")

        if self.apply_theme_globals(theme):
            if not self.settings.save():
                return EXIT_FAILURE
            font = self.settings.settings.font
            folding = self.settings.settings.folding
            print(f"Font {font.font_family} {font.font_size}, "
                  f"fold markers {folding.marker_fore} on {folding.marker_back}")
        return EXIT_OK

    def apply_theme_globals(self, theme: NotepadPlusPlusTheme) -> bool:
        """Copy a theme's default font and fold marker colors into the settings."""
        settings = self.settings.settings
        changed = False

        font = theme.default_font()
        if font is not None:
            settings.font.font_family, settings.font.font_size = font
            changed = True

        fold = theme.fold_colors()
        if fold is not None:
            fore, back = fold
            settings.folding.marker_fore = f"#{fore.hex_rgb}"
            settings.folding.marker_back = f"#{back.hex_rgb}"
            changed = True

        if changed:
            logging.info("Application - Took font and folding settings from theme")
        return changed

    def show(self, args: CommandLineArgs) -> int:
        language = parse_language(args.language)
        self.load_saved_colors(language)

        applier = self.settings.settings.create_applier(colors=self.colors)
        surface = RecordingSurface()
        if not applier.apply(language, surface):
            print(f"No style configuration for {language.name}", file=sys.stderr)
            return EXIT_FAILURE

        print(f"Language:  {language.name} ({LanguageCatalog.display_name(language)})")
        print(f"Tokenizer: {surface.tokenizer}")
        print(f"Font:      {surface.font_family} {surface.font_size}")
        if surface.fold_margin is not None:
            fold = surface.fold_margin
            print(f"Folding:   fore #{fold.fore.hex_rgb}  back #{fold.back.hex_rgb}")
        for style_id in sorted(surface.styles):
            style = surface.styles[style_id]
            flags = ''.join(flag for flag, on in (('B', style.bold), ('I', style.italic)) if on)
            print(f"  style {style_id:3d}  fore #{style.fore.hex_rgb}  back #{style.back.hex_rgb}  {flags}")
        for set_index in sorted(surface.keywords):
            count = len(surface.keywords[set_index].split())
            print(f"  keywords {set_index}: {count} words")
        for name, value in surface.properties.items():
            print(f"  {name}={value}")

        self.settings.remember_language(language)
        return EXIT_OK

    def languages(self, args: CommandLineArgs) -> int:
        for language in self.catalog.languages():
            extensions = ' '.join(self.catalog.extensions(language))
            print(f"{language.name:<12} {LanguageCatalog.display_name(language):<12} {extensions}")
        return EXIT_OK


# =============================================================================
# Main Function
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """
    Application main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_arguments(argv)

    logger = setup_logging(args.log_level)
    logger.debug(f"Starting {APP_NAME} v{APP_VERSION}")

    settings_path = Path(args.config_file) if args.config_file else None
    application = Application(SettingsManager(settings_path))

    try:
        return application.run(args)
    except LexerStyleError as e:
        logger.error(f"{e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == '__main__':
    sys.exit(main())
