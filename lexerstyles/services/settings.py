"""
Application settings management.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Callable, Optional

from lexerstyles.core.color_table import ColorTable
from lexerstyles.core.dispatcher import StyleApplier
from lexerstyles.core.keywords import KeywordCatalog
from lexerstyles.core.models import FoldingConfig, Language, Rgba


@dataclass
class FontSettings:
    """Default editor font pushed on every style reset."""
    font_family: str = "Consolas"
    font_size: int = 10


@dataclass
class FoldingSettings:
    """Fold margin layout and marker colors."""
    margin: int = 2
    width: int = 20
    marker_fore: str = "#FFFFFF"
    marker_back: str = "#A0A0A0"


@dataclass
class DetectionSettings:
    """Language detection settings."""
    sniff_xml_contents: bool = True


@dataclass
class ApplicationSettings:
    """Main application settings container."""
    font: FontSettings = field(default_factory=FontSettings)
    folding: FoldingSettings = field(default_factory=FoldingSettings)
    detection: DetectionSettings = field(default_factory=DetectionSettings)

    colors_directory: str = ""
    last_language: str = ""

    def folding_config(self) -> FoldingConfig:
        """Build the dispatcher's folding layout. Unreadable colors keep their defaults."""
        defaults = FoldingConfig()
        return FoldingConfig(
            margin=self.folding.margin,
            width=self.folding.width,
            marker_fore=_color_or(self.folding.marker_fore, defaults.marker_fore),
            marker_back=_color_or(self.folding.marker_back, defaults.marker_back),
        )

    def create_applier(
        self,
        colors: Optional[ColorTable] = None,
        keywords: Optional[KeywordCatalog] = None
    ) -> StyleApplier:
        """Create a StyleApplier using these font and folding settings."""
        return StyleApplier(
            colors=colors if colors is not None else ColorTable(),
            keywords=keywords if keywords is not None else KeywordCatalog(),
            font_family=self.font.font_family,
            font_size=self.font.font_size,
            folding=self.folding_config(),
        )


def _color_or(value: str, default: Rgba) -> Rgba:
    try:
        return Rgba.from_hex(value)
    except (ValueError, AttributeError):
        logging.warning(f"ApplicationSettings - Invalid color {value!r}, using default")
        return default


class SettingsManager:
    """Manager for loading/saving application settings."""

    def __init__(self, settings_path: Optional[Path] = None):
        self.settings_path = Path(settings_path) if settings_path else self._get_default_path()
        self._settings: Optional[ApplicationSettings] = None
        self._observers: list[Callable[[ApplicationSettings], None]] = []

    @staticmethod
    def _get_default_path() -> Path:
        """Get the default settings file path."""
        if os.name == 'nt':
            # Windows
            app_data = os.environ.get('APPDATA', os.path.expanduser('~'))
            return Path(app_data) / 'LexerStyles' / 'settings.json'
        else:
            # Linux/Mac
            config_home = os.environ.get('XDG_CONFIG_HOME',
                                         os.path.expanduser('~/.config'))
            return Path(config_home) / 'lexerstyles' / 'settings.json'

    @property
    def settings(self) -> ApplicationSettings:
        """Get current settings, loading from disk if needed."""
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    def load(self) -> ApplicationSettings:
        """Load settings from disk. Missing or corrupt files give the defaults."""
        if not self.settings_path.exists():
            return ApplicationSettings()

        try:
            with open(self.settings_path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            return self._from_dict(data)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logging.warning(f"SettingsManager - Could not load {self.settings_path}: {e}")
            return ApplicationSettings()

    def save(self, settings: Optional[ApplicationSettings] = None) -> bool:
        """Save settings to disk."""
        settings = settings or self._settings
        if settings is None:
            return False

        try:
            self.settings_path.parent.mkdir(parents=True, exist_ok=True)

            data = self._to_dict(settings)

            with open(self.settings_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)

            self._settings = settings
            self._notify_observers()
            return True

        except OSError as e:
            logging.error(f"SettingsManager - Failed to save {self.settings_path}: {e}")
            return False

    def reset(self) -> ApplicationSettings:
        """Reset to default settings."""
        self._settings = ApplicationSettings()
        self.save()
        return self._settings

    def add_observer(self, callback: Callable[[ApplicationSettings], None]) -> None:
        """Add a callback to be notified of settings changes."""
        self._observers.append(callback)

    def remove_observer(self, callback: Callable[[ApplicationSettings], None]) -> None:
        """Remove a settings change observer."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify_observers(self) -> None:
        """Notify all observers of settings change."""
        for callback in self._observers:
            try:
                callback(self._settings)
            except Exception as e:
                logging.warning(f"SettingsManager - Observer failed: {e}")

    def colors_directory(self) -> Path:
        """Get the directory holding per-language color files."""
        configured = self.settings.colors_directory
        if configured:
            return Path(configured)
        return self.settings_path.parent / 'colors'

    def colors_file(self, language: Language) -> Path:
        """Get the color file path of a language, e.g. <dir>/CS.xml."""
        return self.colors_directory() / f"{language.name}.xml"

    def remember_language(self, language: Language) -> None:
        """Record the most recently applied language."""
        self.settings.last_language = language.name
        self.save()

    def _to_dict(self, settings: ApplicationSettings) -> dict:
        """Convert settings to dictionary for JSON serialization."""
        return asdict(settings)

    def _from_dict(self, data: dict) -> ApplicationSettings:
        """Convert dictionary back to settings objects."""
        font_data = data.get('font', {})
        font = FontSettings(
            font_family=font_data.get('font_family', FontSettings.font_family),
            font_size=int(font_data.get('font_size', FontSettings.font_size)),
        )

        folding_data = data.get('folding', {})
        folding = FoldingSettings(
            margin=int(folding_data.get('margin', FoldingSettings.margin)),
            width=int(folding_data.get('width', FoldingSettings.width)),
            marker_fore=folding_data.get('marker_fore', FoldingSettings.marker_fore),
            marker_back=folding_data.get('marker_back', FoldingSettings.marker_back),
        )

        detection = DetectionSettings(
            sniff_xml_contents=bool(data.get('detection', {}).get(
                'sniff_xml_contents', DetectionSettings.sniff_xml_contents)),
        )

        return ApplicationSettings(
            font=font,
            folding=folding,
            detection=detection,
            colors_directory=data.get('colors_directory', ''),
            last_language=data.get('last_language', ''),
        )
