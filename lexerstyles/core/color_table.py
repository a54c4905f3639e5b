"""
Per-language color registry.

Provides:
- Fixed-cardinality color tables generated from the language schemas
- Lookup by slot index, by semantic name and by external name + role
- Single-slot updates and atomic same-size bulk replacement
- Change observers

The table is a plain object: build as many as needed.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Iterable, Mapping, Optional

from lexerstyles.core.errors import CardinalityMismatchError, NotFoundError
from lexerstyles.core.models import (
    ColorInput,
    ColorKey,
    ColorRole,
    ColorSlot,
    Language,
    LanguageSchema,
    Rgba,
)
from lexerstyles.core.schemas import DEFAULT_SCHEMAS


def _role(foreground: bool) -> ColorRole:
    return ColorRole.FOREGROUND if foreground else ColorRole.BACKGROUND


class ColorIndex:
    """
    Both lookup structures of one language, built from its schema.

    Semantic names map 1:1 to slot indices. External name + role may map
    to several slots; the list keeps table order so the first item is the
    first match.
    """

    def __init__(self, schema: LanguageSchema):
        self.language = schema.language
        self._names: list[str] = []
        self._semantic: dict[str, int] = {}
        self._external: dict[tuple[str, ColorRole], list[int]] = {}

        for index, slot in enumerate(schema.default_slots()):
            self._names.append(slot.semantic_name)
            self._semantic[slot.semantic_name] = index
            key = (slot.external_name.upper(), slot.role)
            self._external.setdefault(key, []).append(index)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, semantic_name: object) -> bool:
        return semantic_name in self._semantic

    @property
    def semantic_names(self) -> list[str]:
        return list(self._names)

    def semantic_name(self, index: int) -> str:
        if not 0 <= index < len(self._names):
            raise NotFoundError(f"{self.language.name} has no color slot {index}")
        return self._names[index]

    def index_of(self, semantic_name: str) -> int:
        try:
            return self._semantic[semantic_name]
        except KeyError:
            raise NotFoundError(
                f"{self.language.name} has no color named {semantic_name}"
            ) from None

    def all_external(self, external_name: str, role: ColorRole) -> list[int]:
        return list(self._external.get((external_name.upper(), role), ()))

    def first_external(self, external_name: str, role: ColorRole) -> int:
        matches = self._external.get((external_name.upper(), role))
        if not matches:
            raise NotFoundError(
                f"{self.language.name} has no {role.name.lower()} color "
                f"for {external_name}"
            )
        return matches[0]


class ColorTable:
    """Mutable color registry covering every language with a schema."""

    def __init__(self, schemas: Optional[Mapping[Language, LanguageSchema]] = None):
        self._schemas: dict[Language, LanguageSchema] = dict(
            DEFAULT_SCHEMAS if schemas is None else schemas
        )
        self._indices: dict[Language, ColorIndex] = {
            language: ColorIndex(schema) for language, schema in self._schemas.items()
        }
        self._slots: dict[Language, tuple[ColorSlot, ...]] = {}
        self._observers: list[Callable[[Language], None]] = []
        self.reset()

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def reset(self, language: Optional[Language] = None) -> None:
        """Restore default colors for one language, or for all of them."""
        targets = [language] if language is not None else list(self._schemas)
        for target in targets:
            schema = self._schemas.get(target)
            if schema is None:
                continue
            self._slots[target] = tuple(schema.default_slots())
            if language is not None:
                self._notify_observers(target)

    def copy(self) -> 'ColorTable':
        """Create an independent table holding the same colors."""
        clone = ColorTable(self._schemas)
        clone._slots = dict(self._slots)
        return clone

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def languages(self) -> list[Language]:
        return list(self._schemas)

    def schema(self, language: Language) -> Optional[LanguageSchema]:
        return self._schemas.get(language)

    def index(self, language: Language) -> ColorIndex:
        try:
            return self._indices[language]
        except KeyError:
            raise NotFoundError(f"No color table for {language.name}") from None

    def slot_count(self, language: Language) -> int:
        return len(self._slots.get(language, ()))

    def slots(self, language: Language) -> tuple[ColorSlot, ...]:
        return self._slots.get(language, ())

    def semantic_names(self, language: Language) -> list[str]:
        if language not in self._indices:
            return []
        return self._indices[language].semantic_names

    def slot(self, language: Language, index: int) -> ColorSlot:
        """Get a slot by position."""
        slots = self._slots.get(language, ())
        if not 0 <= index < len(slots):
            raise NotFoundError(f"{language.name} has no color slot {index}")
        return slots[index]

    def color(self, language: Language, semantic_name: str) -> Rgba:
        """Get a color by its semantic name, e.g. 'CommentFore'."""
        index = self.index(language).index_of(semantic_name)
        return self._slots[language][index].color

    def external_color(
        self,
        language: Language,
        external_name: str,
        foreground: bool = True
    ) -> Rgba:
        """Get the first color carrying an external name and role."""
        index = self.index(language).first_external(external_name, _role(foreground))
        return self._slots[language][index].color

    def external_slots(
        self,
        language: Language,
        external_name: str,
        foreground: bool = True
    ) -> list[ColorSlot]:
        """Get every slot carrying an external name and role, in table order."""
        if language not in self._indices:
            return []
        indices = self._indices[language].all_external(external_name, _role(foreground))
        return [self._slots[language][i] for i in indices]

    def __getitem__(self, key: tuple[Language, ColorKey]) -> Rgba:
        language, name = key
        if isinstance(name, int):
            return self.slot(language, name).color
        return self.color(language, name)

    def __setitem__(self, key: tuple[Language, ColorKey], color: Rgba) -> None:
        language, name = key
        self.set_color(language, name, color)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def _resolve_index(self, language: Language, key: ColorKey) -> int:
        if isinstance(key, int):
            self.slot(language, key)
            return key
        return self.index(language).index_of(key)

    def set_color(self, language: Language, key: ColorKey, color: Rgba) -> None:
        """Change the color of one slot, addressed by index or semantic name."""
        index = self._resolve_index(language, key)
        slots = list(self._slots[language])
        slots[index] = replace(slots[index], color=color)
        self._slots[language] = tuple(slots)
        self._notify_observers(language)

    def set_colors(self, language: Language, colors: Mapping[ColorKey, Rgba]) -> int:
        """
        Apply several single-slot updates in order.

        Not atomic: an unknown key raises after the earlier keys were
        applied. Returns the number of slots written.
        """
        written = 0
        try:
            for key, color in colors.items():
                index = self._resolve_index(language, key)
                slots = list(self._slots[language])
                slots[index] = replace(slots[index], color=color)
                self._slots[language] = tuple(slots)
                written += 1
        finally:
            if written:
                self._notify_observers(language)
        return written

    def set_external(
        self,
        language: Language,
        external_name: str,
        color: Rgba,
        foreground: bool = True,
        first_only: bool = False
    ) -> int:
        """
        Change the color of every slot carrying an external name and role.

        Returns the number of slots changed (0 when nothing matches).
        """
        if language not in self._indices:
            return 0
        indices = self._indices[language].all_external(external_name, _role(foreground))
        if first_only:
            indices = indices[:1]
        if not indices:
            return 0

        slots = list(self._slots[language])
        for index in indices:
            slots[index] = replace(slots[index], color=color)
        self._slots[language] = tuple(slots)
        self._notify_observers(language)
        return len(indices)

    def replace_all(self, language: Language, colors: Iterable[ColorInput]) -> None:
        """
        Replace every color of a language in one step.

        Names and roles are kept; only colors are taken from the input.

        Raises:
            CardinalityMismatchError: if the count differs from the table's
        """
        current = self._slots.get(language)
        if current is None:
            raise NotFoundError(f"No color table for {language.name}")

        new_colors = [item.color if isinstance(item, ColorSlot) else item for item in colors]
        if len(new_colors) != len(current):
            raise CardinalityMismatchError(language.name, len(current), len(new_colors))

        self._slots[language] = tuple(
            replace(slot, color=color) for slot, color in zip(current, new_colors)
        )
        self._notify_observers(language)

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    def add_observer(self, callback: Callable[[Language], None]) -> None:
        """Add a callback to be notified when a language's colors change."""
        self._observers.append(callback)

    def remove_observer(self, callback: Callable[[Language], None]) -> None:
        """Remove a color change observer."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify_observers(self, language: Language) -> None:
        for callback in self._observers:
            try:
                callback(language)
            except Exception as e:
                logging.warning(f"ColorTable - Observer failed for {language.name}: {e}")
