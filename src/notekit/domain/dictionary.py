"""FieldDictionary: the ordered, lockable schema of a collection.

Definitions are unique by label common form. Title fields are kept first
and body fields last; everything else goes in between, in the order it
was added. Once locked, new labels are refused except the date-added and
date-modified stamps.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from notekit.domain.definitions import FieldDefinition
from notekit.domain.labels import BODY, LOCK_EXEMPT, TITLE, FieldLabel, normalize_label

if TYPE_CHECKING:
    from notekit.domain.catalog import TypeCatalog

logger = logging.getLogger(__name__)


def _key(label: FieldDefinition | FieldLabel | str) -> str:
    if isinstance(label, FieldDefinition):
        return label.common_form
    if isinstance(label, FieldLabel):
        return label.common_form
    return normalize_label(label)


class FieldDictionary:
    """Ordered set of field definitions keyed by common label."""

    def __init__(self) -> None:
        self._by_common: dict[str, FieldDefinition] = {}
        self.definitions: list[FieldDefinition] = []
        self.insert_position_from_end = 0
        self.locked = False

    # -- state -------------------------------------------------------------

    def lock(self) -> None:
        self.locked = True

    def unlock(self) -> None:
        self.locked = False

    @property
    def is_locked(self) -> bool:
        return self.locked

    # -- lookup ------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.definitions)

    def __iter__(self) -> Iterator[FieldDefinition]:
        return iter(self.definitions)

    def __contains__(self, label: object) -> bool:
        if isinstance(label, (FieldDefinition, FieldLabel, str)):
            return _key(label) in self._by_common
        return False

    def contains(self, label: FieldDefinition | FieldLabel | str) -> bool:
        return _key(label) in self._by_common

    def get_def(self, label: FieldDefinition | FieldLabel | str | int) -> FieldDefinition | None:
        """Look a definition up by label, definition or list position."""
        if isinstance(label, int):
            if 0 <= label < len(self.definitions):
                return self.definitions[label]
            return None
        return self._by_common.get(_key(label))

    # -- mutation ----------------------------------------------------------

    def add_def(self, definition: FieldDefinition, family: str | None = None) -> FieldDefinition | None:
        """Add *definition*, or return the existing one with the same common label.

        Returns None when the dictionary is locked and the label is new,
        unless the label is one of the auto-stamped date fields.
        """
        common = definition.common_form
        existing = self._by_common.get(common)
        if existing is not None:
            return existing
        if self.locked:
            if common not in LOCK_EXEMPT:
                logger.debug("Dictionary locked; refused new field %r", definition.label.proper_form)
                return None
            self.unlock()
            try:
                return self._insert(definition, family)
            finally:
                self.lock()
        return self._insert(definition, family)

    def add_label(
        self,
        label: FieldLabel | str,
        catalog: TypeCatalog,
        type_hint: str | None = None,
    ) -> FieldDefinition | None:
        """Create a definition for *label* via the catalog and add it."""
        return self.add_def(FieldDefinition.create(label, catalog, type_hint))

    def _insert(self, definition: FieldDefinition, family: str | None) -> FieldDefinition:
        common = definition.common_form
        self._by_common[common] = definition
        if common == TITLE or definition.is_title:
            self.definitions.insert(0, definition)
        elif common == BODY or definition.is_body:
            self.definitions.append(definition)
            self.insert_position_from_end += 1
        elif family:
            index = len(self.definitions) - 1
            while index > 1 and not self.definitions[index].common_form.startswith(family):
                index -= 1
            self.definitions.insert(index + 1, definition)
        elif self.insert_position_from_end <= 0:
            self.definitions.append(definition)
        else:
            self.definitions.insert(len(self.definitions) - self.insert_position_from_end, definition)
        return definition

    def remove_def(self, label: FieldDefinition | FieldLabel | str) -> bool:
        common = _key(label)
        removed = self._by_common.pop(common, None)
        if removed is None:
            return False
        self.definitions = [d for d in self.definitions if d.common_form != common]
        if removed.is_body and self.insert_position_from_end > 0:
            self.insert_position_from_end -= 1
        return True

    def check_title(self) -> None:
        """Move a title-typed definition to the front if it is not already there."""
        for index, definition in enumerate(self.definitions):
            if index > 0 and definition.is_title:
                self.definitions.insert(0, self.definitions.pop(index))
                return

    def body_retyped(self, definition: FieldDefinition) -> None:
        """Move a definition that has just become a body field to the end."""
        if definition.common_form not in self._by_common:
            return
        self.definitions = [d for d in self.definitions if d.common_form != definition.common_form]
        self.definitions.append(definition)
        self.insert_position_from_end += 1
