"""TypeCatalog: ordered field types plus the value configurations they share."""

from __future__ import annotations

import logging
from dataclasses import replace

from notekit.domain.fieldtypes import BUILTIN_TYPES, STRING_TYPE, FieldType, ValueContext
from notekit.domain.labels import FieldLabel
from notekit.domain.picklists import ComboList, PickList
from notekit.domain.text import to_common
from notekit.domain.values import IntWithLabelConfig, RankValueConfig, StatusValueConfig

logger = logging.getLogger(__name__)


class TypeCatalog:
    """The field types available to one collection, in match order.

    Lookup is pure: assigning a type never changes the catalog, and some
    type is always returned (plain string when nothing else applies).
    """

    def __init__(
        self,
        *,
        status_config: StatusValueConfig | None = None,
        rank_config: RankValueConfig | None = None,
        level_config: IntWithLabelConfig | None = None,
    ) -> None:
        self.types: list[FieldType] = list(BUILTIN_TYPES)
        self.string_type = STRING_TYPE
        self.status_config = status_config or StatusValueConfig()
        self.rank_config = rank_config or RankValueConfig()
        self.level_config = level_config or IntWithLabelConfig()

    def assign_type(self, label: FieldLabel | str, type_hint: str | None = None) -> FieldType:
        """Return the first type that applies to *label* and *type_hint*.

        Examples:
            >>> TypeCatalog().assign_type("By").type_string
            'author'
            >>> TypeCatalog().assign_type("Notes", "int").type_string
            'int'
            >>> TypeCatalog().assign_type("Anything", "no-such-type").type_string
            'string'
        """
        if isinstance(label, str):
            label = FieldLabel(label)
        for field_type in self.types:
            if field_type.applies_to(label, type_hint):
                return field_type
        return self.string_type

    def assign_type_for_value(self, text: str) -> FieldType:
        """Guess a type from a sample value: integers become ``int``, all else ``string``."""
        text = text.strip()
        if text:
            try:
                int(text)
            except ValueError:
                pass
            else:
                return self.get("int") or self.string_type
        return self.string_type

    def get(self, type_string: str) -> FieldType | None:
        key = to_common(type_string)
        for field_type in self.types:
            if field_type.type_string == key:
                return field_type
        return None

    def register(self, field_type: FieldType, *, before: str | None = "string") -> None:
        """Add a type, ahead of *before* (the generic string type by default).

        A type whose ``type_string`` is already present replaces it in place.
        """
        for index, existing in enumerate(self.types):
            if existing.type_string == field_type.type_string:
                self.types[index] = field_type
                logger.debug("Replaced field type %s", field_type.type_string)
                return
        position = len(self.types)
        if before is not None:
            for index, existing in enumerate(self.types):
                if existing.type_string == to_common(before):
                    position = index
                    break
        self.types.insert(position, field_type)
        logger.debug("Registered field type %s at %d", field_type.type_string, position)

    def context(
        self,
        *,
        pick_list: PickList | None = None,
        combo_list: ComboList | None = None,
    ) -> ValueContext:
        """Value-building context carrying this catalog's configurations."""
        ctx = ValueContext(
            status_config=self.status_config,
            rank_config=self.rank_config,
            level_config=self.level_config,
        )
        if pick_list is not None or combo_list is not None:
            ctx = replace(ctx, pick_list=pick_list, combo_list=combo_list)
        return ctx

    def __iter__(self):
        return iter(self.types)

    def __len__(self) -> int:
        return len(self.types)
