"""FieldDefinition: a label bound to a field type, with optional value lists."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from notekit.domain.fieldtypes import FieldType
from notekit.domain.labels import FieldLabel
from notekit.domain.picklists import ComboList, KlassPickList, PickList
from notekit.domain.values import MultiValues, StringValue

if TYPE_CHECKING:
    from notekit.domain.catalog import TypeCatalog

logger = logging.getLogger(__name__)

# Types whose values are never copied from a class template.
_NO_KLASS_TEMPLATE = frozenset({"title", "klass", "dateadded", "datemodified", "timestamp"})


@dataclass(eq=False)
class FieldDefinition:
    """A field of a collection's schema.

    Equality and ordering compare the label's common form only.
    """

    label: FieldLabel
    field_type: FieldType
    pick_list: PickList | None = None
    combo_list: ComboList | None = None
    default_value: str = ""
    lookup_from: str = ""
    parent_field: bool = field(default=False, repr=False)

    @classmethod
    def create(
        cls,
        label: FieldLabel | str,
        catalog: TypeCatalog,
        type_hint: str | None = None,
    ) -> FieldDefinition:
        """Build a definition whose type the catalog assigns from *label* and *type_hint*."""
        if isinstance(label, str):
            label = FieldLabel(label)
        field_type = catalog.assign_type(label, type_hint)
        return cls(
            label=label,
            field_type=field_type,
            pick_list=field_type.gen_pick_list(),
            combo_list=field_type.gen_combo_list(),
        )

    @property
    def common_form(self) -> str:
        return self.label.common_form

    @property
    def type_string(self) -> str:
        return self.field_type.type_string

    @property
    def is_body(self) -> bool:
        return self.field_type.type_string == "body"

    @property
    def is_title(self) -> bool:
        return self.field_type.type_string == "title"

    @property
    def should_init_from_klass_template(self) -> bool:
        return self.field_type.user_editable and self.type_string not in _NO_KLASS_TEMPLATE

    def parse(self, text: str, catalog: TypeCatalog) -> StringValue:
        """Turn raw text into a value of this field's type.

        Values seen for pick-list fields are added to the list so later
        entries can be matched against them.
        """
        ctx = catalog.context(pick_list=self.pick_list, combo_list=self.combo_list)
        value = self.field_type.create_value(text, ctx)
        if self.pick_list is not None and value.has_data:
            if isinstance(value, MultiValues):
                for index in range(value.multi_count):
                    item = value.multi_at(index)
                    if item:
                        self.pick_list.register_value(item)
            else:
                self.pick_list.register_value(value.value)
        return value

    def set_type(self, field_type: FieldType) -> None:
        """Switch to *field_type*, regenerating its pick and combo lists."""
        self.field_type = field_type
        self.pick_list = field_type.gen_pick_list()
        self.combo_list = field_type.gen_combo_list()

    def apply_type_config(self, config: str, catalog: TypeCatalog) -> None:
        """Apply a type's configuration string (option tables, pick lists, lookups)."""
        if not config:
            return
        type_string = self.type_string
        if type_string == "status":
            catalog.status_config.set(config)
        elif type_string == "rank":
            catalog.rank_config.set(config)
        elif type_string == "level":
            catalog.level_config.set(config)
        elif type_string == "lookup":
            self.lookup_from = config.strip()
        elif type_string == "pickfrom":
            self.pick_list = PickList(config)
        elif type_string == "klass":
            pick_list = KlassPickList(config)
            pick_list.set_defaults()
            self.pick_list = pick_list
        elif type_string == "combo":
            self.combo_list = ComboList()
        else:
            logger.debug("No configuration for %s fields; ignored %r", type_string, config)
            return
        logger.debug("Applied %s configuration to %s", type_string, self.label.proper_form)

    def extract_type_config(self, catalog: TypeCatalog) -> str:
        """Inverse of :meth:`apply_type_config`."""
        type_string = self.type_string
        if type_string == "status":
            return catalog.status_config.options_string
        if type_string == "rank":
            return catalog.rank_config.options_string
        if type_string == "level":
            return catalog.level_config.options_string
        if type_string == "lookup":
            return self.lookup_from
        if type_string in ("pickfrom", "klass") and self.pick_list is not None:
            return ", ".join(self.pick_list.values)
        return ""

    def copy(self) -> FieldDefinition:
        return FieldDefinition(
            label=self.label.copy(),
            field_type=self.field_type,
            pick_list=self.pick_list,
            combo_list=self.combo_list,
            default_value=self.default_value,
            lookup_from=self.lookup_from,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldDefinition):
            return NotImplemented
        return self.common_form == other.common_form

    def __lt__(self, other: FieldDefinition) -> bool:
        return self.common_form < other.common_form

    def __hash__(self) -> int:
        return hash(self.common_form)

    def __str__(self) -> str:
        return f"{self.label.proper_form} <{self.type_string}>"
