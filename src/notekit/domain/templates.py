"""Schema inference from a template note.

A template note's values may declare the type of their field, optionally
with configuration::

    Date:     <date>
    Status:   <status: 1 - Idea; 4 - In Work; 9 - Closed>
    Category: <pick-from: Fiction, Non-Fiction>

Two shorthands are also accepted: a bare ``pick-from: ...`` value, and a
bare option table on a field labelled ``Status`` or ``Level``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from notekit.domain.labels import KLASS, LEVEL, STATUS
from notekit.domain.picklists import ComboList, KlassPickList, PickList
from notekit.domain.text import to_common

if TYPE_CHECKING:
    from notekit.domain.collection import NoteCollection
    from notekit.domain.definitions import FieldDefinition

logger = logging.getLogger(__name__)

# Types whose configuration is applied through the catalog's option tables.
_CONFIGURED_TYPES = frozenset({"status", "rank", "level"})


def parse_type_declaration(text: str, common_label: str = "") -> tuple[str, str] | None:
    """Split a template value into ``(type, config)``.

    Returns None when *text* declares nothing.

    Examples:
        >>> parse_type_declaration("<status: 1 - Idea; 9 - Done>")
        ('status', '1 - Idea; 9 - Done')
        >>> parse_type_declaration("<date>")
        ('date', '')
        >>> parse_type_declaration("just a value") is None
        True
    """
    type_chars: list[str] = []
    config_chars: list[str] = []
    left_angle = False
    colon = False
    for c in text.strip():
        if c == "<" and not left_angle and not type_chars:
            left_angle = True
        elif c == ">" and left_angle:
            break
        elif c == ":" and not colon:
            colon = True
        elif colon:
            config_chars.append(c)
        else:
            type_chars.append(c)

    type_text = "".join(type_chars).strip()
    config = "".join(config_chars).strip()

    if not left_angle and common_label in (STATUS, LEVEL) and type_text and not config:
        return common_label, type_text
    type_common = to_common(type_text)
    if not left_angle and type_common == "pickfrom" and config:
        left_angle = True
    if not left_angle or not type_common:
        return None
    return type_common, config


def _apply_declaration(
    collection: NoteCollection,
    definition: FieldDefinition,
    type_common: str,
    config: str,
) -> None:
    catalog = collection.catalog
    original_type = definition.type_string
    label = definition.label

    if type_common == "pickfrom" and definition.common_form in (KLASS, "klass"):
        type_common = "klass"
    if type_common == "pickfrom":
        pick_list = PickList(config)
        if len(pick_list) > 0:
            definition.set_type(catalog.assign_type(label, type_common))
            definition.pick_list = pick_list
    elif type_common == "klass":
        definition.set_type(catalog.assign_type(label, type_common))
        pick_list = KlassPickList(config)
        pick_list.set_defaults()
        definition.pick_list = pick_list
    elif type_common == "combo":
        definition.set_type(catalog.assign_type(label, type_common))
        definition.combo_list = ComboList()
    elif type_common == "lookup":
        definition.set_type(catalog.assign_type(label, type_common))
        definition.lookup_from = config
    else:
        definition.set_type(catalog.assign_type(label, type_common))

    if definition.is_body and original_type != "body":
        collection.dictionary.body_retyped(definition)
    if config and definition.type_string in _CONFIGURED_TYPES:
        definition.apply_type_config(config, catalog)
    logger.debug("Template declares %s as <%s>", label.proper_form, definition.type_string)


def apply_template(collection: NoteCollection, values: Mapping[str, str]) -> None:
    """Define one field per template entry, typed by any declaration it holds.

    Roles are recomputed afterwards, in dictionary order, so the first
    field of each type claims the role whatever order the entries came in.
    """
    for label, text in values.items():
        definition = collection.resolve_field(label)
        if definition is None:
            logger.warning("Template field %r rejected", label)
            continue
        declaration = parse_type_declaration(text, definition.common_form)
        if declaration is not None:
            _apply_declaration(collection, definition, *declaration)
    collection.dictionary.check_title()
    collection.refresh_roles()
