"""Pluggy hook specifications for notekit.

One setup-time hook lets plugins contribute field types to a collection's
type catalog.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from notekit.domain.fieldtypes import FieldType

hookspec = pluggy.HookspecMarker("notekit")
hookimpl = pluggy.HookimplMarker("notekit")


class NotekitHookSpec:
    """Hook specifications for the notekit plugin system."""

    @hookspec
    def register_field_types(self) -> list[FieldType] | None:
        """Return field types to add to every type catalog.

        Types are inserted ahead of the generic string type. A type whose
        ``type_string`` matches a built-in replaces it.
        """
