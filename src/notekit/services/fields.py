"""FieldService: label resolution and value parsing for outer callers."""

from __future__ import annotations

from typing import Any

from notekit.domain.labels import FieldLabel
from notekit.domain.values import MultiValues, StringValue
from notekit.services.base import INVALID_LABEL, LABEL_REJECTED, BaseService
from notekit.services.result import ServiceResult


def describe_value(value: StringValue) -> dict[str, Any]:
    """Serializable view of a parsed value."""
    data: dict[str, Any] = {
        "value": value.value_to_write(),
        "display": value.value_to_display(),
        "sort_key": value.sort_key,
        "value_type": type(value).__name__,
    }
    if isinstance(value, MultiValues) and value.multi_count > 1:
        data["items"] = [value.multi_at(i) for i in range(value.multi_count)]
    return data


class FieldService(BaseService):
    """Resolve labels against the collection and parse text into values."""

    def parse_field(self, label: str, text: str, *, type_hint: str | None = None) -> ServiceResult:
        """Resolve *label* (optionally forcing *type_hint*) and parse *text*."""
        op = "parse_field"
        field_label = FieldLabel(label)
        if not field_label.valid_label:
            return self._failure(
                op,
                INVALID_LABEL,
                f"Not a usable field label: {label!r}",
                {"label": label, "common_form": field_label.common_form},
            )

        definition = self._collection.resolve_field(field_label, type_hint)
        if definition is None:
            return self._failure(
                op,
                LABEL_REJECTED,
                f"Collection is locked; unknown field {field_label.proper_form!r} refused",
                {"label": label},
            )

        warnings: list[str] = []
        if type_hint and self._collection.catalog.get(type_hint) is None:
            warnings.append(f"Unknown type {type_hint!r}; using {definition.type_string}")

        value = definition.parse(text, self._collection.catalog)
        data: dict[str, Any] = {
            "label": definition.label.proper_form,
            "common_form": definition.common_form,
            "type": definition.type_string,
            **describe_value(value),
        }
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def list_fields(self) -> ServiceResult:
        """The collection's field definitions, in dictionary order."""
        items = [
            {
                "label": definition.label.proper_form,
                "common_form": definition.common_form,
                "type": definition.type_string,
                "config": definition.extract_type_config(self._collection.catalog),
            }
            for definition in self._collection.dictionary
        ]
        return ServiceResult(
            ok=True,
            op="list_fields",
            data={"items": items, "count": len(items), "locked": self._collection.locked},
        )

    def list_types(self) -> ServiceResult:
        """The catalog's field types, in match order."""
        items = [
            {
                "type": field_type.type_string,
                "label": field_type.proper_label,
                "aliases": sorted(field_type.aliases),
                "hints": sorted(field_type.hint_aliases),
            }
            for field_type in self._collection.catalog
        ]
        return ServiceResult(ok=True, op="list_types", data={"items": items, "count": len(items)})
